"""Weekly GitHub activity digest for a single repository."""

__version__ = "0.1.0"
