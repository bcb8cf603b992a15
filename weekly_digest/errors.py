"""Exception types raised by the digest pipeline."""


class DigestError(Exception):
    """Base class for all weekly digest errors."""


class ConfigurationError(DigestError):
    """A required configuration value is missing or malformed."""


class TransportError(DigestError):
    """A GitHub API call failed or returned a non-success status."""


class ItemMappingError(DigestError):
    """An item returned by the GitHub API did not match the expected shape."""
