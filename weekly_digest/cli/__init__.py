"""Command line interface for the weekly digest."""
