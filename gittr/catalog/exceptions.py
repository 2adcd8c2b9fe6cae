"""Emoji catalog exception classes.

Contains:
- CatalogError: Base exception for catalog errors
- FetchError: Raised when the remote catalog cannot be fetched or parsed
"""


class CatalogError(Exception):
    """Base exception for emoji catalog errors."""

    pass


class FetchError(CatalogError):
    """Raised when refreshing the catalog from its source fails."""

    pass
