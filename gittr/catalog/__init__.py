"""Emoji catalog for gittr.

This package provides:
- models: EmojiRecord
- bundled: BUNDLED_EMOJIS, the offline gitmoji snapshot
- provider: EmojiCatalog, parse_catalog, get_cache_file_path
- exceptions: CatalogError, FetchError
"""

from gittr.catalog.exceptions import CatalogError, FetchError
from gittr.catalog.models import EmojiRecord
from gittr.catalog.provider import (
    DEFAULT_SOURCE_URL,
    SOURCE_URL_ENV_VAR,
    EmojiCatalog,
    get_cache_file_path,
    parse_catalog,
)

__all__ = [
    "CatalogError",
    "FetchError",
    "EmojiRecord",
    "EmojiCatalog",
    "DEFAULT_SOURCE_URL",
    "SOURCE_URL_ENV_VAR",
    "get_cache_file_path",
    "parse_catalog",
]
