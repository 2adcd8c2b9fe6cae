"""Emoji catalog provider.

Serves the ordered emoji list from memory, the local cache file or the
bundled snapshot, and refreshes it from the remote gitmoji source on demand.
"""

import json
import logging
import os
from pathlib import Path
from typing import Any, Optional

import httpx
from pydantic import ValidationError

from gittr.catalog.bundled import BUNDLED_EMOJIS
from gittr.catalog.exceptions import FetchError
from gittr.catalog.models import EmojiRecord
from gittr.config import get_config_dir

logger = logging.getLogger(__name__)

DEFAULT_SOURCE_URL = (
    "https://raw.githubusercontent.com/carloscuesta/gitmoji/master/"
    "packages/gitmojis/src/gitmojis.json"
)
SOURCE_URL_ENV_VAR = "GITTR_EMOJI_SOURCE"

_FETCH_TIMEOUT = 10.0


def get_cache_file_path() -> Path:
    """Get path to the cached catalog.

    Returns:
        Path to ~/.gittr/emojis.json
    """
    return get_config_dir() / "emojis.json"


def parse_catalog(payload: Any) -> tuple[EmojiRecord, ...]:
    """Build emoji records from a decoded gitmoji payload.

    Accepts either {"gitmojis": [...]} or a bare list of records.

    Raises:
        ValueError: If the payload does not have a recognized shape or a
            record is missing required fields.
    """
    if isinstance(payload, dict):
        payload = payload.get("gitmojis")
    if not isinstance(payload, list):
        raise ValueError("Catalog payload must be a list of emojis")

    try:
        return tuple(EmojiRecord.model_validate(item) for item in payload)
    except ValidationError as e:
        raise ValueError(f"Invalid emoji record: {e}")


class EmojiCatalog:
    """Provides the emoji catalog, cached in memory for the process lifetime."""

    def __init__(
        self,
        source_url: Optional[str] = None,
        cache_path: Optional[Path] = None,
    ):
        self.source_url = source_url or os.environ.get(SOURCE_URL_ENV_VAR, DEFAULT_SOURCE_URL)
        self.cache_path = cache_path or get_cache_file_path()
        self._emojis: Optional[tuple[EmojiRecord, ...]] = None

    def get(self, force_refresh: bool = False) -> tuple[EmojiRecord, ...]:
        """Return the ordered emoji catalog.

        Args:
            force_refresh: Fetch from the remote source instead of using
                the cached catalog.

        Returns:
            Tuple of EmojiRecord in catalog order.

        Raises:
            FetchError: If force_refresh is set and the fetch fails. The
                previously held catalog is kept.
        """
        if force_refresh:
            emojis = self._fetch()
            self._emojis = emojis
            self._write_cache(emojis)
            return emojis

        if self._emojis is None:
            self._emojis = self._load_local()
        return self._emojis

    def _fetch(self) -> tuple[EmojiRecord, ...]:
        logger.debug("Fetching emoji catalog from %s", self.source_url)
        try:
            response = httpx.get(self.source_url, timeout=_FETCH_TIMEOUT, follow_redirects=True)
            response.raise_for_status()
            return parse_catalog(response.json())
        except httpx.HTTPError as e:
            raise FetchError(f"Could not fetch emojis from {self.source_url}: {e}")
        except ValueError as e:
            # json.JSONDecodeError is a ValueError as well
            raise FetchError(f"Invalid emoji catalog from {self.source_url}: {e}")

    def _load_local(self) -> tuple[EmojiRecord, ...]:
        if self.cache_path.exists():
            try:
                with open(self.cache_path, "r", encoding="utf-8") as f:
                    emojis = parse_catalog(json.load(f))
                logger.debug("Loaded %d emojis from %s", len(emojis), self.cache_path)
                return emojis
            except (OSError, ValueError) as e:
                logger.warning("Ignoring unreadable emoji cache %s: %s", self.cache_path, e)

        logger.debug("Using bundled emoji catalog")
        return parse_catalog(BUNDLED_EMOJIS)

    def _write_cache(self, emojis: tuple[EmojiRecord, ...]) -> None:
        try:
            self.cache_path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.cache_path, "w", encoding="utf-8") as f:
                json.dump(
                    {"gitmojis": [record.model_dump() for record in emojis]},
                    f,
                    ensure_ascii=False,
                    indent=2,
                )
        except OSError as e:
            logger.warning("Could not write emoji cache %s: %s", self.cache_path, e)
