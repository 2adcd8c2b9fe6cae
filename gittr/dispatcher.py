"""Top-level command dispatcher for gittr."""

import logging
from typing import Optional

from gittr import __version__
from gittr.catalog import EmojiCatalog, EmojiRecord
from gittr.config import ConfigStore, apply_default_preferences
from gittr.constants import APP_NAME
from gittr.prompts import (
    CommitPrompter,
    ConfigPrompter,
    ListPrompter,
    PrompterArgs,
    SearchPrompter,
)

logger = logging.getLogger(__name__)


class Gittr:
    """Owns the preference store and emoji catalog for the process lifetime.

    Missing preferences are filled with defaults once, on construction.
    Each command builds the matching prompter and runs one round-trip.
    """

    def __init__(
        self,
        config: Optional[ConfigStore] = None,
        catalog: Optional[EmojiCatalog] = None,
    ):
        self.config = config or ConfigStore()
        apply_default_preferences(self.config)
        self.catalog = catalog or EmojiCatalog()
        self.prompter_args = PrompterArgs(config=self.config, catalog=self.catalog)

    def commit(self) -> None:
        logger.debug("commit called")
        CommitPrompter(self.prompter_args).run()

    def reconfig(self) -> None:
        logger.debug("reconfig called")
        ConfigPrompter(self.prompter_args).run()

    def list(self) -> None:
        """List every emoji in the catalog."""
        logger.debug("list called")
        ListPrompter(self.prompter_args).run()

    def search(self) -> None:
        logger.debug("search called")
        SearchPrompter(self.prompter_args).run()

    def update(self) -> tuple[EmojiRecord, ...]:
        """Refresh the catalog from its remote source.

        Raises:
            FetchError: If the source is unreachable; the old catalog is kept.
        """
        logger.debug("update called")
        return self.catalog.get(force_refresh=True)

    def version(self) -> str:
        logger.debug("version called")
        return f"{APP_NAME} - {__version__}"
