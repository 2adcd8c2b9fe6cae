"""Base class and shared types for gittr prompters.

A prompter runs one interactive round-trip: ask() collects every answer
into a typed record, then apply() acts on it. Nothing is applied when the
user cancels while answers are still being collected.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

import typer

from gittr.catalog import EmojiCatalog
from gittr.config import ConfigStore


class PromptCancelled(Exception):
    """Raised when the user aborts a prompt or gives an unusable answer."""

    pass


@dataclass
class PrompterArgs:
    """Collaborators injected into every prompter."""

    config: ConfigStore
    catalog: EmojiCatalog


class Prompter(ABC):
    """Interface for interactive prompters."""

    def __init__(self, args: PrompterArgs):
        self.config = args.config
        self.catalog = args.catalog

    @abstractmethod
    def ask(self) -> Any:
        """Present the questions and return the buffered answers."""
        pass

    @abstractmethod
    def apply(self, answers: Any) -> None:
        """Act on the collected answers."""
        pass

    def run(self) -> Any:
        """Ask, then apply. Returns the answers.

        Raises:
            PromptCancelled: If the user aborted before all answers were
                collected. Nothing has been applied in that case.
        """
        try:
            answers = self.ask()
        except (typer.Abort, KeyboardInterrupt, EOFError):
            raise PromptCancelled("Prompt cancelled by user.")
        self.apply(answers)
        return answers
