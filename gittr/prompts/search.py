"""Prompter for searching the emoji catalog."""

import typer

from gittr.prompts.answers import SearchAnswer
from gittr.prompts.base import Prompter
from gittr.prompts.selector import SEARCH_PROMPT, render_emoji, select_emoji


class SearchPrompter(Prompter):
    """Live-filters the catalog and prints the chosen emoji rendering."""

    def ask(self) -> SearchAnswer:
        record = select_emoji(self.catalog.get(), SEARCH_PROMPT)
        return SearchAnswer(value=render_emoji(record, self.config.get_emoji_format()))

    def apply(self, answers: SearchAnswer) -> None:
        typer.echo(f"Emoji: {answers.value}")
