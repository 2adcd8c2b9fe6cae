"""Prompter that lists the whole emoji catalog."""

import typer

from gittr.prompts.answers import ListAnswer
from gittr.prompts.base import Prompter
from gittr.prompts.selector import plain_label, render_emoji


class ListPrompter(Prompter):
    """Prints every emoji in catalog order with the rendering gittr would insert."""

    def ask(self) -> ListAnswer:
        return ListAnswer(emojis=self.catalog.get())

    def apply(self, answers: ListAnswer) -> None:
        emoji_format = self.config.get_emoji_format()
        for record in answers.emojis:
            typer.echo(f"  {plain_label(record)}  [{render_emoji(record, emoji_format)}]")
        typer.echo()
        typer.echo(f"{len(answers.emojis)} emoji(s) available.")
