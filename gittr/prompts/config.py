"""Prompter for setting user preferences."""

import typer

from gittr.config import normalize_preferences
from gittr.constants import EMOJI_FORMAT_LABELS, EmojiFormat
from gittr.prompts.answers import ConfigAnswers
from gittr.prompts.base import Prompter, PromptCancelled


class ConfigPrompter(Prompter):
    """Asks for all four preferences, then writes them in one pass.

    The current values are offered as defaults. Answers are buffered until
    every question is answered, so a cancelled prompt changes nothing.
    """

    def ask(self) -> ConfigAnswers:
        current = normalize_preferences(self.config.snapshot())

        add_all_files = typer.confirm(
            "Automatically add all files to your commit?",
            default=current.add_all_files,
        )

        formats = list(EmojiFormat)
        typer.echo("Choose how your emojis should be displayed:")
        for i, emoji_format in enumerate(formats, 1):
            typer.echo(f"  {i}. {EMOJI_FORMAT_LABELS[emoji_format]}")
        format_choice = typer.prompt(
            f"Select a format (1-{len(formats)})",
            type=int,
            default=formats.index(current.emoji_format) + 1,
        )
        if format_choice < 1 or format_choice > len(formats):
            raise PromptCancelled("Invalid choice. Preferences left unchanged.")

        sign_commit = typer.confirm(
            "Sign commits by default?",
            default=current.sign_commit,
        )
        udacity_style_commit = typer.confirm(
            "Use Udacity style commit messages?",
            default=current.udacity_style_commit,
        )

        return ConfigAnswers(
            add_all_files=add_all_files,
            emoji_format=formats[format_choice - 1],
            sign_commit=sign_commit,
            udacity_style_commit=udacity_style_commit,
        )

    def apply(self, answers: ConfigAnswers) -> None:
        self.config.set_add_all(answers.add_all_files)
        self.config.set_emoji_format(answers.emoji_format)
        self.config.set_sign_commit(answers.sign_commit)
        self.config.set_udacity_style_commit(answers.udacity_style_commit)
