"""Prompter that composes a commit message and hands it to git."""

from typing import Optional

import typer

from gittr.config import normalize_preferences
from gittr.constants import UDACITY_COMMIT_TYPES, UDACITY_TYPE_DESCRIPTIONS
from gittr.git import commit as git_commit
from gittr.git import get_repo_root, stage_all
from gittr.messages import compose_commit_message
from gittr.prompts.answers import CommitAnswers
from gittr.prompts.base import Prompter, PromptCancelled
from gittr.prompts.selector import render_emoji, select_emoji


def ask_commit_type() -> str:
    """Ask for a Udacity commit type from a numbered list."""
    typer.echo("Select the type of change you're committing:")
    for i, commit_type in enumerate(UDACITY_COMMIT_TYPES, 1):
        typer.echo(f"  {i}. {commit_type:<9}{UDACITY_TYPE_DESCRIPTIONS[commit_type]}")

    choice = typer.prompt(
        f"Select a type (1-{len(UDACITY_COMMIT_TYPES)})",
        type=int,
        default=1,
    )
    if choice < 1 or choice > len(UDACITY_COMMIT_TYPES):
        raise PromptCancelled("Invalid choice. Commit cancelled.")
    return UDACITY_COMMIT_TYPES[choice - 1]


class CommitPrompter(Prompter):
    """Builds "<emoji> <subject>" (or the Udacity variant) and commits it.

    Staging all files and signing follow the user's preferences.
    """

    def ask(self) -> CommitAnswers:
        # Fail before asking anything when run outside a repository
        get_repo_root()

        prefs = normalize_preferences(self.config.snapshot())

        commit_type: Optional[str] = None
        if prefs.udacity_style_commit:
            commit_type = ask_commit_type()

        record = select_emoji(self.catalog.get(), "Choose an emoji:")
        emoji = render_emoji(record, prefs.emoji_format)

        subject = typer.prompt("Commit message")
        try:
            message = compose_commit_message(
                emoji,
                subject,
                udacity_style=prefs.udacity_style_commit,
                commit_type=commit_type,
            )
        except ValueError as e:
            raise PromptCancelled(str(e))

        typer.echo("")
        typer.echo("=" * 60)
        typer.echo(message)
        typer.echo("=" * 60)
        if not typer.confirm("Commit with this message?", default=True):
            raise PromptCancelled("Commit cancelled.")

        return CommitAnswers(
            commit_type=commit_type,
            emoji=emoji,
            subject=subject,
            message=message,
        )

    def apply(self, answers: CommitAnswers) -> None:
        prefs = normalize_preferences(self.config.snapshot())
        if prefs.add_all_files:
            stage_all()
        output = git_commit(answers.message, sign=prefs.sign_commit)
        typer.echo(output)
