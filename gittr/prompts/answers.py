"""Typed answer records, one per prompter."""

from typing import Optional

from pydantic import BaseModel

from gittr.catalog import EmojiRecord
from gittr.constants import EmojiFormat


class ConfigAnswers(BaseModel):
    """Answers collected by the configuration prompter."""

    add_all_files: bool
    emoji_format: EmojiFormat
    sign_commit: bool
    udacity_style_commit: bool


class SearchAnswer(BaseModel):
    """The emoji rendering picked in the search prompter."""

    value: str


class ListAnswer(BaseModel):
    """The catalog shown by the list prompter."""

    emojis: tuple[EmojiRecord, ...]


class CommitAnswers(BaseModel):
    """Answers collected by the commit prompter.

    Attributes:
        commit_type: Udacity commit type, None for plain messages.
        emoji: The rendered emoji (shortcode or glyph).
        subject: Subject text as typed by the user.
        message: The composed commit message.
    """

    commit_type: Optional[str] = None
    emoji: str
    subject: str
    message: str
