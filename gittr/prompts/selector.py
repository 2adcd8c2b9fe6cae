"""Live emoji selection shared by the search and commit prompters.

Contains:
- filter_emojis: Substring filter over name + description
- render_emoji: Emoji rendering for the configured format
- EmojiCompleter: prompt_toolkit completer that re-filters on each keystroke
- resolve_selection: Map the submitted text back to an emoji
- select_emoji: Run the live-filtering prompt
"""

from typing import Iterable, Optional, Sequence

import typer
from prompt_toolkit import prompt as toolkit_prompt
from prompt_toolkit.completion import Completer, Completion
from prompt_toolkit.formatted_text import FormattedText

from gittr.catalog import EmojiRecord
from gittr.constants import EmojiFormat
from gittr.prompts.base import PromptCancelled

SEARCH_PROMPT = "Search for an emoji:"


def filter_emojis(emojis: Sequence[EmojiRecord], text: str) -> list[EmojiRecord]:
    """Keep emojis whose name + description contains text, case-insensitively.

    An empty text keeps the whole catalog. Catalog order is preserved.
    """
    if not text:
        return list(emojis)
    needle = text.lower()
    return [
        record for record in emojis
        if needle in f"{record.name}{record.description}".lower()
    ]


def render_emoji(record: EmojiRecord, emoji_format: Optional[EmojiFormat]) -> str:
    """Render an emoji for insertion into a message.

    MARKDOWN gives the shortcode (":tada:"), UNICODE the glyph ("🎉").
    Undefined formats fall back to MARKDOWN.
    """
    if emoji_format == EmojiFormat.UNICODE:
        return record.emoji
    return record.code


def emoji_label(record: EmojiRecord) -> FormattedText:
    """Candidate label: glyph, highlighted shortcode and description."""
    return FormattedText([
        ("", f"{record.emoji} "),
        ("fg:ansiblue", record.shortcode),
        ("", f" - {record.description}"),
    ])


def plain_label(record: EmojiRecord) -> str:
    """Same label as emoji_label, styled for typer.echo."""
    return f"{record.emoji} {typer.style(record.shortcode, fg=typer.colors.BLUE)} - {record.description}"


class EmojiCompleter(Completer):
    """Offers every emoji matching the text typed so far."""

    def __init__(self, emojis: Sequence[EmojiRecord]):
        self.emojis = emojis

    def get_completions(self, document, complete_event) -> Iterable[Completion]:
        text = document.text_before_cursor
        for record in filter_emojis(self.emojis, text):
            yield Completion(
                record.name,
                start_position=-len(text),
                display=emoji_label(record),
            )


def resolve_selection(emojis: Sequence[EmojiRecord], text: str) -> Optional[EmojiRecord]:
    """Find the emoji the user meant by text.

    Exact name or shortcode (with or without colons) or glyph wins; otherwise
    the first candidate of the live filter is taken.

    Returns:
        The matching EmojiRecord, or None if nothing matches.
    """
    text = text.strip()
    if not text:
        return None

    # Names use hyphens but codes use underscores (white-check-mark vs :white_check_mark:)
    bare = text.strip(":")
    for record in emojis:
        if text == record.emoji or bare in (record.name, record.code.strip(":")):
            return record

    candidates = filter_emojis(emojis, text)
    return candidates[0] if candidates else None


def select_emoji(emojis: Sequence[EmojiRecord], message: str = SEARCH_PROMPT) -> EmojiRecord:
    """Prompt for an emoji with live filtering.

    Raises:
        PromptCancelled: If the submitted text matches no emoji.
        KeyboardInterrupt, EOFError: If the user aborts the prompt.
    """
    text = toolkit_prompt(
        f"{message} ",
        completer=EmojiCompleter(emojis),
        complete_while_typing=True,
    )
    record = resolve_selection(emojis, text)
    if record is None:
        raise PromptCancelled(f"No emoji matches '{text.strip()}'.")
    return record
