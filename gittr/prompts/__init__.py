"""Interactive prompters for gittr.

- base: Prompter, PrompterArgs, PromptCancelled
- answers: ConfigAnswers, SearchAnswer, ListAnswer, CommitAnswers
- selector: filter_emojis, render_emoji, EmojiCompleter, select_emoji
- config: ConfigPrompter
- search: SearchPrompter
- listing: ListPrompter
- commit: CommitPrompter
"""

from gittr.prompts.answers import CommitAnswers, ConfigAnswers, ListAnswer, SearchAnswer
from gittr.prompts.base import Prompter, PrompterArgs, PromptCancelled
from gittr.prompts.commit import CommitPrompter
from gittr.prompts.config import ConfigPrompter
from gittr.prompts.listing import ListPrompter
from gittr.prompts.search import SearchPrompter
from gittr.prompts.selector import (
    EmojiCompleter,
    filter_emojis,
    render_emoji,
    resolve_selection,
    select_emoji,
)

__all__ = [
    "Prompter",
    "PrompterArgs",
    "PromptCancelled",
    "ConfigAnswers",
    "SearchAnswer",
    "ListAnswer",
    "CommitAnswers",
    "ConfigPrompter",
    "SearchPrompter",
    "ListPrompter",
    "CommitPrompter",
    "EmojiCompleter",
    "filter_emojis",
    "render_emoji",
    "resolve_selection",
    "select_emoji",
]
