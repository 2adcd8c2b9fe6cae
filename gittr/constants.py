"""Constants for gittr.

Contains:
- APP_NAME: Name shown by the version command
- EmojiFormat: How a selected emoji is rendered in the commit message
- Preference keys and their default values
- UDACITY_COMMIT_TYPES: Allowed types for Udacity style commits
"""

from enum import Enum

APP_NAME = "gittr"


class EmojiFormat(Enum):
    """Available emoji renderings."""

    MARKDOWN = "markdown"  # shortcode, e.g. :tada:
    UNICODE = "unicode"  # literal glyph, e.g. 🎉


# Preference keys as stored in ~/.gittr/config.yaml
SETTINGS_ADD_ALL_KEY = "add_all_files"
SETTINGS_EMOJI_FORMAT_KEY = "emoji_format"
SETTINGS_SIGN_COMMIT_KEY = "sign_commit"
SETTINGS_UDACITY_STYLE_COMMIT_KEY = "udacity_style_commit"

# Order matters: the config prompter writes answers in this order
PREFERENCE_KEYS = [
    SETTINGS_ADD_ALL_KEY,
    SETTINGS_EMOJI_FORMAT_KEY,
    SETTINGS_SIGN_COMMIT_KEY,
    SETTINGS_UDACITY_STYLE_COMMIT_KEY,
]

DEFAULT_PREFERENCES = {
    SETTINGS_ADD_ALL_KEY: True,
    SETTINGS_EMOJI_FORMAT_KEY: EmojiFormat.MARKDOWN,
    SETTINGS_SIGN_COMMIT_KEY: False,
    SETTINGS_UDACITY_STYLE_COMMIT_KEY: True,
}

# Commit types allowed by the Udacity git commit message style guide
UDACITY_COMMIT_TYPES = [
    "feat",
    "fix",
    "docs",
    "style",
    "refactor",
    "test",
    "chore",
]

UDACITY_TYPE_DESCRIPTIONS = {
    "feat": "A new feature",
    "fix": "A bug fix",
    "docs": "Changes to documentation",
    "style": "Formatting, missing semi colons, etc; no code change",
    "refactor": "Refactoring production code",
    "test": "Adding tests, refactoring test; no production code change",
    "chore": "Updating build tasks, package manager configs, etc; no production code change",
}

EMOJI_FORMAT_LABELS = {
    EmojiFormat.MARKDOWN: "Github (:tada:)",
    EmojiFormat.UNICODE: "Unicode (🎉)",
}
