"""Emoji catalog data models."""

from pydantic import BaseModel, ConfigDict


class EmojiRecord(BaseModel):
    """A single selectable emoji.

    Attributes:
        name: Unique short identifier (e.g., "tada").
        emoji: The literal glyph (e.g., "🎉").
        code: Shortcode representation (e.g., ":tada:").
        description: What a commit using this emoji means.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    name: str
    emoji: str
    code: str
    description: str

    @property
    def shortcode(self) -> str:
        """Name wrapped in colons, as shown in candidate labels."""
        return f":{self.name}:"
