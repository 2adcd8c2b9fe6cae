"""Commit message composition.

Formats:
    plain:   <emoji> <subject>
    udacity: <type>: <emoji> <Subject>
"""

from typing import Optional

from gittr.constants import UDACITY_COMMIT_TYPES


def sanitize_subject(subject: str) -> str:
    """Reduce a subject to a single stripped line.

    Raises:
        ValueError: If nothing is left after stripping.
    """
    lines = subject.strip().splitlines()
    first_line = lines[0].strip() if lines else ""
    if not first_line:
        raise ValueError("Commit subject cannot be empty")
    return first_line


def udacity_subject(subject: str) -> str:
    """Capitalize the subject and drop trailing periods, as the Udacity guide asks."""
    subject = subject.rstrip(".").rstrip()
    if not subject:
        raise ValueError("Commit subject cannot be empty")
    return subject[0].upper() + subject[1:]


def compose_commit_message(
    emoji: str,
    subject: str,
    udacity_style: bool,
    commit_type: Optional[str] = None,
) -> str:
    """Compose the final commit message.

    Args:
        emoji: The emoji rendering chosen by the user (shortcode or glyph).
        subject: Free-text subject typed by the user.
        udacity_style: Use the Udacity "<type>: <subject>" layout.
        commit_type: Udacity commit type; required when udacity_style is set.

    Returns:
        The commit message. The same inputs always give the same string.

    Raises:
        ValueError: If the subject is empty, or the commit type is missing
            or unknown in Udacity style.
    """
    subject = sanitize_subject(subject)
    emoji = emoji.strip()

    if not udacity_style:
        return f"{emoji} {subject}"

    if commit_type not in UDACITY_COMMIT_TYPES:
        raise ValueError(
            f"Invalid commit type: {commit_type!r}. "
            f"Valid types: {', '.join(UDACITY_COMMIT_TYPES)}"
        )
    return f"{commit_type}: {emoji} {udacity_subject(subject)}"
