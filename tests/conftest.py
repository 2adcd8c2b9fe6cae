"""Shared test fixtures and configuration."""

import tempfile
from pathlib import Path

import pytest

from gittr.catalog import EmojiRecord


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def config_dir(temp_dir, mocker):
    """Point ~/.gittr at a temporary directory."""
    mock_dir = temp_dir / ".gittr"
    mocker.patch("gittr.config._CONFIG_DIR", mock_dir)
    return mock_dir


@pytest.fixture
def sample_emojis():
    """Small catalog used by search and prompter tests."""
    return (
        EmojiRecord(name="tada", emoji="🎉", code=":tada:", description="party"),
        EmojiRecord(name="bug", emoji="🐛", code=":bug:", description="insect issue"),
        EmojiRecord(name="sparkles", emoji="✨", code=":sparkles:", description="Introduce new features."),
    )


@pytest.fixture
def sample_gitmoji_payload():
    """Payload in the shape served by the gitmoji project."""
    return {
        "$schema": "https://gitmoji.dev/api/gitmojis/schema",
        "gitmojis": [
            {
                "emoji": "🎨",
                "entity": "&#x1f3a8;",
                "code": ":art:",
                "description": "Improve structure / format of the code.",
                "name": "art",
                "semver": None,
            },
            {
                "emoji": "🐛",
                "entity": "&#x1f41b;",
                "code": ":bug:",
                "description": "Fix a bug.",
                "name": "bug",
                "semver": "patch",
            },
        ],
    }


@pytest.fixture
def mock_git(mocker):
    """Mock subprocess.run for git commands."""
    return mocker.patch("gittr.git.runner.subprocess.run")
