"""Commit sink: the git invocations gittr needs.

Contains:
- _run_git_command: Run git in the current directory and return its stdout
- get_repo_root: Locate the work tree a commit will land in
- stage_all: Stage every change in the working tree
- commit: Create a commit with a finished message
"""

import logging
import subprocess
from pathlib import Path

from gittr.git.exceptions import GitError

logger = logging.getLogger(__name__)


def _run_git_command(args: list[str]) -> str:
    """Run git with args in the current directory.

    Args:
        args: Arguments following "git".

    Returns:
        Git's stdout with surrounding whitespace removed.

    Raises:
        GitError: When git exits non-zero or cannot be started.
    """
    command = ["git", *args]
    logger.debug("Running %s", " ".join(command))
    try:
        completed = subprocess.run(command, capture_output=True, text=True, check=True)
    except FileNotFoundError:
        raise GitError("git executable not found; install git or add it to PATH.")
    except subprocess.CalledProcessError as e:
        detail = (e.stderr or "").strip() or f"exit status {e.returncode}"
        raise GitError(f"`{' '.join(command)}` failed: {detail}")
    return completed.stdout.strip()


def get_repo_root() -> Path:
    """Locate the work tree gittr will commit into.

    Returns:
        Path to the top-level directory of the current work tree.

    Raises:
        GitError: If the working directory is not inside a git work tree.
    """
    try:
        return Path(_run_git_command(["rev-parse", "--show-toplevel"]))
    except GitError:
        raise GitError("gittr commit must be run inside a git repository.")


def stage_all() -> None:
    """Stage all changes, including untracked and deleted files."""
    _run_git_command(["add", "-A"])


def commit(message: str, sign: bool = False) -> str:
    """Create a commit with the given message.

    Args:
        message: The finished commit message.
        sign: Sign the commit with the user's configured key (-S).

    Returns:
        Git's summary output for the new commit.

    Raises:
        GitError: If git refuses the commit.
    """
    args = ["commit", "-m", message]
    if sign:
        args.append("-S")
    return _run_git_command(args)
