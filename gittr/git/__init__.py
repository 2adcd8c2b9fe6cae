"""Git collaborator for gittr.

- exceptions: GitError
- runner: _run_git_command, get_repo_root, stage_all, commit
"""

from gittr.git.exceptions import GitError
from gittr.git.runner import (
    _run_git_command,
    commit,
    get_repo_root,
    stage_all,
)

__all__ = [
    "GitError",
    "_run_git_command",
    "commit",
    "get_repo_root",
    "stage_all",
]
