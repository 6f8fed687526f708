"""Git repository lookup used by configuration discovery."""

import os
from pathlib import Path
from typing import Optional

GIT_ROOT_ENV = "HUSH_GIT_ROOT"


def find_git_root(start_path: Optional[Path] = None) -> Optional[Path]:
    """Find the root directory of the enclosing git repository.

    A directory counts as a repository root when it holds a ``.git``
    directory, or a ``.git`` file as created for worktrees and submodules.
    Setting HUSH_GIT_ROOT skips the search and returns that path as-is.

    Args:
        start_path: Directory to search upwards from. Defaults to the
            current working directory.

    Returns:
        The repository root, or None outside a repository.
    """
    env_override = os.environ.get(GIT_ROOT_ENV)
    if env_override:
        return Path(env_override)

    current = Path.cwd() if start_path is None else Path(start_path).resolve()

    for candidate in (current, *current.parents):
        if (candidate / ".git").exists():
            return candidate

    return None
