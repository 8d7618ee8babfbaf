"""Git command runner and repository utilities.

Contains:
- _run_git_command: Run a git command and return its output
- get_repo_root: Get the root directory of the current git repository
- is_inside_work_tree: Check whether the working directory is in a repository
"""

import subprocess
from pathlib import Path

from gemmit.git.exceptions import GitError, RepositoryError


def _run_git_command(args: list[str], strip: bool = True) -> str:
    """Run a git command and return its output.

    Args:
        args: List of arguments to pass to git.
        strip: Strip surrounding whitespace. Porcelain output keeps its
            leading status column only when this is False.

    Returns:
        The stdout of the git command.

    Raises:
        GitError: If the command fails.
    """
    try:
        result = subprocess.run(
            ["git"] + args,
            capture_output=True,
            text=True,
            check=True,
        )
        return result.stdout.strip() if strip else result.stdout
    except subprocess.CalledProcessError as e:
        raise GitError(f"Git command failed: git {' '.join(args)}\n{(e.stderr or '').strip()}")
    except FileNotFoundError:
        raise GitError("Git is not installed or not in PATH.")


def is_inside_work_tree() -> bool:
    """Check whether the current directory is inside a git work tree.

    Returns:
        True if git reports a work tree, False otherwise.
    """
    try:
        return _run_git_command(["rev-parse", "--is-inside-work-tree"]) == "true"
    except GitError:
        return False


def get_repo_root() -> Path:
    """Get the root directory of the current git repository.

    Returns:
        Path to the repository root.

    Raises:
        RepositoryError: If not in a git repository.
    """
    try:
        root = _run_git_command(["rev-parse", "--show-toplevel"])
        return Path(root)
    except GitError:
        raise RepositoryError("Not in a git repository. Please run this command from within a git repo.")
