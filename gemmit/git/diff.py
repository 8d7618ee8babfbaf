"""Git diff utilities.

Contains:
- get_staged_diff: Get the staged diff, truncated to a character budget
"""

from gemmit.config import DEFAULT_MAX_DIFF_CHARS
from gemmit.git.runner import _run_git_command


def get_staged_diff(max_chars: int = DEFAULT_MAX_DIFF_CHARS) -> str:
    """Get the staged diff, truncating if necessary.

    Args:
        max_chars: Maximum characters for the diff output. Zero or less
            disables truncation.

    Returns:
        The staged diff string, empty if nothing is staged.

    Raises:
        GitError: If git fails.
    """
    diff = _run_git_command(["diff", "--cached"])

    if max_chars > 0 and len(diff) > max_chars:
        diff = diff[:max_chars] + "\n...[truncated]\n"

    return diff
