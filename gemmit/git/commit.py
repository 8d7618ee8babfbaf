"""Git commit utilities.

Contains:
- run_commit: Create a commit from the staged changes
"""

import subprocess

from gemmit.git.exceptions import CommitError


def run_commit(message: str, sign: bool = False) -> str:
    """Create a commit with the given message.

    Args:
        message: The commit message.
        sign: Pass ``-S`` so git signs the commit with the configured key.

    Returns:
        The stdout of ``git commit``.

    Raises:
        CommitError: If git exits non-zero. The detail contains both streams
            because git reports "nothing to commit" on stdout.
    """
    args = ["git", "commit", "-m", message]
    if sign:
        args.append("-S")

    try:
        result = subprocess.run(args, capture_output=True, text=True)
    except FileNotFoundError:
        raise CommitError("Git is not installed or not in PATH.")

    if result.returncode != 0:
        detail = "\n".join(
            part.strip() for part in (result.stderr, result.stdout) if part and part.strip()
        )
        raise CommitError(detail or f"git commit exited with status {result.returncode}")

    return result.stdout.strip()
