"""Version-control collaborator used by the commit flow."""

from gemmit.config import DEFAULT_MAX_DIFF_CHARS
from gemmit.git.commit import run_commit
from gemmit.git.diff import get_staged_diff
from gemmit.git.runner import is_inside_work_tree
from gemmit.git.status import StagedStatus, get_staged_status


class GitRepository:
    """Git operations for the repository in the current working directory."""

    def __init__(self, max_diff_chars: int = DEFAULT_MAX_DIFF_CHARS):
        self.max_diff_chars = max_diff_chars

    def is_repository_root(self) -> bool:
        return is_inside_work_tree()

    def staged_diff(self) -> str:
        return get_staged_diff(max_chars=self.max_diff_chars)

    def staged_status(self) -> StagedStatus:
        return get_staged_status()

    def commit(self, message: str, sign: bool = False) -> None:
        """Commit the staged changes.

        Raises:
            CommitError: If git refuses the commit.
        """
        run_commit(message, sign=sign)
