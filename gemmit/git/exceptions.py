"""Git-related exception classes.

Contains all exception classes for Git operations:
- GitError: Base exception for git-related errors
- RepositoryError: Raised when the working directory is not a git repository
- TransportError: Raised when git output cannot be retrieved
- CommitError: Raised when ``git commit`` fails
"""

from enum import Enum
from typing import Optional


class CommitFailureKind(Enum):
    """Structured reason for a failed commit, when one is known."""

    NOTHING_TO_COMMIT = "nothing_to_commit"
    SIGNING_FAILED = "signing_failed"
    OTHER = "other"


class GitError(Exception):
    """Custom exception for git-related errors."""

    pass


class RepositoryError(GitError):
    """Raised when the working directory is not inside a git repository."""

    pass


class TransportError(GitError):
    """Raised when git fails for any reason other than a missing repository."""

    pass


class CommitError(GitError):
    """Raised when ``git commit`` exits with an error.

    Attributes:
        detail: Combined git output describing the failure.
        kind: Failure kind if the caller could determine it, else None.
    """

    def __init__(self, detail: str, kind: Optional[CommitFailureKind] = None):
        super().__init__(detail)
        self.detail = detail
        self.kind = kind
