"""Git access for gemmit.

This package provides:
- exceptions: GitError, RepositoryError, TransportError, CommitError,
              CommitFailureKind
- runner: _run_git_command, get_repo_root, is_inside_work_tree
- status: StagedStatus, get_staged_status
- diff: get_staged_diff
- commit: run_commit
- repository: GitRepository
"""

# Exceptions
from gemmit.git.exceptions import (
    CommitError,
    CommitFailureKind,
    GitError,
    RepositoryError,
    TransportError,
)

# Runner utilities
from gemmit.git.runner import (
    _run_git_command,
    get_repo_root,
    is_inside_work_tree,
)

# Status utilities
from gemmit.git.status import (
    StagedStatus,
    get_staged_status,
)

# Diff utilities
from gemmit.git.diff import get_staged_diff

# Commit utilities
from gemmit.git.commit import run_commit

# Collaborator
from gemmit.git.repository import GitRepository


__all__ = [
    # Exceptions
    "CommitError",
    "CommitFailureKind",
    "GitError",
    "RepositoryError",
    "TransportError",
    # Runner
    "_run_git_command",
    "get_repo_root",
    "is_inside_work_tree",
    # Status
    "StagedStatus",
    "get_staged_status",
    # Diff
    "get_staged_diff",
    # Commit
    "run_commit",
    # Collaborator
    "GitRepository",
]
