"""Staged diff retrieval for the commit flow."""

from typing import Optional

from gemmit.git.exceptions import GitError, RepositoryError, TransportError


class DiffSource:
    """Reads the staged diff from the version-control collaborator."""

    def __init__(self, repository):
        self.repository = repository

    def fetch(self) -> Optional[str]:
        """Return the staged diff, or None when nothing is staged.

        Raises:
            RepositoryError: If the working directory is not a git repository.
            TransportError: If git fails for any other reason.
        """
        if not self.repository.is_repository_root():
            raise RepositoryError("This directory is not a git repository.")

        try:
            diff = self.repository.staged_diff()
        except RepositoryError:
            raise
        except GitError as e:
            raise TransportError(str(e)) from e

        if not diff or not diff.strip():
            return None
        return diff
