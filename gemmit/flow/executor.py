"""Commit execution and failure classification."""

from typing import Optional

import gemmit.config as _config
from gemmit.flow.models import CommitRequest, CommitResult, CommitStatus
from gemmit.git.exceptions import CommitError, CommitFailureKind, GitError

_KIND_TO_STATUS = {
    CommitFailureKind.NOTHING_TO_COMMIT: CommitStatus.NOTHING_TO_COMMIT,
    CommitFailureKind.SIGNING_FAILED: CommitStatus.SIGNING_FAILED,
    CommitFailureKind.OTHER: CommitStatus.OTHER_FAILURE,
}


def classify_commit_error(
    error: CommitError,
    sign: bool,
    nothing_phrases: list[str],
    signing_phrases: list[str],
) -> CommitStatus:
    """Classify a failed commit.

    A structured ``error.kind`` wins. Otherwise the lower-cased detail is
    matched against the phrase tables; signing phrases only count when
    signing was requested.

    Args:
        error: The error raised by the commit operation.
        sign: Whether signing was requested.
        nothing_phrases: Phrases meaning nothing was staged.
        signing_phrases: Phrases meaning the signature could not be made.

    Returns:
        The failure status.
    """
    if error.kind is not None:
        return _KIND_TO_STATUS[error.kind]

    detail = (error.detail or "").lower()
    if any(phrase in detail for phrase in nothing_phrases):
        return CommitStatus.NOTHING_TO_COMMIT
    if sign and any(phrase in detail for phrase in signing_phrases):
        return CommitStatus.SIGNING_FAILED
    return CommitStatus.OTHER_FAILURE


class CommitExecutor:
    """Commits a confirmed message after re-checking the index."""

    def __init__(
        self,
        repository,
        terminal,
        nothing_phrases: Optional[list[str]] = None,
        signing_phrases: Optional[list[str]] = None,
    ):
        self.repository = repository
        self.terminal = terminal
        self.nothing_phrases = (
            nothing_phrases if nothing_phrases is not None else list(_config.NOTHING_TO_COMMIT_PHRASES)
        )
        self.signing_phrases = (
            signing_phrases if signing_phrases is not None else list(_config.SIGNING_FAILED_PHRASES)
        )

    def execute(self, request: CommitRequest) -> CommitResult:
        """Commit the staged changes with the requested message.

        Args:
            request: The confirmed commit request.

        Returns:
            CommitResult describing the outcome. Failures are reported to the
            operator and never raised.
        """
        try:
            has_changes = self._has_staged_changes()
        except GitError as e:
            self.terminal.echo(f"Git error while checking staged changes: {e}", err=True)
            return CommitResult(CommitStatus.OTHER_FAILURE, str(e))

        if not has_changes:
            self._report_nothing_to_commit()
            return CommitResult(CommitStatus.NOTHING_TO_COMMIT, "No staged changes")

        if request.sign:
            self.terminal.echo("Committing with GPG signature (-S)...", err=True)
        else:
            self.terminal.echo("Committing...", err=True)

        try:
            self.repository.commit(request.message, sign=request.sign)
        except CommitError as e:
            status = classify_commit_error(e, request.sign, self.nothing_phrases, self.signing_phrases)
            self._report_failure(status, e.detail)
            return CommitResult(status, e.detail)

        signed_note = " (signed with GPG key)" if request.sign else ""
        self.terminal.echo("")
        self.terminal.echo(f'Committed with message: "{request.message}"{signed_note}')
        return CommitResult(CommitStatus.SUCCESS)

    def _has_staged_changes(self) -> bool:
        if self.repository.staged_status().staged_file_count > 0:
            return True
        # The status listing can miss some index states; the diff is authoritative
        return bool(self.repository.staged_diff().strip())

    def _report_nothing_to_commit(self) -> None:
        self.terminal.echo("Warning: there are no staged changes to commit.", err=True)
        self.terminal.echo("Stage your changes first with: git add <file>", err=True)

    def _report_failure(self, status: CommitStatus, detail: str) -> None:
        if status == CommitStatus.NOTHING_TO_COMMIT:
            self.terminal.echo("Nothing is staged for commit, or git is in an unusual state.", err=True)
            self.terminal.echo("Make sure you have run 'git add' on the files to commit.", err=True)
        elif status == CommitStatus.SIGNING_FAILED:
            self.terminal.echo("GPG error: failed to sign the commit. Check your signing key setup in git.", err=True)
            self.terminal.echo(
                "  Configure a key with: git config --global user.signingkey YOUR_GPG_KEY_ID", err=True
            )
            self.terminal.echo("  And make sure the GPG agent is running if required.", err=True)
        else:
            self.terminal.echo(f"Git error while committing: {detail}", err=True)
