"""Tests for gemmit.flow.executor module."""

import pytest
from pydantic import ValidationError

from gemmit.config import DEFAULT_NOTHING_TO_COMMIT_PHRASES, DEFAULT_SIGNING_FAILED_PHRASES
from gemmit.flow.executor import CommitExecutor, classify_commit_error
from gemmit.flow.models import CommitRequest, CommitStatus
from gemmit.git.exceptions import CommitError, CommitFailureKind, GitError
from gemmit.git.status import StagedStatus


def _classify(detail, sign=False, kind=None):
    return classify_commit_error(
        CommitError(detail, kind=kind),
        sign,
        DEFAULT_NOTHING_TO_COMMIT_PHRASES,
        DEFAULT_SIGNING_FAILED_PHRASES,
    )


class TestCommitRequest:
    """Tests for the CommitRequest model."""

    def test_strips_message(self):
        assert CommitRequest(message="  feat(a): b  ").message == "feat(a): b"

    def test_rejects_empty_message(self):
        with pytest.raises(ValidationError):
            CommitRequest(message="   ")

    def test_sign_defaults_to_false(self):
        assert CommitRequest(message="feat(a): b").sign is False


class TestClassifyCommitError:
    """Tests for classify_commit_error."""

    @pytest.mark.parametrize("detail", [
        "On branch main\nnothing to commit, working tree clean",
        "no changes added to commit (use \"git add\" and/or \"git commit -a\")",
        "Changes not staged for commit:",
    ])
    def test_nothing_to_commit_phrases(self, detail):
        assert _classify(detail) == CommitStatus.NOTHING_TO_COMMIT

    def test_signing_failure_when_signing(self):
        detail = "error: gpg failed to sign the data\nfatal: failed to write commit object"

        assert _classify(detail, sign=True) == CommitStatus.SIGNING_FAILED

    def test_signing_phrase_ignored_without_signing(self):
        detail = "error: gpg failed to sign the data"

        assert _classify(detail, sign=False) == CommitStatus.OTHER_FAILURE

    def test_no_default_secret_key(self):
        detail = "gpg: signing failed: No secret key\ngpg: no default secret key"

        assert _classify(detail, sign=True) == CommitStatus.SIGNING_FAILED

    def test_other_failure(self):
        assert _classify("fatal: unable to auto-detect email address") == CommitStatus.OTHER_FAILURE

    def test_structured_kind_wins(self):
        status = _classify("nothing to commit", kind=CommitFailureKind.SIGNING_FAILED)

        assert status == CommitStatus.SIGNING_FAILED

    def test_custom_phrase_table(self):
        status = classify_commit_error(
            CommitError("pre-commit hook: index is empty"),
            False,
            ["index is empty"],
            [],
        )

        assert status == CommitStatus.NOTHING_TO_COMMIT


class TestCommitExecutor:
    """Tests for CommitExecutor."""

    def test_success_without_signing(self, fake_repository, terminal):
        executor = CommitExecutor(fake_repository, terminal)

        result = executor.execute(CommitRequest(message="fix(core): remove y", sign=False))

        assert result.status == CommitStatus.SUCCESS
        assert result.ok
        fake_repository.commit.assert_called_once_with("fix(core): remove y", sign=False)

    def test_success_with_signing(self, fake_repository, terminal):
        executor = CommitExecutor(fake_repository, terminal)

        result = executor.execute(CommitRequest(message="feat(a): b", sign=True))

        assert result.ok
        fake_repository.commit.assert_called_once_with("feat(a): b", sign=True)
        assert "signed" in terminal.output

    def test_nothing_staged_skips_commit(self, fake_repository, terminal):
        fake_repository.staged_status.return_value = StagedStatus()
        fake_repository.staged_diff.return_value = ""
        executor = CommitExecutor(fake_repository, terminal)

        result = executor.execute(CommitRequest(message="feat(a): b"))

        assert result.status == CommitStatus.NOTHING_TO_COMMIT
        fake_repository.commit.assert_not_called()

    def test_diff_counts_when_status_is_empty(self, fake_repository, terminal):
        fake_repository.staged_status.return_value = StagedStatus()
        fake_repository.staged_diff.return_value = "+x"
        executor = CommitExecutor(fake_repository, terminal)

        result = executor.execute(CommitRequest(message="feat(a): b"))

        assert result.ok
        fake_repository.commit.assert_called_once()

    def test_second_call_after_unstaging_is_nothing_to_commit(self, fake_repository, terminal):
        """Test that repeating a request with nothing staged has no side effects."""
        executor = CommitExecutor(fake_repository, terminal)
        request = CommitRequest(message="feat(a): b")

        first = executor.execute(request)
        fake_repository.staged_status.return_value = StagedStatus()
        fake_repository.staged_diff.return_value = ""
        second = executor.execute(request)

        assert first.ok
        assert second.status == CommitStatus.NOTHING_TO_COMMIT
        assert fake_repository.commit.call_count == 1

    def test_commit_error_classified_as_signing(self, fake_repository, terminal):
        fake_repository.commit.side_effect = CommitError("error: gpg failed to sign the data")
        executor = CommitExecutor(fake_repository, terminal)

        result = executor.execute(CommitRequest(message="feat(a): b", sign=True))

        assert result.status == CommitStatus.SIGNING_FAILED
        assert "user.signingkey" in terminal.output

    def test_commit_error_classified_as_other(self, fake_repository, terminal):
        fake_repository.commit.side_effect = CommitError("fatal: hook rejected")
        executor = CommitExecutor(fake_repository, terminal)

        result = executor.execute(CommitRequest(message="feat(a): b"))

        assert result.status == CommitStatus.OTHER_FAILURE
        assert result.detail == "fatal: hook rejected"
        assert "hook rejected" in terminal.output

    def test_commit_error_nothing_to_commit(self, fake_repository, terminal):
        fake_repository.commit.side_effect = CommitError("nothing to commit, working tree clean")
        executor = CommitExecutor(fake_repository, terminal)

        result = executor.execute(CommitRequest(message="feat(a): b"))

        assert result.status == CommitStatus.NOTHING_TO_COMMIT

    def test_git_error_during_recheck(self, fake_repository, terminal):
        fake_repository.staged_status.side_effect = GitError("index.lock exists")
        executor = CommitExecutor(fake_repository, terminal)

        result = executor.execute(CommitRequest(message="feat(a): b"))

        assert result.status == CommitStatus.OTHER_FAILURE
        fake_repository.commit.assert_not_called()

    def test_uses_configured_phrases(self, fake_repository, terminal, mocker):
        mocker.patch("gemmit.config.SIGNING_FAILED_PHRASES", ["smartcard not present"])
        fake_repository.commit.side_effect = CommitError("Smartcard not present")
        executor = CommitExecutor(fake_repository, terminal)

        result = executor.execute(CommitRequest(message="feat(a): b", sign=True))

        assert result.status == CommitStatus.SIGNING_FAILED
