"""Tests for gemmit.flow.source and gemmit.flow.orchestrator modules."""

from unittest.mock import MagicMock

import pytest

from gemmit.flow import (
    CommitExecutor,
    CommitStatus,
    DiffSource,
    SelectionController,
    SuggestionGenerator,
    run_commit_flow,
)
from gemmit.git.exceptions import GitError, RepositoryError, TransportError


class TestDiffSource:
    """Tests for DiffSource."""

    def test_returns_diff(self, fake_repository):
        assert DiffSource(fake_repository).fetch() == "+x"

    def test_empty_diff_is_none(self, fake_repository):
        fake_repository.staged_diff.return_value = ""

        assert DiffSource(fake_repository).fetch() is None

    def test_whitespace_diff_is_none(self, fake_repository):
        fake_repository.staged_diff.return_value = "\n  \n"

        assert DiffSource(fake_repository).fetch() is None

    def test_not_a_repository(self, fake_repository):
        fake_repository.is_repository_root.return_value = False

        with pytest.raises(RepositoryError):
            DiffSource(fake_repository).fetch()
        fake_repository.staged_diff.assert_not_called()

    def test_git_failure_is_transport_error(self, fake_repository):
        fake_repository.staged_diff.side_effect = GitError("Git command failed: git diff --cached")

        with pytest.raises(TransportError) as exc_info:
            DiffSource(fake_repository).fetch()

        assert "git diff" in str(exc_info.value)


def _components(repository, provider, terminal):
    return dict(
        source=DiffSource(repository),
        generator=SuggestionGenerator(provider, terminal),
        controller=SelectionController(terminal),
        executor=CommitExecutor(repository, terminal),
        terminal=terminal,
    )


class TestRunCommitFlow:
    """Tests for run_commit_flow."""

    def test_full_scenario_commits_second_candidate(self, fake_repository, fake_provider, make_terminal):
        terminal = make_terminal(["2", "y", "n"])

        result = run_commit_flow(**_components(fake_repository, fake_provider, terminal))

        assert result.status == CommitStatus.SUCCESS
        fake_repository.commit.assert_called_once_with("fix(core): remove y", sign=False)

    def test_no_diff_skips_generation_and_commit(self, fake_repository, fake_provider, terminal):
        fake_repository.staged_diff.return_value = ""
        generator = MagicMock()
        executor = MagicMock()

        result = run_commit_flow(
            source=DiffSource(fake_repository),
            generator=generator,
            controller=SelectionController(terminal),
            executor=executor,
            terminal=terminal,
        )

        assert result is None
        generator.generate.assert_not_called()
        executor.execute.assert_not_called()
        assert "No staged changes" in terminal.output

    def test_repository_error_ends_run(self, fake_repository, fake_provider, terminal):
        fake_repository.is_repository_root.return_value = False

        result = run_commit_flow(**_components(fake_repository, fake_provider, terminal))

        assert result is None
        fake_provider.generate.assert_not_called()
        assert "not a git repository" in terminal.output

    def test_transport_error_ends_run(self, fake_repository, fake_provider, terminal):
        fake_repository.staged_diff.side_effect = GitError("boom")

        result = run_commit_flow(**_components(fake_repository, fake_provider, terminal))

        assert result is None
        fake_provider.generate.assert_not_called()
        assert "boom" in terminal.output

    def test_empty_generation_then_decline_manual(self, fake_repository, fake_provider, make_terminal):
        fake_provider.generate.return_value = ""
        terminal = make_terminal(["n"])

        result = run_commit_flow(**_components(fake_repository, fake_provider, terminal))

        assert result is None
        fake_repository.commit.assert_not_called()

    def test_declined_confirmation_never_commits(self, fake_repository, fake_provider, make_terminal):
        terminal = make_terminal(["1", "n"])

        result = run_commit_flow(**_components(fake_repository, fake_provider, terminal))

        assert result is None
        fake_repository.commit.assert_not_called()
