"""Sequencing of the commit flow."""

from typing import Optional

from gemmit.flow.models import CommitResult
from gemmit.git.exceptions import RepositoryError, TransportError


def run_commit_flow(source, generator, controller, executor, terminal) -> Optional[CommitResult]:
    """Run one pass of diff -> suggestions -> selection -> commit.

    Args:
        source: DiffSource providing the staged diff.
        generator: SuggestionGenerator producing candidates.
        controller: SelectionController running the interactive choice.
        executor: CommitExecutor performing the commit.
        terminal: Terminal used for diagnostics.

    Returns:
        The CommitResult if a commit was attempted, otherwise None.
    """
    terminal.echo("Looking for staged changes...", err=True)
    try:
        diff = source.fetch()
    except RepositoryError as e:
        terminal.echo(f"Error: {e}", err=True)
        return None
    except TransportError as e:
        terminal.echo(f"Error while reading staged changes: {e}", err=True)
        return None

    if diff is None:
        terminal.echo("No staged changes to process.", err=True)
        terminal.echo("Stage your changes first with: git add <file>", err=True)
        return None

    terminal.echo("Staged changes detected.", err=True)
    candidates = generator.generate(diff)

    outcome = controller.run(candidates)
    if outcome.cancelled:
        return None

    return executor.execute(outcome.request)
