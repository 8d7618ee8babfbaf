"""Main CLI command for suggesting and committing a message."""

from typing import Optional

import typer

from gemmit import __version__
from gemmit.config import DEFAULT_MAX_DIFF_CHARS
from gemmit.flow import (
    CommitExecutor,
    DiffSource,
    SelectionController,
    SuggestionGenerator,
    run_commit_flow,
)
from gemmit.git import GitRepository
from gemmit.global_config import GlobalConfigError
from gemmit.llm import MissingAPIKeyError, get_provider
from gemmit.terminal import TerminalPrompt


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"gemmit {__version__}")
        raise typer.Exit()


def main_command(
    ctx: typer.Context,
    model: Optional[str] = typer.Option(
        None,
        "--model",
        "-m",
        help="Gemini model to use (overrides ~/.gemmit/config.yaml)",
    ),
    max_diff_chars: int = typer.Option(
        DEFAULT_MAX_DIFF_CHARS,
        "--max-diff-chars",
        min=0,
        help="Maximum characters of the staged diff sent to Gemini",
    ),
    sign: Optional[bool] = typer.Option(
        None,
        "--sign/--no-sign",
        help="Sign (or don't sign) the commit without asking",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit",
    ),
) -> None:
    """Suggest commit messages for staged changes with Gemini and commit the one you pick."""
    # If a subcommand is invoked, don't run the default behavior
    if ctx.invoked_subcommand is not None:
        return

    try:
        from gemmit.config import load_config
        load_config()

        terminal = TerminalPrompt()
        repository = GitRepository(max_diff_chars=max_diff_chars)
        provider = get_provider(model=model)
        # Fail before any git work if no key is available
        provider.get_api_key()

        run_commit_flow(
            source=DiffSource(repository),
            generator=SuggestionGenerator(provider, terminal),
            controller=SelectionController(terminal, sign=sign),
            executor=CommitExecutor(repository, terminal),
            terminal=terminal,
        )

    except MissingAPIKeyError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)
    except GlobalConfigError as e:
        typer.echo(f"Configuration error: {e}", err=True)
        raise typer.Exit(1)
    except (typer.Exit, typer.Abort):
        raise
    except Exception as e:
        typer.echo(f"Unexpected error: {e}", err=True)
        raise typer.Exit(1)
