"""Terminal collaborator used for all operator interaction."""

import typer


class TerminalPrompt:
    """Blocking line-based terminal I/O built on typer."""

    def ask(self, text: str) -> str:
        """Show a prompt and block until the operator enters a line.

        An empty line is returned as an empty string rather than re-prompting.
        """
        return typer.prompt(text, default="", show_default=False)

    def echo(self, message: str = "", err: bool = False) -> None:
        typer.echo(message, err=err)


def is_yes(answer: str) -> bool:
    """Return True for a yes answer ("y" or "yes", any case)."""
    return answer.strip().lower() in ("y", "yes")
