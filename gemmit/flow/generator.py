"""Commit message suggestion generation."""

from gemmit.config import SUGGESTION_COUNT
from gemmit.llm.exceptions import EmptyResponseError, LLMError, MissingAPIKeyError
from gemmit.llm.parsing import ParseStatus, parse_suggestions
from gemmit.llm.prompts import build_suggestion_prompt


class SuggestionGenerator:
    """Turns a staged diff into commit message candidates.

    One request is sent per call. Provider failures are reported to the
    operator and produce an empty list; a missing API key is a configuration
    problem and propagates.
    """

    def __init__(self, provider, terminal, count: int = SUGGESTION_COUNT):
        self.provider = provider
        self.terminal = terminal
        self.count = count

    def generate(self, diff: str) -> list[str]:
        """Generate candidates for a diff.

        Args:
            diff: The staged diff text.

        Returns:
            Candidates in generation order, possibly empty.

        Raises:
            MissingAPIKeyError: If no API key is configured.
        """
        if not diff:
            return []

        prompt = build_suggestion_prompt(diff, self.count)

        self.terminal.echo("Asking Gemini for commit message suggestions...", err=True)
        try:
            raw_response = self.provider.generate(prompt)
        except MissingAPIKeyError:
            raise
        except EmptyResponseError:
            self.terminal.echo("Gemini did not return a text response.", err=True)
            return []
        except LLMError as e:
            self.terminal.echo(f"Error contacting Gemini: {e}", err=True)
            return []

        parsed = parse_suggestions(raw_response)

        if parsed.status == ParseStatus.NO_USABLE_OUTPUT:
            self.terminal.echo("Gemini did not return any usable suggestions.", err=True)
        elif parsed.status == ParseStatus.FORMAT_MISMATCH:
            self.terminal.echo(
                "Warning: Gemini's suggestions may not follow the requested format. Showing them as-is.",
                err=True,
            )

        return parsed.candidates
