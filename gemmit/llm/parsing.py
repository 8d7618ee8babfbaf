"""Parsing of raw suggestion responses into commit message candidates.

Contains:
- ParseStatus: How well the response matched the requested format
- ParsedSuggestions: Candidates plus their parse status
- is_valid_candidate: Shape check for a single ``type(scope): subject`` line
- parse_suggestions: Split, clean, and filter a raw response
"""

from dataclasses import dataclass, field
from enum import Enum

CODE_FENCE = "```"


class ParseStatus(Enum):
    """Outcome of parsing a suggestion response."""

    VALID = "valid"
    FORMAT_MISMATCH = "format_mismatch"
    NO_USABLE_OUTPUT = "no_usable_output"


@dataclass
class ParsedSuggestions:
    """Candidates extracted from a response, in generation order."""

    candidates: list[str] = field(default_factory=list)
    status: ParseStatus = ParseStatus.NO_USABLE_OUTPUT


def is_valid_candidate(line: str) -> bool:
    """Check that a line looks like ``type(scope): subject``.

    Args:
        line: A stripped, non-empty response line.

    Returns:
        True if the line has ``:``, ``(`` and ``)`` and is not a code fence.
    """
    return (
        ":" in line
        and "(" in line
        and ")" in line
        and not line.startswith(CODE_FENCE)
        and not line.endswith(CODE_FENCE)
    )


def parse_suggestions(raw_response: str) -> ParsedSuggestions:
    """Parse a raw model response into commit message candidates.

    Lines are stripped and blank lines dropped. If any line has the
    conventional shape, only those lines are returned. If none do, all
    remaining lines are returned with FORMAT_MISMATCH so the caller can
    warn the operator before showing them.

    Args:
        raw_response: The raw text from the model.

    Returns:
        ParsedSuggestions with the candidates and parse status.
    """
    raw_lines = [line.strip() for line in (raw_response or "").split("\n")]
    raw_lines = [line for line in raw_lines if line]

    if not raw_lines:
        return ParsedSuggestions(candidates=[], status=ParseStatus.NO_USABLE_OUTPUT)

    valid = [line for line in raw_lines if is_valid_candidate(line)]
    if not valid:
        return ParsedSuggestions(candidates=raw_lines, status=ParseStatus.FORMAT_MISMATCH)

    return ParsedSuggestions(candidates=valid, status=ParseStatus.VALID)
