"""Prompt template for commit message suggestions."""

from gemmit.config import SUGGESTION_COUNT

SUGGESTION_PROMPT_TEMPLATE = """You are an assistant that writes git commit messages following the Conventional Commits standard.
Based on the following code changes (git diff), which may span several files and contexts, give exactly {count} commit message suggestions.
Each suggestion must be on its own line and contain ONLY the commit message itself, with no numbering, no backticks at the start or end of the message, and no other text.

Format every commit message as: <type>(<scope>): <subject>

Example of how you MUST format the output (one per line, WITHOUT numbers or backticks):
feat(auth): implement JWT authentication
fix(ui): resolve button alignment issue
docs(readme): update setup instructions

Code changes (git diff):
```diff
{diff}
```

Commit message suggestions (ONLY {count} commit messages, each on its own line, no numbering and no ``` at the start or end):
"""


def build_suggestion_prompt(diff: str, count: int = SUGGESTION_COUNT) -> str:
    """Build the suggestion prompt with the diff embedded verbatim.

    Args:
        diff: The staged diff text.
        count: Number of suggestions to request.

    Returns:
        The prompt string.
    """
    return SUGGESTION_PROMPT_TEMPLATE.format(count=count, diff=diff)
