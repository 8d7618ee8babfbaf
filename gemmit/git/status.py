"""Git status utilities.

Contains:
- StagedStatus: Snapshot of the files currently staged
- get_staged_status: Read the staged file list from the index
"""

from dataclasses import dataclass, field

from gemmit.git.runner import _run_git_command


@dataclass
class StagedStatus:
    """Files currently staged in the index."""

    staged_files: list[str] = field(default_factory=list)

    @property
    def staged_file_count(self) -> int:
        return len(self.staged_files)


def get_staged_status() -> StagedStatus:
    """Get the list of staged files.

    The porcelain format uses two columns:
    - First column: staged status (index)
    - Second column: worktree status

    Only lines where the first column indicates a staged change are kept.

    Returns:
        StagedStatus with the staged file paths.
    """
    output = _run_git_command(["status", "--porcelain=v1"], strip=False)
    staged_files = []

    for line in output.split("\n"):
        # Skip lines that are too short to carry a path
        if len(line) < 4:
            continue
        first_col = line[0]
        if first_col != " " and first_col != "?":
            staged_files.append(line[3:])

    return StagedStatus(staged_files=staged_files)
