"""Interactive commit flow for gemmit.

This package provides:
- models: CommitRequest, SelectionOutcome, CommitStatus, CommitResult
- source: DiffSource
- generator: SuggestionGenerator
- selection: SelectionController, SelectionSession, SelectionState
- executor: CommitExecutor, classify_commit_error
- orchestrator: run_commit_flow
"""

# Models
from gemmit.flow.models import (
    CommitRequest,
    CommitResult,
    CommitStatus,
    SelectionOutcome,
)

# Components
from gemmit.flow.source import DiffSource
from gemmit.flow.generator import SuggestionGenerator
from gemmit.flow.selection import (
    SelectionController,
    SelectionSession,
    SelectionState,
)
from gemmit.flow.executor import CommitExecutor, classify_commit_error
from gemmit.flow.orchestrator import run_commit_flow


__all__ = [
    # Models
    "CommitRequest",
    "CommitResult",
    "CommitStatus",
    "SelectionOutcome",
    # Components
    "DiffSource",
    "SuggestionGenerator",
    "SelectionController",
    "SelectionSession",
    "SelectionState",
    "CommitExecutor",
    "classify_commit_error",
    "run_commit_flow",
]
