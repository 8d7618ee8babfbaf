"""Data models for the gemmit commit flow.

Contains:
- CommitRequest: A confirmed message plus the signing choice
- SelectionOutcome: Result of the interactive selection
- CommitStatus: Classification of a commit attempt
- CommitResult: Status of a commit attempt plus detail text
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from pydantic import BaseModel, field_validator


class CommitRequest(BaseModel):
    """A commit the operator has confirmed."""

    message: str
    sign: bool = False

    @field_validator("message")
    @classmethod
    def message_must_not_be_empty(cls, v: str) -> str:
        """Ensure the message is not empty."""
        if not v or not v.strip():
            raise ValueError("Commit message cannot be empty")
        return v.strip()


@dataclass
class SelectionOutcome:
    """Terminal value of the selection flow.

    ``request`` is None when the operator cancelled.
    """

    request: Optional[CommitRequest] = None

    @property
    def cancelled(self) -> bool:
        return self.request is None

    @property
    def chosen_message(self) -> Optional[str]:
        return self.request.message if self.request else None


class CommitStatus(Enum):
    """How a commit attempt ended."""

    SUCCESS = "success"
    NOTHING_TO_COMMIT = "nothing_to_commit"
    SIGNING_FAILED = "signing_failed"
    OTHER_FAILURE = "other_failure"


@dataclass
class CommitResult:
    """Result of a commit attempt."""

    status: CommitStatus
    detail: str = ""

    @property
    def ok(self) -> bool:
        return self.status == CommitStatus.SUCCESS
