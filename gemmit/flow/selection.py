"""Interactive selection of a commit message.

The flow is a finite-state machine. Each state has one handler that performs
at most one blocking read from the operator and returns the next state:

    PRESENTING -> CHOOSING_NUMBER | MANUAL_ENTRY | CANCELLED
    CHOOSING_NUMBER -> CHOOSING_NUMBER | MANUAL_ENTRY | CONFIRMING | CANCELLED
    MANUAL_ENTRY -> MANUAL_ENTRY origin | CONFIRMING
    CONFIRMING -> SIGNING_CHOICE | CANCELLED
    SIGNING_CHOICE -> DONE
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from gemmit.flow.models import CommitRequest, SelectionOutcome
from gemmit.terminal import is_yes


class SelectionState(Enum):
    """States of the selection flow."""

    PRESENTING = "presenting"
    CHOOSING_NUMBER = "choosing_number"
    MANUAL_ENTRY = "manual_entry"
    CONFIRMING = "confirming"
    SIGNING_CHOICE = "signing_choice"
    DONE = "done"
    CANCELLED = "cancelled"


TERMINAL_STATES = (SelectionState.DONE, SelectionState.CANCELLED)


@dataclass
class SelectionSession:
    """Mutable data carried between states of one selection run."""

    candidates: list[str] = field(default_factory=list)
    message: Optional[str] = None
    # State to return to when manual entry gets a blank line
    manual_origin: SelectionState = SelectionState.PRESENTING
    empty_notice_shown: bool = False
    request: Optional[CommitRequest] = None

    @property
    def manual_option(self) -> int:
        return len(self.candidates) + 1

    @property
    def cancel_option(self) -> int:
        return len(self.candidates) + 2


class SelectionController:
    """Lets the operator pick, write, or reject a commit message.

    Args:
        terminal: Object with ``ask(text) -> str`` and ``echo(text, err=False)``.
        sign: Pre-answered signing choice. When None the operator is asked.
    """

    def __init__(self, terminal, sign: Optional[bool] = None):
        self.terminal = terminal
        self.sign = sign
        self._handlers = {
            SelectionState.PRESENTING: self._present,
            SelectionState.CHOOSING_NUMBER: self._choose_number,
            SelectionState.MANUAL_ENTRY: self._manual_entry,
            SelectionState.CONFIRMING: self._confirm,
            SelectionState.SIGNING_CHOICE: self._choose_signing,
        }

    def run(self, candidates: list[str]) -> SelectionOutcome:
        """Run the flow to completion.

        Args:
            candidates: Suggested messages, shown as options 1..N.

        Returns:
            SelectionOutcome with a CommitRequest, or cancelled.
        """
        session = SelectionSession(candidates=list(candidates or []))
        state = SelectionState.PRESENTING
        while state not in TERMINAL_STATES:
            state = self.step(state, session)

        if state == SelectionState.CANCELLED:
            return SelectionOutcome()
        return SelectionOutcome(request=session.request)

    def step(self, state: SelectionState, session: SelectionSession) -> SelectionState:
        """Run the handler for one non-terminal state and return the next state."""
        if state in TERMINAL_STATES:
            raise ValueError(f"{state.value} is a terminal state")
        return self._handlers[state](session)

    def _present(self, session: SelectionSession) -> SelectionState:
        if not session.candidates:
            if not session.empty_notice_shown:
                self.terminal.echo("No valid commit suggestions were generated.")
                session.empty_notice_shown = True
            answer = self.terminal.ask("Do you want to write a commit message manually? (y/n)")
            if is_yes(answer):
                session.manual_origin = SelectionState.PRESENTING
                return SelectionState.MANUAL_ENTRY
            self.terminal.echo("Commit cancelled.")
            return SelectionState.CANCELLED

        self.terminal.echo("")
        self.terminal.echo("Commit message suggestions from Gemini:")
        for i, candidate in enumerate(session.candidates, 1):
            self.terminal.echo(f"{i}. {candidate}")
        self.terminal.echo(f"{session.manual_option}. Write a message manually")
        self.terminal.echo(f"{session.cancel_option}. Cancel")
        return SelectionState.CHOOSING_NUMBER

    def _choose_number(self, session: SelectionSession) -> SelectionState:
        answer = self.terminal.ask(f"Choose an option (1-{session.cancel_option})")
        try:
            choice = int(answer.strip())
        except ValueError:
            self.terminal.echo("Please enter a valid number.")
            return SelectionState.CHOOSING_NUMBER

        if 1 <= choice <= len(session.candidates):
            session.message = session.candidates[choice - 1]
            self.terminal.echo(f'You chose: "{session.message}"')
            return SelectionState.CONFIRMING
        if choice == session.manual_option:
            session.manual_origin = SelectionState.CHOOSING_NUMBER
            return SelectionState.MANUAL_ENTRY
        if choice == session.cancel_option:
            self.terminal.echo("Commit cancelled.")
            return SelectionState.CANCELLED

        self.terminal.echo("Invalid choice.")
        return SelectionState.CHOOSING_NUMBER

    def _manual_entry(self, session: SelectionSession) -> SelectionState:
        message = self.terminal.ask("Enter your commit message").strip()
        if not message:
            self.terminal.echo("Commit message cannot be empty. Try again or cancel.")
            return session.manual_origin
        session.message = message
        return SelectionState.CONFIRMING

    def _confirm(self, session: SelectionSession) -> SelectionState:
        answer = self.terminal.ask(f'Proceed with commit: "{session.message}"? (y/n)')
        if is_yes(answer):
            return SelectionState.SIGNING_CHOICE
        self.terminal.echo("Commit cancelled by user.")
        return SelectionState.CANCELLED

    def _choose_signing(self, session: SelectionSession) -> SelectionState:
        if self.sign is None:
            answer = self.terminal.ask("Sign the commit with your GPG key (-S)? (y/n, default n)")
            sign = is_yes(answer)
        else:
            sign = self.sign
        session.request = CommitRequest(message=session.message, sign=sign)
        return SelectionState.DONE
