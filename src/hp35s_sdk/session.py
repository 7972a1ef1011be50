"""
Editing Session
===============

The user-facing operations, as an editor or the interactive shell would
bind them to keys or commands. A Session pairs one Document with the
Navigator that remembers the last jump, so the jump history lives exactly
as long as the session does.

Every operation returns a CommandResult instead of raising: either a
success message for the status line, or the failure message together with
the error kind. The document and cursor are unchanged after a failure.

Example
-------
>>> session = Session(TextDocument.from_text("LBL A\\nx2\\nRTN\\n"))
>>> session.goto_line("A003").message
'Moved to A003 (line 3)'
>>> session.jump_back().ok
False
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional, Union
import logging

from hp35s_sdk.document import Document
from hp35s_sdk.errors import HP35sError
from hp35s_sdk.exchange import export_to_file, import_file
from hp35s_sdk.program import Navigator, estimate_memory

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CommandResult:
    """
    Result of one user-facing operation.

    Attributes:
        ok: True if the operation succeeded
        message: Status message (success text or error description)
        error_kind: Short error name (e.g. "label_mismatch") on failure
        value: Operation-specific value (address, line, byte count)
    """
    ok: bool
    message: str
    error_kind: Optional[str] = None
    value: object = None

    @classmethod
    def success(cls, message: str, value: object = None) -> "CommandResult":
        return cls(True, message, value=value)

    @classmethod
    def failure(cls, error: Exception) -> "CommandResult":
        kind = getattr(error, "kind", "io_error")
        message = getattr(error, "message", None) or str(error)
        return cls(False, message, error_kind=kind)


class Session:
    """
    One document plus its navigation state.

    Attributes:
        document: The program document
        navigator: Jump resolution and one-slot history
    """

    def __init__(self, document: Document, navigator: Optional[Navigator] = None):
        self.document = document
        self.navigator = navigator or Navigator()

    def _run(self, operation: Callable[[], CommandResult]) -> CommandResult:
        try:
            return operation()
        except (HP35sError, OSError, UnicodeError) as e:
            logger.debug("Operation failed: %s", e)
            return CommandResult.failure(e)

    def jump_forward(self) -> CommandResult:
        """Follow the GTO/XEQ on the cursor line."""
        def run() -> CommandResult:
            jump = self.navigator.jump_forward(self.document)
            return CommandResult.success(
                f"{jump.mnemonic} {jump.target} (line {jump.buffer_line}), "
                f"return to {jump.origin}",
                value=jump,
            )
        return self._run(run)

    def jump_back(self) -> CommandResult:
        """Return to where the last jump started."""
        def run() -> CommandResult:
            origin = self.navigator.jump_back(self.document)
            return CommandResult.success(f"Returned to {origin}", value=origin)
        return self._run(run)

    def report_current_line(self) -> CommandResult:
        """Report the program address of the cursor line."""
        def run() -> CommandResult:
            address = self.navigator.report_current_line(self.document)
            return CommandResult.success(f"Program line {address}", value=address)
        return self._run(run)

    def goto_line(self, spec: str) -> CommandResult:
        """Move to a program address such as ``A031`` or ``31``."""
        def run() -> CommandResult:
            buffer_line = self.navigator.goto_line(self.document, spec)
            address = self.navigator.report_current_line(self.document)
            return CommandResult.success(
                f"Moved to {address} (line {buffer_line})", value=buffer_line
            )
        return self._run(run)

    def estimate_memory(self) -> CommandResult:
        """Estimate program memory use."""
        def run() -> CommandResult:
            total = estimate_memory(self.document)
            return CommandResult.success(f"Program uses {total} bytes", value=total)
        return self._run(run)

    def export(self, path: Union[str, Path]) -> CommandResult:
        """Export the program to an exchange file."""
        def run() -> CommandResult:
            count = export_to_file(self.document, path)
            return CommandResult.success(
                f"Exported {count} program lines to {path}", value=count
            )
        return self._run(run)

    def import_file(self, path: Union[str, Path]) -> CommandResult:
        """Insert an exchange file at the cursor."""
        def run() -> CommandResult:
            count = import_file(self.document, path)
            return CommandResult.success(
                f"Imported {count} lines from {path}", value=count
            )
        return self._run(run)
