"""
HP 35s Toolkit Error Hierarchy
==============================

This module defines the exception hierarchy for the whole toolkit.
All exceptions inherit from HP35sError, allowing callers to catch every
toolkit-related error with a single except clause if desired.

Exception Hierarchy
-------------------
HP35sError (base)
├── ProgramError (addressing and navigation over a program document)
│   ├── MultipleLabelsError - more than one LBL line in the document
│   ├── LabelNotFoundError - no LBL line in the document
│   ├── InvalidInstructionError - line is not a GTO/XEQ jump
│   ├── LabelMismatchError - address names a different program label
│   ├── LineOutOfRangeError - program line does not exist
│   ├── InvalidLineSpecError - goto request is not [A-Z]?digits
│   ├── NoHistoryError - nothing to return to
│   └── EmptyOrCommentLineError - line has no program address
└── ExchangeError (external numbered format)
    ├── ImportMalformedLineError - line cannot be imported
    └── ImportEncodingError - file is not text in the configured encoding

Error messages follow this format:
    filename:line: error: description
        source_line_text
    hint: suggestion for fixing (when available)
"""

from dataclasses import dataclass
from typing import Optional


# =============================================================================
# Base Exception Class
# =============================================================================

class HP35sError(Exception):
    """
    Base exception for all toolkit errors.

        try:
            export_program(document)
        except HP35sError as e:
            print(f"Error: {e}")
    """
    pass


# =============================================================================
# Source Location Tracking
# =============================================================================

@dataclass(frozen=True)
class SourceLocation:
    """
    A buffer line in a program document, for error reporting.

    Attributes:
        filename: Name of the document (or "<buffer>" for in-memory text)
        line: Buffer line number (1-indexed)
    """
    filename: str
    line: int

    def __str__(self) -> str:
        return f"{self.filename}:{self.line}"


# =============================================================================
# Program Exceptions
# =============================================================================

class ProgramError(HP35sError):
    """
    Base exception for errors detected while resolving program addresses.

    Attributes:
        message: The error description
        location: Buffer line the error refers to (optional)
        hint: A suggestion for fixing the error (optional)
        source_line: Text of the offending line (optional)
    """

    # Short machine-friendly name, reported by Session command results
    kind = "program_error"

    def __init__(
        self,
        message: str,
        location: Optional[SourceLocation] = None,
        hint: Optional[str] = None,
        source_line: Optional[str] = None,
    ):
        self.message = message
        self.location = location
        self.hint = hint
        self.source_line = source_line
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """
        Format the error message with location, source context, and hint.

        Example output:
            prog.35s:12: error: label 'B' does not match program label 'A'
                GTO B010
            hint: jumps can only target lines of this program
        """
        parts = []

        if self.location:
            parts.append(f"{self.location}: error: {self.message}")
        else:
            parts.append(f"error: {self.message}")

        if self.source_line is not None and self.location is not None:
            parts.append(f"    {self.source_line}")

        if self.hint:
            parts.append(f"hint: {self.hint}")

        return "\n".join(parts)


class MultipleLabelsError(ProgramError):
    """
    More than one LBL line exists in the document.

    HP 35s program documents hold exactly one program, so every address
    is interpreted relative to a single label.
    """

    kind = "multiple_labels"

    def __init__(
        self,
        lines: list[int],
        location: Optional[SourceLocation] = None,
    ):
        self.lines = list(lines)
        listed = ", ".join(str(n) for n in self.lines)
        super().__init__(
            f"document contains {len(self.lines)} labels (lines {listed})",
            location=location,
            hint="keep a single LBL line per document",
        )


class LabelNotFoundError(ProgramError):
    """No LBL line was found in the document."""

    kind = "label_not_found"

    def __init__(self, location: Optional[SourceLocation] = None):
        super().__init__(
            "no program label found",
            location=location,
            hint="add a line such as 'LBL A' at the top of the program",
        )


class InvalidInstructionError(ProgramError):
    """
    The line is not a jump instruction.

    A jump needs exactly two tokens: GTO or XEQ followed by a label
    letter and three digits, e.g. ``GTO A010``.
    """

    kind = "invalid_instruction"


class LabelMismatchError(ProgramError):
    """An address names a label other than the document's own label."""

    kind = "label_mismatch"

    def __init__(
        self,
        requested: str,
        actual: str,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
    ):
        self.requested = requested
        self.actual = actual
        super().__init__(
            f"label '{requested}' does not match program label '{actual}'",
            location=location,
            hint="jumps can only target lines of this program",
            source_line=source_line,
        )


class LineOutOfRangeError(ProgramError):
    """The requested program line does not exist."""

    kind = "line_out_of_range"

    def __init__(
        self,
        program_line: int,
        last_line: int,
        label: str = "",
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
    ):
        self.program_line = program_line
        self.last_line = last_line
        self.label = label
        hint = None
        if last_line > 0:
            hint = f"program lines run from {label}001 to {label}{last_line:03d}"
        super().__init__(
            f"program line {label}{program_line:03d} is out of range",
            location=location,
            hint=hint,
            source_line=source_line,
        )


class InvalidLineSpecError(ProgramError):
    """A goto request is not of the form ``[A-Z]?digits``."""

    kind = "invalid_line_spec"

    def __init__(self, spec: str):
        self.spec = spec
        super().__init__(
            f"invalid line specification '{spec}'",
            hint="use a program line such as 'A031' or '31'",
        )


class NoHistoryError(ProgramError):
    """Jump back was requested but no jump was made before."""

    kind = "no_history"

    def __init__(self):
        super().__init__("no jump to return from")


class EmptyOrCommentLineError(ProgramError):
    """The line is blank or a comment and has no program address."""

    kind = "empty_or_comment_line"


# =============================================================================
# Exchange Format Exceptions
# =============================================================================

class ExchangeError(HP35sError):
    """Base exception for external exchange format errors."""

    kind = "exchange_error"


class ImportMalformedLineError(ExchangeError):
    """
    An external line could not be imported.

    The importer is deliberately tolerant of hand-authored forum text:
    malformed line number prefixes are left in place rather than
    rejected, so this is only raised for input that is not text at all.
    """

    kind = "import_malformed_line"

    def __init__(self, line_number: int, reason: str):
        self.line_number = line_number
        self.reason = reason
        super().__init__(f"cannot import line {line_number}: {reason}")


class ImportEncodingError(ExchangeError):
    """An exchange file is not valid text in the configured encoding."""

    kind = "import_encoding"

    def __init__(self, path: str, encoding: str, reason: str):
        self.path = path
        self.encoding = encoding
        self.reason = reason
        super().__init__(f"cannot decode {path} as {encoding}: {reason}")
