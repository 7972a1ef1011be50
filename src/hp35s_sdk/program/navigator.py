"""
Program Navigator
=================

Resolves program addresses to buffer lines and moves the document cursor.

Operations
----------
- **jump_forward**: on a ``GTO A010`` / ``XEQ A010`` line, move to the
  target line and remember where the jump started.
- **jump_back**: return to the line the last forward jump started from.
- **goto_line**: move to a free-form address such as ``A031`` or ``31``.
- **report_current_line**: the program address of the cursor line.

History
-------
The navigator remembers a single origin. Each successful forward jump
overwrites it, a successful jump back clears it, and so does a failed
forward jump. ``goto_line`` never touches it: only GTO/XEQ jumps pair with
a return.

Failure
-------
Every operation either completes or leaves the cursor exactly where it
found it. Errors are raised as ProgramError subclasses.

Example
-------
>>> doc = TextDocument.from_text("LBL A\\nGTO A003\\nRTN\\n")
>>> nav = Navigator()
>>> doc.set_cursor_line(2)
>>> nav.jump_forward(doc).target
JumpTarget(label='A', program_line=3)
>>> nav.jump_back(doc)
'A002'
"""

from dataclasses import dataclass
from typing import Optional
import logging
import re

from hp35s_sdk.document import Document, location_of, preserve_cursor
from hp35s_sdk.errors import (
    EmptyOrCommentLineError,
    InvalidInstructionError,
    InvalidLineSpecError,
    LabelMismatchError,
    LineOutOfRangeError,
    NoHistoryError,
)
from hp35s_sdk.program.classifier import classify
from hp35s_sdk.program.labels import LabelLocation, find_label, verify_single_label
from hp35s_sdk.program.line_index import LineIndexTable, build_line_index

logger = logging.getLogger(__name__)


# =============================================================================
# Addresses
# =============================================================================

JUMP_PATTERN = re.compile(r"(GTO|XEQ) ([A-Z])(\d\d\d)")
LINE_SPEC_PATTERN = re.compile(r"([A-Z])?(\d+)")


@dataclass(frozen=True)
class JumpTarget:
    """
    A program address.

    Attributes:
        label: Label letter, None when the address gave only a number
        program_line: Program line number (1-based)
    """
    label: Optional[str]
    program_line: int

    def __str__(self) -> str:
        return format_address(self.label or "", self.program_line)


def format_address(label: str, program_line: int) -> str:
    """Format an address the way the calculator shows it, e.g. A007."""
    return f"{label}{program_line:03d}"


def parse_jump_instruction(text: str) -> Optional[tuple[str, JumpTarget]]:
    """
    Parse a jump line into ``(mnemonic, target)``.

    The line must split into exactly two tokens, GTO or XEQ followed by a
    label letter and three digits. Returns None for anything else.
    """
    tokens = text.split()
    if len(tokens) != 2:
        return None
    match = JUMP_PATTERN.fullmatch(" ".join(tokens))
    if match is None:
        return None
    return match.group(1), JumpTarget(match.group(2), int(match.group(3)))


def parse_line_spec(spec: str) -> JumpTarget:
    """
    Parse a free-form address such as ``A031`` or ``31``.

    Raises:
        InvalidLineSpecError: If the text is not ``[A-Z]?digits``
    """
    match = LINE_SPEC_PATTERN.fullmatch(spec.strip())
    if match is None:
        raise InvalidLineSpecError(spec)
    return JumpTarget(match.group(1), int(match.group(2)))


# =============================================================================
# History
# =============================================================================

@dataclass(frozen=True)
class NavigationHistory:
    """
    Where the last forward jump started.

    Attributes:
        buffer_line: Buffer line of the jump instruction
        label: Program label at the time of the jump
        program_line: Program line of the jump instruction
    """
    buffer_line: int
    label: str
    program_line: int

    def __str__(self) -> str:
        return format_address(self.label, self.program_line)


@dataclass(frozen=True)
class JumpResult:
    """Outcome of a successful forward jump."""
    mnemonic: str
    origin: NavigationHistory
    target: JumpTarget
    buffer_line: int


# =============================================================================
# Navigator
# =============================================================================

class Navigator:
    """
    Address resolution and cursor movement over a Document.

    A Navigator holds the one-slot jump history; one instance is meant to
    live as long as the editing session of a single document.

    Attributes:
        history: Origin of the last forward jump, or None
    """

    def __init__(self) -> None:
        self.history: Optional[NavigationHistory] = None

    def clear_history(self) -> None:
        self.history = None

    def jump_forward(self, document: Document) -> JumpResult:
        """
        Follow the GTO/XEQ instruction on the cursor line.

        Raises:
            MultipleLabelsError: Document has more than one label
            InvalidInstructionError: Cursor line is not ``GTO|XEQ <L><NNN>``
            LabelNotFoundError: Document has no label
            LabelMismatchError: Target names another label
            LineOutOfRangeError: Target line does not exist
        """
        try:
            with preserve_cursor(document) as origin_line:
                verify_single_label(document)

                text = document.read_current_line()
                parsed = parse_jump_instruction(text)
                if parsed is None:
                    raise InvalidInstructionError(
                        "not a jump instruction",
                        location=location_of(document, origin_line),
                        hint="expected GTO or XEQ followed by an address such as A010",
                        source_line=text,
                    )
                mnemonic, target = parsed

                label = find_label(document)
                self._check_label(document, target, label, origin_line, text)

                table = build_line_index(document)
                buffer_line = self._resolve(document, table, target, label,
                                            origin_line, text)

                origin = NavigationHistory(
                    buffer_line=origin_line,
                    label=label.letter,
                    program_line=table.program_line_for(origin_line),
                )
                document.set_cursor_line(buffer_line)
        except Exception:
            self.history = None
            raise

        self.history = origin
        logger.debug("%s from %s to %s (buffer line %d)",
                     mnemonic, origin, target, buffer_line)
        return JumpResult(mnemonic, origin, target, buffer_line)

    def jump_back(self, document: Document) -> str:
        """
        Return to the origin of the last forward jump.

        Returns:
            The origin address, e.g. ``A012``

        Raises:
            NoHistoryError: No forward jump to return from
        """
        if self.history is None:
            raise NoHistoryError()
        origin = self.history
        document.set_cursor_line(origin.buffer_line)
        self.history = None
        logger.debug("Returned to %s (buffer line %d)", origin, origin.buffer_line)
        return str(origin)

    def goto_line(self, document: Document, spec: str) -> int:
        """
        Move the cursor to a free-form program address.

        Args:
            document: The program document
            spec: ``A031`` or ``31``

        Returns:
            The buffer line the cursor moved to

        Raises:
            InvalidLineSpecError: Malformed address
            LabelNotFoundError: Document has no label
            MultipleLabelsError: Document has more than one label
            LabelMismatchError: Address names another label
            LineOutOfRangeError: Address does not exist
        """
        with preserve_cursor(document) as origin_line:
            target = parse_line_spec(spec)
            label = find_label(document)
            verify_single_label(document)
            self._check_label(document, target, label, origin_line, None)

            table = build_line_index(document)
            buffer_line = self._resolve(document, table, target, label, None, None)
            document.set_cursor_line(buffer_line)

        logger.debug("Goto %s -> buffer line %d", spec, buffer_line)
        return buffer_line

    def report_current_line(self, document: Document) -> str:
        """
        Program address of the cursor line, e.g. ``A012``.

        Raises:
            EmptyOrCommentLineError: Cursor line is blank or a comment
            LabelNotFoundError: Document has no label
            MultipleLabelsError: Document has more than one label
        """
        current = document.cursor_line()
        text = document.read_current_line()
        if not classify(text).is_program_line:
            raise EmptyOrCommentLineError(
                "line has no program address",
                location=location_of(document, current),
                hint="blank lines and comments are not program lines",
            )
        verify_single_label(document)
        label = find_label(document)
        table = build_line_index(document)
        return format_address(label.letter, table.program_line_for(current))

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    @staticmethod
    def _check_label(document: Document, target: JumpTarget,
                     label: LabelLocation, origin_line: int,
                     text: Optional[str]) -> None:
        if target.label is not None and target.label != label.letter:
            raise LabelMismatchError(
                target.label,
                label.letter,
                location=location_of(document, origin_line) if text else None,
                source_line=text,
            )

    @staticmethod
    def _resolve(document: Document, table: LineIndexTable,
                 target: JumpTarget, label: LabelLocation,
                 origin_line: Optional[int], text: Optional[str]) -> int:
        buffer_line = table.buffer_line_for(target.program_line)
        if buffer_line is None:
            raise LineOutOfRangeError(
                target.program_line,
                table.last_program_line,
                label=label.letter,
                location=location_of(document, origin_line) if origin_line else None,
                source_line=text,
            )
        return buffer_line
