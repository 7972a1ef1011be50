"""
Line Index
==========

Maps buffer lines (every line of the document) to program lines (the
addresses the calculator shows) and back.

Program lines are counted in one top-to-bottom pass: every line that is
neither blank nor a comment gets the next number, starting at 1. Lines the
classifier does not recognize still occupy a program line. With the label
as the first program line, numbering starts at the label; code above it is
counted too and is reported by ``check_program``.

    buffer  text          program
    ------  ------------  -------
    1       # area        -
    2       LBL A         A001
    3       INPUT R       A002
    4                     -
    5       x2            A003

A table is built for one operation and then dropped; it is never kept
across calls because the document may change in between.
"""

from dataclasses import dataclass, field
from typing import Optional

from hp35s_sdk.document import Document, iter_lines
from hp35s_sdk.program.classifier import classify


@dataclass
class LineIndexTable:
    """
    Bidirectional buffer line <-> program line mapping.

    Attributes:
        program_lines: buffer line -> program line
        buffer_lines: program line -> buffer line
    """
    program_lines: dict[int, int] = field(default_factory=dict)
    buffer_lines: dict[int, int] = field(default_factory=dict)

    def add(self, buffer_line: int, program_line: int) -> None:
        self.program_lines[buffer_line] = program_line
        self.buffer_lines[program_line] = buffer_line

    def program_line_for(self, buffer_line: int) -> Optional[int]:
        """Program line of ``buffer_line``, None for blanks and comments."""
        return self.program_lines.get(buffer_line)

    def buffer_line_for(self, program_line: int) -> Optional[int]:
        """Buffer line holding ``program_line``, None if it does not exist."""
        return self.buffer_lines.get(program_line)

    @property
    def last_program_line(self) -> int:
        """Highest program line number, 0 for an empty program."""
        return len(self.buffer_lines)

    def __len__(self) -> int:
        return len(self.buffer_lines)


def build_line_index(document: Document) -> LineIndexTable:
    """Build a fresh LineIndexTable from the current document contents."""
    table = LineIndexTable()
    counter = 0
    for number, text in iter_lines(document):
        if classify(text).is_program_line:
            counter += 1
            table.add(number, counter)
    return table
