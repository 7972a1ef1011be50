"""
HP 35s SDK - Test Configuration
===============================

Shared fixtures for the toolkit tests.

It provides:
- SAMPLE_PROGRAM: a small program with comments, a blank line and jumps
- make_doc: factory building a TextDocument from lines
- sample / sample_lines / sample_file fixtures
"""

from pathlib import Path

import pytest

from hp35s_sdk.document import TextDocument


# Buffer line -> program line
#  1  # Area of a circle      -
#  2  LBL A                   A001
#  3  INPUT R                 A002
#  4                          -
#  5  RCL R                   A003
#  6  x2                      A004
#  7  pi                      A005
#  8  *                       A006
#  9  XEQ A009                A007
# 10  RTN                     A008
# 11  # store result          -
# 12  STO A                   A009
# 13  VIEW A                  A010
# 14  GTO A003                A011
SAMPLE_PROGRAM = [
    "# Area of a circle",
    "LBL A",
    "INPUT R",
    "",
    "RCL R",
    "x2",
    "pi",
    "*",
    "XEQ A009",
    "RTN",
    "# store result",
    "STO A",
    "VIEW A",
    "GTO A003",
]


def _make_doc(*lines: str, cursor: int = 1) -> TextDocument:
    document = TextDocument(list(lines))
    document.set_cursor_line(cursor)
    return document


@pytest.fixture
def make_doc():
    """Factory: make_doc("LBL A", "RTN", cursor=2) -> TextDocument."""
    return _make_doc


@pytest.fixture
def sample_lines() -> list[str]:
    """The sample program lines."""
    return list(SAMPLE_PROGRAM)


@pytest.fixture
def sample() -> TextDocument:
    """The sample program as an in-memory document."""
    return TextDocument(list(SAMPLE_PROGRAM))


@pytest.fixture
def sample_file(tmp_path: Path) -> Path:
    """The sample program written to area.35s."""
    path = tmp_path / "area.35s"
    path.write_text("\n".join(SAMPLE_PROGRAM) + "\n", encoding="utf-8")
    return path
