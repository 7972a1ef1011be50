"""
HP 35s SDK - Program Authoring Toolkit for the HP 35s
=====================================================

This package supports writing HP 35s keystroke programs as plain text, one
instruction per line, and moving them to and from the numbered format used
to share programs online.

A program document holds one program under a single label. The calculator
numbers program lines from that label (A001, A002, ...) and skips the
blank lines and comments a text file naturally contains; the toolkit keeps
the two numberings in step.

Main Components
---------------
- **program**: line classification, label rule, line index, navigation
  (GTO/XEQ jumps, jump back, goto), memory estimate, static checks
- **exchange**: export to and import from the numbered exchange format
- **document**: the buffer protocol the toolkit works through, and an
  in-memory implementation
- **session**: user-facing operations returning status messages
- **cli**: the ``hp35s`` command-line tool

Quick Start
-----------
>>> from hp35s_sdk import TextDocument, export_program, estimate_memory
>>> doc = TextDocument.from_text("LBL A\\nx2\\nRTN\\n")
>>> print(export_program(doc), end="")
A001 LBL A
A002 x2
A003 RTN
>>> estimate_memory(doc)
9

Or use the command-line tool:
    $ hp35s export area.35s -o area.txt
    $ hp35s import forum_post.txt -o area.35s
    $ hp35s estimate area.35s
"""

__version__ = "1.0.0"

# =============================================================================
# Public API Exports
# =============================================================================

from hp35s_sdk.config import ToolConfig
from hp35s_sdk.document import Document, TextDocument
from hp35s_sdk.errors import (
    HP35sError,
    ProgramError,
    MultipleLabelsError,
    LabelNotFoundError,
    InvalidInstructionError,
    LabelMismatchError,
    LineOutOfRangeError,
    InvalidLineSpecError,
    NoHistoryError,
    EmptyOrCommentLineError,
    ExchangeError,
    ImportMalformedLineError,
    ImportEncodingError,
    SourceLocation,
)
from hp35s_sdk.exchange import (
    export_program,
    export_to_file,
    import_file,
    import_into,
    import_program,
    translate_mnemonics,
)
from hp35s_sdk.program import (
    LineCategory,
    Navigator,
    build_line_index,
    check_program,
    classify,
    estimate_memory,
    find_label,
    verify_single_label,
)
from hp35s_sdk.session import CommandResult, Session

__all__ = [
    "__version__",
    # Configuration
    "ToolConfig",
    # Documents
    "Document",
    "TextDocument",
    # Exception hierarchy
    "HP35sError",
    "ProgramError",
    "MultipleLabelsError",
    "LabelNotFoundError",
    "InvalidInstructionError",
    "LabelMismatchError",
    "LineOutOfRangeError",
    "InvalidLineSpecError",
    "NoHistoryError",
    "EmptyOrCommentLineError",
    "ExchangeError",
    "ImportMalformedLineError",
    "ImportEncodingError",
    "SourceLocation",
    # Exchange format
    "export_program",
    "export_to_file",
    "import_file",
    "import_into",
    "import_program",
    "translate_mnemonics",
    # Program model
    "LineCategory",
    "Navigator",
    "build_line_index",
    "check_program",
    "classify",
    "estimate_memory",
    "find_label",
    "verify_single_label",
    # Sessions
    "CommandResult",
    "Session",
]
