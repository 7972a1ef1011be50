"""
Program Document Adapter
========================

The toolkit never owns the text it works on. Editors, scripts and the CLI
all expose their buffer through the small ``Document`` protocol defined
here, and every core operation (label lookup, indexing, navigation,
export, import, memory estimate) is written against that protocol only.

Line numbers are 1-indexed buffer lines, counting every line including
blanks and comments. The cursor is a buffer line number.

``TextDocument`` is the in-memory implementation used by the CLI and the
tests: a list of lines plus a cursor.

Example
-------
>>> doc = TextDocument.from_text("LBL A\\nRTN\\n")
>>> doc.line_count()
2
>>> doc.set_cursor_line(2)
>>> doc.read_current_line()
'RTN'
"""

from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional, Protocol, Union
import logging

from hp35s_sdk.errors import SourceLocation

logger = logging.getLogger(__name__)


class Document(Protocol):
    """The buffer operations the toolkit needs from an editing surface."""

    def line_count(self) -> int:
        """Return the number of lines in the buffer."""
        ...

    def read_line(self, number: int) -> str:
        """Return buffer line ``number`` (1-indexed) without terminator."""
        ...

    def read_current_line(self) -> str:
        """Return the line under the cursor."""
        ...

    def cursor_line(self) -> int:
        """Return the buffer line the cursor is on."""
        ...

    def set_cursor_line(self, number: int) -> None:
        """Move the cursor to buffer line ``number``."""
        ...

    def insert_line(self, text: str) -> None:
        """Insert ``text`` as a whole line at the cursor, moving it down."""
        ...

    def read_file(self, path: Union[str, Path]) -> str:
        """Return the contents of a file as text."""
        ...

    def write_file(self, path: Union[str, Path], text: str) -> None:
        """Write ``text`` to a file."""
        ...


# =============================================================================
# In-Memory Document
# =============================================================================

class TextDocument:
    """
    List-of-lines document with a line cursor.

    Attributes:
        name: Name used in error locations (file name or "<buffer>")
        encoding: Encoding used by read_file/write_file
    """

    def __init__(
        self,
        lines: Optional[list[str]] = None,
        name: str = "<buffer>",
        encoding: str = "utf-8",
    ):
        self._lines: list[str] = list(lines) if lines else []
        self._cursor = 1
        self.name = name
        self.encoding = encoding

    @classmethod
    def from_text(cls, text: str, name: str = "<buffer>",
                  encoding: str = "utf-8") -> "TextDocument":
        """Create a document from text; a final newline adds no line."""
        return cls(text.splitlines(), name=name, encoding=encoding)

    @classmethod
    def from_file(cls, path: Union[str, Path],
                  encoding: str = "utf-8") -> "TextDocument":
        """Load a document from a file."""
        path = Path(path)
        logger.debug("Loading %s", path)
        return cls.from_text(
            path.read_text(encoding=encoding), name=str(path), encoding=encoding
        )

    @property
    def lines(self) -> tuple[str, ...]:
        """The current lines, read-only."""
        return tuple(self._lines)

    @property
    def text(self) -> str:
        """The whole document, one newline after every line."""
        return "".join(line + "\n" for line in self._lines)

    # -------------------------------------------------------------------------
    # Document protocol
    # -------------------------------------------------------------------------

    def line_count(self) -> int:
        return len(self._lines)

    def read_line(self, number: int) -> str:
        if number < 1 or number > len(self._lines):
            raise IndexError(f"line {number} out of range 1..{len(self._lines)}")
        return self._lines[number - 1]

    def read_current_line(self) -> str:
        if self._cursor > len(self._lines):
            return ""
        return self.read_line(self._cursor)

    def cursor_line(self) -> int:
        return self._cursor

    def set_cursor_line(self, number: int) -> None:
        # One position past the last line, as after a final newline
        last = len(self._lines) + 1
        if number < 1 or number > last:
            raise IndexError(f"cursor line {number} out of range 1..{last}")
        self._cursor = number

    def insert_line(self, text: str) -> None:
        index = self._cursor - 1
        self._lines.insert(index, text)
        self._cursor = index + 2

    def read_file(self, path: Union[str, Path]) -> str:
        logger.debug("Reading %s", path)
        return Path(path).read_text(encoding=self.encoding)

    def write_file(self, path: Union[str, Path], text: str) -> None:
        logger.debug("Writing %d characters to %s", len(text), path)
        Path(path).write_text(text, encoding=self.encoding)


# =============================================================================
# Helpers
# =============================================================================

def iter_lines(document: Document) -> Iterator[tuple[int, str]]:
    """Yield ``(buffer_line, text)`` for every line, top to bottom."""
    for number in range(1, document.line_count() + 1):
        yield number, document.read_line(number)


def location_of(document: Document, number: int) -> SourceLocation:
    """SourceLocation for a line of any Document implementation."""
    name = getattr(document, "name", "<buffer>")
    return SourceLocation(name, number)


@contextmanager
def preserve_cursor(document: Document) -> Iterator[int]:
    """
    Restore the cursor if the enclosed block raises.

    Yields the cursor line observed on entry. On normal exit the cursor
    is left wherever the block put it.
    """
    origin = document.cursor_line()
    try:
        yield origin
    except BaseException:
        document.set_cursor_line(origin)
        raise


@contextmanager
def restored_cursor(document: Document) -> Iterator[int]:
    """Restore the cursor on every exit, for read-only scans."""
    origin = document.cursor_line()
    try:
        yield origin
    finally:
        document.set_cursor_line(origin)
