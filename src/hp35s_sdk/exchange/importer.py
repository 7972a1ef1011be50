"""
Exchange Format Importer
========================

Converts programs in the external numbered format back to internal syntax.

External lines come in three shapes, handled in this order:

1. ``; comment`` - a comment on its own line becomes ``# comment``
2. ``A012 STO+ A ; note`` - code with a trailing comment is split; the
   comment is emitted first, as its own ``#`` line, then the code
3. ``A012 STO+ A`` - plain code

Code has its leading line number (``A012``, ``012``, ``12:``) removed and
then goes through the mnemonic rewrite rules. Equation lines keep their
text as written.

The importer is tolerant of hand-typed forum text: a prefix that does not
look like a line number is simply left in place.

Example
-------
>>> import_program("A001 LBL A\\nA002 x^2 ; square it\\n")
['LBL A', '# square it', 'x2']
"""

from pathlib import Path
from typing import Callable, Union
import logging
import re

from hp35s_sdk.document import Document, preserve_cursor
from hp35s_sdk.errors import ImportEncodingError, ImportMalformedLineError
from hp35s_sdk.exchange.mnemonics import translate_mnemonics
from hp35s_sdk.program.classifier import COMMENT_MARKER, EQUATION_PREFIX

logger = logging.getLogger(__name__)

EXTERNAL_COMMENT = ";"

# Optional label letter, digits, optional colon, then whitespace
LINE_NUMBER_PREFIX = re.compile(r"^\s*[A-Z]?\d+:?\s+")

# Control characters never appear in program text; tab is allowed
CONTROL_CHARS = re.compile(r"[\x00-\x08\x0b-\x1f\x7f]")


def strip_line_number(text: str) -> str:
    """Remove a leading ``{label?}{digits}`` prefix, if there is one."""
    return LINE_NUMBER_PREFIX.sub("", text, count=1)


def convert_code(text: str) -> str:
    """Convert one external code fragment to an internal program line."""
    code = strip_line_number(text).rstrip()
    if code.lstrip().startswith(EQUATION_PREFIX):
        return code
    return translate_mnemonics(code)


def convert_line(text: str, line_number: int = 1) -> list[str]:
    """
    Convert one external line into one or two internal lines.

    Args:
        text: The external line, without terminator
        line_number: Position in the input, for error messages

    Returns:
        Internal lines in output order (comment before code)

    Raises:
        ImportMalformedLineError: The line contains control characters
    """
    if CONTROL_CHARS.search(text):
        raise ImportMalformedLineError(line_number, "contains control characters")

    stripped = text.lstrip()
    if stripped.startswith(EXTERNAL_COMMENT):
        return [COMMENT_MARKER + stripped[len(EXTERNAL_COMMENT):]]

    if EXTERNAL_COMMENT in text:
        code, comment = text.split(EXTERNAL_COMMENT, 1)
        converted = convert_code(code)
        lines = [COMMENT_MARKER + comment]
        # A numbered line holding only a comment has no code left
        if converted.strip():
            lines.append(converted)
        return lines

    return [convert_code(text)]


def import_program(text: str) -> list[str]:
    """
    Convert a whole external document to internal lines.

    Args:
        text: Contents of an exchange file

    Returns:
        The internal program lines, in order
    """
    result: list[str] = []
    for number, line in enumerate(text.splitlines(), start=1):
        result.extend(convert_line(line, number))
    logger.debug("Imported %d lines", len(result))
    return result


def import_into(document: Document, text: str) -> int:
    """
    Convert exchange text and insert it into a document at the cursor.

    All lines are converted before the first insert, so a conversion
    error leaves the document untouched.

    Returns:
        Number of lines inserted
    """
    lines = import_program(text)
    with preserve_cursor(document):
        for line in lines:
            document.insert_line(line)
    return len(lines)


def read_exchange_file(read: Callable[[Union[str, Path]], str],
                       path: Union[str, Path], encoding: str) -> str:
    """
    Read an exchange file with ``read``, reporting undecodable bytes.

    Raises:
        ImportEncodingError: The file is not valid text in ``encoding``
    """
    try:
        return read(path)
    except UnicodeDecodeError as e:
        raise ImportEncodingError(str(path), encoding, e.reason) from e


def import_file(document: Document, path: Union[str, Path]) -> int:
    """Read an exchange file through the document and insert it."""
    logger.info("Importing %s", path)
    encoding = getattr(document, "encoding", "utf-8")
    return import_into(document, read_exchange_file(document.read_file, path, encoding))
