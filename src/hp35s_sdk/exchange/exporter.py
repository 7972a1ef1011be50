"""
Exchange Format Exporter
========================

Writes a program in the numbered format used for sharing HP 35s programs:
every program line is prefixed with its address.

    # internal                 exported
    LBL A                      A001 LBL A
    # radius in X              # radius in X
    x2                         A002 x2
                               (blank lines dropped)
    pi                         A003 pi
    *                          A004 *

Comment lines are copied unchanged and do not take a number. Mnemonics are
not rewritten; the importer understands the internal names as well as the
forum spellings.
"""

from pathlib import Path
from typing import Union
import logging

from hp35s_sdk.document import Document, iter_lines, restored_cursor
from hp35s_sdk.program.classifier import LineCategory, classify
from hp35s_sdk.program.labels import find_label, verify_single_label
from hp35s_sdk.program.navigator import format_address

logger = logging.getLogger(__name__)


def render_export(document: Document) -> tuple[str, int]:
    """
    Render the document in the exchange format.

    Returns:
        ``(text, program_lines)``: the exported text, one newline after
        every line, and the number of numbered lines in it

    Raises:
        MultipleLabelsError: Document has more than one label
        LabelNotFoundError: Document has no label
    """
    verify_single_label(document)
    label = find_label(document)

    parts: list[str] = []
    counter = 1
    with restored_cursor(document):
        for _, text in iter_lines(document):
            category = classify(text).category
            if category is LineCategory.BLANK:
                continue
            if category is LineCategory.COMMENT:
                parts.append(text + "\n")
                continue
            parts.append(f"{format_address(label.letter, counter)} {text}\n")
            counter += 1

    logger.debug("Exported %d program lines under label %s",
                 counter - 1, label.letter)
    return "".join(parts), counter - 1


def export_program(document: Document) -> str:
    """Return the document in the exchange format. See render_export."""
    return render_export(document)[0]


def export_to_file(document: Document, path: Union[str, Path]) -> int:
    """
    Export the document and write the result through the document.

    Returns:
        Number of program lines written
    """
    text, count = render_export(document)
    document.write_file(path, text)
    logger.info("Exported program to %s", path)
    return count
