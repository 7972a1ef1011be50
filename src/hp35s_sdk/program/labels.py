"""
Label Registry
==============

An HP 35s program document holds exactly one program, introduced by a
single ``LBL <letter>`` line. Every program address (``A012``) is read
relative to that label, so the registry enforces the one-label rule and
tells callers which letter the document uses.

Two checks are kept separate on purpose:

- ``verify_single_label`` only rejects documents with two or more labels;
  a document with no label passes.
- ``find_label`` rejects documents with no label.

Callers that need a label call both.
"""

from dataclasses import dataclass

from hp35s_sdk.document import Document, iter_lines, location_of
from hp35s_sdk.errors import LabelNotFoundError, MultipleLabelsError
from hp35s_sdk.program.classifier import LineCategory, classify


@dataclass(frozen=True)
class LabelLocation:
    """
    A label line in a document.

    Attributes:
        buffer_line: Buffer line number of the LBL line (1-indexed)
        letter: The label letter A-Z
    """
    buffer_line: int
    letter: str


def label_lines(document: Document) -> list[LabelLocation]:
    """Return every label line in the document, top to bottom."""
    found = []
    for number, text in iter_lines(document):
        line = classify(text)
        if line.category is LineCategory.LABEL:
            found.append(LabelLocation(number, line.letter))
    return found


def verify_single_label(document: Document) -> None:
    """
    Check that the document has at most one label.

    Raises:
        MultipleLabelsError: If two or more LBL lines exist; the error
            location points at the second one.
    """
    found = label_lines(document)
    if len(found) > 1:
        raise MultipleLabelsError(
            [label.buffer_line for label in found],
            location=location_of(document, found[1].buffer_line),
        )


def find_label(document: Document) -> LabelLocation:
    """
    Return the first label line of the document.

    Raises:
        LabelNotFoundError: If the document has no LBL line
    """
    for number, text in iter_lines(document):
        line = classify(text)
        if line.category is LineCategory.LABEL:
            return LabelLocation(number, line.letter)
    raise LabelNotFoundError()


def require_label(document: Document) -> LabelLocation:
    """Verify uniqueness, then return the document's sole label."""
    verify_single_label(document)
    return find_label(document)
