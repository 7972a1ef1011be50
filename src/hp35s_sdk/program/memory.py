"""
Program Memory Estimator
========================

Estimates how many bytes of calculator memory a program occupies.

Cost Model
----------
| Line              | Bytes                          |
|-------------------|--------------------------------|
| LBL               | 3                              |
| RTN               | 3                              |
| instruction       | per mnemonic (3 on the HP 35s) |
| number / vector   | 35                             |
| EQN text          | len(text) - 4 + 3              |
| anything else     | 0                              |

The equation cost drops the 4-character ``EQN `` marker and adds the
3-byte overhead every stored entity carries. Unrecognized lines cost
nothing here even though they still occupy a program line.
"""

from collections import Counter
from typing import Optional
import logging

from hp35s_sdk.document import Document, iter_lines, restored_cursor
from hp35s_sdk.program.classifier import (
    EQUATION_PREFIX,
    ClassifiedLine,
    LineCategory,
    classify,
)
from hp35s_sdk.program.instructions import STEP_COST
from hp35s_sdk.program.labels import verify_single_label

logger = logging.getLogger(__name__)

LABEL_COST = STEP_COST
RETURN_COST = STEP_COST
NUMERIC_COST = 35
ENTITY_OVERHEAD = 3

# Fixed costs by category; INSTRUCTION and EQUATION are computed per line
CATEGORY_COSTS: dict[LineCategory, int] = {
    LineCategory.LABEL: LABEL_COST,
    LineCategory.RETURN: RETURN_COST,
    LineCategory.NUMERIC: NUMERIC_COST,
    LineCategory.BLANK: 0,
    LineCategory.COMMENT: 0,
    LineCategory.UNRECOGNIZED: 0,
}


def line_cost(line: ClassifiedLine) -> int:
    """Return the memory cost of one classified line, in bytes."""
    if line.category is LineCategory.INSTRUCTION:
        return line.instruction.cost
    if line.category is LineCategory.EQUATION:
        return len(line.text.strip()) - len(EQUATION_PREFIX) + ENTITY_OVERHEAD
    return CATEGORY_COSTS[line.category]


def memory_breakdown(document: Document) -> Counter:
    """
    Memory used per line category.

    Returns:
        Counter mapping LineCategory to bytes; categories with no lines
        are absent

    Raises:
        MultipleLabelsError: Document has more than one label
    """
    verify_single_label(document)
    totals: Counter = Counter()
    with restored_cursor(document):
        for _, text in iter_lines(document):
            line = classify(text)
            cost = line_cost(line)
            if cost:
                totals[line.category] += cost
    return totals


def estimate_memory(document: Document, breakdown: Optional[Counter] = None) -> int:
    """
    Total program memory used by the document, in bytes.

    Args:
        document: The program document
        breakdown: Precomputed result of memory_breakdown (optional)
    """
    if breakdown is None:
        breakdown = memory_breakdown(document)
    total = sum(breakdown.values())
    logger.debug("Estimated %d bytes", total)
    return total
