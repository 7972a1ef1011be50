"""
Program Line Classifier
=======================

This module sorts a single line of program text into a semantic category.
Classification is a pure function of the line text; nothing is cached,
because the document can change between any two calls.

Categories
----------
- COMMENT: first non-blank character is ``#``
- LABEL: ``LBL`` followed by one uppercase letter, nothing else
- RETURN: ``RTN`` alone
- EQUATION: starts with ``EQN `` (the rest is the equation text)
- INSTRUCTION: a mnemonic from the instruction table, with a valid operand
- NUMERIC: number, fraction, complex or vector literal
- BLANK: whitespace only
- UNRECOGNIZED: anything else

Precedence
----------
Some categories overlap syntactically (``-`` is both an instruction and the
start of a negative number), so the rules are tried in a fixed order and
the first match wins. The order is the ``CLASSIFICATION_RULES`` list below.

Example
-------
>>> from hp35s_sdk.program.classifier import classify
>>> classify("LBL A").letter
'A'
>>> classify("STO B").category
<LineCategory.INSTRUCTION: 5>
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Callable, Optional
import re

from hp35s_sdk.program.instructions import InstructionInfo, match_instruction


# =============================================================================
# Line Categories
# =============================================================================

class LineCategory(Enum):
    """Semantic category of one program line."""
    BLANK = auto()
    COMMENT = auto()
    LABEL = auto()
    RETURN = auto()
    INSTRUCTION = auto()
    NUMERIC = auto()
    EQUATION = auto()
    UNRECOGNIZED = auto()

    @property
    def is_program_line(self) -> bool:
        """True if lines of this category occupy a program line."""
        return self not in (LineCategory.BLANK, LineCategory.COMMENT)


@dataclass(frozen=True)
class ClassifiedLine:
    """
    Result of classifying one line.

    Attributes:
        category: The line category
        text: The original line text
        letter: Label letter (LABEL lines only)
        instruction: Table entry (INSTRUCTION lines only)
        operand: Instruction operand, "" when there is none
    """
    category: LineCategory
    text: str
    letter: Optional[str] = None
    instruction: Optional[InstructionInfo] = None
    operand: str = ""

    @property
    def mnemonic(self) -> Optional[str]:
        return self.instruction.mnemonic if self.instruction else None

    @property
    def is_program_line(self) -> bool:
        return self.category.is_program_line


# =============================================================================
# Patterns
# =============================================================================

COMMENT_MARKER = "#"
EQUATION_PREFIX = "EQN "

LABEL_PATTERN = re.compile(r"^\s*LBL ([A-Z])\s*$")
RETURN_PATTERN = re.compile(r"^\s*RTN\s*$")

# Leading real number (optionally signed, with exponent), or a vector
# literal. Fractions (1 2/3) and complex numbers (1i2, 3θ30) start with a
# real number and are covered by the same prefix.
NUMERIC_PATTERN = re.compile(r"^\s*(-?(\d+\.?\d*|\.\d+)(E-?\d+)?|\[)")


# =============================================================================
# Classification Rules
# =============================================================================

def _comment(line: str) -> Optional[ClassifiedLine]:
    if line.lstrip().startswith(COMMENT_MARKER):
        return ClassifiedLine(LineCategory.COMMENT, line)
    return None


def _label(line: str) -> Optional[ClassifiedLine]:
    match = LABEL_PATTERN.match(line)
    if match:
        return ClassifiedLine(LineCategory.LABEL, line, letter=match.group(1))
    return None


def _return(line: str) -> Optional[ClassifiedLine]:
    if RETURN_PATTERN.match(line):
        return ClassifiedLine(LineCategory.RETURN, line)
    return None


def _equation(line: str) -> Optional[ClassifiedLine]:
    if line.lstrip().startswith(EQUATION_PREFIX):
        return ClassifiedLine(LineCategory.EQUATION, line)
    return None


def _instruction(line: str) -> Optional[ClassifiedLine]:
    matched = match_instruction(line)
    if matched is None:
        return None
    info, operand = matched
    return ClassifiedLine(
        LineCategory.INSTRUCTION, line, instruction=info, operand=operand
    )


def _numeric(line: str) -> Optional[ClassifiedLine]:
    if NUMERIC_PATTERN.match(line):
        return ClassifiedLine(LineCategory.NUMERIC, line)
    return None


def _blank(line: str) -> Optional[ClassifiedLine]:
    if not line.strip():
        return ClassifiedLine(LineCategory.BLANK, line)
    return None


# Tried in order; the first rule returning a result wins.
CLASSIFICATION_RULES: list[Callable[[str], Optional[ClassifiedLine]]] = [
    _comment,
    _label,
    _return,
    _equation,
    _instruction,
    _numeric,
    _blank,
]


def classify(line: str) -> ClassifiedLine:
    """
    Classify one line of program text.

    Args:
        line: The line text, without its line terminator

    Returns:
        The ClassifiedLine; UNRECOGNIZED if no rule matches
    """
    for rule in CLASSIFICATION_RULES:
        result = rule(line)
        if result is not None:
            return result
    return ClassifiedLine(LineCategory.UNRECOGNIZED, line)
