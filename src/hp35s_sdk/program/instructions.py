"""
HP 35s Instruction Vocabulary
=============================

This module defines the closed set of instruction mnemonics recognized in
the internal program syntax, together with the operand each one takes and
the number of bytes it occupies in program memory.

Internal Syntax
---------------
The internal syntax is plain ASCII. Keys whose labels use symbols that are
awkward to type get compact names:

| Calculator key | Internal mnemonic |
|----------------|-------------------|
| x²             | x2                |
| yˣ             | yx                |
| 10ˣ            | 10x               |
| eˣ             | ex                |
| √x             | sqrt              |
| ˣ√y            | xrooty            |
| x<>y           | swap              |
| +/-            | chs               |
| STO+           | STOadd            |
| RCL÷           | RCLdiv            |
| x<> A          | xswap A           |
| R↓ / R↑        | Rdown / Rup       |
| π              | pi                |
| R/S            | STOP              |

Operands
--------
- **REGISTER**: a variable letter A-Z or an indirect register (I)/(J)
- **ADDRESS**: a label letter with an optional 3-digit line, e.g. A010
- **FLAG**: flag number 0-11
- **DIGITS**: display digits 0-11 (FIX/SCI/ENG)

Memory
------
Every HP 35s instruction occupies 3 bytes of program memory, whatever its
operand. The cost is still kept per entry so the table is the one place to
change should a mnemonic ever need a different size.
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional
import re


# =============================================================================
# Operand Kinds
# =============================================================================

class OperandKind(Enum):
    """The kind of operand an instruction takes."""
    NONE = auto()       # Keystroke only (SIN, ENTER, +)
    REGISTER = auto()   # STO A, RCL (I)
    ADDRESS = auto()    # GTO A010, XEQ B
    FLAG = auto()       # SF 1, FS? 10
    DIGITS = auto()     # FIX 4

    def __str__(self) -> str:
        return self.name.lower()


OPERAND_PATTERNS: dict[OperandKind, re.Pattern] = {
    OperandKind.REGISTER: re.compile(r"[A-Z]|\([IJ]\)"),
    OperandKind.ADDRESS: re.compile(r"[A-Z](\d{3})?"),
    OperandKind.FLAG: re.compile(r"1[01]|\d"),
    OperandKind.DIGITS: re.compile(r"1[01]|\d"),
}


# =============================================================================
# Instruction Information
# =============================================================================

# Bytes used by one program step on the HP 35s
STEP_COST = 3


@dataclass(frozen=True)
class InstructionInfo:
    """
    Information about one instruction mnemonic.

    Attributes:
        mnemonic: The internal mnemonic, matched case-sensitively
        operand: The operand kind the mnemonic requires
        cost: Program memory used, in bytes
    """
    mnemonic: str
    operand: OperandKind = OperandKind.NONE
    cost: int = STEP_COST

    def accepts(self, operand: str) -> bool:
        """Return True if ``operand`` is valid for this instruction."""
        if self.operand is OperandKind.NONE:
            return operand == ""
        return OPERAND_PATTERNS[self.operand].fullmatch(operand) is not None


def _table(*groups: tuple[OperandKind, tuple[str, ...]]) -> dict[str, InstructionInfo]:
    table: dict[str, InstructionInfo] = {}
    for operand, mnemonics in groups:
        for mnemonic in mnemonics:
            table[mnemonic] = InstructionInfo(mnemonic, operand)
    return table


# =============================================================================
# Instruction Table
# =============================================================================
# Key: internal mnemonic
# Value: InstructionInfo
# LBL and RTN are classified separately and are not part of this table.
# =============================================================================

INSTRUCTION_TABLE: dict[str, InstructionInfo] = _table(
    (OperandKind.NONE, (
        # Arithmetic
        "+", "-", "*", "/", "chs", "1/x", "ABS", "%", "%CHG",
        "IP", "FP", "INTG", "IDIV", "RMDR", "RND", "SGN", "x!",
        # Powers and roots
        "x2", "yx", "sqrt", "xrooty", "10x", "ex", "LN", "LOG",
        # Trigonometry
        "SIN", "COS", "TAN", "ASIN", "ACOS", "ATAN",
        "SINH", "COSH", "TANH", "ASINH", "ACOSH", "ATANH",
        "DEG", "RAD", "GRAD", "->DEG", "->RAD", "->HMS", "->HR",
        # Probability
        "nCr", "nPr", "RANDOM", "SEED",
        # Stack
        "ENTER", "swap", "Rdown", "Rup", "LASTx", "CLx", "CLSTK", "CLVARS",
        "pi", "ARG",
        # Display
        "ALL",
        # Program control
        "STOP", "PSE",
        # Tests
        "x=0?", "xne0?", "x<0?", "x>0?", "xle0?", "xge0?",
        "x=y?", "xney?", "x<y?", "x>y?", "xley?", "xgey?",
    )),
    (OperandKind.REGISTER, (
        "STO", "RCL",
        "STOadd", "STOsub", "STOmul", "STOdiv",
        "RCLadd", "RCLsub", "RCLmul", "RCLdiv",
        "xswap", "ISG", "DSE", "INPUT", "VIEW", "CLVAR",
    )),
    (OperandKind.ADDRESS, ("GTO", "XEQ")),
    (OperandKind.FLAG, ("SF", "CF", "FS?")),
    (OperandKind.DIGITS, ("FIX", "SCI", "ENG")),
)

# Every recognized mnemonic
MNEMONICS: frozenset[str] = frozenset(INSTRUCTION_TABLE)

# Instructions that transfer control to a program address
JUMP_INSTRUCTIONS: frozenset[str] = frozenset({"GTO", "XEQ"})


# =============================================================================
# Lookup Functions
# =============================================================================

def get_instruction_info(mnemonic: str) -> Optional[InstructionInfo]:
    """Return the table entry for ``mnemonic``, or None if unknown."""
    return INSTRUCTION_TABLE.get(mnemonic)


def match_instruction(text: str) -> Optional[tuple[InstructionInfo, str]]:
    """
    Match a whole line against the instruction vocabulary.

    The line must consist of a known mnemonic, optionally followed by
    whitespace and an operand valid for that mnemonic. Surrounding
    whitespace is ignored; everything else must match.

    Args:
        text: The line text

    Returns:
        ``(info, operand)`` for a recognized instruction, otherwise None
    """
    parts = text.split(None, 1)
    if not parts:
        return None
    info = INSTRUCTION_TABLE.get(parts[0])
    if info is None:
        return None
    operand = parts[1].strip() if len(parts) > 1 else ""
    if not info.accepts(operand):
        return None
    return info, operand
