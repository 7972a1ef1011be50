"""
HP 35s Program Model
====================

Everything the toolkit knows about a program document: how each line is
classified, where the label is, how buffer lines map to program lines,
how addresses are resolved, and how much memory the program takes.

Main Components
---------------
- **classify**: sorts a line into a LineCategory
- **INSTRUCTION_TABLE**: the recognized mnemonics and their costs
- **find_label / verify_single_label**: the one-label rule
- **build_line_index**: buffer line <-> program line table
- **Navigator**: GTO/XEQ jumps, jump back, goto, current address
- **estimate_memory**: bytes used in calculator memory
- **check_program**: static diagnostics over the whole program
"""

from hp35s_sdk.program.checker import CheckReport, Diagnostic, Severity, check_program
from hp35s_sdk.program.classifier import ClassifiedLine, LineCategory, classify
from hp35s_sdk.program.instructions import (
    INSTRUCTION_TABLE,
    JUMP_INSTRUCTIONS,
    MNEMONICS,
    InstructionInfo,
    OperandKind,
    get_instruction_info,
    match_instruction,
)
from hp35s_sdk.program.labels import (
    LabelLocation,
    find_label,
    label_lines,
    require_label,
    verify_single_label,
)
from hp35s_sdk.program.line_index import LineIndexTable, build_line_index
from hp35s_sdk.program.memory import estimate_memory, line_cost, memory_breakdown
from hp35s_sdk.program.navigator import (
    JumpResult,
    JumpTarget,
    NavigationHistory,
    Navigator,
    format_address,
    parse_jump_instruction,
    parse_line_spec,
)

__all__ = [
    # Classifier
    "ClassifiedLine",
    "LineCategory",
    "classify",
    # Instructions
    "INSTRUCTION_TABLE",
    "JUMP_INSTRUCTIONS",
    "MNEMONICS",
    "InstructionInfo",
    "OperandKind",
    "get_instruction_info",
    "match_instruction",
    # Labels
    "LabelLocation",
    "find_label",
    "label_lines",
    "require_label",
    "verify_single_label",
    # Line index
    "LineIndexTable",
    "build_line_index",
    # Memory
    "estimate_memory",
    "line_cost",
    "memory_breakdown",
    # Navigation
    "JumpResult",
    "JumpTarget",
    "NavigationHistory",
    "Navigator",
    "format_address",
    "parse_jump_instruction",
    "parse_line_spec",
    # Checks
    "CheckReport",
    "Diagnostic",
    "Severity",
    "check_program",
]
