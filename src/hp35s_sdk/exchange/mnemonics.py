"""
Mnemonic Translation Table
==========================

Programs posted on the Museum of HP Calculators forum (and typed from the
manual) spell keys the way they are printed on the calculator: ``x^2``,
``x<>y``, ``+/-``, ``STO+``. The internal syntax uses compact ASCII names
instead (see ``hp35s_sdk.program.instructions``).

The table is an ordered list of rewrite rules, applied one after the other
to every imported code line. Order matters: ``10^x`` is rewritten before
any rule that looks at a bare ``^x``, and ``x<>y`` before the register
exchange ``x<> A``.

Example
-------
>>> translate_mnemonics("STO+ A")
'STOadd A'
>>> translate_mnemonics("x^2")
'x2'
"""

from dataclasses import dataclass
from typing import Callable, Union
import logging
import re

logger = logging.getLogger(__name__)

Replacement = Union[str, Callable[[re.Match], str]]


@dataclass(frozen=True)
class MnemonicRule:
    """
    One rewrite rule.

    Attributes:
        name: Short description used in debug logging
        pattern: Compiled pattern matched against the code line
        replacement: Replacement string or function, as for ``re.sub``
    """
    name: str
    pattern: re.Pattern
    replacement: Replacement

    def apply(self, text: str) -> str:
        return self.pattern.sub(self.replacement, text)


# Suffix for each arithmetic key combined with STO/RCL
ARITHMETIC_SUFFIXES = {
    "+": "add",
    "-": "sub",
    "*": "mul",
    "/": "div",
}


def _storage_arithmetic(match: re.Match) -> str:
    # Keeps the case of STO/RCL as written
    return match.group(1) + ARITHMETIC_SUFFIXES[match.group(2)]


def _rule(name: str, pattern: str, replacement: Replacement,
          flags: int = 0) -> MnemonicRule:
    return MnemonicRule(name, re.compile(pattern, flags), replacement)


# =============================================================================
# Import Rules (external -> internal), applied in this order
# =============================================================================

IMPORT_RULES: list[MnemonicRule] = [
    # Exponent and root notations
    _rule("ten to the x", r"10\^x|10ˣ", "10x"),
    _rule("e to the x", r"e\^x|eˣ", "ex"),
    _rule("x squared", r"x\^2|x²", "x2"),
    _rule("y to the x", r"y\^x|yˣ", "yx"),
    _rule("x-th root of y", r"x√y|ˣ√y", "xrooty"),
    _rule("square root", r"√x|SQRT\(x\)", "sqrt"),
    # Stack
    _rule("exchange x and y", r"x<>y", "swap"),
    _rule("exchange x and register", r"x<>\s*(?=[A-Z(])", "xswap "),
    _rule("roll down", r"R↓", "Rdown"),
    _rule("roll up", r"R↑", "Rup"),
    _rule("change sign", r"\+/-", "chs"),
    _rule("pi", r"π", "pi"),
    _rule("run/stop", r"\bR/S\b", "STOP"),
    # Comparisons
    _rule("not equal", r"x(≠|!=)(0|y)\?", r"xne\2?"),
    _rule("less or equal", r"x(≤|<=)(0|y)\?", r"xle\2?"),
    _rule("greater or equal", r"x(≥|>=)(0|y)\?", r"xge\2?"),
    # Printed arithmetic signs
    _rule("multiply sign", r"×", "*"),
    _rule("divide sign", r"÷", "/"),
    _rule("minus sign", r"−", "-"),
    # Storage arithmetic: STO+ A -> STOadd A, case of STO/RCL kept
    _rule("storage arithmetic", r"\b(STO|RCL)\s*([-+*/])", _storage_arithmetic,
          re.IGNORECASE),
]


def translate_mnemonics(text: str, rules: list[MnemonicRule] = IMPORT_RULES) -> str:
    """
    Apply the rewrite rules to one code line, in table order.

    Args:
        text: Code line with any line number prefix already removed
        rules: Rule list to apply (defaults to IMPORT_RULES)

    Returns:
        The line in internal syntax
    """
    for rule in rules:
        rewritten = rule.apply(text)
        if rewritten != text:
            logger.debug("%s: %r -> %r", rule.name, text, rewritten)
            text = rewritten
    return text
