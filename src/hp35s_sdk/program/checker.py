"""
Program Checker
===============

Static checks over a whole program document. Unlike the navigator, which
stops at the first problem, the checker collects every problem it finds so
a whole file can be reviewed at once.

Checks
------
1. Label rule: exactly one LBL line (error otherwise)
2. Jump targets: every ``GTO``/``XEQ`` with a full address must name the
   program label and an existing program line (error otherwise)
3. Unrecognized lines: text the classifier does not know; these still take
   a program line but cost no memory, which usually means a typo (warning)
4. Code above the label: program lines are counted from the top of the
   document, so anything above LBL moves the label off line 001 (warning)

Usage
-----
>>> report = check_program(TextDocument.from_text("LBL A\\nGTO A009\\n"))
>>> report.ok
False
>>> print(report.diagnostics[0])
<buffer>:2: error: GTO target A009 is out of range (last line is A002)
"""

from dataclasses import dataclass, field
from enum import Enum

from hp35s_sdk.document import Document, iter_lines, location_of
from hp35s_sdk.errors import SourceLocation
from hp35s_sdk.program.classifier import LineCategory, classify
from hp35s_sdk.program.instructions import JUMP_INSTRUCTIONS
from hp35s_sdk.program.labels import label_lines
from hp35s_sdk.program.line_index import build_line_index
from hp35s_sdk.program.navigator import format_address


class Severity(Enum):
    ERROR = "error"
    WARNING = "warning"


@dataclass(frozen=True)
class Diagnostic:
    """
    One problem found in a program.

    Attributes:
        severity: ERROR or WARNING
        location: Buffer line the problem is on (None for whole-document)
        message: Description
    """
    severity: Severity
    location: SourceLocation | None
    message: str

    def __str__(self) -> str:
        prefix = f"{self.location}: " if self.location else ""
        return f"{prefix}{self.severity.value}: {self.message}"


@dataclass
class CheckReport:
    """All diagnostics for one document, in buffer order."""
    diagnostics: list[Diagnostic] = field(default_factory=list)

    @property
    def errors(self) -> list[Diagnostic]:
        return [d for d in self.diagnostics if d.severity is Severity.ERROR]

    @property
    def warnings(self) -> list[Diagnostic]:
        return [d for d in self.diagnostics if d.severity is Severity.WARNING]

    @property
    def ok(self) -> bool:
        """True if there are no errors (warnings are allowed)."""
        return not self.errors


def check_program(document: Document) -> CheckReport:
    """Run every check over the document and collect the diagnostics."""
    report = CheckReport()
    labels = label_lines(document)

    if not labels:
        report.diagnostics.append(
            Diagnostic(Severity.ERROR, None, "no program label found")
        )
    for extra in labels[1:]:
        report.diagnostics.append(Diagnostic(
            Severity.ERROR,
            location_of(document, extra.buffer_line),
            f"second label LBL {extra.letter} "
            f"(program label is {labels[0].letter} on line {labels[0].buffer_line})",
        ))

    letter = labels[0].letter if labels else None
    label_line = labels[0].buffer_line if labels else None
    table = build_line_index(document)

    for number, text in iter_lines(document):
        line = classify(text)
        location = location_of(document, number)

        if label_line is not None and number < label_line and line.is_program_line:
            report.diagnostics.append(Diagnostic(
                Severity.WARNING, location,
                f"'{text.strip()}' is above LBL {letter} and shifts its line numbers",
            ))

        if line.category is LineCategory.UNRECOGNIZED:
            report.diagnostics.append(Diagnostic(
                Severity.WARNING, location,
                f"unrecognized instruction '{text.strip()}'",
            ))
            continue

        if line.mnemonic not in JUMP_INSTRUCTIONS or len(line.operand) != 4:
            continue

        target_label = line.operand[0]
        target_line = int(line.operand[1:])
        if letter is not None and target_label != letter:
            report.diagnostics.append(Diagnostic(
                Severity.ERROR, location,
                f"{line.mnemonic} target {line.operand} names label "
                f"{target_label}, program label is {letter}",
            ))
        elif table.buffer_line_for(target_line) is None:
            last = format_address(target_label, table.last_program_line)
            report.diagnostics.append(Diagnostic(
                Severity.ERROR, location,
                f"{line.mnemonic} target {line.operand} is out of range "
                f"(last line is {last})",
            ))

    return report
