"""
Exchange Format Conversion
==========================

Conversion between the internal program syntax and the numbered text
format used to share HP 35s programs (for example on the Museum of HP
Calculators forum).

External format
---------------
    A001 LBL A
    ; area of a circle
    A002 x^2
    A003 π
    A004 ×   ; multiply
    A005 RTN

- ``{LETTER?}{NNN} {mnemonic}`` for program lines
- ``;`` starts a comment (``#`` in internal syntax)

Main Components
---------------
- **export_program / export_to_file**: internal -> external
- **import_program / import_into / import_file**: external -> internal
- **IMPORT_RULES / translate_mnemonics**: forum spelling -> internal names
"""

from hp35s_sdk.exchange.exporter import export_program, export_to_file, render_export
from hp35s_sdk.exchange.importer import (
    convert_line,
    import_file,
    import_into,
    import_program,
    read_exchange_file,
    strip_line_number,
)
from hp35s_sdk.exchange.mnemonics import IMPORT_RULES, MnemonicRule, translate_mnemonics

__all__ = [
    "export_program",
    "export_to_file",
    "render_export",
    "convert_line",
    "import_file",
    "import_into",
    "import_program",
    "read_exchange_file",
    "strip_line_number",
    "IMPORT_RULES",
    "MnemonicRule",
    "translate_mnemonics",
]
