"""
hp35s - HP 35s Program Toolkit Command-Line Interface
=====================================================

This module implements the ``hp35s`` command, which exposes the toolkit
operations on program files from the terminal.

Commands
--------
- **export**: Write a program in the numbered exchange format
- **import**: Convert an exchange file to internal syntax
- **estimate**: Show program memory use
- **report**: Show the program address of a buffer line
- **goto**: Show the buffer line of a program address
- **jump**: Resolve the GTO/XEQ on a buffer line
- **check**: Check labels, jump targets and unknown instructions
- **shell**: Interactive navigation session

Usage Examples
--------------
Export a program for posting:
    $ hp35s export area.35s -o area.txt

Import a program copied from the forum:
    $ hp35s import forum.txt -o area.35s

Where does A031 live in the file?
    $ hp35s goto area.35s A031

Memory use per category:
    $ hp35s estimate --detailed area.35s
"""

from pathlib import Path
from typing import Optional
import logging
import shlex

import click

from hp35s_sdk import __version__
from hp35s_sdk.cli.errors import ExitCode, handle_cli_exception
from hp35s_sdk.config import ToolConfig
from hp35s_sdk.document import TextDocument
from hp35s_sdk.exchange import export_to_file, import_program, read_exchange_file
from hp35s_sdk.program import (
    LineCategory,
    Navigator,
    check_program,
    estimate_memory,
    memory_breakdown,
)
from hp35s_sdk.session import Session

logger = logging.getLogger(__name__)


# =============================================================================
# CLI Context and Utilities
# =============================================================================

class Context:
    """
    Shared context for CLI commands.

    Stores the configuration and verbosity.
    """

    def __init__(self) -> None:
        self.verbose: bool = False
        self.config: ToolConfig = ToolConfig.from_env()

    def setup_logging(self) -> None:
        """Configure logging based on verbosity."""
        level = logging.DEBUG if self.verbose else self.config.logging_level
        logging.basicConfig(
            level=level,
            format="%(levelname)s: %(name)s: %(message)s" if self.verbose else "%(message)s",
        )

    def load(self, source: Path) -> TextDocument:
        """Load a program file with the configured encoding."""
        return TextDocument.from_file(source, encoding=self.config.encoding)


pass_context = click.make_pass_decorator(Context, ensure=True)

SOURCE = click.Path(exists=True, dir_okay=False, path_type=Path)

CATEGORY_NAMES = {
    LineCategory.LABEL: "labels",
    LineCategory.RETURN: "returns",
    LineCategory.INSTRUCTION: "instructions",
    LineCategory.NUMERIC: "numbers",
    LineCategory.EQUATION: "equations",
}


def move_cursor(document: TextDocument, line: int) -> None:
    """Place the cursor on ``line``, reporting bad values as usage errors."""
    if line < 1 or line > document.line_count():
        raise click.BadParameter(
            f"line {line} is outside 1..{document.line_count()}",
            param_hint="'--line'",
        )
    document.set_cursor_line(line)


# =============================================================================
# Main CLI Group
# =============================================================================

@click.group()
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Enable verbose output",
)
@click.version_option(version=__version__, prog_name="hp35s")
@pass_context
def main(ctx: Context, verbose: bool) -> None:
    """
    HP 35s program toolkit.

    Work with HP 35s programs written one instruction per line: convert
    them to and from the numbered exchange format, estimate their memory
    use and look up program addresses.

    \b
    Commands:
      export    Write the numbered exchange format
      import    Convert exchange text to internal syntax
      estimate  Show program memory use
      report    Program address of a buffer line
      goto      Buffer line of a program address
      jump      Resolve a GTO/XEQ instruction
      check     Check labels, jumps and instructions
      shell     Interactive navigation session
    """
    ctx.verbose = verbose
    ctx.setup_logging()


# =============================================================================
# Conversion Commands
# =============================================================================

@main.command()
@click.argument("source", type=SOURCE)
@click.option(
    "-o", "--output",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Output file (default: SOURCE with the export suffix)",
)
@pass_context
def export(ctx: Context, source: Path, output: Optional[Path]) -> None:
    """
    Export SOURCE in the numbered exchange format.

    Every program line is prefixed with its address (A001, A002, ...).
    Comments are kept, blank lines are dropped.
    """
    try:
        output = output or source.with_suffix(ctx.config.export_suffix)
        if output.resolve() == source.resolve():
            raise click.BadParameter(
                "output would overwrite the source file", param_hint="'--output'"
            )
        document = ctx.load(source)
        count = export_to_file(document, output)
        click.echo(f"Exported {count} program lines to {output}")
    except Exception as e:
        handle_cli_exception(e, verbose=ctx.verbose, error_type="Export")


@main.command("import")
@click.argument("source", type=SOURCE)
@click.option(
    "-o", "--output",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Output program file (default: print to stdout)",
)
@pass_context
def import_(ctx: Context, source: Path, output: Optional[Path]) -> None:
    """
    Convert the exchange file SOURCE to internal syntax.

    Line numbers are removed, ';' comments become '#' comments and forum
    mnemonics (x^2, x<>y, STO+ ...) are translated.
    """
    try:
        encoding = ctx.config.encoding
        external = read_exchange_file(
            lambda path: path.read_text(encoding=encoding), source, encoding
        )
        lines = import_program(external)
        text = "".join(line + "\n" for line in lines)
        if output is None:
            click.echo(text, nl=False)
        else:
            output.write_text(text, encoding=encoding)
            click.echo(f"Imported {len(lines)} lines to {output}")
    except Exception as e:
        handle_cli_exception(e, verbose=ctx.verbose, error_type="Import")


# =============================================================================
# Report Commands
# =============================================================================

@main.command()
@click.argument("source", type=SOURCE)
@click.option(
    "--detailed", "-d",
    is_flag=True,
    help="Show bytes per line category",
)
@pass_context
def estimate(ctx: Context, source: Path, detailed: bool) -> None:
    """Estimate the calculator memory used by SOURCE."""
    try:
        document = ctx.load(source)
        breakdown = memory_breakdown(document)
        total = estimate_memory(document, breakdown)
        if detailed:
            for category, name in CATEGORY_NAMES.items():
                click.echo(f"  {name:<13}{breakdown.get(category, 0):>6} bytes")
        click.echo(f"Program uses {total} bytes")
    except Exception as e:
        handle_cli_exception(e, verbose=ctx.verbose)


@main.command()
@click.argument("source", type=SOURCE)
@click.option("--line", "-l", "line", type=int, required=True,
              help="Buffer line number (1-based)")
@pass_context
def report(ctx: Context, source: Path, line: int) -> None:
    """Show the program address of buffer line LINE."""
    try:
        document = ctx.load(source)
        move_cursor(document, line)
        click.echo(Navigator().report_current_line(document))
    except Exception as e:
        handle_cli_exception(e, verbose=ctx.verbose)


@main.command()
@click.argument("source", type=SOURCE)
@click.argument("spec")
@pass_context
def goto(ctx: Context, source: Path, spec: str) -> None:
    """
    Show the buffer line holding program address SPEC.

    SPEC is an address such as A031, or just the line number 31.
    """
    try:
        document = ctx.load(source)
        buffer_line = Navigator().goto_line(document, spec)
        click.echo(f"{spec} is on line {buffer_line}: {document.read_line(buffer_line).strip()}")
    except Exception as e:
        handle_cli_exception(e, verbose=ctx.verbose)


@main.command()
@click.argument("source", type=SOURCE)
@click.option("--line", "-l", "line", type=int, required=True,
              help="Buffer line of the GTO/XEQ instruction")
@pass_context
def jump(ctx: Context, source: Path, line: int) -> None:
    """Resolve the GTO/XEQ instruction on buffer line LINE."""
    try:
        document = ctx.load(source)
        move_cursor(document, line)
        result = Navigator().jump_forward(document)
        click.echo(f"{result.mnemonic} {result.target} -> line {result.buffer_line}")
    except Exception as e:
        handle_cli_exception(e, verbose=ctx.verbose)


@main.command()
@click.argument("source", type=SOURCE)
@pass_context
def check(ctx: Context, source: Path) -> None:
    """
    Check SOURCE for label, jump target and instruction problems.

    Exits with status 1 if any error is found; warnings alone pass.
    """
    try:
        report_ = check_program(ctx.load(source))
    except Exception as e:
        handle_cli_exception(e, verbose=ctx.verbose)

    for diagnostic in report_.diagnostics:
        click.echo(str(diagnostic), err=True)
    click.echo(f"{len(report_.errors)} error(s), {len(report_.warnings)} warning(s)")
    if not report_.ok:
        raise SystemExit(ExitCode.PROGRAM_ERROR)


# =============================================================================
# Interactive Shell
# =============================================================================

SHELL_HELP = """\
Commands:
  line N        move the cursor to buffer line N
  show          print the cursor line
  report        program address of the cursor line
  jump          follow the GTO/XEQ on the cursor line
  back          return to where the last jump started
  goto SPEC     move to program address SPEC (A031 or 31)
  estimate      program memory use
  export PATH   write the exchange format to PATH
  import PATH   insert an exchange file at the cursor
  write         save the program back to its file
  quit          leave the shell"""


def run_shell_command(session: Session, source: Path, ctx: Context,
                      command: str, args: list[str]) -> bool:
    """
    Execute one shell command.

    Returns:
        False when the shell should exit
    """
    document = session.document
    if command in ("quit", "exit", "q"):
        return False
    if command == "help":
        click.echo(SHELL_HELP)
        return True
    if command == "line" and len(args) == 1 and args[0].isdigit():
        number = int(args[0])
        if 1 <= number <= document.line_count():
            document.set_cursor_line(number)
            click.echo(f"{number}: {document.read_current_line()}")
        else:
            click.echo(f"error: line {number} is outside 1..{document.line_count()}")
        return True
    if command == "show":
        click.echo(f"{document.cursor_line()}: {document.read_current_line()}")
        return True
    if command == "write":
        source.write_text(document.text, encoding=ctx.config.encoding)
        click.echo(f"Wrote {source}")
        return True

    operations = {
        "report": (0, lambda: session.report_current_line()),
        "jump": (0, lambda: session.jump_forward()),
        "back": (0, lambda: session.jump_back()),
        "estimate": (0, lambda: session.estimate_memory()),
        "goto": (1, lambda: session.goto_line(args[0])),
        "export": (1, lambda: session.export(args[0])),
        "import": (1, lambda: session.import_file(args[0])),
    }
    if command not in operations or len(args) != operations[command][0]:
        click.echo(f"error: unknown command '{' '.join([command, *args])}' (try 'help')")
        return True

    result = operations[command][1]()
    click.echo(result.message if result.ok else f"error: {result.message}")
    return True


@main.command()
@click.argument("source", type=SOURCE)
@pass_context
def shell(ctx: Context, source: Path) -> None:
    """
    Open SOURCE in an interactive navigation session.

    The session keeps the jump history, so 'jump' followed by 'back'
    returns to the jump instruction. Type 'help' for the command list.
    """
    try:
        session = Session(ctx.load(source))
    except Exception as e:
        handle_cli_exception(e, verbose=ctx.verbose)

    click.echo(f"{source}: {session.document.line_count()} lines. Type 'help' for commands.")
    while True:
        try:
            raw = click.prompt(f"{session.document.cursor_line()}", default="",
                               show_default=False, prompt_suffix="> ")
        except click.Abort:
            click.echo()
            break
        try:
            parts = shlex.split(raw)
        except ValueError as e:
            click.echo(f"error: {e}")
            continue
        if not parts:
            continue
        if not run_shell_command(session, source, ctx, parts[0], parts[1:]):
            break


if __name__ == "__main__":
    main()
