"""
Command-line driver for the Solace compiler front end.

    solace file.solace [more.solace ...]
    solace --tokens file.solace
    solace -v

Each file is lexed in order. Non-fatal diagnostics are printed and the
pass continues; a fatal lexer error stops the run with exit status 1.
"""

import sys
from pathlib import Path
from typing import Tuple

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from . import __version__
from .config import LexerConfig, lexer_config_context
from .lexer import LexerError, TokenSequence, tokenize_file
from .utils.logger import configure_logging, get_logger

logger = get_logger(__name__)

console = Console(soft_wrap=True)
err_console = Console(stderr=True, soft_wrap=True)


def check_extension(path: Path, extension: str) -> None:
    """Reject files that are not Solace sources."""
    if path.suffix != extension:
        raise click.BadParameter(
            f"'{path}' is not a Solace source file (expected a '{extension}' extension)",
            param_hint="FILES",
        )


def print_tokens(tokens: TokenSequence) -> None:
    table = Table(title=f"{escape(tokens.source_name)} ({len(tokens)} tokens)")
    table.add_column("Line", justify="right")
    table.add_column("Col", justify="right")
    table.add_column("Kind")
    table.add_column("Lexeme")
    for token in tokens:
        table.add_row(
            str(token.line), str(token.column), token.kind.name, Text(repr(token.lexeme)),
            style="red" if token.is_error else None,
        )
    console.print(table)


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(
    __version__, "-v", "--version",
    prog_name="Solace compiler",
    message="%(prog)s\n   - version %(version)s",
)
@click.option("--tokens", "show_tokens", is_flag=True, help="Print the token table for each file.")
@click.option("--end-of-line/--no-end-of-line", default=False,
              help="Emit an END_OF_LINE token for every newline.")
@click.option("--log-level", default="WARNING",
              type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
              help="Logging verbosity.")
@click.argument("files", nargs=-1, type=click.Path(dir_okay=False, path_type=Path))
def main(files: Tuple[Path, ...], show_tokens: bool, end_of_line: bool, log_level: str) -> None:
    """Lex Solace source FILES."""
    configure_logging(log_level)

    if not files:
        console.print("No file was given:: file specification required", markup=False)
        console.print("Example::  solace file.solace", markup=False)
        return

    config = LexerConfig(emit_end_of_line=end_of_line)
    for path in files:
        check_extension(path, config.source_extension)

    diagnostics = 0
    with lexer_config_context(config):
        for path in files:
            logger.info("Lexing %s", path)
            try:
                tokens = tokenize_file(path)
            except LexerError as e:
                err_console.print(str(e), markup=False, highlight=False)
                sys.exit(1)

            for warning in tokens.diagnostics:
                err_console.print(str(warning), markup=False, highlight=False)
            diagnostics += len(tokens.diagnostics)

            if show_tokens:
                print_tokens(tokens)

    if diagnostics:
        err_console.print(f"{diagnostics} problem(s) found", markup=False, highlight=False)
        sys.exit(1)


if __name__ == "__main__":
    main()
