"""CLI entry point for notorious."""

from __future__ import annotations

import sys
from typing import Annotated

import typer

from notorious.errors import ConfigurationError
from notorious.log import get_logger
from notorious.options import build_options
from notorious.reader import prepare_stdio
from notorious.runner import run

app = typer.Typer(add_completion=False, context_settings={"help_option_names": ["-h", "--help"]})


@app.command()
def grep(  # noqa: PLR0913
    patterns: Annotated[list[str] | None, typer.Argument(metavar="PATTERN", help="Pattern to match")] = None,
    after: Annotated[
        int, typer.Option("--after-context", "-A", help="How many lines of context after the match to print")
    ] = 0,
    before: Annotated[
        int, typer.Option("--before-context", "-B", help="How many lines of context before the match to print")
    ] = 0,
    context: Annotated[
        int, typer.Option("--context", "-C", help="How many lines of context around the match to print")
    ] = 0,
    ignore_case: Annotated[bool, typer.Option("--ignore-case", "-i", help="Ignore case in matches")] = False,  # noqa: FBT002
    line_numbers: Annotated[
        bool, typer.Option("--line-number", "-n", help="Prefix lines with their zero-based line number")
    ] = False,  # noqa: FBT002
    literal: Annotated[
        bool, typer.Option("--literal", "-e", help="Match whole lines using string literals instead of patterns")
    ] = False,  # noqa: FBT002
    posix: Annotated[bool, typer.Option("--posix", "-posix", help="Use POSIX extended regular expressions")] = False,  # noqa: FBT002
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Verbose debug info on stderr")] = False,  # noqa: FBT002
) -> None:
    """Print lines of stdin matching PATTERN, with optional context."""
    try:
        options = build_options(
            patterns or [],
            before=before,
            after=after,
            context=context,
            ignore_case=ignore_case,
            line_numbers=line_numbers,
            literal=literal,
            posix=posix,
            verbose=verbose,
            logger=get_logger(sys.stderr, verbose=verbose),
        )
    except ConfigurationError as e:
        typer.echo(
            f"ERROR parsing command-line options: {e}. Try notorious --help for more information on command-line flags.",
            err=True,
        )
        raise typer.Exit(1)  # noqa: B904

    prepare_stdio(sys.stdin, sys.stdout, sys.stderr)
    try:
        run(options, sys.stdin, sys.stdout, sys.stderr)
    except OSError as e:
        typer.echo(f"ERROR running notorious: {e}", err=True)
        raise typer.Exit(1)  # noqa: B904


def main() -> None:
    """Entry point for the CLI."""
    app()
