"""CLI application entry point and command routing for immutable-id.

This module is the **sole error boundary** for the entire application.
It catches :class:`~immutable_id.exceptions.ImmutableIdError`,
``KeyboardInterrupt``, and any unexpected ``Exception``, rendering
user-friendly messages and returning well-defined exit codes.

Architecture notes
------------------
* No conversion logic lives here — all work is delegated to the core
  layer.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Callable, Iterable, Sequence
from typing import TextIO

from immutable_id.cli import exit_codes
from immutable_id.cli.console import console, escape
from immutable_id.cli.log import configure_logging
from immutable_id.cli.render import DEFAULT_FORMAT, OUTPUT_FORMATS, render_records
from immutable_id.core.converter import guids_to_immutable_ids, immutable_ids_to_guids
from immutable_id.core.models import ConversionRecord
from immutable_id.exceptions import ImmutableIdError, InvalidInputError
from immutable_id.version import __version__

logger = logging.getLogger(__name__)

_CONVERTERS: dict[str, Callable[[Iterable[str]], Sequence[ConversionRecord]]] = {
    "to-immutable-id": guids_to_immutable_ids,
    "to-guid": immutable_ids_to_guids,
}


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _add_conversion_arguments(parser: argparse.ArgumentParser, noun: str) -> None:
    parser.add_argument(
        "values",
        nargs="*",
        metavar="VALUE",
        help=f"{noun} value(s). Read from stdin (one per line) when omitted or '-'.",
    )
    parser.add_argument(
        "-f",
        "--format",
        dest="output_format",
        choices=OUTPUT_FORMATS,
        default=DEFAULT_FORMAT,
        help=f"Output format (default: {DEFAULT_FORMAT}).",
    )


def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    The CLI supports:
    * ``immutable-id to-immutable-id <guid> ...``  (alias ``encode``)
    * ``immutable-id to-guid <immutable-id> ...``  (alias ``decode``)
    * ``immutable-id --version``
    """
    parser = argparse.ArgumentParser(
        prog="immutable-id",
        description="Convert between GUIDs and Base64 ImmutableIDs.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging on stderr.",
    )

    subparsers = parser.add_subparsers(dest="command")

    encode = subparsers.add_parser(
        "to-immutable-id",
        aliases=["encode"],
        help="Convert GUID(s) to ImmutableID(s).",
    )
    _add_conversion_arguments(encode, "GUID")
    encode.set_defaults(command="to-immutable-id")

    decode = subparsers.add_parser(
        "to-guid",
        aliases=["decode"],
        help="Convert ImmutableID(s) to GUID(s).",
    )
    _add_conversion_arguments(decode, "ImmutableID")
    decode.set_defaults(command="to-guid")

    return parser


# ---------------------------------------------------------------------------
# Input gathering
# ---------------------------------------------------------------------------

def _read_stream(stream: TextIO) -> list[str]:
    """Return non-blank, stripped lines from *stream*."""
    return [line.strip() for line in stream if line.strip()]


def _collect_values(values: Sequence[str], stdin: TextIO) -> list[str]:
    """Resolve positional values, falling back to piped stdin."""
    if not values or list(values) == ["-"]:
        if stdin.isatty():
            return []
        logger.debug("Reading values from stdin")
        return _read_stream(stdin)
    return list(values)


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _handle_convert(
    command: str,
    values: Sequence[str],
    output_format: str,
    stdin: TextIO,
) -> int:
    """Convert every value with *command* and render the records."""
    inputs = _collect_values(values, stdin)
    if not inputs:
        raise InvalidInputError(
            "No values to convert.",
            hint="Pass values as arguments or pipe them on stdin.",
        )

    records = _CONVERTERS[command](inputs)
    render_records(records, output_format)
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None, *, stdin: TextIO | None = None) -> int:
    """Run the immutable-id CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.
    stdin:
        Stream to read piped values from.  Defaults to ``sys.stdin``.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=args.verbose)

    if args.command is None:
        parser.print_help()
        return exit_codes.SUCCESS

    return _handle_convert(
        args.command,
        args.values,
        args.output_format,
        stdin if stdin is not None else sys.stdin,
    )


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except ImmutableIdError as exc:
        console.print(f"[bold red]Error:[/bold red] {escape(str(exc))}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {escape(exc.hint)}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {exc}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
