"""Output rendering for conversion records.

Three output formats are supported:

* ``table`` — a Rich table (plain tab-separated lines without Rich);
* ``json`` — a JSON array of records using the ``GUID`` /
  ``ImmutableID`` field names;
* ``plain`` — one ``input<TAB>output`` line per record.

All display-related logic lives here — no parsing, no conversion.
"""

from __future__ import annotations

import json
from collections.abc import Sequence
from typing import Any

from immutable_id.cli.console import out
from immutable_id.core.models import ConversionRecord

OUTPUT_FORMATS: tuple[str, ...] = ("table", "json", "plain")
DEFAULT_FORMAT: str = "table"


def _import_rich_table() -> type[Any] | None:
    """Import rich table lazily; ``None`` when Rich is missing."""
    try:
        from rich.table import Table
    except ModuleNotFoundError:
        return None
    return Table


# ---------------------------------------------------------------------------
# Presentation helpers (pure transforms — no I/O themselves)
# ---------------------------------------------------------------------------

def _columns(records: Sequence[ConversionRecord]) -> tuple[str, str]:
    """Return the ``(input, output)`` header names for *records*."""
    if not records:
        return ("Input", "Output")
    first, second = records[0].as_dict()
    return (first, second)


def records_to_json(records: Sequence[ConversionRecord]) -> str:
    """Serialise *records* as a JSON array."""
    return json.dumps([record.as_dict() for record in records], indent=2)


def records_to_lines(records: Sequence[ConversionRecord]) -> list[str]:
    """Render *records* as ``input<TAB>output`` lines."""
    return [f"{record.source}\t{record.result}" for record in records]


# ---------------------------------------------------------------------------
# Output
# ---------------------------------------------------------------------------

def _print_plain(records: Sequence[ConversionRecord]) -> None:
    for line in records_to_lines(records):
        print(line)


def _print_table(records: Sequence[ConversionRecord]) -> None:
    table_class = _import_rich_table()
    if table_class is None:
        _print_plain(records)
        return

    source_header, result_header = _columns(records)
    table = table_class(
        show_header=True,
        header_style="bold magenta",
        border_style="dim",
    )
    table.add_column(source_header, justify="left", no_wrap=True)
    table.add_column(result_header, justify="left", no_wrap=True)

    for record in records:
        table.add_row(record.source, record.result)

    out.print(table)


def render_records(
    records: Sequence[ConversionRecord],
    output_format: str = DEFAULT_FORMAT,
) -> None:
    """Write *records* to stdout in *output_format*."""
    if output_format == "json":
        print(records_to_json(records))
    elif output_format == "plain":
        _print_plain(records)
    else:
        _print_table(records)
