"""Output formats for records printed by the command line tool."""

from collections.abc import Iterator
import json
from typing import Any, TextIO

import yaml

COLUMN_GAP = 4
JSON_INDENT = 4


def format_table(keys: list[str], rows: list[dict[str, Any]]) -> Iterator[str]:
    """Yield the rows as left aligned columns under an upper case header."""
    table = [[key.upper() for key in keys]]
    table.extend([str(row[key]) for key in keys] for row in rows)
    widths = [max(len(cell) for cell in column) for column in zip(*table)]
    for line in table:
        yield "".join(
            cell.ljust(width + COLUMN_GAP) for cell, width in zip(line, widths)
        ).rstrip()


def format_yaml(docs: list[dict[str, Any]]) -> str:
    """Return the serialized records as a yaml document."""
    return yaml.dump(docs, sort_keys=False, explicit_start=True).rstrip("\n")


def format_json(docs: list[dict[str, Any]]) -> str:
    """Return the serialized records as a json array."""
    return json.dumps(docs, indent=JSON_INDENT)


def print_records(
    output: str,
    keys: list[str],
    rows: list[dict[str, Any]],
    docs: list[dict[str, Any]],
    file: TextIO | None = None,
) -> None:
    """Print records as a table of `rows`, or `docs` in a structured format."""
    if output == "yaml":
        print(format_yaml(docs), file=file)
    elif output == "json":
        print(format_json(docs), file=file)
    elif not rows:
        print("No records found", file=file)
    else:
        for line in format_table(keys, rows):
            print(line, file=file)
