"""Rich table builders used by the CLI.

Kept separate to reduce duplication and keep the command module smaller.
"""

from __future__ import annotations

from typing import Any

from rich.table import Table

from mockrender.core.validator import ValidationError


def build_signatures_table(rows: list[dict[str, Any]]) -> Table:
    """Build a (Method, Mocking, Matching) signature table."""
    table = Table(show_header=True, title="Signatures")
    table.add_column("Method", style="cyan")
    table.add_column("Mocking")
    table.add_column("Matching")
    for row in rows:
        table.add_row(row["method"], row["mocking"], "\n".join(row["matching"]) or "-")
    return table


def build_validation_table(errors: list[ValidationError]) -> Table:
    """Build validation issue table for `validate`."""
    table = Table(show_header=True, title="Validation Issues")
    table.add_column("Method", style="cyan")
    table.add_column("Issue")
    table.add_column("Message")
    for error in errors:
        table.add_row(error.method_name, error.error_type.value, error.message)
    return table
