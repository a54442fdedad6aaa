"""Output formatters for records.

Records print as a two-column table by default, or as JSON / YAML in the
API's own nested shape for scripting.
"""

from __future__ import annotations

import json
from collections.abc import Sequence
from enum import StrEnum
from typing import TYPE_CHECKING, Any

import yaml
from rich.table import Table

if TYPE_CHECKING:
    from rich.console import Console

    from storage_operations_manager.integrations.ontap.models.base import OntapRecordBase


class OutputFormat(StrEnum):
    """Supported output formats for CLI commands."""

    TABLE = "table"
    JSON = "json"
    YAML = "yaml"


def _flatten(data: dict[str, Any], prefix: str = "") -> dict[str, Any]:
    """Flatten nested objects into dotted keys (``destination.address``)."""
    flat: dict[str, Any] = {}
    for key, value in data.items():
        name = f"{prefix}{key}"
        if isinstance(value, dict):
            flat.update(_flatten(value, f"{name}."))
        else:
            flat[name] = value
    return flat


class OutputFormatter:
    """Prints records to a Rich console in the chosen format."""

    def __init__(self, console: Console, output: OutputFormat = OutputFormat.TABLE) -> None:
        self.console = console
        self.output = output

    def format_record(self, record: OntapRecordBase, title: str = "") -> None:
        data = record.to_raw()
        if self.output is OutputFormat.TABLE:
            table = Table(title=title or "Record", show_header=True)
            table.add_column("Field", style="cyan", no_wrap=True)
            table.add_column("Value", style="green", overflow="fold")
            for field, value in _flatten(data).items():
                table.add_row(field, str(value))
            self.console.print(table)
        else:
            self._dump(data)

    def format_list(
        self,
        records: Sequence[OntapRecordBase],
        columns: list[tuple[str, str]],
        title: str = "",
    ) -> None:
        """Print records; ``columns`` are (dotted field, header) pairs for tables."""
        rows = [_flatten(record.to_raw()) for record in records]
        if self.output is not OutputFormat.TABLE:
            self._dump([record.to_raw() for record in records])
            return
        table = Table(title=title or None, show_header=True)
        for _, header in columns:
            table.add_column(header, overflow="fold")
        for row in rows:
            table.add_row(*(str(row.get(field, "")) for field, _ in columns))
        self.console.print(table)

    def _dump(self, data: Any) -> None:
        if self.output is OutputFormat.JSON:
            self.console.print_json(json.dumps(data))
        else:
            self.console.print(yaml.safe_dump(data, sort_keys=False), end="")


def get_formatter(output: OutputFormat, console: Console) -> OutputFormatter:
    return OutputFormatter(console, output)
