"""Output formatting for CLI commands."""

from storage_operations_manager.cli.output.formatters import (
    OutputFormat,
    OutputFormatter,
    get_formatter,
)

__all__ = ["OutputFormat", "OutputFormatter", "get_formatter"]
