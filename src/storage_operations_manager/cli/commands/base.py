"""Shared options and error reporting for CLI commands."""

from __future__ import annotations

from typing import Annotated, NoReturn

import typer
from rich.console import Console
from rich.markup import escape

from storage_operations_manager.cli.output import OutputFormat
from storage_operations_manager.integrations.ontap.exceptions import OntapOperationError
from storage_operations_manager.services.ontap.diagnostics import Diagnostics

console = Console()
err_console = Console(stderr=True)


OutputOption = Annotated[
    OutputFormat,
    typer.Option(
        "--output",
        "-o",
        help="Output format: table, json, or yaml",
        case_sensitive=False,
    ),
]

SvmOption = Annotated[
    str | None,
    typer.Option(
        "--svm",
        "-s",
        help="Owning SVM name (omit for cluster scope)",
    ),
]

VolumeUuidOption = Annotated[
    str,
    typer.Option(
        "--volume-uuid",
        "-V",
        help="UUID of the volume owning the snapshots",
    ),
]

ForceOption = Annotated[
    bool,
    typer.Option(
        "--force",
        "-f",
        help="Skip confirmation prompts",
    ),
]


def render_diagnostics(diagnostics: Diagnostics) -> None:
    """Print every reported diagnostic."""
    for diagnostic in diagnostics:
        color = "red" if diagnostic.severity == "error" else "yellow"
        label = diagnostic.severity.capitalize()
        err_console.print(f"[{color}]{label}:[/{color}] {escape(diagnostic.summary)}")
        err_console.print(f"  {escape(diagnostic.detail)}", highlight=False)


def handle_ontap_error(error: OntapOperationError) -> NoReturn:
    """Report a classified error and exit with status 1."""
    diagnostics = Diagnostics()
    diagnostics.report(error)
    render_diagnostics(diagnostics)
    raise typer.Exit(1)


def fail(summary: str, detail: str) -> NoReturn:
    """Report a command-level error and exit with status 1."""
    diagnostics = Diagnostics()
    diagnostics.add_error(summary, detail)
    render_diagnostics(diagnostics)
    raise typer.Exit(1)


def confirm_delete(resource: str, identifier: str) -> bool:
    return typer.confirm(
        f"Are you sure you want to delete {resource} '{identifier}'?",
        default=False,
    )
