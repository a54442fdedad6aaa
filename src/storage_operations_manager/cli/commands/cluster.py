"""CLI commands for cluster information."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

import typer

from storage_operations_manager.cli.commands.base import (
    OutputOption,
    console,
    handle_ontap_error,
)
from storage_operations_manager.cli.output import OutputFormat, get_formatter
from storage_operations_manager.integrations.ontap.exceptions import OntapOperationError

if TYPE_CHECKING:
    from storage_operations_manager.services.ontap.session import OntapSession


def register_cluster_commands(app: typer.Typer, get_session: Callable[[], OntapSession]) -> None:
    """Register the ``cluster`` command group."""
    cluster_app = typer.Typer(name="cluster", help="Cluster information", no_args_is_help=True)

    @cluster_app.command("show")
    def show_cluster(output: OutputOption = OutputFormat.TABLE) -> None:
        """Show cluster name, UUID and version."""
        try:
            cluster = get_session().cluster.get_cluster()
        except OntapOperationError as e:
            handle_ontap_error(e)
        get_formatter(output, console).format_record(cluster, title="Cluster")

    @cluster_app.command("version")
    def show_version() -> None:
        """Print the cluster software version (generation.major.minor)."""
        try:
            version = get_session().version
        except OntapOperationError as e:
            handle_ontap_error(e)
        console.print(str(version))

    app.add_typer(cluster_app, name="cluster")
