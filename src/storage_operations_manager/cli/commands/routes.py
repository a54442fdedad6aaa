"""CLI commands for ONTAP network IP routes.

- get: Look up the route to a destination
- create: Create a route
- delete: Delete a route by UUID
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Annotated

import typer

from storage_operations_manager.cli.commands.base import (
    ForceOption,
    OutputOption,
    SvmOption,
    confirm_delete,
    console,
    handle_ontap_error,
)
from storage_operations_manager.cli.output import OutputFormat, get_formatter
from storage_operations_manager.integrations.ontap.exceptions import OntapOperationError
from storage_operations_manager.integrations.ontap.models.route import IPRouteBody

if TYPE_CHECKING:
    from storage_operations_manager.services.ontap.session import OntapSession


def register_route_commands(app: typer.Typer, get_session: Callable[[], OntapSession]) -> None:
    """Register the ``routes`` command group.

    Args:
        app: Typer app to register commands on.
        get_session: Factory returning the session for the selected profile.
    """
    routes_app = typer.Typer(
        name="routes",
        help="Manage network IP routes",
        no_args_is_help=True,
    )

    @routes_app.command("get")
    def get_route(
        destination: Annotated[
            str, typer.Option("--destination", "-d", help="Destination address")
        ],
        svm: SvmOption = None,
        output: OutputOption = OutputFormat.TABLE,
    ) -> None:
        """Get the route to a destination.

        Examples:
            storage-ops routes get --destination 10.0.0.0
            storage-ops routes get -d 10.0.0.0 --svm vs1 --output json
        """
        try:
            session = get_session()
            route = session.routes.get(destination, svm, version=session.version)
        except OntapOperationError as e:
            handle_ontap_error(e)

        if route is None:
            scope = f"SVM '{svm}'" if svm else "cluster scope"
            console.print(f"[yellow]No route to {destination} in {scope}[/yellow]")
            return
        get_formatter(output, console).format_record(route, title=f"Route: {destination}")

    @routes_app.command("create")
    def create_route(
        destination: Annotated[
            str, typer.Option("--destination", "-d", help="Destination address")
        ],
        netmask: Annotated[
            str, typer.Option("--netmask", "-m", help="Prefix length or IPv4 mask")
        ],
        svm: SvmOption = None,
        gateway: Annotated[
            str | None, typer.Option("--gateway", "-g", help="Next-hop gateway address")
        ] = None,
        metric: Annotated[
            int | None, typer.Option("--metric", help="Route preference metric", min=0)
        ] = None,
        output: OutputOption = OutputFormat.TABLE,
    ) -> None:
        """Create a route.

        Examples:
            storage-ops routes create -d 10.0.0.0 -m 24 -g 10.0.0.1
            storage-ops routes create -d 0.0.0.0 -m 0 -g 192.168.1.1 --svm vs1 --metric 20
        """
        body = IPRouteBody.build(
            destination, netmask, svm_name=svm, gateway=gateway, metric=metric
        )
        try:
            route = get_session().routes.create(body)
        except OntapOperationError as e:
            handle_ontap_error(e)

        console.print(f"[green]Route created[/green] (uuid: {route.uuid})")
        get_formatter(output, console).format_record(route, title=f"Route: {destination}")

    @routes_app.command("delete")
    def delete_route(
        uuid: Annotated[str, typer.Argument(help="Route UUID")],
        force: ForceOption = False,
    ) -> None:
        """Delete a route by UUID.

        Examples:
            storage-ops routes delete 5fd5ac67-2ec5-11ef-9a6b-005056bb6b4c --force
        """
        if not force and not confirm_delete("route", uuid):
            console.print("[yellow]Cancelled[/yellow]")
            raise typer.Exit(0)
        try:
            get_session().routes.delete(uuid)
        except OntapOperationError as e:
            handle_ontap_error(e)

        console.print(f"[green]Route '{uuid}' deleted[/green]")

    app.add_typer(routes_app, name="routes")
