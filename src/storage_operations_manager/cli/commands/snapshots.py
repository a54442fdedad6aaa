"""CLI commands for ONTAP volume snapshots."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Annotated

import typer

from storage_operations_manager.cli.commands.base import (
    ForceOption,
    OutputOption,
    VolumeUuidOption,
    confirm_delete,
    console,
    fail,
    handle_ontap_error,
)
from storage_operations_manager.cli.output import OutputFormat, get_formatter
from storage_operations_manager.integrations.ontap.exceptions import OntapOperationError
from storage_operations_manager.integrations.ontap.models.snapshot import (
    VolumeSnapshotBody,
    VolumeSnapshotUpdate,
)

if TYPE_CHECKING:
    from storage_operations_manager.services.ontap.session import OntapSession

SNAPSHOT_COLUMNS = [
    ("name", "Name"),
    ("uuid", "UUID"),
    ("create_time", "Created"),
    ("state", "State"),
    ("snapmirror_label", "SnapMirror Label"),
    ("comment", "Comment"),
]

CommentOption = Annotated[str | None, typer.Option("--comment", "-c", help="Comment")]
ExpiryOption = Annotated[
    str | None, typer.Option("--expiry-time", help="Expiry time (ISO 8601)")
]
LabelOption = Annotated[
    str | None, typer.Option("--snapmirror-label", "-l", help="SnapMirror label")
]


def register_snapshot_commands(
    app: typer.Typer, get_session: Callable[[], OntapSession]
) -> None:
    """Register the ``snapshots`` command group."""
    snapshots_app = typer.Typer(
        name="snapshots",
        help="Manage volume snapshots",
        no_args_is_help=True,
    )

    @snapshots_app.command("get")
    def get_snapshot(
        name: Annotated[str, typer.Argument(help="Snapshot name")],
        volume_uuid: VolumeUuidOption,
        output: OutputOption = OutputFormat.TABLE,
    ) -> None:
        """Get a snapshot by name. A missing snapshot is reported as an error.

        Examples:
            storage-ops snapshots get daily.2024-06-01 --volume-uuid <uuid>
        """
        try:
            session = get_session()
            snapshot = session.snapshots.get(name, volume_uuid, version=session.version)
        except OntapOperationError as e:
            handle_ontap_error(e)

        if snapshot is None:
            fail("No snapshot found", f"snapshot {name} not found.")
        get_formatter(output, console).format_record(snapshot, title=f"Snapshot: {name}")

    @snapshots_app.command("list")
    def list_snapshots(
        volume_uuid: VolumeUuidOption,
        names: Annotated[
            list[str] | None,
            typer.Option("--name", "-n", help="Only snapshots with this name (repeatable)"),
        ] = None,
        output: OutputOption = OutputFormat.TABLE,
    ) -> None:
        """List snapshots of a volume."""
        try:
            session = get_session()
            snapshots = session.snapshots.list(volume_uuid, names, version=session.version)
        except OntapOperationError as e:
            handle_ontap_error(e)

        get_formatter(output, console).format_list(
            snapshots, SNAPSHOT_COLUMNS, title=f"Snapshots of volume {volume_uuid}"
        )

    @snapshots_app.command("create")
    def create_snapshot(
        name: Annotated[str, typer.Argument(help="Snapshot name")],
        volume_uuid: VolumeUuidOption,
        comment: CommentOption = None,
        expiry_time: ExpiryOption = None,
        snapmirror_label: LabelOption = None,
        output: OutputOption = OutputFormat.TABLE,
    ) -> None:
        """Create a snapshot of a volume."""
        body = VolumeSnapshotBody(
            name=name,
            comment=comment,
            expiry_time=expiry_time,
            snapmirror_label=snapmirror_label,
        )
        try:
            snapshot = get_session().snapshots.create(volume_uuid, body)
        except OntapOperationError as e:
            handle_ontap_error(e)

        console.print(f"[green]Snapshot created[/green] (uuid: {snapshot.uuid})")
        get_formatter(output, console).format_record(snapshot, title=f"Snapshot: {name}")

    @snapshots_app.command("update")
    def update_snapshot(
        uuid: Annotated[str, typer.Argument(help="Snapshot UUID")],
        volume_uuid: VolumeUuidOption,
        new_name: Annotated[
            str | None, typer.Option("--new-name", help="Rename the snapshot")
        ] = None,
        comment: CommentOption = None,
        expiry_time: ExpiryOption = None,
        snapmirror_label: LabelOption = None,
    ) -> None:
        """Modify a snapshot's name, comment, expiry time or SnapMirror label."""
        body = VolumeSnapshotUpdate(
            name=new_name,
            comment=comment,
            expiry_time=expiry_time,
            snapmirror_label=snapmirror_label,
        )
        if not body.to_body():
            fail("Nothing to update", "pass at least one of --new-name, --comment, "
                 "--expiry-time, --snapmirror-label")
        try:
            get_session().snapshots.update(volume_uuid, uuid, body)
        except OntapOperationError as e:
            handle_ontap_error(e)

        console.print(f"[green]Snapshot '{uuid}' updated[/green]")

    @snapshots_app.command("delete")
    def delete_snapshot(
        uuid: Annotated[str, typer.Argument(help="Snapshot UUID")],
        volume_uuid: VolumeUuidOption,
        force: ForceOption = False,
    ) -> None:
        """Delete a snapshot by UUID."""
        if not force and not confirm_delete("snapshot", uuid):
            console.print("[yellow]Cancelled[/yellow]")
            raise typer.Exit(0)
        try:
            get_session().snapshots.delete(volume_uuid, uuid)
        except OntapOperationError as e:
            handle_ontap_error(e)

        console.print(f"[green]Snapshot '{uuid}' deleted[/green]")

    app.add_typer(snapshots_app, name="snapshots")
