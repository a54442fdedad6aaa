"""Main CLI entry point using Typer."""

from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console

from storage_operations_manager import __version__
from storage_operations_manager.cli.commands import init
from storage_operations_manager.cli.commands.cluster import register_cluster_commands
from storage_operations_manager.cli.commands.routes import register_route_commands
from storage_operations_manager.cli.commands.snapshots import register_snapshot_commands
from storage_operations_manager.core.config import SystemConfig, load_config, load_raw_config
from storage_operations_manager.integrations.ontap.exceptions import OntapValidationError
from storage_operations_manager.logging.config import configure_logging
from storage_operations_manager.services.ontap.session import OntapSession

app = typer.Typer(
    name="storage-ops",
    help="Manage ONTAP storage clusters through the REST API.",
    add_completion=True,
    no_args_is_help=True,
)

console = Console()


class SessionState:
    """Opens the cluster session on first use and closes it at exit."""

    def __init__(self) -> None:
        self.config_path: Path | None = None
        self.profile: str | None = None
        self._session: OntapSession | None = None

    def get_session(self) -> OntapSession:
        if self._session is None:
            try:
                config = load_config(self.config_path)
            except ValueError as e:
                raise OntapValidationError("invalid configuration", str(e)) from e
            if config is None:
                config = SystemConfig()
            profile = config.get_profile(self.profile)
            self._session = OntapSession.from_profile(profile)
        return self._session

    def close(self) -> None:
        if self._session is not None:
            self._session.close()
            self._session = None


state = SessionState()


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"storage-ops version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    version: bool | None = typer.Option(
        None,
        "--version",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose output.",
    ),
    debug: bool = typer.Option(
        False,
        "--debug",
        help="Enable debug mode.",
    ),
    config: Path | None = typer.Option(
        None,
        "--config",
        help="Path to the configuration file.",
        envvar="STORAGE_OPS_CONFIG",
    ),
    profile: str | None = typer.Option(
        None,
        "--profile",
        "-p",
        help="Connection profile to use.",
        envvar="STORAGE_OPS_PROFILE",
    ),
) -> None:
    """Storage Operations Manager - typed access to ONTAP clusters."""
    level = load_raw_config(config).get("log_level")
    try:
        configure_logging(
            verbose=verbose,
            debug=debug,
            level=level if isinstance(level, str) else None,
        )
    except ValueError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1) from None

    state.config_path = config
    state.profile = profile
    ctx.call_on_close(state.close)


app.add_typer(init.app, name="init")
register_cluster_commands(app, state.get_session)
register_route_commands(app, state.get_session)
register_snapshot_commands(app, state.get_session)


if __name__ == "__main__":
    app()
