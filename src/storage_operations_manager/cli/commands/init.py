"""Init command for writing a starter configuration file."""

from __future__ import annotations

from pathlib import Path

import structlog
import typer
from rich.console import Console
from rich.panel import Panel

from storage_operations_manager.core.config.models import CONFIG_FILE, SystemConfig

app = typer.Typer(help="Initialize storage-ops configuration.")
console = Console()
logger = structlog.get_logger()


@app.callback(invoke_without_command=True)
def init(
    ctx: typer.Context,
    hostname: str = typer.Option(
        ...,
        "--hostname",
        "-H",
        help="Cluster management hostname or address.",
    ),
    username: str = typer.Option(
        "admin",
        "--username",
        "-u",
        help="API user for the default profile.",
    ),
    profile: str = typer.Option(
        "default",
        "--profile-name",
        help="Name of the profile to create.",
    ),
    insecure: bool = typer.Option(
        False,
        "--insecure",
        help="Do not verify the cluster's TLS certificate.",
    ),
    path: Path = typer.Option(
        CONFIG_FILE,
        "--path",
        help="Where to write the configuration file.",
    ),
    force: bool = typer.Option(
        False,
        "--force",
        "-f",
        help="Overwrite existing configuration.",
    ),
) -> None:
    """Write a configuration file with one connection profile.

    The password is not stored; supply it through STORAGE_OPS_PASSWORD.
    """
    if ctx.invoked_subcommand is not None:
        return

    logger.info("initializing_config", path=str(path), profile=profile)

    if path.exists() and not force:
        console.print(f"[yellow]Configuration already exists at {path}[/yellow]")
        console.print("Use --force to overwrite.")
        raise typer.Exit(code=1)

    config = SystemConfig(
        default_profile=profile,
        connection_profiles={
            profile: {
                "connection": {"hostname": hostname, "verify_ssl": not insecure},
                "auth": {"username": username},
            }
        },
    )
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(config.to_yaml())

    console.print(
        Panel(
            f"[green]Configuration initialized successfully![/green]\n\n"
            f"Configuration created at: {path}\n\n"
            f"Next steps:\n"
            f"  1. export STORAGE_OPS_PASSWORD=<password>\n"
            f"  2. Run [bold]storage-ops cluster version[/bold] to verify access",
            title="storage-ops init",
            border_style="green",
        )
    )

    logger.info("config_initialized", path=str(path))
