# -*- coding: utf-8 -*-
"""Command line entry points."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import typer

from thememanager.config import ConfigError, SettingsStore, dump_settings, load_app_paths
from thememanager.errors import OperationError
from thememanager.main import main
from thememanager.stores.directories import ensure_directory_structure
from thememanager.stores.maintenance import MaintenanceStore

app = typer.Typer(help="Theme, overlay and component manager for NextUI handhelds")
logger = logging.getLogger(__name__)

HOME_HELP = "App directory (defaults to THEME_MANAGER_HOME or the current directory)"


@app.command()
def run(home: Path = typer.Option(None, help=HOME_HELP)) -> None:
    """Start the interactive screen loop."""
    raise typer.Exit(main(home))


@app.command()
def diagnose(home: Path = typer.Option(None, help=HOME_HELP)) -> None:
    """Print a JSON diagnostics report."""
    from thememanager.diagnose import run_diagnostics

    report = run_diagnostics(home)
    typer.echo(json.dumps(report, indent=2, default=str))
    if report["status"] == "error":
        raise typer.Exit(1)


@app.command("auto-backup")
def auto_backup(
    state: str = typer.Argument(None, help="on or off; omit to show the current value"),
    home: Path = typer.Option(None, help=HOME_HELP),
) -> None:
    """Show or change the auto-backup setting."""
    paths = load_app_paths(home)
    store = SettingsStore(paths.settings_file)
    if state is None:
        typer.echo(dump_settings(store.as_dict()))
        return

    normalized = state.strip().lower()
    if normalized not in {"on", "off"}:
        typer.echo("State must be 'on' or 'off'", err=True)
        raise typer.Exit(2)
    try:
        store.set_auto_backup(normalized == "on")
    except (OSError, ConfigError) as exc:
        typer.echo(f"Error saving settings: {exc}", err=True)
        raise typer.Exit(1)
    typer.echo(f"Auto-backup {'enabled' if store.auto_backup else 'disabled'}")


@app.command()
def sync(home: Path = typer.Option(None, help=HOME_HELP)) -> None:
    """Copy the catalog source into Catalog/ without the UI."""
    paths = load_app_paths(home)
    ensure_directory_structure(paths)
    try:
        copied = MaintenanceStore(paths).sync_catalog()
    except (OperationError, OSError) as exc:
        typer.echo(f"Error syncing catalog: {exc}", err=True)
        raise typer.Exit(1)
    typer.echo(f"Synced {copied} pack(s) from {paths.catalog_source}")


if __name__ == "__main__":
    app()
