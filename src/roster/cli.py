"""roster CLI: interactive editor for a JSON-backed user roster.

Commands:
    roster                     open the interactive menu
    roster init [--dir DIR]    create roster.toml + an empty data file
    roster --version
"""

from __future__ import annotations

import logging
from pathlib import Path

import click

from roster.config import RosterConfig, init_config, load_config
from roster.errors import StoreError
from roster.shell import RosterShell
from roster.store import RecordStore, init_store

logger = logging.getLogger("roster.cli")

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _load_cfg(root: Path | None = None) -> RosterConfig:
    try:
        return load_config(root)
    except Exception as exc:
        raise click.ClickException(str(exc)) from exc


def _setup_logging(cfg: RosterConfig) -> None:
    logging.basicConfig(level=cfg.logging_level(), format="%(asctime)s %(name)s %(message)s")


# ---------------------------------------------------------------------------
# Root group
# ---------------------------------------------------------------------------


@click.group(invoke_without_command=True)
@click.version_option(package_name="roster")
@click.pass_context
def cli(ctx: click.Context) -> None:
    """roster: interactive editor for users kept in a JSON file."""
    if ctx.invoked_subcommand is not None:
        return

    cfg = _load_cfg()
    _setup_logging(cfg)
    try:
        store = RecordStore.open(cfg.data_path)
    except StoreError as exc:
        click.echo(f"Failed to read data from file: {exc}")
        raise SystemExit(1) from exc

    logger.info("session started with %d records", len(store))
    RosterShell(store).run()


# ---------------------------------------------------------------------------
# roster init
# ---------------------------------------------------------------------------


@cli.command()
@click.option("--dir", "root", default=".", show_default=True, help="Project root")
def init(root: str) -> None:
    """Create roster.toml and an empty data file."""
    root_path = Path(root).resolve()
    try:
        config_path = init_config(root_path)
        click.echo(f"Created {config_path}")
    except FileExistsError:
        click.echo("roster.toml already exists, skipping")

    cfg = _load_cfg(root_path)
    try:
        created = init_store(cfg.data_path)
    except StoreError as exc:
        raise click.ClickException(str(exc)) from exc
    if created:
        click.echo(f"Created {cfg.data_path}")
    else:
        click.echo(f"Data file : {cfg.data_path}")


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
