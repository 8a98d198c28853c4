"""CLI commands — init, resolve."""

from __future__ import annotations

import json
from pathlib import Path

import click

from assetpath.cli import cli
from assetpath.core import paths
from assetpath.core.errors import AssetpathError
from assetpath.core.models import AssetSettings
from assetpath.repo import config


# ── init ────────────────────────────────────────────────────────────


@cli.command()
@click.option(
    "--public-root", required=True,
    type=click.Path(exists=True, file_okay=False, resolve_path=True),
    help="Document root that assets are served from.",
)
@click.option("--env", "environment", default=config.DEFAULT_ENVIRONMENT, help="Environment tag.")
@click.option(
    "--path", "root", default=".",
    type=click.Path(exists=True, file_okay=False, resolve_path=True),
    help="Project root directory.",
)
def init(public_root: str, environment: str, root: str) -> None:
    """Write assetpath.toml for a project."""
    target = paths.config_path(Path(root))
    if target.exists():
        raise click.ClickException(f"Project already initialised: {target}")

    config.save(config.create_default(public_root, environment), target)
    click.echo(f"✔ Wrote {target}")
    click.echo(f"  → public_root = {public_root}")


# ── resolve ─────────────────────────────────────────────────────────


@cli.command()
@click.argument("asset_paths", metavar="PATH...", nargs=-1, required=True)
@click.option("--public-root", default=None, help="Override the configured public root.")
@click.option("--env", "environment", default=None, help="Override the environment tag.")
@click.option("--json", "as_json", is_flag=True, help="Emit a JSON array.")
@click.option(
    "--path", "root", default=".",
    type=click.Path(exists=True, file_okay=False, resolve_path=True),
    help="Directory to search upwards from for assetpath.toml.",
)
def resolve(
    asset_paths: tuple[str, ...],
    public_root: str | None,
    environment: str | None,
    as_json: bool,
    root: str,
) -> None:
    """Resolve asset paths in order.

    Each PATH gets its absolute location, its identifier relative to the
    public root and its bundle order (1, 2, 3, ...).
    """
    from assetpath.services.factory import AssetFactory

    try:
        settings = _load_settings(Path(root))
        if public_root:
            settings.public_root = public_root
        if environment:
            settings.environment = environment
        factory = AssetFactory.from_settings(settings)
    except AssetpathError as exc:
        raise click.ClickException(str(exc)) from exc

    assets = [factory.make(p) for p in asset_paths]

    if as_json:
        rows = [
            {
                "order": a.order,
                "absolute_path": a.absolute_path,
                "relative_path": a.relative_path,
                "remote": a.is_remote,
                "environment": a.environment,
                "group": a.group,
            }
            for a in assets
        ]
        click.echo(json.dumps(rows, indent=2))
        return

    for a in assets:
        click.echo(f"{a.order:>3}  {a.relative_path}  {a.absolute_path}")


def _load_settings(start: Path) -> AssetSettings:
    root = paths.resolve_root(start)
    cfg_file = paths.config_path(root)
    if cfg_file.exists():
        settings = config.load(cfg_file)
    else:
        settings = config.create_default("")
    return config.apply_env_overrides(settings)
