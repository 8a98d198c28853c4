"""CLI entry point — Click command group."""

from __future__ import annotations

import logging

import click

from assetpath import __version__
from assetpath.core.env import load_user_env

load_user_env()


@click.group()
@click.version_option(__version__, prog_name="assetpath")
@click.option("-v", "--verbose", is_flag=True, help="Log resolution decisions to stderr.")
def cli(verbose: bool) -> None:
    """assetpath — resolve asset paths against a public document root."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        )


# Register all sub-commands on import
from assetpath.cli import commands as _commands  # noqa: F401, E402
