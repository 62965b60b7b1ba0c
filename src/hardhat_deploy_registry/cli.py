"""Command-line entry point for hardhat-deploy-registry library."""

import logging
from pathlib import Path

import click

from .constants import EXPORT_DIR_ENV
from .exceptions import RegistryError
from .registry import build_registry, registry_to_json
from .types import HardhatDeployOptions


@click.command()
@click.argument(
    "directory",
    envvar=EXPORT_DIR_ENV,
    required=False,
    type=click.Path(file_okay=False, path_type=Path),
)
@click.option(
    "--include",
    "-i",
    "includes",
    help="Regular expression; only matching contract names are kept",
    multiple=True,
)
@click.option(
    "--exclude",
    "-e",
    "excludes",
    help="Regular expression; matching contract names are dropped",
    multiple=True,
)
@click.option(
    "--include-network",
    "include_networks",
    help="Network (export file name without extension) to read",
    multiple=True,
)
@click.option(
    "--exclude-network",
    "exclude_networks",
    help="Network (export file name without extension) to skip",
    multiple=True,
)
@click.option("--prefix", "name_prefix", help="Prepended to every contract name", default="")
@click.option("--suffix", "name_suffix", help="Appended to every contract name", default="")
@click.option("--verbose", "-v", help="Log every file and contract", is_flag=True)
def cli(
    directory,
    includes,
    excludes,
    include_networks,
    exclude_networks,
    name_prefix,
    name_suffix,
    verbose,
):
    """Merge hardhat-deploy export files into one chain-indexed registry (JSON on stdout)."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
    )

    options = HardhatDeployOptions(
        directory=directory,
        includes=list(includes),
        excludes=list(excludes),
        include_networks=set(include_networks),
        exclude_networks=set(exclude_networks),
        name_prefix=name_prefix,
        name_suffix=name_suffix,
    )

    try:
        contracts = build_registry(options)
    except (RegistryError, OSError) as e:
        raise click.ClickException(str(e)) from e

    click.echo(registry_to_json(contracts))


if __name__ == "__main__":
    cli()
