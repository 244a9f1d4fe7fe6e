"""
Native Click implementation of the config command.

Usage: cryptohash config [list|get] [key]
"""

import click

from ...config import config_get, config_list
from ...core.exceptions import ConfigValidationError


@click.group("config", invoke_without_command=True)
@click.pass_context
def config(ctx: click.Context) -> None:
    """View configuration.

    Config is read from .cryptohash/config.toml, the [tool.cryptohash]
    table of pyproject.toml, and CRYPTOHASH_<SECTION>__<KEY> env vars.

    \b
    Examples:

        cryptohash config list             # List all options

        cryptohash config get hash.default # Get a value
    """
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


@config.command("list")
def config_list_cmd() -> None:
    """List all config options."""
    try:
        keys = config_list()
    except ConfigValidationError as e:
        raise click.ClickException(str(e)) from e
    click.echo("Available config options:")
    click.echo("")

    for key, info in keys.items():
        click.echo(f"  {key}")
        click.echo(f"    {info['description']}")
        click.echo(f"    Default: {info['default']}")
        click.echo(f"    Current: {info['value']}")
        click.echo("")


@config.command("get")
@click.argument("key")
def config_get_cmd(key: str) -> None:
    """Get a config value.

    Arguments:

        KEY    The config key to get (e.g. hash.default)
    """
    try:
        value = config_get(key)
    except ConfigValidationError as e:
        raise click.ClickException(str(e)) from e
    click.echo(f"{key}: {value}")
