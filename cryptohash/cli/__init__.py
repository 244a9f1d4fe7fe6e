"""
Click-based CLI for cryptohash.

This module provides the main Click command group and serves as the
entry point for the cryptohash CLI.

Usage:
    from cryptohash.cli import cli
    cli()  # Invokes the CLI
"""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

import click

from .context import CryptoHashContext

try:
    __version__ = version("cryptohash")
except PackageNotFoundError:
    __version__ = "0.1.0"


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="cryptohash")
@click.pass_context
def cli(ctx: click.Context) -> None:
    """cryptohash - hash or checksum input with a named algorithm

    \b
    Quick Start:
        cryptohash digest -a md5 abc     Hash a string
        echo -n abc | cryptohash digest  Hash stdin with the default algorithm
        cryptohash algorithms            List supported algorithms

    \b
    Configuration:
        cryptohash config                View configuration
    """
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())
        ctx.exit(0)
    elif ctx.obj is None:
        ctx.obj = CryptoHashContext.create()


def register_commands() -> None:
    """Register all CLI commands with the main group."""
    from .commands import COMMANDS

    for cmd in COMMANDS:
        cli.add_command(cmd)


register_commands()


__all__ = [
    "CryptoHashContext",
    "__version__",
    "cli",
    "register_commands",
]
