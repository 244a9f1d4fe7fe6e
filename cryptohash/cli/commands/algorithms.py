"""
Native Click implementation of the algorithms command.

Usage: cryptohash algorithms
"""

import click

from ...hashing import ALGORITHMS


@click.command("algorithms")
def algorithms() -> None:
    """List supported algorithm names."""
    aliases = ALGORITHMS.aliases
    for algorithm in ALGORITHMS:
        if algorithm in aliases:
            click.echo(f"{algorithm.value} -> {aliases[algorithm].value}")
        else:
            click.echo(algorithm.value)
