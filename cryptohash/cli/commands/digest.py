"""
Native Click implementation of the digest command.

Usage: cryptohash digest [-a ALGORITHM] [TEXT]
"""

from __future__ import annotations

import click

from ...core.exceptions import UnknownAlgorithmError
from ...hashing import perform_cryptohash
from ...presenters.formatting import format_digest
from ..context import CryptoHashContext


@click.command("digest")
@click.option(
    "-a",
    "--algorithm",
    default=None,
    help="Algorithm name (case-insensitive). Defaults to config hash.default.",
)
@click.option(
    "--checksum-format",
    type=click.Choice(["decimal", "hex"], case_sensitive=False),
    default=None,
    help="How to print adler32/crc32 values. Defaults to config hash.checksum_format.",
)
@click.argument("text", required=False)
@click.pass_obj
def digest(
    ctx: CryptoHashContext,
    algorithm: str | None,
    checksum_format: str | None,
    text: str | None,
) -> None:
    """Print the digest of TEXT, or of stdin when TEXT is omitted.

    TEXT is hashed as UTF-8. Stdin is hashed byte for byte.

    \b
    Examples:

        cryptohash digest -a md5 abc

        cryptohash digest -a crc32 --checksum-format hex abc

        cat archive.tar | cryptohash digest -a sha512
    """
    name = algorithm if algorithm is not None else ctx.settings.hash.default
    fmt = (checksum_format or ctx.settings.hash.checksum_format).lower()

    data: str | bytes = text if text is not None else click.get_binary_stream("stdin").read()

    try:
        result = perform_cryptohash(data, name)
    except UnknownAlgorithmError as e:
        ctx.logger.error("%s", e)
        click.echo(f"Error: unknown algorithm {e.algorithm!r}", err=True)
        click.echo("Run 'cryptohash algorithms' to see the supported names.", err=True)
        raise SystemExit(e.exit_code) from e

    click.echo(format_digest(result, fmt))
