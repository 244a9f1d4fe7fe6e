"""
Click context object for the cryptohash CLI.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

import click

from ..core.exceptions import ConfigValidationError
from ..core.settings import CryptoHashSettings


@dataclass
class CryptoHashContext:
    """State shared by every command through ``ctx.obj``.

    Attributes:
        cwd: Directory the config search started from
        settings: Merged settings for this invocation
        logger: The configured ``cryptohash`` logger
    """

    cwd: Path
    settings: CryptoHashSettings
    logger: logging.Logger

    @classmethod
    def create(cls, cwd: Path | None = None) -> CryptoHashContext:
        """Load settings, configure logging and build the context.

        Raises:
            click.ClickException: The configuration holds an invalid value
        """
        from ..core.container import bootstrap, services

        if cwd is None:
            cwd = Path.cwd()

        try:
            settings = bootstrap(start_dir=str(cwd))
        except ConfigValidationError as e:
            raise click.ClickException(str(e)) from e

        return cls(cwd=cwd, settings=settings, logger=services.logger())
