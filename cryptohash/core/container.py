"""
Process-wide services for the CLI.

Library calls such as perform_cryptohash() only read ``services.logger``.
They never bootstrap anything, so importing cryptohash has no side effects.
"""

from __future__ import annotations

import logging
from pathlib import Path

from dependency_injector import containers, providers

from ..services.logging import LOGGER_NAME, configure_logging, reset_logging
from .settings import CryptoHashSettings, load_settings


class Services(containers.DeclarativeContainer):
    settings = providers.Singleton(load_settings)
    logger = providers.Object(logging.getLogger(LOGGER_NAME))


services = Services()


def bootstrap(start_dir: str | None = None, config_path: Path | None = None) -> CryptoHashSettings:
    """
    Load settings and configure logging from them.

    Raises:
        ConfigValidationError: The configuration holds an invalid value
    """
    settings = load_settings(config_path=config_path, start_dir=start_dir)
    services.settings.override(providers.Object(settings))
    services.logger.override(
        providers.Singleton(
            configure_logging,
            level=settings.logging.level,
            console=settings.logging.console,
            file=settings.logging.file,
        )
    )
    if settings.config_error:
        services.logger().warning("%s", settings.config_error)
    return settings


def reset() -> None:
    """Drop overrides and handlers installed by bootstrap()."""
    services.reset_override()
    services.settings.reset()
    reset_logging()
