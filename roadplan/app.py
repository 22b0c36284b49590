"""Application entry point.

Applies the logging configuration, builds the default container and
runs the console menu until the user exits.
"""

from __future__ import annotations

import logging
from typing import Optional

from .config import AppConfig, ObservabilityConfig
from .container import Container, get_container
from .io.console import ConsoleApp


def configure_logging(config: ObservabilityConfig) -> None:
    """Send log records to stderr so they never mix with the menu on stdout."""
    level = logging.getLevelName(config.level.upper())
    if not isinstance(level, int):
        level = logging.WARNING
    logging.basicConfig(level=level, format=config.format)


def main(config: Optional[AppConfig] = None) -> int:
    """Run the roads budget plan console.

    Without an explicit config the shared default container is used, so
    bindings registered on get_container() beforehand take effect.

    Returns:
        The process exit code.
    """
    if config is None:
        container = get_container()
        config = container.config
    else:
        container = Container.create_default(config)
    configure_logging(config.observability)
    app: ConsoleApp = container.resolve(ConsoleApp)
    logging.getLogger(__name__).info(
        "Console started", extra={"data_dir": str(config.storage.data_dir)}
    )
    return app.run()
