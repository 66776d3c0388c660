"""Logging setup for the REST web services process."""

import logging
import sys

from restws.core.config import Settings, get_settings

_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

# Registries and RestService log every resolution decision at DEBUG.
RESOLUTION_LOGGER = "restws.application.services"


def setup_logging(settings: Settings | None = None) -> None:
    """Configure stdout logging.

    The root level is settings.log_level, or DEBUG when settings.debug is
    set. Resolution loggers stay at INFO unless debug is on, so a verbose
    root level does not trace every request's resource and search handler
    choice.
    """
    settings = settings or get_settings()
    level = logging.DEBUG if settings.debug else logging.getLevelName(settings.log_level.upper())
    logging.basicConfig(
        level=level,
        format=_FORMAT,
        handlers=[logging.StreamHandler(sys.stdout)],
    )
    logging.getLogger(RESOLUTION_LOGGER).setLevel(
        logging.DEBUG if settings.debug else logging.INFO
    )
