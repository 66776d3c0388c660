"""Shared telemetry: logging setup."""

from restws.shared.telemetry.logging import RESOLUTION_LOGGER, setup_logging

__all__ = ["RESOLUTION_LOGGER", "setup_logging"]
