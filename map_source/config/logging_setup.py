"""Logging setup for applications embedding the adapter.

Library modules only create loggers; nothing is configured on import.
"""

import logging

from map_source.config.settings import AppSettings

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(settings: AppSettings | None = None) -> int:
    """Configure root logging from settings and return the level applied."""
    settings = settings or AppSettings()
    level = logging.getLevelName(settings.log_level)
    if not isinstance(level, int):
        level = logging.INFO
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger("map_source").setLevel(level)
    return level
