"""Process-wide logging setup."""

import logging

from .config import Settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(settings: Settings) -> None:
    """Install a single stream handler on the root logger."""
    level = logging.DEBUG if settings.debug else logging.getLevelName(settings.log_level.upper())
    if not isinstance(level, int):
        level = logging.INFO
    logging.basicConfig(level=level, format=LOG_FORMAT, force=True)
    # SQL echo is driven by the engine's echo flag, keep the logger itself quiet.
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
