import logging
import sys

from app.core.config import Settings

LOG_FORMAT = "%(asctime)s  %(levelname)-8s  %(name)s - %(message)s"


def configure_logging(settings: Settings) -> None:
    """Configures the root logger once, at application startup."""
    level = logging.DEBUG if settings.debug else logging.getLevelNamesMapping().get(settings.log_level.upper())
    if level is None:
        level = logging.INFO

    logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stdout)

    for noisy in ("aiosqlite", "asyncio"):
        logging.getLogger(noisy).setLevel(logging.WARNING)
