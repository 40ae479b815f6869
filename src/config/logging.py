import logging
import sys
from logging import StreamHandler

from src.config.settings import settings

LOG_FORMAT = "%(asctime)s %(levelname)-8s [%(name)s] %(message)s"

# Third-party loggers that drown out request logs at DEBUG
QUIET_LOGGERS = ("aiosqlite", "asyncio", "httpcore", "httpx", "multipart")


def setup_logging() -> None:
    """Send all logs to stdout; SQL echo follows LOG_DB rather than debug."""
    logging.basicConfig(
        level=logging.DEBUG if settings.debug else logging.INFO,
        format=LOG_FORMAT,
        handlers=[StreamHandler(sys.stdout)],
        force=True,
    )
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(
        logging.INFO if settings.LOG_DB else logging.WARNING
    )
