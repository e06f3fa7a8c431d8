"""Stdout logging for the app and the SQL it runs."""

import logging
import sys

from shelfcat.config import LOG_LEVEL, SQL_ECHO

HANDLER_NAME = "shelfcat-stdout"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str = LOG_LEVEL, sql_echo: bool = SQL_ECHO) -> None:
    """Attach one stdout handler to the root logger.

    Safe to call more than once; the handler is only added the first time.
    With sql_echo on, every statement SQLAlchemy emits is logged at INFO.
    """
    root = logging.getLogger()
    if not any(h.get_name() == HANDLER_NAME for h in root.handlers):
        handler = logging.StreamHandler(sys.stdout)
        handler.set_name(HANDLER_NAME)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)
    root.setLevel(level)

    logging.getLogger("sqlalchemy.engine").setLevel(logging.INFO if sql_echo else logging.WARNING)
