# studentdb/db/sql_log.py
"""
SQL statement logging.

SQLAlchemy reports every statement it executes on the "sqlalchemy.engine"
logger at INFO level. Attaching a handler there mirrors the SQL to a
stream, the same output echo=True would give, without touching the engine.
"""

import logging
import sys
from typing import Optional, TextIO

SQL_LOGGER_NAME = "sqlalchemy.engine"
SQL_LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"


def attach_sql_logger(
    stream: Optional[TextIO] = None,
    level: int = logging.INFO,
) -> logging.Logger:
    """
    Send SQLAlchemy's statement log to `stream` (stdout by default).

    Replaces whatever sink was attached before and returns the logger.
    Only connections opened after this call pick up the new level.
    """
    logger = logging.getLogger(SQL_LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = logging.StreamHandler(stream if stream is not None else sys.stdout)
    handler.setFormatter(logging.Formatter(SQL_LOG_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(level)
    # root handlers (basicConfig) would print every statement twice
    logger.propagate = False
    return logger


def detach_sql_logger() -> None:
    logger = logging.getLogger(SQL_LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
