"""
Store connection check run once at process start.

The connection itself is opened by Django and kept for
``CONN_MAX_AGE``; this only makes a server refuse to start when the
database cannot be reached at all.
"""
import logging
import sys

from django.db import connections
from django.db.utils import OperationalError

logger = logging.getLogger(__name__)


def check_database_connection(alias: str = 'default') -> None:
    """Open the connection for ``alias``; raises ``OperationalError`` when unreachable."""
    connections[alias].ensure_connection()


def ensure_database_or_exit(alias: str = 'default') -> None:
    try:
        check_database_connection(alias)
    except OperationalError as e:
        logger.critical('Unable to connect to database %r: %s', alias, e)
        sys.exit(1)
    logger.info('Database %r connected', alias)
