"""Infrastructure - Database, logging, repositories."""

from catalog.infra.database import get_db_session, close_db_engine
from catalog.infra.logging import setup_logging, get_logger

__all__ = [
    "get_db_session",
    "close_db_engine",
    "setup_logging",
    "get_logger",
]
