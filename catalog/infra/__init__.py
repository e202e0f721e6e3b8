"""Infrastructure - Database and logging."""

from catalog.infra.database import (
    DatabaseSession,
    close_db_engine,
    get_db_session,
    verify_db_connection,
)
from catalog.infra.logging import get_logger, setup_logging

__all__ = [
    "DatabaseSession",
    "close_db_engine",
    "get_db_session",
    "verify_db_connection",
    "get_logger",
    "setup_logging",
]
