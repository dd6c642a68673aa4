"""
Database module initialization.
Exports database components for use throughout the application.
"""

from frontline.database.base import Base
from frontline.database.session import (
    check_db_connection,
    configure_engine,
    get_db_context,
    get_engine,
    get_session_factory,
    init_db,
    make_engine,
    make_session_factory,
)

__all__ = [
    "Base",
    # Engine and sessions
    "make_engine",
    "make_session_factory",
    "configure_engine",
    "get_engine",
    "get_session_factory",
    "get_db_context",
    # Utilities
    "init_db",
    "check_db_connection",
]
