"""Database module for userauth.

This module provides the Core API for database operations.
Core encapsulates connection management and exposes the credential store.

ARCHITECTURE:
- Core owns its connection (no Flask g.db dependency)
- Connection closes on context exit (atomic=True)
- Each record type gets an encapsulated class with related operations

Every HTTP request opens its own Core, so no connection or cursor is
shared between requests:

    with get_core(atomic=True) as core:
        user = core.user.find_active_by_email("a@b.com")
        # Commits on clean exit, rolls back if the block raises
"""

import sqlite3
from pathlib import Path
from typing import TYPE_CHECKING

from ..config import settings
from ..schema import SCHEMA_PATH

if TYPE_CHECKING:
    from .user import UserOperations


class Core:
    """
    Database Core with user operations.

    Maintains its own connection and transaction state.

    Connection Lifecycle:
    - atomic=True: Connection closes on __exit__ from context manager
    - atomic=False: Caller commits and closes (used by tests and scripts)
    """

    def __init__(self, connection: sqlite3.Connection, atomic: bool = False):
        """Initialize Core with a database connection.

        Args:
            connection: SQLite connection with row_factory set to sqlite3.Row
            atomic: If True, Core MUST be used as context manager.
        """
        self._conn = connection
        self._atomic = atomic
        self._user_ops = None

    @property
    def user(self) -> "UserOperations":
        """User record operations (the credential store).

        Created on first access and cached.
        """
        if self._user_ops is None:
            from .user import UserOperations
            self._user_ops = UserOperations(self._conn)
        return self._user_ops

    def __enter__(self) -> "Core":
        """Enter context manager for atomic transaction.

        Raises:
            RuntimeError: If Core was not created with atomic=True
        """
        if not self._atomic:
            raise RuntimeError(
                "Core must be created with atomic=True for context manager use. "
                "Use: with db.get_core(atomic=True) as core:"
            )
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Exit context manager, committing or rolling back transaction."""
        try:
            if exc_type is None:
                self._conn.commit()
            else:
                self._conn.rollback()
        finally:
            self._conn.close()

    def close(self) -> None:
        """Close the underlying connection."""
        self._conn.close()


def _create_connection() -> sqlite3.Connection:
    """Create a fresh database connection.

    Returns:
        SQLite connection with row_factory set to sqlite3.Row
        and foreign keys enabled.
    """
    db_path = Path(settings.database_path)
    db_path.parent.mkdir(parents=True, exist_ok=True)

    conn = sqlite3.connect(str(db_path))
    conn.row_factory = sqlite3.Row
    conn.execute("PRAGMA foreign_keys = ON")
    return conn


def get_core(atomic: bool = False) -> Core:
    """
    Get a database Core instance.

    Args:
        atomic: If True, returns a Core that MUST be used as context manager.
                All operations inside the block commit together on exit.
                If False (default), the caller is responsible for commit/close.

    Examples:
        >>> with get_core(atomic=True) as core:
        ...     core.user.create(email="a@b.com", password=hashed, ...)
        ...     # Commits on exit
    """
    conn = _create_connection()
    return Core(conn, atomic=atomic)


# ============================================================================
# DATABASE INITIALIZATION
# ============================================================================

def init_db():
    """Initialize database by running schema.sql if not already initialized."""
    db_path = Path(settings.database_path)
    db_path.parent.mkdir(parents=True, exist_ok=True)

    db = sqlite3.connect(str(db_path))
    try:
        cursor = db.execute(
            "SELECT name FROM sqlite_master WHERE type='table' AND name='_schema_metadata'"
        )
        if cursor.fetchone():
            # Database already initialized, skip
            return

        db.executescript(SCHEMA_PATH.read_text())
        db.commit()
    finally:
        db.close()
