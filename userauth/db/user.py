"""User record operations (the credential store).

IMPORT CONVENTION:
- Core accesses these through core.user property
- NO direct import needed when using Core API

This layer holds no business rules. Uniqueness of active emails is checked
by the auth service; the partial unique index on users(email) only catches
what slips past that check (concurrent registrations) and surfaces as
sqlite3.IntegrityError.
"""

import sqlite3
from datetime import date

from ..auth.schemas import StoredUser
from ..exceptions import ResourceNotFound
from ..utils import isodatetime, uid


def _row_to_user(row: sqlite3.Row) -> StoredUser:
    return StoredUser(
        id=row["id"],
        email=row["email"],
        password=row["password"],
        name=row["name"],
        birth_date=isodatetime.to_date(row["birth_date"]),
        created_at=isodatetime.to_datetime(row["created_at"]),
        deleted_at=isodatetime.to_datetime(row["deleted_at"]) if row["deleted_at"] else None,
    )


class UserOperations:
    """SQLite-backed credential store."""

    def __init__(self, conn: sqlite3.Connection):
        """Initialize user operations with a database connection.

        Args:
            conn: SQLite connection with row_factory set to sqlite3.Row
        """
        self._conn = conn

    def find_active_by_email(self, email: str) -> StoredUser | None:
        """Return the active (not soft-deleted) user with this email, if any."""
        row = self._conn.execute(
            "SELECT * FROM users WHERE email = ? AND deleted_at IS NULL",
            (email,)
        ).fetchone()
        return _row_to_user(row) if row else None

    def create(
        self,
        email: str,
        password: str,
        name: str,
        birth_date: date,
    ) -> StoredUser:
        """Insert a new user with a store-generated ID.

        Args:
            email: Login email
            password: Password hash (never plain text)
            name: Display name
            birth_date: Calendar date of birth

        Returns:
            The stored record as read back from the database

        Raises:
            sqlite3.IntegrityError: If an active user already has this email
        """
        user_id = uid.generate_uuid()
        self._conn.execute(
            """INSERT INTO users (id, email, password, name, birth_date, created_at)
               VALUES (?, ?, ?, ?, ?, ?)""",
            (
                user_id,
                email,
                password,
                name,
                isodatetime.to_datestring(birth_date),
                isodatetime.now(),
            )
        )
        return self.get_by_id(user_id)

    def get_by_id(self, user_id: str) -> StoredUser:
        """Get user by ID, including soft-deleted users.

        Raises:
            ResourceNotFound: If user_id doesn't exist
        """
        row = self._conn.execute(
            "SELECT * FROM users WHERE id = ?",
            (user_id,)
        ).fetchone()

        if not row:
            raise ResourceNotFound(
                f"User '{user_id}' not found",
                {"user_id": user_id}
            )

        return _row_to_user(row)

    def soft_delete(self, user_id: str) -> StoredUser:
        """Mark a user as deleted. Already-deleted users keep their original timestamp.

        Raises:
            ResourceNotFound: If user_id doesn't exist
        """
        self._conn.execute(
            "UPDATE users SET deleted_at = ? WHERE id = ? AND deleted_at IS NULL",
            (isodatetime.now(), user_id)
        )
        return self.get_by_id(user_id)
