"""Database repository for user records."""

from __future__ import annotations

import uuid
from datetime import datetime, timezone

from psycopg.rows import tuple_row
from psycopg.types.json import Json
from psycopg_pool import ConnectionPool

from .domain.user import CreationResult, User


class UserRepository:
    """Postgres-backed user persistence keyed by phone number."""

    def __init__(self, pool: ConnectionPool) -> None:
        """Store the connection pool used for all database interactions."""
        self._pool = pool

    def create_user(self, user: User) -> CreationResult:
        """Insert ``user`` or refresh the attributes of the row sharing its phone."""
        user_id = str(uuid.uuid4())
        now = datetime.now(timezone.utc)
        with self._pool.connection() as conn:
            with conn.cursor(row_factory=tuple_row) as cur:
                # xmax is 0 only for rows written by a plain insert
                cur.execute(
                    """
                    INSERT INTO users (user_id, phone, attributes, created_at, updated_at)
                    VALUES (%s, %s, %s, %s, %s)
                    ON CONFLICT (phone) DO UPDATE
                    SET attributes = EXCLUDED.attributes, updated_at = EXCLUDED.updated_at
                    RETURNING user_id, (xmax = 0) AS inserted
                    """,
                    (user_id, user.phone, Json(user.attributes), now, now),
                )
                row = cur.fetchone()
                conn.commit()
        return self._map_result(row)

    def _map_result(self, row: tuple) -> CreationResult:
        """Convert the ``RETURNING`` tuple into an upsert acknowledgement."""
        stored_id, inserted = row
        if inserted:
            return CreationResult(
                acknowledged=True,
                matched_count=0,
                modified_count=0,
                upserted_id=str(stored_id),
            )
        return CreationResult(acknowledged=True, matched_count=1, modified_count=1)
