"""
SQLite storage ports.

One table per resource; its columns are the fields of the entity
dataclass (``id`` is the ``INTEGER PRIMARY KEY``).  The tables are
created by the migrations in ``core.db``.  Every call opens its own
connection, commits and closes it, so a repository instance can be
shared between requests.

``sqlite3.IntegrityError`` is reported as ``ConstraintViolation``; any
other ``sqlite3.Error`` as ``StorageError``.  Table names come from code,
never from clients, and all values are passed as parameters.
"""

import logging
import sqlite3
from contextlib import contextmanager
from dataclasses import fields
from typing import Callable, Iterator, List, Optional, Type

from resource_api.app.core.db import get_connection

from .base import ENT, NENT, ConstraintViolation, CrudeRepository, CrudRepository, Repository, StorageError

logger = logging.getLogger(__name__)

# Range of an SQLite INTEGER; sqlite3 cannot bind integers outside it.
MIN_ROWID = -(2**63)
MAX_ROWID = 2**63 - 1


class SqliteRepository(Repository[ENT]):
    """Table backed implementation of the base storage port."""

    def __init__(
        self,
        table: str,
        entity_type: Type[ENT],
        connection_factory: Callable[[], sqlite3.Connection] = get_connection,
    ) -> None:
        self.table = table
        self.entity_type = entity_type
        self.columns = [f.name for f in fields(entity_type) if f.name != "id"]
        self._connection_factory = connection_factory

    @contextmanager
    def _connect(self) -> Iterator[sqlite3.Connection]:
        try:
            conn = self._connection_factory()
        except sqlite3.Error as exc:
            raise StorageError(f"Cannot open database: {exc}") from exc
        try:
            yield conn
            conn.commit()
        except sqlite3.IntegrityError as exc:
            conn.rollback()
            logger.debug("Constraint violation on %s: %s", self.table, exc)
            raise ConstraintViolation(str(exc)) from exc
        except sqlite3.Error as exc:
            conn.rollback()
            raise StorageError(f"{self.table}: {exc}") from exc
        finally:
            conn.close()

    def _to_entity(self, row: sqlite3.Row) -> ENT:
        return self.entity_type(id=row["id"], **{name: row[name] for name in self.columns})

    def _select(self, conn: sqlite3.Connection, id: int) -> Optional[sqlite3.Row]:
        return conn.execute(f"SELECT * FROM {self.table} WHERE id = ?", (id,)).fetchone()

    def find_one(self, id: int) -> Optional[ENT]:
        if not MIN_ROWID <= id <= MAX_ROWID:
            return None
        with self._connect() as conn:
            row = self._select(conn, id)
            return self._to_entity(row) if row is not None else None

    def find_all(self) -> List[ENT]:
        with self._connect() as conn:
            rows = conn.execute(f"SELECT * FROM {self.table} ORDER BY id").fetchall()
            return [self._to_entity(row) for row in rows]

    def save(self, entity: ENT) -> ENT:
        values = [getattr(entity, name) for name in self.columns]
        with self._connect() as conn:
            cursor = conn.cursor()
            if entity.id is None:
                placeholders = ", ".join("?" for _ in self.columns)
                cursor.execute(
                    f"INSERT INTO {self.table} ({', '.join(self.columns)}) VALUES ({placeholders})",
                    values,
                )
                entity_id = cursor.lastrowid
            else:
                assignments = ", ".join(f"{name} = ?" for name in self.columns)
                cursor.execute(
                    f"UPDATE {self.table} SET {assignments} WHERE id = ?",
                    values + [entity.id],
                )
                if cursor.rowcount == 0:
                    # Saving an entity with an identifier that is not stored
                    # yet inserts it under that identifier.
                    placeholders = ", ".join("?" for _ in range(len(self.columns) + 1))
                    cursor.execute(
                        f"INSERT INTO {self.table} (id, {', '.join(self.columns)}) VALUES ({placeholders})",
                        [entity.id] + values,
                    )
                entity_id = entity.id
            return self._to_entity(self._select(conn, entity_id))


class SqliteCrudRepository(SqliteRepository[ENT], CrudRepository[ENT]):
    def delete(self, entity: ENT) -> None:
        with self._connect() as conn:
            conn.execute(f"DELETE FROM {self.table} WHERE id = ?", (entity.id,))


class SqliteCrudeRepository(SqliteRepository[NENT], CrudeRepository[NENT]):
    def find_all_enabled(self) -> List[NENT]:
        with self._connect() as conn:
            rows = conn.execute(f"SELECT * FROM {self.table} WHERE enabled = 1 ORDER BY id").fetchall()
            return [self._to_entity(row) for row in rows]
