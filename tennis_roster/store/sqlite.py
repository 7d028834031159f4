"""SQLite-backed record store."""

import json
import sqlite3
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from tennis_roster.exceptions import RecordExistsError, RecordNotFoundError, StoreError
from tennis_roster.models.player import Player, PlayerCreate
from tennis_roster.schema.connection import get_db_connection
from tennis_roster.schema.migrations import run_migrations
from tennis_roster.store.base import RecordStore
from tennis_roster.store.registry import register_store

_COLUMNS = (
    "id",
    "first_name",
    "last_name",
    "short_name",
    "sex",
    "country_code",
    "country_picture",
    "picture",
    "rank",
    "points",
    "weight",
    "height",
    "age",
    "last_json",
)

_INSERT_SQL = f"INSERT INTO player ({', '.join(_COLUMNS)}) VALUES ({', '.join('?' for _ in _COLUMNS)})"
_UPDATE_SQL = (
    f"UPDATE player SET {', '.join(f'{c} = ?' for c in _COLUMNS[1:])} WHERE id = ?"  # noqa: S608
)

# Extended result codes for a clash on the id column.
_ID_COLLISION_ERRORS = frozenset({"SQLITE_CONSTRAINT_PRIMARYKEY", "SQLITE_CONSTRAINT_UNIQUE"})


def _player_to_row(player: Player) -> tuple[Any, ...]:
    return (
        player.id,
        player.first_name,
        player.last_name,
        player.short_name,
        player.sex,
        player.country.code,
        player.country.picture,
        player.picture,
        player.data.rank,
        player.data.points,
        player.data.weight,
        player.data.height,
        player.data.age,
        json.dumps(player.data.last),
    )


def _row_to_player(row: sqlite3.Row) -> Player:
    """Map a ``player`` row to a model; an unreadable row raises StoreError."""
    try:
        return _build_player(row)
    except (ValidationError, ValueError, TypeError) as e:
        raise StoreError(f"Invalid player row {row['id']}: {e}") from e


def _build_player(row: sqlite3.Row) -> Player:
    return Player(
        id=row["id"],
        first_name=row["first_name"],
        last_name=row["last_name"],
        short_name=row["short_name"],
        sex=row["sex"],
        country={"code": row["country_code"], "picture": row["country_picture"]},
        picture=row["picture"],
        data={
            "rank": row["rank"],
            "points": row["points"],
            "weight": row["weight"],
            "height": row["height"],
            "age": row["age"],
            "last": json.loads(row["last_json"]),
        },
    )


@register_store
class SqliteRecordStore(RecordStore):
    """
    Record store over the ``player`` table.

    Store order is ascending id. Inserts compute the next id and write the row
    inside one ``BEGIN IMMEDIATE`` transaction, so other processes sharing the
    database file cannot claim the same id in between.
    """

    backend = "sqlite"

    def __init__(self, db_path: Path | str | None = None, migrate: bool = True):
        """
        Open the roster database.

        Args:
            db_path: Path to the SQLite file. If None, uses default from settings.
            migrate: Apply pending migrations before use.

        Raises:
            StoreError: If the database cannot be opened or migrated.
        """
        super().__init__()
        self.db_path = Path(db_path) if db_path is not None else None
        try:
            if migrate:
                run_migrations(self.db_path)
            self.conn = get_db_connection(self.db_path)
        except Exception as e:
            raise StoreError(f"Cannot open roster database: {e}") from e

    def close(self) -> None:
        with self.lock:
            self.conn.close()

    @contextmanager
    def _transaction(self) -> Iterator[sqlite3.Connection]:
        self.conn.execute("BEGIN IMMEDIATE")
        try:
            yield self.conn
            self.conn.execute("COMMIT")
        except BaseException:
            if self.conn.in_transaction:
                self.conn.execute("ROLLBACK")
            raise

    def list_all(self) -> list[Player]:
        with self.lock:
            try:
                rows = self.conn.execute("SELECT * FROM player ORDER BY id").fetchall()
            except sqlite3.Error as e:
                raise StoreError(f"Cannot read players: {e}") from e
            return [_row_to_player(row) for row in rows]

    def get_by_id(self, player_id: int) -> Player | None:
        with self.lock:
            try:
                row = self.conn.execute("SELECT * FROM player WHERE id = ?", (player_id,)).fetchone()
            except sqlite3.Error as e:
                raise StoreError(f"Cannot read player {player_id}: {e}") from e
            return _row_to_player(row) if row is not None else None

    def insert(self, player: PlayerCreate) -> Player:
        with self.lock:
            new_id = None
            try:
                with self._transaction() as conn:
                    new_id = conn.execute("SELECT COALESCE(MAX(id), 0) + 1 FROM player").fetchone()[0]
                    stored = player.to_player(new_id)
                    conn.execute(_INSERT_SQL, _player_to_row(stored))
            except sqlite3.IntegrityError as e:
                if new_id is not None and e.sqlite_errorname in _ID_COLLISION_ERRORS:
                    raise RecordExistsError(new_id) from e
                raise StoreError(f"Cannot insert player: {e}") from e
            except sqlite3.Error as e:
                raise StoreError(f"Cannot insert player: {e}") from e
        self.logger.debug("Record inserted", player_id=new_id)
        return stored

    def replace(self, player_id: int, player: PlayerCreate) -> Player:
        stored = player.to_player(player_id)
        with self.lock:
            try:
                with self._transaction() as conn:
                    cursor = conn.execute(_UPDATE_SQL, (*_player_to_row(stored)[1:], player_id))
                    if cursor.rowcount == 0:
                        raise RecordNotFoundError(player_id)
            except sqlite3.Error as e:
                raise StoreError(f"Cannot update player {player_id}: {e}") from e
        self.logger.debug("Record replaced", player_id=player_id)
        return stored

    def remove(self, player_id: int) -> bool:
        with self.lock:
            try:
                with self._transaction() as conn:
                    cursor = conn.execute("DELETE FROM player WHERE id = ?", (player_id,))
                    if cursor.rowcount == 0:
                        raise RecordNotFoundError(player_id)
            except sqlite3.Error as e:
                raise StoreError(f"Cannot delete player {player_id}: {e}") from e
        self.logger.debug("Record removed", player_id=player_id)
        return True
