"""Storage of gold holdings."""

from __future__ import annotations

import abc
import dataclasses
import sqlite3
from dataclasses import dataclass
from datetime import datetime


@dataclass
class Holding:
    """A quantity of gold bought at a given price on a given date.

    The purchase price is kept in cents.
    """

    amount: int
    purchase_date: datetime
    purchase_price: int
    id: int = 0


class RepositoryError(Exception):
    """Base class for storage errors."""


class UpdateFailedError(RepositoryError):
    """Raised when an update touched no rows."""

    def __init__(self, message: str = "update failed") -> None:
        super().__init__(message)


class DeleteFailedError(RepositoryError):
    """Raised when a delete touched no rows."""

    def __init__(self, message: str = "delete failed") -> None:
        super().__init__(message)


class HoldingNotFoundError(RepositoryError):
    """Raised when no holding has the requested id."""


class Repository(abc.ABC):
    """Interface for storing holdings."""

    @abc.abstractmethod
    def migrate(self) -> None:
        """Create the storage schema if it does not exist yet."""

    @abc.abstractmethod
    def insert_holding(self, holding: Holding) -> Holding:
        """Store a holding and return it with its new id."""

    @abc.abstractmethod
    def all_holdings(self) -> list[Holding]:
        """Return every holding, newest purchase first."""

    @abc.abstractmethod
    def get_holding_by_id(self, holding_id: int) -> Holding:
        """Return the holding with the given id."""

    @abc.abstractmethod
    def update_holding(self, holding_id: int, update: Holding) -> None:
        """Replace the fields of the holding with the given id."""

    @abc.abstractmethod
    def delete_holding(self, holding_id: int) -> None:
        """Remove the holding with the given id."""


def _to_unix(moment: datetime) -> int:
    return int(moment.timestamp())


def _row_to_holding(row: tuple) -> Holding:
    holding_id, amount, unix_time, purchase_price = row
    return Holding(
        id=int(holding_id),
        amount=int(amount),
        purchase_date=datetime.fromtimestamp(unix_time),
        purchase_price=int(purchase_price),
    )


class SQLiteRepository(Repository):
    """Holdings kept in an SQLite database."""

    def __init__(self, conn: sqlite3.Connection) -> None:
        self.conn = conn

    def migrate(self) -> None:
        with self.conn:
            self.conn.execute(
                """
                CREATE TABLE IF NOT EXISTS holdings (
                    id INTEGER PRIMARY KEY AUTOINCREMENT,
                    amount REAL NOT NULL,
                    purchase_date INTEGER NOT NULL,
                    purchase_price INTEGER NOT NULL
                )
                """
            )

    def insert_holding(self, holding: Holding) -> Holding:
        with self.conn:
            cursor = self.conn.execute(
                "INSERT INTO holdings (amount, purchase_date, purchase_price) "
                "VALUES (?, ?, ?)",
                (
                    holding.amount,
                    _to_unix(holding.purchase_date),
                    holding.purchase_price,
                ),
            )
        return dataclasses.replace(holding, id=cursor.lastrowid)

    def all_holdings(self) -> list[Holding]:
        cursor = self.conn.execute(
            "SELECT id, amount, purchase_date, purchase_price FROM holdings "
            "ORDER BY purchase_date DESC"
        )
        return [_row_to_holding(row) for row in cursor]

    def get_holding_by_id(self, holding_id: int) -> Holding:
        row = self.conn.execute(
            "SELECT id, amount, purchase_date, purchase_price FROM holdings "
            "WHERE id = ?",
            (holding_id,),
        ).fetchone()
        if row is None:
            raise HoldingNotFoundError(f"no holding with id {holding_id}")
        return _row_to_holding(row)

    def update_holding(self, holding_id: int, update: Holding) -> None:
        with self.conn:
            cursor = self.conn.execute(
                "UPDATE holdings SET amount = ?, purchase_date = ?, "
                "purchase_price = ? WHERE id = ?",
                (
                    update.amount,
                    _to_unix(update.purchase_date),
                    update.purchase_price,
                    holding_id,
                ),
            )
        if cursor.rowcount == 0:
            raise UpdateFailedError()

    def delete_holding(self, holding_id: int) -> None:
        with self.conn:
            cursor = self.conn.execute(
                "DELETE FROM holdings WHERE id = ?", (holding_id,)
            )
        if cursor.rowcount == 0:
            raise DeleteFailedError()


class StubRepository(Repository):
    """A repository with fixed contents that stores nothing."""

    def migrate(self) -> None:
        return None

    def insert_holding(self, holding: Holding) -> Holding:
        return holding

    def all_holdings(self) -> list[Holding]:
        return [
            Holding(amount=1, purchase_date=datetime.now(), purchase_price=1000),
            Holding(amount=2, purchase_date=datetime.now(), purchase_price=2000),
        ]

    def get_holding_by_id(self, holding_id: int) -> Holding:
        return Holding(amount=1, purchase_date=datetime.now(), purchase_price=1000)

    def update_holding(self, holding_id: int, update: Holding) -> None:
        return None

    def delete_holding(self, holding_id: int) -> None:
        return None