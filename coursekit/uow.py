"""Unit of work: repositories that share one database transaction."""

from __future__ import annotations

import sqlite3
from collections.abc import Callable
from typing import Any

RepositoryFactory = Callable[[sqlite3.Connection], Any]


class TransactionError(Exception):
    """Raised when a transaction is misused or cannot be finished cleanly."""


class UnitOfWork:
    """Builds registered repositories inside a shared transaction."""

    def __init__(self, connection: sqlite3.Connection) -> None:
        self.connection = connection
        self.transaction: sqlite3.Connection | None = None
        self.repositories: dict[str, RepositoryFactory] = {}

    def _begin(self) -> None:
        if not self.connection.in_transaction:
            self.connection.execute("BEGIN")
        self.transaction = self.connection

    def register(self, name: str, factory: RepositoryFactory) -> None:
        """Make a repository factory available under a name."""
        self.repositories[name] = factory

    def unregister(self, name: str) -> None:
        """Forget a repository factory; unknown names are ignored."""
        self.repositories.pop(name, None)

    def get_repository(self, name: str) -> Any:
        """Build the named repository, starting a transaction if none is open."""
        try:
            factory = self.repositories[name]
        except KeyError:
            raise KeyError(f"repository {name!r} is not registered") from None
        if self.transaction is None:
            self._begin()
        return factory(self.transaction)

    def do(self, fn: Callable[[UnitOfWork], None]) -> None:
        """Run fn in a new transaction, committing on success, rolling back on error."""
        if self.transaction is not None:
            raise TransactionError("transaction already started")
        self._begin()
        try:
            fn(self)
        except Exception as error:
            try:
                self.rollback()
            except Exception as rollback_error:
                raise TransactionError(
                    f"original error: {error}, rollback error: {rollback_error}"
                ) from error
            raise
        self.commit_or_rollback()

    def rollback(self) -> None:
        """Abandon the open transaction."""
        if self.transaction is None:
            raise TransactionError("no transaction to rollback")
        self.transaction.rollback()
        self.transaction = None

    def commit_or_rollback(self) -> None:
        """Commit the open transaction, rolling it back if the commit fails."""
        if self.transaction is None:
            raise TransactionError("no transaction to commit")
        try:
            self.transaction.commit()
        except Exception as error:
            try:
                self.rollback()
            except Exception as rollback_error:
                raise TransactionError(
                    f"original error: {error}, rollback error: {rollback_error}"
                ) from error
            raise
        self.transaction = None