"""Typed SQL queries over categories and priced courses."""

from __future__ import annotations

import sqlite3
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Any

from coursekit.catalog import NotFoundError

_CREATE_CATEGORY = "INSERT INTO categories (id, name, description) VALUES (?, ?, ?)"
_CREATE_COURSE = (
    "INSERT INTO courses (id, name, description, category_id, price) "
    "VALUES (?, ?, ?, ?, ?)"
)
_DELETE_CATEGORY = "DELETE FROM categories WHERE id = ?"
_GET_CATEGORY = "SELECT id, name, description FROM categories WHERE id = ?"
_LIST_CATEGORIES = "SELECT id, name, description FROM categories"
_LIST_COURSES = (
    "SELECT c.id, c.category_id, c.name, c.description, c.price, "
    "ca.name AS category_name "
    "FROM courses c JOIN categories ca ON c.category_id = ca.id"
)
_UPDATE_CATEGORY = "UPDATE categories SET name = ?, description = ? WHERE id = ?"


@dataclass(frozen=True)
class CategoryRow:
    id: str
    name: str
    description: str | None


@dataclass(frozen=True)
class CourseRow:
    id: str
    category_id: str
    name: str
    description: str | None
    price: float


@dataclass(frozen=True)
class ListCoursesRow:
    id: str
    category_id: str
    name: str
    description: str | None
    price: float
    category_name: str


@dataclass(frozen=True)
class CategoryParams:
    """Values for a category created alongside a course."""

    id: str
    name: str
    description: str | None = None


@dataclass(frozen=True)
class CourseParams:
    """Values for a course created alongside its category."""

    id: str
    name: str
    description: str | None = None
    price: float = 0.0


class Queries:
    """Runs the fixed set of statements against a connection.

    With ``autocommit`` each write is committed on its own; without it the
    caller owns the surrounding transaction.
    """

    def __init__(self, connection: sqlite3.Connection, *, autocommit: bool = True) -> None:
        self._connection = connection
        self._autocommit = autocommit

    def _execute(self, sql: str, params: Sequence[Any]) -> None:
        if self._autocommit:
            with self._connection:
                self._connection.execute(sql, params)
        else:
            self._connection.execute(sql, params)

    def create_category(
        self, category_id: str, name: str, description: str | None
    ) -> None:
        self._execute(_CREATE_CATEGORY, (category_id, name, description))

    def create_course(
        self,
        course_id: str,
        name: str,
        description: str | None,
        category_id: str,
        price: float,
    ) -> None:
        self._execute(_CREATE_COURSE, (course_id, name, description, category_id, price))

    def delete_category(self, category_id: str) -> None:
        self._execute(_DELETE_CATEGORY, (category_id,))

    def get_category(self, category_id: str) -> CategoryRow:
        row = self._connection.execute(_GET_CATEGORY, (category_id,)).fetchone()
        if row is None:
            raise NotFoundError(f"category {category_id!r} not found")
        return CategoryRow(*row)

    def list_categories(self) -> list[CategoryRow]:
        return [CategoryRow(*row) for row in self._connection.execute(_LIST_CATEGORIES)]

    def list_courses(self) -> list[ListCoursesRow]:
        return [ListCoursesRow(*row) for row in self._connection.execute(_LIST_COURSES)]

    def update_category(
        self, category_id: str, name: str, description: str | None
    ) -> None:
        self._execute(_UPDATE_CATEGORY, (name, description, category_id))


class CourseDB(Queries):
    """Queries plus operations that span several statements in one transaction."""

    def __init__(self, connection: sqlite3.Connection) -> None:
        super().__init__(connection)

    def _call_tx(self, fn: Callable[[Queries], None]) -> None:
        connection = self._connection
        if not connection.in_transaction:
            connection.execute("BEGIN")
        try:
            fn(Queries(connection, autocommit=False))
        except Exception as error:
            try:
                connection.rollback()
            except sqlite3.Error as rollback_error:
                raise sqlite3.DatabaseError(
                    f"error on rollback: {rollback_error}, original error: {error}"
                ) from error
            raise
        connection.commit()

    def create_course_and_category(
        self, category: CategoryParams, course: CourseParams
    ) -> None:
        """Create a category and a course in it, both or neither."""

        def work(queries: Queries) -> None:
            queries.create_category(category.id, category.name, category.description)
            queries.create_course(
                course.id, course.name, course.description, category.id, course.price
            )

        self._call_tx(work)