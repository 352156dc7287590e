"""SQLite-backed storage for course categories and courses."""

from __future__ import annotations

import sqlite3
import uuid
from dataclasses import dataclass

_SCHEMA = """
CREATE TABLE IF NOT EXISTS categories (
    id TEXT PRIMARY KEY,
    name TEXT NOT NULL,
    description TEXT NOT NULL
);
CREATE TABLE IF NOT EXISTS courses (
    id TEXT PRIMARY KEY,
    name TEXT NOT NULL,
    description TEXT NOT NULL,
    category_id TEXT NOT NULL
);
"""


class NotFoundError(LookupError):
    """Raised when a requested record does not exist."""


@dataclass(frozen=True)
class Category:
    id: str
    name: str
    description: str


@dataclass(frozen=True)
class Course:
    id: str
    name: str
    description: str
    category_id: str


def create_schema(connection: sqlite3.Connection) -> None:
    """Create the categories and courses tables if they are missing."""
    connection.executescript(_SCHEMA)


def _new_id() -> str:
    return str(uuid.uuid4())


class CategoryStore:
    """Reads and writes categories."""

    def __init__(self, connection: sqlite3.Connection) -> None:
        self._connection = connection

    def create(self, name: str, description: str) -> Category:
        category = Category(id=_new_id(), name=name, description=description)
        with self._connection:
            self._connection.execute(
                "INSERT INTO categories (id, name, description) VALUES (?, ?, ?)",
                (category.id, category.name, category.description),
            )
        return category

    def find_all(self) -> list[Category]:
        rows = self._connection.execute(
            "SELECT id, name, description FROM categories"
        ).fetchall()
        return [Category(*row) for row in rows]

    def find_by_course_id(self, course_id: str) -> Category:
        row = self._connection.execute(
            "SELECT c.id, c.name, c.description FROM categories c "
            "JOIN courses co ON c.id = co.category_id WHERE co.id = ?",
            (course_id,),
        ).fetchone()
        if row is None:
            raise NotFoundError(f"no category for course {course_id!r}")
        return Category(*row)

    def find(self, category_id: str) -> Category:
        row = self._connection.execute(
            "SELECT name, description FROM categories WHERE id = ?",
            (category_id,),
        ).fetchone()
        if row is None:
            raise NotFoundError(f"category {category_id!r} not found")
        return Category(category_id, *row)


class CourseStore:
    """Reads and writes courses."""

    def __init__(self, connection: sqlite3.Connection) -> None:
        self._connection = connection

    def create(self, name: str, description: str, category_id: str) -> Course:
        course = Course(
            id=_new_id(), name=name, description=description, category_id=category_id
        )
        with self._connection:
            self._connection.execute(
                "INSERT INTO courses (id, name, description, category_id) "
                "VALUES (?, ?, ?, ?)",
                (course.id, course.name, course.description, course.category_id),
            )
        return course

    def find_all(self) -> list[Course]:
        rows = self._connection.execute(
            "SELECT id, name, description, category_id FROM courses"
        ).fetchall()
        return [Course(*row) for row in rows]

    def find_by_category_id(self, category_id: str) -> list[Course]:
        rows = self._connection.execute(
            "SELECT id, name, description, category_id FROM courses "
            "WHERE category_id = ?",
            (category_id,),
        ).fetchall()
        return [Course(*row) for row in rows]

    def find(self, course_id: str) -> Course:
        row = self._connection.execute(
            "SELECT name, description, category_id FROM courses WHERE id = ?",
            (course_id,),
        ).fetchone()
        if row is None:
            raise NotFoundError(f"course {course_id!r} not found")
        return Course(course_id, *row)