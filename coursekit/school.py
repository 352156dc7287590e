"""Courses and categories added together, with or without a unit of work."""

from __future__ import annotations

import sqlite3
from dataclasses import dataclass, field
from typing import Any, Protocol

from coursekit.uow import UnitOfWork

CATEGORY_REPOSITORY = "CategoryRepository"
COURSE_REPOSITORY = "CourseRepository"

_CREATE_CATEGORY = "INSERT INTO categories (id, name) VALUES (?, ?)"
_CREATE_COURSE = "INSERT INTO courses (id, name, category_id) VALUES (?, ?, ?)"


@dataclass
class Category:
    """A category and the ids of the courses it holds."""

    id: int = 0
    name: str = ""
    course_ids: list[int] = field(default_factory=list)

    def add_course(self, course_id: int) -> None:
        """Record that a course belongs to this category."""
        self.course_ids.append(course_id)


@dataclass
class Course:
    """A course that belongs to one category."""

    id: int = 0
    name: str = ""
    category_id: int = 0


class _Repository:
    def __init__(self, connection: sqlite3.Connection, *, autocommit: bool = True) -> None:
        self.connection = connection
        self.autocommit = autocommit

    def _execute(self, sql: str, params: tuple[Any, ...]) -> None:
        if self.autocommit:
            with self.connection:
                self.connection.execute(sql, params)
        else:
            self.connection.execute(sql, params)


class CategoryRepositoryInterface(Protocol):
    def insert(self, category: Category) -> None: ...


class CourseRepositoryInterface(Protocol):
    def insert(self, course: Course) -> None: ...


class CategoryRepository(_Repository):
    """Stores categories; the database assigns their ids.

    With ``autocommit`` each insert is committed on its own; without it the
    caller owns the surrounding transaction.
    """

    def insert(self, category: Category) -> None:
        self._execute(_CREATE_CATEGORY, (None, category.name))


class CourseRepository(_Repository):
    """Stores courses; the database assigns their ids."""

    def insert(self, course: Course) -> None:
        self._execute(_CREATE_COURSE, (None, course.name, course.category_id))


@dataclass(frozen=True)
class AddCourseInput:
    """What is needed to add a category and a course."""

    category_name: str
    course_name: str
    course_category_id: int


class AddCourseUseCase:
    """Adds a category, then a course, each written on its own."""

    def __init__(
        self,
        course_repository: CourseRepositoryInterface,
        category_repository: CategoryRepositoryInterface,
    ) -> None:
        self.course_repository = course_repository
        self.category_repository = category_repository

    def execute(self, data: AddCourseInput) -> None:
        self.category_repository.insert(Category(name=data.category_name))
        self.course_repository.insert(
            Course(name=data.course_name, category_id=data.course_category_id)
        )


class AddCourseUseCaseUow:
    """Adds a category and a course in one transaction: both or neither."""

    def __init__(self, uow: UnitOfWork) -> None:
        self.uow = uow

    def execute(self, data: AddCourseInput) -> None:
        def work(uow: UnitOfWork) -> None:
            categories: CategoryRepositoryInterface = uow.get_repository(
                CATEGORY_REPOSITORY
            )
            categories.insert(Category(name=data.category_name))
            courses: CourseRepositoryInterface = uow.get_repository(COURSE_REPOSITORY)
            courses.insert(
                Course(name=data.course_name, category_id=data.course_category_id)
            )

        self.uow.do(work)