"""Resolvers that expose the catalog through a GraphQL-shaped API."""

from __future__ import annotations

from dataclasses import dataclass

from coursekit.catalog import Category, CategoryStore, Course, CourseStore


@dataclass(frozen=True)
class CategoryModel:
    """A category as seen by API clients."""

    id: str
    name: str
    description: str | None = None


@dataclass(frozen=True)
class CourseModel:
    """A course as seen by API clients."""

    id: str
    name: str
    description: str | None = None


@dataclass(frozen=True)
class NewCategory:
    """Input for creating a category."""

    name: str
    description: str | None = None


@dataclass(frozen=True)
class NewCourse:
    """Input for creating a course inside a category."""

    name: str
    category_id: str
    description: str | None = None


def _category_model(category: Category) -> CategoryModel:
    return CategoryModel(
        id=category.id, name=category.name, description=category.description
    )


def _course_model(course: Course) -> CourseModel:
    return CourseModel(id=course.id, name=course.name, description=course.description)


def _required_description(description: str | None) -> str:
    if description is None:
        raise ValueError("description is required")
    return description


class Resolver:
    """Answers queries, mutations and nested fields from the stores."""

    def __init__(self, category_store: CategoryStore, course_store: CourseStore) -> None:
        self.category_store = category_store
        self.course_store = course_store

    def category_courses(self, category: CategoryModel) -> list[CourseModel]:
        """Resolve the courses field of a category."""
        return [
            _course_model(course)
            for course in self.course_store.find_by_category_id(category.id)
        ]

    def course_category(self, course: CourseModel) -> CategoryModel:
        """Resolve the category field of a course."""
        return _category_model(self.category_store.find_by_course_id(course.id))

    def create_category(self, new_category: NewCategory) -> CategoryModel:
        """Mutation that stores a new category."""
        description = _required_description(new_category.description)
        return _category_model(self.category_store.create(new_category.name, description))

    def create_course(self, new_course: NewCourse) -> CourseModel:
        """Mutation that stores a new course."""
        description = _required_description(new_course.description)
        course = self.course_store.create(
            new_course.name, description, new_course.category_id
        )
        return _course_model(course)

    def categories(self) -> list[CategoryModel]:
        """Query listing every category."""
        return [_category_model(c) for c in self.category_store.find_all()]

    def courses(self) -> list[CourseModel]:
        """Query listing every course."""
        return [_course_model(c) for c in self.course_store.find_all()]