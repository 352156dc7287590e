"""Category service with unary and streaming operations."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from coursekit.catalog import Category, CategoryStore


@dataclass(frozen=True)
class CategoryMessage:
    """A category as sent to service clients."""

    id: str
    name: str
    description: str


@dataclass(frozen=True)
class CreateCategoryRequest:
    """A request to create one category."""

    name: str
    description: str


def _message(category: Category) -> CategoryMessage:
    return CategoryMessage(
        id=category.id, name=category.name, description=category.description
    )


class CategoryService:
    """Creates and lists categories on behalf of remote callers."""

    def __init__(self, category_store: CategoryStore) -> None:
        self.category_store = category_store

    def create_category(self, request: CreateCategoryRequest) -> CategoryMessage:
        """Create one category."""
        return _message(self.category_store.create(request.name, request.description))

    def list_categories(self) -> list[CategoryMessage]:
        """Return every category."""
        return [_message(c) for c in self.category_store.find_all()]

    def get_category(self, category_id: str) -> CategoryMessage:
        """Return one category; raises NotFoundError if it does not exist."""
        return _message(self.category_store.find(category_id))

    def create_category_stream(
        self, requests: Iterable[CreateCategoryRequest]
    ) -> list[CategoryMessage]:
        """Create a category for each request and return them all at the end."""
        return [self.create_category(request) for request in requests]

    def create_category_stream_bidirectional(
        self, requests: Iterable[CreateCategoryRequest]
    ) -> Iterator[CategoryMessage]:
        """Create and yield a category for each request as it arrives."""
        for request in requests:
            yield self.create_category(request)