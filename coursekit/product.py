"""Product lookup wired from a repository into a use case."""

from __future__ import annotations

import argparse
import sqlite3
import sys
from contextlib import closing
from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True)
class Product:
    id: int
    name: str


class ProductRepositoryInterface(Protocol):
    def get_product(self, product_id: int) -> Product: ...


class ProductRepository:
    """Looks up products; every id currently maps to a fixed name."""

    def __init__(self, connection: sqlite3.Connection) -> None:
        self.connection = connection

    def get_product(self, product_id: int) -> Product:
        return Product(id=product_id, name="Product Name")


class ProductUseCase:
    """Returns products through a repository."""

    def __init__(self, repository: ProductRepositoryInterface) -> None:
        self.repository = repository

    def get_product(self, product_id: int) -> Product:
        return self.repository.get_product(product_id)


def new_use_case(connection: sqlite3.Connection) -> ProductUseCase:
    """Assemble a use case backed by a repository on the given connection."""
    return ProductUseCase(ProductRepository(connection))


def main(argv: list[str] | None = None) -> int:
    """Print the name of product 1."""
    parser = argparse.ArgumentParser(prog="coursekit-product")
    parser.add_argument("database", nargs="?", default="test.db")
    args = parser.parse_args(argv)
    with closing(sqlite3.connect(args.database)) as connection:
        product = new_use_case(connection).get_product(1)
    print(product.name)
    return 0


if __name__ == "__main__":
    sys.exit(main())