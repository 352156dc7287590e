"""Command line tool for managing course categories."""

from __future__ import annotations

import argparse
import sqlite3
import sys
from contextlib import closing

from coursekit.catalog import CategoryStore, create_schema

DEFAULT_DATABASE = "data.db"


def open_database(path: str) -> sqlite3.Connection:
    """Open the SQLite database at path, creating its tables if needed."""
    connection = sqlite3.connect(path)
    create_schema(connection)
    return connection


def _run_create(args: argparse.Namespace) -> int:
    if (args.name is None) != (args.description is None):
        print(
            "Error: if any flags in the group [name description] are set "
            "they must all be set",
            file=sys.stderr,
        )
        return 1
    with closing(open_database(args.database)) as connection:
        CategoryStore(connection).create(args.name or "", args.description or "")
    return 0


def _run_list(args: argparse.Namespace) -> int:
    print("list called")
    with closing(open_database(args.database)) as connection:
        for category in CategoryStore(connection).find_all():
            print(f"{category.id}\t{category.name}\t{category.description}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with the category commands."""
    parser = argparse.ArgumentParser(
        prog="coursekit", description="Manage course categories."
    )
    parser.add_argument("-t", "--toggle", action="store_true", help="Toggle option")
    parser.add_argument(
        "--database", default=DEFAULT_DATABASE, help="Path of the SQLite database"
    )
    parser.set_defaults(help_parser=parser, run=None)
    commands = parser.add_subparsers(dest="command")

    category = commands.add_parser("category", help="Work with categories")
    category.set_defaults(help_parser=category, run=None)
    category_commands = category.add_subparsers(dest="category_command")

    create = category_commands.add_parser(
        "create", help="Create a new category", description="Create a new category"
    )
    create.add_argument("-n", "--name", help="Name of the category")
    create.add_argument("-d", "--description", help="Description of the category")
    create.set_defaults(run=_run_create)

    listing = category_commands.add_parser("list", help="List categories")
    listing.set_defaults(run=_run_list)
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the command line tool and return its exit status."""
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.run is None:
        args.help_parser.print_help()
        return 0
    try:
        return args.run(args)
    except sqlite3.Error as error:
        print(f"Error: {error}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())