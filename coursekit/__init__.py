"""Course catalog toolkit: events, SQLite stores, resolvers, a category service and units of work."""

__version__ = "0.1.0"

__all__ = [
    "catalog",
    "cli",
    "events",
    "graph",
    "product",
    "queries",
    "school",
    "service",
    "uow",
]