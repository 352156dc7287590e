import sqlite3

import pytest

from coursekit.catalog import NotFoundError
from coursekit.queries import (
    CategoryParams,
    CategoryRow,
    CourseDB,
    CourseParams,
    ListCoursesRow,
    Queries,
)

SCHEMA = """
CREATE TABLE categories (
    id TEXT PRIMARY KEY,
    name TEXT NOT NULL,
    description TEXT
);
CREATE TABLE courses (
    id TEXT PRIMARY KEY,
    category_id TEXT NOT NULL,
    name TEXT NOT NULL,
    description TEXT,
    price REAL NOT NULL
);
"""


@pytest.fixture
def db_path(tmp_path):
    path = tmp_path / "courses.db"
    with sqlite3.connect(path) as connection:
        connection.executescript(SCHEMA)
    connection.close()
    return path


@pytest.fixture
def connection(db_path):
    conn = sqlite3.connect(db_path)
    yield conn
    conn.close()


def _count(path, table):
    conn = sqlite3.connect(path)
    try:
        return conn.execute(f"SELECT COUNT(*) FROM {table}").fetchone()[0]
    finally:
        conn.close()


def test_create_and_get_category(connection):
    queries = Queries(connection)
    queries.create_category("c1", "Backend", "Backend description")
    assert queries.get_category("c1") == CategoryRow("c1", "Backend", "Backend description")


def test_null_description_round_trips(connection):
    queries = Queries(connection)
    queries.create_category("c1", "Backend", None)
    assert queries.get_category("c1").description is None


def test_writes_are_committed(connection, db_path):
    Queries(connection).create_category("c1", "Backend", "x")
    other = sqlite3.connect(db_path)
    try:
        assert Queries(other).get_category("c1") == CategoryRow("c1", "Backend", "x")
    finally:
        other.close()
    assert _count(db_path, "categories") == 1


def test_get_missing_category_raises(connection):
    with pytest.raises(NotFoundError):
        Queries(connection).get_category("missing")


def test_list_categories(connection):
    queries = Queries(connection)
    queries.create_category("a", "A", "first")
    queries.create_category("b", "B", None)
    assert sorted(queries.list_categories(), key=lambda r: r.id) == [
        CategoryRow("a", "A", "first"),
        CategoryRow("b", "B", None),
    ]


def test_list_categories_empty(connection):
    assert Queries(connection).list_categories() == []


def test_update_category(connection):
    queries = Queries(connection)
    queries.create_category("c1", "Backend", "old")
    queries.update_category("c1", "Backend updated", "new")
    assert queries.get_category("c1") == CategoryRow("c1", "Backend updated", "new")


def test_delete_category(connection):
    queries = Queries(connection)
    queries.create_category("c1", "Backend", "x")
    queries.delete_category("c1")
    with pytest.raises(NotFoundError):
        queries.get_category("c1")


def test_delete_missing_category_is_quiet(connection):
    queries = Queries(connection)
    queries.create_category("c1", "Backend", "x")
    queries.delete_category("other")
    assert [row.id for row in queries.list_categories()] == ["c1"]


def test_list_courses_joins_category_name(connection):
    queries = Queries(connection)
    queries.create_category("cat", "Backend", None)
    queries.create_course("go", "Go", "Go Course", "cat", 10.95)
    assert queries.list_courses() == [
        ListCoursesRow("go", "cat", "Go", "Go Course", 10.95, "Backend")
    ]


def test_list_courses_skips_courses_without_category(connection):
    queries = Queries(connection)
    queries.create_course("go", "Go", None, "nowhere", 1.0)
    assert queries.list_courses() == []


def test_duplicate_category_raises(connection):
    queries = Queries(connection)
    queries.create_category("c1", "A", None)
    with pytest.raises(sqlite3.IntegrityError):
        queries.create_category("c1", "B", None)


def test_create_course_and_category_commits_both(connection, db_path):
    course_db = CourseDB(connection)
    course_db.create_course_and_category(
        CategoryParams("cat", "Backend", "Backend Course"),
        CourseParams("go", "Go", "Go Course", 10.95),
    )
    assert course_db.list_courses() == [
        ListCoursesRow("go", "cat", "Go", "Go Course", 10.95, "Backend")
    ]
    assert _count(db_path, "categories") == 1
    assert _count(db_path, "courses") == 1


def test_create_course_and_category_rolls_back_on_failure(connection, db_path):
    course_db = CourseDB(connection)
    course_db.create_category("other", "Other", None)
    course_db.create_course("go", "Go", None, "other", 1.0)
    with pytest.raises(sqlite3.IntegrityError):
        course_db.create_course_and_category(
            CategoryParams("cat", "Backend", None),
            CourseParams("go", "Go again", None, 2.0),
        )
    assert [row.id for row in course_db.list_categories()] == ["other"]
    assert _count(db_path, "categories") == 1
    assert not connection.in_transaction