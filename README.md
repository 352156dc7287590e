# coursekit

A small toolkit for managing a catalog of course categories and courses on
SQLite. It has no dependencies outside the standard library.

## Modules

- `coursekit.events`: `EventDispatcher` keeps `EventHandler` objects per event
  name. `register` adds a handler and raises `HandlerAlreadyRegisteredError`
  if that same handler object is already registered for the name. `has`,
  `remove`, `clear` and `handlers_for` manage the handlers, which are compared
  by identity. `dispatch(event)` runs every handler for `event.name` in
  separate threads and waits for all of them. If any handler raises, the first
  error in registration order is raised again once all handlers are done. An
  `Event` has a `name`, a `payload` and a `date_time`.
- `coursekit.catalog`: `CategoryStore` and `CourseStore` store `Category` and
  `Course` records, with ids generated as UUID strings. `create_schema` creates
  the `categories` and `courses` tables. `find`, `find_all`,
  `CategoryStore.find_by_course_id` and `CourseStore.find_by_category_id`
  read the records back. A single-record lookup that finds nothing raises
  `NotFoundError`.
- `coursekit.graph`: `Resolver` turns the stores into `CategoryModel` and
  `CourseModel` objects. It lists them with `categories()` and `courses()` and
  resolves nested fields with `category_courses` and `course_category`. It
  creates records from `NewCategory` and `NewCourse`. A missing description is
  rejected with `ValueError`.
- `coursekit.service`: `CategoryService` works with `CategoryMessage` values:
  - `create_category` takes a `CreateCategoryRequest`;
  - `list_categories` and `get_category` read categories;
  - `create_category_stream` takes an iterable of requests and returns a list;
  - `create_category_stream_bidirectional` takes an iterable of requests and
    yields each result as it is created.
- `coursekit.queries`: `Queries` runs fixed statements over categories and
  priced courses:
  - `create_category`, `create_course`, `update_category` and
    `delete_category` write;
  - `get_category`, `list_categories` and `list_courses` read, returning
    `CategoryRow` and `ListCoursesRow`.

  `CourseDB` adds `create_course_and_category`, which takes a `CategoryParams`
  and a `CourseParams` and writes both in one transaction, or neither. These
  queries expect a `courses` table with a `price` column. `create_schema` does
  not create that column, so you create those tables yourself.
- `coursekit.uow`: `UnitOfWork` keeps repository factories registered by name.
  `register` and `unregister` manage them. `get_repository` builds one on the
  shared transaction. `do(fn)` runs `fn` in a new transaction: it commits on
  success and rolls back on error. It raises `TransactionError` if a
  transaction is already open. `rollback` and `commit_or_rollback` finish a
  transaction by hand.
- `coursekit.school`: `CategoryRepository` and `CourseRepository` insert rows
  whose integer ids the database assigns. Two use cases take an
  `AddCourseInput`:
  - `AddCourseUseCase` writes a category and then a course, each on its own;
  - `AddCourseUseCaseUow` writes both through a `UnitOfWork`, both or neither.

  You create the integer-keyed tables they need yourself.
- `coursekit.product`: `ProductRepository` and `ProductUseCase`, assembled by
  `new_use_case(connection)`. Every product id currently maps to the name
  `"Product Name"`.

## Installation

```
pip install .
```

With the test dependencies:

```
pip install ".[test]"
```

## Library use

```python
import sqlite3

from coursekit.catalog import CategoryStore, CourseStore, create_schema

connection = sqlite3.connect(":memory:")
create_schema(connection)

categories = CategoryStore(connection)
courses = CourseStore(connection)

backend = categories.create("Backend", "Server-side development")
course = courses.create("Go", "Go course", backend.id)

print(categories.find_by_course_id(course.id).name)   # Backend
print([c.name for c in courses.find_by_category_id(backend.id)])
```

Dispatching events:

```python
from coursekit.events import Event, EventDispatcher, EventHandler

class PrintHandler(EventHandler):
    def handle(self, event):
        print(event.name, event.payload)

dispatcher = EventDispatcher()
dispatcher.register("order.created", PrintHandler())
dispatcher.dispatch(Event("order.created", payload={"id": 1}))
```

## Command line

The `coursekit` command uses the SQLite database `data.db` in the current
directory. Use `--database PATH` to choose another file. The tables are
created if they are missing.

Create a category:

```
coursekit category create --name Backend --description "Backend courses"
```

`--name` and `--description` (`-n` / `-d`) must be given together.

List categories:

```
coursekit category list
```

This prints the line `list called`. After it, the command prints one line per
category with the id, name and description separated by tabs.

With no subcommand, `coursekit` and `coursekit category` print their help.

`coursekit-product` looks up product 1 through the product use case and
prints its name. It takes an optional database path, which defaults to
`test.db`:

```
coursekit-product
```

## What it does not do

- The resolvers in `coursekit.graph` and the service in `coursekit.service`
  are plain Python objects. The package provides no GraphQL HTTP server and no
  RPC server or network transport for them.
- Events are dispatched in process only. Nothing is published to or consumed
  from a message broker.

## Running the tests

```
pytest
```