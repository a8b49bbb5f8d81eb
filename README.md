# todoserve

A small HTTP service that keeps a list of todo items in a SQLite database
and exposes them as JSON.

## Installing

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Running

The service reads its settings from the environment:

| Variable         | Meaning                                                        |
|------------------|----------------------------------------------------------------|
| `SERVER_ADDRESS` | Address to listen on, as `host:port`; empty means `0.0.0.0:8080` |
| `DB_URI`         | The SQLite database holding the todos (required)               |

`DB_URI` may be:

- `sqlite:///todos.db` – a file path after `sqlite:///` (`sqlite:////var/lib/todos.db` for an absolute path),
- `sqlite://` – an in-memory database,
- a plain path such as `todos.db`.

An empty `DB_URI` or one with any other scheme is refused, and the command
exits with status 1. The `todos` table is created on start if it does not
exist.

Then start it with:

```
todoserve
```

The command takes no options besides `--help`.

## Endpoints

| Method   | Path          | Does                                     | Success status |
|----------|---------------|------------------------------------------|----------------|
| `GET`    | `/`           | Health check, returns `{"status": "ok"}` | 200            |
| `POST`   | `/todos`      | Creates a todo                           | 201            |
| `GET`    | `/todos`      | Lists all todos, ordered by id           | 200            |
| `PUT`    | `/todos/<id>` | Replaces a todo's fields                 | 200            |
| `DELETE` | `/todos/<id>` | Deletes a todo                           | 204            |

`GET /todos` answers `null` rather than `[]` when there are no todos.
Deleting an id that does not exist still answers 204. Updating an id that
does not exist answers 500 with the message `no rows in result set`.

### Request body

`POST /todos` and `PUT /todos/<id>` take a JSON object:

```json
{
  "title": "Buy milk",
  "description": "Two litres",
  "completed": false
}
```

`title` (a non-empty string) and `completed` (a boolean) are required;
`description` is optional. `id`, `created_at` and `updated_at` may be sent
but are ignored.

The `<id>` in a path must be a non-zero integer that fits in 32 bits.

### Response body

A todo is returned as:

```json
{
  "id": 1,
  "title": "Buy milk",
  "description": "Two litres",
  "completed": false,
  "created_at": "2024-05-01 09:30:00",
  "updated_at": "2024-05-01 09:30:00"
}
```

Timestamps are in UTC, written as `YYYY-MM-DD HH:MM:SS`.

### Errors

An empty or malformed body, a missing required field, or a bad id answers
with status 400; a database failure answers with status 500. Both carry a
JSON object of this shape:

```json
{"error": "Bad Request", "message": "..."}
```

with `"Internal Server Error"` as the `error` for status 500.

## Using it from Python

```python
from todoserve.config import load_config
from todoserve.models import new_store
from todoserve.controllers import Server

config = load_config({"SERVER_ADDRESS": "127.0.0.1:8080", "DB_URI": "todos.db"})
server = Server(config, new_store(config.db_uri))
server.run()
```

`Server.router` is the Flask application, so `server.router.test_client()`
can drive the API without opening a socket.

`todoserve.application.new_application` does the same wiring from a mapping
of environment variables (the process environment by default) and returns
an `Application` whose `run()` starts serving.

The store returned by `todoserve.models.new_store` is a `Queries` object
with `create_todo`, `get_todo`, `get_todos`, `update_todo` and
`delete_todo`; `get_todo` and `update_todo` raise `LookupError` for an id
that does not exist.

## What it does not do

- Storage is SQLite only; no other database server can be configured.
- `run()` uses Flask's built-in development server. For production, serve
  `Server.router` with a WSGI server of your choice.
- There is no authentication, paging or filtering of the todo list, and no
  endpoint for fetching a single todo.