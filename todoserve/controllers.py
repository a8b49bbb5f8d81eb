"""HTTP handlers for the todo API."""

from __future__ import annotations

import json
import re
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any

from flask import Flask, jsonify, request

from todoserve.config import Config
from todoserve.models import CreateTodoParams, Todo, UpdateTodoParams

_DEFAULT_HOST = "0.0.0.0"
_DEFAULT_PORT = 8080
_ZERO_TIME = datetime(1, 1, 1)
_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1
_INTEGER = re.compile(r"[+-]?[0-9]+")

# Expected JSON types of the optional body fields.
_FIELD_TYPES = {
    "title": str,
    "description": str,
    "created_at": str,
    "updated_at": str,
}


class ValidationError(ValueError):
    """A request body or path parameter that cannot be accepted."""


@dataclass(frozen=True)
class TodoBody:
    """The accepted part of a todo request body."""

    title: str
    description: str
    completed: bool


def bad_request_error(err: BaseException) -> dict[str, str]:
    return {"error": "Bad Request", "message": str(err)}


def internal_server_error(err: BaseException) -> dict[str, str]:
    return {"error": "Internal Server Error", "message": str(err)}


def _required(struct: str, field: str) -> str:
    return f"Key: '{struct}.{field}' Error:Field validation for '{field}' failed on the 'required' tag"


def parse_todo_body(data: Any) -> TodoBody:
    """Validate decoded JSON as a todo body; ``title`` and ``completed`` are required."""
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValidationError("request body must be a JSON object")

    for name, expected in _FIELD_TYPES.items():
        value = data.get(name)
        if value is not None and not isinstance(value, expected):
            raise ValidationError(f"field '{name}' must be a string")
    todo_id = data.get("id")
    if todo_id is not None and (isinstance(todo_id, bool) or not isinstance(todo_id, int)):
        raise ValidationError("field 'id' must be an integer")
    completed = data.get("completed")
    if completed is not None and not isinstance(completed, bool):
        raise ValidationError("field 'completed' must be a boolean")

    title = data.get("title") or ""
    problems = []
    if not title:
        problems.append(_required("Todo", "Title"))
    if completed is None:
        problems.append(_required("Todo", "Completed"))
    if problems:
        raise ValidationError("\n".join(problems))
    return TodoBody(title=title, description=data.get("description") or "", completed=completed)


def parse_resource_id(raw: str) -> int:
    """Parse a path id as a non-zero 32-bit integer."""
    if not isinstance(raw, str) or not _INTEGER.fullmatch(raw):
        raise ValidationError(f"invalid id {raw!r}: not an integer")
    value = int(raw)
    if not _INT32_MIN <= value <= _INT32_MAX:
        raise ValidationError(f"invalid id {raw!r}: value out of range")
    if value == 0:
        raise ValidationError(_required("Resource", "ID"))
    return value


def _utc_now() -> datetime:
    return datetime.now(timezone.utc).replace(tzinfo=None)


def create_todo_params(body: TodoBody) -> CreateTodoParams:
    now = _utc_now()
    return CreateTodoParams(
        title=body.title,
        description=body.description,
        completed=body.completed,
        created_at=now,
        updated_at=now,
    )


def update_todo_params(todo_id: int, body: TodoBody) -> UpdateTodoParams:
    return UpdateTodoParams(
        id=todo_id,
        title=body.title,
        description=body.description,
        completed=body.completed,
        updated_at=_utc_now(),
    )


def _format_time(value: datetime | None) -> str:
    return (value or _ZERO_TIME).replace(tzinfo=None).isoformat(sep=" ", timespec="seconds")


def todo_response(todo: Todo) -> dict[str, Any]:
    """Render a stored todo as its JSON response object."""
    return {
        "id": todo.id,
        "title": todo.title,
        "description": todo.description or "",
        "completed": bool(todo.completed),
        "created_at": _format_time(todo.created_at),
        "updated_at": _format_time(todo.updated_at),
    }


def get_todos_response(todos: list[Todo]) -> list[dict[str, Any]] | None:
    """Render a list of todos; an empty list renders as ``None`` (JSON ``null``)."""
    return [todo_response(todo) for todo in todos] or None


def _read_json() -> Any:
    raw = request.get_data(cache=True)
    if not raw:
        raise ValidationError("request body is empty")
    try:
        return json.loads(raw)
    except ValueError as exc:
        raise ValidationError(f"invalid JSON: {exc}") from exc


def _split_address(address: str) -> tuple[str, int]:
    if not address:
        return _DEFAULT_HOST, _DEFAULT_PORT
    host, sep, port = address.rpartition(":")
    if not sep:
        raise ValueError(f"invalid server address {address!r}: missing port")
    try:
        port_number = int(port)
    except ValueError:
        raise ValueError(f"invalid server address {address!r}: bad port") from None
    return host.strip("[]") or _DEFAULT_HOST, port_number


class Server:
    """The HTTP application: a Flask router bound to a config and a store."""

    def __init__(self, config: Config, store: Any) -> None:
        self.config = config
        self.store = store
        self.router = Flask(__name__)
        self.router.json.sort_keys = False
        self.setup_routes()

    def setup_routes(self) -> None:
        add = self.router.add_url_rule
        add("/", "health", self.health, methods=["GET"])
        add("/todos", "create_todo", self.create_todo, methods=["POST"])
        add("/todos", "get_todos", self.get_todos, methods=["GET"])
        add("/todos/<id>", "update_todo", self.update_todo, methods=["PUT"])
        add("/todos/<id>", "destroy_todo", self.destroy_todo, methods=["DELETE"])

    def run(self) -> None:
        host, port = _split_address(self.config.server_address)
        self.router.run(host=host, port=port)

    def health(self):
        return jsonify({"status": "ok"}), 200

    # Store failures of any kind are reported to the client as a 500.
    def create_todo(self):
        try:
            body = parse_todo_body(_read_json())
        except ValidationError as err:
            return jsonify(bad_request_error(err)), 400
        try:
            created = self.store.create_todo(create_todo_params(body))
        except Exception as err:
            return jsonify(internal_server_error(err)), 500
        return jsonify(todo_response(created)), 201

    def get_todos(self):
        try:
            todos = self.store.get_todos()
        except Exception as err:
            return jsonify(internal_server_error(err)), 500
        return jsonify(get_todos_response(todos)), 200

    def update_todo(self, id):
        try:
            body = parse_todo_body(_read_json())
            todo_id = parse_resource_id(id)
        except ValidationError as err:
            return jsonify(bad_request_error(err)), 400
        try:
            updated = self.store.update_todo(update_todo_params(todo_id, body))
        except Exception as err:
            return jsonify(internal_server_error(err)), 500
        return jsonify(todo_response(updated)), 200

    def destroy_todo(self, id):
        try:
            todo_id = parse_resource_id(id)
        except ValidationError as err:
            return jsonify(bad_request_error(err)), 400
        try:
            self.store.delete_todo(todo_id)
        except Exception as err:
            return jsonify(internal_server_error(err)), 500
        return "", 204