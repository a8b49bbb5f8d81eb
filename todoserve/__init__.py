"""A JSON HTTP service for managing todo items stored in SQLite."""

__version__ = "0.1.0"