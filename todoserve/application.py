"""Wiring of configuration, store and HTTP server, and the command entry point."""

from __future__ import annotations

import argparse
from collections.abc import Mapping, Sequence
from typing import Any

from todoserve.config import load_config
from todoserve.controllers import Server
from todoserve.models import new_store


class Application:
    """The assembled service."""

    def __init__(self, server: Any) -> None:
        self.server = server

    def run(self) -> None:
        self.server.run()


def new_application(environ: Mapping[str, str] | None = None) -> Application:
    """Load the configuration, open the store and build the server."""
    config = load_config(environ)
    store = new_store(config.db_uri)
    return Application(Server(config, store))


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="todoserve",
        description="Serve the todo HTTP API configured by SERVER_ADDRESS and DB_URI.",
    )
    parser.parse_args(argv)
    try:
        application = new_application()
    except ValueError as err:
        parser.exit(1, f"todoserve: {err}\n")
    application.run()
    return 0