"""Runtime configuration for the todo service."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass


@dataclass(frozen=True)
class Config:
    """Settings the service needs to start."""

    server_address: str = ""
    db_uri: str = ""


def load_config(environ: Mapping[str, str] | None = None) -> Config:
    """Read the configuration from ``environ`` (the process environment by default).

    ``SERVER_ADDRESS`` and ``DB_URI`` are read; a missing key leaves the
    matching setting empty.
    """
    source = os.environ if environ is None else environ
    return Config(
        server_address=source.get("SERVER_ADDRESS", ""),
        db_uri=source.get("DB_URI", ""),
    )