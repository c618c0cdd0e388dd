"""AWS Athena through a relational client interface backed by the Athena JDBC driver."""

from importlib import metadata
from typing import Any

from awr_athena.athena.connection import AthenaConnection
from awr_athena.athena.driver import AthenaDriver
from awr_athena.athena.result import AthenaResult
from awr_athena.athena.url import build_url
from awr_athena.common.config import load_config
from awr_athena.common.errors import (
    AthenaConnectionError,
    AthenaError,
    ProtocolError,
    ResultClosedError,
    StatementError,
)


def get_version() -> str:
    """Return the installed package version if available, otherwise a placeholder."""
    try:
        return metadata.version("awr-athena")
    except metadata.PackageNotFoundError:
        return "0.0.0-dev"


def connect(**options: Any) -> AthenaConnection:
    """Open a connection using the environment configuration; keyword options become driver properties."""
    config = load_config()
    return AthenaDriver.from_config(config).connect_from_config(config, **options)


__all__ = [
    "AthenaConnection",
    "AthenaConnectionError",
    "AthenaDriver",
    "AthenaError",
    "AthenaResult",
    "ProtocolError",
    "ResultClosedError",
    "StatementError",
    "build_url",
    "connect",
    "get_version",
]
