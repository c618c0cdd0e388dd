"""Exceptions raised by the Athena client.

Driver failures are re-raised as one of these types with the driver's message
unchanged and the original exception chained as ``__cause__``.
"""

from __future__ import annotations

FETCH_SIZE_REJECTED = "fetchsize is more than the allowed value"


class AthenaError(Exception):
    """Base class for every error raised by this package."""


class AthenaConnectionError(AthenaError):
    """Handshake, authentication or network failure while connecting."""


class ProtocolError(AthenaError):
    """The service rejected a malformed request, such as an oversized fetch stride."""


class StatementError(AthenaError):
    """SQL execution failed: syntax, permissions or resource limits."""


class ResultClosedError(AthenaError):
    """A closed result or connection was used."""


def classify_fetch_error(exc: BaseException) -> AthenaError:
    message = str(exc)
    if FETCH_SIZE_REJECTED in message.lower():
        return ProtocolError(message)
    return StatementError(message)


__all__ = [
    "AthenaConnectionError",
    "AthenaError",
    "ProtocolError",
    "ResultClosedError",
    "StatementError",
    "classify_fetch_error",
]
