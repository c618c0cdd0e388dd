"""Logging helpers with credential masking."""

from __future__ import annotations

import logging
import os
from typing import Any, Dict, Mapping

_LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

SENSITIVE_KEYS = frozenset({"user", "access_key_id", "password", "secret", "token", "key", "session_token", "secret_key", "access_key"})


class MaskingFilter(logging.Filter):
    """Mask sensitive attributes attached to log records through ``extra``."""

    def filter(self, record: logging.LogRecord) -> bool:  # noqa: D401
        for name, value in list(record.__dict__.items()):
            if name.lower() in SENSITIVE_KEYS and value:
                setattr(record, name, mask(str(value)))
            elif isinstance(value, Mapping):
                setattr(record, name, redact_properties(value))
        return True


def mask(value: str) -> str:
    return "***" if len(value) < 6 else f"{value[:3]}***{value[-3:]}"


def redact_properties(properties: Mapping[str, Any]) -> Dict[str, Any]:
    """Return a copy of driver properties that is safe to log."""
    redacted: Dict[str, Any] = {}
    for name, value in properties.items():
        if str(name).lower() in SENSITIVE_KEYS and value:
            redacted[name] = mask(str(value))
        else:
            redacted[name] = value
    return redacted


def get_logger(name: str) -> logging.Logger:
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger
    handler = logging.StreamHandler()
    formatter = logging.Formatter(
        fmt="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
    handler.setFormatter(formatter)
    handler.addFilter(MaskingFilter())
    logger.addHandler(handler)
    logger.setLevel(_LOG_LEVEL)
    logger.propagate = False
    return logger


__all__ = ["MaskingFilter", "get_logger", "mask", "redact_properties"]
