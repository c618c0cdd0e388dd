"""Configuration loader reading Athena connection defaults from the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from functools import lru_cache
from typing import List, Optional

from awr_athena.common.log import get_logger

LOGGER = get_logger(__name__)

DEFAULT_REGION = "us-east-1"
DEFAULT_SCHEMA_NAME = "default"
# Largest fetch size the Athena service accepts per JDBC round-trip.
ATHENA_MAX_FETCH_SIZE = 999


@dataclass(slots=True)
class AthenaSettings:
    """Runtime configuration."""

    region: str
    s3_staging_dir: Optional[str]
    schema_name: str
    driver_jars: List[str] = field(default_factory=list)
    fetch_size: int = ATHENA_MAX_FETCH_SIZE
    profile_name: Optional[str] = None

    def require_staging_dir(self) -> str:
        if not self.s3_staging_dir:
            raise ValueError("Athena staging location missing. Set ATHENA_S3_STAGING_DIR, e.g. s3://bucket/path/.")
        return self.s3_staging_dir


def _read_region() -> str:
    for name in ("ATHENA_REGION", "AWS_REGION", "AWS_DEFAULT_REGION"):
        value = os.getenv(name)
        if value:
            return value
    return DEFAULT_REGION


def _read_fetch_size() -> int:
    raw = os.getenv("ATHENA_FETCH_SIZE", str(ATHENA_MAX_FETCH_SIZE))
    try:
        fetch_size = int(raw)
    except ValueError as exc:
        raise ValueError(f"ATHENA_FETCH_SIZE must be an integer, got {raw!r}") from exc
    if fetch_size < 1:
        raise ValueError(f"ATHENA_FETCH_SIZE must be positive, got {fetch_size}")
    return fetch_size


@lru_cache(maxsize=1)
def load_config(refresh: bool = False) -> AthenaSettings:
    """Load configuration with optional refresh."""
    if refresh:
        load_config.cache_clear()
    driver_jars = [path.strip() for path in os.getenv("ATHENA_JDBC_JAR", "").split(",") if path.strip()]

    config = AthenaSettings(
        region=_read_region(),
        s3_staging_dir=os.getenv("ATHENA_S3_STAGING_DIR") or None,
        schema_name=os.getenv("ATHENA_SCHEMA_NAME") or DEFAULT_SCHEMA_NAME,
        driver_jars=driver_jars,
        fetch_size=_read_fetch_size(),
        profile_name=os.getenv("AWS_PROFILE") or None,
    )

    LOGGER.debug("Configuration loaded", extra={"region": config.region, "schema_name": config.schema_name})
    return config


__all__ = ["ATHENA_MAX_FETCH_SIZE", "AthenaSettings", "load_config"]
