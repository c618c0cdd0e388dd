"""Pydantic models for Athena connection arguments."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict

from pydantic import BaseModel, Field, ValidationError

ATHENA_DRIVER_CLASS = "com.amazonaws.athena.jdbc.AthenaDriver"
ATHENA_IDENTIFIER_QUOTE = "'"


@dataclass(slots=True, frozen=True)
class DriverIdentity:
    """The JDBC implementation behind the Athena driver."""

    driver_class: str = ATHENA_DRIVER_CLASS
    identifier_quote: str = ATHENA_IDENTIFIER_QUOTE


class ConnectionSettings(BaseModel):
    """Arguments required to open an Athena connection."""

    region: str = Field(..., min_length=1, description="AWS region code, e.g. us-west-2")
    s3_staging_dir: str = Field(..., min_length=1, description="S3 location where query results are staged")
    schema_name: str = Field(..., min_length=1, description="Default Athena schema")
    options: Dict[str, Any] = Field(default_factory=dict)

    def driver_properties(self) -> Dict[str, Any]:
        return {"s3_staging_dir": self.s3_staging_dir, "schema_name": self.schema_name}


def parse_settings(**values: Any) -> ConnectionSettings:
    try:
        return ConnectionSettings(**values)
    except ValidationError as exc:
        raise ValueError(str(exc)) from exc


__all__ = [
    "ATHENA_DRIVER_CLASS",
    "ATHENA_IDENTIFIER_QUOTE",
    "ConnectionSettings",
    "DriverIdentity",
    "parse_settings",
]
