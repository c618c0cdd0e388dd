"""Athena connection wrapper."""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence

from awr_athena.common.config import ATHENA_MAX_FETCH_SIZE
from awr_athena.common.log import get_logger
from awr_athena.athena.result import AthenaResult
from awr_athena.jdbc.bridge import JdbcConnection
from awr_athena.jdbc.pull import RowBatch

LOGGER = get_logger(__name__)


class AthenaConnection:
    """A live Athena JDBC connection plus the region, staging location and schema it was opened with."""

    def __init__(
        self,
        connection: JdbcConnection,
        *,
        region: str,
        s3_staging_dir: str,
        schema_name: str,
        url: str,
        fetch_size: int = ATHENA_MAX_FETCH_SIZE,
    ) -> None:
        self._connection = connection
        self.region = region
        self.s3_staging_dir = s3_staging_dir
        self.schema_name = schema_name
        self.url = url
        self.fetch_size = fetch_size

    @property
    def closed(self) -> bool:
        return self._connection.closed

    @property
    def identifier_quote(self) -> str:
        return self._connection.identifier_quote

    def submit(self, statement: str, parameters: Optional[Sequence[Any]] = None) -> AthenaResult:
        LOGGER.info("Submitting Athena statement", extra={"schema_name": self.schema_name, "statement": statement})
        result = self._connection.submit(statement, parameters)
        return AthenaResult(result, fetch_size=self.fetch_size)

    def get_query(self, statement: str, parameters: Optional[Sequence[Any]] = None) -> RowBatch:
        """Run ``statement`` and return every row it produces."""
        with self.submit(statement, parameters) as result:
            return result.fetch(-1)

    def execute(self, statement: str, parameters: Optional[Sequence[Any]] = None) -> None:
        """Run a statement for its side effect, such as DDL."""
        self.submit(statement, parameters).close()

    def list_tables(self, pattern: str = "%") -> List[str]:
        return self._connection.list_tables(schema=self.schema_name, pattern=pattern)

    def exists_table(self, name: str) -> bool:
        return name.lower() in {table.lower() for table in self.list_tables(pattern=name)}

    def list_fields(self, table: str) -> List[str]:
        return self._connection.list_fields(table, schema=self.schema_name)

    def quote_identifier(self, name: str) -> str:
        return self._connection.quote_identifier(name)

    def get_info(self) -> Dict[str, Any]:
        return {
            "region": self.region,
            "s3_staging_dir": self.s3_staging_dir,
            "schema_name": self.schema_name,
            "url": self.url,
            "fetch_size": self.fetch_size,
        }

    def close(self) -> None:
        self._connection.close()

    def __enter__(self) -> "AthenaConnection":
        return self

    def __exit__(self, *_exc_info: object) -> None:
        self.close()


__all__ = ["AthenaConnection"]
