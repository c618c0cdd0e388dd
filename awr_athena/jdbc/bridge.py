"""Generic JDBC driver, connection and result types on top of JayDeBeApi."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, List, Mapping, Optional, Sequence, Tuple

import jaydebeapi
import jpype

from awr_athena.common.errors import (
    AthenaConnectionError,
    ResultClosedError,
    StatementError,
    classify_fetch_error,
)
from awr_athena.common.log import get_logger, redact_properties
from awr_athena.jdbc.pull import ColumnInfo, ResultPull, RowBatch

LOGGER = get_logger(__name__)

DEFAULT_BLOCK = 2048
DRIVER_ERRORS = (jaydebeapi.Error, jpype.JException)


class ResultState(str, Enum):
    CREATED = "CREATED"
    FETCHING = "FETCHING"
    EXHAUSTED = "EXHAUSTED"
    CLOSED = "CLOSED"


@dataclass(slots=True, frozen=True)
class JdbcDriver:
    """A JDBC driver class loaded through JayDeBeApi."""

    driver_class: str
    identifier_quote: str = '"'
    jars: Tuple[str, ...] = ()

    def connect(self, url: str, properties: Mapping[str, Any] | None = None) -> "JdbcConnection":
        driver_args = {str(name): str(value) for name, value in (properties or {}).items() if value is not None}
        LOGGER.info("Opening JDBC connection", extra={"url": url, "properties": redact_properties(driver_args)})
        try:
            handle = jaydebeapi.connect(self.driver_class, url, driver_args, list(self.jars) or None)
        except DRIVER_ERRORS as exc:
            LOGGER.error("JDBC connection failed", extra={"url": url, "error": str(exc)})
            raise AthenaConnectionError(str(exc)) from exc
        return JdbcConnection(handle=handle, identifier_quote=self.identifier_quote)


class JdbcResult:
    """Result of one submitted statement; owns the cursor it reads from."""

    def __init__(self, pull: ResultPull, statement: str, default_block: int = DEFAULT_BLOCK) -> None:
        self.pull = pull
        self.statement = statement
        self.default_block = default_block
        self.row_count = 0
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def state(self) -> ResultState:
        if self._closed:
            return ResultState.CLOSED
        if self.pull.exhausted:
            return ResultState.EXHAUSTED
        if self.pull.started:
            return ResultState.FETCHING
        return ResultState.CREATED

    def column_info(self) -> List[ColumnInfo]:
        return self.pull.columns()

    def fetch(self, n: int = -1, block: Optional[int] = None) -> RowBatch:
        """Fetch ``n`` rows (``-1`` for all remaining) using ``block`` as the JDBC fetch size."""
        if self._closed:
            raise ResultClosedError("Result has been closed")
        block = block or self.default_block
        columns = [column.name for column in self.pull.columns()]
        try:
            rows = self.pull.fetch(n, block)
        except DRIVER_ERRORS as exc:
            LOGGER.error("Fetch failed", extra={"requested": n, "block": block, "error": str(exc)})
            raise classify_fetch_error(exc) from exc
        self.row_count += len(rows)
        LOGGER.debug("Fetched rows", extra={"requested": n, "block": block, "returned": len(rows)})
        return RowBatch(columns=columns, rows=rows)

    def has_completed(self) -> bool:
        return self.pull.exhausted

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        try:
            self.pull.cursor.close()
        except DRIVER_ERRORS as exc:
            LOGGER.error("Closing result failed", extra={"statement": self.statement, "error": str(exc)})
            raise StatementError(str(exc)) from exc


class JdbcConnection:
    """An open JDBC connection and the statements submitted on it."""

    def __init__(self, handle: Any, identifier_quote: str = '"') -> None:
        self.handle = handle
        self.identifier_quote = identifier_quote
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def submit(self, statement: str, parameters: Optional[Sequence[Any]] = None) -> JdbcResult:
        self._ensure_open()
        cursor = self.handle.cursor()
        LOGGER.debug("Submitting statement", extra={"statement": statement})
        try:
            cursor.execute(statement, parameters)
        except DRIVER_ERRORS as exc:
            LOGGER.error("Statement failed", extra={"statement": statement, "error": str(exc)})
            cursor.close()
            raise StatementError(str(exc)) from exc
        return JdbcResult(ResultPull(cursor=cursor), statement)

    def list_tables(self, schema: Optional[str] = None, pattern: str = "%") -> List[str]:
        return self._metadata_column(
            lambda meta: meta.getTables(None, schema, pattern, None),
            "TABLE_NAME",
        )

    def list_fields(self, table: str, schema: Optional[str] = None) -> List[str]:
        return self._metadata_column(
            lambda meta: meta.getColumns(None, schema, table, "%"),
            "COLUMN_NAME",
        )

    def quote_identifier(self, name: str) -> str:
        quote = self.identifier_quote
        return f"{quote}{name.replace(quote, quote * 2)}{quote}"

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        LOGGER.info("Closing JDBC connection")
        self.handle.close()

    def _ensure_open(self) -> None:
        if self._closed:
            raise ResultClosedError("Connection has been closed")

    def _metadata_column(self, query: Any, column: str) -> List[str]:
        self._ensure_open()
        try:
            result_set = query(self.handle.jconn.getMetaData())
            try:
                values = []
                while result_set.next():
                    values.append(str(result_set.getString(column)))
            finally:
                result_set.close()
        except DRIVER_ERRORS as exc:
            LOGGER.error("Metadata lookup failed", extra={"column": column, "error": str(exc)})
            raise StatementError(str(exc)) from exc
        return values


__all__ = ["DEFAULT_BLOCK", "JdbcConnection", "JdbcDriver", "JdbcResult", "ResultState"]
