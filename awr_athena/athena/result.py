"""Athena results with a capped JDBC fetch size."""

from __future__ import annotations

from typing import List

from awr_athena.common.config import ATHENA_MAX_FETCH_SIZE
from awr_athena.common.log import get_logger
from awr_athena.jdbc.bridge import JdbcResult, ResultState
from awr_athena.jdbc.pull import ColumnInfo, RowBatch

LOGGER = get_logger(__name__)


class AthenaResult:
    """Rows of one Athena statement.

    Athena rejects JDBC fetch sizes above a fixed maximum with "The requested
    fetchSize is more than the allowed value in Athena". Every fetch therefore
    asks the driver for blocks of exactly ``fetch_size`` rows, whatever ``n``
    the caller requested; the caller still receives at most ``n`` rows.
    """

    def __init__(self, result: JdbcResult, fetch_size: int = ATHENA_MAX_FETCH_SIZE) -> None:
        self._result = result
        self.fetch_size = fetch_size

    @property
    def statement(self) -> str:
        return self._result.statement

    @property
    def state(self) -> ResultState:
        return self._result.state

    @property
    def row_count(self) -> int:
        return self._result.row_count

    @property
    def closed(self) -> bool:
        return self._result.closed

    def column_info(self) -> List[ColumnInfo]:
        return self._result.column_info()

    def fetch(self, n: int = -1) -> RowBatch:
        """Fetch ``n`` rows, or all remaining rows when ``n`` is -1."""
        return self._result.fetch(n, block=self.fetch_size)

    def has_completed(self) -> bool:
        return self._result.has_completed()

    def close(self) -> None:
        if self._result.closed:
            return
        LOGGER.debug("Closing result", extra={"statement": self.statement, "rows": self.row_count})
        self._result.close()

    def __enter__(self) -> "AthenaResult":
        return self

    def __exit__(self, *_exc_info: object) -> None:
        self.close()


__all__ = ["AthenaResult"]
