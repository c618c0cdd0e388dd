"""Pytest configuration: import path and fakes for the JDBC bridge."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import jaydebeapi
import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


class FakeJavaResultSet:
    """Stands in for the java.sql.ResultSet JayDeBeApi keeps on a cursor."""

    def __init__(self) -> None:
        self.fetch_sizes: List[int] = []

    def setFetchSize(self, size: int) -> None:  # noqa: N802
        self.fetch_sizes.append(size)


class FakeCursor:
    """Stands in for a jaydebeapi.Cursor; ``fetchmany`` is the library's own."""

    arraysize = 1
    fetchmany = jaydebeapi.Cursor.fetchmany

    def __init__(
        self,
        rows: Optional[Sequence[Sequence[Any]]] = None,
        columns: Optional[Sequence[str]] = ("_col0",),
        execute_error: Optional[Exception] = None,
        fetch_error: Optional[Exception] = None,
        close_error: Optional[Exception] = None,
    ) -> None:
        self.rows = [list(row) for row in rows or []]
        self.columns = columns
        self.execute_error = execute_error
        self.fetch_error = fetch_error
        self.close_error = close_error
        self.description = None
        self._rs: Optional[FakeJavaResultSet] = None
        self.executed: List[tuple] = []
        self.fetchone_calls = 0
        self.close_calls = 0

    def execute(self, statement: str, parameters: Any = None) -> None:
        self.executed.append((statement, parameters))
        if self.execute_error is not None:
            raise self.execute_error
        if self.columns is not None:
            self.description = [(name, "varchar", None, None, None, None, True) for name in self.columns]
            self._rs = FakeJavaResultSet()

    def fetchone(self) -> Optional[List[Any]]:
        if self.fetch_error is not None:
            raise self.fetch_error
        self.fetchone_calls += 1
        if not self.rows:
            return None
        return self.rows.pop(0)

    def close(self) -> None:
        self.close_calls += 1
        if self.close_error is not None:
            raise self.close_error


class FakeMetaResultSet:
    def __init__(self, records: Sequence[Dict[str, str]]) -> None:
        self._records = list(records)
        self._current: Optional[Dict[str, str]] = None
        self.closed = False

    def next(self) -> bool:
        if not self._records:
            return False
        self._current = self._records.pop(0)
        return True

    def getString(self, column: str) -> str:  # noqa: N802
        assert self._current is not None
        return self._current[column]

    def close(self) -> None:
        self.closed = True


@dataclass
class FakeMetaData:
    tables: List[str] = field(default_factory=list)
    columns: List[str] = field(default_factory=list)
    calls: List[tuple] = field(default_factory=list)

    def getTables(self, catalog, schema, pattern, types):  # noqa: N802
        self.calls.append(("getTables", catalog, schema, pattern, types))
        like = pattern.replace("%", "")
        return FakeMetaResultSet([{"TABLE_NAME": name} for name in self.tables if like.lower() in name.lower()])

    def getColumns(self, catalog, schema, table, pattern):  # noqa: N802
        self.calls.append(("getColumns", catalog, schema, table, pattern))
        return FakeMetaResultSet([{"COLUMN_NAME": name} for name in self.columns])


class FakeJavaConnection:
    def __init__(self, metadata: FakeMetaData) -> None:
        self.metadata = metadata

    def getMetaData(self) -> FakeMetaData:  # noqa: N802
        return self.metadata


class FakeHandle:
    """Stands in for a jaydebeapi.Connection."""

    def __init__(self) -> None:
        self.cursors: List[FakeCursor] = []
        self.issued: List[FakeCursor] = []
        self.metadata = FakeMetaData()
        self.jconn = FakeJavaConnection(self.metadata)
        self.close_calls = 0

    def cursor(self) -> FakeCursor:
        cursor = self.cursors.pop(0) if self.cursors else FakeCursor()
        self.issued.append(cursor)
        return cursor

    def close(self) -> None:
        self.close_calls += 1


@dataclass
class JdbcRecorder:
    handle: FakeHandle
    calls: List[Dict[str, Any]] = field(default_factory=list)
    error: Optional[Exception] = None

    def connect(self, jclassname, url, driver_args=None, jars=None, libs=None):
        self.calls.append({"driver_class": jclassname, "url": url, "driver_args": driver_args, "jars": jars})
        if self.error is not None:
            raise self.error
        return self.handle


@pytest.fixture
def jdbc(monkeypatch: pytest.MonkeyPatch) -> JdbcRecorder:
    recorder = JdbcRecorder(handle=FakeHandle())
    monkeypatch.setattr(jaydebeapi, "connect", recorder.connect)
    return recorder


@pytest.fixture
def athena_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("ATHENA_REGION", "AWS_REGION", "AWS_DEFAULT_REGION", "AWS_PROFILE", "ATHENA_JDBC_JAR"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("ATHENA_S3_STAGING_DIR", "s3://bucket/path")
    monkeypatch.setenv("ATHENA_SCHEMA_NAME", "default")
    monkeypatch.setenv("ATHENA_FETCH_SIZE", "999")


os.environ.setdefault("LOG_LEVEL", "WARNING")
