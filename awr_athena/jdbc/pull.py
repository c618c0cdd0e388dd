"""Block-wise row retrieval from an open JDBC result set."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Sequence, Tuple


@dataclass(slots=True, frozen=True)
class ColumnInfo:
    name: str
    type_code: Any = None


@dataclass(slots=True)
class RowBatch:
    """Rows returned by a single fetch, in the order the service produced them."""

    columns: List[str]
    rows: List[Tuple[Any, ...]] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.rows)

    def __iter__(self) -> Iterator[Tuple[Any, ...]]:
        return iter(self.rows)

    def to_dicts(self) -> List[Dict[str, Any]]:
        return [dict(zip(self.columns, row)) for row in self.rows]


@dataclass(slots=True)
class ResultPull:
    """Pull rows from a DB-API cursor, ``stride`` rows at a time.

    ``block`` is the JDBC fetch size: how many rows the driver asks the
    service for per round-trip. Rows are always read from the driver in whole
    blocks, with the fetch size set on the Java result set before each block.
    Rows read beyond ``stride`` stay buffered for the next ``fetch``.
    """

    cursor: Any
    buffer: List[Tuple[Any, ...]] = field(default_factory=list)
    drained: bool = False
    started: bool = False

    @property
    def has_result_set(self) -> bool:
        return self.cursor.description is not None

    @property
    def exhausted(self) -> bool:
        return self.drained and not self.buffer

    def columns(self) -> List[ColumnInfo]:
        description: Sequence[Sequence[Any]] = self.cursor.description or ()
        return [ColumnInfo(name=str(entry[0]), type_code=entry[1] if len(entry) > 1 else None) for entry in description]

    def fetch(self, stride: int, block: int) -> List[Tuple[Any, ...]]:
        """Return up to ``stride`` rows, or every remaining row when ``stride`` is negative."""
        if not self.has_result_set:
            self.drained = True
            return []
        self.started = True
        while not self.drained and (stride < 0 or len(self.buffer) < stride):
            self._read_block(block)
        if stride < 0:
            rows, self.buffer = self.buffer, []
        else:
            rows, self.buffer = self.buffer[:stride], self.buffer[stride:]
        return rows

    def _read_block(self, block: int) -> None:
        # JayDeBeApi's fetchmany() overwrites the fetch size with its own
        # argument, so rows are read one at a time under our block size.
        result_set = getattr(self.cursor, "_rs", None)
        if result_set is not None:
            result_set.setFetchSize(block)
        for _ in range(block):
            row = self.cursor.fetchone()
            if row is None:
                self.drained = True
                return
            self.buffer.append(tuple(row))


__all__ = ["ColumnInfo", "ResultPull", "RowBatch"]
