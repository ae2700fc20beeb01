"""
Read-only table of timestamped sensor samples.

One :class:`SensorTable` backs every chart of a recording; it is filled once
by the log loader and frozen before any chart reads it.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

import numpy as np


class SensorTable:
    """
    Tabular store of ``(time, values[column_count])`` rows.

    Rows are appended with :meth:`add_row` while the ingestion code builds the
    table; :meth:`freeze` then makes it read-only. The NumPy views returned by
    :meth:`times` and :meth:`column` are never writeable, so several chart
    models can share one table safely.
    """

    __slots__ = ("_name", "_column_count", "_times", "_rows", "_frozen", "_cache")

    def __init__(self, name: str, column_count: int) -> None:
        if column_count <= 0:
            raise ValueError(f"column_count must be positive, got {column_count}")
        self._name = str(name)
        self._column_count = int(column_count)
        self._times: list[float] = []
        self._rows: list[tuple[float, ...]] = []
        self._frozen = False
        self._cache: tuple[np.ndarray, np.ndarray] | None = None

    @classmethod
    def from_rows(
        cls,
        name: str,
        column_count: int,
        rows: Iterable[tuple[float, Sequence[float]]],
    ) -> SensorTable:
        """Build and freeze a table from ``(time, values)`` pairs."""
        table = cls(name, column_count)
        for time, values in rows:
            table.add_row(time, values)
        table.freeze()
        return table

    # ------------------------------------------------------------------ build
    def add_row(self, time: float, values: Sequence[float]) -> None:
        if self._frozen:
            raise RuntimeError(f"SensorTable {self._name!r} is frozen")
        if len(values) != self._column_count:
            raise ValueError(
                f"expected {self._column_count} values per row, got {len(values)}"
            )
        self._times.append(float(time))
        self._rows.append(tuple(float(v) for v in values))
        self._cache = None

    def freeze(self) -> None:
        self._frozen = True

    # ------------------------------------------------------------------ query
    @property
    def name(self) -> str:
        return self._name

    @property
    def column_count(self) -> int:
        """Number of value channels per row (time excluded)."""
        return self._column_count

    @property
    def frozen(self) -> bool:
        return self._frozen

    def __len__(self) -> int:
        return len(self._times)

    @property
    def row_count(self) -> int:
        return len(self._times)

    def time(self, row: int) -> float:
        return self._times[row]

    def value(self, column: int, row: int) -> float:
        self.check_column(column)
        return self._rows[row][column]

    def check_column(self, column: int) -> None:
        """Raise ``IndexError`` unless ``column`` is a valid channel index."""
        if not 0 <= column < self._column_count:
            raise IndexError(
                f"column {column} out of range for {self._column_count} value columns"
            )

    def times(self) -> np.ndarray:
        """Return all row times as a read-only ``float64`` array."""
        return self._arrays()[0]

    def column(self, column: int) -> np.ndarray:
        """Return one value channel as a read-only ``float64`` array."""
        self.check_column(column)
        return self._arrays()[1][:, column]

    def time_extent(self) -> tuple[float, float] | None:
        """First and last row time, or ``None`` for an empty table."""
        if not self._times:
            return None
        return self._times[0], self._times[-1]

    def value_extent(self, column: int) -> tuple[float, float] | None:
        """Global ``(min, max)`` of a channel, or ``None`` for an empty table."""
        values = self.column(column)
        if values.size == 0:
            return None
        return float(values.min()), float(values.max())

    def _arrays(self) -> tuple[np.ndarray, np.ndarray]:
        if self._cache is None:
            times = np.asarray(self._times, dtype=np.float64)
            values = np.asarray(self._rows, dtype=np.float64).reshape(
                len(self._rows), self._column_count
            )
            times.flags.writeable = False
            values.flags.writeable = False
            self._cache = (times, values)
        return self._cache

    def __repr__(self) -> str:
        return (
            f"SensorTable(name={self._name!r}, column_count={self._column_count}, "
            f"rows={len(self._times)})"
        )
