"""Reader for delimited wearable-sensor logs."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

import numpy as np

from ..core.sensor_table import SensorTable

logger = logging.getLogger(__name__)

DEFAULT_DELIMITER = ";"

# Fields per data row: time + one channel, or time + three (x, y, z) channels.
SUPPORTED_FIELD_COUNTS = (2, 4)


class SensorLogFormatError(ValueError):
    """Raised when a sensor log does not follow the expected layout."""

    def __init__(self, message: str, *, source: str | None = None) -> None:
        super().__init__(message if source is None else f"{source}: {message}")
        self.source = source


def relative_to_absolute(deltas: np.ndarray) -> np.ndarray:
    """
    Convert per-row time deltas into absolute times.

    The first entry is already absolute; every later entry is the time
    elapsed since the previous row.
    """
    return np.cumsum(np.asarray(deltas, dtype=np.float64))


def parse_sensor_log(
    lines: Iterable[str],
    name: str,
    *,
    delimiter: str = DEFAULT_DELIMITER,
) -> SensorTable:
    """
    Build a frozen :class:`SensorTable` from the lines of a sensor log.

    The first line is a header and is skipped. Blank lines are ignored. Every
    data row must have the same number of fields, either 2 or 4.
    """
    lines = list(lines)
    if not lines:
        raise SensorLogFormatError("log is empty", source=name)
    if not any(line.strip() for line in lines[1:]):
        raise SensorLogFormatError("log has a header but no data rows", source=name)

    try:
        data = np.loadtxt(lines, delimiter=delimiter, skiprows=1, ndmin=2, dtype=np.float64)
    except ValueError as exc:
        raise SensorLogFormatError(str(exc), source=name) from exc

    width = data.shape[1]
    if width not in SUPPORTED_FIELD_COUNTS:
        raise SensorLogFormatError(
            f"expected {' or '.join(map(str, SUPPORTED_FIELD_COUNTS))} fields, got {width}",
            source=name,
        )

    times = relative_to_absolute(data[:, 0])
    table = SensorTable(name, width - 1)
    for time, values in zip(times, data[:, 1:]):
        table.add_row(float(time), values.tolist())
    table.freeze()

    logger.info("Loaded %s: %d rows, %d value column(s)", name, len(table), table.column_count)
    return table


def load_sensor_log(path: str | Path, *, delimiter: str = DEFAULT_DELIMITER) -> SensorTable:
    """Read the sensor log at ``path``; the table is named after the file."""
    log_path = Path(path)
    with log_path.open("r", encoding="utf-8") as fh:
        return parse_sensor_log(fh, log_path.name, delimiter=delimiter)


__all__ = [
    "DEFAULT_DELIMITER",
    "SensorLogFormatError",
    "load_sensor_log",
    "parse_sensor_log",
    "relative_to_absolute",
]
