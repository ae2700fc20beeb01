"""Sensor log input.

- :mod:`log_loader` parses delimited wearable logs into a
  :class:`~sensorview.core.SensorTable`.
"""

from .log_loader import SensorLogFormatError, load_sensor_log, parse_sensor_log

__all__ = ["SensorLogFormatError", "load_sensor_log", "parse_sensor_log"]
