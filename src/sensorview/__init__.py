"""SensorView: zoomable line charts for wearable sensor recordings.

The chart engine is free of GUI code: :class:`ChartModel` combines a
read-only :class:`SensorTable` with a :class:`ViewportState` and returns a
:class:`ChartFrame` (pixel-space points plus grid ticks) for any pixel
rectangle. :class:`ChartSession` adds the overview/detail window logic and
:mod:`sensorview.tools.plotter` draws the frames with Matplotlib.
"""

from .core import ChartFrame, Point, SensorTable, TickMark, ViewportState
from .core.chart_model import ChartModel
from .core.session import ChartSession, Selection
from .dataio import SensorLogFormatError, load_sensor_log, parse_sensor_log

__version__ = "0.1.0"

__all__ = [
    "ChartFrame",
    "ChartModel",
    "ChartSession",
    "Point",
    "Selection",
    "SensorLogFormatError",
    "SensorTable",
    "TickMark",
    "ViewportState",
    "load_sensor_log",
    "parse_sensor_log",
]
