"""Chart state and value types.

The leaf types live here: the immutable :class:`SensorTable`, the
:class:`ViewportState` transitions and the point/tick value objects.
:mod:`.chart_model` and :mod:`.session` build on them together with the
algorithms in :mod:`sensorview.analysis`.
"""

from .models import ChartFrame, Point, TickMark
from .sensor_table import SensorTable
from .viewport import MIN_ZOOM_STEP, ViewportState

__all__ = [
    "ChartFrame",
    "MIN_ZOOM_STEP",
    "Point",
    "SensorTable",
    "TickMark",
    "ViewportState",
]
