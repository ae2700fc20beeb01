"""Chart algorithms (tick spacing, grid lines, resampling).

Everything here is a pure function over NumPy arrays, a
:class:`~sensorview.core.SensorTable` and a
:class:`~sensorview.core.ViewportState`, with no Matplotlib or I/O
dependencies, so it can be reused by any front-end.
"""
