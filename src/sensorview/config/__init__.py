"""Viewer configuration.

:mod:`runtime` loads an optional YAML file into the typed
:class:`ViewerConfig` used by chart sessions and the plotter.
"""

from .runtime import RenderOptions, ViewerConfig, config_from_mapping, load_config

__all__ = ["RenderOptions", "ViewerConfig", "config_from_mapping", "load_config"]
