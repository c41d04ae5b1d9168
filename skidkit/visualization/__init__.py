"""Visualization tools for the car simulation."""

from skidkit.visualization.renderer import PygameDriver, PygameSurface, RenderConfig
from skidkit.visualization.recorder import RecordingSurface, ScriptedDriver, ScriptedFrame
from skidkit.visualization.plotter import TrajectoryPlotter

__all__ = [
    "PygameDriver",
    "PygameSurface",
    "RenderConfig",
    "RecordingSurface",
    "ScriptedDriver",
    "ScriptedFrame",
    "TrajectoryPlotter",
]
