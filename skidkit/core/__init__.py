"""Core physics engine components."""

from skidkit.core.vector import Vector2, clamp
from skidkit.core.frame import InputSample, DrawSurface, FrameDriver
from skidkit.core.integrators import FixedStepAccumulator, clamp_frame_time, semi_implicit_euler
from skidkit.core.rigid_body import RigidBody
from skidkit.core.world import WorldBounds, SimulationContext, run_frame_loop

__all__ = [
    "Vector2",
    "clamp",
    "InputSample",
    "DrawSurface",
    "FrameDriver",
    "FixedStepAccumulator",
    "clamp_frame_time",
    "semi_implicit_euler",
    "RigidBody",
    "WorldBounds",
    "SimulationContext",
    "run_frame_loop",
]
