"""World bounds, the per-frame simulation context, and the frame loop."""

from __future__ import annotations
import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable, Optional, Tuple

from skidkit.core.frame import DrawSurface, FrameDriver, InputSample
from skidkit.core.integrators import clamp_frame_time, MAX_FRAME_TIME
from skidkit.core.vector import Vector2

if TYPE_CHECKING:
    from skidkit.vehicle.car import Car

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WorldBounds:
    """Axis-aligned world rectangle [0, width] x [0, height] in meters.

    A body that crosses an edge is put back on it and the velocity
    component across that edge is reflected and scaled by restitution.
    """
    width: float
    height: float
    restitution: float = 0.5

    @classmethod
    def from_surface(cls, surface: DrawSurface, render_scale: float,
                     restitution: float = 0.5) -> WorldBounds:
        """World bounds matching a drawing surface's pixel size."""
        return cls(surface.width / render_scale, surface.height / render_scale, restitution)

    def contain(self, position: Vector2, velocity: Vector2) -> Tuple[Vector2, Vector2]:
        """Clamp position into the bounds, bouncing velocity off any edge hit.

        Returns:
            Tuple of (position, velocity)
        """
        x, y = position
        vx, vy = velocity

        if x < 0.0:
            x = 0.0
            vx = -vx * self.restitution
        elif x > self.width:
            x = self.width
            vx = -vx * self.restitution

        if y < 0.0:
            y = 0.0
            vy = -vy * self.restitution
        elif y > self.height:
            y = self.height
            vy = -vy * self.restitution

        if x != position.x or y != position.y:
            logger.debug("Bounced off world edge at (%.2f, %.2f)", x, y)

        return Vector2(x, y), Vector2(vx, vy)


@dataclass(frozen=True)
class SimulationContext:
    """Everything a vehicle needs from the outside world for one frame.

    Built by the frame loop and passed into ``Car.advance`` and
    ``Car.render``; nothing in the simulation reads timing, scale or
    input from anywhere else.
    """
    elapsed_time: float = 0.0          # Clamped real time since last frame (s)
    inputs: InputSample = field(default_factory=InputSample)
    render_scale: float = 15.0         # Pixels per meter
    bounds: Optional[WorldBounds] = None

    def __post_init__(self) -> None:
        if self.render_scale <= 0.0:
            raise ValueError(f"render_scale must be positive, got {self.render_scale}")


def run_frame_loop(
    driver: FrameDriver,
    car: Car,
    render_scale: float = 15.0,
    bounded: bool = True,
    max_frame_time: float = MAX_FRAME_TIME,
    background: Tuple[int, int, int] = (0, 0, 0),
    on_frame: Optional[Callable[[Car, SimulationContext], None]] = None,
) -> int:
    """Drive a car from a FrameDriver until the driver asks to quit.

    Each frame: sample input, clamp elapsed time, advance the car,
    clear the surface, render the car, present.

    Args:
        driver: Source of time and input, owner of the drawing surface
        car: Vehicle to simulate
        render_scale: Pixels per meter
        bounded: Keep the car inside the visible surface
        max_frame_time: Cap on a single frame's elapsed time (seconds)
        background: Clear colour
        on_frame: Called after each frame is advanced, before it is drawn

    Returns:
        Number of frames run
    """
    frames = 0
    while True:
        inputs = driver.sample_input()
        if inputs.quit:
            break

        elapsed = clamp_frame_time(driver.elapsed_time(), max_frame_time)
        surface = driver.surface()
        bounds = WorldBounds.from_surface(surface, render_scale) if bounded else None

        context = SimulationContext(
            elapsed_time=elapsed,
            inputs=inputs,
            render_scale=render_scale,
            bounds=bounds,
        )

        car.advance(context)
        if on_frame is not None:
            on_frame(car, context)

        surface.clear(background)
        car.render(surface, context)
        driver.present()
        frames += 1

    logger.info("Frame loop finished after %d frames", frames)
    return frames
