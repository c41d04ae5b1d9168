"""Numerical integration and fixed timestep accumulation."""

from __future__ import annotations
import logging
import math
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from skidkit.core.rigid_body import RigidBody
    from skidkit.core.world import WorldBounds

logger = logging.getLogger(__name__)

# Longest frame the accumulator will be fed, in seconds
MAX_FRAME_TIME: float = 0.1


def clamp_frame_time(elapsed: float, max_frame_time: float = MAX_FRAME_TIME) -> float:
    """Cap a frame's elapsed real time.

    After a stall (window dragged, minimized, debugger break) the raw
    elapsed time can be seconds long; feeding that to the accumulator
    would run thousands of substeps in one frame.
    """
    if elapsed > max_frame_time:
        logger.debug("Clamping frame time %.3fs to %.3fs", elapsed, max_frame_time)
        return max_frame_time
    return max(0.0, elapsed)


def semi_implicit_euler(
    body: RigidBody,
    dt: float,
    bounds: Optional[WorldBounds] = None
) -> None:
    """Semi-implicit (symplectic) Euler integration.

    Algorithm:
        v(t+dt) = v(t) + a(t) * dt
        w(t+dt) = w(t) + alpha(t) * dt
        x(t+dt) = x(t) + v(t+dt) * dt  # Note: uses NEW velocity
        forward(t+dt) = rotate(forward(t), w(t+dt) * dt), renormalized

    Args:
        body: RigidBody to integrate
        dt: Time step in seconds
        bounds: Optional world bounds the position is kept inside
    """
    acceleration = body.get_acceleration()
    angular_accel = body.get_angular_acceleration()

    body.velocity = body.velocity + acceleration * dt
    body.angular_velocity += angular_accel * dt

    body.position = body.position + body.velocity * dt
    if bounds is not None:
        body.position, body.velocity = bounds.contain(body.position, body.velocity)

    body.forward = body.forward.rotate(body.angular_velocity * dt).normalized()

    body.clear_forces()


class FixedStepAccumulator:
    """Converts variable frame times into a whole number of fixed steps.

    The leftover time that does not fill a whole step is carried to the
    next frame, so the simulated time always tracks real time and the
    physics behaves the same at any frame rate.
    """

    def __init__(self, timestep: float):
        if timestep <= 0.0:
            raise ValueError(f"timestep must be positive, got {timestep}")
        self.timestep = timestep
        self._leftover: float = 0.0

    @property
    def leftover(self) -> float:
        """Carried time, always in [0, timestep)."""
        return self._leftover

    def consume(self, elapsed: float) -> int:
        """Add elapsed time and return how many fixed steps to run.

        Args:
            elapsed: Real elapsed time since the last call (seconds)

        Returns:
            floor((elapsed + leftover) / timestep)
        """
        total = elapsed + self._leftover
        steps = max(0, math.floor(total / self.timestep))

        remainder = total - steps * self.timestep
        if remainder < 0.0 or remainder >= self.timestep:
            # Rounding in the division can push the remainder a hair
            # outside the step
            remainder = 0.0
        self._leftover = remainder

        return steps

    def reset(self) -> None:
        """Drop any carried time."""
        self._leftover = 0.0
