"""Rigid body dynamics for 2D vehicle simulation."""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Optional

from skidkit.core.vector import Vector2
from skidkit.core.integrators import semi_implicit_euler

if TYPE_CHECKING:
    from skidkit.core.world import WorldBounds


@dataclass
class RigidBody:
    """2D rigid body with mass, inertia, position, and velocities.

    Orientation is held as a unit forward vector rather than a yaw
    angle; it is rotated by the yaw rate each step and renormalized.
    """

    # Physical properties
    mass: float = 1095.0  # kg
    inertia: float = 1456.3  # kg*m^2 (yaw moment of inertia)

    # State
    position: Vector2 = field(default_factory=Vector2)
    forward: Vector2 = field(default_factory=lambda: Vector2(1.0, 0.0))
    velocity: Vector2 = field(default_factory=Vector2)
    angular_velocity: float = 0.0  # rad/s (yaw rate)

    # Force/torque accumulators (reset each step)
    _force: Vector2 = field(default_factory=Vector2)
    _torque: float = 0.0

    def __post_init__(self) -> None:
        if self.mass <= 0.0:
            raise ValueError(f"mass must be positive, got {self.mass}")
        if self.inertia <= 0.0:
            raise ValueError(f"inertia must be positive, got {self.inertia}")

    def apply_force(self, force: Vector2) -> None:
        """Apply force at the center of mass (no torque)."""
        self._force = self._force + force

    def apply_torque(self, torque: float) -> None:
        """Apply torque around the vertical axis."""
        self._torque += torque

    def get_right_vector(self) -> Vector2:
        """Get the unit vector to the right of forward."""
        return self.forward.perpendicular()

    def get_speed(self) -> float:
        """Get speed (magnitude of velocity)."""
        return self.velocity.magnitude()

    def get_accumulated_force(self) -> Vector2:
        """Get total accumulated force."""
        return self._force

    def get_accumulated_torque(self) -> float:
        """Get total accumulated torque."""
        return self._torque

    def clear_forces(self) -> None:
        """Reset force and torque accumulators."""
        self._force = Vector2()
        self._torque = 0.0

    def get_acceleration(self) -> Vector2:
        """Calculate linear acceleration from accumulated forces."""
        return self._force * (1.0 / self.mass)

    def get_angular_acceleration(self) -> float:
        """Calculate angular acceleration from accumulated torque."""
        return self._torque / self.inertia

    def integrate(self, dt: float, bounds: Optional[WorldBounds] = None) -> None:
        """Integrate state using semi-implicit Euler."""
        semi_implicit_euler(self, dt, bounds)

    def set_state(self, position: Vector2, forward: Vector2,
                  velocity: Vector2, angular_velocity: float) -> None:
        """Set complete state."""
        self.position = position
        self.forward = forward.normalized()
        self.velocity = velocity
        self.angular_velocity = angular_velocity
        self.clear_forces()
