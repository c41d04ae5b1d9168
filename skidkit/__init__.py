"""
SkidKit - Top-down car simulation with a simple tire-friction model.

Features:
- Saturating-linear lateral tire force per wheel
- Fixed-timestep rigid body integration
- Ackermann steering geometry
- Fading skid mark trail
"""

__version__ = "0.1.0"

from skidkit.core.vector import Vector2
from skidkit.core.rigid_body import RigidBody
from skidkit.core.world import SimulationContext, WorldBounds
from skidkit.vehicle.car import Car, CarConfig

__all__ = [
    "Vector2",
    "RigidBody",
    "SimulationContext",
    "WorldBounds",
    "Car",
    "CarConfig",
    "__version__",
]
