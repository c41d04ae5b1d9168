"""Vehicle dynamics module."""

from skidkit.vehicle.wheel import Wheel, WheelPosition
from skidkit.vehicle.steering import Steering, SteeringConfig
from skidkit.vehicle.skidmarks import SkidTrail
from skidkit.vehicle.car import Car, CarConfig, CarState

__all__ = [
    "Wheel",
    "WheelPosition",
    "Steering",
    "SteeringConfig",
    "SkidTrail",
    "Car",
    "CarConfig",
    "CarState",
]
