"""Configuration presets for tires and vehicles."""

from skidkit.config.tire_presets import TIRE_PRESETS, get_tire_config
from skidkit.config.vehicle_presets import VEHICLE_PRESETS, get_vehicle_config

__all__ = [
    "TIRE_PRESETS",
    "get_tire_config",
    "VEHICLE_PRESETS",
    "get_vehicle_config",
]
