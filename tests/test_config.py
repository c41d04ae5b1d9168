"""Tests for vehicle and tire presets."""

import pytest
from skidkit.config import (
    TIRE_PRESETS,
    VEHICLE_PRESETS,
    get_tire_config,
    get_vehicle_config,
)
from skidkit.vehicle.car import Car, CarConfig


class TestTirePresets:
    """Tests for get_tire_config."""

    @pytest.mark.parametrize("name", list(TIRE_PRESETS))
    def test_presets_are_valid(self, name: str) -> None:
        config = get_tire_config(name)

        assert config.friction_mu > 0.0
        assert config.max_slip_angle > 0.0

    def test_tarmac_defaults(self) -> None:
        config = get_tire_config("tarmac")

        assert config.friction_mu == 0.7
        assert config.max_slip_angle == 0.07

    def test_unknown_preset(self) -> None:
        with pytest.raises(ValueError, match="Available"):
            get_tire_config("sand")


class TestVehiclePresets:
    """Tests for get_vehicle_config."""

    @pytest.mark.parametrize("name", list(VEHICLE_PRESETS))
    def test_presets_build_cars(self, name: str) -> None:
        car = Car(get_vehicle_config(name))

        assert car.body.mass > 0.0
        assert car.body.inertia == pytest.approx(car.config.moment_of_inertia)

    def test_hatchback_is_default(self) -> None:
        assert get_vehicle_config("hatchback") == CarConfig()

    def test_tire_override(self) -> None:
        config = get_vehicle_config("kart", "ice")

        assert config.tire_config.friction_mu == 0.12

    def test_unknown_vehicle(self) -> None:
        with pytest.raises(ValueError, match="Unknown vehicle preset"):
            get_vehicle_config("truck")

    def test_unknown_tire_override(self) -> None:
        with pytest.raises(ValueError, match="Unknown tire preset"):
            get_vehicle_config("hatchback", "sand")
