"""Tests for the frame loop with the headless driver."""

import pytest
from skidkit.core.frame import InputSample
from skidkit.core.world import run_frame_loop
from skidkit.vehicle.car import Car
from skidkit.visualization.recorder import ScriptedDriver, ScriptedFrame


class TestRunFrameLoop:
    """Tests for run_frame_loop."""

    def test_runs_every_scripted_frame(self) -> None:
        driver = ScriptedDriver.constant(5, 0.016)
        car = Car()

        frames = run_frame_loop(driver, car)

        assert frames == 5
        assert driver.presented == 5
        assert len(car.skidmarks) == 20

    def test_immediate_quit(self) -> None:
        driver = ScriptedDriver([ScriptedFrame(0.016, InputSample(quit=True))])
        car = Car()

        assert run_frame_loop(driver, car) == 0
        assert driver.presented == 0
        assert len(car.skidmarks) == 0

    def test_long_frame_is_clamped(self) -> None:
        driver = ScriptedDriver.constant(1, 0.5)
        car = Car()

        run_frame_loop(driver, car)

        assert 0.098 - 1e-9 <= car.sim_time <= 0.1 + 1e-9

    def test_bounds_follow_surface(self) -> None:
        # 150 px at 15 px/m is a 10 m square; the spawn point is outside it
        driver = ScriptedDriver.constant(3, 0.016, width=150, height=150)
        car = Car()

        run_frame_loop(driver, car, render_scale=15.0)

        assert car.body.position.y <= 10.0

    def test_unbounded(self) -> None:
        driver = ScriptedDriver.constant(3, 0.016, width=150, height=150)
        car = Car()

        run_frame_loop(driver, car, bounded=False)

        assert car.body.position.y == 40.0

    def test_on_frame_callback(self) -> None:
        driver = ScriptedDriver.constant(4, 0.016, inputs=InputSample(throttle=True))
        car = Car()
        seen = []

        def record(c, context):
            seen.append((c.get_state().speed, context.elapsed_time))

        run_frame_loop(driver, car, on_frame=record)

        assert len(seen) == 4
        assert seen[-1][0] == pytest.approx(4 * 0.016 * 4.0)
        assert all(elapsed == 0.016 for _, elapsed in seen)

    def test_frame_is_drawn(self) -> None:
        driver = ScriptedDriver.constant(2, 0.016)
        car = Car()

        run_frame_loop(driver, car)

        surface = driver.surface()
        assert len(surface.lines) == 20
        # Surface is cleared each frame, so only the latest marks are drawn
        assert len(surface.pixels) == 8
