#!/usr/bin/env python3
"""Interactive driving demo.

This example demonstrates:
- Building a car from a preset
- Driving it with the Pygame frame driver
- Watching the skid trail build up behind it

Run with: python examples/drive_demo.py
"""

import sys

from skidkit.core.world import run_frame_loop
from skidkit.vehicle.car import Car, CarConfig


def main():
    """Run the driving demo."""
    try:
        from skidkit.visualization import PygameDriver, RenderConfig
        driver = PygameDriver(RenderConfig(show_forces=True))
    except ImportError:
        print("This demo requires pygame. Install with: pip install pygame")
        return 1

    print("SkidKit Driving Demo")
    print("=" * 40)
    print()
    print("Controls:")
    print("  Mouse        - Steer")
    print("  Right button - Accelerate")
    print("  Left button  - Decelerate")
    print("  Space        - Respawn (moving and spinning)")
    print("  F            - Toggle force arrows")
    print("  Esc          - Quit")
    print()
    print("Tips:")
    print("  1. Hold the right button to build up speed")
    print("  2. Flick the mouse to break the rear loose")
    print("  3. Steer into the slide to catch it")
    print()

    car = Car(CarConfig.hatchback())

    try:
        frames = run_frame_loop(driver, car, render_scale=driver.config.scale)
    except KeyboardInterrupt:
        frames = 0
    finally:
        driver.quit()

    print(f"\nSimulation ended after {frames} frames, {car.sim_time:.1f}s simulated.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
