"""Complete vehicle model.

The Car class brings together:
- Rigid body physics (position, heading, velocity, yaw rate)
- Four wheels with a saturating-linear lateral tire model
- Steering (Ackermann geometry)
- A fixed-timestep accumulator that decouples physics from frame rate
- A skid mark trail fed from the wheel positions
"""

from __future__ import annotations
import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, List, Optional

from skidkit.core.integrators import FixedStepAccumulator
from skidkit.core.primitives import WHITE, draw_arrow, draw_polygon
from skidkit.core.rigid_body import RigidBody
from skidkit.core.vector import Vector2
from skidkit.tire.tire import LinearTire, TireConfig
from skidkit.vehicle.skidmarks import SkidTrail
from skidkit.vehicle.steering import Steering, SteeringConfig
from skidkit.vehicle.wheel import Wheel, WheelPosition

if TYPE_CHECKING:
    from skidkit.core.frame import DrawSurface
    from skidkit.core.world import SimulationContext, WorldBounds

logger = logging.getLogger(__name__)

METERS_PER_MILE: float = 1609.3

# Meters of arrow per Newton when drawing tire forces
FORCE_DRAW_SCALE: float = 0.002
FORCE_COLOUR = (200, 100, 100)

HELP_TEXT = "Move mouse to steer. Right button accelerate. Left button decelerate."


@dataclass
class CarConfig:
    """Complete vehicle configuration."""
    # Mass
    mass: float = 1095.0                # kg
    gravity: float = 9.81               # m/s^2

    # Dimensions (m)
    length: float = 3.995               # Bumper to bumper
    half_wheelbase: float = 1.165       # Center to each axle
    half_front_track: float = 0.75
    half_rear_track: float = 0.75
    half_front_width: float = 0.82      # Body outline
    half_rear_width: float = 0.9
    half_wheel_size: float = 0.35       # Tire outline
    half_wheel_width: float = 0.15

    # Tire configuration
    tire_config: TireConfig = field(default_factory=TireConfig.tarmac)

    # Steering
    max_steer_angle: float = 0.7        # radians
    steering_sensitivity: float = 0.002  # radians per pixel of mouse movement

    # Throttle and brake, applied directly to velocity (m/s^2)
    throttle_accel: float = 4.0
    brake_accel: float = 4.0

    # Simulation
    physics_timestep: float = 0.002     # seconds
    skid_capacity: int = SkidTrail.DEFAULT_CAPACITY

    # Spawn
    spawn_position: Vector2 = field(default_factory=lambda: Vector2(3.0, 40.0))
    spawn_forward: Vector2 = field(default_factory=lambda: Vector2(1.0, 0.0))
    respawn_speed: float = 30.0         # m/s
    respawn_angular_velocity: float = 2.0  # rad/s

    @property
    def moment_of_inertia(self) -> float:
        """Yaw inertia, treating the car as a uniform rod of its length."""
        return self.mass * self.length * self.length / 12.0

    @classmethod
    def hatchback(cls) -> CarConfig:
        """Small front-engined hatchback."""
        return cls()

    @classmethod
    def estate(cls) -> CarConfig:
        """Longer, heavier estate car."""
        return cls(
            mass=1480.0,
            length=4.71,
            half_wheelbase=1.39,
            half_front_track=0.78,
            half_rear_track=0.78,
            half_front_width=0.88,
            half_rear_width=0.9,
            half_wheel_size=0.33,
            half_wheel_width=0.11
        )

    @classmethod
    def kart(cls) -> CarConfig:
        """Light, short, twitchy kart."""
        return cls(
            mass=160.0,
            length=1.8,
            half_wheelbase=0.53,
            half_front_track=0.55,
            half_rear_track=0.6,
            half_front_width=0.45,
            half_rear_width=0.65,
            half_wheel_size=0.14,
            half_wheel_width=0.1,
            tire_config=TireConfig(friction_mu=0.9, max_slip_angle=0.1),
            throttle_accel=6.0,
            brake_accel=8.0,
            respawn_speed=20.0
        )


@dataclass
class CarState:
    """Complete vehicle state for telemetry."""
    position: Vector2 = field(default_factory=Vector2)
    forward: Vector2 = field(default_factory=lambda: Vector2(1.0, 0.0))
    velocity: Vector2 = field(default_factory=Vector2)
    angular_velocity: float = 0.0       # rad/s
    steering_angle: float = 0.0         # radians

    # Derived quantities
    speed: float = 0.0                  # m/s
    speed_mph: float = 0.0

    # Per-wheel slip angles, in WheelPosition order
    slip_angles: List[float] = field(default_factory=list)

    sim_time: float = 0.0               # seconds of physics simulated


class Car:
    """Four-wheel vehicle driven by relative mouse steering.

    Wheels are stored in a list indexed by ``WheelPosition``.
    """

    def __init__(self, config: Optional[CarConfig] = None):
        """Initialize vehicle at rest at the spawn pose.

        Args:
            config: Vehicle configuration. Defaults to hatchback.
        """
        self.config = config or CarConfig.hatchback()
        cfg = self.config

        self.body = RigidBody(mass=cfg.mass, inertia=cfg.moment_of_inertia)
        self.tire = LinearTire(cfg.tire_config)
        self.steering = Steering(SteeringConfig(
            max_steer_angle=cfg.max_steer_angle,
            sensitivity=cfg.steering_sensitivity,
            length=cfg.length,
            half_front_track=cfg.half_front_track
        ))
        self.wheels: List[Wheel] = [Wheel() for _ in WheelPosition]
        self.skidmarks = SkidTrail(cfg.skid_capacity)

        self._accumulator = FixedStepAccumulator(cfg.physics_timestep)
        self.sim_time: float = 0.0

        self.init(0.0, 0.0)

    def init(self, speed: float, angular_velocity: float) -> None:
        """Place the car at the spawn pose with the given motion.

        Resets pose, velocity, yaw rate, steering, carried time and the
        wheel travel history. The skid trail is kept.

        Args:
            speed: Forward speed (m/s)
            angular_velocity: Yaw rate (rad/s)
        """
        cfg = self.config
        forward = cfg.spawn_forward.normalized()
        self.body.set_state(
            cfg.spawn_position,
            forward,
            forward * speed,
            angular_velocity
        )
        self.steering.reset()
        self._accumulator.reset()

        self.update_wheel_geometry()
        for wheel in self.wheels:
            wheel.settle()

    def respawn(self) -> None:
        """Throw the car back in at the spawn point, moving and spinning."""
        logger.debug("Respawning car")
        self.init(self.config.respawn_speed, self.config.respawn_angular_velocity)

    def wheel(self, position: WheelPosition) -> Wheel:
        """Get one wheel by position."""
        return self.wheels[position]

    @property
    def wheel_load(self) -> float:
        """Vertical load on each wheel: a quarter of the car's weight."""
        return self.config.mass * self.config.gravity / 4.0

    @property
    def steering_angle(self) -> float:
        return self.steering.angle

    @property
    def leftover_sim_time(self) -> float:
        """Real time not yet simulated, always in [0, physics_timestep)."""
        return self._accumulator.leftover

    @property
    def speed_mph(self) -> float:
        return self.body.get_speed() * 3600.0 / METERS_PER_MILE

    def update_wheel_geometry(self) -> None:
        """Place the wheels from the body pose and point them.

        Front wheels are turned by their Ackermann angles, rear wheels
        follow the body heading.
        """
        cfg = self.config
        pos = self.body.position
        forward = self.body.forward
        right = self.body.get_right_vector()

        front_left = pos + forward * cfg.half_wheelbase - right * cfg.half_front_track
        rear_right = pos - forward * cfg.half_wheelbase + right * cfg.half_rear_track

        self.wheel(WheelPosition.FRONT_LEFT).place(front_left)
        self.wheel(WheelPosition.FRONT_RIGHT).place(front_left + right * (cfg.half_front_track * 2.0))
        self.wheel(WheelPosition.REAR_RIGHT).place(rear_right)
        self.wheel(WheelPosition.REAR_LEFT).place(rear_right - right * (cfg.half_rear_track * 2.0))

        for wheel in self.wheels:
            wheel.forward = forward

        if self.steering.angle == 0.0:
            return

        left_angle, right_angle = self.steering.get_wheel_angles()
        self.wheel(WheelPosition.FRONT_LEFT).forward = forward.rotate(left_angle)
        self.wheel(WheelPosition.FRONT_RIGHT).forward = forward.rotate(right_angle)

    def advance_step(self, bounds: Optional[WorldBounds] = None) -> None:
        """Perform one fixed physics step.

        1. Lateral force at each wheel from its slip
        2. Torque of each force about the car center
        3. Integrate body (semi-implicit Euler)
        4. Re-place the wheels from the new pose

        Args:
            bounds: Optional world bounds to keep the car inside
        """
        total_force = Vector2()
        total_torque = 0.0
        load = self.wheel_load

        for wheel in self.wheels:
            force = wheel.calc_lateral_force(self.tire, load)
            total_force = total_force + force

            centre_to_wheel = wheel.position - self.body.position
            projected_force = centre_to_wheel.angle_between(force) * force.magnitude()
            total_torque -= projected_force * centre_to_wheel.magnitude()

        self.body.apply_force(total_force)
        self.body.apply_torque(total_torque)
        self.body.integrate(self.config.physics_timestep, bounds)

        self.update_wheel_geometry()
        self.sim_time += self.config.physics_timestep

    def advance(self, context: SimulationContext) -> int:
        """Advance the car by one frame.

        Applies the frame's input, then runs as many fixed physics steps
        as the elapsed time (plus the time carried from earlier frames)
        fills, then drops a skid mark under each wheel.

        Args:
            context: Frame time, input and world bounds

        Returns:
            Number of physics steps taken
        """
        cfg = self.config
        inputs = context.inputs
        elapsed = context.elapsed_time

        if inputs.respawn:
            self.respawn()

        self.steering.update(inputs.mouse_dx)

        forward = self.body.forward
        if inputs.throttle:
            self.body.velocity = self.body.velocity + forward * (elapsed * cfg.throttle_accel)
        if inputs.brake:
            self.body.velocity = self.body.velocity - forward * (elapsed * cfg.brake_accel)

        steps = self._accumulator.consume(elapsed)
        for _ in range(steps):
            self.advance_step(context.bounds)

        for wheel in self.wheels:
            self.skidmarks.add(wheel.position)

        return steps

    def render(self, surface: DrawSurface, context: SimulationContext) -> None:
        """Draw skid marks, body, wheels and the speed readout."""
        cfg = self.config
        scale = context.render_scale

        self.skidmarks.render(surface, scale)

        pos = self.body.position
        forward = self.body.forward
        right = self.body.get_right_vector()
        half_len = cfg.length / 2.0

        a = pos + forward * half_len - right * cfg.half_front_width
        b = a + right * (cfg.half_front_width * 2.0)
        c = pos - forward * half_len + right * cfg.half_rear_width
        d = c - right * (cfg.half_rear_width * 2.0)
        draw_polygon(surface, scale, [a, b, c, d])

        for wheel in self.wheels:
            draw_polygon(surface, scale, wheel.corners(cfg.half_wheel_size, cfg.half_wheel_width))

        if context.inputs.show_forces:
            for wheel in self.wheels:
                draw_arrow(surface, scale, wheel.position, wheel.force * FORCE_DRAW_SCALE,
                           FORCE_COLOUR)

        surface.draw_text(10, 10, f"MPH: {self.speed_mph:.1f}", WHITE)
        surface.draw_text(surface.width - 10, 10, HELP_TEXT, WHITE, align="right")
        surface.draw_text(surface.width - 10, 30, "Escape to quit.", WHITE, align="right")

    def get_state(self) -> CarState:
        """Get complete vehicle state."""
        return CarState(
            position=self.body.position,
            forward=self.body.forward,
            velocity=self.body.velocity,
            angular_velocity=self.body.angular_velocity,
            steering_angle=self.steering.angle,
            speed=self.body.get_speed(),
            speed_mph=self.speed_mph,
            slip_angles=[wheel.slip_angle for wheel in self.wheels],
            sim_time=self.sim_time
        )
