"""Interfaces between the simulation and whatever displays it.

The vehicle never talks to a window system. A frame driver hands it
time and input through these types and receives drawing calls on a
surface in pixel coordinates.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Protocol, Tuple

Colour = Tuple[int, int, int]


@dataclass(frozen=True)
class InputSample:
    """Input state sampled once per frame."""
    mouse_dx: float = 0.0      # Horizontal mouse movement since last frame (pixels)
    throttle: bool = False     # Accelerate held
    brake: bool = False        # Decelerate held
    respawn: bool = False      # Respawn key released this frame
    quit: bool = False
    show_forces: bool = False  # Overlay toggle held by the driver


class DrawSurface(Protocol):
    """Pixel-space drawing target."""

    @property
    def width(self) -> int: ...

    @property
    def height(self) -> int: ...

    def clear(self, colour: Colour) -> None: ...

    def draw_line(self, x0: float, y0: float, x1: float, y1: float, colour: Colour) -> None: ...

    def put_pixel(self, x: float, y: float, colour: Colour) -> None: ...

    def draw_text(self, x: float, y: float, text: str, colour: Colour,
                  align: str = "left") -> None: ...


class FrameDriver(Protocol):
    """Supplies time, input and a surface each frame."""

    def elapsed_time(self) -> float:
        """Real seconds since the previous call."""
        ...

    def sample_input(self) -> InputSample: ...

    def surface(self) -> DrawSurface: ...

    def present(self) -> None:
        """Show the frame drawn since the last present."""
        ...
