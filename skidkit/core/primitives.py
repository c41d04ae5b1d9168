"""World-space drawing helpers on top of a pixel DrawSurface."""

from __future__ import annotations
from typing import TYPE_CHECKING, Sequence

from skidkit.core.vector import Vector2

if TYPE_CHECKING:
    from skidkit.core.frame import Colour, DrawSurface

WHITE = (255, 255, 255)

# Length of the arrow head barbs (meters)
ARROW_HEAD: float = 0.3


def draw_line(surface: DrawSurface, scale: float, a: Vector2, b: Vector2,
              colour: Colour = WHITE) -> None:
    """Draw a world-space segment."""
    surface.draw_line(a.x * scale, a.y * scale, b.x * scale, b.y * scale, colour)


def draw_polygon(surface: DrawSurface, scale: float, points: Sequence[Vector2],
                 colour: Colour = WHITE) -> None:
    """Draw a closed outline through world-space points."""
    for i, start in enumerate(points):
        end = points[(i + 1) % len(points)]
        draw_line(surface, scale, start, end, colour)


def draw_arrow(surface: DrawSurface, scale: float, start: Vector2, direction: Vector2,
               colour: Colour = WHITE) -> None:
    """Draw an arrow from start along direction (both in meters).

    Arrows shorter than the head are not drawn.
    """
    length = direction.magnitude()
    if length <= ARROW_HEAD:
        return

    end = start + direction
    ortho = direction.perpendicular().normalized() * ARROW_HEAD
    near_end = start + direction.with_magnitude(length - ARROW_HEAD)

    draw_line(surface, scale, start, end, colour)
    draw_line(surface, scale, near_end - ortho, end, colour)
    draw_line(surface, scale, near_end + ortho, end, colour)
