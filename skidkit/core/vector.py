"""Vector mathematics for 2D top-down simulation."""

from __future__ import annotations
import math
from dataclasses import dataclass
from typing import Iterator

import numpy as np


@dataclass(frozen=True)
class Vector2:
    """Immutable 2D vector.

    Every operation returns a new vector, so instances can be shared
    freely between the body, the wheels and the renderer.
    """
    x: float = 0.0
    y: float = 0.0

    @classmethod
    def from_array(cls, arr: np.ndarray) -> Vector2:
        """Create Vector2 from numpy array."""
        return cls(float(arr[0]), float(arr[1]))

    def to_array(self) -> np.ndarray:
        """Convert to numpy array."""
        return np.array([self.x, self.y])

    def magnitude(self) -> float:
        """Return the length of the vector."""
        return math.sqrt(self.x * self.x + self.y * self.y)

    def magnitude_squared(self) -> float:
        """Return the squared length (no sqrt)."""
        return self.x * self.x + self.y * self.y

    def normalized(self) -> Vector2:
        """Return unit vector in same direction.

        The zero vector has no direction; it maps to (0, 1) rather
        than failing.
        """
        len_sqrd = self.magnitude_squared()
        if len_sqrd > 0.0:
            inv_len = 1.0 / math.sqrt(len_sqrd)
            return Vector2(self.x * inv_len, self.y * inv_len)
        return Vector2(0.0, 1.0)

    def with_magnitude(self, length: float) -> Vector2:
        """Return this vector scaled to the given length.

        The current length is used as the divisor, so the caller must
        not pass a zero vector.
        """
        scaler = length / self.magnitude()
        return Vector2(self.x * scaler, self.y * scaler)

    def rotate(self, radians: float) -> Vector2:
        """Rotate by angle (radians)."""
        cs = math.cos(radians)
        sn = math.sin(radians)
        return Vector2(
            self.x * cs - self.y * sn,
            self.x * sn + self.y * cs
        )

    def perpendicular(self) -> Vector2:
        """Return (y, -x): a fixed quarter turn, not normalized."""
        return Vector2(self.y, -self.x)

    def angle_between(self, other: Vector2) -> float:
        """Signed sine of the angle between this vector and other.

        Both operands are normalized first, then the 2D cross product is
        taken. This is sin(angle), not atan2; for the small angles the
        tire model works with the two are interchangeable.
        """
        a = self.normalized()
        b = other.normalized()
        return a.y * b.x - a.x * b.y

    def dot(self, other: Vector2) -> float:
        """Dot product with another vector."""
        return self.x * other.x + self.y * other.y

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    # Operator overloads
    def __add__(self, other: Vector2) -> Vector2:
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2) -> Vector2:
        return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> Vector2:
        return Vector2(self.x * scalar, self.y * scalar)

    def __rmul__(self, scalar: float) -> Vector2:
        return self.__mul__(scalar)

    def __truediv__(self, scalar: float) -> Vector2:
        return Vector2(self.x / scalar, self.y / scalar)

    def __neg__(self) -> Vector2:
        return Vector2(-self.x, -self.y)

    def __repr__(self) -> str:
        return f"Vector2({self.x:.4f}, {self.y:.4f})"


def clamp(value: float, min_val: float, max_val: float) -> float:
    """Clamp value to range [min_val, max_val]."""
    return max(min_val, min(max_val, value))
