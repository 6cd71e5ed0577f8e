"""
Geometric Primitives for the Bezier construction.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import TYPE_CHECKING
import numpy as np
import math

if TYPE_CHECKING:
    import numpy.typing as npt


@dataclass(frozen=True)
class Vector:
    """
    A vector in 2D space representing direction and magnitude.
    """
    x: float
    y: float

    def __mul__(self, scalar: float) -> Vector:
        return Vector(self.x * scalar, self.y * scalar)

    @property
    def magnitude(self) -> float:
        return math.sqrt(self.x**2 + self.y**2)


@dataclass(frozen=True)
class Point:
    """An immutable point in 2D space."""
    x: float
    y: float

    def __add__(self, other: Vector) -> Point:
        # Point + Vector = Point (Translation)
        if isinstance(other, Vector):
            return Point(self.x + other.x, self.y + other.y)
        raise TypeError("Can only add a Vector to a Point.")

    def __sub__(self, other: Point) -> Vector:
        # Point - Point = Vector (Direction)
        if isinstance(other, Point):
            return Vector(self.x - other.x, self.y - other.y)
        raise TypeError("Can only subtract a Point from a Point.")

    def lerp(self, other: Point, t: float) -> Point:
        """
        Affine interpolation between this point and another.

        Returns P = A + (B - A) * t. The fraction is not clamped, so values
        outside [0, 1] extrapolate along the line AB.
        """
        return self + (other - self) * t

    def distance_to(self, other: Point) -> float:
        return (other - self).magnitude

    def to_array(self) -> npt.NDArray[np.float64]:
        return np.array([self.x, self.y])
