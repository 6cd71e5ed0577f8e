from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

import numpy as np

if TYPE_CHECKING:
    from numpy import typing as npt

from bezierbeauty.model.geometry_primitives import Point

START_ANGLE_RAD = np.pi / 2


def regenerate_polygon(
    sides: int,
    center: Point,
    radius: float
) -> tuple[Point, ...]:
    """
    Build the closed vertex set of a regular polygon.

    The first vertex points straight up (90 degrees) and the rest follow
    counter-clockwise, 360/sides degrees apart.

    Args:
        sides: Number of polygon vertices.
        center: Center of the circumscribed circle.
        radius: Radius of the circumscribed circle.

    Returns:
        A tuple of sides + 1 points; the last one repeats the first.
    """
    if sides < 1:
        raise ValueError(f"A polygon needs at least one vertex, got sides={sides}.")

    theta = START_ANGLE_RAD + np.arange(sides) * (2.0 * np.pi / sides)
    pts = np.c_[center.x + radius * np.cos(theta), center.y + radius * np.sin(theta)]

    vertices = [Point(float(x), float(y)) for x, y in pts]
    # close the ring
    vertices.append(vertices[0])
    return tuple(vertices)


def points_to_array(points: Sequence[Point]) -> npt.NDArray[np.float64]:
    """Stack points into an (N, 2) array of (x, y) coordinates."""
    if not points:
        return np.empty((0, 2), dtype=np.float64)
    return np.array([p.to_array() for p in points], dtype=np.float64)


def to_screen(
    points: Sequence[Point],
    height: float,
    inset: float = 0.0
) -> npt.NDArray[np.int_]:
    """
    Convert bottom-left origin points to integer raster coordinates.

    The Y axis is flipped (screen_y = height - y) and both coordinates are
    truncated towards zero. A non-zero `inset` moves each point to the
    top-left corner of a square of half-size `inset` centred on it, i.e.
    (x - inset, height - (y + inset)).
    """
    pts = points_to_array(points)
    pts[:, 0] = pts[:, 0] - inset
    pts[:, 1] = height - (pts[:, 1] + inset)
    return np.trunc(pts).astype(int)
