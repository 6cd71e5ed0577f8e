"""
De Casteljau Handle Cascade
===========================
Evaluates a control polygon as a Bezier curve by repeated linear
interpolation, keeping every intermediate level (the "handles") for drawing.

Functions:
    generate_handle_cascade: Levels of the construction plus the curve point.
"""
from __future__ import annotations

from typing import Optional, Sequence

from bezierbeauty.model.geometry_primitives import Point

HandleLevel = tuple[Point, ...]
HandleCascade = tuple[HandleLevel, ...]


def reduce_level(level: Sequence[Point], t: float) -> HandleLevel:
    """Interpolate every adjacent pair of a level at fraction t."""
    return tuple(a.lerp(b, t) for a, b in zip(level[:-1], level[1:]))


def generate_handle_cascade(
    vertices: Sequence[Point],
    t: float
) -> tuple[HandleCascade, Optional[Point]]:
    """
    Run de Casteljau's construction on the given control points.

    Each level is one point shorter than the previous one. The cascade
    starts with the input itself and ends with the 2-point level, so an
    input of n >= 2 points yields n - 1 levels. The curve point is the one
    produced when that last 2-point level is reduced to a single point.

    Args:
        vertices: Control points, in order.
        t: Interpolation fraction. Not clamped.

    Returns:
        (cascade, curve_point). A single point input yields a cascade with
        just that level and no curve point; an empty input yields ((), None).
    """
    level: HandleLevel = tuple(vertices)
    if not level:
        return (), None

    cascade: list[HandleLevel] = [level]
    curve_point: Optional[Point] = None

    while len(level) > 1:
        next_level = reduce_level(level, t)
        if len(level) == 2:
            curve_point = next_level[0]
            break
        cascade.append(next_level)
        level = next_level

    return tuple(cascade), curve_point
