"""
Animation State (Data Model)
============================
This module defines the mutable state of the running animation and the
driver that advances it one frame at a time.

Why is this file needed?
------------------------
1. State Management: It holds the sweep parameter, the current shape, the
   latest handle cascade and the accumulated curve trail in one place.
2. Thread Safety: The frame clock and the painter live in different
   execution contexts, so every access goes through a single lock.
3. Decoupling: Views only read immutable FrameData snapshots.

Classes:
    AnimationState: The (t, sides) pair driving vertex generation.
    FrameData: Snapshot of everything needed to draw one frame.
    AnimationDriver: Owns the state and produces one FrameData per tick.
"""
from __future__ import annotations

from dataclasses import dataclass, replace
import logging
import threading
from typing import Optional

from bezierbeauty.config import (
    INITIAL_SIDES, PALETTE, POLYGON_RADIUS, TIME_STEP, WINDOW_CENTER
)
from bezierbeauty.model.bezier import HandleCascade, generate_handle_cascade
from bezierbeauty.model.geometry_primitives import Point
from bezierbeauty.model.geometry_utils import regenerate_polygon

logger = logging.getLogger(__name__)


@dataclass
class AnimationState:
    t: float = 0.0
    sides: int = INITIAL_SIDES


@dataclass(frozen=True)
class FrameData:
    """
    Drawable payload for a single frame.

    `sides` and `t` are the values the frame was built with, i.e. before
    the state advanced, so the trail colour matches the drawn shape.
    """
    cascade: HandleCascade = ()
    trail: tuple[Point, ...] = ()
    sides: int = INITIAL_SIDES
    t: float = 0.0

    @property
    def palette_index(self) -> int:
        """Palette entry used for the curve trail."""
        return self.sides - 2


class AnimationDriver:
    """
    Advances the Bezier morph animation.

    Every tick rebuilds the polygon for the current shape, runs the de
    Casteljau construction at the current t, appends the curve point to the
    trail and then steps t (or the shape once t has passed 1). Once the last
    shape of the palette has been swept the whole state freezes.
    """

    def __init__(
        self,
        center: Point = WINDOW_CENTER,
        radius: float = POLYGON_RADIUS,
        palette_size: int = len(PALETTE),
        time_step: float = TIME_STEP,
        state: Optional[AnimationState] = None,
    ) -> None:
        self.center = center
        self.radius = radius
        self.palette_size = palette_size
        self.time_step = time_step

        self._state: AnimationState = replace(state) if state is not None else AnimationState()
        self._cascade: HandleCascade = ()
        self._trail: list[Point] = []
        self._frozen_logged: bool = False
        self._lock = threading.Lock()

    # ------------------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------------------

    @property
    def state(self) -> AnimationState:
        with self._lock:
            return replace(self._state)

    @property
    def cascade(self) -> HandleCascade:
        with self._lock:
            return self._cascade

    @property
    def trail(self) -> tuple[Point, ...]:
        with self._lock:
            return tuple(self._trail)

    @property
    def is_frozen(self) -> bool:
        """True once t has passed 1 on the last shape; no tick changes state anymore."""
        with self._lock:
            return self._is_frozen()

    def tick(self) -> FrameData:
        """Compute the geometry for the current frame and advance the state."""
        with self._lock:
            t = self._state.t
            sides = self._state.sides

            self._cascade = ()
            polygon = regenerate_polygon(sides, self.center, self.radius)
            cascade, curve_point = generate_handle_cascade(polygon, t)
            self._cascade = cascade
            if curve_point is not None:
                self._trail.append(curve_point)

            self._advance()

            return FrameData(
                cascade=cascade,
                trail=tuple(self._trail),
                sides=sides,
                t=t,
            )

    # ------------------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------------------

    def _is_frozen(self) -> bool:
        return self._state.t > 1 and self._state.sides >= self.palette_size

    def _advance(self) -> None:
        state = self._state
        if state.t <= 1:
            state.t += self.time_step
        elif state.sides < self.palette_size:
            state.t = 0.0
            state.sides += 1
            logger.info(f"Sweep finished, switching to {state.sides} sides.")
        elif not self._frozen_logged:
            self._frozen_logged = True
            logger.info(f"Last shape ({state.sides} sides) finished, animation frozen.")
