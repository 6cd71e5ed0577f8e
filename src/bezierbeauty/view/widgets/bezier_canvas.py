"""
Bezier Canvas
=============
The drawing surface of the application.

Why is this file needed?
------------------------
1. Rendering: It turns a FrameData snapshot into pixels (handles, polygon
   edges, curve trail) on an off-screen image buffer.
2. Frame Stepping: It is the single place where the animation driver is
   ticked, so one frame request produces exactly one tick no matter how
   often Qt repaints the widget.
"""
from __future__ import annotations

import logging
from typing import Optional, Sequence

from PySide6.QtCore import QPoint, Slot
from PySide6.QtGui import QColor, QImage, QPainter, QPaintEvent, QPen, QPolygon
from PySide6.QtWidgets import QWidget

from bezierbeauty.config import (
    BACKGROUND_COLOR, HANDLE_PEN_WIDTH, HANDLE_RADIUS, LINE_PEN_WIDTH,
    PALETTE, WINDOW_HEIGHT, WINDOW_WIDTH, Color
)
from bezierbeauty.model.geometry_primitives import Point
from bezierbeauty.model.geometry_utils import to_screen
from bezierbeauty.model.state import AnimationDriver, FrameData

logger = logging.getLogger(__name__)


def _pen(color: Color, width: float) -> QPen:
    pen = QPen(QColor(*color))
    pen.setWidthF(width)
    return pen


class BezierCanvas(QWidget):
    """
    Fixed-size widget painting the latest animation frame.

    The image is rebuilt from scratch on every paint:
      - background fill,
      - every handle level as small circles joined by lines, coloured by
        level index,
      - the curve trail as a polyline coloured by the current shape.
    """
    def __init__(self, driver: AnimationDriver, parent: QWidget | None = None) -> None:
        super().__init__(parent=parent)
        self.driver = driver
        self.frame: Optional[FrameData] = None
        self.frame_count: int = 0
        self.setFixedSize(WINDOW_WIDTH, WINDOW_HEIGHT)

    # ------------------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------------------

    @Slot()
    def advance_frame(self) -> None:
        """Tick the driver once and schedule a repaint with the new frame."""
        self.frame = self.driver.tick()
        self.frame_count += 1
        if self.frame_count % 100 == 0:
            logger.debug(f"Frame {self.frame_count}: sides={self.frame.sides}, t={self.frame.t:.2f}")
        self.update()

    def render_frame(self, frame: Optional[FrameData]) -> QImage:
        """
        Draw a frame into a fresh RGB buffer.

        Args:
            frame: The snapshot to draw, or None for an empty background.

        Returns:
            A WINDOW_WIDTH x WINDOW_HEIGHT image.
        """
        buffer = QImage(WINDOW_WIDTH, WINDOW_HEIGHT, QImage.Format.Format_RGB32)
        buffer.fill(QColor(*BACKGROUND_COLOR))

        if frame is None:
            return buffer

        painter = QPainter(buffer)
        try:
            painter.setRenderHint(QPainter.RenderHint.Antialiasing, True)
            painter.setRenderHint(QPainter.RenderHint.TextAntialiasing, True)

            for index, level in enumerate(frame.cascade):
                self._draw_level(painter, level, PALETTE[index % len(PALETTE)])

            painter.setPen(_pen(PALETTE[frame.palette_index], LINE_PEN_WIDTH))
            self._draw_polyline(painter, frame.trail)
        finally:
            painter.end()

        return buffer

    # ------------------------------------------------------------------------------
    # Qt overrides
    # ------------------------------------------------------------------------------

    def paintEvent(self, event: QPaintEvent) -> None:
        painter = QPainter(self)
        painter.drawImage(0, 0, self.render_frame(self.frame))
        painter.end()

    # ------------------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------------------

    def _draw_level(self, painter: QPainter, level: Sequence[Point], color: Color) -> None:
        painter.setPen(_pen(color, HANDLE_PEN_WIDTH))
        size = 2 * HANDLE_RADIUS
        for x, y in to_screen(level, WINDOW_HEIGHT, inset=HANDLE_RADIUS):
            painter.drawEllipse(int(x), int(y), size, size)

        painter.setPen(_pen(color, LINE_PEN_WIDTH))
        self._draw_polyline(painter, level)

    @staticmethod
    def _draw_polyline(painter: QPainter, points: Sequence[Point]) -> None:
        if len(points) < 2:
            return
        screen = to_screen(points, WINDOW_HEIGHT)
        painter.drawPolyline(QPolygon([QPoint(int(x), int(y)) for x, y in screen]))
