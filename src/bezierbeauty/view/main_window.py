"""
Main Application Window
=======================
The primary GUI container that holds the drawing canvas.

Why is this file needed?
------------------------
1. Layout: It hosts the fixed-size, non-resizable canvas.
2. Routing: It wires the background frame clock to the canvas and owns the
   clock's lifetime (started when shown, stopped when closed).
"""
import logging
from typing import Optional

from PySide6.QtCore import Qt, Slot
from PySide6.QtGui import QCloseEvent, QShowEvent
from PySide6.QtWidgets import QMainWindow

from bezierbeauty.config import WINDOW_HEIGHT, WINDOW_POSITION, WINDOW_TITLE, WINDOW_WIDTH
from bezierbeauty.controller.workers import FrameClock
from bezierbeauty.model.state import AnimationDriver
from bezierbeauty.view.widgets.bezier_canvas import BezierCanvas

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    def __init__(self, driver: Optional[AnimationDriver] = None, clock: Optional[FrameClock] = None) -> None:
        super().__init__()
        self.driver: AnimationDriver = driver or AnimationDriver()

        self.setWindowTitle(WINDOW_TITLE)
        self.setFixedSize(WINDOW_WIDTH, WINDOW_HEIGHT)
        self.move(*WINDOW_POSITION)

        self.canvas = BezierCanvas(self.driver)
        self.setCentralWidget(self.canvas)

        # --- FRAME CLOCK ---
        self.clock: FrameClock = clock or FrameClock()
        # Queued: the tick must run on the GUI thread, never on the clock thread
        self.clock.frame_due.connect(self.canvas.advance_frame, Qt.ConnectionType.QueuedConnection)
        self.clock.error_occurred.connect(self.on_clock_error)

    @Slot(str)
    def on_clock_error(self, message: str) -> None:
        logger.error(f"Frame clock failed, animation halted: {message}")

    def showEvent(self, event: QShowEvent) -> None:
        super().showEvent(event)
        if not self.clock.isRunning():
            self.clock.start()

    def closeEvent(self, event: QCloseEvent) -> None:
        logger.info("Closing window, stopping frame clock...")
        self.clock.stop()
        self.clock.wait()
        super().closeEvent(event)
