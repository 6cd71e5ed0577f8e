"""
Background Workers (Threading)
==============================
This module contains QThread subclasses that drive the animation cadence.

Why is this file needed?
------------------------
1. Cadence: The animation advances at a fixed frame interval, independent
   of how often Qt decides to repaint the window.
2. Signals: The thread never touches the animation state. It only emits a
   signal, which Qt queues onto the GUI thread where the tick happens.

Classes:
    FrameClock: Sleeps a fixed interval and requests the next frame.
"""
import logging
import threading

from PySide6.QtCore import QThread, Signal

from bezierbeauty.config import FRAME_INTERVAL_MS

logger = logging.getLogger(__name__)


class FrameClock(QThread):
    # Signals to drive the UI from the background
    frame_due = Signal()
    error_occurred = Signal(str)

    def __init__(self, interval_ms: int = FRAME_INTERVAL_MS) -> None:
        super().__init__()
        if interval_ms <= 0:
            raise ValueError(f"Frame interval must be positive, got {interval_ms} ms.")
        self.interval_ms = interval_ms
        self.is_running = True
        self._wake = threading.Event()

    def run(self) -> None:
        logger.info(f"Frame clock started ({self.interval_ms} ms per frame).")
        try:
            while self.is_running:
                self._sleep()
                if not self.is_running:
                    break
                self.frame_due.emit()
        except Exception as e:
            logger.error(f"Error in FrameClock: {e}")
            self.error_occurred.emit(str(e))
        logger.info("Frame clock stopped.")

    def stop(self) -> None:
        self.is_running = False
        self._wake.set()

    def _sleep(self) -> None:
        # An interrupted sleep only shortens one frame; keep going.
        try:
            self._wake.wait(self.interval_ms / 1000.0)
        except InterruptedError as e:
            logger.warning(f"Frame sleep interrupted: {e}")
