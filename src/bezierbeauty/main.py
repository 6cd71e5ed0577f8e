"""
Application Initialization
==========================
This module constructs the Model-View-Controller pieces and starts the Qt
Event Loop.

Why is this file needed?
------------------------
It acts as the "Dependency Injection" root. It:
1. Sets up logging.
2. Instantiates the Animation Driver (Model).
3. Instantiates the Main Window (View), which owns the Frame Clock
   (Controller), and passes the driver into it.
"""
import logging
import sys

from PySide6.QtWidgets import QApplication

from bezierbeauty.config import WINDOW_TITLE
from bezierbeauty.logging_config import setup_logging
from bezierbeauty.model.state import AnimationDriver
from bezierbeauty.view.main_window import MainWindow


def main() -> None:
    # 1. Setup Logging (Console)
    # Use logging.DEBUG to see per-frame progress
    setup_logging(level=logging.INFO)

    # 2. Create the Qt Application
    app = QApplication(sys.argv)
    app.setApplicationName(WINDOW_TITLE)

    # 3. Initialize the Data Model
    driver = AnimationDriver()

    # 4. Initialize the Main Window, passing the model
    window = MainWindow(driver)
    window.show()

    # 5. Start Event Loop
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
