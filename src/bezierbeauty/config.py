"""
Configuration & Constants
=========================
This module serves as the central registry for global constants.

Why is this file needed?
------------------------
1. Abstraction: It prevents magic numbers (window size, frame cadence,
   colours) scattered throughout the model and view code.
2. Consistency: The palette is shared between the handle levels and the
   curve trail, so both must read it from a single place.

Exports:
    WINDOW_WIDTH, WINDOW_HEIGHT (int): Fixed size of the drawing surface.
    TIME_STEP (float): Increment of the sweep parameter per frame.
    FRAME_INTERVAL_MS (int): Sleep between two frame requests.
    PALETTE (tuple): Nine RGB colours, one per achievable shape.
"""
from bezierbeauty.model.geometry_primitives import Point

Color = tuple[int, int, int]

# Window
WINDOW_TITLE: str = "Bezier Beauty"
WINDOW_WIDTH: int = 700
WINDOW_HEIGHT: int = 700
WINDOW_POSITION: tuple[int, int] = (5, 5)

# Animation
TIME_STEP: float = 0.01
FRAME_INTERVAL_MS: int = 50  # ~20 FPS

# Geometry
WINDOW_CENTER: Point = Point(WINDOW_WIDTH / 2, WINDOW_HEIGHT / 2)
POLYGON_RADIUS: float = WINDOW_WIDTH / 2 - 50
INITIAL_SIDES: int = 3

# Drawing
BACKGROUND_COLOR: Color = (20, 20, 20)
HANDLE_RADIUS: int = 5
HANDLE_PEN_WIDTH: float = 0.3
LINE_PEN_WIDTH: float = 1.0

PALETTE: tuple[Color, ...] = (
    (204, 0, 0),
    (255, 153, 0),
    (153, 204, 0),
    (0, 204, 153),
    (0, 102, 204),
    (102, 0, 255),
    (204, 0, 204),
    (214, 0, 147),
    (255, 80, 80),
)
