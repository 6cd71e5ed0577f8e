"""
The MODEL layer contains pure data structures and animation logic.
It has NO knowledge of the GUI (Qt).
It deals with Geometry and the Animation State.
"""
