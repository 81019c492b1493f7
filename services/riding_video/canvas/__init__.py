"""
Frame Canvases
==============
Drawing surfaces the frame renderer draws through.
"""

from .base import Canvas, FrameSurface
from .pillow_canvas import PillowCanvas, PillowFrame, gradient_array

__all__ = [
    "Canvas",
    "FrameSurface",
    "PillowCanvas",
    "PillowFrame",
    "gradient_array",
]
