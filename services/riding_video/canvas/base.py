"""
Base Canvas
===========
Abstract drawing surface used by the frame renderer.

The renderer only talks to these interfaces, so any imaging library can
back them. A Canvas holds shared resources (fonts) and hands out one
FrameSurface per frame; all per-frame drawing state lives on the surface,
so a single canvas can serve several requests at once.
"""

from abc import ABC, abstractmethod

from ..models import FontSpec, Frame, RGB


class FrameSurface(ABC):
    """
    Drawing context for a single frame.

    Created by Canvas.begin_frame; finished with end_frame.
    """

    @abstractmethod
    def draw_gradient(self, start_color: RGB, end_color: RGB) -> None:
        """
        Fill the frame with a linear gradient running from the top-left
        corner (start_color) to the bottom-right corner (end_color).
        """
        pass

    @abstractmethod
    def draw_text(self, text: str, x: int, y: int, font: FontSpec, color: RGB) -> None:
        """
        Draw a single line of text.

        Args:
            text: Text to draw
            x: Left edge of the text
            y: Baseline of the text
            font: Font size and weight
            color: Fill color
        """
        pass

    @abstractmethod
    def measure_text(self, text: str, font: FontSpec) -> int:
        """Return the advance width of text in pixels."""
        pass

    @abstractmethod
    def end_frame(self) -> Frame:
        """Finish the frame and return it. The surface cannot be drawn on afterwards."""
        pass


class Canvas(ABC):
    """Abstract base class for frame drawing backends."""

    @abstractmethod
    def begin_frame(self, width: int, height: int, index: int = 0) -> FrameSurface:
        """
        Start a new blank frame.

        Args:
            width: Frame width in pixels
            height: Frame height in pixels
            index: Frame index stored on the finished Frame

        Returns:
            A FrameSurface owned by the caller
        """
        pass

    @abstractmethod
    def measure_text(self, text: str, font: FontSpec) -> int:
        """Return the advance width of text in pixels."""
        pass
