"""
Frame Renderer
Draws one riding video frame: gradient backdrop, branding, centered title,
the sliding story word window, safety caption, frame counter and timestamp.
"""
from datetime import datetime
from typing import Callable, Optional

from loguru import logger

from .canvas import Canvas, PillowCanvas
from .models import FontSpec, Frame, RenderRequest
from .text_utils import story_words, visible_words


FRAME_WIDTH = 1920
FRAME_HEIGHT = 1080

SKY_BLUE = (135, 206, 235)
STEEL_BLUE = (70, 130, 180)
WHITE = (255, 255, 255)
YELLOW = (255, 255, 0)

BRANDING_TEXT = "Riding Roney"
SAFETY_MESSAGE = "Safety First! Always wear protective gear!"
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M"

BRANDING_FONT = FontSpec(36, bold=True)
TITLE_FONT = FontSpec(48, bold=True)
STORY_FONT = FontSpec(32)
SAFETY_FONT = FontSpec(28, bold=True)
FOOTER_FONT = FontSpec(24)

# Text positions are (x, baseline)
BRANDING_POS = (50, 100)
TITLE_BASELINE = 200
STORY_X = 100
STORY_TOP = 400
STORY_LINE_SPACING = 40
SAFETY_POS = (100, 800)
COUNTER_POS = (50, 1050)
TIMESTAMP_POS = (1500, 1050)


def centered_x(frame_width: int, text_width: int) -> int:
    """Left offset that centers text of the given width"""
    return (frame_width - text_width) // 2


class FrameRenderer:
    """
    Renders riding video frames through a Canvas.

    Each frame is drawn on its own surface from the canvas, so one renderer
    can be shared between threads. The clock is injectable so tests can pin
    the "Generated:" timestamp.
    """

    def __init__(
        self,
        canvas: Optional[Canvas] = None,
        width: int = FRAME_WIDTH,
        height: int = FRAME_HEIGHT,
        clock: Callable[[], datetime] = datetime.now,
        branding: str = BRANDING_TEXT,
    ):
        self.canvas = canvas or PillowCanvas()
        self.width = width
        self.height = height
        self.clock = clock
        self.branding = branding

    def render(self, title: str, story: str, frame_index: int, total_frames: int) -> Frame:
        """
        Render a single frame.

        Args:
            title: Video title, drawn centered
            story: Narrative whose words slide through the frame
            frame_index: Zero-based frame number, in [0, total_frames)
            total_frames: Number of frames in the video

        Returns:
            The finished Frame

        Raises:
            ValueError: If frame_index or total_frames is out of range
        """
        return self.render_request(RenderRequest(title, story, frame_index, total_frames))

    def render_request(self, request: RenderRequest) -> Frame:
        surface = self.canvas.begin_frame(self.width, self.height, request.frame_index)
        surface.draw_gradient(SKY_BLUE, STEEL_BLUE)

        surface.draw_text(self.branding, *BRANDING_POS, BRANDING_FONT, WHITE)

        title_width = surface.measure_text(request.title, TITLE_FONT)
        surface.draw_text(
            request.title,
            centered_x(self.width, title_width),
            TITLE_BASELINE,
            TITLE_FONT,
            WHITE,
        )

        words = visible_words(story_words(request.story), request.frame_index)
        y = STORY_TOP
        for word in words:
            surface.draw_text(word, STORY_X, y, STORY_FONT, WHITE)
            y += STORY_LINE_SPACING

        surface.draw_text(SAFETY_MESSAGE, *SAFETY_POS, SAFETY_FONT, YELLOW)

        counter = f"Frame {request.frame_index + 1}/{request.total_frames}"
        surface.draw_text(counter, *COUNTER_POS, FOOTER_FONT, WHITE)

        timestamp = self.clock().strftime(TIMESTAMP_FORMAT)
        surface.draw_text(f"Generated: {timestamp}", *TIMESTAMP_POS, FOOTER_FONT, WHITE)

        frame = surface.end_frame()
        logger.debug(f"Rendered frame {counter} with {len(words)} story words")
        return frame
