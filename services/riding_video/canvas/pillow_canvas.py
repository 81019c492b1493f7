"""
Pillow Canvas
=============
Canvas implementation backed by Pillow, with a numpy gradient fill.
"""

import threading
from pathlib import Path
from typing import Dict, Optional, Sequence, Tuple, Union

import numpy as np
from loguru import logger
from PIL import Image, ImageDraw, ImageFont

from ..models import FontSpec, Frame, RGB
from .base import Canvas, FrameSurface


FontType = Union[ImageFont.FreeTypeFont, ImageFont.ImageFont]

REGULAR_FONT_CANDIDATES = (
    "/System/Library/Fonts/Supplemental/Arial.ttf",
    "C:/Windows/Fonts/arial.ttf",
    "/usr/share/fonts/truetype/msttcorefonts/Arial.ttf",
    "/usr/share/fonts/truetype/liberation/LiberationSans-Regular.ttf",
    "/usr/share/fonts/truetype/dejavu/DejaVuSans.ttf",
)

BOLD_FONT_CANDIDATES = (
    "/System/Library/Fonts/Supplemental/Arial Bold.ttf",
    "C:/Windows/Fonts/arialbd.ttf",
    "/usr/share/fonts/truetype/msttcorefonts/Arial_Bold.ttf",
    "/usr/share/fonts/truetype/liberation/LiberationSans-Bold.ttf",
    "/usr/share/fonts/truetype/dejavu/DejaVuSans-Bold.ttf",
)


def gradient_array(width: int, height: int, start_color: RGB, end_color: RGB) -> np.ndarray:
    """
    Build a (height, width, 3) uint8 array holding a diagonal gradient.

    Each pixel's position is projected onto the vector from (0, 0) to
    (width, height); the projection (clamped to [0, 1]) is the blend factor.
    """
    xs = np.arange(width, dtype=np.float64)[None, :]
    ys = np.arange(height, dtype=np.float64)[:, None]
    t = (xs * width + ys * height) / float(width * width + height * height)
    t = np.clip(t, 0.0, 1.0)[:, :, None]

    start = np.array(start_color, dtype=np.float64)
    end = np.array(end_color, dtype=np.float64)
    blended = start + (end - start) * t
    return np.rint(blended).astype(np.uint8)


class PillowFrame(FrameSurface):
    """Pillow drawing context for one frame."""

    def __init__(self, canvas: "PillowCanvas", width: int, height: int, index: int):
        self._canvas = canvas
        self._image: Optional[Image.Image] = Image.new("RGB", (width, height))
        self._draw: Optional[ImageDraw.ImageDraw] = ImageDraw.Draw(self._image)
        self._index = index

    def _require_open(self) -> ImageDraw.ImageDraw:
        if self._draw is None:
            raise RuntimeError("frame already finished")
        return self._draw

    def draw_gradient(self, start_color: RGB, end_color: RGB) -> None:
        self._require_open()
        width, height = self._image.size
        self._image.paste(Image.fromarray(gradient_array(width, height, start_color, end_color)))

    def draw_text(self, text: str, x: int, y: int, font: FontSpec, color: RGB) -> None:
        draw = self._require_open()
        draw.text((x, y), text, font=self._canvas.get_font(font), fill=color, anchor="ls")

    def measure_text(self, text: str, font: FontSpec) -> int:
        return self._canvas.measure_text(text, font)

    def end_frame(self) -> Frame:
        self._require_open()
        frame = Frame(image=self._image, index=self._index)
        self._image = None
        self._draw = None
        return frame


class PillowCanvas(Canvas):
    """
    Draws frames with Pillow.

    Fonts are looked up once per (size, weight) and cached; the cache is
    the only state shared between frames. When none of the candidate font
    files exist, Pillow's bundled default font is used.
    """

    def __init__(
        self,
        font_path: Optional[str] = None,
        bold_font_path: Optional[str] = None,
    ):
        self.font_path = font_path
        self.bold_font_path = bold_font_path
        self._font_cache: Dict[Tuple[int, bool], FontType] = {}
        self._font_lock = threading.Lock()

    def _candidates(self, bold: bool) -> Sequence[str]:
        configured = self.bold_font_path if bold else self.font_path
        defaults = BOLD_FONT_CANDIDATES if bold else REGULAR_FONT_CANDIDATES
        return ((configured,) if configured else ()) + tuple(defaults)

    def get_font(self, font: FontSpec) -> FontType:
        key = (font.size, font.bold)
        with self._font_lock:
            if key not in self._font_cache:
                self._font_cache[key] = self._load_font(font)
            return self._font_cache[key]

    def _load_font(self, font: FontSpec) -> FontType:
        for candidate in self._candidates(font.bold):
            if not Path(candidate).exists():
                continue
            try:
                return ImageFont.truetype(candidate, font.size)
            except OSError as e:
                logger.warning(f"Could not load font {candidate}: {e}")
        logger.warning(f"No TrueType font found for size {font.size}, using Pillow default")
        return ImageFont.load_default(size=font.size)

    def begin_frame(self, width: int, height: int, index: int = 0) -> PillowFrame:
        return PillowFrame(self, width, height, index)

    def measure_text(self, text: str, font: FontSpec) -> int:
        return int(round(self.get_font(font).getlength(text)))
