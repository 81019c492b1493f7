"""
Riding Video Models
===================
Data models for frames, stories, render requests and generated artifacts.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Tuple

from PIL import Image
from pydantic import BaseModel


RGB = Tuple[int, int, int]


@dataclass(frozen=True)
class StoryPair:
    """A video title together with the narrative shown under it."""
    title: str
    narrative: str


@dataclass(frozen=True)
class FontSpec:
    """Font request understood by every canvas."""
    size: int
    bold: bool = False


@dataclass(frozen=True)
class RenderRequest:
    """Inputs for rendering a single frame."""
    title: str
    story: str
    frame_index: int
    total_frames: int

    def __post_init__(self):
        if self.total_frames <= 0:
            raise ValueError(f"total_frames must be positive, got {self.total_frames}")
        if not 0 <= self.frame_index < self.total_frames:
            raise ValueError(
                f"frame_index {self.frame_index} outside [0, {self.total_frames})"
            )


@dataclass(frozen=True)
class Frame:
    """
    One rendered RGB raster.

    frozen=True only fixes the fields. The PIL image itself stays mutable,
    so nothing in this package draws on it once the frame surface has been
    finished; callers that want to draw on a frame must take a copy of
    the image first.
    """
    image: Image.Image
    index: int = 0

    def __post_init__(self):
        if self.image.mode != "RGB":
            raise ValueError(f"Frame must be RGB, got {self.image.mode}")

    @property
    def width(self) -> int:
        return self.image.width

    @property
    def height(self) -> int:
        return self.image.height

    @property
    def byte_count(self) -> int:
        return self.width * self.height * 3

    def pixel(self, x: int, y: int) -> RGB:
        return self.image.getpixel((x, y))

    def to_rgb_bytes(self) -> bytes:
        """Row-major, top-to-bottom, left-to-right interleaved R,G,B bytes."""
        return self.image.tobytes("raw", "RGB")


class VideoArtifact(BaseModel):
    """A generated video file on disk."""
    path: str
    filename: str
    title: str
    story: str
    frame_count: int
    duration_seconds: int
    size_bytes: int
    created_at: datetime
