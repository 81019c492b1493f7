"""
Riding Video Generator
Picks a random story, renders every frame and writes the video file
"""
import random
from datetime import datetime
from pathlib import Path
from typing import List, Optional, Sequence, Union

from loguru import logger

from config import settings

from .canvas import PillowCanvas
from .catalog import RIDING_STORIES, pick_story
from .container_emitter import ContainerEmitter
from .frame_renderer import FrameRenderer
from .models import Frame, StoryPair, VideoArtifact
from .text_utils import sanitize_filename


class VideoGenerationError(Exception):
    """Raised when a video cannot be written to disk."""

    def __init__(self, message: str, path: Optional[Path] = None):
        self.path = path
        super().__init__(message)


class VideoGenerator:
    """
    Generates riding videos.

    Every dependency is injected; from_settings() wires the defaults.
    Pass a seeded random.Random to make the story choice reproducible.
    """

    def __init__(
        self,
        output_dir: Union[str, Path],
        renderer: Optional[FrameRenderer] = None,
        emitter: Optional[ContainerEmitter] = None,
        rng: Optional[random.Random] = None,
        stories: Sequence[StoryPair] = RIDING_STORIES,
        total_frames: int = 30,
        extension: str = ".mp4",
    ):
        if total_frames <= 0:
            raise ValueError(f"total_frames must be positive, got {total_frames}")
        self.output_dir = Path(output_dir)
        self.renderer = renderer or FrameRenderer()
        self.emitter = emitter or ContainerEmitter()
        self.rng = rng or random.Random()
        self.stories = stories
        self.total_frames = total_frames
        self.extension = extension

    @classmethod
    def from_settings(cls) -> "VideoGenerator":
        canvas = PillowCanvas(settings.FONT_PATH, settings.FONT_BOLD_PATH)
        return cls(
            output_dir=settings.OUTPUT_DIR,
            renderer=FrameRenderer(
                canvas,
                width=settings.FRAME_WIDTH,
                height=settings.FRAME_HEIGHT,
                branding=settings.CHANNEL_NAME,
            ),
            total_frames=settings.TOTAL_FRAMES,
            extension=settings.VIDEO_EXTENSION,
        )

    def output_path(self, title: str) -> Path:
        """Destination for a video with the given title"""
        return self.output_dir / f"{sanitize_filename(title)}{self.extension}"

    def render_frames(self, story: StoryPair) -> List[Frame]:
        return [
            self.renderer.render(story.title, story.narrative, i, self.total_frames)
            for i in range(self.total_frames)
        ]

    def generate(self) -> VideoArtifact:
        """
        Generate one video from a randomly chosen story.

        Returns:
            VideoArtifact describing the written file

        Raises:
            VideoGenerationError: If the output directory or file cannot be written
        """
        story = pick_story(self.rng, self.stories)
        return self.generate_story(story)

    def generate_story(self, story: StoryPair) -> VideoArtifact:
        path = self.output_path(story.title)
        logger.info(f"Generating video: {story.title}")
        logger.info(f"Story: {story.narrative}")

        try:
            self.output_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise VideoGenerationError(
                f"Cannot create output directory {self.output_dir}: {e}", path
            ) from e

        frames = self.render_frames(story)

        try:
            self.emitter.emit(frames, path)
        except OSError as e:
            raise VideoGenerationError(f"Cannot write video {path}: {e}", path) from e

        artifact = VideoArtifact(
            path=str(path.resolve()),
            filename=path.name,
            title=story.title,
            story=story.narrative,
            frame_count=len(frames),
            duration_seconds=len(frames),
            size_bytes=path.stat().st_size,
            created_at=datetime.now(),
        )
        logger.info(f"Video file created: {artifact.path} ({artifact.size_bytes} bytes)")
        logger.info(f"Frames generated: {artifact.frame_count}")
        return artifact
