"""
Riding Video Service
====================
One-click riding story videos.

Architecture:
- Catalog: paired (title, narrative) stories
- FrameRenderer: lays out each frame through a Canvas
- ContainerEmitter: writes MP4-style headers plus the first frame's pixels
- VideoGenerator: picks a story, renders frames, emits the file
"""

from .catalog import RIDING_STORIES, pick_story
from .container_emitter import ContainerEmitter
from .frame_renderer import FrameRenderer
from .generator import VideoGenerationError, VideoGenerator
from .models import Frame, RenderRequest, StoryPair, VideoArtifact

__all__ = [
    "RIDING_STORIES",
    "pick_story",
    "ContainerEmitter",
    "FrameRenderer",
    "VideoGenerationError",
    "VideoGenerator",
    "Frame",
    "RenderRequest",
    "StoryPair",
    "VideoArtifact",
]
