"""
Riding Roney service configuration.
"""
import os
from pathlib import Path

# Service settings
SERVICE_NAME = "riding-roney"
SERVICE_VERSION = "1.0.0"
SERVICE_PORT = int(os.getenv("PORT", 8080))
CHANNEL_NAME = os.getenv("CHANNEL_NAME", "Riding Roney")

# Paths
OUTPUT_DIR = Path(os.getenv("OUTPUT_DIR", "./generated-videos"))

# Video settings (one frame per second)
TOTAL_FRAMES = int(os.getenv("TOTAL_FRAMES", 30))
FRAME_WIDTH = 1920
FRAME_HEIGHT = 1080
VIDEO_EXTENSION = ".mp4"

# Fonts (searched in system font folders when unset)
FONT_PATH = os.getenv("FONT_PATH")
FONT_BOLD_PATH = os.getenv("FONT_BOLD_PATH")
