"""
Text Utilities for Riding Videos
Filename sanitizing and the sliding word window shown on each frame
"""
import re
from typing import List, Sequence, Tuple


WINDOW_SIZE = 8
WINDOW_DELAY = 5  # frames before the window starts sliding
FALLBACK_FILENAME = "riding-video"

_UNSAFE_CHARS = re.compile(r"[^a-zA-Z0-9\s-]")
_WHITESPACE_RUN = re.compile(r"\s+")


def sanitize_filename(title: str) -> str:
    """
    Turn a video title into a file system safe base name.

    Keeps ASCII letters, digits, whitespace and hyphens, collapses
    whitespace runs to a single space and trims the ends.
    """
    cleaned = _UNSAFE_CHARS.sub("", title)
    cleaned = _WHITESPACE_RUN.sub(" ", cleaned).strip()
    return cleaned or FALLBACK_FILENAME


def story_words(story: str) -> List[str]:
    """Split a narrative on whitespace"""
    return story.split()


def word_window(frame_index: int, word_count: int) -> Tuple[int, int]:
    """
    Compute the [start, end) slice of words visible in a frame.

    The first WINDOW_DELAY frames show the opening words, after that the
    window advances by one word per frame.
    """
    start = max(0, frame_index - WINDOW_DELAY)
    end = min(word_count, start + WINDOW_SIZE)
    return start, max(start, end)


def visible_words(words: Sequence[str], frame_index: int) -> List[str]:
    """Words shown on the given frame"""
    start, end = word_window(frame_index, len(words))
    return list(words[start:end])
