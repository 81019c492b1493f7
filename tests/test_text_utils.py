"""
Tests for filename sanitizing, the word window and the story catalog.
"""
import random
import re

import pytest

from services.riding_video.catalog import RIDING_STORIES, pick_story
from services.riding_video.models import StoryPair
from services.riding_video.text_utils import (
    FALLBACK_FILENAME,
    sanitize_filename,
    story_words,
    visible_words,
    word_window,
)

SAFE_NAME = re.compile(r"^[A-Za-z0-9 -]+$")


class TestSanitizeFilename:
    def test_catalog_titles_unchanged(self):
        for story in RIDING_STORIES:
            assert sanitize_filename(story.title) == story.title

    def test_strips_unsafe_characters(self):
        assert sanitize_filename("BMX: Tricks/Stunts? <Kids>!") == "BMX TricksStunts Kids"

    def test_collapses_whitespace(self):
        assert sanitize_filename("Night   Riding\t\n- Safety") == "Night Riding - Safety"

    def test_drops_non_ascii_letters(self):
        assert sanitize_filename("Café Ride 🚴") == "Caf Ride"

    @pytest.mark.parametrize("title", ["", "!!!", "   ", "🚴‍♂️"])
    def test_fallback_when_nothing_left(self, title):
        assert sanitize_filename(title) == FALLBACK_FILENAME

    @pytest.mark.parametrize("title", [
        "a  b", " lead", "trail ", "x  y", "Épic -- Trail!! 2024", "tab\t\tsep",
    ])
    def test_output_is_safe(self, title):
        name = sanitize_filename(title)
        assert SAFE_NAME.match(name)
        assert "  " not in name


class TestWordWindow:
    def test_window_holds_for_first_frames(self):
        for i in range(6):
            assert word_window(i, 20) == (0, 8)

    def test_window_slides_one_word_per_frame(self):
        assert word_window(6, 20) == (1, 9)
        assert word_window(12, 20) == (7, 15)

    def test_window_clamped_to_story_length(self):
        assert word_window(10, 12) == (5, 12)
        assert word_window(29, 12) == (24, 24)

    def test_short_story(self):
        assert visible_words(["only", "three", "words"], 0) == ["only", "three", "words"]

    def test_story_words_split_on_any_whitespace(self):
        assert story_words("Helmet on,\tknee  pads\nsecure.") == ["Helmet", "on,", "knee", "pads", "secure."]


class TestCatalog:
    def test_ten_paired_stories(self):
        assert len(RIDING_STORIES) == 10
        assert len({s.title for s in RIDING_STORIES}) == 10
        assert all(s.title and s.narrative for s in RIDING_STORIES)

    def test_seeded_pick_is_reproducible(self):
        first = [pick_story(random.Random(42)) for _ in range(3)]
        second = [pick_story(random.Random(42)) for _ in range(3)]
        assert first == second

    def test_pick_from_custom_list(self):
        only = StoryPair("Only Title", "only story")
        assert pick_story(random.Random(), [only]) is only

    def test_empty_catalog_rejected(self):
        with pytest.raises(ValueError):
            pick_story(random.Random(), [])
