"""
Tests for the MP4-style container emitter.
"""
from pathlib import Path

import pytest
from PIL import Image

from services.riding_video.container_emitter import (
    FTYP_BOX,
    HEADER_BYTES,
    MDAT_HEADER,
    MOOV_BOX,
    PADDING_SIZE,
    ContainerEmitter,
    expected_file_size,
)
from services.riding_video.models import Frame


def solid_frame(color, size=(4, 2), index=0):
    return Frame(Image.new("RGB", size, color), index)


@pytest.fixture
def emitter():
    return ContainerEmitter()


class TestHeaderBytes:
    def test_ftyp_box(self):
        assert FTYP_BOX == bytes.fromhex(
            "00000020 66747970 69736f6d 00000200 69736f6d 69736f32 61766331 6d703431"
        )
        assert len(FTYP_BOX) == 32

    def test_moov_and_mdat(self):
        assert MOOV_BOX == b"\x00\x00\x00\x08moov"
        assert MDAT_HEADER == b"\x00\x00\x00\x08mdat"
        assert len(HEADER_BYTES) == 48


class TestEmit:
    def test_layout(self, emitter, tmp_path):
        out = tmp_path / "video.mp4"
        frame = Frame(Image.frombytes("RGB", (2, 2), bytes(range(12))))
        emitter.emit([frame], out)

        data = out.read_bytes()
        assert data[:48] == HEADER_BYTES
        assert data[48:60] == bytes(range(12))
        assert data[60:] == bytes(PADDING_SIZE)

    def test_pixel_order_is_row_major_rgb(self, emitter, tmp_path):
        image = Image.new("RGB", (2, 2))
        image.putpixel((0, 0), (1, 2, 3))
        image.putpixel((1, 0), (4, 5, 6))
        image.putpixel((0, 1), (7, 8, 9))
        image.putpixel((1, 1), (10, 11, 12))
        out = tmp_path / "order.mp4"

        emitter.emit([Frame(image)], out)
        assert out.read_bytes()[48:60] == bytes(range(1, 13))

    @pytest.mark.parametrize("frame_count", [1, 2, 30])
    def test_only_first_frame_is_written(self, emitter, tmp_path, frame_count):
        frames = [solid_frame((i, 0, 0), index=i) for i in range(frame_count)]
        out = tmp_path / f"{frame_count}.mp4"
        emitter.emit(frames, out)

        data = out.read_bytes()
        assert len(data) == len(HEADER_BYTES) + 4 * 2 * 3 + PADDING_SIZE
        assert len(data) == expected_file_size(frames[0])
        assert data[48:48 + 24] == bytes(24)

    def test_full_hd_size(self, emitter, tmp_path):
        out = tmp_path / "hd.mp4"
        emitter.emit([solid_frame((135, 206, 235), size=(1920, 1080))], out)
        assert out.stat().st_size == 48 + 1920 * 1080 * 3 + 1024

    def test_overwrites_existing_file(self, emitter, tmp_path):
        out = tmp_path / "video.mp4"
        out.write_bytes(b"x" * 10_000)
        emitter.emit([solid_frame((9, 9, 9))], out)
        assert out.stat().st_size == 48 + 24 + 1024

    def test_empty_sequence_rejected(self, emitter, tmp_path):
        with pytest.raises(ValueError):
            emitter.emit([], tmp_path / "empty.mp4")
        assert not (tmp_path / "empty.mp4").exists()

    def test_missing_directory_raises_oserror(self, emitter, tmp_path):
        with pytest.raises(OSError):
            emitter.emit([solid_frame((0, 0, 0))], tmp_path / "nope" / "video.mp4")

    def test_partial_file_removed_on_write_failure(self, emitter, tmp_path):
        class ExplodingFrame:
            def to_rgb_bytes(self):
                raise OSError("device full")

        out = tmp_path / "partial.mp4"
        with pytest.raises(OSError):
            emitter.emit([ExplodingFrame()], out)
        assert not out.exists()

    def test_failed_open_keeps_existing_file(self, emitter, tmp_path, monkeypatch):
        out = tmp_path / "keep.mp4"
        out.write_bytes(b"earlier video")

        def locked_open(*args, **kwargs):
            raise PermissionError("file is locked")

        monkeypatch.setattr(
            "services.riding_video.container_emitter.open", locked_open, raising=False
        )
        with pytest.raises(PermissionError):
            emitter.emit([solid_frame((0, 0, 0))], out)
        assert out.read_bytes() == b"earlier video"

    def test_cleanup_failure_keeps_original_error(self, emitter, tmp_path, monkeypatch):
        class ExplodingFrame:
            def to_rgb_bytes(self):
                raise OSError("device full")

        def stuck_unlink(self, *args, **kwargs):
            raise PermissionError("cannot remove")

        monkeypatch.setattr(Path, "unlink", stuck_unlink)
        with pytest.raises(OSError, match="device full"):
            emitter.emit([ExplodingFrame()], tmp_path / "stuck.mp4")
