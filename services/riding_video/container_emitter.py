"""
Container Emitter
=================
Writes rendered frames into a file with an MP4 look.

The output is not a decodable video. It is three fixed box headers
(ftyp, an empty moov, an mdat header) followed by the raw RGB bytes of
the first frame and a zero-filled padding block. Frames after the first
are accepted and dropped.
"""

import contextlib
from pathlib import Path
from typing import Sequence, Union

from loguru import logger

from .models import Frame


FTYP_BOX = bytes([
    0x00, 0x00, 0x00, 0x20,  # box size (32 bytes)
    0x66, 0x74, 0x79, 0x70,  # 'ftyp'
    0x69, 0x73, 0x6F, 0x6D,  # major brand 'isom'
    0x00, 0x00, 0x02, 0x00,  # minor version
    0x69, 0x73, 0x6F, 0x6D,  # compatible brand 'isom'
    0x69, 0x73, 0x6F, 0x32,  # compatible brand 'iso2'
    0x61, 0x76, 0x63, 0x31,  # compatible brand 'avc1'
    0x6D, 0x70, 0x34, 0x31,  # compatible brand 'mp41'
])

MOOV_BOX = bytes([
    0x00, 0x00, 0x00, 0x08,  # box size
    0x6D, 0x6F, 0x6F, 0x76,  # 'moov'
])

MDAT_HEADER = bytes([
    0x00, 0x00, 0x00, 0x08,  # box size
    0x6D, 0x64, 0x61, 0x74,  # 'mdat'
])

HEADER_BYTES = FTYP_BOX + MOOV_BOX + MDAT_HEADER
PADDING_SIZE = 1024


def expected_file_size(frame: Frame) -> int:
    """Size of the emitted file for a sequence starting with frame"""
    return len(HEADER_BYTES) + frame.byte_count + PADDING_SIZE


class ContainerEmitter:
    """Writes the header blocks, first frame payload and padding."""

    def emit(self, frames: Sequence[Frame], destination: Union[str, Path]) -> None:
        """
        Write frames to destination.

        Args:
            frames: Rendered frames in order; only the first is written
            destination: Output file path

        Raises:
            ValueError: If frames is empty
            OSError: If the destination cannot be opened or written
        """
        if not frames:
            raise ValueError("at least one frame is required")

        destination = Path(destination)
        first = frames[0]
        with open(destination, "wb") as fh:
            try:
                fh.write(FTYP_BOX)
                fh.write(MOOV_BOX)
                fh.write(MDAT_HEADER)
                fh.write(first.to_rgb_bytes())
                fh.write(bytes(PADDING_SIZE))
            except OSError:
                # only a file this call opened is removed
                with contextlib.suppress(OSError):
                    destination.unlink()
                raise

        logger.info(
            f"Wrote {destination} ({expected_file_size(first)} bytes, "
            f"1 of {len(frames)} frames stored)"
        )
