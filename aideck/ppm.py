"""Reading and writing binary greyscale PPM images (P5, maximum value 255)."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Union

PathLike = Union[str, Path]

HEADER_PROBE = 256
CHUNK_SIZE = 8192
PROGRESS_WIDTH = 30
MAX_VALUE = 255

_DIGITS = b"0123456789"
_COMMENT = ord("#")
_NEWLINE = ord("\n")


class PPMError(ValueError):
    """Raised when an image cannot be parsed, read or written."""


@dataclass(frozen=True)
class PPMHeader:
    """Dimensions and layout of an image as described by its header."""

    width: int
    height: int
    is_rgb: bool
    size: int

    @property
    def channels(self) -> int:
        return 3 if self.is_rgb else 1

    @property
    def data_size(self) -> int:
        """Number of pixel bytes that follow the header."""
        return self.width * self.height * self.channels


def _skip_comments(data: bytes, pos: int) -> int:
    while data[pos] == _COMMENT:
        end = data.find(b"\n", pos)
        if end < 0:
            raise IndexError(pos)
        pos = end + 1
    return pos


def _read_number(data: bytes, pos: int) -> tuple[int, int]:
    while data[pos] not in _DIGITS:
        pos += 1
    start = pos
    while pos < len(data) and data[pos] in _DIGITS:
        pos += 1
    return int(data[start:pos]), pos


def parse_header(data: bytes) -> PPMHeader:
    """Parse a P5/P6 header at the start of ``data``.

    Comments are accepted after the magic number and after each dimension.
    The maximum value must be 255.
    """
    data = bytes(data)
    magic = data[:3]
    if magic == b"P5\n":
        is_rgb = False
    elif magic == b"P6\n":
        is_rgb = True
    else:
        raise PPMError("not a binary PPM/PGM image (expected P5 or P6 magic)")

    try:
        pos = _skip_comments(data, 3)
        width, pos = _read_number(data, pos)
        pos = _skip_comments(data, pos)
        height, pos = _read_number(data, pos)
        pos = _skip_comments(data, pos)
        max_value, pos = _read_number(data, pos)
    except IndexError:
        raise PPMError("truncated image header") from None

    if max_value != MAX_VALUE:
        raise PPMError(f"unsupported maximum value {max_value}, expected {MAX_VALUE}")

    end = data.find(b"\n", pos)
    if end < 0:
        raise PPMError("truncated image header")
    return PPMHeader(width=width, height=height, is_rgb=is_rgb, size=end + 1)


def format_header(width: int, height: int) -> bytes:
    """Build the P5 header for a greyscale image of the given size."""
    if width < 0 or height < 0:
        raise PPMError("image dimensions must not be negative")

    def digits(value: int) -> str:
        # A zero dimension is written without any digits.
        return str(value) if value > 0 else ""

    return b"P5\n" + f"{digits(width)} {digits(height)}\n{MAX_VALUE}\n".encode("ascii")


def read_image(path: PathLike) -> tuple[int, int, bytes]:
    """Load a greyscale image and return ``(width, height, pixels)``."""
    data = Path(path).read_bytes()
    header = parse_header(data[:HEADER_PROBE])
    if header.is_rgb:
        raise PPMError("only grey levels supported, found RGB")

    size = header.data_size
    pixels = data[header.size:header.size + size]
    if len(pixels) != size:
        raise PPMError(f"expected {size} bytes but got {len(pixels)}")
    return header.width, header.height, pixels


def write_image(path: PathLike, width: int, height: int, pixels: bytes) -> int:
    """Write a greyscale image; return the number of pixel bytes written."""
    size = width * height
    pixels = bytes(pixels)
    if len(pixels) < size:
        raise PPMError(f"image needs {size} bytes but only {len(pixels)} were given")

    header = format_header(width, height)
    steps = size // CHUNK_SIZE
    written = 0
    with open(path, "wb") as handle:
        handle.write(header)
        for step in range(steps):
            print(progress_bar("Writing image ", step, steps))
            start = step * CHUNK_SIZE
            written += handle.write(pixels[start:start + CHUNK_SIZE])
        if size % CHUNK_SIZE:
            written += handle.write(pixels[steps * CHUNK_SIZE:size])
    return written


def progress_bar(label: str, n: int, total: int) -> str:
    """Render a fixed-width text progress bar for step ``n`` of ``total``."""
    if total <= 0:
        raise ValueError("total must be positive")
    filled = (n * PROGRESS_WIDTH) // total
    bar = "".join("#" if i <= filled else " " for i in range(PROGRESS_WIDTH))
    return f"{label} [{bar}]"