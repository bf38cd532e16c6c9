"""Bayer demosaicking and inversion kernels, with row-split parallel jobs."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

_BORDER = (0, 0, 0)


class GrayMethod(enum.Enum):
    """How the three colour channels are folded into one grey level."""

    MEAN = "mean"
    """Integer mean ``(r + g + b) // 3``."""
    WEIGHTED = "weighted"
    """Truncated ``0.33*r + 0.33*g + 0.33*b``."""

    def combine(self, red: int, green: int, blue: int) -> int:
        if self is GrayMethod.MEAN:
            return (red + green + blue) // 3
        return int(0.33 * red + 0.33 * green + 0.33 * blue)


def _check_image(raw: bytes, width: int, height: int) -> None:
    if width < 0 or height < 0:
        raise ValueError("image dimensions must not be negative")
    if len(raw) < width * height:
        raise ValueError("image buffer is smaller than width * height")


def _pixel_rgb(raw: bytes, width: int, x: int, y: int) -> tuple[int, int, int]:
    """Reconstruct the colour of an interior pixel of an RGGB Bayer mosaic."""
    here = y * width + x
    above, below = here - width, here + width
    left, right = raw[here - 1], raw[here + 1]
    up, down = raw[above], raw[below]
    diagonal = (raw[above - 1] + raw[above + 1] + raw[below - 1] + raw[below + 1]) // 4
    cross = (left + right + up + down) // 4

    even_x, even_y = x % 2 == 0, y % 2 == 0
    if even_x and even_y:
        return raw[here], cross, diagonal
    if not even_x and even_y:
        return (left + right) // 2, raw[here], (up + down) // 2
    if even_x and not even_y:
        return (up + down) // 2, raw[here], (left + right) // 2
    return diagonal, cross, raw[here]


def _demosaick_rows(
    raw: bytes,
    width: int,
    height: int,
    rows: range,
    grayscale: bool,
    method: GrayMethod,
    out: bytearray,
) -> None:
    for y in rows:
        for x in range(width):
            idx = y * width + x
            if x == 0 or y == 0 or x == width - 1 or y == height - 1:
                rgb = _BORDER
            else:
                rgb = _pixel_rgb(raw, width, x, y)
            if grayscale:
                out[idx] = method.combine(*rgb)
            else:
                out[idx * 3:idx * 3 + 3] = bytes(rgb)


def demosaick(
    raw: bytes,
    width: int,
    height: int,
    grayscale: bool = True,
    method: GrayMethod = GrayMethod.MEAN,
) -> bytes:
    """Turn a raw RGGB Bayer frame into a grey or interleaved RGB image.

    The one-pixel border is set to black.  A grey result holds one byte per
    pixel; a colour result holds three (red, green, blue).
    """
    _check_image(raw, width, height)
    raw = bytes(raw)
    out = bytearray(width * height * (1 if grayscale else 3))
    _demosaick_rows(raw, width, height, range(height), grayscale, method, out)
    return bytes(out)


def invert(image: bytes) -> bytes:
    """Return the photographic negative of a greyscale image."""
    return bytes(255 - pixel for pixel in image)


def _split(total: int, workers: int, worker: int) -> range:
    if workers < 1:
        raise ValueError("there must be at least one worker")
    if not 0 <= worker < workers:
        raise ValueError(f"worker {worker} out of range for {workers} workers")
    if total < 0:
        raise ValueError("total must not be negative")
    per_worker = -(-total // workers)
    return range(worker * per_worker, min((worker + 1) * per_worker, total))


def row_range(height: int, workers: int, worker: int) -> range:
    """Rows handled by ``worker`` when ``height`` rows are shared out."""
    return _split(height, workers, worker)


def element_range(total: int, workers: int, worker: int) -> range:
    """Flat pixel indices handled by ``worker`` out of ``total``."""
    return _split(total, workers, worker)


@dataclass
class KernelJob:
    """A kernel invocation shared out over several workers."""

    source: bytes
    width: int
    height: int
    workers: int = 8
    grayscale: bool = True
    method: GrayMethod = GrayMethod.MEAN
    output: bytearray = field(init=False, repr=False)

    def __post_init__(self) -> None:
        _check_image(self.source, self.width, self.height)
        if self.workers < 1:
            raise ValueError("there must be at least one worker")
        self.source = bytes(self.source)
        channels = 1 if self.grayscale else 3
        self.output = bytearray(self.width * self.height * channels)

    def demosaick_part(self, worker: int) -> None:
        """Demosaick the band of rows that belongs to ``worker``."""
        rows = row_range(self.height, self.workers, worker)
        _demosaick_rows(
            self.source, self.width, self.height, rows, self.grayscale, self.method, self.output
        )

    def invert_part(self, worker: int) -> None:
        """Invert the slice of pixels that belongs to ``worker``."""
        span = element_range(self.width * self.height, self.workers, worker)
        self.output[span.start:span.stop] = invert(self.source[span.start:span.stop])

    def run_demosaicking(self) -> bytes:
        """Run every worker's demosaicking share and return the result."""
        for worker in range(self.workers):
            self.demosaick_part(worker)
        return bytes(self.output)

    def run_inverting(self) -> bytes:
        """Run every worker's inversion share and return the result."""
        for worker in range(self.workers):
            self.invert_part(worker)
        return bytes(self.output[:self.width * self.height])