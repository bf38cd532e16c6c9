"""Simple greyscale image manipulations: downscaling, cropping, thresholding."""

from __future__ import annotations

import argparse
from typing import Optional, Sequence

from .ppm import PPMError, read_image, write_image


def resize_image(image: bytes, width: int, height: int, factor: int) -> tuple[bytes, int, int]:
    """Shrink an image by an integer factor.

    Each sampled pixel away from the border becomes the mean of the
    surrounding window; pixels near the border are copied as they are.
    Returns ``(pixels, new_width, new_height)``.
    """
    if factor < 2:
        raise ValueError("resize factor must be at least 2")
    if width <= 0 or height <= 0:
        raise ValueError("image dimensions must be positive")
    if len(image) < width * height:
        raise ValueError("image buffer is smaller than width * height")

    new_width, new_height = width // factor, height // factor
    half = factor // 2
    window_area = (2 * half) ** 2
    sampled_rows = -(-height // factor)
    sampled_cols = -(-width // factor)
    # Samples past the last full block spill over and are dropped at the end.
    out = bytearray(sampled_rows * new_width + sampled_cols)

    for y in range(0, height, factor):
        for x in range(0, width, factor):
            target = (y // factor) * new_width + x // factor
            if half < y < height - half and half < x < width - half:
                total = sum(
                    sum(image[row * width + x - half:row * width + x + half])
                    for row in range(y - half, y + half)
                )
                out[target] = total // window_area
            else:
                out[target] = image[y * width + x]

    return bytes(out[:new_width * new_height]), new_width, new_height


def crop_image(
    image: bytes,
    width: int,
    crop_width: int,
    crop_height: int,
    crop_x: int,
    crop_y: int,
) -> bytes:
    """Cut a ``crop_width`` x ``crop_height`` window starting at ``(crop_x, crop_y)``."""
    if width <= 0:
        raise ValueError("image width must be positive")
    if crop_width < 0 or crop_height < 0:
        raise ValueError("crop size must not be negative")
    height = len(image) // width
    if (
        crop_x < 0
        or crop_y < 0
        or crop_x + crop_width > width
        or crop_y + crop_height > height
    ):
        raise ValueError("crop window lies outside the image")

    return b"".join(
        bytes(image[row * width + crop_x:row * width + crop_x + crop_width])
        for row in range(crop_y, crop_y + crop_height)
    )


def binary_image(image: bytes, threshold: int) -> bytes:
    """Map pixels darker than ``threshold`` to 255 and all others to 0."""
    return bytes(255 if pixel < threshold else 0 for pixel in image)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="aideck-manipulate",
        description="Shrink, crop and binarise a greyscale PPM image.",
    )
    parser.add_argument("input", nargs="?", default="img.ppm", help="image to load")
    parser.add_argument("output", nargs="?", default="img_out.ppm", help="image to write")
    parser.add_argument("--width", type=int, default=324, help="expected input width")
    parser.add_argument("--height", type=int, default=244, help="expected input height")
    parser.add_argument("--factor", type=int, default=6, help="resize factor")
    parser.add_argument("--crop-width", type=int, default=28)
    parser.add_argument("--crop-height", type=int, default=28)
    parser.add_argument("--crop-x", type=int, default=15)
    parser.add_argument("--crop-y", type=int, default=1)
    parser.add_argument("--threshold", type=int, default=25)
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Load an image, shrink it, crop it, binarise it and save the result."""
    args = _build_parser().parse_args(argv)
    print("Entering main controller")

    try:
        width, height, image = read_image(args.input)
    except (PPMError, OSError) as exc:
        print(f"Failed to load image {args.input}: {exc}")
        return 1
    if (width, height) != (args.width, args.height):
        print(
            f"Failed to load image {args.input} or dimension mismatch "
            f"Expects [{args.width}x{args.height}], Got [{width}x{height}]"
        )
        return 1
    print(
        f"Image {args.input}, [W: {width}, H: {height}], Gray, "
        f"Size: {len(image)} bytes, Loaded sucessfully"
    )

    try:
        resized, resized_width, resized_height = resize_image(image, width, height, args.factor)
    except ValueError as exc:
        print(f"Resize failed: {exc}")
        return 1
    print("Image made smaller")

    if args.crop_width > resized_width or args.crop_height > resized_height:
        print("crop should not be bigger than original image!")
        return 1
    try:
        cropped = crop_image(
            resized, resized_width, args.crop_width, args.crop_height, args.crop_x, args.crop_y
        )
    except ValueError as exc:
        print(f"Crop failed: {exc}")
        return 1
    print("Image cropped")

    binary = binary_image(cropped, args.threshold)
    print("Image binarized")

    write_image(args.output, args.crop_width, args.crop_height, binary)
    return 0