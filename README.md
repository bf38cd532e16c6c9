# aideck

Small image-processing tools for a camera deck that produces 324x244
grayscale frames. Pure Python, no dependencies.

## What is inside

- `aideck.ppm` reads and writes binary grayscale PPM images (`P5`, maximum
  value 255).
  - `parse_header(data)` returns a `PPMHeader` (`width`, `height`,
    `is_rgb`, `size` of the header in bytes, plus `channels` and
    `data_size`). It accepts `P5` and `P6` magic and `#` comments.
  - `format_header(width, height)` builds a `P5` header.
  - `read_image(path)` returns `(width, height, pixels)`. Colour (`P6`)
    files, short pixel data and malformed headers raise `PPMError`.
  - `write_image(path, width, height, pixels)` writes the header and the
    pixels, prints a `progress_bar` line for each full 8192-byte chunk, and
    returns the number of pixel bytes written.
- `aideck.manipulations`
  - `resize_image(image, width, height, factor)` shrinks an image by an
    integer factor. Sampled pixels away from the border become the mean of
    the surrounding window; those near the border are copied. Returns
    `(pixels, new_width, new_height)`.
  - `crop_image(image, width, crop_width, crop_height, crop_x, crop_y)`
    cuts out a window and raises `ValueError` if it lies outside the image.
  - `binary_image(image, threshold)` maps pixels below the threshold to
    255 and all others to 0.
- `aideck.kernels`
  - `demosaick(raw, width, height, grayscale=True, method=GrayMethod.MEAN)`
    turns a raw RGGB Bayer frame into one grey byte per pixel or three RGB
    bytes per pixel; the one-pixel border is black. `GrayMethod.MEAN` uses
    `(r + g + b) // 3`, `GrayMethod.WEIGHTED` truncates
    `0.33*r + 0.33*g + 0.33*b`.
  - `invert(image)` computes `255 - pixel`.
  - `row_range` and `element_range` give the share of rows or pixels that
    one worker handles when the work is split over several workers.
  - `KernelJob(source, width, height, workers=8, grayscale=True, ...)`
    runs the same kernels share by share: `demosaick_part`, `invert_part`,
    `run_demosaicking` and `run_inverting`.

## Installation

```
pip install .
```

## Command line

`aideck-manipulate` loads a grayscale PPM, checks its size, shrinks it,
crops it, binarises it and writes the result. With the defaults it expects
a 324x244 image, shrinks it six times, crops 28x28 at (15, 1) and uses
threshold 25:

```
aideck-manipulate img.ppm img_out.ppm
```

Options: `--width`, `--height`, `--factor`, `--crop-width`, `--crop-height`,
`--crop-x`, `--crop-y`, `--threshold`. The exit status is 1 when the image
cannot be loaded, has the wrong size, or the crop does not fit.

## Library use

```python
from aideck.ppm import read_image, write_image
from aideck.kernels import demosaick, invert

width, height, pixels = read_image("img.ppm")
write_image("inverted.ppm", width, height, invert(pixels))
gray = demosaick(pixels, width, height, grayscale=True)
```

## What it does not do

The package works on images already in memory or on disk. It does not
capture frames from a camera, and it has no network server or client for
streaming images; `KernelJob` shares work out in turn within one process
rather than on parallel cores.

## Tests

```
pip install .[test]
pytest
```