"""Grayscale PPM image I/O and simple image kernels for a camera deck."""

__version__ = "0.1.0"

__all__ = ["ppm", "manipulations", "kernels"]