"""Tiles, target images and image filters.

Images are numpy arrays of shape (height, width, channels) holding RGB or
RGBA pixels as ``uint8``.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True, eq=False)
class Tile:
    """A picture placed in the mosaic; ``image`` may be absent."""

    image: np.ndarray | None = None

    @property
    def width(self) -> int:
        return 0 if self.image is None else int(self.image.shape[1])

    @property
    def height(self) -> int:
        return 0 if self.image is None else int(self.image.shape[0])


@dataclass(frozen=True, eq=False)
class TargetImage:
    """The picture a mosaic approximates, with its size ``(width, height)`` in world units."""

    image: np.ndarray | None
    size: tuple[int, int]

    @property
    def world_size(self) -> float:
        width, height = self.size
        return math.sqrt(width * height)


def create_test_image() -> TargetImage:
    """A 22 x 33 target image filled with a single colour."""
    width, height = 22, 33
    pixels = np.empty((height, width, 4), dtype=np.uint8)
    pixels[...] = (200, 100, 10, 255)
    return TargetImage(pixels, (width, height))


def _stencil(sigma: float) -> np.ndarray:
    half_width = int(2.0 * sigma)
    offsets = np.arange(-half_width, half_width + 1, dtype=np.float32)
    stencil = np.exp(-((offsets / np.float32(sigma)) ** 2)).astype(np.float32)
    return stencil / stencil.sum(dtype=np.float32)


def _convolve(data: np.ndarray, stencil: np.ndarray, axis: int) -> np.ndarray:
    half_width = len(stencil) // 2
    pad = [(0, 0)] * data.ndim
    pad[axis] = (half_width, half_width)
    padded = np.pad(data, pad, mode="edge")
    length = data.shape[axis]
    result = np.zeros(data.shape, dtype=np.float32)
    for offset, weight in enumerate(stencil):
        result += weight * np.take(padded, range(offset, offset + length), axis=axis)
    return result


def gaussian_blur(image: np.ndarray, sigma: float) -> np.ndarray:
    """Blur the colour channels of ``image`` with a separable Gaussian.

    Edges are clamped. The result has the shape of the input and, if the
    input has an alpha channel, a fully opaque one.
    """
    pixels = np.asarray(image)
    if pixels.ndim != 3 or pixels.shape[2] not in (3, 4):
        raise ValueError("image must have shape (height, width, 3 or 4)")
    if pixels.shape[0] == 0 or pixels.shape[1] == 0:
        raise ValueError("image must not be empty")
    if sigma <= 0:
        raise ValueError("sigma must be positive")

    stencil = _stencil(sigma)
    rgb = pixels[..., :3].astype(np.float32)
    horizontal = np.clip(_convolve(rgb, stencil, axis=1), 0, 255).astype(np.uint8)
    vertical = _convolve(horizontal.astype(np.float32), stencil, axis=0)

    blurred = np.empty(pixels.shape, dtype=np.uint8)
    blurred[..., :3] = np.clip(vertical, 0, 255).astype(np.uint8)
    if pixels.shape[2] == 4:
        blurred[..., 3] = 255
    return blurred