"""The state of a mosaic: position, rotation and scale of every tile."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence

import numpy as np

from momosaic.images import TargetImage, Tile

_FIELDS = ("x", "y", "rotations", "scales")


def _resized(values: np.ndarray, size: int) -> np.ndarray:
    result = np.zeros(size, dtype=np.float64)
    keep = min(size, len(values))
    result[:keep] = values[:keep]
    return result


def _initial_scale(target_image: TargetImage, tiles: Sequence[Tile]) -> float:
    total_tile_area = float(sum(tile.width * tile.height for tile in tiles))
    width, height = target_image.size
    target_area = float(width * height)
    if total_tile_area == 0.0:
        return math.nan if target_area == 0.0 else math.inf
    return 1.2 * target_area / total_tile_area


class MosaicModel:
    """Per-tile placement of a mosaic together with its tiles and target.

    Coordinate arrays are exposed as mutable numpy arrays; assigning a
    sequence replaces their contents and must match the model's size.
    """

    def __init__(self) -> None:
        self._size = 0
        self._x = np.zeros(0)
        self._y = np.zeros(0)
        self._rotations = np.zeros(0)
        self._scales = np.zeros(0)
        self._target_image = TargetImage(None, (0, 0))
        self._tiles: list[Tile] = []

    def construct_initial_state(
        self, target_image: TargetImage, tiles: Iterable[Tile]
    ) -> None:
        """Place all tiles at the origin, unrotated, with a common scale."""
        self._target_image = target_image
        self._tiles = list(tiles)
        self._size = len(self._tiles)
        self._x = np.zeros(self._size)
        self._y = np.zeros(self._size)
        self._rotations = np.zeros(self._size)
        self._scales = np.full(self._size, _initial_scale(target_image, self._tiles))

    def resize(self, size: int) -> None:
        """Change the number of tiles; new entries are zero."""
        if size < 0:
            raise ValueError("size must not be negative")
        self._size = size
        self._x = _resized(self._x, size)
        self._y = _resized(self._y, size)
        self._rotations = _resized(self._rotations, size)
        self._scales = _resized(self._scales, size)

    def __len__(self) -> int:
        return self._size

    def _assign(self, name: str, values: Iterable[float]) -> None:
        array = np.asarray(list(values), dtype=np.float64)
        if len(array) != self._size:
            raise ValueError(
                f"number of {name} values ({len(array)}) doesn't match "
                f"size of the model ({self._size})"
            )
        np.copyto(getattr(self, "_" + name), array)

    def _tile_extent(self, dimension: str) -> np.ndarray:
        count = min(self._size, len(self._tiles))
        extents = np.array(
            [getattr(tile, dimension) for tile in self._tiles[:count]], dtype=np.float64
        )
        return self._scales[:count] * extents

    @property
    def widths(self) -> np.ndarray:
        """Scaled widths of the tiles."""
        return self._tile_extent("width")

    @property
    def heights(self) -> np.ndarray:
        """Scaled heights of the tiles."""
        return self._tile_extent("height")

    @property
    def x(self) -> np.ndarray:
        return self._x

    @x.setter
    def x(self, values: Iterable[float]) -> None:
        self._assign("x", values)

    @property
    def y(self) -> np.ndarray:
        return self._y

    @y.setter
    def y(self, values: Iterable[float]) -> None:
        self._assign("y", values)

    @property
    def rotations(self) -> np.ndarray:
        return self._rotations

    @rotations.setter
    def rotations(self, values: Iterable[float]) -> None:
        self._assign("rotations", values)

    @property
    def scales(self) -> np.ndarray:
        return self._scales

    @scales.setter
    def scales(self, values: Iterable[float]) -> None:
        self._assign("scales", values)

    @property
    def target_image(self) -> TargetImage:
        return self._target_image

    @property
    def tiles(self) -> tuple[Tile, ...]:
        return tuple(self._tiles)

    def copy(self) -> MosaicModel:
        """An independent copy of this model."""
        duplicate = MosaicModel()
        duplicate._size = self._size
        for name in _FIELDS:
            setattr(duplicate, "_" + name, getattr(self, "_" + name).copy())
        duplicate._target_image = self._target_image
        duplicate._tiles = list(self._tiles)
        return duplicate