"""Pairwise interactions between tiles and between tiles and the image border."""

from __future__ import annotations

import math
from collections.abc import Sequence

from momosaic.badness import Badness
from momosaic.images import TargetImage
from momosaic.lennardjones import Potential
from momosaic.model import MosaicModel
from momosaic.quadrature import gauss_legendre

_ORDER = 4
_NODES, _WEIGHTS = gauss_legendre(_ORDER)
_LOCAL_POINTS = tuple((0.5 * nx, 0.5 * ny) for nx in _NODES for ny in _NODES)
_POINT_WEIGHTS = tuple(wx * wy for wx in _WEIGHTS for wy in _WEIGHTS)
# Gauss weights integrate over [-1, 1]; divide by 2^4 to normalise over both tiles.
_NORMALISATION = 16.0
_MINIMUM_BORDER_TILES = 4


def transform_to_world_coordinates(
    x: float,
    y: float,
    w: float,
    h: float,
    alpha: float,
    scale: float,
    r: Sequence[float],
) -> tuple[float, float]:
    """Map tile-local point ``r`` (in units of the tile size) to world coordinates."""
    c = math.cos(alpha)
    s = math.sin(alpha)
    rx = r[0] * w
    ry = r[1] * h
    return (scale * (c * rx - s * ry) + x, scale * (s * rx + c * ry) + y)


def _quadrature_points(x, y, w, h, alpha, scale):
    return [
        transform_to_world_coordinates(x, y, w, h, alpha, scale, point)
        for point in _LOCAL_POINTS
    ]


def compute_badness_pair(
    x0: float,
    y0: float,
    w0: float,
    h0: float,
    alpha0: float,
    scale0: float,
    x1: float,
    y1: float,
    w1: float,
    h1: float,
    alpha1: float,
    scale1: float,
    potential: Potential,
) -> float:
    """Integrate ``potential`` over both tiles, normalised to the tile areas.

    Tiles whose bounding circles are further apart than the potential's
    range contribute nothing.
    """
    reach = potential.range()
    if reach > 0:
        centre_distance = math.hypot(x0 - x1, y0 - y1)
        gap = centre_distance - math.hypot(w0, h0) - math.hypot(w1, h1)
        if gap > reach:
            return 0.0

    points0 = _quadrature_points(x0, y0, w0, h0, alpha0, scale0)
    points1 = _quadrature_points(x1, y1, w1, h1, alpha1, scale1)
    total = 0.0
    for weight0, p0 in zip(_POINT_WEIGHTS, points0):
        for weight1, p1 in zip(_POINT_WEIGHTS, points1):
            total += weight0 * weight1 * potential(p0, p1)
    return total / _NORMALISATION


def _placements(model: MosaicModel) -> list[tuple[float, ...]]:
    return [
        tuple(float(v) for v in values)
        for values in zip(
            model.x, model.y, model.widths, model.heights, model.rotations, model.scales
        )
    ]


def _require(potential: Potential | None) -> Potential:
    if potential is None:
        raise ValueError("no potential has been set")
    return potential


class TileTileInteraction(Badness):
    """Badness from the interaction of every pair of tiles."""

    def __init__(self, potential: Potential | None) -> None:
        self.potential = potential

    def compute_badness(self, model: MosaicModel, target_image: TargetImage) -> float:
        potential = _require(self.potential)
        tiles = _placements(model)
        badness = 0.0
        for i, first in enumerate(tiles):
            for second in tiles[:i]:
                badness += compute_badness_pair(*first, *second, potential)
        return badness

    def reset_potential(self, potential: Potential | None) -> None:
        self.potential = potential


class TileBorderInteraction(Badness):
    """Badness from tiles interacting with a ring of fixed tiles around the target."""

    def __init__(self, potential: Potential | None) -> None:
        self.potential = potential

    def compute_badness(self, model: MosaicModel, target_image: TargetImage) -> float:
        potential = _require(self.potential)
        linear = max(
            _MINIMUM_BORDER_TILES, math.floor(math.sqrt(len(model)) + 0.5)
        )
        width, height = target_image.size
        cell_width = width / linear
        cell_height = height / linear

        cells = (
            [(i, -1) for i in range(linear)]
            + [(linear, j) for j in range(linear)]
            + [(i, linear) for i in range(linear)]
            + [(-1, j) for j in range(linear)]
        )
        tiles = _placements(model)
        badness = 0.0
        for i, j in cells:
            # World coordinates have their origin at the centre of the target.
            cx = (i + 0.5) * cell_width - 0.5 * width
            cy = (j + 0.5) * cell_height - 0.5 * height
            for tile in tiles:
                badness += compute_badness_pair(
                    cx, cy, cell_width, cell_height, 0.0, 1.0, *tile, potential
                )
        return badness

    def reset_potential(self, potential: Potential | None) -> None:
        self.potential = potential