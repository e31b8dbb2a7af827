"""Measures of how badly a mosaic fits its target image."""

from __future__ import annotations

from abc import ABC, abstractmethod

from momosaic.images import TargetImage
from momosaic.model import MosaicModel


class Badness(ABC):
    """A cost function on mosaics; lower values mean a better mosaic."""

    @abstractmethod
    def compute_badness(self, model: MosaicModel, target_image: TargetImage) -> float:
        """Badness of ``model`` as an approximation of ``target_image``."""


class CompositeBadness(Badness):
    """The sum of any number of other badness measures."""

    def __init__(self) -> None:
        self._parts: list[Badness] = []

    def add(self, badness: Badness) -> None:
        """Add ``badness`` as a term of the sum."""
        self._parts.append(badness)

    def compute_badness(self, model: MosaicModel, target_image: TargetImage) -> float:
        return sum(
            (part.compute_badness(model, target_image) for part in self._parts), 0.0
        )