"""Lennard-Jones potential and the pair potential interface."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class LennardJones:
    """Lennard-Jones 12-6 potential with well depth ``epsilon`` and zero at ``sigma``."""

    epsilon: float
    sigma: float

    def evaluate_at(self, r: float) -> float:
        """Potential at distance ``r``, regularised near the origin."""
        rmin = 1.0e-3 * self.sigma
        sigma_over_r = self.sigma / math.sqrt(r * r + rmin * rmin)
        xi = sigma_over_r ** 6
        return 4.0 * self.epsilon * (xi * xi - xi)


class Potential(ABC):
    """Interaction potential between two positions in world coordinates."""

    @abstractmethod
    def __call__(self, x1: Sequence[float], x2: Sequence[float]) -> float:
        """Relative interaction potential between ``x1`` and ``x2``."""

    @abstractmethod
    def range(self) -> float:
        """Distance beyond which interactions are neglected; negative means infinite."""


class LennardJonesPotential(Potential):
    """A pair potential given by a Lennard-Jones function of the distance."""

    def __init__(self, lennard_jones: LennardJones) -> None:
        self.lennard_jones = lennard_jones

    def __call__(self, x1: Sequence[float], x2: Sequence[float]) -> float:
        r = math.hypot(x1[0] - x2[0], x1[1] - x2[1])
        return self.lennard_jones.evaluate_at(r)

    def range(self) -> float:
        return 3.0 * self.lennard_jones.sigma