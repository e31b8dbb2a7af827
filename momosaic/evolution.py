"""Stepwise evolution of a mosaic model and a background thread driving it."""

from __future__ import annotations

import logging
import threading
import time
from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable

from momosaic.badness import Badness
from momosaic.images import TargetImage, Tile
from momosaic.model import MosaicModel

logger = logging.getLogger(__name__)


class MosaicUpdate(ABC):
    """One stage of an evolution step, changing the model in place."""

    @abstractmethod
    def update(self, model: MosaicModel) -> None:
        """Apply this update to ``model``."""


class DelayUpdate(MosaicUpdate):
    """Sleeps for a fixed time, leaving the model unchanged."""

    def __init__(self, delay_ms: float = 100) -> None:
        if delay_ms < 0:
            raise ValueError("delay must not be negative")
        self.delay_ms = delay_ms

    def update(self, model: MosaicModel) -> None:
        time.sleep(self.delay_ms / 1000.0)


class OptimizeUpdate(MosaicUpdate):
    """Evaluates a badness measure on the model and records the result."""

    def __init__(self, badness: Badness | None = None) -> None:
        self.badness = badness
        self.last_badness: float | None = None

    def update(self, model: MosaicModel) -> None:
        if self.badness is None:
            raise ValueError("no badness has been set")
        value = self.badness.compute_badness(model, model.target_image)
        self.last_badness = value
        logger.debug("badness == %s", value)


class MosaicEvolution:
    """A model together with the updates applied to it at every step."""

    def __init__(self) -> None:
        self._model = MosaicModel()
        self._updates: list[MosaicUpdate] = []

    def construct_initial_state(
        self, target_image: TargetImage, tiles: Iterable[Tile]
    ) -> None:
        self._model.construct_initial_state(target_image, tiles)

    def take_step(self) -> None:
        """Apply every update, in the order they were added."""
        for update in self._updates:
            update.update(self._model)

    def add_update(self, update: MosaicUpdate) -> None:
        self._updates.append(update)

    @property
    def current_model(self) -> MosaicModel:
        return self._model


class EvolutionRunner:
    """Steps an evolution until stopped, reporting copies of the model.

    Every ``notification_period`` steps, before stepping, a copy of the
    current model is passed to ``on_model_changed``.
    """

    def __init__(
        self,
        evolution: MosaicEvolution,
        on_model_changed: Callable[[MosaicModel], None] | None = None,
        notification_period: int = 10,
    ) -> None:
        if notification_period <= 0:
            raise ValueError("notification period must be positive")
        self.evolution = evolution
        self.on_model_changed = on_model_changed
        self.notification_period = notification_period
        self._stopped = threading.Event()
        self._thread: threading.Thread | None = None

    def run(self) -> None:
        """Step the evolution in the calling thread until :meth:`stop` is called."""
        step = 0
        while not self._stopped.is_set():
            if step % self.notification_period == 0 and self.on_model_changed:
                self.on_model_changed(self.evolution.current_model.copy())
            self.evolution.take_step()
            step += 1

    def start(self) -> None:
        """Run the evolution in a background thread."""
        if self._thread is not None and self._thread.is_alive():
            raise RuntimeError("evolution runner is already running")
        self._stopped.clear()
        self._thread = threading.Thread(target=self.run, daemon=True)
        self._thread.start()

    def stop(self) -> None:
        """Ask the loop to finish after the current step."""
        self._stopped.set()

    def join(self, timeout: float | None = None) -> bool:
        """Wait for the background thread; return whether it has finished."""
        if self._thread is None:
            return True
        self._thread.join(timeout)
        return not self._thread.is_alive()