"""Wires source images, target image and the evolution together."""

from __future__ import annotations

from collections.abc import Callable
from os import PathLike
from pathlib import Path

from momosaic.badness import CompositeBadness
from momosaic.evolution import (
    DelayUpdate,
    EvolutionRunner,
    MosaicEvolution,
    OptimizeUpdate,
)
from momosaic.images import TargetImage, Tile
from momosaic.model import MosaicModel
from momosaic.sourceimages import Role, SourceImages, Thumbnail

_SHUTDOWN_TIMEOUT = 0.1


class MainDriver:
    """Builds a mosaic evolution from the chosen pictures and runs it."""

    def __init__(self, source_images: SourceImages | None = None) -> None:
        self.source_images = source_images
        self._target_path: Path | None = None
        self._evolution = MosaicEvolution()
        self._runner: EvolutionRunner | None = None
        self._current_model: MosaicModel | None = None
        self._listeners: list[Callable[[MosaicModel], None]] = []

    @property
    def target_path(self) -> Path | None:
        """The file holding the picture the mosaic approximates."""
        return self._target_path

    @target_path.setter
    def target_path(self, path: str | PathLike[str] | None) -> None:
        self._target_path = None if path is None else Path(path)

    def _load_target(self) -> TargetImage:
        if self._target_path is None:
            return TargetImage(None, (0, 0))
        image = Thumbnail.load(self._target_path).image
        if image is None:
            return TargetImage(None, (0, 0))
        return TargetImage(image, (int(image.shape[1]), int(image.shape[0])))

    def start(self) -> None:
        """Set up the evolution from the current pictures and run it in the background."""
        self._shut_down_runner()
        target = self._load_target()
        tiles = [Tile(Thumbnail.load(name).image) for name in self.file_names()]
        self._evolution.construct_initial_state(target, tiles)
        self._evolution.add_update(DelayUpdate())
        self._evolution.add_update(OptimizeUpdate(CompositeBadness()))

        self._runner = EvolutionRunner(self._evolution, self.set_current_model)
        self._runner.start()

    def _shut_down_runner(self) -> None:
        if self._runner is not None:
            self._runner.stop()
            if not self._runner.join(_SHUTDOWN_TIMEOUT):
                self._runner.join()
            self._runner = None

    def stop(self) -> None:
        """Stop the running evolution, if any."""
        self._shut_down_runner()

    def file_names(self) -> list[str]:
        """Paths of the source pictures that exist on disk, in order."""
        if self.source_images is None:
            raise RuntimeError("no source images have been set")
        names = []
        for row in range(len(self.source_images)):
            path = Path(self.source_images.data(row, Role.FILE_NAME))
            if path.exists():
                names.append(str(path))
        return names

    @property
    def current_model(self) -> MosaicModel | None:
        """The most recent model reported by the evolution."""
        return self._current_model

    def set_current_model(self, model: MosaicModel) -> None:
        self._current_model = model
        for listener in list(self._listeners):
            listener(model)

    def connect(self, callback: Callable[[MosaicModel], None]) -> None:
        """Call ``callback`` with every new current model."""
        self._listeners.append(callback)

    def __enter__(self) -> MainDriver:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.stop()