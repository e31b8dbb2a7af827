"""The collection of pictures a mosaic is built from."""

from __future__ import annotations

import enum
import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from os import PathLike
from pathlib import Path

import numpy as np
from PIL import Image

logger = logging.getLogger(__name__)

_USER_ROLE = 0x0100


class Role(enum.IntEnum):
    """Kinds of data a row of :class:`SourceImages` provides."""

    FILE_NAME = _USER_ROLE + 1
    IMAGE = _USER_ROLE + 2


@dataclass(frozen=True, eq=False)
class Thumbnail:
    """A picture and the file it came from; ``image`` is None if unreadable."""

    image: np.ndarray | None
    path: Path

    @classmethod
    def load(cls, path: str | PathLike[str]) -> Thumbnail:
        """Read the picture at ``path`` as RGBA pixels."""
        path = Path(path)
        try:
            with Image.open(path) as picture:
                pixels: np.ndarray | None = np.array(picture.convert("RGBA"))
        except (OSError, ValueError):
            pixels = None
        return cls(pixels, path)


class SourceImages:
    """An ordered list of thumbnails, notifying listeners when it grows."""

    def __init__(self) -> None:
        self._thumbnails: list[Thumbnail] = []
        self._listeners: list[Callable[[], None]] = []

    def __len__(self) -> int:
        return len(self._thumbnails)

    def _thumbnail(self, index: int) -> Thumbnail:
        if not 0 <= index < len(self._thumbnails):
            raise IndexError(f"no source image at row {index}")
        return self._thumbnails[index]

    def data(self, index: int, role: Role | int) -> np.ndarray | Path | None:
        """The image or file path of row ``index``; None for an unknown role."""
        thumbnail = self._thumbnail(index)
        if role == Role.IMAGE:
            return thumbnail.image
        if role == Role.FILE_NAME:
            return thumbnail.path
        logger.debug("Unknown role %s", role)
        return None

    def image(self, image_id: str | int) -> np.ndarray | None:
        """The image of the row whose number is ``image_id``."""
        return self._thumbnail(int(image_id)).image

    def add_images(self, paths: Iterable[str | PathLike[str]]) -> None:
        """Load and append the pictures at ``paths``, then notify listeners."""
        new = [Thumbnail.load(path) for path in paths]
        if not new:
            return
        self._thumbnails.extend(new)
        for listener in list(self._listeners):
            listener()

    def role_names(self) -> dict[Role, str]:
        return {Role.FILE_NAME: "filename", Role.IMAGE: "thumbnail"}

    def connect(self, callback: Callable[[], None]) -> None:
        """Call ``callback`` whenever images are added."""
        self._listeners.append(callback)