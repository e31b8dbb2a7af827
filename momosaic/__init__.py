"""Photo mosaic engine: images, tile layout model, interaction badness and evolution."""

__version__ = "0.0.1"