"""
Image size calculation for a single image file.

:class:`ImageSizeCalculator` reads the pixel size of an image once, through
the configured backend chain, and answers resize questions from the cached
ratio. :class:`ImageSizeBuilder` offers the same policies but returns an
:class:`~wpcli_tools.types.ImageProvider` that pairs each result with the
source ratio.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Sequence

from . import ratio as ratio_math
from .backends import ImageBackend, Size, read_image_size
from .types import DimensionsImage, ImageProvider, RatioImage
from .utils import PathLike, coerce_path
from .validators.file import FileValidator

LOGGER = logging.getLogger("wpcli_tools.calculator")


class ImageSizeCalculator:
    """Resize arithmetic bound to one image file.

    Args:
        path: Image file to measure
        backends: Backend chain to read the size with; defaults to
            :func:`wpcli_tools.backends.default_backends`

    Raises:
        FileError: If the file is missing, unreadable or not an image
    """

    def __init__(self, path: PathLike, backends: Optional[Sequence[ImageBackend]] = None) -> None:
        FileValidator.validate(path).must_exist().must_be_readable().must_be_mime_type()
        self.path: Path = coerce_path(path)
        self._backends = backends
        self._size: Optional[Size] = None
        self._ratio: Optional[RatioImage] = None

    def _read_size(self) -> Size:
        if self._size is None:
            self._size = read_image_size(self.path, self._backends)
        return self._size

    def resolve_ratio(self) -> RatioImage:
        """Reduce the image size to a ratio without touching the cached :attr:`ratio`."""

        width, height = self._read_size()
        return ratio_math.compute_ratio(width, height)

    @property
    def ratio(self) -> RatioImage:
        if self._ratio is None:
            self._ratio = self.resolve_ratio()
            LOGGER.debug("Resolved ratio %s for %s", self._ratio, self.path)
        return self._ratio

    @property
    def dimensions(self) -> DimensionsImage:
        """Original pixel size of the image."""

        width, height = self._read_size()
        return DimensionsImage(width, height, self.ratio)

    def to_width(self, width: int) -> DimensionsImage:
        return ratio_math.to_width(self.ratio, width)

    def to_height(self, height: int) -> DimensionsImage:
        return ratio_math.to_height(self.ratio, height)

    def fit_within(self, max_width: int, max_height: int) -> DimensionsImage:
        return ratio_math.fit_within(self.ratio, max_width, max_height)

    def fill_area(self, width: int, height: int) -> DimensionsImage:
        return ratio_math.fill_area(self.ratio, width, height)


class ImageSizeBuilder:
    """Resize policies that return the ratio together with the new size."""

    def __init__(self, path: PathLike, backends: Optional[Sequence[ImageBackend]] = None) -> None:
        self.calculator = ImageSizeCalculator(path, backends)

    def _provide(self, dimensions: DimensionsImage) -> ImageProvider:
        return ImageProvider(ratio=self.calculator.ratio, dimensions=dimensions)

    def from_width(self, width: int) -> ImageProvider:
        return self._provide(self.calculator.to_width(width))

    def from_height(self, height: int) -> ImageProvider:
        return self._provide(self.calculator.to_height(height))

    def fit_within(self, max_width: int, max_height: int) -> ImageProvider:
        return self._provide(self.calculator.fit_within(max_width, max_height))

    def fill_area(self, width: int, height: int) -> ImageProvider:
        return self._provide(self.calculator.fill_area(width, height))


__all__ = ["ImageSizeBuilder", "ImageSizeCalculator"]
