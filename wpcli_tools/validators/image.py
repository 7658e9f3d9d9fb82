"""Chained precondition checks for image files."""

from __future__ import annotations

import logging
import math
import os
from pathlib import Path
from typing import Any, Dict, Optional, Sequence

from ..backends import ImageBackend, Size, read_image_size
from ..backends.pillow_backend import identify
from ..exceptions import SUPPORTED_IMAGE_FORMATS, ImageError
from ..utils import PathLike
from .extension import module_available

LOGGER = logging.getLogger("wpcli_tools.validators")

# Library name -> importable module.
LIBRARY_MODULES = {
    "pillow": "PIL",
    "pil": "PIL",
    "piexif": "piexif",
}

# Same numbering as PHP's IMAGETYPE_* constants so callers can keep their tables.
IMAGE_TYPE_CODES = {
    "GIF": 1,
    "JPEG": 2,
    "PNG": 3,
    "BMP": 6,
    "WEBP": 18,
}

DEFAULT_MIN_SCALE = 0.1
DEFAULT_MAX_SCALE = 500.0


def library_loaded(library: str) -> bool:
    return module_available(LIBRARY_MODULES.get(library.lower(), library))


class ImageValidator:
    """Fluent checks on an image file."""

    def __init__(
        self, image_path: PathLike, backends: Optional[Sequence[ImageBackend]] = None
    ) -> None:
        self.image_path = os.fspath(image_path)
        self._path = Path(self.image_path)
        self._backends = backends

    @classmethod
    def validate(
        cls, image_path: PathLike, backends: Optional[Sequence[ImageBackend]] = None
    ) -> "ImageValidator":
        return cls(image_path, backends)

    def _fail(self, error: ImageError) -> ImageError:
        LOGGER.debug("Image check failed for %s: %s", self.image_path, error.message)
        return error

    @property
    def extension(self) -> str:
        return self._path.suffix.lstrip(".").lower()

    def _read_size(self) -> Size:
        return read_image_size(self._path, self._backends, require_positive=False)

    def must_exist(self) -> "ImageValidator":
        if not self._path.exists():
            raise self._fail(
                ImageError.processing_failed(f"File not found: {self.image_path}", path=self.image_path)
            )
        return self

    def must_be_supported_format(self) -> "ImageValidator":
        self.must_exist()
        if self.extension not in SUPPORTED_IMAGE_FORMATS:
            raise self._fail(ImageError.unsupported_format(self.extension))
        return self

    def must_have_valid_dimensions(self) -> "ImageValidator":
        self.must_be_supported_format()
        width, height = self._read_size()
        if width <= 0 or height <= 0:
            raise self._fail(ImageError.invalid_dimensions(width, height))
        return self

    def must_have_valid_ratio(self) -> "ImageValidator":
        self.must_have_valid_dimensions()
        width, height = self._read_size()
        ratio = width / height if height else 0.0
        if ratio <= 0 or not math.isfinite(ratio):
            raise self._fail(ImageError.invalid_ratio(ratio))
        return self

    def must_be_processable_with(self, library: str = "pillow") -> "ImageValidator":
        self.must_be_supported_format()
        if not library_loaded(library):
            raise self._fail(ImageError.library_not_available(library))
        return self

    def must_have_valid_scale(
        self,
        percentage: float,
        minimum: float = DEFAULT_MIN_SCALE,
        maximum: float = DEFAULT_MAX_SCALE,
    ) -> "ImageValidator":
        """Require ``minimum <= percentage <= maximum``.

        All three values are percentages: ``150`` means 150 %, and the default
        bounds are 0.1 % and 500 %.
        """

        if percentage < minimum or percentage > maximum:
            raise self._fail(ImageError.scale_out_of_bounds(percentage, minimum, maximum))
        return self

    def get_info(self) -> Dict[str, Any]:
        """Return width, height, type code, mime, ratio, format and size of the image."""

        self.must_be_supported_format()
        width, height = self._read_size()
        identified = identify(self._path)
        image_format, mime = identified if identified else ("", "")

        info: Dict[str, Any] = {
            "width": width,
            "height": height,
            "type": IMAGE_TYPE_CODES.get(image_format.upper(), 0),
            "mime": mime or "application/octet-stream",
            "ratio": width / height if height > 0 else 0.0,
            "format": self.extension,
            "size": self._path.stat().st_size,
        }
        LOGGER.debug("Image info for %s: %s", self.image_path, info)
        return info


__all__ = [
    "DEFAULT_MAX_SCALE",
    "DEFAULT_MIN_SCALE",
    "IMAGE_TYPE_CODES",
    "ImageValidator",
    "library_loaded",
]
