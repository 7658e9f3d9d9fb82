"""Ordered fallback across image-size backends."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Sequence

from ..config import load_settings
from ..exceptions import ImageError
from ..utils import PathLike, coerce_path
from .base import ImageBackend, Size
from .exif_backend import ExifBackend
from .header_backend import HeaderBackend
from .pillow_backend import PillowBackend

LOGGER = logging.getLogger("wpcli_tools.backends")

BACKEND_TYPES = {
    "pillow": PillowBackend,
    "header": HeaderBackend,
    "exif": ExifBackend,
}


def build_backends(names: Iterable[str]) -> List[ImageBackend]:
    """Instantiate backends by name, preserving order."""

    backends: List[ImageBackend] = []
    for name in names:
        try:
            backend_type = BACKEND_TYPES[name]
        except KeyError as exc:
            raise ValueError(f"Unknown image backend: {name!r}") from exc
        backends.append(backend_type())
    return backends


def default_backends() -> List[ImageBackend]:
    """Backends in the order configured through ``WPCLI_TOOLS_IMAGE_BACKENDS``."""

    return build_backends(load_settings().image_backends)


def read_image_size(
    path: PathLike,
    backends: Optional[Sequence[ImageBackend]] = None,
    *,
    require_positive: bool = True,
) -> Size:
    """Return ``(width, height)`` from the first backend that succeeds.

    Backends are tried in order; a backend that is unavailable, raises, or
    (with ``require_positive``) reports a non-positive size is skipped and the
    next one is tried.

    Raises:
        ImageError: ``processing_failed`` when every backend has failed.
    """

    image_path: Path = coerce_path(path)
    chain = list(backends) if backends is not None else default_backends()
    failures: Dict[str, str] = {}

    for backend in chain:
        if not backend.available():
            LOGGER.debug("Skipping unavailable image backend %s", backend.name)
            failures[backend.name] = "unavailable"
            continue
        try:
            width, height = backend.probe(image_path)
        except Exception as exc:  # noqa: BLE001 - every backend failure falls through
            LOGGER.debug("Backend %s failed for %s: %s", backend.name, image_path, exc)
            failures[backend.name] = str(exc) or type(exc).__name__
            continue
        if not require_positive or (width > 0 and height > 0):
            LOGGER.debug("Backend %s read %sx%s from %s", backend.name, width, height, image_path)
            return width, height
        failures[backend.name] = f"non-positive size {width}x{height}"

    LOGGER.info("No image backend could read dimensions of %s", image_path)
    raise ImageError.processing_failed(
        f"Could not determine dimensions of {image_path.name}",
        path=str(image_path),
        backends=failures,
    )


__all__ = ["BACKEND_TYPES", "build_backends", "default_backends", "read_image_size"]
