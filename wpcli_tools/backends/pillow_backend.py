"""Pillow implementation of :class:`~wpcli_tools.backends.base.ImageBackend`."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from .base import BackendError, Size

try:  # pragma: no cover - optional dependency
    from PIL import Image, UnidentifiedImageError
except Exception:  # pragma: no cover - optional dependency
    Image = None  # type: ignore[assignment]
    UnidentifiedImageError = OSError  # type: ignore[assignment,misc]


def pillow_available() -> bool:
    return Image is not None


def identify(path: Path) -> Optional[tuple[str, str]]:
    """Return ``(format, mime)`` as reported by Pillow, or ``None``."""

    if Image is None:
        return None
    try:
        with Image.open(path) as image:
            image_format = image.format or ""
            mime = image.get_format_mimetype() or Image.MIME.get(image_format, "")
    except (UnidentifiedImageError, OSError, ValueError):
        return None
    return image_format, mime


class PillowBackend:
    """Reads dimensions by opening the image with Pillow."""

    name = "pillow"

    def available(self) -> bool:
        return pillow_available()

    def probe(self, path: Path) -> Size:
        if Image is None:
            raise BackendError("Pillow is not installed")
        try:
            with Image.open(path) as image:
                width, height = image.size
        except UnidentifiedImageError as exc:
            raise BackendError(f"Pillow cannot identify {path.name}") from exc
        return int(width), int(height)
