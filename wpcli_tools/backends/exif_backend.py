"""EXIF-based dimension reader for JPEG files, backed by :mod:`piexif`."""

from __future__ import annotations

from pathlib import Path

from .base import BackendError, Size

try:  # pragma: no cover - optional dependency
    import piexif
except Exception:  # pragma: no cover - optional dependency
    piexif = None  # type: ignore[assignment]

JPEG_SUFFIXES = frozenset({".jpg", ".jpeg"})


class ExifBackend:
    """Reads ``PixelXDimension``/``PixelYDimension`` from the EXIF block of a JPEG."""

    name = "exif"

    def available(self) -> bool:
        return piexif is not None

    def probe(self, path: Path) -> Size:
        if piexif is None:
            raise BackendError("piexif is not installed")
        if path.suffix.lower() not in JPEG_SUFFIXES:
            raise BackendError(f"EXIF dimensions are only read from JPEG files, got {path.name}")

        try:
            exif = piexif.load(str(path))
        except (piexif.InvalidImageDataError, ValueError) as exc:
            raise BackendError(f"Unreadable EXIF data in {path.name}") from exc

        fields = exif.get("Exif") or {}
        width = fields.get(piexif.ExifIFD.PixelXDimension)
        height = fields.get(piexif.ExifIFD.PixelYDimension)
        if not width or not height:
            raise BackendError(f"No EXIF pixel dimensions in {path.name}")
        return int(width), int(height)
