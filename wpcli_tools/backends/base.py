"""Backend protocol for reading image dimensions."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol, Tuple

Size = Tuple[int, int]


class ImageBackend(Protocol):
    """Protocol implemented by every image-size backend.

    ``probe`` raises on any failure; the fallback chain decides what to do
    with it.
    """

    name: str

    def available(self) -> bool:
        """Return ``True`` if the libraries this backend needs can be used."""

    def probe(self, path: Path) -> Size:
        """Return ``(width, height)`` in pixels for the image at ``path``."""


class BackendError(RuntimeError):
    """Raised by a backend that cannot determine the size of a file."""
