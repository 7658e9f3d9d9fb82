from __future__ import annotations

from pathlib import Path
from typing import Callable, Optional
import sys

import piexif
import pytest
from PIL import Image

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from wpcli_tools.backends import Size  # noqa: E402


class StaticBackend:
    """Backend double that reports a fixed size and counts probes."""

    def __init__(
        self,
        size: Size = (0, 0),
        *,
        name: str = "static",
        available: bool = True,
        error: Optional[Exception] = None,
    ) -> None:
        self.name = name
        self.size = size
        self.error = error
        self._available = available
        self.calls = 0

    def available(self) -> bool:
        return self._available

    def probe(self, path: Path) -> Size:
        self.calls += 1
        if self.error is not None:
            raise self.error
        return self.size


@pytest.fixture()
def image_factory(tmp_path: Path) -> Callable[..., Path]:
    def _create(
        filename: str,
        size: tuple[int, int] = (64, 36),
        image_format: Optional[str] = None,
        **save_options,
    ) -> Path:
        path = tmp_path / filename
        image = Image.new("RGB", size, color=(200, 30, 30))
        image.save(path, format=image_format, **save_options)
        return path

    return _create


@pytest.fixture()
def landscape_png(image_factory: Callable[..., Path]) -> Path:
    return image_factory("landscape.png", (1920, 1080))


@pytest.fixture()
def portrait_jpeg(image_factory: Callable[..., Path]) -> Path:
    return image_factory("portrait.jpg", (1080, 1920))


@pytest.fixture()
def exif_jpeg(image_factory: Callable[..., Path]) -> Path:
    exif = piexif.dump(
        {
            "0th": {},
            "Exif": {
                piexif.ExifIFD.PixelXDimension: 640,
                piexif.ExifIFD.PixelYDimension: 480,
            },
            "GPS": {},
            "1st": {},
            "thumbnail": None,
        }
    )
    return image_factory("camera.jpg", (640, 480), exif=exif)


@pytest.fixture()
def text_file(tmp_path: Path) -> Path:
    path = tmp_path / "notes.txt"
    path.write_text("hello world\n", encoding="utf-8")
    return path


@pytest.fixture()
def static_backend() -> Callable[..., StaticBackend]:
    return StaticBackend
