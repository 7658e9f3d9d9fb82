"""
Type definitions and dataclasses for wpcli-tools.

This module defines the immutable value objects produced by the ratio and
dimension calculations.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class RatioImage:
    """
    Aspect ratio of an image, normally reduced by the greatest common divisor.

    Attributes:
        width: Ratio width term (16 for a 16:9 image)
        height: Ratio height term (9 for a 16:9 image)
    """

    width: int
    height: int

    @property
    def ratio(self) -> float:
        return self.width / self.height if self.height > 0 else 0.0

    @property
    def ratio_string(self) -> str:
        return f"{self.width}:{self.height}"

    @property
    def simplified_ratio(self) -> str:
        divisor = math.gcd(self.width, self.height) or 1
        return f"{self.width // divisor}:{self.height // divisor}"

    @property
    def is_landscape(self) -> bool:
        return self.width > self.height

    @property
    def is_portrait(self) -> bool:
        return self.height > self.width

    @property
    def is_square(self) -> bool:
        return self.width == self.height

    def to_dict(self) -> Dict[str, Any]:
        return {
            "width": self.width,
            "height": self.height,
            "ratio": self.ratio,
            "ratio_string": self.ratio_string,
        }

    def __str__(self) -> str:
        return self.ratio_string


@dataclass(frozen=True)
class DimensionsImage:
    """
    A concrete pixel size and the ratio it was derived from.

    Attributes:
        width: Width in pixels
        height: Height in pixels
        original_ratio: Ratio of the source image
    """

    width: int
    height: int
    original_ratio: RatioImage

    @property
    def aspect_ratio(self) -> float:
        return self.width / self.height if self.height > 0 else 0.0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "width": self.width,
            "height": self.height,
            "original_ratio": self.original_ratio.to_dict(),
        }

    def __str__(self) -> str:
        return f"{self.width}x{self.height} (Ratio: {self.original_ratio.simplified_ratio})"


@dataclass(frozen=True)
class ImageProvider:
    """Pairs a ratio with the dimensions computed from it."""

    ratio: RatioImage
    dimensions: DimensionsImage

    def to_dict(self) -> Dict[str, Any]:
        return {"ratio": self.ratio.to_dict(), "dimensions": self.dimensions.to_dict()}


__all__ = ["RatioImage", "DimensionsImage", "ImageProvider"]
