"""Aspect-ratio arithmetic and resize policies.

All functions here are pure: they take a :class:`~wpcli_tools.types.RatioImage`
and integer targets and return a new :class:`~wpcli_tools.types.DimensionsImage`.
Intermediate values are floats, rounded half away from zero at the end.
"""

from __future__ import annotations

import logging
import math

from .exceptions import ImageError
from .types import DimensionsImage, RatioImage

LOGGER = logging.getLogger("wpcli_tools.ratio")


def round_half_away(value: float) -> int:
    """Round ``value`` to the nearest integer, ties away from zero.

    The built-in :func:`round` rounds ties to even, which would turn
    ``2.5`` into ``2``.
    """

    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def compute_ratio(width: int, height: int) -> RatioImage:
    """Return the aspect ratio of ``width`` x ``height`` reduced by their GCD.

    ``(0, 0)`` has a GCD of zero; it is treated as one so the degenerate ratio
    ``0:0`` comes back instead of a division error.

    Raises:
        ImageError: If either value is negative, or only one of them is zero.
    """

    if width < 0 or height < 0 or (width == 0) != (height == 0):
        raise ImageError.invalid_dimensions(width, height)

    divisor = math.gcd(width, height) or 1
    ratio = RatioImage(width // divisor, height // divisor)
    LOGGER.debug("Computed ratio %s for %sx%s", ratio, width, height)
    return ratio


def _require_ratio(ratio: RatioImage) -> float:
    value = ratio.ratio
    if value <= 0 or not math.isfinite(value):
        raise ImageError.invalid_ratio(value)
    return value


def _require_positive(width: int, height: int) -> None:
    if width <= 0 or height <= 0:
        raise ImageError.invalid_dimensions(width, height)


def to_width(ratio: RatioImage, width: int) -> DimensionsImage:
    """Resize to a fixed ``width``; the height follows the ratio."""

    value = _require_ratio(ratio)
    _require_positive(width, 1)
    return DimensionsImage(width, round_half_away(width / value), ratio)


def to_height(ratio: RatioImage, height: int) -> DimensionsImage:
    """Resize to a fixed ``height``; the width follows the ratio."""

    value = _require_ratio(ratio)
    _require_positive(1, height)
    return DimensionsImage(round_half_away(height * value), height, ratio)


def fit_within(ratio: RatioImage, max_width: int, max_height: int) -> DimensionsImage:
    """Largest size with ``ratio`` that fits inside ``max_width`` x ``max_height``.

    One side may end up shorter than its bound (letterbox).
    """

    _require_ratio(ratio)
    _require_positive(max_width, max_height)

    scale = min(max_width / ratio.width, max_height / ratio.height)
    width = min(round_half_away(ratio.width * scale), max_width)
    height = min(round_half_away(ratio.height * scale), max_height)
    return DimensionsImage(width, height, ratio)


def fill_area(ratio: RatioImage, width: int, height: int) -> DimensionsImage:
    """Smallest size with ``ratio`` that covers ``width`` x ``height``.

    One side may overflow its target and needs cropping afterwards (cover).
    """

    image_ratio = _require_ratio(ratio)
    _require_positive(width, height)

    if image_ratio >= width / height:
        new_width = max(round_half_away(height * image_ratio), width)
        new_height = height
    else:
        new_width = width
        new_height = max(round_half_away(width / image_ratio), height)
    return DimensionsImage(new_width, new_height, ratio)


__all__ = [
    "compute_ratio",
    "fill_area",
    "fit_within",
    "round_half_away",
    "to_height",
    "to_width",
]
