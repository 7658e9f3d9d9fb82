from __future__ import annotations

import dataclasses

import pytest

from wpcli_tools.types import DimensionsImage, ImageProvider, RatioImage


def test_ratio_properties() -> None:
    ratio = RatioImage(16, 9)
    assert ratio.ratio == pytest.approx(16 / 9)
    assert ratio.ratio_string == "16:9"
    assert str(ratio) == "16:9"
    assert ratio.is_landscape
    assert not ratio.is_portrait
    assert not ratio.is_square


def test_ratio_orientation() -> None:
    assert RatioImage(9, 16).is_portrait
    assert RatioImage(1, 1).is_square


def test_degenerate_ratio_has_zero_value() -> None:
    ratio = RatioImage(0, 0)
    assert ratio.ratio == 0.0
    assert ratio.simplified_ratio == "0:0"


def test_simplified_ratio_reduces_unreduced_terms() -> None:
    assert RatioImage(1920, 1080).simplified_ratio == "16:9"
    assert RatioImage(1920, 1080).ratio_string == "1920:1080"


def test_ratio_is_frozen() -> None:
    ratio = RatioImage(4, 3)
    with pytest.raises(dataclasses.FrozenInstanceError):
        ratio.width = 5  # type: ignore[misc]


def test_dimensions_render_with_ratio() -> None:
    dimensions = DimensionsImage(1920, 1080, RatioImage(16, 9))
    assert str(dimensions) == "1920x1080 (Ratio: 16:9)"
    assert dimensions.aspect_ratio == pytest.approx(16 / 9)
    assert DimensionsImage(10, 0, RatioImage(0, 0)).aspect_ratio == 0.0


def test_provider_to_dict() -> None:
    ratio = RatioImage(16, 9)
    provider = ImageProvider(ratio=ratio, dimensions=DimensionsImage(800, 450, ratio))
    payload = provider.to_dict()

    assert payload["ratio"]["ratio_string"] == "16:9"
    assert payload["dimensions"]["width"] == 800
    assert payload["dimensions"]["height"] == 450
    assert payload["dimensions"]["original_ratio"]["width"] == 16
