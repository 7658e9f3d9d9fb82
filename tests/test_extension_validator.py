from __future__ import annotations

import pytest

from wpcli_tools.exceptions import ExtensionError
from wpcli_tools.validators import ExtensionValidator, module_available


def test_installed_modules_pass() -> None:
    validator = ExtensionValidator.validate()
    assert validator.must_be_pillow().must_be_loaded("json") is validator


def test_missing_module() -> None:
    with pytest.raises(ExtensionError) as excinfo:
        ExtensionValidator.validate().must_be_loaded("wand_imagick_binding", "Wand")
    assert excinfo.value.code == ExtensionError.NOT_AVAILABLE
    assert excinfo.value.context == {"extension": "wand_imagick_binding", "package": "Wand"}
    assert "wand_imagick_binding" in excinfo.value.message


def test_pillow_check_reports_distribution_name(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr("wpcli_tools.validators.extension.importlib.util.find_spec", lambda name: None)
    with pytest.raises(ExtensionError) as excinfo:
        ExtensionValidator.validate().must_be_pillow()
    assert excinfo.value.context["package"] == "Pillow"


@pytest.mark.parametrize("module", ["wand_missing.image", ""])
def test_unresolvable_names_raise_typed_error(module: str) -> None:
    with pytest.raises(ExtensionError) as excinfo:
        ExtensionValidator.validate().must_be_loaded(module)
    assert excinfo.value.code == ExtensionError.NOT_AVAILABLE
    assert excinfo.value.context["extension"] == module


def test_module_available() -> None:
    assert module_available("PIL.Image")
    assert not module_available("wand_missing.image")
    assert not module_available("")
