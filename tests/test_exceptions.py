from __future__ import annotations

import re
from pathlib import Path

import pytest

from wpcli_tools.exceptions import (
    COMMON_SCHEMES,
    DirectoryError,
    ExtensionError,
    FileError,
    ImageError,
    UriError,
    WpCliToolsError,
)


def test_base_error_defaults() -> None:
    error = WpCliToolsError()
    assert isinstance(error, RuntimeError)
    assert error.code == 0
    assert error.message == "An unknown wpcli-tools error occurred."
    assert error.context == {}
    assert error.solutions == []


def test_with_context_merges_and_overwrites() -> None:
    error = WpCliToolsError("boom", 1, context={"a": 1, "b": 2})
    returned = error.with_context({"b": 3, "c": 4})
    assert returned is error
    assert error.context == {"a": 1, "b": 3, "c": 4}


def test_with_solutions_appends() -> None:
    error = WpCliToolsError("boom", solutions=["first"])
    error.with_solutions(["second", "third"])
    assert error.solutions == ["first", "second", "third"]


def test_to_dict_shape() -> None:
    error = FileError.not_found("/srv/uploads/photo.jpg")
    payload = error.to_dict()
    assert set(payload) == {"code", "message", "context", "solutions"}
    assert payload["code"] == 4001
    assert payload["context"] == {
        "path": "/srv/uploads/photo.jpg",
        "basename": "photo.jpg",
        "dirname": "/srv/uploads",
    }


@pytest.mark.parametrize(
    "error, code",
    [
        (FileError.not_found("a.txt"), 4001),
        (FileError.not_readable("a.txt"), 4002),
        (FileError.not_writable("a.txt"), 4003),
        (FileError.invalid_extension("a.txt", "json"), 4004),
        (FileError.invalid_json("a.json"), 4005),
        (FileError.invalid_xml("a.xml"), 4006),
        (FileError.invalid_csv("a.csv"), 4007),
        (FileError.file_too_large("a.txt", 10, 20), 4008),
        (FileError.empty_file("a.txt"), 4009),
        (FileError.invalid_mime_type("a.png", "image"), 4010),
        (FileError.not_a_file("a"), 4011),
        (DirectoryError.not_found("d"), 5001),
        (DirectoryError.not_readable("d"), 5002),
        (DirectoryError.not_writable("d"), 5003),
        (DirectoryError.cannot_create("d"), 5004),
        (DirectoryError.cannot_delete("d"), 5005),
        (DirectoryError.cannot_scan("d"), 5006),
        (DirectoryError.not_empty("d"), 5007),
        (ImageError.invalid_dimensions(0, 0), 2001),
        (ImageError.unsupported_format("tiff"), 2002),
        (ImageError.processing_failed("bad"), 2003),
        (ImageError.library_not_available("PIL"), 2004),
        (ImageError.invalid_ratio(0.0), 2005),
        (ImageError.scale_out_of_bounds(600.0), 2006),
        (UriError.invalid("x"), 4001),
        (UriError.invalid_scheme("x", "ftp"), 4002),
        (UriError.unsupported_scheme("x", "gopher"), 4007),
        (UriError.malformed("x", "host"), 4008),
        (UriError.not_found("x"), 4009),
        (ExtensionError.not_available("imagick"), 0),
    ],
)
def test_codes_and_solutions(error: WpCliToolsError, code: int) -> None:
    assert error.code == code
    assert error.message
    assert error.solutions


def test_path_errors_mention_basename() -> None:
    error = DirectoryError.not_empty("/var/www/cache")
    assert "cache" in error.message
    assert "/var/www/cache" in error.message
    assert error.context["basename"] == "cache"


def test_permission_errors_report_octal_mode(tmp_path: Path) -> None:
    target = tmp_path / "config.php"
    target.write_text("<?php", encoding="utf-8")
    target.chmod(0o640)

    assert FileError.not_writable(target).context["permissions"] == "0640"
    assert FileError.not_readable(tmp_path / "missing.php").context["permissions"] == "N/A"
    assert re.fullmatch(r"\d{4}", DirectoryError.not_writable(tmp_path).context["permissions"])


def test_extension_and_mime_errors_carry_expected() -> None:
    assert FileError.invalid_extension("data.txt", "json").context["expected"] == "json"
    error = FileError.invalid_mime_type("fake.png", "image", "application/octet-stream")
    assert error.context["expected"] == "image"
    assert error.context["mime_type"] == "application/octet-stream"


def test_parse_errors_carry_error_detail() -> None:
    error = FileError.invalid_json("data.json", "Expecting value: line 1 column 1")
    assert error.context["error"] == "Expecting value: line 1 column 1"
    assert "Expecting value" in error.message
    assert "error" not in FileError.invalid_xml("feed.xml").context


def test_file_too_large_reports_human_sizes() -> None:
    error = FileError.file_too_large("backup.zip", 1024, 1536)
    assert error.context["size_bytes"] == 1536
    assert error.context["max_bytes"] == 1024
    assert error.context["size_human"] == "1.5 KB"
    assert error.context["max_human"] == "1 KB"
    assert "1.5 KB" in error.message


def test_scale_out_of_bounds_keeps_percentages() -> None:
    error = ImageError.scale_out_of_bounds(600.0)
    assert error.message == "Scale percentage (600.0%) must be between 0.1% and 500.0%"
    assert error.context == {"percentage": 600.0, "min_allowed": 0.1, "max_allowed": 500.0}


def test_processing_failed_collects_context() -> None:
    error = ImageError.processing_failed("decoder crashed", path="/tmp/a.png")
    assert error.message == "Image processing failed: decoder crashed"
    assert error.context == {"reason": "decoder crashed", "path": "/tmp/a.png"}
    assert ImageError.processing_failed().context == {}


def test_uri_errors_context() -> None:
    error = UriError.invalid_scheme("http://example.com", "http", ["https"])
    assert error.context["allowed_schemes"] == ["https"]
    assert error.context["common_schemes"] == list(COMMON_SCHEMES)

    not_found = UriError.not_found("https://example.com/missing", 404)
    assert "Status Code: 404" in not_found.message
    assert not_found.context["status_code"] == 404


def test_extension_error_names_package() -> None:
    error = ExtensionError.not_available("PIL", "Pillow")
    assert error.context == {"extension": "PIL", "package": "Pillow"}
    assert any("pip install Pillow" in solution for solution in error.solutions)
