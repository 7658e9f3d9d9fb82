from __future__ import annotations

import stat
from pathlib import Path

import pytest

from wpcli_tools.exceptions import DirectoryError
from wpcli_tools.validators import DirectoryValidator


def test_existing_directory_passes(tmp_path: Path) -> None:
    validator = DirectoryValidator.validate(tmp_path)
    assert validator.must_exist().must_be_readable().must_be_writable() is validator


def test_missing_directory(tmp_path: Path) -> None:
    with pytest.raises(DirectoryError) as excinfo:
        DirectoryValidator.validate(tmp_path / "uploads").must_exist()
    assert excinfo.value.code == DirectoryError.NOT_FOUND
    assert excinfo.value.context["path"] == str(tmp_path / "uploads")
    assert excinfo.value.solutions


def test_repeated_checks_give_the_same_outcome(tmp_path: Path) -> None:
    validator = DirectoryValidator.validate(tmp_path / "uploads")
    with pytest.raises(DirectoryError) as first:
        validator.must_exist()
    with pytest.raises(DirectoryError) as second:
        validator.must_exist()
    assert first.value.code == second.value.code
    assert first.value.context == second.value.context

    present = DirectoryValidator.validate(tmp_path)
    assert present.must_exist().must_exist() is present


def test_file_is_not_a_directory(text_file: Path) -> None:
    with pytest.raises(DirectoryError):
        DirectoryValidator.validate(text_file).must_exist()


def test_unwritable_directory(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr("wpcli_tools.validators.directory.os.access", lambda path, mode: False)
    with pytest.raises(DirectoryError) as excinfo:
        DirectoryValidator.validate(tmp_path).must_be_writable()
    assert excinfo.value.code == DirectoryError.NOT_WRITABLE


def test_emptiness(tmp_path: Path) -> None:
    validator = DirectoryValidator.validate(tmp_path)
    assert validator.is_not_empty() is False
    validator.must_be_empty()

    (tmp_path / ".hidden").write_text("x", encoding="utf-8")
    assert validator.is_not_empty() is True
    with pytest.raises(DirectoryError) as excinfo:
        validator.must_be_empty()
    assert excinfo.value.code == DirectoryError.NOT_EMPTY


def test_ensure_exists_creates_parents(tmp_path: Path) -> None:
    target = tmp_path / "wp-content" / "uploads" / "2024"
    DirectoryValidator.validate(target).ensure_exists().must_exist()
    assert target.is_dir()
    assert stat.S_IMODE(target.stat().st_mode) & 0o700 == 0o700


def test_ensure_exists_is_idempotent(tmp_path: Path) -> None:
    DirectoryValidator.validate(tmp_path).ensure_exists()
    assert tmp_path.is_dir()


def test_ensure_exists_fails_below_a_file(text_file: Path) -> None:
    with pytest.raises(DirectoryError) as excinfo:
        DirectoryValidator.validate(text_file / "child").ensure_exists()
    assert excinfo.value.code == DirectoryError.CANNOT_CREATE


def test_ensure_deletable(tmp_path: Path) -> None:
    target = tmp_path / "cache"
    target.mkdir()
    DirectoryValidator.validate(target).ensure_deletable()

    (target / "entry.tmp").write_text("x", encoding="utf-8")
    with pytest.raises(DirectoryError) as excinfo:
        DirectoryValidator.validate(target).ensure_deletable()
    assert excinfo.value.code == DirectoryError.NOT_EMPTY

    DirectoryValidator.validate(target).ensure_deletable(recursive=True)


def test_scan_failure(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    def _refuse(path):
        raise PermissionError(13, "Permission denied", path)

    monkeypatch.setattr("wpcli_tools.validators.directory.os.scandir", _refuse)
    with pytest.raises(DirectoryError) as excinfo:
        DirectoryValidator.validate(tmp_path).is_not_empty()
    assert excinfo.value.code == DirectoryError.CANNOT_SCAN
    assert isinstance(excinfo.value.__cause__, PermissionError)
