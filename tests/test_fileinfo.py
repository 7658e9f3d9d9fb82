from __future__ import annotations

from pathlib import Path

from wpcli_tools import FileInfo


def test_path_components() -> None:
    info = FileInfo("/var/www/backups/site.tar.gz")
    assert info.extension == "gz"
    assert info.name == "site.tar"
    assert info.path == "/var/www/backups/site.tar.gz"
    assert info.directory == "/var/www/backups"


def test_bare_filename() -> None:
    info = FileInfo("README")
    assert info.extension == ""
    assert info.name == "README"
    assert info.directory == "."


def test_size(tmp_path: Path) -> None:
    path = tmp_path / "upload.bin"
    path.write_bytes(b"\0" * 1536)
    info = FileInfo(path)
    assert info.size() == "1.5 KB"
    assert info.size(formatted=False) == 1536


def test_missing_file_has_zero_size(tmp_path: Path) -> None:
    info = FileInfo(tmp_path / "gone.zip")
    assert info.size() == "0 B"
    assert info.size(formatted=False) == 0


def test_directory_has_zero_size(tmp_path: Path) -> None:
    assert FileInfo(tmp_path).size(formatted=False) == 0
