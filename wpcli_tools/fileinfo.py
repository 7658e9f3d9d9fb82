"""Read-only information about a file path."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Union

from .utils import PathLike, format_file_size


class FileInfo:
    """Name, extension, location and size of ``path``.

    The path does not need to exist; a missing file has size ``0``.
    """

    def __init__(self, path: PathLike) -> None:
        self._raw = os.fspath(path)
        self._path = Path(self._raw)

    @property
    def extension(self) -> str:
        """Extension without the leading dot, or ``""``."""
        return self._path.suffix.lstrip(".")

    @property
    def name(self) -> str:
        """File name without its extension."""
        return self._path.stem

    @property
    def path(self) -> str:
        return self._raw

    @property
    def directory(self) -> str:
        return os.path.dirname(self._raw) or "."

    def size(self, formatted: bool = True) -> Union[int, str]:
        """Size in bytes, or a human readable string such as ``"1.5 KB"``."""

        try:
            size = self._path.stat().st_size if self._path.is_file() else 0
        except OSError:
            size = 0
        return format_file_size(size) if formatted else size

    def __repr__(self) -> str:
        return f"FileInfo({self._raw!r})"


__all__ = ["FileInfo"]
