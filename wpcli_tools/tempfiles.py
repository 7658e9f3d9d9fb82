"""Scratch storage for files staged between commands."""

from __future__ import annotations

import hashlib
import logging
import shutil
from pathlib import Path
from typing import Optional, Union

from .config import load_settings
from .exceptions import DirectoryError, FileError
from .utils import PathLike, coerce_path
from .validators.directory import DIRECTORY_MODE
from .validators.file import FileValidator

LOGGER = logging.getLogger("wpcli_tools.tempfiles")

DEFAULT_SEED = "wpcli_tools.tempfiles"


def scratch_dir_name(seed: str) -> str:
    """Stable directory name derived from ``seed``."""

    return hashlib.sha256(seed.encode("utf-8")).hexdigest()[:16]


class TempFileManager:
    """
    Owns one scratch directory and reads and writes files inside it.

    The directory is ``root / scratch_dir_name(seed)``. Processes that share
    ``root`` and ``seed`` share the directory, so a file staged by one command
    can be picked up by the next.

    Args:
        root: Parent directory; defaults to ``Settings.temp_root``
        seed: Value hashed into the directory name

    Raises:
        DirectoryError: ``not_writable`` if the directory cannot be created
    """

    def __init__(self, root: Optional[PathLike] = None, seed: str = DEFAULT_SEED) -> None:
        base = coerce_path(root) if root is not None else load_settings().temp_root
        self.temp_dir: Path = base / scratch_dir_name(seed)

        if not self.temp_dir.is_dir():
            try:
                self.temp_dir.mkdir(mode=DIRECTORY_MODE, parents=True, exist_ok=True)
            except OSError as exc:
                raise DirectoryError.not_writable(self.temp_dir) from exc
            LOGGER.debug("Created scratch directory %s", self.temp_dir)

    def get_path(self, filename: str) -> Path:
        return self.temp_dir / filename

    def get(self, filename: str) -> bytes:
        """Return the raw content of a staged file."""

        temp_file = self.get_path(filename)
        if not temp_file.is_file():
            raise FileError.not_found(temp_file)
        return temp_file.read_bytes()

    def get_text(self, filename: str, encoding: str = "utf-8") -> str:
        """Return the content of a staged file decoded as ``encoding``."""

        return self.get(filename).decode(encoding)

    def copy(self, filepath: PathLike) -> bool:
        """Copy ``filepath`` into the scratch directory under its own name."""

        source = coerce_path(filepath)
        if not source.is_file():
            raise FileError.not_found(source)
        FileValidator.validate(source).must_be_writable()

        temp_file = self.get_path(source.name)
        try:
            shutil.copyfile(source, temp_file)
        except OSError as exc:
            raise FileError.not_writable(temp_file) from exc
        LOGGER.debug("Copied %s to %s", source, temp_file)
        return True

    def put(self, filename: str, content: Union[str, bytes]) -> Path:
        """Write ``content`` to ``filename`` and return the written path.

        ``str`` content is encoded as UTF-8; ``bytes`` are written unchanged.
        """

        temp_file = self.get_path(filename)
        data = content.encode("utf-8") if isinstance(content, str) else content
        try:
            temp_file.write_bytes(data)
        except OSError as exc:
            raise FileError.not_writable(temp_file) from exc
        return temp_file

    def delete(self, filename: str) -> bool:
        temp_file = self.get_path(filename)
        if not temp_file.is_file():
            return False
        temp_file.unlink()
        return True

    def exists(self, filename: str) -> bool:
        return self.get_path(filename).is_file()


__all__ = ["DEFAULT_SEED", "TempFileManager", "scratch_dir_name"]
