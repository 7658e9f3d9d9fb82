"""Chained precondition checks for directories."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from ..exceptions import DirectoryError
from ..utils import PathLike

LOGGER = logging.getLogger("wpcli_tools.validators")

DIRECTORY_MODE = 0o755


class DirectoryValidator:
    """Fluent checks on a single directory path."""

    def __init__(self, dirpath: PathLike) -> None:
        self.dirpath = os.fspath(dirpath)
        self._path = Path(self.dirpath)

    @classmethod
    def validate(cls, dirpath: PathLike) -> "DirectoryValidator":
        return cls(dirpath)

    def _fail(self, error: DirectoryError) -> DirectoryError:
        LOGGER.debug("Directory check failed for %s: %s", self.dirpath, error.message)
        return error

    def must_exist(self) -> "DirectoryValidator":
        if not self._path.is_dir():
            raise self._fail(DirectoryError.not_found(self.dirpath))
        return self

    def must_be_readable(self) -> "DirectoryValidator":
        self.must_exist()
        if not os.access(self.dirpath, os.R_OK):
            raise self._fail(DirectoryError.not_readable(self.dirpath))
        return self

    def must_be_writable(self) -> "DirectoryValidator":
        self.must_exist()
        if not os.access(self.dirpath, os.W_OK):
            raise self._fail(DirectoryError.not_writable(self.dirpath))
        return self

    def must_be_empty(self) -> "DirectoryValidator":
        if self.is_not_empty():
            raise self._fail(DirectoryError.not_empty(self.dirpath))
        return self

    def ensure_exists(self) -> "DirectoryValidator":
        """Create the directory, and its parent, when missing."""

        if self._path.is_dir():
            return self

        parent = self._path.parent
        if not parent.is_dir():
            try:
                parent.mkdir(mode=DIRECTORY_MODE, parents=True, exist_ok=True)
            except OSError as exc:
                raise self._fail(DirectoryError.cannot_create(str(parent))) from exc

        try:
            self._path.mkdir(mode=DIRECTORY_MODE, exist_ok=True)
        except OSError as exc:
            raise self._fail(DirectoryError.cannot_create(self.dirpath)) from exc

        LOGGER.info("Created directory %s", self.dirpath)
        return self

    def ensure_deletable(self, recursive: bool = False) -> "DirectoryValidator":
        """Require the directory to exist and, unless ``recursive``, be empty."""

        self.must_exist()
        if not recursive and self.is_not_empty():
            raise self._fail(DirectoryError.not_empty(self.dirpath))
        return self

    def is_not_empty(self) -> bool:
        self.must_exist()
        try:
            with os.scandir(self.dirpath) as entries:
                return any(True for _ in entries)
        except OSError as exc:
            raise self._fail(DirectoryError.cannot_scan(self.dirpath)) from exc


__all__ = ["DirectoryValidator", "DIRECTORY_MODE"]
