"""Chained precondition checks for files."""

from __future__ import annotations

import csv
import json
import logging
import os
import xml.etree.ElementTree as ET
from pathlib import Path

from ..backends.pillow_backend import identify
from ..exceptions import FileError
from ..utils import PathLike

LOGGER = logging.getLogger("wpcli_tools.validators")

UNKNOWN_MIME_TYPE = "application/octet-stream"


def detect_mime_type(path: PathLike) -> str:
    """Return the MIME type of ``path`` as identified by Pillow."""

    detected = identify(Path(path))
    if detected is None or not detected[1]:
        return UNKNOWN_MIME_TYPE
    return detected[1]


class FileValidator:
    """Fluent checks on a single file path.

    Every ``must_*`` method returns the validator itself so checks can be
    chained, or raises :class:`~wpcli_tools.exceptions.FileError` on the first
    violated precondition::

        FileValidator.validate("data.json").must_exist().must_be_valid_json()
    """

    def __init__(self, filepath: PathLike) -> None:
        self.filepath = os.fspath(filepath)
        self._path = Path(self.filepath)

    @classmethod
    def validate(cls, filepath: PathLike) -> "FileValidator":
        return cls(filepath)

    def _fail(self, error: FileError) -> FileError:
        LOGGER.debug("File check failed for %s: %s", self.filepath, error.message)
        return error

    def must_exist(self) -> "FileValidator":
        if not self._path.exists():
            raise self._fail(FileError.not_found(self.filepath))
        return self

    def must_be_file(self) -> "FileValidator":
        self.must_exist()
        if not self._path.is_file():
            raise self._fail(FileError.not_a_file(self.filepath))
        return self

    def must_be_readable(self) -> "FileValidator":
        self.must_exist()
        if not os.access(self.filepath, os.R_OK):
            raise self._fail(FileError.not_readable(self.filepath))
        return self

    def must_be_writable(self) -> "FileValidator":
        self.must_exist()
        if not os.access(self.filepath, os.W_OK):
            raise self._fail(FileError.not_writable(self.filepath))
        return self

    def must_be_mime_type(self, prefix: str = "image/") -> "FileValidator":
        """Require the detected MIME type to start with ``prefix``."""

        self.must_be_readable()
        mime_type = detect_mime_type(self.filepath)
        if not mime_type.startswith(prefix):
            expected = prefix.rstrip("/")
            raise self._fail(FileError.invalid_mime_type(self.filepath, expected, mime_type))
        return self

    def must_be_extension(self, extension: str) -> "FileValidator":
        actual = self._path.suffix.lstrip(".").lower()
        expected = extension.lstrip(".").lower()
        if actual != expected:
            raise self._fail(FileError.invalid_extension(self.filepath, expected))
        return self

    def must_be_json(self) -> "FileValidator":
        return self.must_be_extension("json")

    def must_be_xml(self) -> "FileValidator":
        return self.must_be_extension("xml")

    def must_be_csv(self) -> "FileValidator":
        return self.must_be_extension("csv")

    def must_be_valid_json(self) -> "FileValidator":
        self.must_be_json()
        self.must_be_readable()
        try:
            with self._path.open("r", encoding="utf-8") as handle:
                json.load(handle)
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            raise self._fail(FileError.invalid_json(self.filepath, str(exc))) from exc
        return self

    def must_be_valid_xml(self) -> "FileValidator":
        self.must_be_xml()
        self.must_be_readable()
        try:
            ET.parse(self.filepath)
        except ET.ParseError as exc:
            raise self._fail(FileError.invalid_xml(self.filepath, str(exc))) from exc
        return self

    def must_be_valid_csv(self) -> "FileValidator":
        """Require every non-blank row to have the same number of columns as the first."""

        self.must_be_csv()
        self.must_be_readable()
        try:
            with self._path.open("r", encoding="utf-8", newline="") as handle:
                expected_columns = None
                for line_number, row in enumerate(csv.reader(handle, strict=True), start=1):
                    if not row:
                        continue
                    if expected_columns is None:
                        expected_columns = len(row)
                    elif len(row) != expected_columns:
                        raise self._fail(
                            FileError.invalid_csv(
                                self.filepath,
                                f"line {line_number} has {len(row)} columns, expected {expected_columns}",
                            )
                        )
        except (csv.Error, UnicodeDecodeError) as exc:
            raise self._fail(FileError.invalid_csv(self.filepath, str(exc))) from exc
        return self

    def must_not_be_empty(self) -> "FileValidator":
        self.must_exist()
        if self._path.stat().st_size == 0:
            raise self._fail(FileError.empty_file(self.filepath))
        return self

    def must_not_exceed_size(self, max_size: int) -> "FileValidator":
        self.must_exist()
        actual_size = self._path.stat().st_size
        if actual_size > max_size:
            raise self._fail(FileError.file_too_large(self.filepath, max_size, actual_size))
        return self


__all__ = ["FileValidator", "detect_mime_type", "UNKNOWN_MIME_TYPE"]
