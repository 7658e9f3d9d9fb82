"""Utility helpers shared across :mod:`wpcli_tools`."""

from __future__ import annotations

import logging
import os
import stat
from pathlib import Path
from typing import Optional, Union

from .config import load_settings

PathLike = Union[str, os.PathLike]

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

_SIZE_UNITS = ("B", "KB", "MB", "GB", "TB")


def configure_logging(level: Optional[Union[int, str]] = None) -> None:
    """Configure package-wide logging.

    Without an explicit ``level`` the one from ``WPCLI_TOOLS_LOG_LEVEL`` is used.
    """
    if level is None:
        level = load_settings().log_level
    logging.basicConfig(level=level, format=LOG_FORMAT)


def coerce_path(path: PathLike) -> Path:
    """Return a :class:`~pathlib.Path` for ``path`` with ``~`` expanded."""

    return Path(path).expanduser()


def path_parts(path: PathLike) -> dict[str, str]:
    """Return the ``path``/``basename``/``dirname`` triple used in error context."""

    text = os.fspath(path)
    return {
        "path": text,
        "basename": os.path.basename(text),
        "dirname": os.path.dirname(text) or ".",
    }


def file_permissions(path: PathLike) -> str:
    """Return the permission bits of ``path`` as a 4 digit octal string.

    ``"N/A"`` is returned when the path cannot be stat'ed.
    """

    try:
        mode = os.stat(path).st_mode
    except OSError:
        return "N/A"
    return f"{stat.S_IMODE(mode):04o}"


def format_file_size(size_bytes: int | float) -> str:
    """
    Format file size using 1024-based units.

    Args:
        size_bytes: File size in bytes

    Returns:
        Formatted string rounded to two decimals (e.g., "1.5 KB", "500 B")
    """
    size = float(size_bytes)
    unit_index = 0
    while size >= 1024 and unit_index < len(_SIZE_UNITS) - 1:
        size /= 1024
        unit_index += 1

    text = f"{round(size, 2):.2f}".rstrip("0").rstrip(".")
    return f"{text} {_SIZE_UNITS[unit_index]}"


__all__ = [
    "LOG_FORMAT",
    "PathLike",
    "coerce_path",
    "configure_logging",
    "file_permissions",
    "format_file_size",
    "path_parts",
]
