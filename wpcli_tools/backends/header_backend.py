"""Dimension reader that parses image headers directly.

Only the first bytes of the file are inspected, so it works for images that
are truncated or otherwise fail to decode. Supported containers: PNG, GIF,
BMP, JPEG and WebP.
"""

from __future__ import annotations

import struct
from pathlib import Path
from typing import BinaryIO, Optional

from .base import BackendError, Size

_PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"
# SOF0..SOF15 minus DHT (C4), JPG (C8) and DAC (CC).
_JPEG_SOF_MARKERS = frozenset(range(0xC0, 0xD0)) - {0xC4, 0xC8, 0xCC}
_JPEG_STANDALONE_MARKERS = frozenset({0x01, 0xD8, *range(0xD0, 0xD8)})


def _png_size(head: bytes) -> Optional[Size]:
    if head[:8] != _PNG_SIGNATURE or head[12:16] != b"IHDR":
        return None
    width, height = struct.unpack(">II", head[16:24])
    return width, height


def _gif_size(head: bytes) -> Optional[Size]:
    if head[:6] not in (b"GIF87a", b"GIF89a"):
        return None
    width, height = struct.unpack("<HH", head[6:10])
    return width, height


def _bmp_size(head: bytes) -> Optional[Size]:
    if head[:2] != b"BM" or len(head) < 26:
        return None
    (dib_size,) = struct.unpack("<I", head[14:18])
    if dib_size == 12:
        width, height = struct.unpack("<HH", head[18:22])
    else:
        width, height = struct.unpack("<ii", head[18:26])
    # Negative height marks a top-down bitmap.
    return width, abs(height)


def _webp_size(head: bytes) -> Optional[Size]:
    if head[:4] != b"RIFF" or head[8:12] != b"WEBP":
        return None
    chunk = head[12:16]
    if chunk == b"VP8 " and head[23:26] == b"\x9d\x01\x2a":
        width, height = struct.unpack("<HH", head[26:30])
        return width & 0x3FFF, height & 0x3FFF
    if chunk == b"VP8L" and head[20:21] == b"\x2f":
        (bits,) = struct.unpack("<I", head[21:25])
        return (bits & 0x3FFF) + 1, ((bits >> 14) & 0x3FFF) + 1
    if chunk == b"VP8X":
        width = int.from_bytes(head[24:27], "little") + 1
        height = int.from_bytes(head[27:30], "little") + 1
        return width, height
    return None


def _jpeg_size(handle: BinaryIO) -> Optional[Size]:
    handle.seek(0)
    if handle.read(2) != b"\xff\xd8":
        return None
    while True:
        byte = handle.read(1)
        if not byte:
            return None
        if byte != b"\xff":
            continue
        marker = handle.read(1)
        while marker == b"\xff":
            marker = handle.read(1)
        if not marker:
            return None
        code = marker[0]
        if code in _JPEG_STANDALONE_MARKERS:
            continue
        if code == 0xD9:
            return None
        raw_length = handle.read(2)
        if len(raw_length) < 2:
            return None
        (length,) = struct.unpack(">H", raw_length)
        if code in _JPEG_SOF_MARKERS:
            frame = handle.read(5)
            if len(frame) < 5:
                return None
            height, width = struct.unpack(">xHH", frame)
            return width, height
        handle.seek(length - 2, 1)


def read_header_size(path: Path) -> Optional[Size]:
    """Return ``(width, height)`` from the header of ``path`` or ``None``."""

    with path.open("rb") as handle:
        head = handle.read(32)
        for reader in (_png_size, _gif_size, _webp_size, _bmp_size):
            size = reader(head)
            if size is not None:
                return size
        return _jpeg_size(handle)


class HeaderBackend:
    """Reads dimensions from the raw file header without third-party libraries."""

    name = "header"

    def available(self) -> bool:
        return True

    def probe(self, path: Path) -> Size:
        try:
            size = read_header_size(path)
        except struct.error as exc:
            raise BackendError(f"Truncated image header in {path.name}") from exc
        if size is None:
            raise BackendError(f"Unrecognised image header in {path.name}")
        return size
