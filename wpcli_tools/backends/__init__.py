"""Image-size backends for wpcli-tools."""

from .base import BackendError, ImageBackend, Size
from .chain import BACKEND_TYPES, build_backends, default_backends, read_image_size
from .exif_backend import ExifBackend
from .header_backend import HeaderBackend, read_header_size
from .pillow_backend import PillowBackend

__all__ = [
    "BACKEND_TYPES",
    "BackendError",
    "ExifBackend",
    "HeaderBackend",
    "ImageBackend",
    "PillowBackend",
    "Size",
    "build_backends",
    "default_backends",
    "read_header_size",
    "read_image_size",
]
