"""Fluent validators for files, directories, images, URIs and runtime packages."""

from .directory import DIRECTORY_MODE, DirectoryValidator
from .extension import ExtensionValidator, module_available
from .file import UNKNOWN_MIME_TYPE, FileValidator, detect_mime_type
from .image import IMAGE_TYPE_CODES, ImageValidator, library_loaded
from .uri import UriValidator

__all__ = [
    "DIRECTORY_MODE",
    "DirectoryValidator",
    "ExtensionValidator",
    "FileValidator",
    "IMAGE_TYPE_CODES",
    "ImageValidator",
    "UNKNOWN_MIME_TYPE",
    "UriValidator",
    "detect_mime_type",
    "library_loaded",
    "module_available",
]
