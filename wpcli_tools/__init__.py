"""
wpcli-tools - Helper library for WordPress command-line tooling.

This library provides typed errors with suggested solutions, fluent
validators for files, directories, images and URIs, aspect-ratio based
image size calculation, and a scratch directory for staged files.

Quick Start:
    >>> from wpcli_tools import ImageSizeCalculator
    >>> calculator = ImageSizeCalculator('photo.jpg')
    >>> str(calculator.fit_within(800, 800))
    '800x450 (Ratio: 16:9)'

Main Classes:
    - ImageSizeCalculator: Resize arithmetic for one image file
    - ImageSizeBuilder: Same policies, returning ImageProvider values
    - FileInfo: Name, extension, directory and size of a path
    - TempFileManager: Read and write files in a scratch directory
    - DefaultExceptionHandler: Render errors on a rich console

Validators:
    - FileValidator, DirectoryValidator, ImageValidator, UriValidator,
      ExtensionValidator

Data Classes:
    - RatioImage: Reduced aspect ratio
    - DimensionsImage: Pixel size with its source ratio
    - ImageProvider: Ratio and dimensions together

Exceptions:
    - WpCliToolsError: Base exception
    - FileError, DirectoryError, ImageError, UriError, ExtensionError
"""

# Core classes
from wpcli_tools.calculator import ImageSizeBuilder, ImageSizeCalculator
from wpcli_tools.fileinfo import FileInfo
from wpcli_tools.handler import DefaultExceptionHandler, ExceptionHandler
from wpcli_tools.tempfiles import TempFileManager

# Data types
from wpcli_tools.types import DimensionsImage, ImageProvider, RatioImage

# Ratio arithmetic
from wpcli_tools.ratio import (
    compute_ratio,
    fill_area,
    fit_within,
    round_half_away,
    to_height,
    to_width,
)

# Validators
from wpcli_tools.validators import (
    DirectoryValidator,
    ExtensionValidator,
    FileValidator,
    ImageValidator,
    UriValidator,
)

# Exceptions
from wpcli_tools.exceptions import (
    WpCliToolsError,
    FileError,
    DirectoryError,
    ImageError,
    UriError,
    ExtensionError,
)

# Configuration and utility functions
from wpcli_tools.config import Settings, load_settings
from wpcli_tools.utils import configure_logging, format_file_size

__version__ = "1.0.0"
__author__ = "wpcli-tools Contributors"
__license__ = "MIT"

__all__ = [
    # Main classes
    "ImageSizeCalculator",
    "ImageSizeBuilder",
    "FileInfo",
    "TempFileManager",
    "DefaultExceptionHandler",
    "ExceptionHandler",
    # Data types
    "RatioImage",
    "DimensionsImage",
    "ImageProvider",
    # Ratio arithmetic
    "compute_ratio",
    "fill_area",
    "fit_within",
    "round_half_away",
    "to_height",
    "to_width",
    # Validators
    "DirectoryValidator",
    "ExtensionValidator",
    "FileValidator",
    "ImageValidator",
    "UriValidator",
    # Exceptions
    "WpCliToolsError",
    "FileError",
    "DirectoryError",
    "ImageError",
    "UriError",
    "ExtensionError",
    # Configuration and utilities
    "Settings",
    "load_settings",
    "configure_logging",
    "format_file_size",
    # Version info
    "__version__",
]
