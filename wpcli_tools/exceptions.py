"""
Custom exceptions for wpcli-tools.

Every error carries a numeric ``code``, a human ``message``, a ``context``
mapping with diagnostic fields and an ordered list of ``solutions`` that a
presentation layer can show to the user as-is. Errors are built through the
named classmethods on each error kind, one per failure scenario.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence

from .utils import PathLike, file_permissions, format_file_size, path_parts

SUPPORTED_IMAGE_FORMATS = ("jpg", "jpeg", "png", "gif", "webp", "bmp")
COMMON_SCHEMES = ("http", "https", "ftp", "file", "data")

_RETRY_LATER = "Retry the operation after a short while"


class WpCliToolsError(RuntimeError):
    """Base exception for all wpcli-tools errors."""

    def __init__(
        self,
        message: str = "",
        code: int = 0,
        *,
        context: Optional[Mapping[str, Any]] = None,
        solutions: Optional[Iterable[str]] = None,
    ) -> None:
        super().__init__(message or self.default_message)
        self.message = message or self.default_message
        self.code = code
        self.context: Dict[str, Any] = dict(context or {})
        self.solutions: List[str] = list(solutions or [])

    @property
    def default_message(self) -> str:
        return "An unknown wpcli-tools error occurred."

    def with_context(self, context: Mapping[str, Any]) -> "WpCliToolsError":
        """Merge ``context`` into this error; later keys overwrite earlier ones."""

        self.context.update(context)
        return self

    def with_solutions(self, solutions: Iterable[str]) -> "WpCliToolsError":
        """Append ``solutions`` to the remedies of this error."""

        self.solutions.extend(solutions)
        return self

    def to_dict(self) -> Dict[str, Any]:
        return {
            "code": self.code,
            "message": self.message,
            "context": dict(self.context),
            "solutions": list(self.solutions),
        }

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code}, message={self.message!r})"


class FileError(WpCliToolsError):
    """Raised when a file is missing, inaccessible or has unexpected content."""

    NOT_FOUND = 4001
    NOT_READABLE = 4002
    NOT_WRITABLE = 4003
    INVALID_EXTENSION = 4004
    INVALID_JSON = 4005
    INVALID_XML = 4006
    INVALID_CSV = 4007
    FILE_TOO_LARGE = 4008
    EMPTY_FILE = 4009
    INVALID_MIME_TYPE = 4010
    NOT_A_FILE = 4011

    @property
    def default_message(self) -> str:
        return "File operation failed."

    @classmethod
    def not_found(cls, filepath: PathLike) -> "FileError":
        parts = path_parts(filepath)
        return cls(
            f"File {parts['basename']} not found",
            cls.NOT_FOUND,
            context=parts,
            solutions=[
                "Check that the file exists at the expected location",
                "Check that the file has read permission (444) or higher",
                "Check whether the file was deleted or moved elsewhere",
                _RETRY_LATER,
            ],
        )

    @classmethod
    def not_a_file(cls, filepath: PathLike) -> "FileError":
        parts = path_parts(filepath)
        return cls(
            f"Path {parts['basename']} is not a regular file",
            cls.NOT_A_FILE,
            context=parts,
            solutions=[
                "Pass the path of a file, not a directory or special device",
                "Check for a typo in the file name",
            ],
        )

    @classmethod
    def not_readable(cls, filepath: PathLike) -> "FileError":
        parts = path_parts(filepath)
        return cls(
            f"File {parts['basename']} is not readable",
            cls.NOT_READABLE,
            context={**parts, "permissions": file_permissions(filepath)},
            solutions=[
                "Check that the file has read permission (444) or higher",
                "Ensure the current user has read access to the file",
                f"Run `chmod +r {parts['path']}` if needed",
                _RETRY_LATER,
            ],
        )

    @classmethod
    def not_writable(cls, filepath: PathLike) -> "FileError":
        parts = path_parts(filepath)
        return cls(
            f"File {parts['basename']} is not writable. Check its permissions or read-only attribute.",
            cls.NOT_WRITABLE,
            context={**parts, "permissions": file_permissions(filepath)},
            solutions=[
                "Check that the file has write permission (664) or higher",
                "Check that the parent directory is writable too",
                f"Run `chmod +w {parts['path']}` if needed",
                _RETRY_LATER,
            ],
        )

    @classmethod
    def invalid_extension(cls, filepath: PathLike, expected: str) -> "FileError":
        parts = path_parts(filepath)
        return cls(
            f"File {parts['basename']} must have the .{expected} extension",
            cls.INVALID_EXTENSION,
            context={**parts, "expected": expected},
            solutions=[
                "Check that the file has the expected extension",
                f"Rename the file to use the .{expected} extension",
                _RETRY_LATER,
            ],
        )

    @classmethod
    def invalid_mime_type(
        cls, filepath: PathLike, expected: str, actual: Optional[str] = None
    ) -> "FileError":
        parts = path_parts(filepath)
        return cls(
            f"File {parts['basename']} must have a {expected} mime type",
            cls.INVALID_MIME_TYPE,
            context={**parts, "expected": expected, "mime_type": actual or "unknown"},
            solutions=[
                "Check that the file content matches its declared type",
                f"Convert the file to a {expected} format",
                "Ensure the file was not truncated during upload or transfer",
            ],
        )

    @classmethod
    def _invalid_format(
        cls, kind: str, code: int, filepath: PathLike, error: Optional[str]
    ) -> "FileError":
        parts = path_parts(filepath)
        message = f"{kind} format of {parts['basename']} is invalid"
        if error:
            message += f": {error}"
        context: Dict[str, Any] = dict(parts)
        if error:
            context["error"] = error
        return cls(
            message,
            code,
            context=context,
            solutions=[
                f"Check that the file contains valid {kind}",
                f"Run the file through a {kind} linter to locate the problem",
                _RETRY_LATER,
            ],
        )

    @classmethod
    def invalid_json(cls, filepath: PathLike, error: Optional[str] = None) -> "FileError":
        return cls._invalid_format("JSON", cls.INVALID_JSON, filepath, error)

    @classmethod
    def invalid_xml(cls, filepath: PathLike, error: Optional[str] = None) -> "FileError":
        return cls._invalid_format("XML", cls.INVALID_XML, filepath, error)

    @classmethod
    def invalid_csv(cls, filepath: PathLike, error: Optional[str] = None) -> "FileError":
        return cls._invalid_format("CSV", cls.INVALID_CSV, filepath, error)

    @classmethod
    def file_too_large(cls, filepath: PathLike, max_size: int, actual_size: int) -> "FileError":
        parts = path_parts(filepath)
        return cls(
            "File {name} is too large: {actual} (maximum {limit})".format(
                name=parts["basename"],
                actual=format_file_size(actual_size),
                limit=format_file_size(max_size),
            ),
            cls.FILE_TOO_LARGE,
            context={
                **parts,
                "size_bytes": actual_size,
                "max_bytes": max_size,
                "size_human": format_file_size(actual_size),
                "max_human": format_file_size(max_size),
            },
            solutions=[
                "Compress or resize the file before processing",
                "Increase the allowed file size limit",
                "Split large operations into smaller chunks if possible",
            ],
        )

    @classmethod
    def empty_file(cls, filepath: PathLike) -> "FileError":
        parts = path_parts(filepath)
        return cls(
            f"File {parts['basename']} is empty",
            cls.EMPTY_FILE,
            context={**parts, "size_bytes": 0},
            solutions=[
                "Check that the file has content",
                "Regenerate or download the file again",
                _RETRY_LATER,
            ],
        )


class DirectoryError(WpCliToolsError):
    """Raised for missing, inaccessible or non-empty directories."""

    NOT_FOUND = 5001
    NOT_READABLE = 5002
    NOT_WRITABLE = 5003
    CANNOT_CREATE = 5004
    CANNOT_DELETE = 5005
    CANNOT_SCAN = 5006
    NOT_EMPTY = 5007

    @property
    def default_message(self) -> str:
        return "Directory operation failed."

    @classmethod
    def _build(
        cls, code: int, template: str, dirpath: PathLike, solutions: Sequence[str], **extra: Any
    ) -> "DirectoryError":
        parts = path_parts(dirpath)
        return cls(
            template.format(name=parts["basename"], path=parts["path"]),
            code,
            context={**parts, **extra},
            solutions=[*solutions, _RETRY_LATER],
        )

    @classmethod
    def not_found(cls, dirpath: PathLike) -> "DirectoryError":
        return cls._build(
            cls.NOT_FOUND,
            "Directory {name} not found: {path}",
            dirpath,
            [
                "Check that the directory exists at the expected location",
                "Check that the directory has read permission (555) or higher",
                "Check whether the directory was deleted or moved elsewhere",
            ],
        )

    @classmethod
    def not_readable(cls, dirpath: PathLike) -> "DirectoryError":
        return cls._build(
            cls.NOT_READABLE,
            "Directory {name} is not readable: {path}",
            dirpath,
            [
                "Check that the directory has read permission (555) or higher",
                "Check whether the directory was deleted or moved elsewhere",
            ],
            permissions=file_permissions(dirpath),
        )

    @classmethod
    def not_writable(cls, dirpath: PathLike) -> "DirectoryError":
        return cls._build(
            cls.NOT_WRITABLE,
            "Directory {name} is not writable: {path}. Check its permissions or read-only attribute.",
            dirpath,
            [
                "Check that the directory has write permission (775) or higher",
                "Check whether the directory was deleted or moved elsewhere",
            ],
            permissions=file_permissions(dirpath),
        )

    @classmethod
    def cannot_create(cls, dirpath: PathLike) -> "DirectoryError":
        return cls._build(
            cls.CANNOT_CREATE,
            "Cannot create directory {name}: {path}",
            dirpath,
            [
                "Check that the parent directory exists and is writable",
                "Check that you are allowed to create directories there",
                "Check for operating system or hosting restrictions",
            ],
        )

    @classmethod
    def cannot_delete(cls, dirpath: PathLike) -> "DirectoryError":
        return cls._build(
            cls.CANNOT_DELETE,
            "Cannot delete directory {name}: {path}",
            dirpath,
            [
                "Empty the directory first or use recursive deletion",
                "Check that you are allowed to delete the directory",
                "Check whether another process is using the directory",
            ],
        )

    @classmethod
    def cannot_scan(cls, dirpath: PathLike) -> "DirectoryError":
        return cls._build(
            cls.CANNOT_SCAN,
            "Cannot scan directory {name}: {path}",
            dirpath,
            [
                "Check that the directory exists and is readable",
                "Check that you are allowed to list the directory",
                "Check the file system for errors",
            ],
        )

    @classmethod
    def not_empty(cls, dirpath: PathLike) -> "DirectoryError":
        return cls._build(
            cls.NOT_EMPTY,
            "Directory {name} is not empty: {path}",
            dirpath,
            [
                "Empty the directory first",
                "Use recursive deletion",
                "Check for hidden files or subdirectories",
            ],
        )


class ImageError(WpCliToolsError):
    """Raised when image metadata is unusable or cannot be read."""

    INVALID_DIMENSIONS = 2001
    UNSUPPORTED_FORMAT = 2002
    PROCESSING_FAILED = 2003
    LIBRARY_NOT_AVAILABLE = 2004
    INVALID_RATIO = 2005
    SCALE_OUT_OF_BOUNDS = 2006

    @property
    def default_message(self) -> str:
        return "Image processing failed."

    @classmethod
    def invalid_dimensions(cls, width: int, height: int) -> "ImageError":
        return cls(
            f"Invalid image dimensions: {width}x{height}",
            cls.INVALID_DIMENSIONS,
            context={"width": width, "height": height},
            solutions=[
                "Check if the image file is corrupted",
                "Verify the image has valid width and height",
                "Try opening and resaving the image in an editor",
            ],
        )

    @classmethod
    def unsupported_format(cls, image_format: str) -> "ImageError":
        return cls(
            f"Unsupported image format: {image_format}",
            cls.UNSUPPORTED_FORMAT,
            context={
                "format": image_format,
                "supported_formats": list(SUPPORTED_IMAGE_FORMATS),
            },
            solutions=[
                "Convert the image to a supported format (JPEG, PNG, WebP, etc.)",
                "Use an image editing tool to reformat the file",
                "Check if the file extension matches its actual format",
            ],
        )

    @classmethod
    def processing_failed(cls, reason: str = "", **context: Any) -> "ImageError":
        message = "Image processing failed"
        if reason:
            message += f": {reason}"
        details: Dict[str, Any] = {"reason": reason} if reason else {}
        details.update(context)
        return cls(
            message,
            cls.PROCESSING_FAILED,
            context=details,
            solutions=[
                "Verify the image is not corrupted",
                "Check available memory for large images",
                "Try processing with a different image backend",
                "Enable debug logging for more details",
            ],
        )

    @classmethod
    def library_not_available(cls, library: str) -> "ImageError":
        return cls(
            f"Image library not available: {library}",
            cls.LIBRARY_NOT_AVAILABLE,
            context={"library": library},
            solutions=[
                f"Install the {library} package into the active environment",
                "Check that the package imports without errors",
                "Restart the process after installation",
            ],
        )

    @classmethod
    def invalid_ratio(cls, ratio: float) -> "ImageError":
        return cls(
            f"Invalid aspect ratio: {ratio:.2f}",
            cls.INVALID_RATIO,
            context={"ratio": ratio},
            solutions=[
                "Ensure the calculated ratio is greater than 0",
                "Check if width or height is zero or negative",
                "Verify the image dimensions are valid before calculating ratio",
            ],
        )

    @classmethod
    def scale_out_of_bounds(
        cls, percentage: float, minimum: float = 0.1, maximum: float = 500.0
    ) -> "ImageError":
        """All three arguments are percentages (150 means 150 %)."""

        return cls(
            f"Scale percentage ({percentage:.1f}%) must be between {minimum:.1f}% and {maximum:.1f}%",
            cls.SCALE_OUT_OF_BOUNDS,
            context={
                "percentage": percentage,
                "min_allowed": minimum,
                "max_allowed": maximum,
            },
            solutions=[
                f"Use a scale percentage between {minimum:g}% and {maximum:g}%",
                "Consider using absolute pixel dimensions instead of percentage",
                "Adjust your scaling factor to stay within allowed bounds",
            ],
        )


_URI_SOLUTIONS = (
    "Check if the URI is properly formatted",
    "Ensure special characters are URL-encoded",
    "Verify the URI follows RFC 3986 standards",
)


class UriError(WpCliToolsError):
    """Raised when a URI is malformed, disallowed or unreachable."""

    INVALID_URI = 4001
    INVALID_SCHEME = 4002
    INVALID_HOST = 4003
    INVALID_PATH = 4004
    INVALID_QUERY = 4005
    INVALID_FRAGMENT = 4006
    UNSUPPORTED_SCHEME = 4007
    MALFORMED_URI = 4008
    NOT_FOUND = 4009

    @property
    def default_message(self) -> str:
        return "Invalid URI."

    @classmethod
    def not_found(cls, uri: str, status_code: int = 0, reason: str = "") -> "UriError":
        if status_code:
            message = f"URI not found: {uri} (Status Code: {status_code})"
        else:
            message = f"URI not found: {uri}"
        context: Dict[str, Any] = {"uri": uri, "status_code": status_code}
        if reason:
            context["reason"] = reason
        return cls(
            message,
            cls.NOT_FOUND,
            context=context,
            solutions=[
                "Check that the resource exists at this address",
                "Check network connectivity and proxy settings",
                *_URI_SOLUTIONS,
            ],
        )

    @classmethod
    def invalid(cls, uri: str, reason: str = "") -> "UriError":
        message = f"Invalid URI '{uri}': {reason}" if reason else f"Invalid URI: {uri}"
        return cls(
            message,
            cls.INVALID_URI,
            context={"uri": uri, "reason": reason},
            solutions=list(_URI_SOLUTIONS),
        )

    @classmethod
    def invalid_scheme(
        cls, uri: str, scheme: str, allowed: Sequence[str] = ()
    ) -> "UriError":
        return cls(
            f"Invalid scheme '{scheme}' for URI: {uri}",
            cls.INVALID_SCHEME,
            context={
                "uri": uri,
                "scheme": scheme,
                "allowed_schemes": list(allowed),
                "common_schemes": list(COMMON_SCHEMES),
            },
            solutions=[
                "Use one of the allowed schemes: {}".format(", ".join(allowed) or "any"),
                *_URI_SOLUTIONS,
            ],
        )

    @classmethod
    def unsupported_scheme(
        cls, uri: str, scheme: str, supported: Sequence[str] = COMMON_SCHEMES
    ) -> "UriError":
        return cls(
            f"Unsupported scheme '{scheme}' for URI: {uri}",
            cls.UNSUPPORTED_SCHEME,
            context={
                "uri": uri,
                "scheme": scheme,
                "supported_schemes": list(supported),
                "common_schemes": list(COMMON_SCHEMES),
            },
            solutions=[
                "Use one of the supported schemes: {}".format(", ".join(supported)),
                *_URI_SOLUTIONS,
            ],
        )

    @classmethod
    def malformed(cls, uri: str, component: str) -> "UriError":
        return cls(
            f"Malformed URI component '{component}' in: {uri}",
            cls.MALFORMED_URI,
            context={"uri": uri, "component": component},
            solutions=list(_URI_SOLUTIONS),
        )


class ExtensionError(WpCliToolsError):
    """Raised when a required runtime extension (Python package) is missing."""

    NOT_AVAILABLE = 0

    @property
    def default_message(self) -> str:
        return "Required extension is not available."

    @classmethod
    def not_available(cls, extension: str, package: Optional[str] = None) -> "ExtensionError":
        return cls(
            f"Extension {extension} is not available",
            cls.NOT_AVAILABLE,
            context={"extension": extension, "package": package or extension},
            solutions=[
                f"Install it with `pip install {package or extension}`",
                "Check that the active interpreter is the one you installed into",
            ],
        )


__all__ = [
    "COMMON_SCHEMES",
    "SUPPORTED_IMAGE_FORMATS",
    "WpCliToolsError",
    "FileError",
    "DirectoryError",
    "ImageError",
    "UriError",
    "ExtensionError",
]
