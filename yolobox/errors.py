"""
Exception classes for yolobox.

All codec errors derive from AnnotationError so callers can catch
them in one place. Each carries a human-readable message and a dict
of details identifying the file or line involved.

Usage:
    from yolobox.errors import AnnotationError

    try:
        rects = read_yolo_annotations(path, 640, 480)
    except AnnotationError as e:
        logger.error(f"Could not load annotations: {e}")
"""

from typing import Optional, Any


class AnnotationError(Exception):
    """Base exception for annotation conversion errors."""

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        return self.message


class UnsupportedImageFormat(AnnotationError):
    """Raised when an image path does not end in .jpg, .jpeg or .png."""

    def __init__(self, image_path: str):
        super().__init__("Unsupported image format", {"image_path": image_path})
        self.image_path = image_path


class FileWriteFailure(AnnotationError):
    """Raised when an annotation file cannot be written."""

    def __init__(self, path: str, reason: str):
        super().__init__(f"Failed to write file: {reason}", {"path": path})
        self.path = path
        self.reason = reason


class FileReadFailure(AnnotationError):
    """Raised when an existing annotation file cannot be read."""

    def __init__(self, path: str, reason: str):
        super().__init__(f"Failed to read annotation file: {reason}", {"path": path})
        self.path = path
        self.reason = reason


class MalformedAnnotationLine(AnnotationError):
    """
    Raised when a line does not hold five numeric fields.

    Attributes:
        line_number: 1-based line number in the file
        field: Name of the field that failed ("fields" for a wrong token count)
    """

    def __init__(self, line_number: int, field: str, reason: str):
        super().__init__(
            f"Line {line_number}: invalid {field}: {reason}",
            {"line_number": line_number, "field": field},
        )
        self.line_number = line_number
        self.field = field
        self.reason = reason
