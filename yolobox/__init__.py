"""
yolobox - Bounding box conversion between pixel rectangles and YOLO text files
"""

from yolobox.models import Rectangle, ExportRequest, ExportResult, BatchExportResult
from yolobox.errors import (
    AnnotationError, UnsupportedImageFormat, FileWriteFailure, FileReadFailure,
    MalformedAnnotationLine,
)
from yolobox.paths import annotation_path_for, is_supported_image
from yolobox.export_yolo import export_rectangles_to_yolo, export_all_rectangles_to_yolo
from yolobox.import_yolo import read_yolo_annotations, verify_yolo_annotations

__version__ = "0.1.0"

__all__ = [
    "Rectangle", "ExportRequest", "ExportResult", "BatchExportResult",
    "AnnotationError", "UnsupportedImageFormat", "FileWriteFailure", "FileReadFailure",
    "MalformedAnnotationLine",
    "annotation_path_for", "is_supported_image",
    "export_rectangles_to_yolo", "export_all_rectangles_to_yolo",
    "read_yolo_annotations", "verify_yolo_annotations",
]
