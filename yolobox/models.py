"""
Core data models for yolobox.

Dataclasses representing rectangles drawn on an image and the
request/result records of the YOLO export and import operations.
"""

from dataclasses import dataclass, field
from typing import Optional


# Cosmetic defaults given to rectangles loaded back from a YOLO file
DEFAULT_FILL = "rgba(0, 123, 255, 0.2)"
DEFAULT_STROKE = "#007bff"
DEFAULT_STROKE_WIDTH = 2.0


@dataclass
class Rectangle:
    """An axis-aligned box in pixel space (top-left origin) plus UI metadata."""
    id: str
    x: float
    y: float
    width: float
    height: float
    fill: str = DEFAULT_FILL
    stroke: str = DEFAULT_STROKE
    stroke_width: float = DEFAULT_STROKE_WIDTH
    draggable: bool = True
    class_id: float = 0.0  # Category index, carried as float


@dataclass
class ExportRequest:
    """Rectangles of one image to be written as YOLO annotations."""
    image_path: str
    rectangles: list[Rectangle]
    image_width: int
    image_height: int
    class_id: float = 0.0


@dataclass
class ExportResult:
    """Outcome of exporting a single image."""
    success: bool
    message: str
    file_path: Optional[str] = None
    rectangles_processed: int = 0
    errors: list[str] = field(default_factory=list)

    @classmethod
    def failure(cls, message: str, error: str) -> 'ExportResult':
        """Build a failed result carrying one error."""
        return cls(success=False, message=message, errors=[error])


@dataclass
class BatchExportResult:
    """Aggregate outcome of exporting several images."""
    total_images: int
    successful_exports: int
    failed_exports: int
    summary: str
    results: list[ExportResult] = field(default_factory=list)

    @property
    def all_succeeded(self) -> bool:
        return self.failed_exports == 0

    @property
    def errors(self) -> list[str]:
        """Messages of every failed item, in request order."""
        return [r.message for r in self.results if not r.success]
