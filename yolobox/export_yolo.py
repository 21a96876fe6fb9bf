"""
YOLO detection format export.

Writes the rectangles of an image to a text file next to it, one box
per line:

    class_id x_center y_center width height

with coordinates normalized to the image size (6 decimals) and the
class id printed without decimals.
"""

import logging
from typing import Iterable, Optional

from yolobox.errors import UnsupportedImageFormat, FileWriteFailure
from yolobox.models import Rectangle, ExportRequest, ExportResult, BatchExportResult
from yolobox.paths import annotation_path_for

logger = logging.getLogger(__name__)


def rectangle_to_yolo(
    rect: Rectangle,
    image_width: int,
    image_height: int,
) -> tuple[float, float, float, float]:
    """
    Convert a pixel-space rectangle to normalized YOLO coordinates.

    Values are not clamped to [0, 1].

    Returns:
        Tuple of (x_center, y_center, width, height)
    """
    x_center = (rect.x + rect.width / 2) / image_width
    y_center = (rect.y + rect.height / 2) / image_height
    w_norm = rect.width / image_width
    h_norm = rect.height / image_height
    return x_center, y_center, w_norm, h_norm


def format_yolo_line(rect: Rectangle, image_width: int, image_height: int) -> str:
    """Format one rectangle as a YOLO annotation line."""
    x_center, y_center, w_norm, h_norm = rectangle_to_yolo(rect, image_width, image_height)
    return f"{rect.class_id:.0f} {x_center:.6f} {y_center:.6f} {w_norm:.6f} {h_norm:.6f}"


def rectangles_to_yolo_text(
    rectangles: Iterable[Rectangle],
    image_width: int,
    image_height: int,
) -> str:
    """Format rectangles as YOLO file content (no trailing newline)."""
    return "\n".join(
        format_yolo_line(rect, image_width, image_height) for rect in rectangles
    )


def write_annotation_file(path: str, content: str) -> None:
    """
    Write annotation content, overwriting any existing file.

    Raises:
        FileWriteFailure: if the file cannot be written
    """
    try:
        with open(path, 'w', encoding='utf-8', newline='\n') as f:
            f.write(content)
    except OSError as e:
        raise FileWriteFailure(path, str(e)) from e


def export_rectangles_to_yolo(
    request: ExportRequest,
    log: Optional[logging.Logger] = None,
) -> ExportResult:
    """
    Export the rectangles of one image to its YOLO annotation file.

    Never raises: unsupported formats and write failures are reported
    in the returned result.

    Args:
        request: Image path, size and rectangles to export
        log: Logger for per-call tracing (defaults to the module logger)

    Returns:
        ExportResult with the written path and number of rectangles
    """
    log = log or logger

    log.info(
        f"YOLO export: {request.image_path} "
        f"({request.image_width}x{request.image_height}, "
        f"{len(request.rectangles)} rectangles, class {request.class_id})"
    )

    try:
        txt_path = annotation_path_for(request.image_path)
    except UnsupportedImageFormat as e:
        log.warning(f"Cannot export {request.image_path}: {e}")
        return ExportResult.failure(e.message, e.message)

    log.debug(f"Annotation output path: {txt_path}")

    lines = []
    try:
        for i, rect in enumerate(request.rectangles):
            line = format_yolo_line(rect, request.image_width, request.image_height)
            log.debug(
                f"Rectangle {i}: x={rect.x}, y={rect.y}, w={rect.width}, h={rect.height} -> {line}"
            )
            lines.append(line)
    except ZeroDivisionError as e:
        message = f"Failed to convert rectangles: {e}"
        log.error(f"Cannot export {request.image_path}: {message}")
        return ExportResult.failure(message, str(e))

    try:
        write_annotation_file(txt_path, "\n".join(lines))
    except FileWriteFailure as e:
        log.error(f"YOLO export failed for {txt_path}: {e.reason}")
        return ExportResult.failure(e.message, e.reason)

    log.info(f"YOLO export wrote {len(lines)} annotations to {txt_path}")

    return ExportResult(
        success=True,
        message="YOLO annotations exported successfully",
        file_path=txt_path,
        rectangles_processed=len(request.rectangles),
        errors=[],
    )


def summarize_batch(success_count: int, error_count: int, errors: list[str]) -> str:
    """
    Human-readable summary of a batch export.

    A batch with nothing exported, including an empty batch, gets the
    failure summary.
    """
    if success_count > 0:
        if error_count > 0:
            return f"Exported {success_count} YOLO annotation files ({error_count} failed)"
        return f"Successfully exported {success_count} YOLO annotation files"
    return f"Failed to export any YOLO annotations. Errors: {', '.join(errors)}"


def export_all_rectangles_to_yolo(
    requests: list[ExportRequest],
    log: Optional[logging.Logger] = None,
) -> BatchExportResult:
    """
    Export several images, one after the other.

    A failing image is recorded and the remaining images are still
    exported.

    Args:
        requests: One export request per image
        log: Logger for per-call tracing (defaults to the module logger)

    Returns:
        BatchExportResult with counts, summary and per-image results
    """
    log = log or logger

    log.info(f"Batch YOLO export: {len(requests)} images")

    results = []
    errors = []
    success_count = 0

    for i, request in enumerate(requests):
        result = export_rectangles_to_yolo(request, log=log)
        results.append(result)

        if result.success:
            success_count += 1
        else:
            log.warning(f"Failed to export image {i} ({request.image_path}): {result.message}")
            errors.append(result.message)

    error_count = len(errors)
    summary = summarize_batch(success_count, error_count, errors)

    log.info(f"Batch YOLO export complete: {success_count} succeeded, {error_count} failed")

    return BatchExportResult(
        total_images=len(requests),
        successful_exports=success_count,
        failed_exports=error_count,
        summary=summary,
        results=results,
    )
