"""
YOLO detection format import.

Reads an image's annotation file back into pixel-space rectangles.
Malformed lines are skipped (and logged) so a partially corrupted
file still yields every valid box.
"""

import os
import re
import logging
from dataclasses import dataclass, field
from typing import Optional

from yolobox.errors import FileReadFailure, MalformedAnnotationLine
from yolobox.models import Rectangle
from yolobox.paths import annotation_path_for

logger = logging.getLogger(__name__)

# Field names in line order
YOLO_FIELDS = ("class_id", "x_center", "y_center", "width", "height")

# ASCII decimal with optional exponent, or inf/nan
_NUMBER_RE = re.compile(
    r"[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf|infinity|nan)",
    re.IGNORECASE,
)


@dataclass
class ParseReport:
    """Rectangles parsed from a YOLO file and the lines that were skipped."""
    rectangles: list[Rectangle] = field(default_factory=list)
    issues: list[MalformedAnnotationLine] = field(default_factory=list)

    @property
    def is_clean(self) -> bool:
        return len(self.issues) == 0


def parse_yolo_line(line: str, line_number: int) -> tuple[float, float, float, float, float]:
    """
    Parse one non-blank annotation line.

    Args:
        line: Text of the line
        line_number: 1-based line number, used in error messages

    Returns:
        Tuple of (class_id, x_center, y_center, width, height)

    Raises:
        MalformedAnnotationLine: wrong token count or a non-numeric field
    """
    tokens = line.split()
    if len(tokens) != len(YOLO_FIELDS):
        raise MalformedAnnotationLine(
            line_number, "fields", f"expected {len(YOLO_FIELDS)} parts, got {len(tokens)}"
        )

    values = []
    for name, token in zip(YOLO_FIELDS, tokens):
        if not _NUMBER_RE.fullmatch(token):
            raise MalformedAnnotationLine(line_number, name, f"not a number: {token!r}")
        values.append(float(token))

    return tuple(values)


def yolo_to_rectangle(
    values: tuple[float, float, float, float, float],
    image_width: int,
    image_height: int,
    rect_id: str,
) -> Rectangle:
    """Convert normalized YOLO values back to a pixel-space rectangle."""
    class_id, x_center, y_center, w_norm, h_norm = values
    return Rectangle(
        id=rect_id,
        x=(x_center - w_norm / 2) * image_width,
        y=(y_center - h_norm / 2) * image_height,
        width=w_norm * image_width,
        height=h_norm * image_height,
        class_id=class_id,
    )


def parse_yolo_text(
    text: str,
    image_width: int,
    image_height: int,
    log: Optional[logging.Logger] = None,
) -> ParseReport:
    """
    Parse YOLO file content.

    Blank lines are ignored. Malformed lines are skipped and recorded in
    the report. Rectangle ids are "loaded_rect_<i>" with i the 0-based
    index of the line in the file.
    """
    log = log or logger
    report = ParseReport()

    for line_idx, line in enumerate(text.split("\n")):
        line = line.strip()
        if not line:
            continue

        try:
            values = parse_yolo_line(line, line_idx + 1)
        except MalformedAnnotationLine as e:
            log.warning(f"Skipping invalid annotation line: {e}")
            report.issues.append(e)
            continue

        rect = yolo_to_rectangle(values, image_width, image_height, f"loaded_rect_{line_idx}")
        log.debug(
            f"Line {line_idx + 1}: {line} -> x={rect.x}, y={rect.y}, "
            f"width={rect.width}, height={rect.height}"
        )
        report.rectangles.append(rect)

    return report


def read_annotation_file(path: str) -> str:
    """
    Read an annotation file as UTF-8 text.

    Raises:
        FileReadFailure: if the file exists but cannot be read
    """
    try:
        with open(path, 'r', encoding='utf-8', newline='') as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise FileReadFailure(path, str(e)) from e


def read_yolo_annotations(
    image_path: str,
    image_width: int,
    image_height: int,
    log: Optional[logging.Logger] = None,
) -> list[Rectangle]:
    """
    Load the YOLO annotations of an image as pixel-space rectangles.

    A missing annotation file means the image has no annotations yet
    and yields an empty list.

    Args:
        image_path: Path to the image (.jpg, .jpeg or .png)
        image_width: Image width in pixels
        image_height: Image height in pixels
        log: Logger for per-call tracing (defaults to the module logger)

    Returns:
        Rectangles in file line order

    Raises:
        UnsupportedImageFormat: if the image extension is not supported
        FileReadFailure: if the annotation file exists but cannot be read
    """
    log = log or logger

    txt_path = annotation_path_for(image_path)
    log.info(f"Reading YOLO annotations for {image_path} ({image_width}x{image_height}) from {txt_path}")

    if not os.path.exists(txt_path):
        log.info(f"No annotation file at {txt_path}")
        return []

    try:
        content = read_annotation_file(txt_path)
    except FileReadFailure as e:
        log.error(str(e))
        raise

    report = parse_yolo_text(content, image_width, image_height, log=log)

    if report.issues:
        log.warning(f"Skipped {len(report.issues)} invalid lines in {txt_path}")
    log.info(f"Read {len(report.rectangles)} rectangles from {txt_path}")

    return report.rectangles


def verify_yolo_annotations(image_path: str) -> tuple[bool, list[str]]:
    """
    Verify the annotation file of an image.

    Only the line format is checked; coordinates outside [0, 1] are
    accepted. A missing file is valid (no annotations).

    Args:
        image_path: Path to the image whose annotation file is checked

    Returns:
        Tuple of (is_valid, list of error messages)

    Raises:
        UnsupportedImageFormat: if the image extension is not supported
        FileReadFailure: if the annotation file exists but cannot be read
    """
    txt_path = annotation_path_for(image_path)
    if not os.path.exists(txt_path):
        return True, []

    # Dimensions only scale coordinates, which are not checked here
    report = parse_yolo_text(read_annotation_file(txt_path), 1, 1)
    name = os.path.basename(txt_path)
    errors = [
        f"{name}:{issue.line_number}: invalid {issue.field}: {issue.reason}"
        for issue in report.issues
    ]
    return report.is_clean, errors
