#!/usr/bin/env python
"""
Verify and print the YOLO annotations of an image.

Usage:
    python scripts/verify_yolo.py <image> [--width W --height H]

The image size is read from the image file when not given.
"""

import sys
import argparse
from pathlib import Path

# Add parent to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from PIL import Image

from yolobox.errors import AnnotationError
from yolobox.import_yolo import read_yolo_annotations, verify_yolo_annotations
from yolobox.paths import annotation_path_for


def main():
    parser = argparse.ArgumentParser(description="Verify the YOLO annotations of an image")
    parser.add_argument("image", help="Path to a .jpg, .jpeg or .png image")
    parser.add_argument("--width", type=int, help="Image width (default: read from image)")
    parser.add_argument("--height", type=int, help="Image height (default: read from image)")

    args = parser.parse_args()

    try:
        txt_path = annotation_path_for(args.image)
        if args.width is None or args.height is None:
            with Image.open(args.image) as img:
                width, height = img.size
        else:
            width, height = args.width, args.height

        is_valid, errors = verify_yolo_annotations(args.image)
        rectangles = read_yolo_annotations(args.image, width, height)
    except (AnnotationError, OSError) as e:
        print(f"✗ {e}")
        sys.exit(1)

    print(f"Annotations: {txt_path} ({width}x{height})")
    print("-" * 50)

    for rect in rectangles:
        print(
            f"  {rect.id}: class={rect.class_id:.0f} x={rect.x:.1f} y={rect.y:.1f} "
            f"w={rect.width:.1f} h={rect.height:.1f}"
        )

    if is_valid:
        print(f"✓ {len(rectangles)} annotations, all lines valid")
        sys.exit(0)
    else:
        print(f"✗ Skipped {len(errors)} invalid line(s):\n")
        for error in errors[:20]:  # Limit output
            print(f"  - {error}")
        if len(errors) > 20:
            print(f"  ... and {len(errors) - 20} more errors")
        sys.exit(1)


if __name__ == "__main__":
    main()
