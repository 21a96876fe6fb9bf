#!/usr/bin/env python
"""
Export rectangles of several images to YOLO annotation files.

The input is a JSON list of export requests in the frontend format:

    [{"imagePath": "img/a.jpg", "imageWidth": 640, "imageHeight": 480,
      "classId": 0, "rectangles": [{"id": "r1", "x": 10, "y": 20,
      "width": 100, "height": 50}]}]

Usage:
    python scripts/export_yolo.py <requests.json> [--verbose]
"""

import sys
import logging
import argparse
from pathlib import Path

# Add parent to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from pydantic import TypeAdapter, ValidationError

from backend.api.yolo import YoloExportRequest
from yolobox.export_yolo import export_all_rectangles_to_yolo


def main():
    parser = argparse.ArgumentParser(description="Export rectangles to YOLO annotation files")
    parser.add_argument("requests_file", help="JSON file with a list of export requests")
    parser.add_argument("--verbose", action="store_true", help="Log every converted rectangle")

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        payload = Path(args.requests_file).read_text(encoding="utf-8")
        requests = TypeAdapter(list[YoloExportRequest]).validate_json(payload)
    except (OSError, ValidationError) as e:
        print(f"✗ Could not load requests: {e}")
        sys.exit(1)

    print(f"Exporting {len(requests)} images from {args.requests_file}")
    print("-" * 50)

    report = export_all_rectangles_to_yolo([r.to_export_request() for r in requests])

    for request, result in zip(requests, report.results):
        if result.success:
            print(f"  ✓ {result.file_path} ({result.rectangles_processed} rectangles)")
        else:
            print(f"  ✗ {request.image_path}: {result.message}")

    print(f"\n{report.summary}")

    if not report.all_succeeded:
        sys.exit(1)


if __name__ == "__main__":
    main()
