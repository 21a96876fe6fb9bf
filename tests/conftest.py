"""
Shared fixtures for yolobox tests.
"""

import pytest

from yolobox.models import Rectangle, ExportRequest


@pytest.fixture
def image_dir(tmp_path):
    """Directory that plays the role of an image folder."""
    d = tmp_path / "images"
    d.mkdir()
    return d


@pytest.fixture
def sample_rect():
    """A 100x50 box at (10, 20)."""
    return Rectangle(id="rect_1", x=10, y=20, width=100, height=50, class_id=0)


@pytest.fixture
def make_request(image_dir):
    """Factory for export requests on a 640x480 image inside image_dir."""
    def _make(name="photo.jpg", rectangles=None, width=640, height=480, class_id=0.0):
        return ExportRequest(
            image_path=str(image_dir / name),
            rectangles=rectangles or [],
            image_width=width,
            image_height=height,
            class_id=class_id,
        )
    return _make
