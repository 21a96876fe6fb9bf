"""
Tests for the YOLO API endpoints.
"""

import pytest
from fastapi.testclient import TestClient

from backend.main import app


@pytest.fixture
def client():
    return TestClient(app)


def rect_payload(**overrides):
    payload = {
        "id": "rect_1",
        "x": 10,
        "y": 20,
        "width": 100,
        "height": 50,
        "fill": "rgba(255, 0, 0, 0.3)",
        "stroke": "#ff0000",
        "strokeWidth": 1.5,
        "draggable": True,
        "classId": 0,
    }
    payload.update(overrides)
    return payload


def test_health(client):
    response = client.get("/api/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"
    assert response.json()["version"] == "0.1.0"


class TestExportEndpoint:
    """Tests for POST /api/yolo/export."""

    def test_export(self, client, image_dir):
        response = client.post("/api/yolo/export", json={
            "imagePath": str(image_dir / "photo.jpg"),
            "rectangles": [rect_payload()],
            "imageWidth": 640,
            "imageHeight": 480,
            "classId": 0,
        })

        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert body["file_path"] == str(image_dir / "photo.txt")
        assert body["rectangles_processed"] == 1
        assert body["errors"] == []
        assert (image_dir / "photo.txt").read_text(encoding="utf-8") == (
            "0 0.093750 0.093750 0.156250 0.104167"
        )

    def test_rectangle_without_class_uses_request_class(self, client, image_dir):
        rect = rect_payload()
        del rect["classId"]

        client.post("/api/yolo/export", json={
            "imagePath": str(image_dir / "photo.png"),
            "rectangles": [rect],
            "imageWidth": 640,
            "imageHeight": 480,
            "classId": 5,
        })

        assert (image_dir / "photo.txt").read_text(encoding="utf-8").startswith("5 ")

    def test_snake_case_fields_accepted(self, client, image_dir):
        response = client.post("/api/yolo/export", json={
            "image_path": str(image_dir / "photo.jpeg"),
            "rectangles": [],
            "image_width": 640,
            "image_height": 480,
        })

        assert response.json()["success"] is True

    def test_unsupported_format_is_a_result(self, client, image_dir):
        response = client.post("/api/yolo/export", json={
            "imagePath": str(image_dir / "photo.bmp"),
            "rectangles": [rect_payload()],
            "imageWidth": 640,
            "imageHeight": 480,
        })

        assert response.status_code == 200
        body = response.json()
        assert body["success"] is False
        assert body["message"] == "Unsupported image format"
        assert body["file_path"] is None

    def test_missing_fields_rejected(self, client):
        response = client.post("/api/yolo/export", json={"rectangles": []})
        assert response.status_code == 422


def test_export_all(client, image_dir):
    def request(name):
        return {
            "imagePath": str(image_dir / name),
            "rectangles": [rect_payload()],
            "imageWidth": 640,
            "imageHeight": 480,
        }

    response = client.post("/api/yolo/export-all", json={
        "requests": [request("a.jpg"), request("b.bmp"), request("c.png")],
    })

    assert response.status_code == 200
    body = response.json()
    assert body["total_images"] == 3
    assert body["successful_exports"] == 2
    assert body["failed_exports"] == 1
    assert body["summary"] == "Exported 2 YOLO annotation files (1 failed)"
    assert [r["success"] for r in body["results"]] == [True, False, True]


class TestReadEndpoint:
    """Tests for POST /api/yolo/read."""

    def test_read(self, client, image_dir):
        (image_dir / "photo.txt").write_text("1 0.5 0.5 0.5 0.5\n", encoding="utf-8")

        response = client.post("/api/yolo/read", json={
            "imagePath": str(image_dir / "photo.jpg"),
            "imageWidth": 200,
            "imageHeight": 100,
        })

        assert response.status_code == 200
        rects = response.json()
        assert len(rects) == 1
        assert rects[0]["id"] == "loaded_rect_0"
        assert rects[0]["x"] == pytest.approx(50)
        assert rects[0]["y"] == pytest.approx(25)
        assert rects[0]["strokeWidth"] == 2.0
        assert rects[0]["classId"] == 1.0
        assert rects[0]["stroke"] == "#007bff"

    def test_read_missing_file(self, client, image_dir):
        response = client.post("/api/yolo/read", json={
            "imagePath": str(image_dir / "photo.jpg"),
            "imageWidth": 640,
            "imageHeight": 480,
        })

        assert response.status_code == 200
        assert response.json() == []

    def test_read_unsupported_format(self, client, image_dir):
        response = client.post("/api/yolo/read", json={
            "imagePath": str(image_dir / "photo.gif"),
            "imageWidth": 640,
            "imageHeight": 480,
        })

        assert response.status_code == 400
        assert response.json()["detail"] == "Unsupported image format"

    def test_read_failure(self, client, image_dir):
        (image_dir / "photo.txt").mkdir()

        response = client.post("/api/yolo/read", json={
            "imagePath": str(image_dir / "photo.jpg"),
            "imageWidth": 640,
            "imageHeight": 480,
        })

        assert response.status_code == 500
        assert response.json()["detail"].startswith("Failed to read annotation file")

    def test_export_then_read(self, client, image_dir):
        client.post("/api/yolo/export", json={
            "imagePath": str(image_dir / "photo.jpg"),
            "rectangles": [rect_payload(classId=2)],
            "imageWidth": 640,
            "imageHeight": 480,
        })

        rects = client.post("/api/yolo/read", json={
            "imagePath": str(image_dir / "photo.jpg"),
            "imageWidth": 640,
            "imageHeight": 480,
        }).json()

        assert rects[0]["x"] == pytest.approx(10, abs=640e-6)
        assert rects[0]["height"] == pytest.approx(50, abs=480e-6)
        assert rects[0]["classId"] == 2.0
