"""
YOLO annotation API endpoints
"""

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, ConfigDict, Field
from typing import Optional

from yolobox.errors import UnsupportedImageFormat, FileReadFailure
from yolobox.export_yolo import export_rectangles_to_yolo, export_all_rectangles_to_yolo
from yolobox.import_yolo import read_yolo_annotations
from yolobox.models import (
    Rectangle, ExportRequest, ExportResult, BatchExportResult,
    DEFAULT_FILL, DEFAULT_STROKE, DEFAULT_STROKE_WIDTH,
)

router = APIRouter()


class RectangleModel(BaseModel):
    """Rectangle as exchanged with the frontend (camelCase keys)."""
    model_config = ConfigDict(populate_by_name=True)

    id: str
    x: float
    y: float
    width: float
    height: float
    fill: str = DEFAULT_FILL
    stroke: str = DEFAULT_STROKE
    stroke_width: float = Field(DEFAULT_STROKE_WIDTH, alias="strokeWidth")
    draggable: bool = True
    class_id: Optional[float] = Field(None, alias="classId")  # Falls back to request classId

    @classmethod
    def from_rectangle(cls, rect: Rectangle) -> 'RectangleModel':
        return cls(
            id=rect.id,
            x=rect.x,
            y=rect.y,
            width=rect.width,
            height=rect.height,
            fill=rect.fill,
            stroke=rect.stroke,
            stroke_width=rect.stroke_width,
            draggable=rect.draggable,
            class_id=rect.class_id,
        )

    def to_rectangle(self, default_class_id: float) -> Rectangle:
        return Rectangle(
            id=self.id,
            x=self.x,
            y=self.y,
            width=self.width,
            height=self.height,
            fill=self.fill,
            stroke=self.stroke,
            stroke_width=self.stroke_width,
            draggable=self.draggable,
            class_id=default_class_id if self.class_id is None else self.class_id,
        )


class YoloExportRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    image_path: str = Field(alias="imagePath")
    rectangles: list[RectangleModel] = []
    image_width: int = Field(alias="imageWidth", ge=0)
    image_height: int = Field(alias="imageHeight", ge=0)
    class_id: float = Field(0.0, alias="classId")

    def to_export_request(self) -> ExportRequest:
        return ExportRequest(
            image_path=self.image_path,
            rectangles=[r.to_rectangle(self.class_id) for r in self.rectangles],
            image_width=self.image_width,
            image_height=self.image_height,
            class_id=self.class_id,
        )


class BatchExportRequest(BaseModel):
    requests: list[YoloExportRequest]


class ReadAnnotationsRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    image_path: str = Field(alias="imagePath")
    image_width: int = Field(alias="imageWidth", ge=0)
    image_height: int = Field(alias="imageHeight", ge=0)


class ExportResponse(BaseModel):
    success: bool
    message: str
    file_path: Optional[str] = None
    rectangles_processed: int
    errors: list[str]

    @classmethod
    def from_result(cls, result: ExportResult) -> 'ExportResponse':
        return cls(
            success=result.success,
            message=result.message,
            file_path=result.file_path,
            rectangles_processed=result.rectangles_processed,
            errors=result.errors,
        )


class BatchExportResponse(BaseModel):
    total_images: int
    successful_exports: int
    failed_exports: int
    results: list[ExportResponse]
    summary: str

    @classmethod
    def from_result(cls, result: BatchExportResult) -> 'BatchExportResponse':
        return cls(
            total_images=result.total_images,
            successful_exports=result.successful_exports,
            failed_exports=result.failed_exports,
            results=[ExportResponse.from_result(r) for r in result.results],
            summary=result.summary,
        )


@router.post("/export", response_model=ExportResponse)
async def export_rectangles(request: YoloExportRequest):
    """Export one image's rectangles to its YOLO annotation file."""
    result = export_rectangles_to_yolo(request.to_export_request())
    return ExportResponse.from_result(result)


@router.post("/export-all", response_model=BatchExportResponse)
async def export_all_rectangles(request: BatchExportRequest):
    """Export the rectangles of several images."""
    result = export_all_rectangles_to_yolo(
        [r.to_export_request() for r in request.requests]
    )
    return BatchExportResponse.from_result(result)


@router.post("/read", response_model=list[RectangleModel])
async def read_annotations(request: ReadAnnotationsRequest):
    """Load previously exported annotations of an image."""
    try:
        rectangles = read_yolo_annotations(
            request.image_path, request.image_width, request.image_height
        )
    except UnsupportedImageFormat as e:
        raise HTTPException(status_code=400, detail=e.message)
    except FileReadFailure as e:
        raise HTTPException(status_code=500, detail=e.message)

    return [RectangleModel.from_rectangle(r) for r in rectangles]
