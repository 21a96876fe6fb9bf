"""
yolobox HTTP entry point.

Serves the YOLO annotation commands (export one image, export a batch,
read back an image's boxes) to the labeling frontend under /api/yolo.

Run with:
    python backend/main.py
"""

import sys
import logging
import traceback
from pathlib import Path

# Allow running as a script from a source checkout
sys.path.insert(0, str(Path(__file__).parent.parent))

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager

import yolobox
from backend.config import CORS_ORIGINS, API_HOST, API_PORT, LOG_LEVEL
from backend.api import yolo

logging.basicConfig(
    level=LOG_LEVEL, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Log the annotation service start and stop."""
    logger.info(f"yolobox API {yolobox.__version__} ready (log level {LOG_LEVEL})")
    yield
    logger.info("yolobox API stopped")


app = FastAPI(
    title="yolobox API",
    description="Export rectangles drawn on images to YOLO text files and load them back",
    version=yolobox.__version__,
    lifespan=lifespan,
)


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Turn unexpected codec failures into a JSON error the frontend can show."""
    logger.error(f"Annotation request {request.method} {request.url.path} failed:")
    logger.error(traceback.format_exc())
    return JSONResponse(status_code=500, content={"detail": str(exc)})


# The desktop frontend runs on the Vite dev server origin
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(yolo.router, prefix="/api/yolo", tags=["YOLO"])


@app.get("/api/health")
async def health_check():
    """Report that the annotation service is up."""
    return {"status": "healthy", "service": "yolobox-api", "version": yolobox.__version__}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=API_HOST, port=API_PORT)
