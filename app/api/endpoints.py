"""
API endpoints for video processing and health checks.
"""
from fastapi import APIRouter, Depends
from typing import Optional
from loguru import logger
import time

from app.models.api import (
    ErrorResponse,
    HealthResponse,
    PipelineResult,
    ProcessRequest,
)
from app.services.pipeline import VideoPipeline
from app.api.dependencies import get_video_pipeline


router = APIRouter()


@router.post(
    "/process",
    response_model=PipelineResult,
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
async def process_video(
    payload: Optional[ProcessRequest] = None,
    pipeline: VideoPipeline = Depends(get_video_pipeline),
):
    """
    Fetches metadata and transcript of a YouTube video and summarizes it.

    Args:
        payload: The request body containing the URL and summary type.
            A missing body is treated like an empty one.
        pipeline: The pipeline handling the business logic.

    Returns:
        PipelineResult: Video ID, metadata, transcript segments and summary.
    """
    if payload is None:
        payload = ProcessRequest()
    logger.info(f"Incoming request for URL: {payload.url}")

    start_time = time.perf_counter()
    result = await pipeline.process(payload.url, payload.summary_type)
    duration = time.perf_counter() - start_time
    logger.info(f"Video processed in {duration:.2f}s")
    return result


@router.get("/health", response_model=HealthResponse)
async def health_check():
    """Health check endpoint."""
    return HealthResponse(status="Server is running")
