"""
Custom exception classes and JSON error handling.

Every pipeline failure is mapped to one of these exceptions and rendered as
``{"error": ...}`` or, for unexpected failures, ``{"error": ..., "details": ...}``.
"""
from typing import Optional

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from loguru import logger

from app.models.api import ErrorResponse


PROCESSING_ERROR_MESSAGE = "An error occurred processing the video"


class AppException(Exception):
    """Base application exception."""
    
    def __init__(
        self,
        status_code: int,
        error: str,
        details: Optional[str] = None,
    ):
        self.status_code = status_code
        self.error = error
        self.details = details
        super().__init__(details or error)


class InvalidInputError(AppException):
    """Missing or unparseable video reference."""
    
    def __init__(self, error: str = "Invalid YouTube URL"):
        super().__init__(status_code=400, error=error)


class VideoNotFoundError(AppException):
    """Catalog lookup returned no video (or the API key was rejected)."""
    
    def __init__(self, video_id: str):
        self.video_id = video_id
        super().__init__(
            status_code=404,
            error="Video not found or API key invalid",
        )


class TranscriptUnavailableError(AppException):
    """No captions available, or transcript extraction failed."""
    
    def __init__(self, video_id: str, reason: str = "No transcript available"):
        self.video_id = video_id
        self.reason = reason
        super().__init__(
            status_code=404,
            error=(
                "No transcript available for this video. "
                "The video may not have captions enabled."
            ),
        )

    def __str__(self) -> str:
        return f"{self.reason} (video {self.video_id})"


class InternalServerError(AppException):
    """Internal server error exception."""
    
    def __init__(self, details: str = "An unexpected error occurred."):
        super().__init__(
            status_code=500,
            error=PROCESSING_ERROR_MESSAGE,
            details=details,
        )


class EmptyTranscriptTextError(InternalServerError):
    """Transcript exists but holds no usable text."""
    
    def __init__(self, details: str = "Transcript text is empty"):
        super().__init__(details=details)


class SummarizationFailedError(InternalServerError):
    """The generative text API call failed."""
    
    def __init__(self, cause: str):
        super().__init__(details=f"Failed to generate summary: {cause}")


def create_error_response(
    status_code: int,
    error: str,
    details: Optional[str] = None,
) -> JSONResponse:
    """Create a JSON error response, omitting ``details`` when absent."""
    body = ErrorResponse(error=error, details=details)
    return JSONResponse(
        status_code=status_code,
        content=body.model_dump(exclude_none=True),
    )


async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
    """Handle AppException and return its JSON body."""
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc}")
    else:
        logger.warning(f"{request.method} {request.url.path} rejected ({exc.status_code}): {exc}")
    return create_error_response(
        status_code=exc.status_code,
        error=exc.error,
        details=exc.details,
    )


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Report malformed request bodies as invalid input."""
    logger.warning(f"Invalid request body for {request.url.path}: {exc.errors()}")
    return create_error_response(status_code=400, error="Invalid request body")


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Map any other exception to a generic 500 with a short diagnostic."""
    logger.opt(exception=exc).error(f"Unhandled error on {request.url.path}")
    return create_error_response(
        status_code=500,
        error=PROCESSING_ERROR_MESSAGE,
        details=str(exc),
    )
