"""
Pydantic models for API request/response schemas.
"""
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel

from app.models.enums import SummaryType
from app.models.youtube import TranscriptSegment, VideoMetadata


class ProcessRequest(BaseModel):
    """Request model for video processing."""

    url: Optional[str] = None
    summary_type: SummaryType = SummaryType.DETAILED

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    @field_validator("summary_type", mode="before")
    @classmethod
    def resolve_summary_type(cls, v: Any) -> SummaryType:
        """Unknown or missing modes fall back to a detailed summary."""
        return SummaryType.parse(v)


class PipelineResult(BaseModel):
    """Response model for a fully processed video."""

    video_id: str
    metadata: VideoMetadata
    transcript: list[TranscriptSegment]
    summary: str

    model_config = ConfigDict(
        frozen=True, alias_generator=to_camel, populate_by_name=True
    )


class HealthResponse(BaseModel):
    """Response model for the health check."""

    status: str

    model_config = ConfigDict(frozen=True)


class ErrorResponse(BaseModel):
    """Error body returned for every failed request."""

    error: str
    details: Optional[str] = None

    model_config = ConfigDict(frozen=True)
