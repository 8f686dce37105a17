from typing import Optional
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from app.models.enums import MetadataStatus

# --- Internal Parsing Models (YouTube Data API v3) ---

class ApiThumbnail(BaseModel):
    url: str

    model_config = ConfigDict(extra='ignore')

class ApiSnippet(BaseModel):
    title: str = ""
    channelTitle: str = ""
    thumbnails: dict[str, ApiThumbnail] = Field(default_factory=dict)

    model_config = ConfigDict(extra='ignore')

class ApiContentDetails(BaseModel):
    duration: str = ""

    model_config = ConfigDict(extra='ignore')

class ApiVideoItem(BaseModel):
    id: Optional[str] = None
    snippet: ApiSnippet
    contentDetails: ApiContentDetails = Field(default_factory=ApiContentDetails)

    model_config = ConfigDict(extra='ignore')

class ApiVideoListResponse(BaseModel):
    items: list[ApiVideoItem] = Field(default_factory=list)

    model_config = ConfigDict(extra='ignore')

# --- Core Data Models ---

class VideoMetadata(BaseModel):
    title: str
    channel_title: str
    duration: str
    thumbnail_url: str

    model_config = ConfigDict(
        frozen=True, alias_generator=to_camel, populate_by_name=True
    )

class TranscriptSegment(BaseModel):
    text: str
    offset_ms: int = Field(ge=0)
    duration_ms: int = Field(ge=0)

    model_config = ConfigDict(
        frozen=True, alias_generator=to_camel, populate_by_name=True
    )

class MetadataLookup(BaseModel):
    """Tagged result of a metadata fetch: found, not found, or transport error."""
    status: MetadataStatus
    metadata: Optional[VideoMetadata] = None
    error: Optional[str] = None

    model_config = ConfigDict(frozen=True)

    @classmethod
    def found(cls, metadata: VideoMetadata) -> "MetadataLookup":
        return cls(status=MetadataStatus.FOUND, metadata=metadata)

    @classmethod
    def not_found(cls) -> "MetadataLookup":
        return cls(status=MetadataStatus.NOT_FOUND)

    @classmethod
    def transport_error(cls, error: str) -> "MetadataLookup":
        return cls(status=MetadataStatus.TRANSPORT_ERROR, error=error)

    @property
    def is_found(self) -> bool:
        return self.status == MetadataStatus.FOUND
