from .youtube import VideoMetadata, TranscriptSegment, MetadataLookup, ApiVideoListResponse
from .api import ProcessRequest, PipelineResult, HealthResponse, ErrorResponse
from .enums import LLMRole, LLMProviderType, SummaryType, MetadataStatus
