"""
Shared pytest fixtures and configuration.
"""
import pytest
from unittest.mock import AsyncMock, MagicMock

from app.main import app
from app.api.dependencies import get_video_pipeline
from app.core.providers.llm_provider import LLMProvider, LLMResponse
from app.models import MetadataLookup, TranscriptSegment, VideoMetadata
from app.services.metadata import MetadataClient
from app.services.pipeline import VideoPipeline
from app.services.summarization import SummarizationService
from app.services.transcript import TranscriptClient


@pytest.fixture
def sample_metadata():
    """Metadata as returned by the catalog for the sample video."""
    return VideoMetadata(
        title="Never Gonna Give You Up",
        channel_title="Rick Astley",
        duration="PT3M33S",
        thumbnail_url="https://i.ytimg.com/vi/dQw4w9WgXcQ/hqdefault.jpg",
    )


@pytest.fixture
def sample_transcript():
    return [
        TranscriptSegment(text="We're no strangers to love", offset_ms=18800, duration_ms=3600),
        TranscriptSegment(text="You know the rules and so do I", offset_ms=22400, duration_ms=4000),
    ]


@pytest.fixture
def mock_metadata_client(sample_metadata):
    client = AsyncMock(spec=MetadataClient)
    client.fetch_metadata.return_value = MetadataLookup.found(sample_metadata)
    return client


@pytest.fixture
def mock_transcript_client(sample_transcript):
    client = AsyncMock(spec=TranscriptClient)
    client.fetch_transcript.return_value = sample_transcript
    return client


@pytest.fixture
def mock_llm_provider():
    provider = AsyncMock(spec=LLMProvider)
    provider.model_name = "test-model"
    provider.generate_text.return_value = LLMResponse(
        content="Mocked Summary Content", model="test-model"
    )
    return provider


@pytest.fixture
def pipeline(mock_metadata_client, mock_transcript_client, mock_llm_provider):
    """A real VideoPipeline wired to mocked external clients."""
    return VideoPipeline(
        metadata_client=mock_metadata_client,
        transcript_client=mock_transcript_client,
        summarization_service=SummarizationService(llm_provider=mock_llm_provider),
    )


@pytest.fixture
def override_dependencies(pipeline):
    """Override FastAPI dependencies for testing."""
    def override_get_video_pipeline():
        return pipeline

    app.dependency_overrides[get_video_pipeline] = override_get_video_pipeline

    yield

    # Clean up
    app.dependency_overrides.clear()


@pytest.fixture
def mock_pipeline():
    """A fully mocked VideoPipeline for endpoint-only tests."""
    mocked = MagicMock(spec=VideoPipeline)
    mocked.process = AsyncMock()
    app.dependency_overrides[get_video_pipeline] = lambda: mocked
    yield mocked
    app.dependency_overrides.clear()
