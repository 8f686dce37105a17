"""
Dependency injection factories for FastAPI.

Clients and the LLM provider are built once per process (``lru_cache``) and
handed to the pipeline explicitly. Tests swap them via
``app.dependency_overrides``.
"""
from functools import lru_cache
from fastapi import Depends
from loguru import logger

from app.core.config import settings
from app.core.providers.llm_provider import LLMProvider
from app.core.providers.gemini_provider import GeminiProvider
from app.core.providers.groq_provider import GroqProvider
from app.models.enums import LLMProviderType
from app.services.metadata import MetadataClient
from app.services.transcript import TranscriptClient
from app.services.summarization import SummarizationService
from app.services.pipeline import VideoPipeline


# =============================================================================
# PROVIDER FACTORIES
# =============================================================================

@lru_cache
def get_summary_llm_provider() -> LLMProvider:
    """
    Get LLM provider for summarization.
    
    Default: Gemini (configured in settings.SUMMARY_LLM_PROVIDER)
    """
    provider_type = settings.SUMMARY_LLM_PROVIDER
    
    if provider_type == LLMProviderType.GEMINI:
        if not settings.GEMINI_API_KEY:
            logger.warning("GEMINI_API_KEY is not set - summarization requests will fail")
        return GeminiProvider(
            api_key=settings.GEMINI_API_KEY,
            model_name=settings.GEMINI_MODEL_NAME,
        )
    elif provider_type == LLMProviderType.GROQ:
        return GroqProvider(
            api_key=settings.GROQ_API_KEY,
            model_name=settings.GROQ_MODEL_NAME,
        )
    else:
        raise ValueError(f"Unknown LLM provider: {provider_type}")


# =============================================================================
# SERVICE FACTORIES
# =============================================================================

@lru_cache
def get_metadata_client() -> MetadataClient:
    """Get client for the YouTube Data API."""
    if not settings.YOUTUBE_API_KEY:
        logger.warning("YOUTUBE_API_KEY is not set - metadata lookups will fail")
    return MetadataClient(
        api_key=settings.YOUTUBE_API_KEY,
        api_url=settings.YOUTUBE_API_URL,
    )


@lru_cache
def get_transcript_client() -> TranscriptClient:
    """Get client for transcript retrieval."""
    return TranscriptClient()


def get_summarization_service(
    llm_provider: LLMProvider = Depends(get_summary_llm_provider),
) -> SummarizationService:
    """Get summarization service for single-video summaries."""
    return SummarizationService(llm_provider=llm_provider)


def get_video_pipeline(
    metadata_client: MetadataClient = Depends(get_metadata_client),
    transcript_client: TranscriptClient = Depends(get_transcript_client),
    summarization_service: SummarizationService = Depends(get_summarization_service),
) -> VideoPipeline:
    """
    Get the video processing pipeline.
    
    Wires together:
    - MetadataClient for the catalog lookup
    - TranscriptClient for captions
    - SummarizationService for the LLM summary
    """
    return VideoPipeline(
        metadata_client=metadata_client,
        transcript_client=transcript_client,
        summarization_service=summarization_service,
    )
