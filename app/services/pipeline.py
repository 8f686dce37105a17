"""
Request pipeline turning a YouTube reference into a summarized result.

Stages run strictly in order:

1. Identifier extraction
2. Metadata lookup
3. Transcript fetch
4. Text preparation
5. Summarization

The first failing stage short-circuits the request with its own exception;
nothing is returned for a partially processed video.
"""
from typing import Optional

from loguru import logger

from app.core.exceptions import (
    AppException,
    InternalServerError,
    InvalidInputError,
    TranscriptUnavailableError,
    VideoNotFoundError,
)
from app.core.logging import log_stage
from app.models import MetadataStatus, PipelineResult, SummaryType
from app.services.metadata import MetadataClient
from app.services.processor import prepare_transcript_text
from app.services.summarization import SummarizationService
from app.services.transcript import TranscriptClient
from app.services.video_id import extract_video_id


class VideoPipeline:
    """
    Orchestrates metadata, transcript and summary retrieval for one video.

    Holds only injected collaborators; every call is independent.
    """

    def __init__(
        self,
        metadata_client: MetadataClient,
        transcript_client: TranscriptClient,
        summarization_service: SummarizationService,
    ):
        """
        Initialize the VideoPipeline.

        Args:
            metadata_client: Client for the YouTube Data API.
            transcript_client: Client for transcript retrieval.
            summarization_service: Service producing the summary text.
        """
        self.metadata_client = metadata_client
        self.transcript_client = transcript_client
        self.summarization_service = summarization_service

    async def process(
        self,
        url: Optional[str],
        summary_type: SummaryType = SummaryType.DETAILED,
    ) -> PipelineResult:
        """
        Run the full pipeline for one video reference.

        Args:
            url: A YouTube URL or bare video ID.
            summary_type: Summarization mode.

        Returns:
            PipelineResult: Video ID, metadata, transcript and summary.

        Raises:
            InvalidInputError: Missing URL or no recognizable video ID.
            VideoNotFoundError: The catalog lookup did not find the video.
            TranscriptUnavailableError: No transcript could be fetched.
            EmptyTranscriptTextError: The transcript contains no text.
            SummarizationFailedError: The LLM call failed.
            InternalServerError: Any other unexpected failure.
        """
        try:
            return await self._run(url, summary_type)
        except AppException:
            raise
        except Exception as e:
            logger.exception(f"Unexpected pipeline failure: {e}")
            raise InternalServerError(str(e) or type(e).__name__) from e

    async def _run(self, url: Optional[str], summary_type: SummaryType) -> PipelineResult:
        logger.info(f"Processing URL: {url!r} (summary type: {summary_type.value})")

        if not url or not url.strip():
            raise InvalidInputError("YouTube URL is required")

        with log_stage("extract_video_id"):
            video_id = extract_video_id(url)
            if not video_id:
                raise InvalidInputError("Invalid YouTube URL")

        with logger.contextualize(video_id=video_id):
            with log_stage("fetch_metadata"):
                lookup = await self.metadata_client.fetch_metadata(video_id)
                if lookup.status == MetadataStatus.TRANSPORT_ERROR:
                    logger.warning(f"Catalog API unavailable for {video_id}: {lookup.error}")
                if not lookup.is_found or lookup.metadata is None:
                    raise VideoNotFoundError(video_id)
            metadata = lookup.metadata
            logger.info(f"Metadata fetched: {metadata.title}")

            with log_stage("fetch_transcript"):
                transcript = await self.transcript_client.fetch_transcript(video_id)
                if not transcript:
                    raise TranscriptUnavailableError(video_id, reason="Empty transcript")

            with log_stage("prepare_text"):
                text = prepare_transcript_text(transcript)

            with log_stage("summarize", summary_type=summary_type.value):
                summary = await self.summarization_service.summarize(text, summary_type)

        logger.info(f"Summary generated successfully for {video_id}")
        return PipelineResult(
            video_id=video_id,
            metadata=metadata,
            transcript=transcript,
            summary=summary,
        )
