"""
YouTube transcript service built on youtube-transcript-api.
"""
import asyncio
from typing import Any, Iterable, List

from youtube_transcript_api import YouTubeTranscriptApi
from loguru import logger

from app.core.exceptions import TranscriptUnavailableError
from app.models import TranscriptSegment


def _to_ms(seconds: float) -> int:
    return max(0, int(round(seconds * 1000)))


def normalize_segments(raw_transcript: Iterable[Any]) -> List[TranscriptSegment]:
    """
    Convert youtube-transcript-api snippets (seconds) into TranscriptSegments (ms).

    Order is preserved.
    """
    return [
        TranscriptSegment(
            text=item.text,
            offset_ms=_to_ms(item.start),
            duration_ms=_to_ms(item.duration),
        )
        for item in raw_transcript
    ]


class TranscriptClient:
    """
    Client for fetching the transcript of a single YouTube video.

    A fresh youtube-transcript-api client is created for every call, so
    concurrent requests never share client state.
    """

    def _fetch_sync(self, video_id: str):
        """
        Blocking helper: list the video's transcripts, then fetch one.

        Prioritizes Manual subtitles (any lang) > Automatic captions (any lang).
        """
        transcript_list = YouTubeTranscriptApi().list(video_id)

        # Priority 1: Manual Subtitles (Any Language)
        for t in transcript_list:
            if not t.is_generated:
                logger.info(f"Video {video_id}: Using Manual transcript in '{t.language}'")
                return t.fetch()

        # Priority 2: Automatic Captions (Any Language)
        for t in transcript_list:
            if t.is_generated:
                logger.info(f"Video {video_id}: Using Automatic transcript in '{t.language}'")
                return t.fetch()

        raise LookupError(f"No transcript tracks listed for video {video_id}")

    async def fetch_transcript(self, video_id: str) -> List[TranscriptSegment]:
        """
        Fetch and normalize the transcript of a video.

        The blocking client runs in a thread pool to keep the event loop free.

        Args:
            video_id: The 11-character video ID.

        Returns:
            The non-empty, chronologically ordered list of segments.

        Raises:
            TranscriptUnavailableError: On any failure, or when the transcript is empty.
        """
        try:
            raw_transcript = await asyncio.to_thread(self._fetch_sync, video_id)
            segments = normalize_segments(raw_transcript)
        except Exception as e:
            logger.warning(f"Transcript fetch error for {video_id}: {type(e).__name__}: {e}")
            raise TranscriptUnavailableError(video_id, reason=type(e).__name__) from e

        if not segments:
            logger.warning(f"Transcript for {video_id} has no segments")
            raise TranscriptUnavailableError(video_id, reason="Empty transcript")

        logger.info(f"Transcript items fetched for {video_id}: {len(segments)}")
        return segments
