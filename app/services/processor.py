from typing import Sequence

from loguru import logger

from app.core.constants import TranscriptConfig
from app.core.exceptions import EmptyTranscriptTextError
from app.models import TranscriptSegment


def join_transcript_text(transcript: Sequence[TranscriptSegment]) -> str:
    """
    Concatenates segment texts in order, separated by a single space.
    Empty or whitespace-only segments are skipped; other texts are kept as-is.
    """
    return TranscriptConfig.SEGMENT_SEPARATOR.join(
        seg.text for seg in transcript if seg.text and seg.text.strip()
    )


def truncate_text(text: str, max_chars: int = TranscriptConfig.MAX_CHARS) -> str:
    """Cut text to ``max_chars`` and append the truncation marker when it is longer."""
    if len(text) <= max_chars:
        return text
    return text[:max_chars] + TranscriptConfig.TRUNCATION_MARKER


def prepare_transcript_text(transcript: Sequence[TranscriptSegment]) -> str:
    """
    Formats a transcript into a single string sized for the LLM input window.

    Args:
        transcript: Chronologically ordered transcript segments.

    Returns:
        The continuous transcript text, truncated to TranscriptConfig.MAX_CHARS
        plus the truncation marker if needed.

    Raises:
        EmptyTranscriptTextError: If the segments contain no usable text.
    """
    full_text = join_transcript_text(transcript)
    logger.info(f"Full text length: {len(full_text)}")

    if not full_text:
        raise EmptyTranscriptTextError()

    prepared = truncate_text(full_text)
    if prepared is not full_text:
        logger.info(
            f"Transcript truncated from {len(full_text)} to {TranscriptConfig.MAX_CHARS} characters"
        )
    return prepared
