"""
Application-wide constants and configuration limits.
"""

class TranscriptConfig:
    """Configuration for transcript text preparation."""
    MAX_CHARS = 100_000  # Input safety limit for the summarization model
    TRUNCATION_MARKER = "..."
    SEGMENT_SEPARATOR = " "


class SummaryConfig:
    """Configuration for the summarization call."""
    MAX_OUTPUT_TOKENS = 1500
    TEMPERATURE = 0.4


class YouTubeConfig:
    """Configuration for the YouTube Data API lookup."""
    METADATA_PARTS = "snippet,contentDetails"
    THUMBNAIL_PREFERENCE = ("high", "medium", "default")
    VIDEO_ID_LENGTH = 11
