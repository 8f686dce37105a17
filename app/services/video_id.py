"""
Video identifier extraction from user supplied YouTube references.
"""
import re
from typing import Optional

from app.core.constants import YouTubeConfig

# Exactly VIDEO_ID_LENGTH characters from the ID alphabet, not followed by another one
_ID = r"([A-Za-z0-9_-]{%d})(?![A-Za-z0-9_-])" % YouTubeConfig.VIDEO_ID_LENGTH

# Tried in order; the first match wins
VIDEO_ID_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(
        r"(?:youtube(?:-nocookie)?\.com/"
        # whole query parameters are skipped lazily, so the first v= wins
        r"(?:watch\?(?:[^#\s&]*&)*?v=|embed/|shorts/|live/|v/)"
        r"|youtu\.be/)" + _ID
    ),
    re.compile(r"^" + _ID + r"$"),
)


def extract_video_id(value: Optional[str]) -> Optional[str]:
    """
    Extract the 11-character video ID from a YouTube URL or a bare ID.

    Args:
        value: A watch/short/embed URL or the ID itself.

    Returns:
        The video ID, or None when nothing recognizable was found.
    """
    if not value:
        return None

    candidate = value.strip()
    for pattern in VIDEO_ID_PATTERNS:
        match = pattern.search(candidate)
        if match:
            return match.group(1)
    return None
