"""
Metadata lookup against the YouTube Data API v3.
"""
from typing import Optional

import httpx
from loguru import logger
from pydantic import ValidationError

from app.core.constants import YouTubeConfig
from app.models import ApiVideoListResponse, MetadataLookup, VideoMetadata


class MetadataClient:
    """
    Fetches title, channel, duration and thumbnail of a single video.

    Failures never raise: they come back as a tagged ``MetadataLookup`` so the
    caller can tell a missing video from a failing API.
    """

    def __init__(
        self,
        api_key: Optional[str],
        api_url: str,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        """
        Initialize the MetadataClient.

        Args:
            api_key: YouTube Data API key.
            api_url: Endpoint of the ``videos`` resource.
            http_client: Optional shared client; a short-lived one is used otherwise.
        """
        self.api_key = api_key
        self.api_url = api_url
        self.http_client = http_client

    async def _request(self, video_id: str) -> dict:
        params = {
            "part": YouTubeConfig.METADATA_PARTS,
            "id": video_id,
            "key": self.api_key or "",
        }
        if self.http_client is not None:
            response = await self.http_client.get(self.api_url, params=params)
        else:
            async with httpx.AsyncClient() as client:
                response = await client.get(self.api_url, params=params)
        response.raise_for_status()
        return response.json()

    async def fetch_metadata(self, video_id: str) -> MetadataLookup:
        """
        Look up a video in the catalog.

        Args:
            video_id: The 11-character video ID.

        Returns:
            MetadataLookup: found (with metadata), not_found, or transport_error.
        """
        try:
            payload = await self._request(video_id)
            data = ApiVideoListResponse.model_validate(payload)
        except httpx.HTTPStatusError as e:
            logger.warning(
                f"Metadata request for {video_id} failed with HTTP {e.response.status_code}"
            )
            return MetadataLookup.transport_error(f"HTTP {e.response.status_code}")
        except (httpx.HTTPError, ValueError, ValidationError) as e:
            logger.warning(f"Error fetching metadata for {video_id}: {e}")
            return MetadataLookup.transport_error(str(e) or type(e).__name__)

        if not data.items:
            logger.info(f"No catalog entry for video {video_id}")
            return MetadataLookup.not_found()

        item = data.items[0]
        thumbnail_url = ""
        for size in YouTubeConfig.THUMBNAIL_PREFERENCE:
            if size in item.snippet.thumbnails:
                thumbnail_url = item.snippet.thumbnails[size].url
                break

        return MetadataLookup.found(
            VideoMetadata(
                title=item.snippet.title,
                channel_title=item.snippet.channelTitle,
                duration=item.contentDetails.duration,
                thumbnail_url=thumbnail_url,
            )
        )

    async def get_video_metadata(self, video_id: str) -> Optional[VideoMetadata]:
        """Nullable view of ``fetch_metadata``: None unless the video was found."""
        lookup = await self.fetch_metadata(video_id)
        return lookup.metadata if lookup.is_found else None
