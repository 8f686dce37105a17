import httpx
import pytest

from app.models import MetadataStatus
from app.services.metadata import MetadataClient

API_URL = "https://www.googleapis.com/youtube/v3/videos"


def _video_item(thumbnails=None):
    if thumbnails is None:
        thumbnails = {
            "default": {"url": "https://i.ytimg.com/vi/dQw4w9WgXcQ/default.jpg"},
            "high": {"url": "https://i.ytimg.com/vi/dQw4w9WgXcQ/hqdefault.jpg"},
        }
    return {
        "kind": "youtube#video",
        "id": "dQw4w9WgXcQ",
        "snippet": {
            "title": "Never Gonna Give You Up",
            "channelTitle": "Rick Astley",
            "thumbnails": thumbnails,
        },
        "contentDetails": {"duration": "PT3M33S"},
    }


def _client(handler):
    http_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return MetadataClient(api_key="test-key", api_url=API_URL, http_client=http_client)


@pytest.mark.asyncio
async def test_found_video_is_mapped():
    requests = []

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        return httpx.Response(200, json={"items": [_video_item()]})

    lookup = await _client(handler).fetch_metadata("dQw4w9WgXcQ")

    assert lookup.status == MetadataStatus.FOUND
    assert lookup.metadata.title == "Never Gonna Give You Up"
    assert lookup.metadata.channel_title == "Rick Astley"
    assert lookup.metadata.duration == "PT3M33S"
    assert lookup.metadata.thumbnail_url.endswith("hqdefault.jpg")

    params = requests[0].url.params
    assert params["id"] == "dQw4w9WgXcQ"
    assert params["key"] == "test-key"
    assert params["part"] == "snippet,contentDetails"


@pytest.mark.asyncio
async def test_thumbnail_falls_back_to_smaller_sizes():
    item = _video_item(thumbnails={"default": {"url": "https://i.ytimg.com/default.jpg"}})

    def handler(request):
        return httpx.Response(200, json={"items": [item]})

    lookup = await _client(handler).fetch_metadata("dQw4w9WgXcQ")
    assert lookup.metadata.thumbnail_url == "https://i.ytimg.com/default.jpg"


@pytest.mark.asyncio
async def test_empty_items_is_not_found():
    def handler(request):
        return httpx.Response(200, json={"kind": "youtube#videoListResponse", "items": []})

    client = _client(handler)
    lookup = await client.fetch_metadata("aaaaaaaaaaa")

    assert lookup.status == MetadataStatus.NOT_FOUND
    assert await client.get_video_metadata("aaaaaaaaaaa") is None


@pytest.mark.asyncio
async def test_http_error_is_transport_error():
    def handler(request):
        return httpx.Response(403, json={"error": {"message": "API key not valid"}})

    client = _client(handler)
    lookup = await client.fetch_metadata("dQw4w9WgXcQ")

    assert lookup.status == MetadataStatus.TRANSPORT_ERROR
    assert lookup.error == "HTTP 403"
    assert await client.get_video_metadata("dQw4w9WgXcQ") is None


@pytest.mark.asyncio
async def test_network_failure_is_swallowed():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    lookup = await _client(handler).fetch_metadata("dQw4w9WgXcQ")

    assert lookup.status == MetadataStatus.TRANSPORT_ERROR
    assert "connection refused" in lookup.error


@pytest.mark.asyncio
async def test_malformed_payload_is_transport_error():
    def handler(request):
        return httpx.Response(200, content=b"<html>not json</html>")

    lookup = await _client(handler).fetch_metadata("dQw4w9WgXcQ")
    assert lookup.status == MetadataStatus.TRANSPORT_ERROR


@pytest.mark.asyncio
async def test_item_without_snippet_is_transport_error():
    def handler(request):
        return httpx.Response(200, json={"items": [{"id": "dQw4w9WgXcQ"}]})

    lookup = await _client(handler).fetch_metadata("dQw4w9WgXcQ")
    assert lookup.status == MetadataStatus.TRANSPORT_ERROR
