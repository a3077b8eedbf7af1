"""
YouTube API Client
Resolves channel handles and issues paged search requests.
"""

import logging
from typing import Any, Dict, Optional
import httplib2
from googleapiclient.discovery import build
from googleapiclient.errors import HttpError

from ..errors import ApiError, ChannelNotFoundError, ResponseShapeError, TransportError

logger = logging.getLogger(__name__)

MAX_RESULTS_PER_PAGE = 50


class YouTubeClient:
    """
    Thin YouTube Data API v3 client.

    Every call either returns the decoded JSON body or raises one of the
    errors from ``core.errors``.
    """

    def __init__(self, api_key: str, service: Optional[Any] = None):
        """Initialize the YouTube API service (or use an injected one)."""
        if service is None:
            # static_discovery=False prevents the 'file_cache' warning in logs
            try:
                service = build('youtube', 'v3', developerKey=api_key, static_discovery=False)
            except HttpError as e:
                raise _transport_error(e, "Unable to load the YouTube API") from e
            except (httplib2.HttpLib2Error, OSError) as e:
                raise _connection_error(e, "Unable to load the YouTube API") from e
        self._service = service

    def resolve_channel_id(self, handle: str) -> str:
        """Uses channels().list(forHandle=...) to map a handle to its channel ID."""
        logger.info(f"Resolving channel handle: {handle}")
        response = self._execute(
            self._service.channels().list(part="id", forHandle=handle),
            "Unable to fetch Channel ID"
        )

        items = response.get("items")
        if not isinstance(items, list) or not items:
            raise ChannelNotFoundError(handle)

        first = items[0]
        channel_id = first.get("id") if isinstance(first, dict) else None
        if not isinstance(channel_id, str) or not channel_id:
            raise ResponseShapeError(f"Channel item for {handle} has no 'id': {first!r}")

        logger.info(f"Channel ID: {channel_id}")
        return channel_id

    def search_channel_videos(self, channel_id: str, page_token: Optional[str] = None) -> Dict[str, Any]:
        """Low-level API call to search.list, newest videos first."""
        return self._execute(
            self._service.search().list(
                channelId=channel_id,
                part="snippet,id",
                order="date",
                maxResults=MAX_RESULTS_PER_PAGE,
                type="video",
                pageToken=page_token or None
            ),
            "Unable to fetch videos"
        )

    def _execute(self, request: Any, failure_message: str) -> Dict[str, Any]:
        """Runs a prepared request and checks the response for errors."""
        try:
            response = request.execute()
        except HttpError as e:
            raise _transport_error(e, failure_message) from e
        except (httplib2.HttpLib2Error, OSError) as e:
            raise _connection_error(e, failure_message) from e

        if not isinstance(response, dict):
            raise ResponseShapeError(f"Expected a JSON object, got {type(response).__name__}")

        if "error" in response:
            logger.error(f"Error: {response['error']}")
            raise ApiError(response["error"])

        return response


def _decode_body(content: Any) -> str:
    if isinstance(content, bytes):
        return content.decode("utf-8", errors="replace")
    return str(content or "")


def _transport_error(e: HttpError, failure_message: str) -> TransportError:
    status = e.resp.status
    body = _decode_body(e.content)
    logger.error(f"{failure_message}. API request failed with status {status}")
    logger.error(f"Response Body: {body}")
    return TransportError(status, body)


def _connection_error(e: Exception, failure_message: str) -> TransportError:
    # DNS, connection and timeout failures never produce an HTTP status
    logger.error(f"{failure_message}. Could not reach the API: {e}")
    return TransportError(None, str(e))
