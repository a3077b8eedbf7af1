"""
Video Lister Service
Pages through search.list for every video of a channel.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Optional

from ..errors import ResponseShapeError
from .youtube_client import YouTubeClient

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SearchPage:
    """One page of search results."""
    page_number: int
    items: List[Dict[str, Any]] = field(default_factory=list)
    next_page_token: Optional[str] = None


class VideoLister:
    """
    Service responsible for listing all videos of a channel.

    Responsibilities:
    - Produce search pages lazily, following nextPageToken.
    - Stop at the last page, or at the optional page ceiling.
    - Accumulate result items in arrival order.
    """

    def __init__(self, youtube_client: YouTubeClient, max_pages: Optional[int] = None):
        self._client = youtube_client
        self._max_pages = max_pages

    def iter_pages(self, channel_id: str) -> Iterator[SearchPage]:
        """
        Yields search pages one at a time.

        A request is only issued when the next page is pulled. Errors are
        raised from the pull that triggered them and end the sequence.
        """
        page_token: Optional[str] = None
        page_number = 0

        while True:
            if self._max_pages is not None and page_number >= self._max_pages:
                logger.warning(f"Page limit of {self._max_pages} reached, stopping early")
                return

            response = self._client.search_channel_videos(channel_id, page_token)
            page_number += 1

            items = response.get("items") or []
            if not isinstance(items, list):
                raise ResponseShapeError(
                    f"Page {page_number}: 'items' must be a list, got {type(items).__name__}"
                )

            next_token = response.get("nextPageToken")
            if not isinstance(next_token, str) or not next_token:
                next_token = None

            logger.info(f"Fetched page {page_number}: {len(items)} videos")
            yield SearchPage(page_number=page_number, items=items, next_page_token=next_token)

            if next_token is None:
                return
            page_token = next_token

    def list_videos(self, channel_id: str) -> List[Dict[str, Any]]:
        """
        Retrieves every search result item for the channel.

        Returns:
            List of raw items, newest first. Nothing is returned if any page fails.
        """
        logger.info(f"Listing videos for channel: {channel_id}")
        videos: List[Dict[str, Any]] = []
        for page in self.iter_pages(channel_id):
            videos.extend(page.items)
        return videos
