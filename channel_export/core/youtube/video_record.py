"""
Video Record Domain Model
One CSV row per search result item.
"""

from dataclasses import dataclass, asdict
from typing import Any, Dict


@dataclass(frozen=True)
class VideoRecord:
    """
    Flat view of a single search result item.
    Every field is a string; missing values are empty strings.
    """
    video_id: str
    title: str
    description: str
    published_at: str

    @classmethod
    def from_search_item(cls, item: Dict[str, Any]) -> "VideoRecord":
        """Extract the exported fields from a raw search.list item."""
        snippet = item.get("snippet")
        if not isinstance(snippet, dict):
            snippet = {}
        item_id = item.get("id")
        if not isinstance(item_id, dict):
            item_id = {}

        return cls(
            video_id=_as_text(item_id.get("videoId")),
            title=_as_text(snippet.get("title")),
            description=_as_text(snippet.get("description")),
            published_at=_as_text(snippet.get("publishedAt"))
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert object to dictionary for serialization (e.g., CSV)."""
        return asdict(self)


def _as_text(value: Any) -> str:
    return value if isinstance(value, str) else ""
