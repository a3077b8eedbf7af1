"""
YouTube API integration module
"""

from .video_lister import SearchPage, VideoLister
from .video_record import VideoRecord
from .youtube_client import YouTubeClient

__all__ = ["SearchPage", "VideoLister", "VideoRecord", "YouTubeClient"]
