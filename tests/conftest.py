from unittest.mock import MagicMock

import pytest

from channel_export.core.youtube import YouTubeClient


@pytest.fixture
def service():
    """MagicMock standing in for build('youtube', 'v3', ...)."""
    return MagicMock()


@pytest.fixture
def client(service):
    return YouTubeClient("test-key", service=service)
