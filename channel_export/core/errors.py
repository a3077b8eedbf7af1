"""
Export Error Taxonomy
Every failure of the resolve -> list -> write flow is one of these.
"""

from pathlib import Path
from typing import Any, Optional


class ChannelExportError(Exception):
    """Base class for all export failures."""
    pass


class TransportError(ChannelExportError):
    """The API answered with a non-success HTTP status, or could not be reached at all."""

    def __init__(self, status: Optional[int], body: str = ""):
        self.status = status
        self.body = body
        if status is None:
            super().__init__(f"API request failed: {body}")
        else:
            super().__init__(f"API request failed with status {status}")


class ApiError(ChannelExportError):
    """The API answered successfully but the body carries an 'error' payload."""

    def __init__(self, payload: Any):
        self.payload = payload
        super().__init__(f"API reported an error: {payload}")


class ResponseShapeError(ChannelExportError):
    """The API response does not have the expected structure."""
    pass


class ChannelNotFoundError(ResponseShapeError):
    """A handle resolved to zero channels."""

    def __init__(self, handle: str):
        self.handle = handle
        super().__init__(f"No channel found for handle: {handle}")


class OutputFileError(ChannelExportError):
    """The CSV file could not be created or written."""

    def __init__(self, path: Path, cause: OSError):
        self.path = path
        self.cause = cause
        super().__init__(f"Unable to write {path}: {cause}")
