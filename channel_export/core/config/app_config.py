"""
Application Configuration Model
Represents a validated configuration state
"""

from typing import Optional


class AppConfig:
    """
    Immutable configuration object for Channel Export.

    Represents a VALID configuration state only.
    All validation must be performed before instantiation.
    """

    def __init__(
        self,
        output_dir: str = ".",
        max_pages: Optional[int] = None,
        log_dir: str = "logs"
    ):
        """
        Initialize AppConfig with validated values.

        Args:
            output_dir: Directory where the CSV file is written (default: ".")
            max_pages: Ceiling on search pages fetched (optional, > 0 or None)
            log_dir: Directory for the run log file (default: "logs")
        """
        self._output_dir = output_dir
        self._max_pages = max_pages
        self._log_dir = log_dir

    @property
    def output_dir(self) -> str:
        """Directory for the CSV output."""
        return self._output_dir

    @property
    def max_pages(self) -> Optional[int]:
        """Maximum number of search pages to fetch (None = unlimited)."""
        return self._max_pages

    @property
    def log_dir(self) -> str:
        """Directory for log files."""
        return self._log_dir

    def with_overrides(
        self,
        output_dir: Optional[str] = None,
        max_pages: Optional[int] = None
    ) -> "AppConfig":
        """Return a copy with the given non-None values replaced."""
        return AppConfig(
            output_dir=output_dir if output_dir is not None else self._output_dir,
            max_pages=max_pages if max_pages is not None else self._max_pages,
            log_dir=self._log_dir
        )

    def __repr__(self) -> str:
        return (
            f"AppConfig(output_dir={self.output_dir!r}, "
            f"max_pages={self.max_pages}, "
            f"log_dir={self.log_dir!r})"
        )
