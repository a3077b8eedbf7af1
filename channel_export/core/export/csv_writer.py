"""
CSV Writer Service
Writes one row per video to <handle>.csv
"""

import logging
import pandas as pd
from pathlib import Path
from typing import Any, Dict, List

from ..errors import OutputFileError
from ..youtube.video_record import VideoRecord

logger = logging.getLogger(__name__)

# VideoRecord field -> CSV column
CSV_COLUMNS = {
    "video_id": "Video ID",
    "title": "Title",
    "description": "Description",
    "published_at": "Published At",
}
CSV_HEADER = list(CSV_COLUMNS.values())


def output_filename(handle: str) -> str:
    """'@somechannel' -> 'somechannel.csv'"""
    return f"{handle.lstrip('@')}.csv"


class CsvWriter:
    """
    Service responsible for persisting search result items as CSV.

    Responsibilities:
    - Derive the output file name from the channel handle.
    - Flatten raw items into VideoRecord rows.
    - Write a header row even when there are no videos.
    """

    def __init__(self, output_dir: Path):
        self._output_dir = Path(output_dir)

    def write(self, handle: str, items: List[Dict[str, Any]]) -> Path:
        """
        Writes the items to <output_dir>/<handle without leading @>.csv.

        Returns:
            Path: The file that was written.

        Raises:
            OutputFileError: If the directory or file cannot be written.
        """
        output_path = self._output_dir / output_filename(handle)

        records = [VideoRecord.from_search_item(item).to_dict() for item in items]
        df = pd.DataFrame(records, columns=list(CSV_COLUMNS.keys()), dtype=str)
        df = df.rename(columns=CSV_COLUMNS)

        try:
            self._output_dir.mkdir(parents=True, exist_ok=True)
            df.to_csv(output_path, index=False, encoding='utf-8')
        except OSError as e:
            logger.error(f"Failed to write CSV file {output_path}: {e}")
            raise OutputFileError(output_path, e) from e

        logger.info(f"Successfully saved {len(records)} videos to {output_path}")
        return output_path
