"""
Channel Export - Command Line Entry
Resolve handle -> list videos -> write CSV
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .core.config import AppConfig, ConfigLoader, ConfigValidationError
from .core.errors import ChannelExportError
from .core.export import CsvWriter
from .core.youtube import VideoLister, YouTubeClient

logger = logging.getLogger(__name__)


def setup_logging(log_dir: str) -> logging.Logger:
    """Configure logging with file and console handlers."""
    logs_dir = Path(log_dir)
    logs_dir.mkdir(parents=True, exist_ok=True)

    log_file = logs_dir / "channel_export.log"

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=[
            logging.FileHandler(log_file, mode='a', encoding='utf-8'),
            logging.StreamHandler(sys.stdout)
        ]
    )

    return logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="channel-export",
        description="Fetch every video of a YouTube channel and save it to a CSV file."
    )
    parser.add_argument("api_key", help="YouTube Data API v3 key.")
    parser.add_argument("channel_handle", help="Channel handle, optionally prefixed with '@'.")
    parser.add_argument("--config", type=Path, default=Path("config.yaml"),
                        help="YAML configuration file (optional).")
    parser.add_argument("--output-dir", default=None, help="Directory for the CSV file.")
    parser.add_argument("--max-pages", type=int, default=None,
                        help="Stop after this many search pages.")
    return parser


def load_configuration(args: argparse.Namespace) -> AppConfig:
    """Load the YAML configuration and apply command line overrides."""
    if not args.api_key.strip():
        raise ConfigValidationError("API key cannot be empty")
    if not args.channel_handle.strip():
        raise ConfigValidationError("Channel handle cannot be empty")
    if args.max_pages is not None and args.max_pages <= 0:
        raise ConfigValidationError(f"--max-pages must be greater than 0, got {args.max_pages}")

    config = ConfigLoader(args.config).load()
    return config.with_overrides(output_dir=args.output_dir, max_pages=args.max_pages)


def run(api_key: str, handle: str, config: AppConfig, client: Optional[YouTubeClient] = None) -> Path:
    """
    Runs the three export stages in order.

    Returns:
        Path: The CSV file that was written.

    Raises:
        ChannelExportError: From whichever stage failed first.
    """
    if client is None:
        client = YouTubeClient(api_key)

    channel_id = client.resolve_channel_id(handle)

    videos = VideoLister(client, max_pages=config.max_pages).list_videos(channel_id)
    logger.info(f"Fetched {len(videos)} videos")
    if not videos:
        logger.info("No videos found")

    output_path = CsvWriter(Path(config.output_dir)).write(handle, videos)
    logger.info(f"Videos written to {output_path}")
    return output_path


def main(argv: Optional[List[str]] = None) -> int:
    """Main execution entry for Channel Export."""
    args = build_parser().parse_args(argv)

    try:
        config = load_configuration(args)
    except ConfigValidationError as e:
        logging.basicConfig(level=logging.INFO, format="%(levelname)s - %(message)s")
        logger.error(f"Configuration validation failed: {e}")
        return 1

    setup_logging(config.log_dir)
    logger.info("=" * 60)
    logger.info(f"Channel Export: {args.channel_handle}")
    logger.info("=" * 60)

    try:
        run(args.api_key.strip(), args.channel_handle, config)
    except ChannelExportError as e:
        logger.error(f"Export failed: {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
