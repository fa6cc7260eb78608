"""Command-line entry point for the Meetup event archiver."""
import argparse
import json
import logging
import os
import sys
import time
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from fetcher.downloader import AssetDownloader
from fetcher.graphql_client import GraphQLClient
from fetcher.rate_limit import FixedDelay
from pipeline.event_pipeline import EventPipeline
from pipeline.group_pipeline import GroupPipeline
from pipeline.scanner import ArchiveScanner

DOWNLOADS_DIR = Path('downloads')

USAGE_EXAMPLES = """\
examples:
  meetup-archive event 123456789
  meetup-archive group SGV-Hikers
  meetup-archive scan
"""


# Configure JSON logging
class JsonFormatter(logging.Formatter):
    """Custom JSON formatter for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON."""
        log_data = {
            'timestamp': self.formatTime(record),
            'level': record.levelname,
            'message': record.getMessage(),
            'logger': record.name
        }

        if record.exc_info:
            log_data['exception'] = self.formatException(record.exc_info)

        return json.dumps(log_data)


def setup_logging(log_level: str = 'INFO') -> None:
    """
    Configure logging with JSON formatter.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
    """
    root_logger = logging.getLogger()

    # Remove existing handlers
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setFormatter(JsonFormatter())
    root_logger.addHandler(handler)

    root_logger.setLevel(getattr(logging, log_level.upper(), logging.INFO))


@dataclass
class ArchiveConfig:
    """Settings read from the environment."""
    sleep_millis: int = 5000
    verbose: bool = False
    log_level: str = 'INFO'
    timeout_seconds: int = 30


def load_config() -> ArchiveConfig:
    """
    Read configuration from environment variables.

    SLEEP_MILLIS: delay between external requests (default: 5000)
    VERBOSE: "1", "true" or "yes" for detailed logging
    LOG_LEVEL: root log level (default: INFO, DEBUG when verbose)
    TIMEOUT_SECONDS: HTTP timeout (default: 30)

    Raises:
        ValueError: If a numeric variable is not an integer
    """
    verbose = os.environ.get('VERBOSE', '').strip().lower() in ('1', 'true', 'yes')
    return ArchiveConfig(
        sleep_millis=int(os.environ.get('SLEEP_MILLIS', '5000')),
        verbose=verbose,
        log_level=os.environ.get('LOG_LEVEL', 'DEBUG' if verbose else 'INFO'),
        timeout_seconds=int(os.environ.get('TIMEOUT_SECONDS', '30'))
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='meetup-archive',
        description='Archive Meetup events, photos and attendees as static pages.',
        epilog=USAGE_EXAMPLES,
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    subparsers = parser.add_subparsers(dest='command')

    event_parser = subparsers.add_parser('event', help=f'archive one event under {DOWNLOADS_DIR}/')
    event_parser.add_argument('event_id', help='Meetup event id')

    group_parser = subparsers.add_parser('group', help='archive all past events of a group under <urlname>/')
    group_parser.add_argument('group_id', help='Meetup group urlname')

    subparsers.add_parser('scan', help=f'build index.html and attendees/ from {DOWNLOADS_DIR}/')
    return parser


def build_event_pipeline(config: ArchiveConfig) -> EventPipeline:
    wait = FixedDelay.from_millis(config.sleep_millis)
    client = GraphQLClient(timeout=config.timeout_seconds, verbose=config.verbose)
    downloader = AssetDownloader(
        wait=wait, timeout=config.timeout_seconds, verbose=config.verbose
    )
    return EventPipeline(client, downloader, wait=wait, verbose=config.verbose)


def run_command(args: argparse.Namespace, config: ArchiveConfig) -> int:
    logger = logging.getLogger(__name__)

    if args.command == 'event':
        pipeline = build_event_pipeline(config)
        pipeline.archive_event(args.event_id, DOWNLOADS_DIR)
        logger.info("Download completed successfully!")
        return 0

    if args.command == 'group':
        event_pipeline = build_event_pipeline(config)
        group_pipeline = GroupPipeline(
            event_pipeline.client,
            event_pipeline,
            wait=event_pipeline.wait
        )
        result = group_pipeline.archive_group(args.group_id)
        logger.info(
            f"Group sync completed: {len(result.event_ids)} events, "
            f"{result.archived} archived, {result.skipped} skipped"
        )
        return 0

    result = ArchiveScanner().scan(DOWNLOADS_DIR, Path('.'))
    if result is None:
        return 1
    logger.info("Event scanning completed!")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """
    Run the archiver.

    Args:
        argv: Command-line arguments (default: sys.argv[1:])

    Returns:
        Process exit status
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    if not args.command:
        parser.print_help()
        return 1

    try:
        config = load_config()
    except ValueError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return 1

    setup_logging(config.log_level)
    logger = logging.getLogger(__name__)

    start_time = time.time()
    logger.info(f"Running {args.command} (sleep {config.sleep_millis}ms, verbose={config.verbose})")

    try:
        status = run_command(args, config)
    except Exception as e:
        duration = time.time() - start_time
        logger.error(
            f"{args.command} failed after {round(duration, 2)}s: {e}",
            exc_info=True
        )
        print(f"Error: {e}", file=sys.stderr)
        return 1

    logger.info(f"{args.command} finished in {round(time.time() - start_time, 2)}s")
    return status


if __name__ == '__main__':
    sys.exit(main())
