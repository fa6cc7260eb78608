"""Downloader for photo assets."""
import logging
from pathlib import Path
from typing import Callable

import requests

from fetcher.rate_limit import no_wait

logger = logging.getLogger(__name__)


class AssetDownloader:
    """Streams remote files to disk, skipping files fetched on a previous run."""

    CHUNK_SIZE = 64 * 1024

    def __init__(
        self,
        wait: Callable[[], None] = no_wait,
        timeout: int = 30,
        verbose: bool = False
    ):
        """
        Initialize the downloader.

        Args:
            wait: Called before every download (rate limiting)
            timeout: HTTP request timeout in seconds (default: 30)
            verbose: Log skipped downloads
        """
        self.wait = wait
        self.timeout = timeout
        self.verbose = verbose

    @staticmethod
    def is_fetched(path: Path) -> bool:
        """An asset counts as fetched iff its file exists and is non-empty."""
        return path.is_file() and path.stat().st_size > 0

    def download(self, url: str, path: Path) -> bool:
        """
        Download `url` into `path` unless it was already fetched.

        Args:
            url: Source URL
            path: Destination file

        Returns:
            True if the file was downloaded, False if it was skipped

        Raises:
            requests.RequestException: If the transfer fails; the partial
                file is removed first
        """
        if self.is_fetched(path):
            if self.verbose:
                logger.info(f"Skipping download of {url} to {path}")
            return False

        self.wait()

        try:
            with requests.get(url, stream=True, timeout=self.timeout) as response:
                response.raise_for_status()
                with open(path, 'wb') as f:
                    for chunk in response.iter_content(chunk_size=self.CHUNK_SIZE):
                        if chunk:
                            f.write(chunk)
        except requests.RequestException:
            self._remove_partial(path)
            raise

        logger.debug(f"Downloaded {url} to {path}")
        return True

    def _remove_partial(self, path: Path) -> None:
        try:
            path.unlink()
        except OSError:
            pass
