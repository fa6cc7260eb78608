"""Unit tests for AssetDownloader."""
from unittest.mock import Mock

import pytest
import requests
import responses

from fetcher.downloader import AssetDownloader
from fetcher.rate_limit import FixedDelay, no_wait

PHOTO_URL = "https://photos.example.com/highres_1.jpg"


class TestAssetDownloader:
    """Test cases for AssetDownloader class."""

    @responses.activate
    def test_download_writes_file(self, tmp_path):
        """Test the response body is streamed to the destination."""
        responses.add(responses.GET, PHOTO_URL, body=b"\xff\xd8jpeg-bytes", status=200)
        wait = Mock()
        target = tmp_path / "photo-1.jpg"

        downloader = AssetDownloader(wait=wait)
        assert downloader.download(PHOTO_URL, target) is True

        assert target.read_bytes() == b"\xff\xd8jpeg-bytes"
        wait.assert_called_once_with()

    @responses.activate
    def test_existing_file_is_not_requested_again(self, tmp_path):
        """Test no request and no wait when the file was already fetched."""
        responses.add(responses.GET, PHOTO_URL, body=b"new", status=200)
        wait = Mock()
        target = tmp_path / "photo-1.jpg"
        target.write_bytes(b"old")

        downloader = AssetDownloader(wait=wait, verbose=True)
        assert downloader.download(PHOTO_URL, target) is False
        assert downloader.download(PHOTO_URL, target) is False

        assert len(responses.calls) == 0
        wait.assert_not_called()
        assert target.read_bytes() == b"old"

    @responses.activate
    def test_empty_file_is_downloaded_again(self, tmp_path):
        """Test a zero-byte file does not count as fetched."""
        responses.add(responses.GET, PHOTO_URL, body=b"data", status=200)
        target = tmp_path / "photo-1.jpg"
        target.write_bytes(b"")

        downloader = AssetDownloader()
        assert downloader.download(PHOTO_URL, target) is True

        assert len(responses.calls) == 1
        assert target.read_bytes() == b"data"

    @responses.activate
    def test_http_error_removes_partial_file(self, tmp_path):
        """Test failed transfers leave no file behind and propagate."""
        responses.add(responses.GET, PHOTO_URL, body="gone", status=404)
        target = tmp_path / "photo-1.jpg"

        downloader = AssetDownloader()
        with pytest.raises(requests.HTTPError):
            downloader.download(PHOTO_URL, target)

        assert not target.exists()

    @responses.activate
    def test_connection_error_removes_partial_file(self, tmp_path):
        """Test connection errors propagate without leaving a file."""
        responses.add(
            responses.GET, PHOTO_URL,
            body=requests.ConnectionError("reset by peer")
        )
        target = tmp_path / "photo-1.jpg"

        downloader = AssetDownloader()
        with pytest.raises(requests.ConnectionError):
            downloader.download(PHOTO_URL, target)

        assert not target.exists()

    def test_is_fetched(self, tmp_path):
        """Test the fetched policy: exists and non-empty."""
        path = tmp_path / "photo.jpg"
        assert AssetDownloader.is_fetched(path) is False
        path.write_bytes(b"")
        assert AssetDownloader.is_fetched(path) is False
        path.write_bytes(b"x")
        assert AssetDownloader.is_fetched(path) is True


class TestRateLimit:
    """Test cases for wait strategies."""

    def test_fixed_delay_sleeps(self, monkeypatch):
        """Test FixedDelay sleeps for its configured duration."""
        sleep = Mock()
        monkeypatch.setattr("fetcher.rate_limit.time.sleep", sleep)

        FixedDelay.from_millis(2500)()

        sleep.assert_called_once_with(2.5)

    def test_zero_delay_does_not_sleep(self, monkeypatch):
        """Test a zero delay returns immediately."""
        sleep = Mock()
        monkeypatch.setattr("fetcher.rate_limit.time.sleep", sleep)

        FixedDelay(0)()
        no_wait()

        sleep.assert_not_called()

    def test_negative_delay_rejected(self):
        """Test negative delays are invalid."""
        with pytest.raises(ValueError):
            FixedDelay(-1)
