"""Fetch-and-persist pipeline for a single Meetup event."""
import logging
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Tuple

import requests

from fetcher.downloader import AssetDownloader
from fetcher.graphql_client import GraphQLClient
from fetcher.queries import EVENT_QUERY, LEGACY_PHOTOS_QUERY
from fetcher.rate_limit import no_wait
from processor.event_normalizer import EventNormalizer
from processor.models import EventRecord
from processor.naming import format_event_directory_name, photo_filename, photo_url
from renderer.pages import PageRenderer
from storage.archive_store import ArchiveStore

logger = logging.getLogger(__name__)


class EventPipeline:
    """Fetches one event, stores its data and photos, and renders its page."""

    def __init__(
        self,
        client: GraphQLClient,
        downloader: AssetDownloader,
        store: Optional[ArchiveStore] = None,
        renderer: Optional[PageRenderer] = None,
        normalizer: Optional[EventNormalizer] = None,
        wait: Callable[[], None] = no_wait,
        verbose: bool = False
    ):
        """
        Initialize the pipeline.

        Args:
            client: GraphQL client for both endpoints
            downloader: Photo downloader
            store: On-disk archive layout
            renderer: Page renderer for the event page
            normalizer: Builds the normalized record
            wait: Called after every GraphQL request (rate limiting)
            verbose: Log each step instead of printing terse progress
        """
        self.client = client
        self.downloader = downloader
        self.store = store or ArchiveStore()
        self.renderer = renderer or PageRenderer()
        self.normalizer = normalizer or EventNormalizer()
        self.wait = wait
        self.verbose = verbose

    def archive_event(self, event_id: str, base_dir: Path) -> EventRecord:
        """
        Archive one event under `base_dir`.

        Args:
            event_id: Meetup event id
            base_dir: Directory that receives the event directory

        Returns:
            The normalized EventRecord

        Raises:
            requests.RequestException: If the event query fails
            ValueError: If the response does not contain the event
        """
        logger.debug(f"Fetching event data for event ID: {event_id}")
        response = self.client.query(EVENT_QUERY, {'eventId': event_id})
        self.wait()

        event = (response.get('data') or {}).get('event')
        if not event:
            raise ValueError(f"Event not found or invalid response: {event_id}")

        legacy_response, legacy_photos = self._fetch_legacy_photos(event_id)

        dir_name = format_event_directory_name(event.get('dateTime') or '',
                                               event.get('title'))
        event_dir = self.store.event_dir(base_dir, dir_name)

        record = self.normalizer.normalize(event, legacy_photos)

        self.store.write_raw(event_dir, {'event': response, 'photos': legacy_response})
        self.store.write_record(event_dir, record)
        logger.debug(f"Event data saved to {event_dir}")

        self._download_photos(record, event_dir)

        self.store.write_page(event_dir, self.renderer.render_event(record))
        logger.debug(f"HTML file saved to {event_dir / ArchiveStore.PAGE_FILE}")

        if self.verbose:
            logger.info(
                f"Download summary for {event_dir}: title={record.title!r}, "
                f"description_length={len(record.description or '')}, "
                f"comments={len(record.comments)}, rsvps={len(record.rsvps)}, "
                f"photos={len(record.photos)}"
            )
        else:
            logger.info(f"{event_dir}: {record.title} ({len(record.photos)} images)")

        self.store.write_marker(event_dir, event_id)
        return record

    def _fetch_legacy_photos(
        self,
        event_id: str
    ) -> Tuple[Optional[Dict[str, Any]], List[Dict[str, Any]]]:
        """
        Query the legacy endpoint for the event's photo sample.

        Returns:
            (raw response or None, photo entries); failures yield no photos
        """
        logger.debug(f"Fetching photos from legacy API for event ID: {event_id}")
        try:
            response = self.client.query(
                LEGACY_PHOTOS_QUERY, {'eventId': event_id}, legacy=True
            )
        except (requests.RequestException, ValueError) as e:
            logger.warning(f"Error fetching photos from legacy API: {e}")
            return None, []
        finally:
            self.wait()

        event = (response.get('data') or {}).get('event') or {}
        album = event.get('photoAlbum')
        if not album:
            logger.info("No photos found in legacy API response")
            return response, []
        return response, album.get('photoSample') or []

    def _download_photos(self, record: EventRecord, event_dir: Path) -> int:
        """
        Download every photo of the record, one at a time.

        Returns:
            Number of photos downloaded or already present
        """
        photos_dir = self.store.photos_dir(event_dir)
        total = len(record.photos)
        logger.debug(f"Downloading {total} photos... [{event_dir}]")

        fetched = 0
        for seq, photo in enumerate(record.photos, start=1):
            if not self.verbose:
                print(f"\rimage {seq} of {total}", end='', flush=True)

            url = photo_url(photo)
            if not url:
                logger.warning(f"Photo {photo.id} has no URL, skipping")
                continue

            filename = photo_filename(photo)
            try:
                self.downloader.download(url, photos_dir / filename)
                fetched += 1
                logger.debug(f"Downloaded: {filename}")
            except requests.RequestException as e:
                logger.error(f"Failed to download photo {photo.id}: {e}")

        if not self.verbose:
            print(f"\rfinished downloading {total} photos!")
        return fetched
