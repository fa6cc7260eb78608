"""Event normalizer for merging current and legacy API data."""
import logging
from typing import Any, Dict, List, Optional

from processor.models import (
    EventRecord, Group, Member, Photo, Rsvp, Venue
)

logger = logging.getLogger(__name__)


class EventNormalizer:
    """Builds EventRecord objects from raw GraphQL payloads."""

    def normalize(
        self,
        event: Dict[str, Any],
        legacy_photos: Optional[List[Dict[str, Any]]] = None
    ) -> EventRecord:
        """
        Normalize an event from the current API plus photos from the legacy API.

        Args:
            event: `data.event` object of the current API response
            legacy_photos: `photoSample` entries of the legacy API response

        Returns:
            EventRecord ready to be persisted
        """
        venues = event.get('venues') or []
        photo_album = event.get('photoAlbum') or {}

        record = EventRecord(
            id=str(event.get('id', '')),
            title=event.get('title') or '',
            description=event.get('description'),
            date_time=event.get('dateTime') or '',
            duration=event.get('duration'),
            event_url=event.get('eventUrl'),
            # venues is an array, the first entry is the event's venue
            venue=Venue.from_dict(venues[0]) if venues else None,
            group=Group.from_dict(event.get('group')),
            # comments are no longer part of the event query
            comments=[],
            rsvps=self._normalize_rsvps(event.get('rsvps')),
            photo_count=photo_album.get('photoCount') or 0,
            photos=self._normalize_photos(legacy_photos or [])
        )

        logger.debug(
            f"Normalized event {record.id}: {len(record.rsvps)} RSVPs, "
            f"{len(record.photos)} photos"
        )
        return record

    def _normalize_rsvps(self, rsvps: Optional[Dict[str, Any]]) -> List[Rsvp]:
        """
        Flatten the RSVP connection (`edges[].node`) into Rsvp objects.

        Args:
            rsvps: `rsvps` connection object, may be None

        Returns:
            RSVPs in API order
        """
        normalized = []
        for edge in (rsvps or {}).get('edges') or []:
            node = (edge or {}).get('node')
            if not node:
                continue
            normalized.append(Rsvp(
                id=node.get('id'),
                created=node.get('updated'),
                response=node.get('status') or '',
                guests=node.get('guestsCount') or 0,
                member=Member.from_dict(node.get('member'))
            ))
        return normalized

    def _normalize_photos(self, photos: List[Dict[str, Any]]) -> List[Photo]:
        normalized = []
        for photo in photos:
            if not photo or photo.get('id') is None:
                logger.warning(f"Skipping photo without id: {photo}")
                continue
            normalized.append(Photo.from_dict(photo))
        return normalized
