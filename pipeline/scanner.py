"""Archive scanner that builds the index and attendee pages."""
import logging
import os
from pathlib import Path
from typing import Dict, List, Optional

from processor.models import (
    AttendanceEntry, Attendee, EventRecord, EventSummary, ScanResult
)
from processor.naming import parse_date_time
from renderer.pages import PageRenderer
from storage.archive_store import ArchiveStore

logger = logging.getLogger(__name__)


class ArchiveScanner:
    """
    Rebuilds all derived pages from the persisted event records.

    The scan only reads event-data.json files and never touches the
    network. Every run regenerates the index and attendee pages from
    scratch.
    """

    ATTENDEES_DIR = 'attendees'
    INDEX_FILE = 'index.html'

    def __init__(
        self,
        renderer: Optional[PageRenderer] = None,
        store: Optional[ArchiveStore] = None
    ):
        self.renderer = renderer or PageRenderer()
        self.store = store or ArchiveStore()

    def scan(self, downloads_dir: Path, output_dir: Path) -> Optional[ScanResult]:
        """
        Scan `downloads_dir` and write pages into `output_dir`.

        Args:
            downloads_dir: Directory with one subdirectory per event
            output_dir: Receives index.html and attendees/

        Returns:
            ScanResult, or None if `downloads_dir` does not exist
        """
        downloads_dir = Path(downloads_dir)
        output_dir = Path(output_dir)
        if not downloads_dir.is_dir():
            logger.error(f"Downloads directory not found: {downloads_dir}")
            return None

        logger.info(f"Scanning events in {downloads_dir}")
        events = []
        attendees: Dict[str, Attendee] = {}

        for event_dir in self.store.iter_event_dirs(downloads_dir):
            try:
                record = self.store.read_record(event_dir)
                if record is None:
                    logger.info(
                        f"Skipping {event_dir.name} - no "
                        f"{ArchiveStore.EVENT_DATA_FILE} found"
                    )
                    continue
                summary = self.summarize(record, event_dir.name)
            except (OSError, ValueError, TypeError, AttributeError) as e:
                logger.error(f"Error processing {event_dir.name}: {e}")
                continue

            events.append(summary)
            self._collect_attendees(record, summary, attendees)
            logger.info(
                f"Processed: {summary.title} ({summary.year}) - "
                f"{summary.rsvp_count} RSVPs"
            )

        ranked = self.rank_attendees(attendees.values())
        logger.info(f"Found {len(events)} events with {len(ranked)} unique attendees")

        self._write_pages(events, ranked, downloads_dir, output_dir)
        return ScanResult(events=events, attendees=ranked)

    @staticmethod
    def summarize(record: EventRecord, directory: str) -> EventSummary:
        """
        Build the index entry of an event.

        Raises:
            ValueError: If the record's dateTime is missing or invalid
        """
        date = parse_date_time(record.date_time)
        return EventSummary(
            id=record.id,
            title=record.title,
            date_time=record.date_time,
            date=date,
            year=date.year,
            rsvp_count=len(record.rsvps),
            photo_count=len(record.photos),
            directory=directory,
            venue=record.venue,
            group=record.group
        )

    @staticmethod
    def rank_attendees(attendees) -> List[Attendee]:
        """Most events first; entries within an attendee newest first."""
        ranked = []
        for attendee in attendees:
            attendee.entries.sort(key=lambda entry: entry.event.date, reverse=True)
            ranked.append(attendee)
        ranked.sort(key=lambda attendee: (-attendee.event_count, attendee.name, attendee.id))
        return ranked

    def _collect_attendees(
        self,
        record: EventRecord,
        summary: EventSummary,
        attendees: Dict[str, Attendee]
    ) -> None:
        for rsvp in record.rsvps:
            if not rsvp.member or not rsvp.member.id:
                continue
            member_id = str(rsvp.member.id)
            attendee = attendees.get(member_id)
            if attendee is None:
                attendee = Attendee(id=member_id, name=rsvp.member.name)
                attendees[member_id] = attendee
            attendee.entries.append(AttendanceEntry(
                event=summary,
                status=rsvp.response,
                rsvp_date=rsvp.created
            ))

    def _write_pages(
        self,
        events: List[EventSummary],
        attendees: List[Attendee],
        downloads_dir: Path,
        output_dir: Path
    ) -> None:
        attendees_dir = output_dir / self.ATTENDEES_DIR
        attendees_dir.mkdir(parents=True, exist_ok=True)

        events_link = Path(os.path.relpath(downloads_dir, output_dir)).as_posix()
        attendee_events_link = Path(
            os.path.relpath(downloads_dir, attendees_dir)
        ).as_posix()

        index_path = output_dir / self.INDEX_FILE
        index_path.write_text(
            self.renderer.render_index(events, events_link=events_link),
            encoding='utf-8'
        )
        logger.info(f"Generated {index_path}")

        (attendees_dir / self.INDEX_FILE).write_text(
            self.renderer.render_attendee_index(attendees), encoding='utf-8'
        )
        for attendee in attendees:
            (attendees_dir / f"{attendee.id}.html").write_text(
                self.renderer.render_attendee(
                    attendee, events_link=attendee_events_link
                ),
                encoding='utf-8'
            )
        logger.info(f"Generated {len(attendees)} attendee pages in {attendees_dir}")
