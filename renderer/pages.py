"""Page renderer for event, archive index and attendee pages."""
import re
from collections import OrderedDict
from datetime import datetime, timezone
from typing import Any, List, Optional

from jinja2 import Environment
from markupsafe import Markup, escape

from processor.models import Attendee, EventRecord, EventSummary, Rsvp
from processor.naming import parse_date_time, photo_filename, photo_url
from renderer.templates import (
    ATTENDEE_INDEX_TEMPLATE, ATTENDEE_TEMPLATE, BASE_CSS, EVENT_TEMPLATE,
    INDEX_TEMPLATE
)

ISO_DURATION = re.compile(r'^P(?:(\d+)D)?(?:T(?:(\d+)H)?(?:(\d+)M)?(?:(\d+)S)?)?$')


def _as_datetime(value: Any) -> Optional[datetime]:
    if isinstance(value, datetime):
        return value
    if not value:
        return None
    try:
        return parse_date_time(str(value))
    except ValueError:
        return None


def format_datetime(value: Any) -> str:
    """`Sat, Mar 4, 2023, 9:00 AM` in the timezone the value was written in."""
    if not value:
        return 'Not specified'
    dt = _as_datetime(value)
    if dt is None:
        return str(value)
    return (
        f"{dt:%a}, {dt:%b} {dt.day}, {dt.year}, "
        f"{dt.hour % 12 or 12}:{dt:%M} {dt:%p}"
    )


def format_date(value: Any) -> str:
    """`Sat, Mar 4, 2023`"""
    dt = _as_datetime(value)
    if dt is None:
        return str(value or '')
    return f"{dt:%a}, {dt:%b} {dt.day}, {dt.year}"


def format_duration(value: Any) -> str:
    """Render minutes or an ISO 8601 duration such as PT2H30M."""
    if isinstance(value, (int, float)):
        return f"{int(value)} minutes"
    match = ISO_DURATION.match(str(value or ''))
    if not match or not any(match.groups()):
        return str(value or '')
    parts = []
    for amount, unit in zip(match.groups(), ('day', 'hour', 'minute', 'second')):
        if amount and int(amount):
            parts.append(f"{int(amount)} {unit}{'s' if int(amount) != 1 else ''}")
    return ' '.join(parts) or '0 minutes'


def format_description(value: Optional[str]) -> Markup:
    """Escape a plain-text description and keep its line breaks."""
    if not value:
        return Markup('No description available.')
    text = value.replace('\r\n', '\n')
    return escape(text).replace('\n', Markup('<br>\n'))


def _rsvp_sort_key(rsvp: Rsvp) -> datetime:
    return _as_datetime(rsvp.created) or datetime.min.replace(tzinfo=timezone.utc)


class PageRenderer:
    """
    Renders archive pages from normalized records.

    All user-supplied text is escaped by Jinja2 autoescaping. Rendering has
    no side effects and does not modify its inputs.
    """

    def __init__(self, title: str = 'Meetup Events Archive'):
        """
        Args:
            title: Site title used on the index and attendee pages
        """
        self.title = title
        self.env = Environment(autoescape=True)
        self.env.filters['format_datetime'] = format_datetime
        self.env.filters['format_date'] = format_date
        self.env.filters['format_duration'] = format_duration
        self.env.filters['format_description'] = format_description
        self._event_template = self.env.from_string(EVENT_TEMPLATE)
        self._index_template = self.env.from_string(INDEX_TEMPLATE)
        self._attendee_index_template = self.env.from_string(ATTENDEE_INDEX_TEMPLATE)
        self._attendee_template = self.env.from_string(ATTENDEE_TEMPLATE)

    def render_event(self, event: EventRecord) -> str:
        """Render the detail page written next to event-data.json."""
        photos = [
            (photo.id, photo_filename(photo))
            for photo in event.photos
            if photo_url(photo)
        ]
        rsvps = sorted(event.rsvps, key=_rsvp_sort_key, reverse=True)
        return self._event_template.render(
            event=event,
            photos=photos,
            rsvps=rsvps,
            css=BASE_CSS
        )

    def render_index(
        self,
        events: List[EventSummary],
        events_link: str = 'downloads'
    ) -> str:
        """
        Render the archive index, grouped by year.

        Args:
            events: Event summaries in any order
            events_link: Relative URL of the event directories

        Returns:
            HTML with years descending and events newest first
        """
        ordered = sorted(events, key=lambda event: event.date, reverse=True)
        by_year = OrderedDict()
        for year in sorted({event.year for event in ordered}, reverse=True):
            by_year[year] = [event for event in ordered if event.year == year]

        return self._index_template.render(
            title=self.title,
            years=list(by_year.items()),
            total_events=len(events),
            total_rsvps=sum(event.rsvp_count for event in events),
            total_photos=sum(event.photo_count for event in events),
            events_link=events_link,
            css=BASE_CSS
        )

    def render_attendee_index(self, attendees: List[Attendee]) -> str:
        """Render attendees/index.html. `attendees` is rendered in the given order."""
        return self._attendee_index_template.render(
            title=self.title,
            attendees=attendees,
            css=BASE_CSS
        )

    def render_attendee(
        self,
        attendee: Attendee,
        events_link: str = '../downloads'
    ) -> str:
        """Render one attendee's page, newest event first."""
        entries = sorted(
            attendee.entries, key=lambda entry: entry.event.date, reverse=True
        )
        return self._attendee_template.render(
            title=self.title,
            attendee=attendee,
            entries=entries,
            events_link=events_link,
            css=BASE_CSS
        )
