"""Data models for archived Meetup events."""
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional


@dataclass
class Venue:
    """Event venue."""
    name: str
    id: Optional[str] = None
    address: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    postal_code: Optional[str] = None

    @property
    def address_line(self) -> str:
        parts = [self.address, self.city, self.state, self.postal_code]
        return ', '.join(part for part in parts if part)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'name': self.name,
            'address': self.address,
            'city': self.city,
            'state': self.state,
            'postalCode': self.postal_code
        }

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> Optional['Venue']:
        if not data:
            return None
        return cls(
            id=data.get('id'),
            name=data.get('name') or '',
            address=data.get('address'),
            city=data.get('city'),
            state=data.get('state'),
            postal_code=data.get('postalCode')
        )


@dataclass
class Group:
    """Group that owns an event."""
    id: Optional[str]
    name: str
    urlname: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {'id': self.id, 'name': self.name, 'urlname': self.urlname}

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> Optional['Group']:
        if not data:
            return None
        return cls(
            id=data.get('id'),
            name=data.get('name') or '',
            urlname=data.get('urlname')
        )


@dataclass
class Member:
    """Member reference attached to an RSVP or comment."""
    id: Optional[str]
    name: str

    def to_dict(self) -> Dict[str, Any]:
        return {'id': self.id, 'name': self.name}

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> Optional['Member']:
        if not data:
            return None
        return cls(id=data.get('id'), name=data.get('name') or '')


@dataclass
class Rsvp:
    """A single RSVP. `response` is the API status (YES, NO, WAITLIST, ...)."""
    id: Optional[str]
    response: str
    created: Optional[str]
    guests: int = 0
    member: Optional[Member] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'created': self.created,
            'response': self.response,
            'guests': self.guests,
            'member': self.member.to_dict() if self.member else None
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Rsvp':
        return cls(
            id=data.get('id'),
            response=data.get('response') or '',
            created=data.get('created'),
            guests=data.get('guests') or 0,
            member=Member.from_dict(data.get('member'))
        )


@dataclass
class Comment:
    """Event comment."""
    id: Optional[str]
    text: str
    created: Optional[str] = None
    member: Optional[Member] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'text': self.text,
            'created': self.created,
            'member': self.member.to_dict() if self.member else None
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Comment':
        return cls(
            id=data.get('id'),
            text=data.get('text') or '',
            created=data.get('created'),
            member=Member.from_dict(data.get('member'))
        )


# JSON key -> attribute name, in URL fallback order
PHOTO_URL_FIELDS = (
    ('source', 'source'),
    ('highResUrl', 'high_res_url'),
    ('standardUrl', 'standard_url'),
    ('baseUrl', 'base_url'),
)


@dataclass
class Photo:
    """
    Event photo.

    The legacy API names the image URL `source`, the current API uses
    `highResUrl`, `standardUrl` or `baseUrl`. All of them are kept so the
    URL fallback in `processor.naming.photo_url` can pick one.
    """
    id: str
    source: Optional[str] = None
    high_res_url: Optional[str] = None
    standard_url: Optional[str] = None
    base_url: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        data = {'id': self.id}
        for key, attr in PHOTO_URL_FIELDS:
            value = getattr(self, attr)
            if value:
                data[key] = value
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Photo':
        kwargs = {attr: data.get(key) for key, attr in PHOTO_URL_FIELDS}
        return cls(id=str(data.get('id', '')), **kwargs)


@dataclass
class EventRecord:
    """Normalized event record persisted as event-data.json."""
    id: str
    title: str
    date_time: str
    description: Optional[str] = None
    duration: Optional[Any] = None
    event_url: Optional[str] = None
    venue: Optional[Venue] = None
    group: Optional[Group] = None
    rsvps: List[Rsvp] = field(default_factory=list)
    comments: List[Comment] = field(default_factory=list)
    photo_count: int = 0
    photos: List[Photo] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'title': self.title,
            'description': self.description,
            'dateTime': self.date_time,
            'duration': self.duration,
            'eventUrl': self.event_url,
            'venue': self.venue.to_dict() if self.venue else None,
            'group': self.group.to_dict() if self.group else None,
            'comments': [comment.to_dict() for comment in self.comments],
            'rsvps': [rsvp.to_dict() for rsvp in self.rsvps],
            'photoCount': self.photo_count,
            'photos': [photo.to_dict() for photo in self.photos]
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'EventRecord':
        return cls(
            id=str(data.get('id', '')),
            title=data.get('title') or '',
            date_time=data.get('dateTime') or '',
            description=data.get('description'),
            duration=data.get('duration'),
            event_url=data.get('eventUrl'),
            venue=Venue.from_dict(data.get('venue')),
            group=Group.from_dict(data.get('group')),
            rsvps=[Rsvp.from_dict(item) for item in data.get('rsvps') or []],
            comments=[
                Comment.from_dict(item) for item in data.get('comments') or []
            ],
            photo_count=data.get('photoCount') or 0,
            photos=[Photo.from_dict(item) for item in data.get('photos') or []]
        )


@dataclass
class EventSummary:
    """Event as listed on the archive index and attendee pages."""
    id: str
    title: str
    date_time: str
    date: datetime
    year: int
    rsvp_count: int
    photo_count: int
    directory: str
    venue: Optional[Venue] = None
    group: Optional[Group] = None


@dataclass
class AttendanceEntry:
    """One RSVP of an attendee, joined with the event it belongs to."""
    event: EventSummary
    status: str
    rsvp_date: Optional[str]


@dataclass
class Attendee:
    """Member aggregated across all scanned events."""
    id: str
    name: str
    entries: List[AttendanceEntry] = field(default_factory=list)

    @property
    def event_count(self) -> int:
        return len(self.entries)


@dataclass
class GroupSyncResult:
    """Result of a group archive run."""
    event_ids: List[str]
    skipped: int
    archived: int


@dataclass
class ScanResult:
    """Result of an archive scan."""
    events: List[EventSummary]
    attendees: List[Attendee]
