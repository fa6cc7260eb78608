"""Filesystem naming helpers for archived events and photos."""
import posixpath
import re
from datetime import datetime, timezone
from typing import Optional
from urllib.parse import urlparse

from processor.models import PHOTO_URL_FIELDS, Photo

DEFAULT_PHOTO_EXTENSION = '.jpg'


def parse_date_time(value: str) -> datetime:
    """
    Parse an ISO 8601 date-time as returned by the API.

    Args:
        value: Date-time string, e.g. "2023-03-04T09:00-08:00" or
            "2023-03-04T09:00:00Z"

    Returns:
        Timezone-aware datetime (naive values are assumed to be UTC)

    Raises:
        ValueError: If the value is empty or not ISO 8601
    """
    if not value:
        raise ValueError("Missing date-time")
    text = value.strip()
    if text.endswith('Z'):
        text = text[:-1] + '+00:00'
    parsed = datetime.fromisoformat(text)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def slugify(text: Optional[str]) -> str:
    """Lowercase, keep [a-z0-9], and join words with single hyphens."""
    cleaned = re.sub(r'[^a-z0-9\s-]', '', (text or '').lower())
    cleaned = re.sub(r'[\s-]+', '-', cleaned)
    return cleaned.strip('-')


def format_event_directory_name(date_time: str, title: Optional[str]) -> str:
    """
    Build the directory name for an event: `YYYYMMDD-slugified-title`.

    The date is taken as written in the date-time, without converting it
    to another timezone.

    Args:
        date_time: ISO 8601 event start
        title: Event title

    Returns:
        Directory name, or just `YYYYMMDD` if the title has no usable
        characters
    """
    date_str = parse_date_time(date_time).strftime('%Y%m%d')
    slug = slugify(title)
    if not slug:
        return date_str
    return f"{date_str}-{slug}"


def photo_url(photo: Photo) -> Optional[str]:
    """
    Pick the image URL of a photo.

    Fallback order is source, highResUrl, standardUrl, baseUrl. This
    mirrors how the legacy and current API name the field and is not a
    documented contract.
    """
    for _, attr in PHOTO_URL_FIELDS:
        value = getattr(photo, attr)
        if value:
            return value
    return None


def photo_filename(photo: Photo) -> str:
    """Local filename for a photo: `photo-<id><ext>`."""
    url = photo_url(photo) or ''
    extension = posixpath.splitext(urlparse(url).path)[1]
    return f"photo-{photo.id}{extension or DEFAULT_PHOTO_EXTENSION}"
