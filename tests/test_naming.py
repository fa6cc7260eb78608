"""Unit tests for naming helpers."""
import re

import pytest

from processor.models import Photo
from processor.naming import (
    format_event_directory_name, parse_date_time, photo_filename, photo_url,
    slugify
)


class TestFormatEventDirectoryName:
    """Test cases for format_event_directory_name."""

    def test_basic_title(self):
        """Test date prefix and slugified title."""
        name = format_event_directory_name("2023-03-04T09:00:00Z", "Griffith Park Hike")
        assert name == "20230304-griffith-park-hike"

    def test_punctuation_and_spacing(self):
        """Test punctuation is dropped and hyphen runs collapse."""
        name = format_event_directory_name(
            "2022-11-20T07:30-08:00", "  Mt. Baldy -- Sunrise!!  (Strenuous)  "
        )
        assert name == "20221120-mt-baldy-sunrise-strenuous"

    def test_date_is_not_shifted_to_utc(self):
        """Test the date is taken as written in the event's offset."""
        name = format_event_directory_name("2023-12-31T23:30:00-08:00", "NYE Walk")
        assert name.startswith("20231231-")

    def test_empty_title_yields_date_only(self):
        """Test no trailing hyphen when the title has no usable characters."""
        assert format_event_directory_name("2023-03-04T09:00:00Z", "!!!") == "20230304"
        assert format_event_directory_name("2023-03-04T09:00:00Z", None) == "20230304"

    @pytest.mark.parametrize("title", [
        "Hike & Brunch <Part 2>",
        "Café Olé — Ünïcödé",
        "under_score and\ttabs\nnewlines",
        "---leading and trailing---",
        "\"quotes\" and 'apostrophes'",
    ])
    def test_directory_name_character_set(self, title):
        """Test names only contain [a-z0-9-] without edge or doubled hyphens."""
        name = format_event_directory_name("2021-06-05T08:00:00Z", title)

        assert re.fullmatch(r"[a-z0-9-]+", name)
        assert not name.startswith("-")
        assert not name.endswith("-")
        assert "--" not in name
        assert re.match(r"^20210605(-|$)", name)

    def test_invalid_date_time_raises(self):
        """Test that a missing date-time is rejected."""
        with pytest.raises(ValueError):
            format_event_directory_name("", "Title")


class TestParseDateTime:
    """Test cases for parse_date_time."""

    def test_zulu_suffix(self):
        """Test Z suffix parses as UTC."""
        dt = parse_date_time("2023-03-04T09:00:00Z")
        assert dt.utcoffset().total_seconds() == 0
        assert (dt.year, dt.month, dt.day, dt.hour) == (2023, 3, 4, 9)

    def test_naive_value_assumed_utc(self):
        """Test values without offset become timezone-aware."""
        assert parse_date_time("2023-03-04T09:00:00").tzinfo is not None


class TestSlugify:
    """Test cases for slugify."""

    def test_slugify(self):
        """Test lowercasing and hyphenation."""
        assert slugify("Eaton Canyon Falls") == "eaton-canyon-falls"
        assert slugify("") == ""


class TestPhotoNaming:
    """Test cases for photo URL fallback and filenames."""

    def test_source_wins(self):
        """Test the legacy source field is preferred."""
        photo = Photo(id="1", source="https://a/s.jpg", high_res_url="https://a/h.jpg")
        assert photo_url(photo) == "https://a/s.jpg"

    def test_fallback_order(self):
        """Test highResUrl, then standardUrl, then baseUrl."""
        assert photo_url(Photo(id="1", high_res_url="h", standard_url="s")) == "h"
        assert photo_url(Photo(id="1", standard_url="s", base_url="b")) == "s"
        assert photo_url(Photo(id="1", base_url="b")) == "b"
        assert photo_url(Photo(id="1", source="", base_url="b")) == "b"
        assert photo_url(Photo(id="1")) is None

    def test_filename_uses_url_extension(self):
        """Test extension comes from the URL path, ignoring the query string."""
        photo = Photo(id="42", source="https://photos.example.com/a/b/highres_42.png?w=10")
        assert photo_filename(photo) == "photo-42.png"

    def test_filename_default_extension(self):
        """Test .jpg is used when the URL has no extension."""
        photo = Photo(id="7", base_url="https://photos.example.com/photo/7/")
        assert photo_filename(photo) == "photo-7.jpg"
