"""Unit tests for ArchiveScanner."""
import json

import pytest
from bs4 import BeautifulSoup

from pipeline.scanner import ArchiveScanner


def rsvp(rsvp_id, member_id, name, status, created):
    return {
        "id": rsvp_id,
        "created": created,
        "response": status,
        "guests": 0,
        "member": {"id": member_id, "name": name} if member_id else None
    }


def write_record(downloads, dir_name, record):
    event_dir = downloads / dir_name
    event_dir.mkdir(parents=True)
    (event_dir / "event-data.json").write_text(json.dumps(record))
    return event_dir


@pytest.fixture
def downloads(tmp_path):
    """Two events in 2022 and one in 2023 with overlapping attendees."""
    downloads = tmp_path / "downloads"
    write_record(downloads, "20220514-mt-wilson", {
        "id": "e1",
        "title": "Mt. Wilson",
        "dateTime": "2022-05-14T08:00:00-07:00",
        "venue": {"name": "Chantry Flat"},
        "rsvps": [
            rsvp("r1", "m1", "Alex Rivera", "YES", "2022-05-01T10:00:00Z"),
            rsvp("r2", "m2", "Sam Lee", "NO", "2022-05-02T10:00:00Z"),
            rsvp("r3", None, "", "YES", "2022-05-03T10:00:00Z"),
        ],
        "photos": [{"id": "p1", "source": "https://x/p1.jpg"}],
        "comments": []
    })
    write_record(downloads, "20221001-eaton-canyon", {
        "id": "e2",
        "title": "Eaton Canyon",
        "dateTime": "2022-10-01T08:00:00-07:00",
        "rsvps": [rsvp("r4", "m1", "Alex Rivera", "WAITLIST", "2022-09-20T10:00:00Z")],
        "photos": [],
        "comments": []
    })
    write_record(downloads, "20230304-griffith-park-hike", {
        "id": "e3",
        "title": "Griffith Park Hike",
        "dateTime": "2023-03-04T09:00:00Z",
        "rsvps": [
            rsvp("r5", "m1", "Alex Rivera", "YES", "2023-03-01T10:00:00Z"),
            rsvp("r6", "m3", "Jo Park", "YES", "2023-03-01T11:00:00Z"),
        ],
        "photos": [{"id": "p2", "source": "https://x/p2.jpg"},
                   {"id": "p3", "source": "https://x/p3.jpg"}],
        "comments": []
    })
    (downloads / "20230401-unfinished").mkdir()
    return downloads


class TestArchiveScanner:
    """Test cases for ArchiveScanner class."""

    def test_scan_aggregates_attendees_across_years(self, tmp_path, downloads):
        """Test a shared member gets the union of entries, newest first."""
        result = ArchiveScanner().scan(downloads, tmp_path)

        assert len(result.events) == 3
        by_id = {attendee.id: attendee for attendee in result.attendees}
        assert set(by_id) == {"m1", "m2", "m3"}

        alex = by_id["m1"]
        assert alex.name == "Alex Rivera"
        assert [entry.event.id for entry in alex.entries] == ["e3", "e2", "e1"]
        assert [entry.status for entry in alex.entries] == ["YES", "WAITLIST", "YES"]
        assert [entry.rsvp_date for entry in alex.entries] == [
            "2023-03-01T10:00:00Z", "2022-09-20T10:00:00Z", "2022-05-01T10:00:00Z"
        ]

    def test_attendees_sorted_by_event_count(self, tmp_path, downloads):
        """Test the attendee list starts with the most active member."""
        result = ArchiveScanner().scan(downloads, tmp_path)

        assert [attendee.id for attendee in result.attendees] == ["m1", "m3", "m2"]
        assert result.attendees[0].event_count == 3

    def test_event_summaries(self, tmp_path, downloads):
        """Test year and counts derived from each record."""
        result = ArchiveScanner().scan(downloads, tmp_path)

        summary = {event.id: event for event in result.events}["e1"]
        assert summary.year == 2022
        assert summary.rsvp_count == 3
        assert summary.photo_count == 1
        assert summary.directory == "20220514-mt-wilson"
        assert summary.venue.name == "Chantry Flat"

    def test_writes_index_and_attendee_pages(self, tmp_path, downloads):
        """Test output files and index ordering."""
        ArchiveScanner().scan(downloads, tmp_path)

        assert (tmp_path / "attendees" / "index.html").exists()
        for member_id in ["m1", "m2", "m3"]:
            assert (tmp_path / "attendees" / f"{member_id}.html").exists()

        soup = BeautifulSoup((tmp_path / "index.html").read_text(), "html.parser")
        years = [section["id"] for section in soup.select(".year-section")]
        assert years == ["year-2023", "year-2022"]
        links = [a["href"] for a in soup.select(".event-title a")]
        assert links == [
            "downloads/20230304-griffith-park-hike/",
            "downloads/20221001-eaton-canyon/",
            "downloads/20220514-mt-wilson/",
        ]

        attendee = BeautifulSoup(
            (tmp_path / "attendees" / "m1.html").read_text(), "html.parser"
        )
        assert [a["href"] for a in attendee.select(".event-title a")][0] == \
            "../downloads/20230304-griffith-park-hike/"

    def test_malformed_records_are_skipped(self, tmp_path, downloads):
        """Test bad JSON and missing dates do not abort the scan."""
        broken = downloads / "20230501-broken"
        broken.mkdir()
        (broken / "event-data.json").write_text("{not json")
        write_record(downloads, "20230601-no-date", {"id": "x", "title": "No date"})

        result = ArchiveScanner().scan(downloads, tmp_path)

        assert {event.id for event in result.events} == {"e1", "e2", "e3"}

    def test_rescan_is_deterministic(self, tmp_path, downloads):
        """Test a second scan regenerates identical pages."""
        scanner = ArchiveScanner()
        scanner.scan(downloads, tmp_path)
        first = (tmp_path / "index.html").read_text()
        first_attendees = (tmp_path / "attendees" / "index.html").read_text()

        scanner.scan(downloads, tmp_path)

        assert (tmp_path / "index.html").read_text() == first
        assert (tmp_path / "attendees" / "index.html").read_text() == first_attendees

    def test_missing_downloads_dir(self, tmp_path):
        """Test scanning a missing directory returns None and writes nothing."""
        assert ArchiveScanner().scan(tmp_path / "downloads", tmp_path) is None
        assert not (tmp_path / "index.html").exists()
