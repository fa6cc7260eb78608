"""Shared fixtures for archiver tests."""
import copy

import pytest

EVENT_PAYLOAD = {
    "data": {
        "event": {
            "id": "293011234",
            "title": "Griffith Park Hike",
            "description": "Meet at the Observatory.\nBring water & snacks.",
            "dateTime": "2023-03-04T09:00:00Z",
            "duration": "PT3H",
            "eventUrl": "https://www.meetup.com/sgv-hikers/events/293011234/",
            "photoAlbum": {"id": "album-1", "title": "Griffith", "photoCount": 3},
            "featuredEventPhoto": None,
            "venues": [
                {
                    "id": "v1",
                    "name": "Griffith Observatory",
                    "address": "2800 E Observatory Rd",
                    "city": "Los Angeles",
                    "state": "CA",
                    "postalCode": "90027"
                },
                {"id": "v2", "name": "Second Venue"}
            ],
            "group": {"id": "g1", "name": "SGV Hikers", "urlname": "SGV-Hikers"},
            "rsvps": {
                "edges": [
                    {
                        "node": {
                            "id": "r1",
                            "updated": "2023-03-01T10:00:00Z",
                            "status": "YES",
                            "guestsCount": 1,
                            "member": {"id": "m1", "name": "Alex Rivera"}
                        }
                    },
                    {
                        "node": {
                            "id": "r2",
                            "updated": "2023-03-02T12:00:00Z",
                            "status": "NO",
                            "guestsCount": 0,
                            "member": {"id": "m2", "name": "Sam Lee"}
                        }
                    }
                ]
            }
        }
    }
}

LEGACY_PHOTOS_PAYLOAD = {
    "data": {
        "event": {
            "id": "293011234",
            "photoAlbum": {
                "id": "album-1",
                "photoCount": 3,
                "photoSample": [
                    {"id": "p1", "source": "https://photos.example.com/p1.jpg"},
                    {"id": "p2", "highResUrl": "https://photos.example.com/p2.png"}
                ]
            }
        }
    }
}


@pytest.fixture
def event_payload():
    """Current API response for the Griffith Park event."""
    return copy.deepcopy(EVENT_PAYLOAD)


@pytest.fixture
def legacy_photos_payload():
    """Legacy API response with two photos."""
    return copy.deepcopy(LEGACY_PHOTOS_PAYLOAD)
