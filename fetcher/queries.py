"""GraphQL documents sent to the Meetup API."""

EVENT_QUERY = """
query($eventId: ID!) {
    event(id: $eventId) {
        id
        title
        description
        dateTime
        duration
        eventUrl
        photoAlbum {
            id
            title
            photoCount
        }
        featuredEventPhoto {
            id
            baseUrl
            highResUrl
            standardUrl
            thumbUrl
        }
        venues {
            id
            name
            address
            city
            state
            postalCode
        }
        group {
            id
            name
            urlname
        }
        rsvps(first: 100) {
            edges {
                node {
                    id
                    updated
                    status
                    guestsCount
                    member {
                        id
                        name
                    }
                }
            }
        }
    }
}
"""

# Sent to the legacy endpoint, the only one still exposing album photos
LEGACY_PHOTOS_QUERY = """
query($eventId: ID!) {
    event(id: $eventId) {
        id
        photoAlbum {
            id
            photoCount
            photoSample(amount: 1000) {
                id
                source
                baseUrl
                highResUrl
                standardUrl
            }
        }
    }
}
"""

GROUP_EVENTS_QUERY = """
query($groupId: String!, $after: String) {
    groupByUrlname(urlname: $groupId) {
        id
        events(status: PAST, after: $after) {
            pageInfo {
                hasNextPage
                startCursor
                endCursor
            }
            edges {
                node {
                    id
                }
            }
        }
    }
}
"""
