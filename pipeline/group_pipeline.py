"""Pagination over a group's past events."""
import logging
from pathlib import Path
from typing import Callable, List, Optional

from fetcher.graphql_client import GraphQLClient
from fetcher.queries import GROUP_EVENTS_QUERY
from fetcher.rate_limit import no_wait
from pipeline.event_pipeline import EventPipeline
from processor.models import GroupSyncResult
from storage.archive_store import ArchiveStore

logger = logging.getLogger(__name__)


class GroupPipeline:
    """Archives every past event of a group that is not archived yet."""

    def __init__(
        self,
        client: GraphQLClient,
        event_pipeline: EventPipeline,
        store: Optional[ArchiveStore] = None,
        wait: Callable[[], None] = no_wait
    ):
        self.client = client
        self.event_pipeline = event_pipeline
        self.store = store or ArchiveStore()
        self.wait = wait

    def fetch_event_ids(self, group_id: str) -> List[str]:
        """
        Collect the ids of all past events of a group.

        Pages are requested one after another, each starting at the end
        cursor of the previous page, until `hasNextPage` is false.

        Args:
            group_id: Group urlname

        Returns:
            Event ids in API order

        Raises:
            requests.RequestException: If a page request fails
            ValueError: If the group is missing or a page is malformed
        """
        event_ids = []
        cursor = None
        page = 0

        while True:
            page += 1
            logger.debug(f"Fetching events page {page} for group ID: {group_id}")
            response = self.client.query(
                GROUP_EVENTS_QUERY, {'groupId': group_id, 'after': cursor}
            )
            self.wait()

            group = (response.get('data') or {}).get('groupByUrlname')
            if not group:
                raise ValueError(f"Group not found or invalid response: {group_id}")

            events = group.get('events') or {}
            for edge in events.get('edges') or []:
                node = edge.get('node') if isinstance(edge, dict) else None
                event_id = node.get('id') if isinstance(node, dict) else None
                if event_id is None:
                    raise ValueError(f"Malformed events page for group: {group_id}")
                event_ids.append(str(event_id))

            page_info = events.get('pageInfo') or {}
            if not page_info.get('hasNextPage'):
                break
            cursor = page_info.get('endCursor')

        logger.info(f"Found {len(event_ids)} past events for group {group_id}")
        return event_ids

    def archive_group(self, group_id: str, base_dir: Optional[Path] = None) -> GroupSyncResult:
        """
        Archive all past events of a group that lack a completion marker.

        Args:
            group_id: Group urlname
            base_dir: Output directory (default: ./<group_id>)

        Returns:
            GroupSyncResult with the ids seen and the skipped/archived counts

        Raises:
            requests.RequestException: If pagination or an event fetch fails
            ValueError: If the group or an event is missing from a response
        """
        base_dir = Path(base_dir) if base_dir is not None else Path(group_id)
        base_dir.mkdir(parents=True, exist_ok=True)

        event_ids = self.fetch_event_ids(group_id)
        self.store.write_event_ids(base_dir, event_ids)

        completed = self.store.completed_event_ids(base_dir)
        unique_ids = list(dict.fromkeys(event_ids))
        pending = [event_id for event_id in unique_ids if event_id not in completed]
        skipped = len(unique_ids) - len(pending)
        logger.info(
            f"Archiving {len(pending)} events, skipping {skipped} already archived"
        )

        for event_id in pending:
            self.event_pipeline.archive_event(event_id, base_dir)

        return GroupSyncResult(
            event_ids=event_ids,
            skipped=skipped,
            archived=len(pending)
        )
