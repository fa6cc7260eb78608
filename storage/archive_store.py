"""Filesystem storage for archived events."""
import json
import logging
from pathlib import Path
from typing import Any, Iterable, Iterator, Optional, Set

from processor.models import EventRecord

logger = logging.getLogger(__name__)


class ArchiveStore:
    """
    Reads and writes the on-disk archive layout.

    Each event lives in its own directory under a base directory::

        <base>/events                  ids seen by the last group run
        <base>/<YYYYMMDD-title>/raw.json
        <base>/<YYYYMMDD-title>/event-data.json
        <base>/<YYYYMMDD-title>/index.html
        <base>/<YYYYMMDD-title>/photos/photo-<id><ext>
        <base>/<YYYYMMDD-title>/ID     completion marker, written last
    """

    RAW_FILE = 'raw.json'
    EVENT_DATA_FILE = 'event-data.json'
    PAGE_FILE = 'index.html'
    MARKER_FILE = 'ID'
    PHOTOS_DIR = 'photos'
    EVENT_IDS_FILE = 'events'

    def event_dir(self, base_dir: Path, dir_name: str) -> Path:
        """Return the event directory, creating it if needed."""
        path = Path(base_dir) / dir_name
        path.mkdir(parents=True, exist_ok=True)
        return path

    def photos_dir(self, event_dir: Path) -> Path:
        path = event_dir / self.PHOTOS_DIR
        path.mkdir(parents=True, exist_ok=True)
        return path

    def write_raw(self, event_dir: Path, payload: Any) -> Path:
        return self._write_json(event_dir / self.RAW_FILE, payload)

    def write_record(self, event_dir: Path, record: EventRecord) -> Path:
        return self._write_json(event_dir / self.EVENT_DATA_FILE, record.to_dict())

    def write_page(self, event_dir: Path, html: str) -> Path:
        path = event_dir / self.PAGE_FILE
        path.write_text(html, encoding='utf-8')
        return path

    def write_marker(self, event_dir: Path, event_id: str) -> Path:
        """Mark the event directory complete."""
        path = event_dir / self.MARKER_FILE
        path.write_text(event_id, encoding='utf-8')
        return path

    def write_event_ids(self, base_dir: Path, event_ids: Iterable[str]) -> Path:
        """Write the newline-separated id list. Informational only."""
        path = Path(base_dir) / self.EVENT_IDS_FILE
        path.write_text(''.join(f"{event_id}\n" for event_id in event_ids),
                        encoding='utf-8')
        return path

    def completed_event_ids(self, base_dir: Path) -> Set[str]:
        """
        Collect ids from the completion markers under `base_dir`.

        Args:
            base_dir: Directory holding one subdirectory per event

        Returns:
            Set of event ids whose directory has a completion marker
        """
        completed = set()
        base = Path(base_dir)
        if not base.is_dir():
            return completed

        for event_dir in base.iterdir():
            marker = event_dir / self.MARKER_FILE
            if not marker.is_file():
                continue
            try:
                event_id = marker.read_text(encoding='utf-8').strip()
            except (OSError, UnicodeDecodeError) as e:
                logger.warning(f"Unreadable completion marker {marker}: {e}")
                continue
            if event_id:
                completed.add(event_id)

        logger.info(f"Found {len(completed)} completed events in {base}")
        return completed

    def iter_event_dirs(self, base_dir: Path) -> Iterator[Path]:
        """Event subdirectories of `base_dir` in name order."""
        return iter(sorted(
            (path for path in Path(base_dir).iterdir() if path.is_dir()),
            key=lambda path: path.name
        ))

    def read_record(self, event_dir: Path) -> Optional[EventRecord]:
        """
        Load the normalized record of an event directory.

        Returns:
            EventRecord, or None if the directory has no record

        Raises:
            ValueError: If the record is not valid JSON
            OSError: If the file cannot be read
        """
        path = event_dir / self.EVENT_DATA_FILE
        if not path.is_file():
            return None
        with open(path, encoding='utf-8') as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise ValueError(f"Expected a JSON object in {path}")
        return EventRecord.from_dict(data)

    def _write_json(self, path: Path, payload: Any) -> Path:
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(payload, f, indent=2, ensure_ascii=False)
        return path
