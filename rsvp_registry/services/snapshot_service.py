"""Decode RSVP snapshots into records for bulk loading."""
import json
import time
from pathlib import Path
from typing import Any, Dict, List

from rsvp_registry.models.participant import Participant
from rsvp_registry.models.response import ResponseRecord, ResponseStatus
from rsvp_registry.utils.date_utils import parse_timestamp
from rsvp_registry.utils.exceptions import MalformedBatch


def load_json(file_path: str, retry_count: int = 3, retry_delay: float = 0.1) -> Any:
    """
    Read a snapshot file and parse it as JSON.

    Args:
        file_path: Path to the snapshot
        retry_count: Read attempts while the file is locked by another process
        retry_delay: Seconds to wait between attempts

    Returns:
        Parsed JSON content

    Raises:
        FileNotFoundError: If there is no such file
        json.JSONDecodeError: If the content is not JSON
        PermissionError: If the file stays unreadable for every attempt
    """
    path = Path(file_path)
    if not path.is_file():
        raise FileNotFoundError(f"Snapshot not found: {file_path}")

    attempt = 0
    while True:
        attempt += 1
        try:
            text = path.read_text(encoding="utf-8")
            break
        except PermissionError as e:
            if attempt >= retry_count:
                raise PermissionError(f"Cannot read {file_path} after {retry_count} attempts") from e
            time.sleep(retry_delay)

    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise json.JSONDecodeError(f"Malformed snapshot {path.name}: {e.msg}", e.doc, e.pos) from e


def record_from_dict(item: Dict[str, Any]) -> ResponseRecord:
    """
    Build one ResponseRecord from its JSON form.

    A missing participant ID decodes to "" so the registry can skip and
    report the entry itself.

    Raises:
        ValueError: If participant is not an object, or status or timestamp
            cannot be parsed
    """
    participant_data = item.get("participant") or {}
    if not isinstance(participant_data, dict):
        raise ValueError(f"participant must be an object, got: {type(participant_data).__name__}")
    participant = Participant(
        id=participant_data.get("id") or "",
        name=participant_data.get("name", ""),
        email=participant_data.get("email", ""),
    )

    return ResponseRecord(
        participant=participant,
        status=ResponseStatus.parse(item.get("status")),
        responded_at=parse_timestamp(item.get("responded_at")),
    )


def records_from_dicts(items: Any) -> List[ResponseRecord]:
    """
    Decode a list of snapshot entries.

    Args:
        items: List of mappings with participant, status and responded_at

    Returns:
        List of ResponseRecord in input order

    Raises:
        MalformedBatch: If items is not a list of mappings
        ValueError: If an entry has a bad participant, status or timestamp
    """
    if not isinstance(items, list):
        raise MalformedBatch(f"Snapshot must be a list of entries, got: {type(items).__name__}")

    records = []
    for index, item in enumerate(items):
        if not isinstance(item, dict):
            raise MalformedBatch(f"Snapshot entry {index} must be an object")
        try:
            records.append(record_from_dict(item))
        except ValueError as e:
            raise ValueError(f"Snapshot entry {index}: {e}") from e

    return records


def records_to_dicts(records: List[ResponseRecord]) -> List[Dict[str, Any]]:
    """JSON-ready form of ``records``, the inverse of records_from_dicts."""
    return [record.to_dict() for record in records]


def load_snapshot(file_path: str) -> List[ResponseRecord]:
    """
    Read a snapshot file for ResponseRegistry.replace_all.

    Args:
        file_path: JSON file holding a list of entries or {"rsvps": [...]}

    Returns:
        List of ResponseRecord

    Raises:
        FileNotFoundError: If file doesn't exist
        json.JSONDecodeError: If JSON is malformed
        MalformedBatch: If the content is not a list of entries
    """
    data = load_json(file_path)
    if isinstance(data, dict):
        data = data.get("rsvps", [])
    return records_from_dicts(data)
