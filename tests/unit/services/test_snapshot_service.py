"""Unit tests for snapshot_service."""
import json
from datetime import datetime, timezone
from pathlib import Path
from unittest.mock import patch

import pytest

from rsvp_registry.models.participant import Participant
from rsvp_registry.models.response import ResponseRecord, ResponseStatus
from rsvp_registry.services.snapshot_service import (
    load_json,
    load_snapshot,
    records_from_dicts,
    records_to_dicts,
)
from rsvp_registry.utils.exceptions import MalformedBatch


@pytest.fixture
def snapshot_entries():
    """Two entries in snapshot form."""
    return [
        {
            "participant": {"id": "p1", "name": "Emily Rodriguez", "email": "emily@example.com"},
            "status": "Yes",
            "responded_at": "2026-10-12T09:15:00+00:00",
        },
        {
            "participant": {"id": "p2", "name": "James Wilson", "email": "james@example.com"},
            "status": "No",
            "responded_at": "2026-10-12T10:40:00Z",
        },
    ]


class TestRecordsFromDicts:
    """Test records_from_dicts()."""

    def test_decodes_entries(self, snapshot_entries):
        records = records_from_dicts(snapshot_entries)

        assert records[0].participant == Participant(id="p1", name="Emily Rodriguez", email="emily@example.com")
        assert records[0].status == ResponseStatus.CONFIRMED
        assert records[1].status == ResponseStatus.DECLINED
        assert records[1].responded_at == datetime(2026, 10, 12, 10, 40, tzinfo=timezone.utc)

    def test_missing_participant_id_decodes_to_empty(self, snapshot_entries):
        del snapshot_entries[0]["participant"]["id"]

        records = records_from_dicts(snapshot_entries)

        assert records[0].participant.id == ""

    def test_unknown_status_names_entry(self, snapshot_entries):
        snapshot_entries[1]["status"] = "Perhaps"

        with pytest.raises(ValueError, match="Snapshot entry 1"):
            records_from_dicts(snapshot_entries)

    def test_bad_timestamp_names_entry(self, snapshot_entries):
        snapshot_entries[0]["responded_at"] = "last week"

        with pytest.raises(ValueError, match="Snapshot entry 0"):
            records_from_dicts(snapshot_entries)

    def test_non_object_participant_names_entry(self, snapshot_entries):
        snapshot_entries[1]["participant"] = "p2"

        with pytest.raises(ValueError, match="Snapshot entry 1: participant must be an object"):
            records_from_dicts(snapshot_entries)

    def test_whitespace_participant_id_is_kept(self, snapshot_entries):
        snapshot_entries[0]["participant"]["id"] = " "

        assert records_from_dicts(snapshot_entries)[0].participant.id == " "

    @pytest.mark.parametrize("value", [None, {"rsvps": []}, "[]"])
    def test_non_list_is_malformed(self, value):
        with pytest.raises(MalformedBatch):
            records_from_dicts(value)

    def test_non_object_entry_is_malformed(self):
        with pytest.raises(MalformedBatch, match="entry 0"):
            records_from_dicts(["p1"])


class TestRecordsToDicts:
    """Test records_to_dicts()."""

    def test_encodes_records(self):
        record = ResponseRecord(
            participant=Participant(id="p3", name="Sofia Chen"),
            status=ResponseStatus.TENTATIVE,
            responded_at=datetime(2026, 10, 13, 18, 5, tzinfo=timezone.utc),
        )

        assert records_to_dicts([record]) == [{
            "participant": {"id": "p3", "name": "Sofia Chen", "email": ""},
            "status": "Maybe",
            "responded_at": "2026-10-13T18:05:00+00:00",
        }]


class TestLoadJson:
    """Test load_json()."""

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_json(str(tmp_path / "missing.json"))

    def test_malformed_json(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")

        with pytest.raises(json.JSONDecodeError, match="Malformed snapshot broken.json"):
            load_json(str(path))

    def test_retries_on_permission_error(self, tmp_path):
        path = tmp_path / "rsvps.json"
        path.write_text("[]", encoding="utf-8")

        with patch.object(Path, "read_text", side_effect=[PermissionError("locked"), "[]"]) as read_text:
            assert load_json(str(path), retry_delay=0) == []

        assert read_text.call_count == 2

    def test_gives_up_after_retries(self, tmp_path):
        path = tmp_path / "rsvps.json"
        path.write_text("[]", encoding="utf-8")

        with patch.object(Path, "read_text", side_effect=PermissionError("locked")) as read_text:
            with pytest.raises(PermissionError, match="after 2 attempts"):
                load_json(str(path), retry_count=2, retry_delay=0)

        assert read_text.call_count == 2


class TestLoadSnapshot:
    """Test load_snapshot()."""

    def test_wrapped_snapshot(self, tmp_path, snapshot_entries):
        path = tmp_path / "rsvps.json"
        path.write_text(json.dumps({"rsvps": snapshot_entries}), encoding="utf-8")

        records = load_snapshot(str(path))

        assert [r.participant.id for r in records] == ["p1", "p2"]

    def test_bare_list_snapshot(self, tmp_path, snapshot_entries):
        path = tmp_path / "rsvps.json"
        path.write_text(json.dumps(snapshot_entries), encoding="utf-8")

        assert len(load_snapshot(str(path))) == 2

    def test_scalar_snapshot_is_malformed(self, tmp_path):
        path = tmp_path / "rsvps.json"
        path.write_text("42", encoding="utf-8")

        with pytest.raises(MalformedBatch):
            load_snapshot(str(path))
