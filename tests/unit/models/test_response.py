"""Unit tests for response models."""
import pytest
from datetime import datetime, timezone

from rsvp_registry.models.participant import Participant
from rsvp_registry.models.response import ResponseCounts, ResponseRecord, ResponseStatus


class TestResponseStatus:
    """Test ResponseStatus enum."""

    def test_exactly_three_statuses(self):
        assert [s.value for s in ResponseStatus] == ["Yes", "No", "Maybe"]

    @pytest.mark.parametrize("value,expected", [
        ("Yes", ResponseStatus.CONFIRMED),
        ("No", ResponseStatus.DECLINED),
        ("Maybe", ResponseStatus.TENTATIVE),
        ("confirmed", ResponseStatus.CONFIRMED),
        (" Declined ", ResponseStatus.DECLINED),
        (ResponseStatus.TENTATIVE, ResponseStatus.TENTATIVE),
    ])
    def test_parse(self, value, expected):
        assert ResponseStatus.parse(value) is expected

    @pytest.mark.parametrize("value", ["yes please", "", None, 1])
    def test_parse_rejects_unknown(self, value):
        with pytest.raises(ValueError, match="Unknown RSVP status"):
            ResponseStatus.parse(value)


class TestResponseRecord:
    """Test ResponseRecord dataclass."""

    def test_to_dict(self):
        record = ResponseRecord(
            participant=Participant(id="p1", name="Emily", email="emily@example.com"),
            status=ResponseStatus.CONFIRMED,
            responded_at=datetime(2026, 10, 18, 14, 30, tzinfo=timezone.utc),
        )

        assert record.to_dict() == {
            "participant": {"id": "p1", "name": "Emily", "email": "emily@example.com"},
            "status": "Yes",
            "responded_at": "2026-10-18T14:30:00+00:00",
        }


class TestResponseCounts:
    """Test ResponseCounts dataclass."""

    def test_for_status(self):
        counts = ResponseCounts(total=6, confirmed=3, declined=2, tentative=1)

        assert counts.for_status(ResponseStatus.CONFIRMED) == 3
        assert counts.for_status(ResponseStatus.DECLINED) == 2
        assert counts.for_status(ResponseStatus.TENTATIVE) == 1

    def test_total_must_match_sum(self):
        with pytest.raises(ValueError, match="must equal"):
            ResponseCounts(total=4, confirmed=1, declined=1, tentative=1)

    def test_defaults_are_zero(self):
        assert ResponseCounts().to_dict() == {"total": 0, "confirmed": 0, "declined": 0, "tentative": 0}
