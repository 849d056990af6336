"""Response status and record data models."""
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any, Dict, Union

from rsvp_registry.models.participant import Participant


class ResponseStatus(str, Enum):
    """Closed set of RSVP answers. Values are the labels shown to attendees."""

    CONFIRMED = "Yes"
    DECLINED = "No"
    TENTATIVE = "Maybe"

    @classmethod
    def parse(cls, value: Union["ResponseStatus", str]) -> "ResponseStatus":
        """
        Resolve a status from a member, a label or a member name.

        Args:
            value: ResponseStatus, "Yes"/"No"/"Maybe", or "confirmed"/"declined"/"tentative"

        Returns:
            ResponseStatus member

        Raises:
            ValueError: If value names no status
        """
        if isinstance(value, cls):
            return value

        if isinstance(value, str):
            text = value.strip()
            for member in cls:
                if text == member.value or text.upper() == member.name:
                    return member

        raise ValueError(f"Unknown RSVP status: {value!r}")


@dataclass(frozen=True)
class ResponseRecord:
    """A participant's current answer and when it was given."""

    participant: Participant
    status: ResponseStatus
    responded_at: datetime

    def to_dict(self) -> Dict[str, Any]:
        return {
            "participant": {
                "id": self.participant.id,
                "name": self.participant.name,
                "email": self.participant.email,
            },
            "status": self.status.value,
            "responded_at": self.responded_at.isoformat(),
        }


@dataclass(frozen=True)
class ResponseCounts:
    """Aggregate totals for the registry."""

    total: int = 0
    confirmed: int = 0
    declined: int = 0
    tentative: int = 0

    def __post_init__(self):
        """Validate that the per-status counts add up."""
        if self.total != self.confirmed + self.declined + self.tentative:
            raise ValueError(
                f"Total ({self.total}) must equal the sum of status counts "
                f"({self.confirmed} + {self.declined} + {self.tentative})"
            )

    def for_status(self, status: ResponseStatus) -> int:
        """Count for a single status."""
        return {
            ResponseStatus.CONFIRMED: self.confirmed,
            ResponseStatus.DECLINED: self.declined,
            ResponseStatus.TENTATIVE: self.tentative,
        }[status]

    def to_dict(self) -> Dict[str, int]:
        return {
            "total": self.total,
            "confirmed": self.confirmed,
            "declined": self.declined,
            "tentative": self.tentative,
        }
