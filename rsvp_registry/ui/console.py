"""Plain-text formatting for console output."""
from typing import List

from rsvp_registry.models.response import ResponseCounts, ResponseRecord
from rsvp_registry.utils.date_utils import format_responded_at


def format_counts(counts: ResponseCounts) -> List[str]:
    """Lines summarising the registry totals."""
    return [
        "RSVP Counts:",
        f"- Total: {counts.total}",
        f"- Confirmed: {counts.confirmed}",
        f"- Declined: {counts.declined}",
        f"- Maybe: {counts.tentative}",
    ]


def format_attendee_line(record: ResponseRecord, with_email: bool = False) -> str:
    """
    One bullet line for a record.

    Examples:
        "- Emily Rodriguez (emily@example.com)" when with_email is True
        "- Emily Rodriguez (Responded: Oct 18, 02:30 PM)" otherwise
    """
    name = record.participant.name or record.participant.id
    if with_email:
        return f"- {name} ({record.participant.email})"
    return f"- {name} (Responded: {format_responded_at(record.responded_at)})"


def format_status_section(title: str, records: List[ResponseRecord]) -> List[str]:
    """Heading followed by one line per record, or a placeholder when empty."""
    lines = [f"{title}:"]
    if not records:
        lines.append("- (none)")
    else:
        lines.extend(format_attendee_line(record) for record in records)
    return lines
