"""Date and time utility functions."""
from datetime import datetime


def now() -> datetime:
    """Current local time, timezone-aware."""
    return datetime.now().astimezone()


def parse_timestamp(value: str) -> datetime:
    """
    Parse an ISO 8601 timestamp.

    Args:
        value: Timestamp string (e.g., "2025-10-28T14:00:00+08:00" or "...Z")

    Returns:
        Timezone-aware datetime (naive input is taken as local time)

    Raises:
        ValueError: If the timestamp is not ISO 8601
    """
    if not isinstance(value, str):
        raise ValueError(f"Invalid timestamp format: {value!r}")

    try:
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError as e:
        raise ValueError(f"Invalid timestamp format: {value}") from e

    if parsed.tzinfo is None:
        parsed = parsed.astimezone()
    return parsed


def format_responded_at(moment: datetime) -> str:
    """
    Format a response time for display.

    Args:
        moment: Time the response was recorded

    Returns:
        Short form such as "Oct 18, 02:30 PM"
    """
    return f"{moment.strftime('%b')} {moment.day}, {moment.strftime('%I:%M %p')}"
