"""Data validation utilities."""
from collections.abc import Iterable, Mapping
from typing import Any, Tuple


def validate_participant_id(participant_id: Any) -> Tuple[bool, str]:
    """
    Validate a participant identifier.

    Args:
        participant_id: Identifier to validate

    Returns:
        Tuple of (is_valid: bool, error_message: str)
        - (True, "") if valid
        - (False, "Participant ID is required") if missing, empty or not a string
    """
    if not isinstance(participant_id, str) or not participant_id:
        return False, "Participant ID is required"
    return True, ""


def validate_candidate(candidate: Any) -> Tuple[bool, str]:
    """
    Validate one bulk-load candidate.

    Args:
        candidate: Object expected to expose a ``participant`` with an ``id``

    Returns:
        Tuple of (is_valid: bool, error_message: str)
        - (True, "") if the candidate can be stored
        - (False, "missing participant") if it has no participant
        - (False, "missing participant ID") if the participant has no usable id
    """
    participant = getattr(candidate, "participant", None)
    if participant is None:
        return False, "missing participant"

    is_valid, _ = validate_participant_id(getattr(participant, "id", None))
    if not is_valid:
        return False, "missing participant ID"

    return True, ""


def is_batch(value: Any) -> bool:
    """
    Check that bulk-load input is a sequence of candidates.

    Strings, bytes and mappings are iterable but never a batch.
    """
    if value is None:
        return False
    if isinstance(value, (str, bytes, bytearray, Mapping)):
        return False
    return isinstance(value, Iterable)
