"""In-memory registry of participant RSVP responses."""
import logging
from datetime import datetime
from threading import Lock
from typing import Any, Callable, Dict, Iterable, List, Optional

from rsvp_registry.models.participant import Participant
from rsvp_registry.models.response import ResponseCounts, ResponseRecord, ResponseStatus
from rsvp_registry.services.notifier import LoggingNotifier, Notifier
from rsvp_registry.utils import date_utils
from rsvp_registry.utils.exceptions import InvalidParticipant, MalformedBatch, SkippedCandidate
from rsvp_registry.utils.validation import is_batch, validate_candidate, validate_participant_id

logger = logging.getLogger(__name__)


class ResponseRegistry:
    """
    Current RSVP response per participant, keyed by participant ID.

    Listings follow the order in which each participant ID was first stored;
    replacing a record keeps its position. Every public operation reads or
    swaps state under one lock; notifications go out after it is released,
    so a notifier may call back into the registry.
    """

    def __init__(
        self,
        notifier: Optional[Notifier] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self._records: Dict[str, ResponseRecord] = {}
        self._lock = Lock()
        self._notifier = notifier if notifier is not None else LoggingNotifier()
        self._clock = clock or date_utils.now

    @property
    def notifier(self) -> Notifier:
        return self._notifier

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)

    def __contains__(self, participant_id: object) -> bool:
        with self._lock:
            return participant_id in self._records

    def _info(self, message: str, *context: Any) -> None:
        try:
            self._notifier.notify_info(message, *context)
        except Exception:
            logger.exception("Notifier failed while reporting info")

    def _error(self, message: str, error: Optional[BaseException] = None, *context: Any) -> None:
        try:
            self._notifier.notify_error(message, error, *context)
        except Exception:
            logger.exception("Notifier failed while reporting error")

    def upsert(self, participant: Participant, status: ResponseStatus) -> ResponseRecord:
        """
        Add or replace a participant's response.

        Args:
            participant: Participant answering; stored verbatim
            status: New response status

        Returns:
            The newly stored ResponseRecord

        Raises:
            InvalidParticipant: If the participant has no identifier
            TypeError: If status is not a ResponseStatus

        Behavior:
            - Timestamps the record at call time
            - Replaces the whole prior record, name and email included
            - Reports the rejection before raising; state is left unchanged
        """
        is_valid, error_msg = validate_participant_id(getattr(participant, "id", None))
        if not is_valid:
            error = InvalidParticipant(error_msg)
            self._error("Cannot add RSVP: participant is missing an ID", error)
            raise error

        if not isinstance(status, ResponseStatus):
            raise TypeError(f"Status must be a ResponseStatus, got: {status!r}")

        with self._lock:
            record = ResponseRecord(
                participant=participant,
                status=status,
                responded_at=self._clock(),
            )
            self._records[participant.id] = record

        self._info(f"RSVP updated for participant {participant.display_label()}: {status.value}")

        return record

    def list_by_status(self, status: ResponseStatus) -> List[ResponseRecord]:
        """Records whose status equals ``status``."""
        with self._lock:
            return [record for record in self._records.values() if record.status == status]

    def list_all(self) -> List[ResponseRecord]:
        """Every stored record."""
        with self._lock:
            return list(self._records.values())

    def confirmed(self) -> List[ResponseRecord]:
        return self.list_by_status(ResponseStatus.CONFIRMED)

    def declined(self) -> List[ResponseRecord]:
        return self.list_by_status(ResponseStatus.DECLINED)

    def tentative(self) -> List[ResponseRecord]:
        return self.list_by_status(ResponseStatus.TENTATIVE)

    def counts(self) -> ResponseCounts:
        """Totals computed from the current records."""
        with self._lock:
            records = list(self._records.values())

        return ResponseCounts(
            total=len(records),
            confirmed=sum(1 for r in records if r.status == ResponseStatus.CONFIRMED),
            declined=sum(1 for r in records if r.status == ResponseStatus.DECLINED),
            tentative=sum(1 for r in records if r.status == ResponseStatus.TENTATIVE),
        )

    def replace_all(self, records: Iterable[ResponseRecord]) -> None:
        """
        Discard all responses and load ``records`` in their place.

        Args:
            records: Sequence of ResponseRecord candidates

        Raises:
            MalformedBatch: If records is not a sequence of ResponseRecord;
                nothing is changed

        Behavior:
            - Candidates without a participant ID are skipped, one error each
            - Later candidates win over earlier ones with the same ID
            - The new mapping is built first and swapped in at the end
        """
        if not is_batch(records):
            error = MalformedBatch(
                f"Entries must be a sequence of response records, got: {type(records).__name__}"
            )
            self._error("Cannot initialize: entries must be a sequence", error)
            raise error

        loaded: Dict[str, ResponseRecord] = {}
        skipped: List[SkippedCandidate] = []

        for index, candidate in enumerate(records):
            if not isinstance(candidate, ResponseRecord):
                error = MalformedBatch(
                    f"Entry {index} is not a response record: {type(candidate).__name__}"
                )
                self._error("Cannot initialize: malformed entry", error)
                raise error

            is_valid, reason = validate_candidate(candidate)
            if not is_valid:
                skipped.append(SkippedCandidate(f"Entry {index}: {reason}", index))
                continue

            loaded[candidate.participant.id] = candidate

        with self._lock:
            self._records = loaded

        for skip in skipped:
            self._error("Skipping invalid RSVP entry", skip)
        self._info(f"Initialized with {len(loaded)} RSVP entries")

    def get_by_participant(self, participant_id: str) -> Optional[ResponseRecord]:
        """Current record for ``participant_id``, or None."""
        with self._lock:
            return self._records.get(participant_id)
