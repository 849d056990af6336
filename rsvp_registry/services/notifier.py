"""Notifier implementations the registry reports events to."""
import logging
import sys
from typing import Any, List, Optional, Protocol, TextIO, Tuple


class Notifier(Protocol):
    """Observability capability consumed by ResponseRegistry."""

    def notify_info(self, message: str, *context: Any) -> None:
        ...

    def notify_error(self, message: str, error: Optional[BaseException] = None, *context: Any) -> None:
        ...


class LoggingNotifier:
    """Forward notifications to the standard logging module."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        self.logger = logger or logging.getLogger("rsvp_registry.services.registry_service")

    def notify_info(self, message: str, *context: Any) -> None:
        if context:
            self.logger.info("%s %s", message, " ".join(str(c) for c in context))
        else:
            self.logger.info(message)

    def notify_error(self, message: str, error: Optional[BaseException] = None, *context: Any) -> None:
        text = message
        if context:
            text = f"{message} {' '.join(str(c) for c in context)}"

        if error is not None:
            self.logger.error("%s: %s", text, error)
        else:
            self.logger.error(text)


class StreamNotifier:
    """Write tagged lines to stdout (info) and stderr (error)."""

    def __init__(self, out: Optional[TextIO] = None, err: Optional[TextIO] = None):
        # Resolved lazily so pytest's capsys replacement of sys.stdout is honoured
        self._out = out
        self._err = err

    def _write(self, stream: TextIO, parts: List[str]) -> None:
        stream.write(" ".join(part for part in parts if part) + "\n")
        stream.flush()

    def notify_info(self, message: str, *context: Any) -> None:
        self._write(self._out or sys.stdout, [f"[INFO] {message}"] + [str(c) for c in context])

    def notify_error(self, message: str, error: Optional[BaseException] = None, *context: Any) -> None:
        parts = [f"[ERROR] {message}"]
        if error is not None:
            parts.append(str(error))
        parts.extend(str(c) for c in context)
        self._write(self._err or sys.stderr, parts)


class MemoryNotifier:
    """
    Capture notifications in memory.

    Used as the test double and, with RSVP_NOTIFIER=memory, as the source of
    the dashboard activity panel. Each list keeps the newest ``max_entries``.
    """

    def __init__(self, max_entries: int = 200):
        self.max_entries = max_entries
        self.infos: List[str] = []
        self.errors: List[str] = []
        self.error_details: List[Tuple[str, Optional[BaseException], Tuple[Any, ...]]] = []
        self.activity: List[Tuple[str, str]] = []

    def _keep_newest(self, entries: list) -> None:
        if len(entries) > self.max_entries:
            del entries[:-self.max_entries]

    def notify_info(self, message: str, *context: Any) -> None:
        self.infos.append(message)
        self.activity.append(("INFO", message))
        self._keep_newest(self.infos)
        self._keep_newest(self.activity)

    def notify_error(self, message: str, error: Optional[BaseException] = None, *context: Any) -> None:
        self.errors.append(message)
        self.error_details.append((message, error, context))
        self.activity.append(("ERROR", f"{message}: {error}" if error is not None else message))
        for entries in (self.errors, self.error_details, self.activity):
            self._keep_newest(entries)

    def clear(self) -> None:
        self.infos.clear()
        self.errors.clear()
        self.error_details.clear()
        self.activity.clear()


NOTIFIER_KINDS = {
    "logging": LoggingNotifier,
    "stream": StreamNotifier,
    "memory": MemoryNotifier,
}


def build_notifier(kind: str = "logging") -> Notifier:
    """
    Create a notifier by name.

    Args:
        kind: "logging", "stream" or "memory" (case-insensitive)

    Returns:
        Notifier instance

    Raises:
        ValueError: If kind is unknown
    """
    key = (kind or "").strip().lower()
    if key not in NOTIFIER_KINDS:
        raise ValueError(f"Notifier must be one of {sorted(NOTIFIER_KINDS)}, got: {kind}")
    return NOTIFIER_KINDS[key]()
