"""Custom exception classes."""


class RegistryError(Exception):
    """Base class for RSVP registry failures."""
    pass


class InvalidParticipant(RegistryError, ValueError):
    """Raised when a participant has no identifier."""
    pass


class MalformedBatch(RegistryError, TypeError):
    """Raised when bulk-load input is not a sequence of response records."""
    pass


class SkippedCandidate(RegistryError):
    """Reported (never raised) for a bulk-load candidate that was not stored."""

    def __init__(self, message: str, index: int):
        super().__init__(message)
        self.index = index
