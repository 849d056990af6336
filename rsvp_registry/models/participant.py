"""Participant data model."""
from dataclasses import dataclass


@dataclass(frozen=True)
class Participant:
    """Person who may respond to the event."""

    id: str
    name: str = ""
    email: str = ""

    def has_id(self) -> bool:
        """Check if the participant carries a usable identifier."""
        return isinstance(self.id, str) and bool(self.id)

    def display_label(self) -> str:
        """Name followed by the identifier, e.g. ``Alice (p1)``."""
        if self.name and self.name.strip():
            return f"{self.name} ({self.id})"
        return str(self.id)
