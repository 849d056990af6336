#!/usr/bin/env python3
"""
RSVP Registry Example
Console walkthrough of adding, updating and listing responses
"""

import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from rsvp_registry.models.participant import Participant
from rsvp_registry.models.response import ResponseStatus
from rsvp_registry.services.notifier import StreamNotifier
from rsvp_registry.services.registry_service import ResponseRegistry
from rsvp_registry.ui.console import format_attendee_line, format_counts, format_status_section

PLAYERS = [
    Participant(id="p1", name="Emily Rodriguez", email="emily@example.com"),
    Participant(id="p2", name="James Wilson", email="james@example.com"),
    Participant(id="p3", name="Sofia Chen", email="sofia@example.com"),
    Participant(id="p4", name="Miguel Santos", email="miguel@example.com"),
    Participant(id="p5", name="Olivia Johnson", email="olivia@example.com"),
]


def print_lines(lines):
    print()
    for line in lines:
        print(line)


def print_by_status(registry):
    """Print every response grouped by status."""
    print("\nAll RSVPs by Status:")
    print_lines(format_status_section("Confirmed (Yes)", registry.confirmed()))
    print_lines(format_status_section("Declined (No)", registry.declined()))
    print_lines(format_status_section("Tentative (Maybe)", registry.tentative()))


def main():
    registry = ResponseRegistry(notifier=StreamNotifier())

    print("==== RSVP Registry Example ====")

    print("\nAdding initial RSVPs...")
    registry.upsert(PLAYERS[0], ResponseStatus.CONFIRMED)
    registry.upsert(PLAYERS[1], ResponseStatus.DECLINED)
    registry.upsert(PLAYERS[2], ResponseStatus.TENTATIVE)

    print_lines(format_counts(registry.counts()))

    print("\nConfirmed Attendees:")
    for record in registry.confirmed():
        print(format_attendee_line(record, with_email=True))

    print("\nUpdating RSVPs...")
    registry.upsert(PLAYERS[2], ResponseStatus.CONFIRMED)  # Sofia: Maybe -> Yes
    registry.upsert(PLAYERS[3], ResponseStatus.CONFIRMED)
    registry.upsert(PLAYERS[4], ResponseStatus.DECLINED)

    print_lines(format_counts(registry.counts()))
    print_by_status(registry)


if __name__ == "__main__":
    main()
