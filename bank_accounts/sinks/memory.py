"""In-memory sink that keeps every event it receives."""

from bank_accounts.models.base import Event


class MemorySink:
    """Collect events in a list, in arrival order."""

    def __init__(self) -> None:
        self.events: list[Event] = []

    def write_event(self, event: Event) -> None:
        self.events.append(event)

    def of_type(self, event_type: str) -> list[Event]:
        """Return the collected events with the given ``event_type``."""
        return [e for e in self.events if e.event_type == event_type]

    def clear(self) -> None:
        self.events.clear()
