"""Interface shared by event sinks."""

from typing import Protocol

from bank_accounts.models.base import Event


class EventSink(Protocol):
    """Anything that accepts account events."""

    def write_event(self, event: Event) -> None: ...
