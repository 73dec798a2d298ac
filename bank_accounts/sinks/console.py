"""Console sink for watching account events during development."""

import json
import sys
from typing import TextIO

from bank_accounts.models.base import Event
from bank_accounts.sinks.serialization import to_dict


class ConsoleSink:
    """Output events to a text stream (stdout by default) as JSON."""

    def __init__(self, pretty: bool = True, stream: TextIO | None = None) -> None:
        """Initialize console sink.

        Parameters
        ----------
        pretty : bool
            Pretty-print JSON output.
        stream : TextIO | None
            Where to write; defaults to ``sys.stdout`` at write time.
        """
        self.pretty = pretty
        self.stream = stream
        self._counts: dict[str, int] = {}

    def write_event(self, event: Event) -> None:
        """Write one event as JSON."""
        data = to_dict(event)
        if self.pretty:
            text = json.dumps(data, indent=2, ensure_ascii=False)
        else:
            text = json.dumps(data, ensure_ascii=False)
        print(text, file=self.stream or sys.stdout)

        self._counts[event.event_type] = self._counts.get(event.event_type, 0) + 1

    @property
    def counts(self) -> dict[str, int]:
        return dict(self._counts)

    def close(self) -> None:
        """Print summary and close."""
        out = self.stream or sys.stdout
        print(f"\n{'='*60}", file=out)
        print("Console Sink Summary", file=out)
        print("=" * 60, file=out)
        for event_type, count in self._counts.items():
            print(f"  {event_type}: {count} events", file=out)
