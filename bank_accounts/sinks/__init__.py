"""Output sinks for account events."""

from bank_accounts.sinks.base import EventSink
from bank_accounts.sinks.console import ConsoleSink
from bank_accounts.sinks.memory import MemorySink

__all__ = ["ConsoleSink", "EventSink", "MemorySink"]
