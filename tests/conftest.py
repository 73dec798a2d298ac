"""Pytest configuration and fixtures."""

import logging
from datetime import date

import pytest

from bank_accounts.config import set_config
from bank_accounts.models import (
    CheckingAccount,
    SavingsAccount,
    open_checking_account,
    open_savings_account,
)
from bank_accounts.sinks import MemorySink


@pytest.fixture(autouse=True)
def default_config():
    """Every test starts and ends with the default configuration."""
    set_config(None)
    yield
    set_config(None)


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture
def open_date() -> date:
    """Sample opening date."""
    return date(1999, 1, 3)


@pytest.fixture
def savings(open_date: date) -> SavingsAccount:
    """Empty savings account with default policy."""
    return open_savings_account("12345", "Alice", open_date)


@pytest.fixture
def checking() -> CheckingAccount:
    """Empty checking account without overdraft."""
    return open_checking_account("98765", "Bob", date(1997, 4, 3))


@pytest.fixture
def overdraft_checking() -> CheckingAccount:
    """Empty checking account with overdraft enabled."""
    return open_checking_account("55555", "Carol", date(2005, 6, 1), overdraft_enabled=True)


@pytest.fixture
def sink() -> MemorySink:
    """Sink collecting events in memory."""
    return MemorySink()


@pytest.fixture(autouse=True)
def restore_root_logging():
    """Undo handler and level changes made by setup_logging."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
