"""Base models shared by every account variant."""

import threading
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal
from typing import ClassVar

from bank_accounts.config import get_config
from bank_accounts.exceptions import InsufficientFundsError
from bank_accounts.logging import get_logger, log_fields
from bank_accounts.models.enums import AccountType
from bank_accounts.money import MoneyLike, to_money, validate_amount

logger = get_logger(__name__)


@dataclass
class Event:
    """Standard event envelope for observers of account activity."""

    event_id: str
    event_type: str  # entity.action (e.g., transfer.completed)
    event_time: datetime
    source: str  # Service/system that generated
    subject: str  # Entity ID affected
    data: dict
    metadata: dict = field(default_factory=dict)


@dataclass(eq=False)
class Account(ABC):
    """Bank account holding a mutable balance.

    Subclasses decide whether a withdrawal is allowed through
    :meth:`can_withdraw`. Balance changes only through :meth:`deposit` and
    :meth:`withdraw`, both of which hold the account lock while they read and
    write the balance.
    """

    account_type: ClassVar[AccountType]

    account_number: str
    holder_name: str
    open_date: date
    balance: Decimal = Decimal("0")
    _lock: threading.RLock = field(
        default_factory=threading.RLock, init=False, repr=False
    )

    def __str__(self) -> str:
        return (
            f"{self.account_type.value.title()} account {self.account_number} "
            f"({self.holder_name}, opened {self.open_date.isoformat()}): "
            f"balance {self.balance}"
        )

    @property
    def lock(self) -> threading.RLock:
        """Re-entrant lock guarding this account's balance."""
        return self._lock

    def deposit(self, amount: MoneyLike) -> None:
        """Add ``amount`` to the balance."""
        amt = _checked_amount(amount)
        with self._lock:
            logger.debug(
                "Depositing %s into %s",
                amt,
                self.account_number,
                extra=log_fields(account_number=self.account_number, amount=amt),
            )
            self.balance += amt

    def withdraw(self, amount: MoneyLike) -> None:
        """Remove ``amount`` from the balance.

        Raises
        ------
        InsufficientFundsError
            If the account's rule rejects the withdrawal. Balance is unchanged.
        """
        amt = _checked_amount(amount)
        with self._lock:
            if not self.can_withdraw(amt):
                logger.warning(
                    "Rejected withdrawal of %s from %s (balance %s)",
                    amt,
                    self.account_number,
                    self.balance,
                    extra=log_fields(
                        account_number=self.account_number,
                        balance=self.balance,
                        amount=amt,
                    ),
                )
                raise InsufficientFundsError(self.account_number, self.balance, amt)
            logger.debug(
                "Withdrawing %s from %s",
                amt,
                self.account_number,
                extra=log_fields(account_number=self.account_number, amount=amt),
            )
            self.balance -= amt

    @abstractmethod
    def can_withdraw(self, amount: Decimal) -> bool:
        """Return True if ``amount`` may be withdrawn from the current balance."""


def _checked_amount(amount: MoneyLike) -> Decimal:
    if get_config().validate_amounts:
        return validate_amount(amount)
    return to_money(amount)
