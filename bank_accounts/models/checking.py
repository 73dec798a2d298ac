"""Checking account model."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from bank_accounts.config import get_config
from bank_accounts.models.base import Account
from bank_accounts.models.enums import AccountType


@dataclass(eq=False)
class CheckingAccount(Account):
    """Checking account, optionally allowed to go below zero.

    Without overdraft a withdrawal needs ``balance >= amount``. With overdraft
    every withdrawal goes through.
    """

    account_type = AccountType.CHECKING

    transaction_fee: Decimal = Decimal("0.15")  # stored only, never charged
    overdraft_enabled: bool = False

    def can_withdraw(self, amount: Decimal) -> bool:
        return self.overdraft_enabled or self.balance >= amount


def open_checking_account(
    account_number: str,
    holder_name: str,
    open_date: date,
    overdraft_enabled: bool = False,
) -> CheckingAccount:
    """Open an empty checking account with the configured transaction fee."""
    return CheckingAccount(
        account_number=account_number,
        holder_name=holder_name,
        open_date=open_date,
        transaction_fee=get_config().checking.transaction_fee,
        overdraft_enabled=overdraft_enabled,
    )
