"""Savings account model."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from bank_accounts.config import get_config
from bank_accounts.models.base import Account
from bank_accounts.models.enums import AccountType


@dataclass(eq=False)
class SavingsAccount(Account):
    """Savings account that keeps at least ``min_balance`` after withdrawals."""

    account_type = AccountType.SAVINGS

    interest_rate: Decimal = Decimal("0.9")  # stored only, never applied
    min_balance: Decimal = Decimal("15.0")

    def can_withdraw(self, amount: Decimal) -> bool:
        return self.balance - amount >= self.min_balance


def open_savings_account(account_number: str, holder_name: str, open_date: date) -> SavingsAccount:
    """Open an empty savings account with the configured interest and minimum balance."""
    policy = get_config().savings
    return SavingsAccount(
        account_number=account_number,
        holder_name=holder_name,
        open_date=open_date,
        interest_rate=policy.interest_rate,
        min_balance=policy.min_balance,
    )
