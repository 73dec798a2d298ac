"""Account domain models."""

from bank_accounts.models.base import Account, Event
from bank_accounts.models.checking import CheckingAccount, open_checking_account
from bank_accounts.models.enums import AccountType, TransferStatus
from bank_accounts.models.savings import SavingsAccount, open_savings_account
from bank_accounts.models.transfer import TransferRecord

__all__ = [
    "Account",
    "AccountType",
    "CheckingAccount",
    "Event",
    "SavingsAccount",
    "TransferRecord",
    "TransferStatus",
    "open_checking_account",
    "open_savings_account",
]
