"""Savings and checking accounts with money transfers between them."""

from bank_accounts.config import BankConfig, get_config, set_config
from bank_accounts.exceptions import (
    BankAccountsError,
    InsufficientFundsError,
    InvalidAmountError,
    SameAccountError,
)
from bank_accounts.models import (
    Account,
    CheckingAccount,
    SavingsAccount,
    open_checking_account,
    open_savings_account,
)
from bank_accounts.transfer import transfer

__version__ = "0.1.0"

__all__ = [
    "Account",
    "BankAccountsError",
    "BankConfig",
    "CheckingAccount",
    "InsufficientFundsError",
    "InvalidAmountError",
    "SameAccountError",
    "SavingsAccount",
    "get_config",
    "open_checking_account",
    "open_savings_account",
    "set_config",
    "transfer",
]
