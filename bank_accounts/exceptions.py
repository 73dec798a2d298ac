"""Custom exception hierarchy for bank-accounts."""

from decimal import Decimal


class BankAccountsError(Exception):
    """Base exception for all bank-accounts errors."""


class InsufficientFundsError(BankAccountsError):
    """Raised when a withdrawal would break the account's balance rule."""

    def __init__(self, account_number: str, balance: Decimal, amount: Decimal) -> None:
        super().__init__(
            f"Not enough money to withdraw {amount} from account {account_number} "
            f"(balance {balance})"
        )
        self.account_number = account_number
        self.balance = balance
        self.amount = amount


class InvalidAmountError(BankAccountsError):
    """Raised when an amount is zero, negative or not a number."""


class SameAccountError(BankAccountsError):
    """Raised when a transfer names the same account on both sides."""


class ConfigurationError(BankAccountsError):
    """Raised when configuration is invalid or missing."""
