"""Synthetic account generator."""

import random
from decimal import Decimal
from typing import Iterator

from faker import Faker

from bank_accounts.models import (
    Account,
    AccountType,
    open_checking_account,
    open_savings_account,
)


class AccountGenerator:
    """Generate savings and checking accounts with realistic holders.

    Parameters
    ----------
    seed : int | None
        Random seed for reproducibility.
    locale : str
        Faker locale (default ``en_US``).
    overdraft_rate : float
        Share of generated checking accounts with overdraft enabled.
    """

    ACCOUNT_TYPES = list(AccountType)
    ACCOUNT_TYPE_WEIGHTS = [0.5, 0.5]

    ACCOUNT_NUMBER_DIGITS = 5
    MAX_ACCOUNTS = 10**ACCOUNT_NUMBER_DIGITS  # distinct account numbers available

    def __init__(
        self,
        seed: int | None = None,
        locale: str = "en_US",
        overdraft_rate: float = 0.2,
    ) -> None:
        self.fake = Faker(locale)
        self.overdraft_rate = overdraft_rate
        if seed is not None:
            self.fake.seed_instance(seed)
            random.seed(seed)

    def generate(
        self,
        account_type: AccountType | None = None,
        opening_deposit: Decimal | None = None,
    ) -> Account:
        """Open a single account, optionally funding it.

        Parameters
        ----------
        account_type : AccountType | None
            Variant to open; picked at random when omitted.
        opening_deposit : Decimal | None
            Amount deposited right after opening. A random amount between
            20.00 and 500.00 is used when omitted; pass ``Decimal("0")`` to
            leave the account empty.

        Returns
        -------
        Account
            Generated account.
        """
        if account_type is None:
            account_type = random.choices(
                self.ACCOUNT_TYPES, weights=self.ACCOUNT_TYPE_WEIGHTS, k=1
            )[0]

        account_number = self.fake.unique.numerify("#" * self.ACCOUNT_NUMBER_DIGITS)
        holder_name = self.fake.name()
        open_date = self.fake.date_between(start_date="-30y", end_date="today")

        if account_type == AccountType.SAVINGS:
            account = open_savings_account(account_number, holder_name, open_date)
        else:
            account = open_checking_account(
                account_number,
                holder_name,
                open_date,
                overdraft_enabled=random.random() < self.overdraft_rate,
            )

        if opening_deposit is None:
            opening_deposit = self.amount(Decimal("20.00"), Decimal("500.00"))
        if opening_deposit > 0:
            account.deposit(opening_deposit)
        return account

    def generate_batch(self, count: int, **kwargs) -> Iterator[Account]:
        """Generate ``count`` accounts with unique account numbers."""
        for _ in range(count):
            yield self.generate(**kwargs)

    @staticmethod
    def amount(low: Decimal, high: Decimal) -> Decimal:
        """Random amount in cents between ``low`` and ``high`` inclusive."""
        cents = random.randint(int(low * 100), int(high * 100))
        return Decimal(cents).scaleb(-2)
