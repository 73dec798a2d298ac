"""Helpers for converting and checking monetary amounts."""

from decimal import Decimal, InvalidOperation

from bank_accounts.exceptions import InvalidAmountError

MoneyLike = Decimal | int | float | str

ZERO = Decimal("0")


def to_money(value: MoneyLike) -> Decimal:
    """Convert a number or numeric string to ``Decimal``.

    Floats go through ``str()`` so ``0.1`` becomes ``Decimal("0.1")`` rather
    than its binary expansion. No rounding is applied.

    Raises
    ------
    InvalidAmountError
        If the value is not a finite number.
    """
    if isinstance(value, Decimal):
        money = value
    else:
        try:
            money = Decimal(str(value))
        except InvalidOperation as exc:
            raise InvalidAmountError(f"Not a monetary amount: {value!r}") from exc
    if not money.is_finite():
        raise InvalidAmountError(f"Not a monetary amount: {value!r}")
    return money


def validate_amount(value: MoneyLike) -> Decimal:
    """Convert ``value`` to ``Decimal`` and reject zero or negative amounts."""
    amount = to_money(value)
    if amount <= ZERO:
        raise InvalidAmountError(f"Amount must be positive, got {amount}")
    return amount
