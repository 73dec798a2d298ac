"""Configuration management for bank-accounts."""

import os
from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation

from bank_accounts.exceptions import ConfigurationError


@dataclass
class SavingsPolicy:
    """Policy fields fixed when a savings account is opened.

    The interest rate is stored on the account but never applied.
    """

    interest_rate: Decimal = Decimal("0.9")
    min_balance: Decimal = Decimal("15.0")


@dataclass
class CheckingPolicy:
    """Policy fields fixed when a checking account is opened.

    The transaction fee is stored on the account but never charged.
    """

    transaction_fee: Decimal = Decimal("0.15")


@dataclass
class BankConfig:
    """Main configuration for bank-accounts."""

    savings: SavingsPolicy = field(default_factory=SavingsPolicy)
    checking: CheckingPolicy = field(default_factory=CheckingPolicy)
    validate_amounts: bool = True
    compensate_failed_deposits: bool = True
    log_level: str = "INFO"
    seed: int | None = None

    @classmethod
    def from_env(cls) -> "BankConfig":
        """Create config from environment variables."""
        savings = SavingsPolicy(
            interest_rate=_env_decimal("SAVINGS_INTEREST_RATE", "0.9"),
            min_balance=_env_decimal("SAVINGS_MIN_BALANCE", "15.0"),
        )

        checking = CheckingPolicy(
            transaction_fee=_env_decimal("CHECKING_TRANSACTION_FEE", "0.15"),
        )

        seed = os.getenv("SEED")
        try:
            parsed_seed = int(seed) if seed else None
        except ValueError as exc:
            raise ConfigurationError(f"SEED must be an integer, got {seed!r}") from exc

        return cls(
            savings=savings,
            checking=checking,
            validate_amounts=os.getenv("VALIDATE_AMOUNTS", "true").lower() == "true",
            compensate_failed_deposits=os.getenv("COMPENSATE_TRANSFERS", "true").lower() == "true",
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            seed=parsed_seed,
        )


def _env_decimal(name: str, default: str) -> Decimal:
    raw = os.getenv(name, default)
    try:
        value = Decimal(raw)
    except InvalidOperation as exc:
        raise ConfigurationError(f"{name} must be a decimal number, got {raw!r}") from exc
    if not value.is_finite():
        raise ConfigurationError(f"{name} must be a finite number, got {raw!r}")
    return value


_active_config: BankConfig | None = None


def get_config() -> BankConfig:
    """Return the process-wide configuration, creating defaults on first use."""
    global _active_config
    if _active_config is None:
        _active_config = BankConfig()
    return _active_config


def set_config(config: BankConfig | None) -> None:
    """Replace the process-wide configuration (``None`` restores defaults)."""
    global _active_config
    _active_config = config
