"""Synthetic data generators."""

from bank_accounts.generators.account import AccountGenerator

__all__ = ["AccountGenerator"]
