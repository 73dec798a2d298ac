"""Transfer record model."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from bank_accounts.models.enums import TransferStatus


@dataclass
class TransferRecord:
    """Outcome of one transfer between two accounts."""

    transfer_id: str
    source_account: str
    destination_account: str
    amount: Decimal
    status: TransferStatus
    timestamp: datetime
    error: str | None = None
