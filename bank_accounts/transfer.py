"""Money transfer between two accounts.

A transfer withdraws from the source and then deposits into the destination.
Both account locks are held for the whole operation, taken in ascending
account-number order (object identity breaks ties) so two opposite transfers
cannot deadlock.

If the deposit fails after the withdrawal went through, the amount is put
back into the source (``BankConfig.compensate_failed_deposits``). With
compensation switched off the source stays debited and the money is lost;
that mode only exists to reproduce the plain withdraw-then-deposit sequence.
"""

import uuid
from contextlib import ExitStack
from datetime import datetime, timezone
from decimal import Decimal

from bank_accounts.config import get_config
from bank_accounts.exceptions import SameAccountError
from bank_accounts.logging import get_logger, log_fields
from bank_accounts.models.base import Account, Event
from bank_accounts.models.enums import TransferStatus
from bank_accounts.models.transfer import TransferRecord
from bank_accounts.money import MoneyLike, to_money, validate_amount
from bank_accounts.sinks.base import EventSink
from bank_accounts.sinks.serialization import to_dict

logger = get_logger(__name__)

EVENT_SOURCE = "bank-accounts"

EVENT_TYPES = {
    TransferStatus.COMPLETED: "transfer.completed",
    TransferStatus.FAILED: "transfer.failed",
    TransferStatus.REVERSED: "transfer.reversed",
}


def transfer(
    source: Account,
    destination: Account,
    amount: MoneyLike,
    sink: EventSink | None = None,
) -> TransferRecord:
    """Move ``amount`` from ``source`` to ``destination``.

    Parameters
    ----------
    source : Account
        Account to withdraw from.
    destination : Account
        Account to deposit into.
    amount : MoneyLike
        Amount to move.
    sink : EventSink | None
        Receives one event per transfer attempt.

    Returns
    -------
    TransferRecord
        Record of the completed transfer.

    Raises
    ------
    BankAccountsError
        The withdrawal's error if the withdrawal fails, otherwise the
        deposit's error. A withdrawal failure leaves both balances unchanged.
    """
    if source is destination:
        raise SameAccountError(
            f"Cannot transfer from account {source.account_number} to itself"
        )

    config = get_config()
    amt = validate_amount(amount) if config.validate_amounts else to_money(amount)
    transfer_id = uuid.uuid4().hex

    with ExitStack() as stack:
        for account in sorted((source, destination), key=_lock_order):
            stack.enter_context(account.lock)

        try:
            source.withdraw(amt)
        except Exception as exc:
            _emit(sink, _record(transfer_id, source, destination, amt, TransferStatus.FAILED, exc))
            raise

        try:
            destination.deposit(amt)
        except Exception as exc:
            if config.compensate_failed_deposits:
                source.deposit(amt)
                logger.warning(
                    "Deposit into %s failed, returned %s to %s: %s",
                    destination.account_number,
                    amt,
                    source.account_number,
                    exc,
                    extra=_fields(transfer_id, source, destination, amt, TransferStatus.REVERSED),
                )
                status = TransferStatus.REVERSED
            else:
                logger.warning(
                    "Deposit into %s failed after debiting %s from %s: %s",
                    destination.account_number,
                    amt,
                    source.account_number,
                    exc,
                    extra=_fields(transfer_id, source, destination, amt, TransferStatus.FAILED),
                )
                status = TransferStatus.FAILED
            _emit(sink, _record(transfer_id, source, destination, amt, status, exc))
            raise

    record = _record(transfer_id, source, destination, amt, TransferStatus.COMPLETED)
    logger.info(
        "Transferred %s from %s to %s",
        amt,
        source.account_number,
        destination.account_number,
        extra=_fields(transfer_id, source, destination, amt, TransferStatus.COMPLETED),
    )
    _emit(sink, record)
    return record


def _fields(
    transfer_id: str,
    source: Account,
    destination: Account,
    amount: Decimal,
    status: TransferStatus,
) -> dict:
    return log_fields(
        transfer_id=transfer_id,
        source_account=source.account_number,
        destination_account=destination.account_number,
        amount=amount,
        status=status,
    )


def _lock_order(account: Account) -> tuple[str, int]:
    # id() breaks ties between distinct accounts sharing a number
    return account.account_number, id(account)


def _record(
    transfer_id: str,
    source: Account,
    destination: Account,
    amount: Decimal,
    status: TransferStatus,
    error: Exception | None = None,
) -> TransferRecord:
    return TransferRecord(
        transfer_id=transfer_id,
        source_account=source.account_number,
        destination_account=destination.account_number,
        amount=amount,
        status=status,
        timestamp=datetime.now(timezone.utc),
        error=str(error) if error is not None else None,
    )


def to_event(record: TransferRecord) -> Event:
    """Wrap a transfer record in the standard event envelope."""
    return Event(
        event_id=uuid.uuid4().hex,
        event_type=EVENT_TYPES[record.status],
        event_time=record.timestamp,
        source=EVENT_SOURCE,
        subject=record.transfer_id,
        data=to_dict(record),
    )


def _emit(sink: EventSink | None, record: TransferRecord) -> None:
    if sink is not None:
        sink.write_event(to_event(record))
