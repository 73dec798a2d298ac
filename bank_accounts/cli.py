"""Command line demonstration of accounts and transfers.

The default run opens Alice's savings account and Bob's checking account,
exercises a deposit and a withdrawal on each and then tries to move money
from Alice to Bob, printing every step. With ``--random N`` it instead runs N
transfers between generated accounts.

Failures are printed and never change the exit status.
"""

import argparse
import random
import sys
from datetime import date
from decimal import Decimal

from bank_accounts.config import BankConfig, set_config
from bank_accounts.exceptions import BankAccountsError
from bank_accounts.generators import AccountGenerator
from bank_accounts.logging import get_logger, setup_logging
from bank_accounts.models import open_checking_account, open_savings_account
from bank_accounts.money import to_money
from bank_accounts.sinks import ConsoleSink, EventSink
from bank_accounts.transfer import transfer

logger = get_logger(__name__)


def run_demo(
    transfer_amount: Decimal = Decimal("76.0"),
    overdraft: bool = False,
    sink: EventSink | None = None,
) -> None:
    """Run the fixed Alice/Bob walkthrough."""
    alice = open_savings_account("12345", "Alice", date(1999, 1, 3))
    print(f"Alice's account = {alice}")
    _attempt(alice.deposit, Decimal("100.0"))
    print(f"Alice's account (after deposit) = {alice}")
    if _attempt(alice.withdraw, Decimal("10")):
        print(f"Alice's account (after withdrawal) = {alice}")

    bob = open_checking_account("98765", "Bob", date(1997, 4, 3), overdraft_enabled=overdraft)
    print(f"\nBob's account = {bob}")
    _attempt(bob.deposit, Decimal("100.0"))
    print(f"Bob's account (after deposit) = {bob}")
    if _attempt(bob.withdraw, Decimal("77")):
        print(f"Bob's account (after withdrawal) = {bob}")

    print(f"\nTransferring {transfer_amount} from Alice to Bob's account")
    if _attempt(transfer, alice, bob, transfer_amount, sink=sink):
        print(f"Transferred {transfer_amount} from {alice.account_number} to {bob.account_number}")
    print(f"Alice's account = {alice}")
    print(f"Bob's account = {bob}")


def run_random(
    count: int,
    num_accounts: int = 4,
    seed: int | None = None,
    sink: EventSink | None = None,
) -> dict[str, int]:
    """Run ``count`` random transfers between generated accounts.

    Returns
    -------
    dict[str, int]
        Number of succeeded and failed transfers.
    """
    generator = AccountGenerator(seed=seed)
    accounts = list(generator.generate_batch(max(2, num_accounts)))
    for account in accounts:
        print(account)

    stats = {"succeeded": 0, "failed": 0}
    print()
    for _ in range(count):
        src, dst = random.sample(accounts, 2)
        amount = AccountGenerator.amount(Decimal("1.00"), Decimal("150.00"))
        print(f"Transferring {amount} from {src.account_number} to {dst.account_number}")
        if _attempt(transfer, src, dst, amount, sink=sink):
            stats["succeeded"] += 1
        else:
            stats["failed"] += 1

    print()
    for account in accounts:
        print(account)
    print(f"\n{stats['succeeded']} transfers succeeded, {stats['failed']} failed")
    return stats


def _attempt(operation, *args, **kwargs) -> bool:
    """Call ``operation`` and print its error instead of propagating it."""
    try:
        operation(*args, **kwargs)
    except BankAccountsError as exc:
        print(exc)
        return False
    return True


def _amount_arg(value: str) -> Decimal:
    try:
        return to_money(value)
    except BankAccountsError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def _account_count(value: str) -> int:
    count = int(value)
    if not 2 <= count <= AccountGenerator.MAX_ACCOUNTS:
        raise argparse.ArgumentTypeError(
            f"must be between 2 and {AccountGenerator.MAX_ACCOUNTS}, got {count}"
        )
    return count


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bank-accounts",
        description="Demonstrate savings/checking accounts and transfers",
    )
    parser.add_argument("--log-level", default=None, help="Log level (default: LOG_LEVEL or INFO)")
    parser.add_argument(
        "--log-format",
        choices=["standard", "json"],
        default="standard",
        help="Log output format (default: standard)",
    )
    parser.add_argument("--overdraft", action="store_true", help="Enable overdraft on Bob's account")
    parser.add_argument(
        "--amount",
        type=_amount_arg,
        default=Decimal("76.0"),
        help="Amount to transfer from Alice to Bob (default: 76.0)",
    )
    parser.add_argument("--events", action="store_true", help="Print transfer events as JSON")
    parser.add_argument(
        "--random",
        type=int,
        default=0,
        metavar="N",
        help="Run N random transfers between generated accounts",
    )
    parser.add_argument(
        "--accounts",
        type=_account_count,
        default=4,
        help=f"Number of generated accounts for --random, 2 to {AccountGenerator.MAX_ACCOUNTS} (default: 4)",
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed (default: SEED)")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Entry point; always returns 0."""
    args = build_parser().parse_args(argv)

    try:
        config = BankConfig.from_env()
    except BankAccountsError as exc:
        print(f"Ignoring invalid environment configuration: {exc}")
        config = BankConfig()
    set_config(config)
    setup_logging(level=args.log_level or config.log_level, format_type=args.log_format)

    sink = ConsoleSink(pretty=False) if args.events else None

    if args.random > 0:
        seed = args.seed if args.seed is not None else config.seed
        logger.info("Running %d random transfers", args.random)
        run_random(args.random, num_accounts=args.accounts, seed=seed, sink=sink)
    else:
        run_demo(transfer_amount=args.amount, overdraft=args.overdraft, sink=sink)

    if sink is not None:
        sink.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
