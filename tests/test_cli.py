"""Tests for the command line demonstration."""

import json
from decimal import Decimal

import pytest

from bank_accounts.cli import build_parser, main, run_demo, run_random
from bank_accounts.generators import AccountGenerator
from bank_accounts.sinks import MemorySink


class TestRunDemo:
    """Tests for the fixed Alice/Bob walkthrough."""

    def test_default_run(self, capsys: pytest.CaptureFixture) -> None:
        run_demo()
        out = capsys.readouterr().out

        assert "Alice's account (after withdrawal) = Savings account 12345 (Alice, opened 1999-01-03): balance 90.0" in out
        assert "Bob's account (after withdrawal) = Checking account 98765 (Bob, opened 1997-04-03): balance 23.0" in out
        assert "Not enough money to withdraw 76.0 from account 12345 (balance 90.0)" in out
        assert out.rstrip().endswith(
            "Alice's account = Savings account 12345 (Alice, opened 1999-01-03): balance 90.0\n"
            "Bob's account = Checking account 98765 (Bob, opened 1997-04-03): balance 23.0"
        )

    def test_successful_transfer(self, capsys: pytest.CaptureFixture) -> None:
        run_demo(transfer_amount=Decimal("75"))
        out = capsys.readouterr().out

        assert "Transferred 75 from 12345 to 98765" in out
        assert "balance 15.0" in out
        assert "balance 98.0" in out

    def test_events(self) -> None:
        sink = MemorySink()

        run_demo(sink=sink)

        assert [e.event_type for e in sink.events] == ["transfer.failed"]

    def test_invalid_amount_printed(self, capsys: pytest.CaptureFixture) -> None:
        run_demo(transfer_amount=Decimal("-5"))

        assert "Amount must be positive, got -5" in capsys.readouterr().out


class TestRunRandom:
    """Tests for random transfers between generated accounts."""

    def test_counts(self, seed: int, capsys: pytest.CaptureFixture) -> None:
        stats = run_random(10, num_accounts=3, seed=seed)

        assert stats["succeeded"] + stats["failed"] == 10
        out = capsys.readouterr().out
        assert out.count("Transferring ") == 10
        assert f"{stats['succeeded']} transfers succeeded, {stats['failed']} failed" in out

    def test_events_match_outcomes(self, seed: int) -> None:
        sink = MemorySink()

        stats = run_random(20, seed=seed, sink=sink)

        assert len(sink.of_type("transfer.completed")) == stats["succeeded"]
        assert len(sink.of_type("transfer.failed")) == stats["failed"]

    def test_at_least_two_accounts(self, seed: int) -> None:
        stats = run_random(3, num_accounts=1, seed=seed)
        assert stats["succeeded"] + stats["failed"] == 3


class TestMain:
    """Tests for the entry point."""

    def test_exit_status_zero_despite_failure(self, capsys: pytest.CaptureFixture) -> None:
        assert main([]) == 0
        assert "Not enough money" in capsys.readouterr().out

    def test_events_flag(self, capsys: pytest.CaptureFixture) -> None:
        assert main(["--events"]) == 0
        out = capsys.readouterr().out

        event_lines = [line for line in out.splitlines() if line.startswith("{")]
        assert len(event_lines) == 1
        assert json.loads(event_lines[0])["event_type"] == "transfer.failed"
        assert "transfer.failed: 1 events" in out

    def test_overdraft_flag(self, capsys: pytest.CaptureFixture) -> None:
        assert main(["--overdraft"]) == 0
        assert "balance 23.0" in capsys.readouterr().out

    def test_random_flag(self, capsys: pytest.CaptureFixture) -> None:
        assert main(["--random", "5", "--seed", "7"]) == 0
        assert "transfers succeeded" in capsys.readouterr().out

    def test_invalid_env_is_reported(self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture) -> None:
        monkeypatch.setenv("SAVINGS_MIN_BALANCE", "lots")

        assert main([]) == 0
        assert "Ignoring invalid environment configuration" in capsys.readouterr().out

    def test_env_policy_applies(self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture) -> None:
        """A lower minimum balance lets the 76 transfer through."""
        monkeypatch.setenv("SAVINGS_MIN_BALANCE", "10")

        assert main([]) == 0
        assert "Transferred 76.0 from 12345 to 98765" in capsys.readouterr().out


class TestParser:
    """Tests for argument parsing."""

    def test_defaults(self) -> None:
        args = build_parser().parse_args([])

        assert args.amount == Decimal("76.0")
        assert args.random == 0
        assert args.overdraft is False
        assert args.log_format == "standard"

    def test_amount(self) -> None:
        assert build_parser().parse_args(["--amount", "12.5"]).amount == Decimal("12.5")

    @pytest.mark.parametrize("value", ["1", "0", "100001", "many"])
    def test_accounts_out_of_range(self, value: str) -> None:
        with pytest.raises(SystemExit):
            build_parser().parse_args(["--accounts", value])

    def test_accounts_limits(self) -> None:
        parser = build_parser()

        assert parser.parse_args(["--accounts", "2"]).accounts == 2
        assert parser.parse_args(["--accounts", "100000"]).accounts == AccountGenerator.MAX_ACCOUNTS

    def test_bad_amount(self) -> None:
        with pytest.raises(SystemExit):
            build_parser().parse_args(["--amount", "lots"])
