"""Unit tests for the console adapter."""

import io

from croupier.console import Console, read_commands
from croupier.table import BetIntake, InvalidSelection, resolve


def test_read_commands_stops_at_sentinel():
    out = io.StringIO()
    console = Console(out, prompt="> ")
    stream = io.StringIO("Alice 17 10\nBob even 5\n  END  \nCarol odd 1\n")

    lines = list(read_commands(stream, console))

    assert lines == ["Alice 17 10", "Bob even 5"]
    assert out.getvalue() == "> > > "
    # Nothing after the sentinel is consumed
    assert stream.readline() == "Carol odd 1\n"


def test_read_commands_stops_at_end_of_stream():
    console = Console(io.StringIO())

    lines = list(read_commands(io.StringIO("Alice odd 1\r\n\n"), console, sentinel="quit"))

    assert lines == ["Alice odd 1", ""]


def test_report_prints_number_bets_and_totals(registry):
    out = io.StringIO()
    intake = BetIntake(registry)
    intake.place("Alice", "17", "10")
    intake.place("Bob", "even", "5")

    Console(out).report(resolve(registry, 17))

    text = out.getvalue()
    assert "Number: 17" in text
    assert "Alice\t17\tWIN\t360.00" in text
    assert "Bob\teven\tLOSE\t0.00" in text
    assert "Player\tTotal Win\tTotal Bet" in text
    assert "Carol\t5.00\t7.50" in text


def test_report_with_no_bets(registry):
    out = io.StringIO()

    Console(out)(resolve(registry, 0))

    assert "(no bets this round)" in out.getvalue()


def test_bet_messages():
    out = io.StringIO()
    console = Console(out)

    console.bet_rejected(InvalidSelection("Invalid bet '40'", token="40"))

    assert out.getvalue() == "✗ Invalid bet '40'\n"
