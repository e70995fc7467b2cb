"""Console adapter: reads bet commands and prints round reports."""

from __future__ import annotations

import logging
import sys
import threading
from collections.abc import Iterator
from decimal import Decimal
from typing import TextIO

from croupier.config import DEFAULT_PROMPT
from croupier.table.exceptions import BetRejected
from croupier.table.models import Bet, PlayerTotals, RoundReport, format_selection

logger = logging.getLogger(__name__)

SEPARATOR = "---"


def _money(value: Decimal) -> str:
    return f"{value:.2f}"


class Console:
    """Thread-safe writer shared by the input loop and the scheduler thread."""

    def __init__(self, out: TextIO | None = None, prompt: str = DEFAULT_PROMPT):
        self.out = out or sys.stdout
        self.prompt_text = prompt
        self._lock = threading.Lock()

    def write(self, text: str) -> None:
        with self._lock:
            self.out.write(text)
            self.out.flush()

    def prompt(self) -> None:
        self.write(self.prompt_text)

    def bet_placed(self, player_name: str, bet: Bet) -> None:
        self.write(f"BET PLACED: {player_name} {format_selection(bet.selection)} {bet.amount}\n")

    def bet_rejected(self, error: BetRejected) -> None:
        logger.warning(f"Bet rejected ({error.reason.value}): {error}")
        self.write(f"✗ {error}\n")

    def report(self, report: RoundReport) -> None:
        """Print one round: winning number, bet outcomes, then totals."""
        lines = [
            f"\nNumber: {report.winning_number}",
            "Player\tBet\tOutcome\tWinnings",
            SEPARATOR,
        ]
        for result in report.results:
            lines.append(
                f"{result.player}\t{result.selection_label}\t"
                f"{result.outcome.value.upper()}\t{_money(result.payout)}"
            )
        if not report.results:
            lines.append("(no bets this round)")

        lines.append("")
        lines.extend(format_totals(report.totals))

        self.write("\n".join(lines) + "\n")

    def __call__(self, report: RoundReport) -> None:
        self.report(report)


def format_totals(totals: list[PlayerTotals]) -> list[str]:
    """Render the per-player totals table."""
    lines = ["Player\tTotal Win\tTotal Bet", SEPARATOR]
    for entry in totals:
        lines.append(f"{entry.name}\t{_money(entry.total_won)}\t{_money(entry.total_wagered)}")
    return lines


def read_commands(stream: TextIO, console: Console, sentinel: str = "end") -> Iterator[str]:
    """Yield raw command lines until the sentinel line or end of stream.

    The prompt is written before every read. The sentinel matches
    case-insensitively and ignores surrounding whitespace.
    """
    sentinel = sentinel.strip().lower()

    while True:
        console.prompt()
        line = stream.readline()
        if not line:
            logger.info("Input stream closed")
            return

        line = line.rstrip("\r\n")
        if line.strip().lower() == sentinel:
            logger.info("Sentinel received, closing input")
            return

        yield line
