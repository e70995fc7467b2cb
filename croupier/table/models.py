"""Data models for the roulette table."""

from __future__ import annotations

from datetime import datetime, timezone
from decimal import Decimal
from enum import Enum
from typing import Annotated, Union

from pydantic import BaseModel, Field

from .exceptions import BetAlreadySettled
from .money import ZERO

MIN_NUMBER = 1
MAX_NUMBER = 36
POCKETS = 37  # 0-36


class Parity(str, Enum):
    """Outside bet on the parity of the winning number."""

    ODD = "odd"
    EVEN = "even"

    def matches(self, number: int) -> bool:
        """Zero is neither odd nor even."""
        if number == 0:
            return False
        if self is Parity.EVEN:
            return number % 2 == 0
        return number % 2 == 1


class Outcome(str, Enum):
    """Resolution state of a bet."""

    UNRESOLVED = "unresolved"
    WIN = "win"
    LOSE = "lose"


# A straight-up number or a parity bet
Selection = Union[Annotated[int, Field(ge=MIN_NUMBER, le=MAX_NUMBER)], Parity]


def format_selection(selection: Selection) -> str:
    """Render a selection the way players type it."""
    if isinstance(selection, Parity):
        return selection.value
    return str(selection)


# ============================================================================
# Entities
# ============================================================================


class Bet(BaseModel):
    """A single wager, pending until the next resolution pass."""

    selection: Selection
    amount: Decimal = Field(ge=0)
    outcome: Outcome = Outcome.UNRESOLVED
    payout: Decimal = ZERO
    placed_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def is_settled(self) -> bool:
        return self.outcome is not Outcome.UNRESOLVED

    def settle(self, outcome: Outcome, payout: Decimal) -> None:
        """Set the outcome exactly once."""
        if self.is_settled:
            raise BetAlreadySettled(
                f"Bet on {format_selection(self.selection)} already settled as {self.outcome.value}"
            )
        if outcome is Outcome.UNRESOLVED:
            raise ValueError("Cannot settle a bet as unresolved")
        self.outcome = outcome
        self.payout = payout


class Player(BaseModel):
    """Roster entry with pending bets and lifetime totals."""

    name: str = Field(min_length=1)
    bets: list[Bet] = Field(default_factory=list)
    total_won: Decimal = ZERO
    total_wagered: Decimal = ZERO

    def add_bet(self, bet: Bet) -> None:
        self.bets.append(bet)

    def clear_bets(self) -> int:
        """Drop every pending bet. Returns how many were dropped."""
        count = len(self.bets)
        self.bets.clear()
        return count

    def totals(self) -> PlayerTotals:
        return PlayerTotals(
            name=self.name,
            total_won=self.total_won,
            total_wagered=self.total_wagered,
        )


# ============================================================================
# Round output
# ============================================================================


class PlayerTotals(BaseModel):
    """Snapshot of a player's totals."""

    name: str
    total_won: Decimal
    total_wagered: Decimal


class BetResult(BaseModel):
    """One settled bet as it appears in a round report."""

    player: str
    selection: Selection
    amount: Decimal
    outcome: Outcome
    payout: Decimal

    @property
    def selection_label(self) -> str:
        return format_selection(self.selection)


class RoundReport(BaseModel):
    """Result of one resolution pass. Built before bets are cleared."""

    round_number: int = Field(ge=1)
    winning_number: int = Field(ge=0, le=MAX_NUMBER)
    results: list[BetResult] = Field(default_factory=list)
    totals: list[PlayerTotals] = Field(default_factory=list)
    resolved_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def total_wagered(self) -> Decimal:
        return sum((r.amount for r in self.results), ZERO)

    @property
    def total_paid(self) -> Decimal:
        return sum((r.payout for r in self.results), ZERO)

    @property
    def winners(self) -> list[BetResult]:
        return [r for r in self.results if r.outcome is Outcome.WIN]


class SessionSummary(BaseModel):
    """Counters for one run of the table."""

    bets_placed: int = 0
    bets_rejected: int = 0
    rounds_resolved: int = 0
    unresolved_bets: int = 0
