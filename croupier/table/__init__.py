"""Roulette table core: bets, players, intake and round resolution."""

from .exceptions import (
    BetAlreadySettled,
    BetRejected,
    CroupierError,
    EmptyRosterError,
    InvalidAmount,
    InvalidSelection,
    MalformedInput,
    RejectionReason,
    RosterLoadError,
    UnknownPlayer,
)
from .intake import BetIntake, parse_amount, parse_selection
from .models import (
    Bet,
    BetResult,
    Outcome,
    Parity,
    Player,
    PlayerTotals,
    RoundReport,
    Selection,
    SessionSummary,
    format_selection,
)
from .registry import PlayerRegistry
from .resolver import payout_multiplier, resolve

__all__ = [
    # Models
    "Bet",
    "BetResult",
    "Outcome",
    "Parity",
    "Player",
    "PlayerTotals",
    "RoundReport",
    "Selection",
    "SessionSummary",
    "format_selection",
    # Registry / intake / resolution
    "PlayerRegistry",
    "BetIntake",
    "parse_amount",
    "parse_selection",
    "payout_multiplier",
    "resolve",
    # Errors
    "CroupierError",
    "BetRejected",
    "RejectionReason",
    "MalformedInput",
    "InvalidSelection",
    "InvalidAmount",
    "UnknownPlayer",
    "RosterLoadError",
    "EmptyRosterError",
    "BetAlreadySettled",
]
