"""Round resolution: scores pending bets, updates totals, clears the table."""

import logging
from decimal import Decimal

from .exceptions import BetAlreadySettled
from .models import (
    MAX_NUMBER,
    Bet,
    BetResult,
    Outcome,
    Parity,
    Player,
    PlayerTotals,
    RoundReport,
    Selection,
    format_selection,
)
from .registry import PlayerRegistry

logger = logging.getLogger(__name__)

STRAIGHT_UP_MULTIPLIER = Decimal("36")
PARITY_MULTIPLIER = Decimal("2")
NO_PAYOUT = Decimal("0")


def payout_multiplier(selection: Selection, winning_number: int) -> Decimal:
    """Return what a unit stake on ``selection`` pays for ``winning_number``.

    Payouts include the returned stake:
    - straight-up number hit: 36x
    - odd/even hit: 2x (zero is neither odd nor even)
    - anything else: 0
    """
    if isinstance(selection, Parity):
        return PARITY_MULTIPLIER if selection.matches(winning_number) else NO_PAYOUT
    if selection == winning_number:
        return STRAIGHT_UP_MULTIPLIER
    return NO_PAYOUT


def resolve(
    registry: PlayerRegistry,
    winning_number: int,
    round_number: int = 1,
) -> RoundReport:
    """Settle every pending bet against ``winning_number``.

    Runs as one atomic pass under the registry lock:
    1. Score each bet (roster order, then bet order) and work out the new totals
    2. Build the report and the totals snapshot from those values
    3. Settle the bets, store the totals and clear every player's pending bets

    Steps 1 and 2 leave the table untouched, so a pass that fails there
    changes nothing and the bets stay pending for the next round.

    Args:
        registry: Players with pending bets
        winning_number: Pocket the ball landed in (0-36)
        round_number: Sequence number carried into the report

    Returns:
        RoundReport with each bet's outcome as it was before clearing
    """
    if isinstance(winning_number, bool) or not isinstance(winning_number, int):
        raise ValueError(f"Winning number must be an int, got {winning_number!r}")
    if not 0 <= winning_number <= MAX_NUMBER:
        raise ValueError(f"Winning number must be 0-{MAX_NUMBER}, got {winning_number}")

    with registry.lock:
        results: list[BetResult] = []
        settlements: list[tuple[Bet, Outcome, Decimal]] = []
        totals: list[tuple[Player, PlayerTotals]] = []

        for player in registry:
            total_won = player.total_won
            total_wagered = player.total_wagered

            for bet in player.bets:
                if bet.is_settled:
                    raise BetAlreadySettled(
                        f"Pending bet for {player.name} on "
                        f"{format_selection(bet.selection)} is already settled"
                    )

                multiplier = payout_multiplier(bet.selection, winning_number)
                if multiplier:
                    outcome, payout = Outcome.WIN, bet.amount * multiplier
                else:
                    outcome, payout = Outcome.LOSE, NO_PAYOUT
                total_won += payout
                total_wagered += bet.amount

                settlements.append((bet, outcome, payout))
                results.append(
                    BetResult(
                        player=player.name,
                        selection=bet.selection,
                        amount=bet.amount,
                        outcome=outcome,
                        payout=payout,
                    )
                )

            totals.append(
                (
                    player,
                    PlayerTotals(
                        name=player.name,
                        total_won=total_won,
                        total_wagered=total_wagered,
                    ),
                )
            )

        report = RoundReport(
            round_number=round_number,
            winning_number=winning_number,
            results=results,
            totals=[snapshot for _, snapshot in totals],
        )

        for bet, outcome, payout in settlements:
            bet.settle(outcome, payout)
        for player, snapshot in totals:
            player.total_won = snapshot.total_won
            player.total_wagered = snapshot.total_wagered
            player.clear_bets()

    logger.info(
        f"Round {round_number}: number {winning_number}, "
        f"{len(settlements)} bets settled, {len(report.winners)} winners, paid {report.total_paid}"
    )
    return report
