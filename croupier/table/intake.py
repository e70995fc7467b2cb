"""Bet intake: validates bet commands and appends them to the registry."""

import logging
from decimal import Decimal

from .exceptions import InvalidAmount, InvalidSelection, MalformedInput, UnknownPlayer
from .models import MAX_NUMBER, MIN_NUMBER, Bet, Parity, Selection, format_selection
from .money import MAX_AMOUNT, ZERO, parse_decimal
from .registry import PlayerRegistry

logger = logging.getLogger(__name__)

COMMAND_TOKENS = 3


def parse_selection(token: str) -> Selection:
    """Normalize a selection token to a number or a Parity.

    Accepts "odd"/"even" in any case, or a plain digit string from 1 to 36.
    """
    lowered = token.strip().lower()

    for parity in Parity:
        if lowered == parity.value:
            return parity

    # isdigit() alone lets through superscripts and other unicode digits
    if lowered.isascii() and lowered.isdigit():
        number = int(lowered)
        if MIN_NUMBER <= number <= MAX_NUMBER:
            return number

    raise InvalidSelection(
        f"Invalid bet '{token}': expected odd, even or a number {MIN_NUMBER}-{MAX_NUMBER}",
        token=token,
    )


def parse_amount(token: str) -> Decimal:
    """Parse a bet amount. Zero is allowed, negative amounts are not."""
    amount = parse_decimal(token)
    if amount is None or amount < ZERO:
        raise InvalidAmount(
            f"Invalid amount '{token}': expected a non-negative decimal",
            token=token,
        )
    if amount > MAX_AMOUNT:
        raise InvalidAmount(
            f"Invalid amount '{token}': bets are limited to {MAX_AMOUNT:,f}",
            token=token,
        )
    return amount


class BetIntake:
    """Entry point for bets coming from the input loop."""

    def __init__(self, registry: PlayerRegistry):
        self.registry = registry

    def place(self, player_name: str, selection_token: str, amount_token: str) -> Bet:
        """Validate a wager and append it to the player's pending bets.

        Raises:
            InvalidSelection: selection is not odd, even or 1-36
            InvalidAmount: amount is not a non-negative decimal
            UnknownPlayer: name is not in the roster

        Nothing is appended when a rejection is raised.
        """
        selection = parse_selection(selection_token)
        amount = parse_amount(amount_token)

        player = self.registry.get(player_name)
        if player is None:
            raise UnknownPlayer(f"Unknown player '{player_name}'", token=player_name)

        bet = Bet(selection=selection, amount=amount)
        with self.registry.lock:
            player.add_bet(bet)

        logger.info(
            f"Bet placed: {player_name} {format_selection(selection)} {amount} "
            f"at {bet.placed_at.isoformat(timespec='seconds')}"
        )
        return bet

    def submit(self, line: str) -> Bet:
        """Place a bet from a raw 'NAME SELECTION AMOUNT' command line."""
        tokens = line.split()
        if len(tokens) != COMMAND_TOKENS:
            raise MalformedInput(
                f"Invalid entry '{line.strip()}': expected NAME BET AMOUNT",
                token=line,
            )

        name, selection_token, amount_token = tokens
        return self.place(name, selection_token, amount_token)
