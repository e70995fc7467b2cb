"""Table session orchestration: roster -> scheduler -> input loop -> shutdown."""

import logging
import random
from typing import TextIO

from croupier.config import Settings
from croupier.console import Console, read_commands
from croupier.roster import load_roster
from croupier.scheduler import RoundScheduler
from croupier.table.exceptions import BetRejected, EmptyRosterError
from croupier.table.intake import BetIntake
from croupier.table.models import SessionSummary
from croupier.table.registry import PlayerRegistry

logger = logging.getLogger("croupier.session")


def run_session(
    settings: Settings,
    stream: TextIO,
    console: Console,
    registry: PlayerRegistry | None = None,
    rng: random.Random | None = None,
) -> SessionSummary:
    """Open the table, accept bets until the sentinel, then close it.

    Raises:
        RosterLoadError: roster file missing, unreadable or empty
        EmptyRosterError: roster loaded but has no players

    Both are raised before any bet is taken or any round is scheduled.
    """
    if registry is None:
        registry = load_roster(settings.roster_path, settings.roster.delimiter)

    if not registry:
        logger.error("No players loaded")
        raise EmptyRosterError()

    if rng is None:
        rng = random.Random(settings.table.seed)

    intake = BetIntake(registry)
    scheduler = RoundScheduler(
        registry,
        reporter=console,
        interval_seconds=settings.table.round_interval_seconds,
        rng=rng,
    )
    summary = SessionSummary()

    logger.info(f"Table open: {len(registry)} players, round every {scheduler.interval_seconds:g}s")
    scheduler.start()

    try:
        for line in read_commands(stream, console, settings.console.sentinel):
            try:
                bet = intake.submit(line)
            except BetRejected as e:
                summary.bets_rejected += 1
                console.bet_rejected(e)
                continue

            summary.bets_placed += 1
            console.bet_placed(line.split()[0], bet)
    except KeyboardInterrupt:
        logger.info("Received interrupt signal, closing table")
    finally:
        scheduler.shutdown(wait=True)

    summary.rounds_resolved = scheduler.rounds_resolved
    summary.unresolved_bets = registry.pending_count()
    if summary.unresolved_bets:
        logger.warning(f"{summary.unresolved_bets} bets left unresolved at close")

    logger.info(
        f"Table closed: {summary.bets_placed} bets placed, "
        f"{summary.bets_rejected} rejected, {summary.rounds_resolved} rounds"
    )
    return summary
