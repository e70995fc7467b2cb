"""Roster loading from a delimited players file.

Each line is ``name[,total_won[,total_wagered]]``. Missing or unusable totals
default to zero; blank lines and ``#`` comments are skipped.
"""

import logging
from decimal import Decimal
from pathlib import Path

from croupier.table.exceptions import RosterLoadError
from croupier.table.models import Player
from croupier.table.money import MAX_TOTAL, ZERO, parse_decimal
from croupier.table.registry import PlayerRegistry

logger = logging.getLogger(__name__)


def _parse_total(fields: list[str], index: int, name: str, line_no: int) -> Decimal:
    if len(fields) <= index or not fields[index].strip():
        return ZERO

    value = parse_decimal(fields[index])
    if value is None or not ZERO <= value <= MAX_TOTAL:
        logger.warning(
            f"Line {line_no}: unusable total '{fields[index]}' for {name}, defaulting to 0"
        )
        return ZERO
    return value


def parse_roster(text: str, delimiter: str = ",") -> list[Player]:
    """Parse roster text into players. Duplicate names keep the first entry."""
    players: dict[str, Player] = {}

    for line_no, raw_line in enumerate(text.splitlines(), 1):
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue

        fields = line.split(delimiter)
        name = fields[0].strip()
        if not name:
            logger.warning(f"Line {line_no}: missing player name, skipping")
            continue

        if name in players:
            logger.warning(f"Line {line_no}: duplicate player {name}, keeping first entry")
            continue

        players[name] = Player(
            name=name,
            total_won=_parse_total(fields, 1, name, line_no),
            total_wagered=_parse_total(fields, 2, name, line_no),
        )

    return list(players.values())


def load_roster(path: Path, delimiter: str = ",") -> PlayerRegistry:
    """Load the player roster from ``path``.

    Raises:
        RosterLoadError: the file cannot be read or is empty
    """
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Players unsuccessfully loaded from {path}: {e}")
        raise RosterLoadError(path, str(e)) from e

    if not text.strip():
        logger.error(f"Roster file is empty: {path}")
        raise RosterLoadError(path, "file is empty")

    registry = PlayerRegistry(parse_roster(text, delimiter))
    logger.info(f"Loaded {len(registry)} players from {path}")
    return registry
