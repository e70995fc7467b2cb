"""Player registry shared by the input loop and the round scheduler."""

from __future__ import annotations

import threading
from collections.abc import Iterable, Iterator

from .models import Player, PlayerTotals


class PlayerRegistry:
    """Fixed set of players keyed by name, in roster order.

    Every read or write of pending bets and totals must hold ``lock``.
    BetIntake holds it for one append; the resolver holds it for a whole
    pass, so a pass never observes a half-appended bet.
    """

    def __init__(self, players: Iterable[Player] = ()):
        self._players: dict[str, Player] = {}
        self.lock = threading.RLock()

        for player in players:
            if player.name in self._players:
                raise ValueError(f"Duplicate player name: {player.name}")
            self._players[player.name] = player

    def __len__(self) -> int:
        return len(self._players)

    def __bool__(self) -> bool:
        return bool(self._players)

    def __contains__(self, name: object) -> bool:
        return name in self._players

    def __iter__(self) -> Iterator[Player]:
        return iter(self._players.values())

    @property
    def names(self) -> list[str]:
        return list(self._players)

    def get(self, name: str) -> Player | None:
        """Look up a player by exact, case-sensitive name."""
        return self._players.get(name)

    def pending_count(self) -> int:
        """Number of bets waiting for the next pass."""
        with self.lock:
            return sum(len(player.bets) for player in self._players.values())

    def totals(self) -> list[PlayerTotals]:
        """Snapshot of every player's totals, in roster order."""
        with self.lock:
            return [player.totals() for player in self._players.values()]
