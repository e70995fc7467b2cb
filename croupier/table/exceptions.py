"""Table exceptions."""

from enum import Enum
from pathlib import Path


class RejectionReason(str, Enum):
    """Why a bet command was refused."""

    MALFORMED_INPUT = "malformed_input"
    INVALID_SELECTION = "invalid_selection"
    INVALID_AMOUNT = "invalid_amount"
    UNKNOWN_PLAYER = "unknown_player"


class CroupierError(Exception):
    """Base exception for the roulette table."""

    pass


# ============================================================================
# Bet rejections (recovered by the input loop)
# ============================================================================


class BetRejected(CroupierError):
    """A bet command failed validation. Nothing was appended."""

    reason: RejectionReason

    def __init__(self, message: str, token: str | None = None):
        super().__init__(message)
        self.token = token


class MalformedInput(BetRejected):
    """Command line does not have exactly three tokens."""

    reason = RejectionReason.MALFORMED_INPUT


class InvalidSelection(BetRejected):
    """Selection is not odd, even or a number from 1 to 36."""

    reason = RejectionReason.INVALID_SELECTION


class InvalidAmount(BetRejected):
    """Amount is not a finite, non-negative decimal."""

    reason = RejectionReason.INVALID_AMOUNT


class UnknownPlayer(BetRejected):
    """Player name is not in the roster."""

    reason = RejectionReason.UNKNOWN_PLAYER


# ============================================================================
# Roster / lifecycle errors (fatal to starting a session)
# ============================================================================


class RosterLoadError(CroupierError):
    """Roster file could not be read or has no content."""

    def __init__(self, path: Path, detail: str):
        self.path = path
        self.detail = detail
        super().__init__(f"Failed to load roster {path}: {detail}")


class EmptyRosterError(CroupierError):
    """No players loaded, so the table refuses to open."""

    def __init__(self, message: str = "No players loaded - table not started"):
        super().__init__(message)


class BetAlreadySettled(CroupierError):
    """A resolution pass tried to settle a bet twice."""

    pass
