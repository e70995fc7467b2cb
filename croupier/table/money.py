"""Decimal parsing shared by bet intake and roster loading."""

from decimal import Decimal, InvalidOperation

ZERO = Decimal("0")

# Largest stake one bet may carry, and the largest total a roster may seed.
# Both stay far below the decimal context limits, so payouts and running
# totals never overflow during a resolution pass.
MAX_AMOUNT = Decimal("1e12")
MAX_TOTAL = Decimal("1e24")


def parse_decimal(token: str | None) -> Decimal | None:
    """Parse a finite decimal, or return None if the token is not one."""
    if token is None:
        return None

    token = token.strip()
    if not token:
        return None

    try:
        value = Decimal(token)
    except (InvalidOperation, ValueError):
        return None

    # Decimal accepts "NaN" and "Infinity"
    if not value.is_finite():
        return None
    return value
