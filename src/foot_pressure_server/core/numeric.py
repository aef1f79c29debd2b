"""Numeric helpers shared by every place a kPa value is finalized."""

from datetime import UTC, datetime
from decimal import ROUND_HALF_UP, Decimal

_ONE_DECIMAL = Decimal("0.1")


def round_kpa(value: float) -> float:
    """Round a pressure value to one decimal, half away from zero.

    Goes through the shortest repr of the float so 0.25 -> 0.3 and
    -0.25 -> -0.3 regardless of binary representation error.

    Args:
        value: Pressure in kPa

    Returns:
        Value rounded to one decimal place
    """
    return float(Decimal(repr(value)).quantize(_ONE_DECIMAL, rounding=ROUND_HALF_UP))


def format_timestamp(ts: datetime) -> str:
    """Format a timestamp as ISO-8601 UTC with milliseconds and a Z suffix.

    Example:
        2024-01-10T08:30:00.000Z
    """
    return ts.astimezone(UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")
