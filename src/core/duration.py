"""Compact duration strings ("30m", "2h", "1d", "1w") converted to minutes."""

import re

from core.exceptions import DurationParseError

MINUTES_IN_HOUR = 60
HOURS_IN_DAY = 24
DAYS_IN_WEEK = 7

UNIT_MINUTES: dict[str, int] = {
    "w": DAYS_IN_WEEK * HOURS_IN_DAY * MINUTES_IN_HOUR,
    "d": HOURS_IN_DAY * MINUTES_IN_HOUR,
    "h": MINUTES_IN_HOUR,
    "m": 1,
}

# Largest value the BIGINT minutes column holds.
MAX_MINUTES = 2**63 - 1
_MAX_DIGITS = len(str(MAX_MINUTES))

# ASCII digits only: int() would also accept signs, underscores and
# non-ASCII digits.
_NUMBER_RE = re.compile(r"[0-9]+")


def parse_duration(raw: str | None) -> int:
    """Convert a duration string such as ``"3h"`` into minutes.

    The string is a non-negative integer followed by exactly one unit
    letter: ``m`` (minutes), ``h`` (hours), ``d`` (days) or ``w`` (weeks).
    Units are case-sensitive and cannot be combined.

    Args:
        raw: The duration string. Leading/trailing whitespace is ignored.

    Returns:
        The duration in minutes.

    Raises:
        DurationParseError: If the string is empty, too short, has a
            malformed or out-of-range number or an unknown unit.
    """
    if raw is None or not raw.strip():
        raise DurationParseError("Duration cannot be null or empty", raw)

    value = raw.strip()
    if len(value) < 2:
        raise DurationParseError(f"Duration is too short: '{value}'", raw)

    unit = value[-1]
    number_part = value[:-1]

    if not _NUMBER_RE.fullmatch(number_part):
        raise DurationParseError(f"Invalid number format in duration: '{value}'", raw)
    # Length check first: int() refuses very long digit strings outright.
    significant = number_part.lstrip("0") or "0"
    if len(significant) > _MAX_DIGITS or int(significant) > MAX_MINUTES:
        raise DurationParseError(f"Invalid number format in duration: '{value}'", raw)
    number = int(significant)

    if number < 0:
        raise DurationParseError(f"Duration cannot be negative: '{value}'", raw)

    multiplier = UNIT_MINUTES.get(unit)
    if multiplier is None:
        valid = ", ".join(UNIT_MINUTES)
        raise DurationParseError(
            f"Invalid duration unit '{unit}'. Valid units are: {valid}", raw
        )

    minutes = number * multiplier
    if minutes > MAX_MINUTES:
        raise DurationParseError(f"Invalid number format in duration: '{value}'", raw)
    return minutes
