"""Lenient field parsers for customer records coming from the admin API."""

import math
import re
from datetime import datetime, timezone
from decimal import Decimal
from typing import Any, Optional

# Longest leading numeric literal, the way JavaScript's parseFloat reads it.
_NUMERIC_PREFIX = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def parse_amount(value: Any) -> float:
    """Parse a monetary amount; invalid, missing, non-finite or negative -> 0.0."""
    if value is None or isinstance(value, bool):
        return 0.0

    if isinstance(value, (int, float, Decimal)):
        number = value
    elif isinstance(value, str):
        match = _NUMERIC_PREFIX.match(value.lstrip())
        if not match:
            return 0.0
        number = match.group(0)
    else:
        return 0.0

    # Huge ints overflow and signaling-NaN decimals refuse conversion.
    try:
        amount = float(number)
    except (OverflowError, ValueError):
        return 0.0

    if not math.isfinite(amount) or amount < 0:
        return 0.0
    return amount


def parse_count(value: Any) -> int:
    """Parse a non-negative integer count; anything unusable -> 0."""
    return int(parse_amount(value))


def parse_timestamp(value: Any) -> Optional[datetime]:
    """Parse an ISO-8601 timestamp into an aware datetime, or None."""
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, str) and value.strip():
        text = value.strip()
        if text.endswith(("Z", "z")):
            text = text[:-1] + "+00:00"
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError:
            return None
    else:
        return None

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed
