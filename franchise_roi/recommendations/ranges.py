from __future__ import annotations

import re

from .config import OPEN_ENDED_MAX
from .models import Interval

_CURRENCY_RE = re.compile(r"₹|\brs\.?|\binr\b", re.IGNORECASE)
_NUMBER_RE = re.compile(r"\d+(?:\.\d+)?")


class RangeParseError(ValueError):
    """Raised when a range string carries no usable numbers."""


def parse_range(text: str) -> Interval:
    """
    Parse a currency-prefixed range such as ``"₹20–50 Lakh"`` or ``"₹50 Lakh+"``.

    The first two numbers after the currency marker give ``[first, second]``.
    A single number followed somewhere by ``+`` is open-ended and capped at
    ``OPEN_ENDED_MAX``; otherwise it is a point interval. Values stay in Lakh.
    """
    if not text:
        raise RangeParseError("empty range string")

    currency = _CURRENCY_RE.search(text)
    tail = text[currency.end():] if currency else text

    numbers = list(_NUMBER_RE.finditer(tail))[:2]
    if not numbers:
        raise RangeParseError(f"no numeric value in {text!r}")

    low = float(numbers[0].group())
    if len(numbers) == 2:
        high = float(numbers[1].group())
    elif "+" in tail[numbers[0].end():]:
        high = OPEN_ENDED_MAX
    else:
        high = low

    if low > high:
        raise RangeParseError(f"inverted range in {text!r}")

    return Interval(min_value=low, max_value=high)


def try_parse_range(text: str | None) -> Interval | None:
    """Like ``parse_range`` but returns ``None`` instead of raising."""
    if text is None:
        return None
    try:
        return parse_range(text)
    except RangeParseError:
        return None
