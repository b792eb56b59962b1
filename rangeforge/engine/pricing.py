"""Pair-aware price formatting and pip conversion — pure math, no I/O.

Pip size and display precision depend only on the quote currency:

- JPY-quoted pairs (``USDJPY``, ``GBPJPY``…): 1 pip = 0.01, 3 decimals.
- Everything else: 1 pip = 0.0001, 5 decimals.
"""

import math

from rangeforge.engine.errors import InvalidInput

JPY_PIP_SIZE = 0.01
STANDARD_PIP_SIZE = 0.0001

# Pip counts are rounded to this many decimals so float noise from
# price subtraction (1.1650 - 1.1620 = 0.0030000000000001137) stays
# out of band comparisons.
PIP_PRECISION = 6

_SEPARATORS = ("/", "_", "-", " ")


def normalize_pair(pair: str) -> str:
    """Return the upper-case six-letter form of *pair*.

    ``"EUR/USD"``, ``"eur_usd"`` and ``"EURUSD"`` all become ``"EURUSD"``.
    """
    symbol = pair.strip().upper()
    for sep in _SEPARATORS:
        symbol = symbol.replace(sep, "")
    return symbol


def is_jpy_pair(pair: str) -> bool:
    """True when the quote currency of *pair* is JPY."""
    return normalize_pair(pair).endswith("JPY")


def pip_size(pair: str) -> float:
    """Price value of one pip for *pair*."""
    return JPY_PIP_SIZE if is_jpy_pair(pair) else STANDARD_PIP_SIZE


def display_precision(pair: str) -> int:
    """Number of decimals a price of *pair* is displayed with."""
    return 3 if is_jpy_pair(pair) else 5


def format_price(price: float, pair: str) -> str:
    """Render *price* fixed to the pair's display precision.

    Uses Python's fixed-point formatting, which rounds the exact binary
    value half-to-even: ``format_price(1.123456, "EURUSD") == "1.12346"``.
    """
    return f"{price:.{display_precision(pair)}f}"


def to_pips(price_delta: float, pair: str) -> float:
    """Convert a non-negative price distance into pips.

    Raises:
        InvalidInput: If *price_delta* is negative or not finite.
    """
    if not math.isfinite(price_delta):
        raise InvalidInput(f"price_delta must be finite, got {price_delta}")
    if price_delta < 0:
        raise InvalidInput(f"price_delta must be non-negative, got {price_delta}")
    return round(price_delta / pip_size(pair), PIP_PRECISION)

