"""Range construction — turns a raw high/low into a ``RangeData``.

Arithmetic is kept at full float precision; rounding only happens when a
price is displayed through ``format_price``.
"""

import logging
import math

from rangeforge.engine.errors import InvalidRange
from rangeforge.engine.models import RangeCheck, RangeData
from rangeforge.engine.pricing import normalize_pair

logger = logging.getLogger("rangeforge.engine")

MIN_TRADEABLE_PIPS = 15.0
MAX_TRADEABLE_PIPS = 60.0


def build_range(high: float, low: float, pair: str) -> RangeData:
    """Build a ``RangeData`` from a session high and low.

    Args:
        high: Session high (body high for ICT measurements).
        low: Session low.
        pair: Currency pair symbol, any accepted spelling.

    Returns:
        ``RangeData`` with ``range = high - low`` and
        ``equilibrium = (high + low) / 2``.

    Raises:
        InvalidRange: If either price is not finite or ``high <= low``.
    """
    if not (math.isfinite(high) and math.isfinite(low)):
        raise InvalidRange(
            f"high and low must be finite prices, got high={high}, low={low}"
        )
    if high <= low:
        raise InvalidRange(
            f"high must be greater than low, got high={high}, low={low}"
        )

    range_data = RangeData(
        high=high,
        low=low,
        pair=normalize_pair(pair),
        range=high - low,
        equilibrium=(high + low) / 2,
    )
    logger.debug(
        "Built %s range %.5f-%.5f (%.1f pips)",
        range_data.pair, high, low, range_data.pips,
    )
    return range_data


def check_range_bounds(range_data: RangeData) -> RangeCheck:
    """Apply the method-independent 15–60 pip sanity band.

    Ranges under 15 pips lack liquidity to sweep; ranges over 60 pips
    signal a volatile session that should not be traded off a range.
    """
    pips = range_data.pips
    if pips < MIN_TRADEABLE_PIPS:
        return RangeCheck(
            is_tradeable=False,
            reason="Range too small (<15 pips) - insufficient liquidity",
        )
    if pips > MAX_TRADEABLE_PIPS:
        return RangeCheck(
            is_tradeable=False,
            reason="Range too large (>60 pips) - high volatility, avoid trading",
        )
    return RangeCheck(is_tradeable=True)
