"""Range quality scoring — pure math, no I/O.

Scores a measured range against its method's optimal pip band:

    inside band          70–100   (100 at band centre, 70 at the edges)
    below band           40–69    (closer to the band scores higher)
    above band           40–69    (up to the invalidation threshold)
    past threshold       0–39     is_valid = False

Recommendations are ordered: pip-band verdict, method note, currency notes,
pair range notes, then the grade-driven position-size line.
"""

import logging
import math
from typing import Optional

from rangeforge.engine.errors import InvalidRange
from rangeforge.engine.models import QualityVerdict, RangeData, grade_for
from rangeforge.engine.policy import (
    GRADE_ADVICE,
    PAIR_RECOMMENDATIONS,
    MethodPolicy,
    get_method_policy,
    get_pair_notes,
    get_pair_range_notes,
)
from rangeforge.engine.pricing import normalize_pair, to_pips

logger = logging.getLogger("rangeforge.engine")


def evaluate(
    range_data: RangeData,
    method: str,
    pair: Optional[str] = None,
) -> QualityVerdict:
    """Score *range_data* for *method*.

    Args:
        range_data: Output of ``build_range``.
        method: ``"cbdr"``, ``"asian"`` or ``"flout"``.
        pair: Pair to convert pips with.  Defaults to ``range_data.pair``.

    Returns:
        ``QualityVerdict`` with score, validity and recommendations.

    Raises:
        InvalidRange: If the range is zero, negative or not finite.
        InvalidInput: If *method* is unknown.
    """
    policy = get_method_policy(method)
    if not math.isfinite(range_data.range) or range_data.range <= 0:
        raise InvalidRange(
            f"range must be positive, got {range_data.range}"
        )

    symbol = normalize_pair(pair or range_data.pair)
    pips = to_pips(range_data.range, symbol)
    score, verdict = _score(pips, policy)
    is_valid = pips <= policy.invalid_above

    recommendations = [
        verdict,
        policy.note,
        *get_pair_notes(symbol),
        *get_pair_range_notes(symbol, pips),
        GRADE_ADVICE[grade_for(score)],
    ]

    if is_valid:
        logger.debug("%s %s: %.1f pips scored %d", symbol, method, pips, score)
    else:
        logger.info(
            "%s %s range invalidated: %.1f pips > %g",
            symbol, method, pips, policy.invalid_above,
        )

    return QualityVerdict(
        score=score,
        is_valid=is_valid,
        recommendations=tuple(recommendations),
        method=method,
        pips=pips,
    )


def get_pair_recommendations(pair: str, method: str) -> list[str]:
    """Return the advisory lines for *pair* under *method*.

    Pairs without a dedicated entry get the generic guidance.
    """
    get_method_policy(method)
    symbol = normalize_pair(pair)
    lines = PAIR_RECOMMENDATIONS.get(symbol, {}).get(method)
    if lines:
        return list(lines)
    return [
        f"{method.upper()} analysis for {symbol}",
        "Use standard range guidelines",
        "Monitor for confluence with other methods",
        "Adjust position size based on volatility",
    ]


def _score(pips: float, policy: MethodPolicy) -> tuple[int, str]:
    """Return ``(score, verdict line)`` for *pips* under *policy*."""
    low, high = policy.optimal_low, policy.optimal_high
    threshold = policy.invalid_above

    if pips > threshold:
        raw = 39 - (pips - threshold)
        verdict = (
            f"{policy.label} range too wide ({pips:.1f} pips > {threshold:g})"
            f" - {policy.switch_advice}"
        )
    elif low <= pips <= high:
        raw = 100 - 30 * abs(pips - policy.band_centre) / policy.band_half_width
        verdict = (
            f"{policy.label} range {pips:.1f} pips is inside the optimal "
            f"{low:g}-{high:g} pip band"
        )
    elif pips > high:
        raw = 69 - 29 * (pips - high) / (threshold - high)
        verdict = (
            f"{policy.label} range wide ({pips:.1f} pips > {high:g})"
            f" - {policy.caution_advice}"
        )
    else:
        raw = 40 + 29 * pips / low
        verdict = (
            f"{policy.label} range too narrow ({pips:.1f} pips < {low:g})"
            f" - wait for better setup"
        )

    return max(0, min(100, int(round(raw)))), verdict
