"""Standard-deviation projections — pure math, no I/O.

Two anchoring modes, kept as separate named functions:

Extremity-anchored (CBDR, Asian Range):
    1 SD = the full range.  Multiples are projected outward from each
    boundary: ``sdN_high = high + N × range``, ``sdN_low = low − N × range``.

Equilibrium-anchored (Flout Session):
    The ladder is centred on the equilibrium and the session extremes
    are the 2 SD points, so 1 SD = range ÷ 4 and
    ``sdN_high = equilibrium + N × range/4``.  Levels are computed from
    the extremes (``high + (N − 2) × range/4``) so that ``sd2_high == high``
    and ``sd2_low == low`` hold exactly, not just to float tolerance.

    Charts that step by range ÷ 2 put the extremes at ±1 SD instead.  For
    a 1.1650/1.1620 range such a chart shows +1 SD at 1.1650, which is
    ``sd2_high`` here (``sd1_high`` is 1.16425).
"""

from rangeforge.engine.errors import InvalidInput
from rangeforge.engine.models import AnchorMode, RangeData, SDLevels
from rangeforge.engine.policy import get_method_policy

SD_MULTIPLES = (1, 2, 3, 4)


def calculate_sd_levels(range_data: RangeData) -> SDLevels:
    """Project SD levels outward from the range boundaries."""
    high, low, unit = range_data.high, range_data.low, range_data.range
    highs = [high + n * unit for n in SD_MULTIPLES]
    lows = [low - n * unit for n in SD_MULTIPLES]
    return _ladder(highs, lows, AnchorMode.EXTREMITY)


def calculate_sd_from_equilibrium(range_data: RangeData) -> SDLevels:
    """Project SD levels around the equilibrium (extremes = ±2 SD)."""
    high, low = range_data.high, range_data.low
    unit = range_data.range / 4
    highs = [high + (n - 2) * unit for n in SD_MULTIPLES]
    lows = [low - (n - 2) * unit for n in SD_MULTIPLES]
    return _ladder(highs, lows, AnchorMode.EQUILIBRIUM)


def project(range_data: RangeData, mode: AnchorMode) -> SDLevels:
    """Dispatch to the projection for *mode*.

    Raises:
        InvalidInput: If *mode* is not ``extremity`` or ``equilibrium``.
    """
    try:
        mode = AnchorMode(mode)
    except ValueError:
        raise InvalidInput(
            f"Unknown anchor mode '{mode}'. "
            f"Available: {', '.join(m.value for m in AnchorMode)}"
        ) from None
    if mode is AnchorMode.EQUILIBRIUM:
        return calculate_sd_from_equilibrium(range_data)
    return calculate_sd_levels(range_data)


def anchor_mode_for(method: str) -> AnchorMode:
    """Return the anchoring mode a range method projects with.

    Raises:
        InvalidInput: If *method* is not ``cbdr``, ``asian`` or ``flout``.
    """
    return get_method_policy(method).anchor_mode


def _ladder(highs: list[float], lows: list[float], mode: AnchorMode) -> SDLevels:
    return SDLevels(
        sd1_high=highs[0],
        sd2_high=highs[1],
        sd3_high=highs[2],
        sd4_high=highs[3],
        sd1_low=lows[0],
        sd2_low=lows[1],
        sd3_low=lows[2],
        sd4_low=lows[3],
        mode=mode,
    )
