"""Full range analysis — build, project, evaluate in one call.

This is the flow each dashboard panel (CBDR, Asian Range, Flout) runs
when the user presses *Calculate*.  The result holds no references to
anything outside the call and can be rendered or discarded freely.
"""

from dataclasses import dataclass

from rangeforge.engine.models import (
    ExpectedTargets,
    QualityVerdict,
    RangeCheck,
    RangeData,
    SDLevels,
)
from rangeforge.engine.pricing import format_price
from rangeforge.engine.projection import anchor_mode_for, project
from rangeforge.engine.quality import evaluate, get_pair_recommendations
from rangeforge.engine.range_builder import build_range, check_range_bounds
from rangeforge.engine.targets import calculate_expected_targets


@dataclass(frozen=True)
class RangeAnalysis:
    """Everything a panel renders for one measured range."""

    method: str
    range_data: RangeData
    sd_levels: SDLevels
    quality: QualityVerdict
    range_check: RangeCheck
    pair_recommendations: tuple[str, ...]
    targets: ExpectedTargets

    def to_dict(self) -> dict:
        """Render as a JSON-ready readout with formatted prices."""
        pair = self.range_data.pair

        def fmt(price: float) -> str:
            return format_price(price, pair)

        return {
            "pair": pair,
            "method": self.method,
            "anchor_mode": self.sd_levels.mode.value,
            "range": {
                "high": fmt(self.range_data.high),
                "low": fmt(self.range_data.low),
                "equilibrium": fmt(self.range_data.equilibrium),
                "pips": round(self.quality.pips, 1),
                "tradeable": self.range_check.is_tradeable,
                "invalidation_reason": self.range_check.reason,
            },
            "sd_levels": {
                "highs": [fmt(p) for p in self.sd_levels.highs],
                "lows": [fmt(p) for p in self.sd_levels.lows],
            },
            "quality": {
                "score": self.quality.score,
                "grade": self.quality.grade,
                "is_valid": self.quality.is_valid,
                "recommendations": list(self.quality.recommendations),
            },
            "pair_recommendations": list(self.pair_recommendations),
            "expected_targets": {
                "primary": self.targets.primary,
                "secondary": self.targets.secondary,
                "extension": self.targets.extension,
            },
        }


def analyze_range(
    high: float,
    low: float,
    pair: str,
    method: str,
    session: str = "london",
) -> RangeAnalysis:
    """Run the complete calculation for one panel.

    The anchoring mode follows the method: CBDR and Asian Range project
    from the extremes, Flout from the equilibrium.

    Raises:
        InvalidRange: If ``high <= low`` or a price is not finite.
        InvalidInput: If *method* is unknown.
    """
    mode = anchor_mode_for(method)
    range_data = build_range(high, low, pair)
    return RangeAnalysis(
        method=method,
        range_data=range_data,
        sd_levels=project(range_data, mode),
        quality=evaluate(range_data, method),
        range_check=check_range_bounds(range_data),
        pair_recommendations=tuple(
            get_pair_recommendations(range_data.pair, method)
        ),
        targets=calculate_expected_targets(method, session),
    )
