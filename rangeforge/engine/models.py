"""Engine data models — immutable value objects produced per calculation."""

from dataclasses import asdict, dataclass
from enum import Enum
from typing import Optional

from rangeforge.engine.pricing import to_pips


class AnchorMode(str, Enum):
    """Where SD multiples are measured from."""

    EXTREMITY = "extremity"
    EQUILIBRIUM = "equilibrium"


@dataclass(frozen=True)
class RangeData:
    """A measured session range for one pair.

    Built by ``build_range``; ``high > low`` is guaranteed there.
    """

    high: float
    low: float
    pair: str
    range: float
    equilibrium: float

    @property
    def pips(self) -> float:
        """Range size expressed in pips of ``pair``."""
        return to_pips(self.range, self.pair)


@dataclass(frozen=True)
class RangeCheck:
    """Method-independent sanity check of a range's pip size."""

    is_tradeable: bool
    reason: Optional[str] = None


@dataclass(frozen=True)
class SDLevels:
    """Eight projected targets, four above and four below the anchor."""

    sd1_high: float
    sd2_high: float
    sd3_high: float
    sd4_high: float
    sd1_low: float
    sd2_low: float
    sd3_low: float
    sd4_low: float
    mode: AnchorMode

    @property
    def highs(self) -> tuple[float, float, float, float]:
        return (self.sd1_high, self.sd2_high, self.sd3_high, self.sd4_high)

    @property
    def lows(self) -> tuple[float, float, float, float]:
        return (self.sd1_low, self.sd2_low, self.sd3_low, self.sd4_low)

    def to_dict(self) -> dict:
        data = asdict(self)
        data["mode"] = self.mode.value
        return data


def grade_for(score: int) -> str:
    """Badge grade: ``"high"`` (≥ 70), ``"moderate"`` (≥ 50) or ``"low"``."""
    if score >= 70:
        return "high"
    if score >= 50:
        return "moderate"
    return "low"


@dataclass(frozen=True)
class QualityVerdict:
    """Score and advice for a range measured with a given method."""

    score: int  # 0–100
    is_valid: bool
    recommendations: tuple[str, ...]
    method: str
    pips: float

    @property
    def grade(self) -> str:
        return grade_for(self.score)


@dataclass(frozen=True)
class ExpectedTargets:
    """Historical probability of reaching each SD target tier."""

    primary: float
    secondary: float
    extension: float


@dataclass(frozen=True)
class PairProfile:
    """Static trading characteristics of a major pair."""

    pair: str
    volatility: str
    optimal_range: str
    best_sessions: tuple[str, ...]
    notes: str
