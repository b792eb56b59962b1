"""Static method policy and pair reference tables.

Read-only after import.  Pip thresholds are the methodology constants
shown in the dashboard text (20/30/40/50/60 pips) and must stay exact.
"""

from dataclasses import dataclass
from typing import Optional

from rangeforge.engine.errors import InvalidInput
from rangeforge.engine.models import AnchorMode, PairProfile
from rangeforge.engine.pricing import normalize_pair


@dataclass(frozen=True)
class MethodPolicy:
    """Optimal pip band and advice for one range method."""

    method: str
    label: str
    optimal_low: float
    optimal_high: float
    invalid_above: float
    anchor_mode: AnchorMode
    note: str
    caution_advice: str  # between optimal_high and invalid_above
    switch_advice: str  # past invalid_above

    @property
    def band_centre(self) -> float:
        return (self.optimal_low + self.optimal_high) / 2

    @property
    def band_half_width(self) -> float:
        return (self.optimal_high - self.optimal_low) / 2


METHOD_POLICIES: dict[str, MethodPolicy] = {
    "cbdr": MethodPolicy(
        method="cbdr",
        label="CBDR",
        optimal_low=20.0,
        optimal_high=40.0,
        invalid_above=40.0,
        anchor_mode=AnchorMode.EXTREMITY,
        note="Clean consolidation required - no trending through the window",
        caution_advice="reduce position size",
        switch_advice="avoid CBDR and switch to Asian Range or Flout",
    ),
    "asian": MethodPolicy(
        method="asian",
        label="Asian",
        optimal_low=20.0,
        optimal_high=30.0,
        invalid_above=50.0,
        anchor_mode=AnchorMode.EXTREMITY,
        note="Tight ranging with respected boundaries sets up London Judas Swings",
        caution_advice="expect choppy London session",
        switch_advice="choppy session, avoid or switch to Flout for equilibrium-based targets",
    ),
    "flout": MethodPolicy(
        method="flout",
        label="Flout",
        optimal_low=30.0,
        optimal_high=50.0,
        invalid_above=60.0,
        anchor_mode=AnchorMode.EQUILIBRIUM,
        note="Project from equilibrium - the session extremes are the 2 SD points",
        caution_advice="high volatility expected, use for confluence",
        switch_advice="avoid or use only for confluence and prioritize CBDR",
    ),
}


# Keyed by currency code; a pair picks up the notes of its base and quote.
PAIR_NOTES: dict[str, str] = {
    "GBP": "GBP pairs: wider stops, higher volatility",
    "JPY": "JPY pairs: tighter ranges, good for scalping",
    "AUD": "AUD pairs: risk-on/off sentiment and commodity correlation",
    "NZD": "NZD pairs: follows AUD, dairy market influence",
}


# Keyed by pair: (side, pips, note).  "above" applies when the range is
# wider than *pips*, "below" when it is narrower.
PAIR_RANGE_NOTES: dict[str, tuple[str, float, str]] = {
    "GBPUSD": ("above", 35.0, "GBP/USD volatility within normal range"),
    "USDJPY": ("below", 25.0, "USD/JPY tight range - good for scalping"),
}


GRADE_ADVICE: dict[str, str] = {
    "high": "High-quality range - proceed with full position size",
    "moderate": "Moderate quality range - consider reduced position size",
    "low": "Low-quality range - avoid or wait for better setup",
}


PAIR_RECOMMENDATIONS: dict[str, dict[str, list[str]]] = {
    "EURUSD": {
        "cbdr": [
            "EUR/USD CBDR sweet spot: 20-30 pips",
            "Use 20-30 pip stops for optimal risk management",
            "Target 2-3 SD levels in London session",
            "Check COT report for commercial bias alignment",
        ],
        "asian": [
            "Asian Range: 20-30 pips ideal for EUR/USD",
            "Lower volatility allows for tighter stops",
            "Sets up clean Judas Swings in London",
            "Align with Market Profile for confluence",
        ],
        "flout": [
            "Flout Range: 20-40 pips for equilibrium analysis",
            "Project to London session for 4 SD fills",
            "Use for confluence with CBDR analysis",
            "Monitor EUR crosses for additional confirmation",
        ],
    },
    "GBPUSD": {
        "cbdr": [
            "GBP/USD CBDR: 30-40 pips due to higher volatility",
            "Use wider stops (40+ pips) for GBP pairs",
            "Expect stronger moves during London session",
            "Monitor Brexit-related news for volatility spikes",
        ],
        "asian": [
            "Asian Range: 30-40 pips for GBP/USD",
            "Wider ranges common due to overnight volatility",
            "Strong London reversals expected",
            "Check UK economic calendar for data releases",
        ],
        "flout": [
            "Flout Range: 30-50 pips for GBP pairs",
            "Higher volatility requires wider targets",
            "Good for confluence with other methods",
            "Monitor GBP crosses for correlation",
        ],
    },
}


PAIR_PROFILES: dict[str, PairProfile] = {
    "EURUSD": PairProfile(
        pair="EURUSD",
        volatility="Medium",
        optimal_range="20-30 pips",
        best_sessions=("London", "NY Open"),
        notes="Most liquid pair, clean price action, ideal for beginners",
    ),
    "GBPUSD": PairProfile(
        pair="GBPUSD",
        volatility="High",
        optimal_range="30-40 pips",
        best_sessions=("London", "NY Open"),
        notes="Volatile, requires wider stops, strong trending moves",
    ),
    "USDJPY": PairProfile(
        pair="USDJPY",
        volatility="Low-Medium",
        optimal_range="20-30 pips",
        best_sessions=("Asian", "London"),
        notes="Trending pair, lower volatility, good for scalping",
    ),
    "AUDUSD": PairProfile(
        pair="AUDUSD",
        volatility="Medium",
        optimal_range="20-30 pips",
        best_sessions=("Asian", "London"),
        notes="Risk-on/off sentiment, commodity correlation",
    ),
    "NZDUSD": PairProfile(
        pair="NZDUSD",
        volatility="Medium",
        optimal_range="20-30 pips",
        best_sessions=("Asian", "London"),
        notes="Similar to AUD, dairy market influence",
    ),
}

SUPPORTED_PAIRS: tuple[str, ...] = tuple(PAIR_PROFILES.keys())


def get_method_policy(method: str) -> MethodPolicy:
    """Look up the policy for *method*.

    Raises:
        InvalidInput: If the method is not registered.
    """
    if method not in METHOD_POLICIES:
        raise InvalidInput(
            f"Unknown method '{method}'. "
            f"Available: {', '.join(METHOD_POLICIES.keys())}"
        )
    return METHOD_POLICIES[method]


def get_pair_notes(pair: str) -> list[str]:
    """Return the currency notes that apply to *pair*, base first."""
    symbol = normalize_pair(pair)
    notes = []
    for currency in (symbol[:3], symbol[3:6]):
        note = PAIR_NOTES.get(currency)
        if note and note not in notes:
            notes.append(note)
    return notes


def get_pair_range_notes(pair: str, pips: float) -> list[str]:
    """Return the pair-specific notes triggered by a *pips*-wide range."""
    entry = PAIR_RANGE_NOTES.get(normalize_pair(pair))
    if entry is None:
        return []
    side, limit, note = entry
    if (side == "above" and pips > limit) or (side == "below" and pips < limit):
        return [note]
    return []


def get_pair_profile(pair: str) -> Optional[PairProfile]:
    """Return the static profile for *pair*, or ``None`` if not tabulated."""
    return PAIR_PROFILES.get(normalize_pair(pair))
