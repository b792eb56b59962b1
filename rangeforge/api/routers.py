"""Internal API routers — /analyze, /position-size, /methods, /pairs endpoints.

No business logic. Delegates to the pure engine and renders its results.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Query

from rangeforge.engine.analysis import analyze_range
from rangeforge.engine.errors import RangeEngineError
from rangeforge.engine.policy import (
    METHOD_POLICIES,
    SUPPORTED_PAIRS,
    get_pair_profile,
)
from rangeforge.engine.pricing import display_precision, normalize_pair, pip_size
from rangeforge.engine.quality import get_pair_recommendations
from rangeforge.engine.sessions import window_label
from rangeforge.risk.position_sizer import calculate_position_size

logger = logging.getLogger("rangeforge.api")
router = APIRouter()

# ── Defaults (set during app startup) ────────────────────────────────────

_defaults: dict = {
    "pair": "EURUSD",
    "method": "cbdr",
}


def configure_routers(config=None) -> None:
    """Apply defaults from a ``Config`` (or duck-type for tests)."""
    if config is None:
        return
    _defaults["pair"] = config.default_pair
    _defaults["method"] = config.default_method


def _error(*messages: str) -> dict:
    return {"status": "error", "errors": list(messages)}


def _as_float(body: dict, key: str, errors: list[str]) -> Optional[float]:
    if key not in body:
        errors.append(f"{key} is required")
        return None
    try:
        return float(body[key])
    except (TypeError, ValueError):
        errors.append(f"{key} must be a number, got {body[key]!r}")
        return None


# ── Endpoints ────────────────────────────────────────────────────────────


@router.get("/methods")
async def get_methods():
    """Return the method policy table."""
    return {
        "methods": [
            {
                "method": p.method,
                "label": p.label,
                "optimal_pips": [p.optimal_low, p.optimal_high],
                "invalid_above_pips": p.invalid_above,
                "anchor_mode": p.anchor_mode.value,
                "window": window_label(p.method),
                "note": p.note,
            }
            for p in METHOD_POLICIES.values()
        ],
    }


@router.get("/pairs")
async def get_pairs():
    return {"pairs": list(SUPPORTED_PAIRS), "default": _defaults["pair"]}


@router.get("/pairs/{pair}")
async def get_pair(pair: str):
    """Return pip size, precision and the static profile for *pair*."""
    symbol = normalize_pair(pair)
    profile = get_pair_profile(symbol)
    return {
        "pair": symbol,
        "pip_size": pip_size(symbol),
        "display_precision": display_precision(symbol),
        "profile": None if profile is None else {
            "volatility": profile.volatility,
            "optimal_range": profile.optimal_range,
            "best_sessions": list(profile.best_sessions),
            "notes": profile.notes,
        },
    }


@router.get("/pairs/{pair}/recommendations")
async def get_recommendations(pair: str, method: Optional[str] = Query(None)):
    method = method or _defaults["method"]
    try:
        lines = get_pair_recommendations(pair, method)
    except RangeEngineError as exc:
        logger.warning("Recommendations rejected: %s", exc)
        return _error(str(exc))
    return {"pair": normalize_pair(pair), "method": method, "recommendations": lines}


@router.post("/analyze")
async def post_analyze(body: dict):
    """Run the full range analysis for one high/low measurement.

    Body: ``{"high": 1.1650, "low": 1.1620, "pair": "EURUSD", "method": "cbdr"}``.
    ``pair`` and ``method`` fall back to the configured defaults.
    """
    errors: list[str] = []
    high = _as_float(body, "high", errors)
    low = _as_float(body, "low", errors)
    if errors:
        return _error(*errors)

    pair = str(body.get("pair") or _defaults["pair"])
    method = str(body.get("method") or _defaults["method"])
    session = str(body.get("session") or "london")
    try:
        analysis = analyze_range(high, low, pair, method, session=session)
    except RangeEngineError as exc:
        logger.warning("Analysis rejected: %s", exc)
        return _error(str(exc))

    return {"status": "ok", **analysis.to_dict()}


@router.post("/position-size")
async def post_position_size(body: dict):
    """Lot size for a stop distance given in price units."""
    errors: list[str] = []
    balance = _as_float(body, "account_balance", errors)
    risk_pct = _as_float(body, "risk_pct", errors)
    distance = _as_float(body, "stop_loss_distance", errors)
    if errors:
        return _error(*errors)

    pair = str(body.get("pair") or _defaults["pair"])
    try:
        lots = calculate_position_size(balance, risk_pct, distance, pair)
    except ValueError as exc:
        logger.warning("Position size rejected: %s", exc)
        return _error(str(exc))

    return {"status": "ok", "pair": normalize_pair(pair), "lots": lots}
