"""Position sizing — pure math, no I/O.

Calculates the lot size to trade from account balance, risk percentage
and a stop-loss distance measured in price units (e.g. the distance
from entry to the opposite SD level).
"""

import math
from typing import Optional

from rangeforge.engine.pricing import is_jpy_pair, to_pips

# Simplified value of one pip per standard lot, in account currency.
STANDARD_PIP_VALUE = 10.0
JPY_PIP_VALUE = 1.0


def calculate_position_size(
    account_balance: float,
    risk_pct: float,
    stop_loss_distance: float,
    pair: str,
    pip_value: Optional[float] = None,
) -> float:
    """Calculate position size in standard lots.

    Formula::

        risk_amount = balance × (risk_pct / 100)
        stop_pips   = stop_loss_distance ÷ pip_size(pair)
        lots        = risk_amount / (stop_pips × pip_value)

    Args:
        account_balance: Account balance (e.g. 10_000.0).
        risk_pct: Percentage of balance to risk (e.g. 1.0 for 1 %).
        stop_loss_distance: Stop distance in price units (e.g. 0.0030).
        pair: Currency pair the stop is measured on.
        pip_value: Value of one pip per standard lot.  Defaults to 10
            (1 for JPY-quoted pairs).

    Returns:
        Lots rounded to 2 decimal places.

    Raises:
        ValueError: If any input is non-positive or not finite.
    """
    for name, value in (
        ("account_balance", account_balance),
        ("risk_pct", risk_pct),
        ("stop_loss_distance", stop_loss_distance),
        ("pip_value", pip_value),
    ):
        if value is not None and not math.isfinite(value):
            raise ValueError(f"{name} must be a finite number, got {value}")
    if account_balance <= 0:
        raise ValueError(f"account_balance must be positive, got {account_balance}")
    if risk_pct <= 0:
        raise ValueError(f"risk_pct must be positive, got {risk_pct}")
    if stop_loss_distance <= 0:
        raise ValueError(
            f"stop_loss_distance must be positive, got {stop_loss_distance}"
        )
    if pip_value is None:
        pip_value = JPY_PIP_VALUE if is_jpy_pair(pair) else STANDARD_PIP_VALUE
    if pip_value <= 0:
        raise ValueError(f"pip_value must be positive, got {pip_value}")

    risk_amount = account_balance * (risk_pct / 100.0)
    stop_pips = to_pips(stop_loss_distance, pair)
    if stop_pips == 0:
        raise ValueError(
            f"stop_loss_distance is below one micro-pip, got {stop_loss_distance}"
        )
    return round(risk_amount / (stop_pips * pip_value), 2)
