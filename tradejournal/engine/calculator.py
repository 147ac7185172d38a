"""
Trade performance calculations.

This module turns the raw fields of a journal trade (symbol, direction,
prices, volume, stop‑loss, take‑profit and timestamps) into derived
performance figures: pips, monetary P&L, risk‑reward ratio, R‑multiple,
holding time and an execution grade.

Every function here is pure.  Nothing is validated: callers only invoke
these helpers once the trade fields are complete, exactly as the journal
forms do.  When a value cannot be derived the result is `None` rather
than a numeric placeholder.
"""

from __future__ import annotations

import math
from datetime import datetime
from decimal import Decimal, ROUND_HALF_UP
from enum import Enum
from typing import Optional, Union


class Direction(str, Enum):
    """Side of a trade."""
    LONG = "long"
    SHORT = "short"


class Grade(str, Enum):
    """Execution grade derived from entry/exit quality ratings."""
    A_PLUS = "A+"
    A = "A"
    B = "B"
    C = "C"
    D = "D"
    F = "F"


# Worst to best
GRADE_ORDER = (Grade.F, Grade.D, Grade.C, Grade.B, Grade.A, Grade.A_PLUS)

# Minimum average rating for each grade, checked top down
GRADE_THRESHOLDS = (
    (4.5, Grade.A_PLUS),
    (4.0, Grade.A),
    (3.0, Grade.B),
    (2.0, Grade.C),
    (1.5, Grade.D),
)

DEFAULT_PIP_MULTIPLIER = 10000
TWO_DECIMAL_PIP_MULTIPLIER = 100
# Pip value of one standard lot in account currency.  Fixed for every pair.
PIP_VALUE_PER_LOT = 10.0
RISK_REWARD_SENTINEL = "0:0"

_DIRECTION_ALIASES = {
    'long': Direction.LONG,
    'buy': Direction.LONG,
    'short': Direction.SHORT,
    'sell': Direction.SHORT,
}

DirectionLike = Union[Direction, str]


def normalize_direction(direction: DirectionLike) -> Direction:
    """Map ``buy``/``long``/``sell``/``short`` onto a `Direction`.

    Raises
    ------
    ValueError
        If the value is none of the accepted spellings.
    """
    if isinstance(direction, Direction):
        return direction
    normalized = _DIRECTION_ALIASES.get(str(direction).strip().lower())
    if normalized is None:
        raise ValueError(f"Unsupported trade direction: {direction!r}")
    return normalized


def pip_multiplier(symbol: str) -> int:
    """Return the number of pips in one unit of price for `symbol`.

    JPY pairs and gold (``XAU/USD``) are quoted to two decimals and use
    100.  Every other symbol, recognised or not, uses 10000.
    """
    if 'JPY' in symbol or symbol == 'XAU/USD':
        return TWO_DECIMAL_PIP_MULTIPLIER
    return DEFAULT_PIP_MULTIPLIER


def compute_pips(symbol: str, direction: DirectionLike, entry_price: float, exit_price: float) -> float:
    """Pip distance travelled in the trade's favour (negative for a loss)."""
    multiplier = pip_multiplier(symbol)
    if normalize_direction(direction) is Direction.LONG:
        return (exit_price - entry_price) * multiplier
    return (entry_price - exit_price) * multiplier


def pip_value(symbol: str, volume: float) -> float:
    """Monetary value of one pip for `volume` lots.

    A flat 10 per standard lot regardless of `symbol`; no quote currency
    conversion is attempted.
    """
    return PIP_VALUE_PER_LOT * volume


def compute_pnl(
    symbol: str,
    direction: DirectionLike,
    entry_price: float,
    exit_price: float,
    volume: float,
) -> float:
    """Profit or loss of the trade in account currency."""
    return compute_pips(symbol, direction, entry_price, exit_price) * pip_value(symbol, volume)


def _round_one_decimal(value: float) -> Decimal:
    # Halves round away from zero on the exact binary value
    return Decimal(value).quantize(Decimal('0.1'), rounding=ROUND_HALF_UP)


def compute_risk_reward_ratio(
    symbol: str,
    direction: DirectionLike,
    entry_price: float,
    stop_loss: float,
    take_profit: float,
) -> str:
    """Return the planned risk‑reward ratio formatted as ``"1:N"``.

    Parameters
    ----------
    symbol : str
        Instrument symbol, used for the pip multiplier.
    direction : Direction or str
        ``long``/``buy`` or ``short``/``sell``.
    entry_price, stop_loss, take_profit : float
        Planned trade levels.

    Returns
    -------
    str
        ``"1:"`` followed by reward/risk rounded to one decimal, or
        ``"0:0"`` when either the risk or the reward is zero.
    """
    multiplier = pip_multiplier(symbol)
    if normalize_direction(direction) is Direction.LONG:
        risk = abs(entry_price - stop_loss) * multiplier
        reward = abs(take_profit - entry_price) * multiplier
    else:
        risk = abs(stop_loss - entry_price) * multiplier
        reward = abs(entry_price - take_profit) * multiplier

    if risk > 0 and reward > 0:
        return f"1:{_round_one_decimal(reward / risk)}"
    return RISK_REWARD_SENTINEL


def compute_r_multiple(
    entry_price: Optional[float],
    stop_loss: Optional[float],
    pnl: float,
    symbol: str,
    volume: float,
) -> Optional[float]:
    """Express `pnl` as a multiple of the amount risked to the stop‑loss.

    Returns `None` when there is no stop‑loss, no P&L or no position
    size to measure against.
    """
    if not entry_price or entry_price <= 0:
        return None
    if not stop_loss or stop_loss <= 0:
        return None
    if pnl == 0 or not volume or volume <= 0:
        return None

    stop_loss_pips = abs(entry_price - stop_loss) * pip_multiplier(symbol)
    risk_amount = stop_loss_pips * pip_value(symbol, volume)
    if risk_amount > 0:
        return pnl / risk_amount
    return None


def compute_hold_time(
    entry_time: Optional[datetime],
    exit_time: Optional[datetime],
) -> Optional[int]:
    """Minutes between entry and exit, rounded to the nearest minute.

    `None` when either timestamp is missing or the exit does not come
    after the entry.  A zero result therefore always means a trade that
    really was held for under half a minute.
    """
    if entry_time is None or exit_time is None:
        return None
    if not exit_time > entry_time:
        return None
    elapsed_ms = (exit_time - entry_time).total_seconds() * 1000
    return math.floor(elapsed_ms / 60000 + 0.5)


def compute_execution_grade(entry_quality: int, exit_quality: int) -> Grade:
    """Grade a trade from its entry and exit quality ratings (1‑5 each)."""
    average = (entry_quality + exit_quality) / 2
    for threshold, grade in GRADE_THRESHOLDS:
        if average >= threshold:
            return grade
    return Grade.F
