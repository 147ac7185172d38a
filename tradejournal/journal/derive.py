"""
Whole‑trade derivation helpers.

The calculation engine works on individual fields.  The functions in
this module apply it to a complete `TradeInput`, following the same
rules the journal forms use to decide which figures can be shown, and
provide the small formatting helpers used when those figures are
displayed.
"""

from __future__ import annotations

from typing import Optional

from ..engine.calculator import (
    RISK_REWARD_SENTINEL,
    compute_execution_grade,
    compute_hold_time,
    compute_pips,
    compute_pnl,
    compute_r_multiple,
    compute_risk_reward_ratio,
)
from .models import ExecutionQuality, TradeInput, TradeMetrics


def is_complete(trade: TradeInput) -> bool:
    """Return `True` once the trade has a symbol and both prices."""
    return bool(trade.symbol) and bool(trade.entry_price) and bool(trade.exit_price)


def derive_metrics(trade: TradeInput) -> TradeMetrics:
    """Compute every performance figure available for `trade`.

    The risk‑reward ratio needs both a stop‑loss and a take‑profit and
    falls back to ``"0:0"`` otherwise.  The R‑multiple needs a
    stop‑loss; the hold time needs both timestamps.  Call
    `is_complete()` first: incomplete trades give meaningless figures.
    """
    pips = compute_pips(trade.symbol, trade.direction, trade.entry_price, trade.exit_price)
    pnl = compute_pnl(trade.symbol, trade.direction, trade.entry_price, trade.exit_price, trade.volume)

    if trade.stop_loss and trade.take_profit:
        ratio = compute_risk_reward_ratio(
            trade.symbol,
            trade.direction,
            trade.entry_price,
            trade.stop_loss,
            trade.take_profit,
        )
    else:
        ratio = RISK_REWARD_SENTINEL

    r_multiple = compute_r_multiple(trade.entry_price, trade.stop_loss, pnl, trade.symbol, trade.volume)
    hold_time = compute_hold_time(trade.entry_time, trade.exit_time)

    return TradeMetrics(
        pips=pips,
        pnl=pnl,
        risk_reward_ratio=ratio,
        r_multiple=r_multiple,
        hold_time_minutes=hold_time,
    )


def derive_execution_quality(
    entry_quality: Optional[int],
    exit_quality: Optional[int],
) -> Optional[ExecutionQuality]:
    """Grade a trade when both ratings have been given."""
    if not entry_quality or not exit_quality:
        return None
    return ExecutionQuality(
        entry_quality=entry_quality,
        exit_quality=exit_quality,
        grade=compute_execution_grade(entry_quality, exit_quality),
    )


def format_hold_time(minutes: Optional[int]) -> str:
    """Render a duration in minutes as e.g. ``"1d 2h 5m"``."""
    if minutes is None:
        return "N/A"
    days, rest = divmod(minutes, 24 * 60)
    hours, mins = divmod(rest, 60)
    parts = []
    if days > 0:
        parts.append(f"{days}d")
    if hours > 0:
        parts.append(f"{hours}h")
    if mins > 0:
        parts.append(f"{mins}m")
    return " ".join(parts) or "0 minutes"


def describe_r_multiple(r_multiple: Optional[float]) -> str:
    """Short qualitative label for an R‑multiple."""
    if not r_multiple:
        return "Not calculated"
    if r_multiple >= 2:
        return "Excellent"
    if r_multiple >= 1:
        return "Good"
    if r_multiple > 0:
        return "Profitable but low reward"
    return "Loss"
