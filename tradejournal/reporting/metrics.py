"""
Journal summary statistics.

This module aggregates per‑trade metrics into the headline figures
shown on the journal dashboard: total profit, win rate, trade count and
averages of the derived per‑trade values.
"""

from __future__ import annotations

from collections import Counter
from typing import List, Optional

from ..engine.calculator import GRADE_ORDER
from ..journal.models import DerivedTrade


def _mean(values: List[float]) -> Optional[float]:
    return sum(values) / len(values) if values else None


def compute_summary(trades: List[DerivedTrade]) -> dict:
    """Compute summary statistics for a set of derived trades.

    Parameters
    ----------
    trades : list of DerivedTrade
        Journal entries with their computed metrics.

    Returns
    -------
    dict
        Dictionary of summary metrics.  Averages over optional values
        (R‑multiple, hold time) only include trades where the value is
        defined and are `None` when no trade has one.
    """
    grade_counts = {grade.value: 0 for grade in reversed(GRADE_ORDER)}
    if not trades:
        return {
            'num_trades': 0,
            'total_pnl': 0.0,
            'total_pips': 0.0,
            'win_rate': 0.0,
            'profit_factor': 0.0,
            'avg_trade': 0.0,
            'avg_r_multiple': None,
            'avg_hold_time_minutes': None,
            'grade_counts': grade_counts,
        }

    pnls = [t.metrics.pnl for t in trades]
    wins = [p for p in pnls if p > 0]
    losses = [p for p in pnls if p < 0]
    win_rate = len(wins) / len(trades)
    gross_profit = sum(wins)
    gross_loss = -sum(losses) if losses else 0.0
    profit_factor = gross_profit / gross_loss if gross_loss > 0 else 0.0

    r_multiples = [t.metrics.r_multiple for t in trades if t.metrics.r_multiple is not None]
    hold_times = [t.metrics.hold_time_minutes for t in trades if t.metrics.hold_time_minutes is not None]

    graded = Counter(t.quality.grade.value for t in trades if t.quality is not None)
    grade_counts.update(graded)

    return {
        'num_trades': len(trades),
        'total_pnl': sum(pnls),
        'total_pips': sum(t.metrics.pips for t in trades),
        'win_rate': win_rate,
        'profit_factor': profit_factor,
        'avg_trade': sum(pnls) / len(trades),
        'avg_r_multiple': _mean(r_multiples),
        'avg_hold_time_minutes': _mean(hold_times),
        'grade_counts': grade_counts,
    }
