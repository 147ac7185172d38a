"""
Journal trade, metrics and execution quality models.

These dataclasses are the values passed between the CSV loader, the
calculation engine and the reporting layer.  Derived objects
(`TradeMetrics`, `ExecutionQuality`) are frozen: they are recomputed
from a `TradeInput`, never edited.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..engine.calculator import Direction, DirectionLike, Grade, normalize_direction


@dataclass
class TradeInput:
    """A trade as entered in the journal."""
    symbol: str
    direction: DirectionLike  # normalised to Direction
    entry_price: float
    exit_price: float
    volume: float  # lots
    stop_loss: Optional[float] = None
    take_profit: Optional[float] = None
    entry_time: Optional[datetime] = None
    exit_time: Optional[datetime] = None

    def __post_init__(self) -> None:
        self.direction = normalize_direction(self.direction)


@dataclass(frozen=True)
class TradeMetrics:
    """Performance figures derived from a `TradeInput`."""
    pips: float
    pnl: float
    risk_reward_ratio: str  # '1:N' or '0:0'
    r_multiple: Optional[float] = None
    hold_time_minutes: Optional[int] = None


@dataclass(frozen=True)
class ExecutionQuality:
    """Self‑assessed entry/exit ratings and the resulting grade."""
    entry_quality: int
    exit_quality: int
    grade: Grade


@dataclass
class JournalEntry:
    """One stored journal row: the trade plus optional quality ratings."""
    trade: TradeInput
    entry_quality: Optional[int] = None
    exit_quality: Optional[int] = None


@dataclass(frozen=True)
class DerivedTrade:
    """A journal entry together with everything computed from it."""
    entry: JournalEntry
    metrics: TradeMetrics
    quality: Optional[ExecutionQuality] = None
