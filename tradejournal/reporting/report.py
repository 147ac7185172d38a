"""
Report generation utilities.

This module re‑derives performance metrics for stored journal entries
and writes them out as human‑readable artefacts: a CSV of trades with
their computed columns, a JSON summary and a PNG chart of cumulative
P&L.  The calculation engine itself never stores anything; writing
these files is this caller's choice.
"""

from __future__ import annotations

import os
import json
import logging
from typing import List
import pandas as pd
import matplotlib

# Use non‑interactive backend for environments without display
matplotlib.use("Agg")
import matplotlib.pyplot as plt

from ..journal.derive import (
    derive_execution_quality,
    derive_metrics,
    describe_r_multiple,
    format_hold_time,
    is_complete,
)
from ..journal.models import DerivedTrade, JournalEntry
from .metrics import compute_summary


logger = logging.getLogger(__name__)


def _isoformat(ts) -> str:
    return ts.isoformat() if ts is not None else ""


def derive_trades(entries: List[JournalEntry]) -> List[DerivedTrade]:
    """Compute metrics for every complete entry, skipping the rest."""
    derived: List[DerivedTrade] = []
    for entry in entries:
        if not is_complete(entry.trade):
            logger.warning(
                "Skipping incomplete journal entry (symbol=%r, entry=%s, exit=%s)",
                entry.trade.symbol,
                entry.trade.entry_price,
                entry.trade.exit_price,
            )
            continue
        derived.append(
            DerivedTrade(
                entry=entry,
                metrics=derive_metrics(entry.trade),
                quality=derive_execution_quality(entry.entry_quality, entry.exit_quality),
            )
        )
    return derived


def trades_frame(trades: List[DerivedTrade]) -> pd.DataFrame:
    """Tabulate derived trades, one row per trade."""
    rows = []
    for t in trades:
        trade = t.entry.trade
        m = t.metrics
        rows.append(
            {
                'timestamp_entry': _isoformat(trade.entry_time),
                'timestamp_exit': _isoformat(trade.exit_time),
                'symbol': trade.symbol,
                'direction': trade.direction.value,
                'volume': trade.volume,
                'entry': trade.entry_price,
                'exit': trade.exit_price,
                'stop_loss': trade.stop_loss,
                'take_profit': trade.take_profit,
                'pips': m.pips,
                'pnl': m.pnl,
                'risk_reward': m.risk_reward_ratio,
                'r_multiple': m.r_multiple,
                'r_rating': describe_r_multiple(m.r_multiple),
                'hold_time_minutes': m.hold_time_minutes,
                'hold_time': format_hold_time(m.hold_time_minutes),
                'grade': t.quality.grade.value if t.quality is not None else None,
            }
        )
    return pd.DataFrame(rows)


def generate_journal_report(
    entries: List[JournalEntry],
    out_dir: str = "results",
    plot: bool = True,
) -> dict:
    """Generate report files for a set of journal entries.

    Creates the output directory if it does not exist and writes:

    - `trades.csv` – inputs plus derived metrics per trade
    - `summary.json` – aggregate statistics
    - `cumulative_pnl.png` – running P&L in journal order (if `plot`)

    Returns
    -------
    dict
        The summary written to `summary.json`.
    """
    os.makedirs(out_dir, exist_ok=True)

    trades = derive_trades(entries)
    logger.info("Derived metrics for %d of %d journal entries", len(trades), len(entries))

    # Trades CSV
    df_trades = trades_frame(trades)
    trades_path = os.path.join(out_dir, 'trades.csv')
    df_trades.to_csv(trades_path, index=False)

    # Summary JSON
    summary = compute_summary(trades)
    summary_path = os.path.join(out_dir, 'summary.json')
    with open(summary_path, 'w', encoding='utf-8') as fh:
        json.dump(summary, fh, indent=2, ensure_ascii=False)

    # Cumulative P&L plot
    if plot:
        fig, ax = plt.subplots(figsize=(10, 4))
        if not df_trades.empty:
            ax.plot(range(1, len(df_trades) + 1), df_trades['pnl'].cumsum(), linewidth=1.5)
            ax.set_title('Cumulative P&L')
            ax.set_xlabel('Trade #')
            ax.set_ylabel('P&L')
        fig.tight_layout()
        plot_path = os.path.join(out_dir, 'cumulative_pnl.png')
        fig.savefig(plot_path)
        plt.close(fig)

    return summary
