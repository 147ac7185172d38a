"""
Journal CSV loader.

This module loads trade journal records from a CSV export.  The
expected header is:

```
symbol,direction,entry_price,exit_price,volume,stop_loss,take_profit,entry_time,exit_time,entry_quality,exit_quality
```

The first five columns are required.  The others may be absent or left
blank per row, in which case the corresponding field is `None`.
`direction` accepts ``long``/``buy`` and ``short``/``sell``.  Timestamps
may be ISO strings with or without an offset; naive ones are read in
the configured timezone.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Iterable, List, Optional
import pandas as pd

from ..journal.models import JournalEntry, TradeInput
from ..utils.timeutils import parse_timestamp


logger = logging.getLogger(__name__)

REQUIRED_COLUMNS = ["symbol", "direction", "entry_price", "exit_price", "volume"]


def _optional_float(value: Any) -> Optional[float]:
    if value is None or pd.isna(value):
        return None
    return float(value)


def _optional_int(value: Any) -> Optional[int]:
    if value is None or pd.isna(value):
        return None
    number = float(value)
    if not number.is_integer():
        raise ValueError(f"Expected a whole number rating, got {value!r}")
    return int(number)


class JournalCSVLoader:
    """Load journal entries from a CSV file.

    Parameters
    ----------
    csv_path : str
        Path to the CSV export.
    timezone : str
        IANA timezone name used to localise timestamps.
    """

    def __init__(self, csv_path: str, timezone: str) -> None:
        self.csv_path = Path(csv_path)
        self.timezone = timezone

    def load(self, symbols: Optional[Iterable[str]] = None) -> List[JournalEntry]:
        """Read every row of the CSV into a `JournalEntry`.

        Parameters
        ----------
        symbols : iterable of str, optional
            When given and nonâempty, rows for other symbols are dropped.

        Raises
        ------
        FileNotFoundError
            If the CSV does not exist.
        ValueError
            If a required column is missing, or a row has an unknown
            direction or a non‑integer quality rating.
        """
        if not self.csv_path.exists():
            raise FileNotFoundError(f"Journal CSV not found: {self.csv_path}")

        df = pd.read_csv(self.csv_path)
        df.columns = [c.strip() for c in df.columns]

        missing = [c for c in REQUIRED_COLUMNS if c not in df.columns]
        if missing:
            raise ValueError(
                f"Unrecognized journal CSV format. Missing columns: {missing}. "
                f"Found columns: {list(df.columns)}"
            )

        wanted = set(symbols or [])
        entries: List[JournalEntry] = []
        for idx, row in df.iterrows():
            symbol = "" if pd.isna(row["symbol"]) else str(row["symbol"]).strip()
            if wanted and symbol not in wanted:
                continue
            try:
                trade = TradeInput(
                    symbol=symbol,
                    direction=str(row["direction"]),
                    entry_price=_optional_float(row["entry_price"]) or 0.0,
                    exit_price=_optional_float(row["exit_price"]) or 0.0,
                    volume=_optional_float(row["volume"]) or 0.0,
                    stop_loss=_optional_float(row.get("stop_loss")),
                    take_profit=_optional_float(row.get("take_profit")),
                    entry_time=parse_timestamp(row.get("entry_time"), self.timezone),
                    exit_time=parse_timestamp(row.get("exit_time"), self.timezone),
                )
                entry = JournalEntry(
                    trade=trade,
                    entry_quality=_optional_int(row.get("entry_quality")),
                    exit_quality=_optional_int(row.get("exit_quality")),
                )
            except ValueError as exc:
                raise ValueError(f"Invalid journal row {idx + 2} in {self.csv_path}: {exc}") from exc
            entries.append(entry)

        logger.debug("Loaded %d journal entries from %s", len(entries), self.csv_path)
        return entries
