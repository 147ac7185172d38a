"""
Timezone utilities.

Journal exports mix naive and timezone‑aware timestamps.  These helpers
bring them onto a single timezone so entry and exit times can be
subtracted safely.
"""

from __future__ import annotations

from typing import Any, Optional
import pandas as pd


def to_timezone(ts: Any, tz_name: str, assume_tz: Optional[str] = None) -> Optional[pd.Timestamp]:
    """Convert `ts` to a `pandas.Timestamp` in the specified timezone.

    A naive timestamp is localised to `assume_tz` (UTC if not given)
    before conversion.  An aware one is simply converted.  A naive
    wall‑clock time that is skipped or repeated by a DST change in
    `assume_tz` cannot be placed on the timeline and gives `None`.
    """
    if not isinstance(ts, pd.Timestamp):
        ts = pd.Timestamp(ts)
    if ts.tzinfo is None:
        ts = ts.tz_localize(assume_tz or "UTC", ambiguous="NaT", nonexistent="NaT")
        if pd.isna(ts):
            return None
    return ts.tz_convert(tz_name)


def parse_timestamp(value: Any, tz_name: str) -> Optional[pd.Timestamp]:
    """Parse a CSV cell into a timestamp in `tz_name`.

    Blank cells, unparseable values and local times made ambiguous by a
    DST change give `None`.  Naive values are taken to already be in
    `tz_name`.
    """
    if value is None:
        return None
    if isinstance(value, str) and not value.strip():
        return None
    ts = pd.to_datetime(value, errors="coerce")
    if pd.isna(ts):
        return None
    return to_timezone(ts, tz_name, assume_tz=tz_name)
