"""
Configuration schema and loader.

This module defines dataclasses that mirror the structure of the YAML
configuration file (`config.yaml`) used by the journal report command.
`load_config()` reads a YAML file from disk and returns a `Config`
with defaults filled in for any missing fields.

Only the batch tooling is configurable.  The pip multiplier table and
the per‑lot pip value used by the calculation engine are fixed and
deliberately have no configuration entry.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Dict, Any
import yaml


@dataclass
class DataConfig:
    """Journal data source.

    Attributes
    ----------
    csv_path : str
        CSV export of the trade journal.
    timezone : str
        IANA timezone name.  Naive timestamps in the CSV are assumed to
        be in this timezone; aware ones are converted to it.
    """

    csv_path: str = "data/trades.csv"
    timezone: str = "UTC"


@dataclass
class ReportConfig:
    """Report output.

    Attributes
    ----------
    out_dir : str
        Directory receiving `trades.csv`, `summary.json` and the chart.
    plot : bool
        Whether to render `cumulative_pnl.png`.
    """

    out_dir: str = "results"
    plot: bool = True


@dataclass
class Config:
    """Root configuration.

    Attributes
    ----------
    symbols : List[str]
        Only report trades on these symbols.  Empty means all symbols.
    data : DataConfig
        Journal data source.
    report : ReportConfig
        Report output settings.
    """

    symbols: List[str] = field(default_factory=list)
    data: DataConfig = field(default_factory=DataConfig)
    report: ReportConfig = field(default_factory=ReportConfig)


def _merge_dict(defaults: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Recursively merge two dictionaries.

    The values in `override` take precedence over those in `defaults`.
    """
    result: Dict[str, Any] = defaults.copy()
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _merge_dict(result[key], value)
        else:
            result[key] = value
    return result


def load_config(path: str) -> Config:
    """Load a configuration file from the given YAML path.

    Parameters
    ----------
    path : str
        Path to the YAML file.

    Returns
    -------
    Config
        A populated configuration object.
    """
    with open(path, "r", encoding="utf-8") as fh:
        raw: Dict[str, Any] = yaml.safe_load(fh) or {}

    defaults: Dict[str, Any] = {
        'symbols': [],
        'data': {
            'csv_path': "data/trades.csv",
            'timezone': "UTC",
        },
        'report': {
            'out_dir': "results",
            'plot': True,
        },
    }

    merged = _merge_dict(defaults, raw)

    return Config(
        symbols=[str(s) for s in (merged.get('symbols') or [])],
        data=DataConfig(**merged['data']),
        report=ReportConfig(
            out_dir=str(merged['report']['out_dir']),
            plot=bool(merged['report']['plot']),
        ),
    )
