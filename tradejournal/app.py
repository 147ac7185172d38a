"""
Application entry point.

This module defines a small command‑line interface that loads a trade
journal CSV, re‑derives the performance metrics of every trade and
writes a report.  Settings come from a YAML configuration file; command
line flags override them.
"""

from __future__ import annotations

import argparse
import logging
import os
from typing import List, Optional

from .config.schema import Config, load_config
from .data.csv_data import JournalCSVLoader
from .reporting.report import generate_journal_report


logger = logging.getLogger(__name__)


def _setup_logging(verbose: bool) -> None:
    """Configure logging for the application."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format='%(asctime)s [%(levelname)s] %(name)s: %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S',
    )


def run(config: Config) -> dict:
    """Load the configured journal and write its report."""
    logger.info("Loading journal from %s", config.data.csv_path)
    loader = JournalCSVLoader(config.data.csv_path, config.data.timezone)
    entries = loader.load(config.symbols)

    summary = generate_journal_report(entries, out_dir=config.report.out_dir, plot=config.report.plot)
    logger.info(
        "Report complete: %d trades, total P&L %.2f. Results saved to %r.",
        summary['num_trades'],
        summary['total_pnl'],
        config.report.out_dir,
    )
    return summary


def main(argv: Optional[List[str]] = None) -> None:
    """Parse command‑line arguments and build the journal report."""
    parser = argparse.ArgumentParser(description="Trade journal performance report")
    parser.add_argument('--config', default='config.yaml', help="Path to configuration YAML file")
    parser.add_argument('--csv', help="Journal CSV (overrides data.csv_path)")
    parser.add_argument('--out', help="Output directory (overrides report.out_dir)")
    parser.add_argument('--no-plot', action='store_true', help="Skip the cumulative P&L chart")
    parser.add_argument('-v', '--verbose', action='store_true', help="Enable debug logging")
    args = parser.parse_args(argv)

    _setup_logging(args.verbose)

    if os.path.exists(args.config):
        config = load_config(args.config)
    else:
        logger.info("Config file %s not found, using defaults", args.config)
        config = Config()

    if args.csv:
        config.data.csv_path = args.csv
    if args.out:
        config.report.out_dir = args.out
    if args.no_plot:
        config.report.plot = False

    try:
        run(config)
    except (FileNotFoundError, ValueError) as exc:
        logger.error("Journal report failed: %s", exc)
        raise


if __name__ == '__main__':
    main()
