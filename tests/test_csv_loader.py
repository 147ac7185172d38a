import os
import sys
import tempfile
import pandas as pd

CURRENT_DIR = os.path.dirname(__file__)
PROJECT_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, os.pardir))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from tradejournal.data.csv_data import JournalCSVLoader
from tradejournal.engine.calculator import Direction
from tradejournal.journal.derive import derive_metrics

import unittest


JOURNAL_CSV = """symbol,direction,entry_price,exit_price,volume,stop_loss,take_profit,entry_time,exit_time,entry_quality,exit_quality
EURUSD,buy,1.1000,1.1050,1,1.0950,1.1100,2024-01-02 08:00,2024-01-02 09:30,5,4
USDJPY,sell,150.00,149.50,0.5,,,2024-01-03T10:00:00+00:00,2024-01-03T12:00:00+00:00,,
GBPUSD,long,1.2700,,1,,,,,,
"""


class TestJournalCSVLoader(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.path = os.path.join(self._tmp.name, "trades.csv")
        with open(self.path, "w", encoding="utf-8") as fh:
            fh.write(JOURNAL_CSV)

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def test_load_rows(self) -> None:
        entries = JournalCSVLoader(self.path, "Europe/Brussels").load()
        self.assertEqual(len(entries), 3)

        first = entries[0]
        self.assertEqual(first.trade.symbol, "EURUSD")
        self.assertIs(first.trade.direction, Direction.LONG)
        self.assertAlmostEqual(first.trade.stop_loss, 1.0950)
        self.assertEqual((first.entry_quality, first.exit_quality), (5, 4))
        # Naive timestamps are read in the configured timezone
        self.assertEqual(first.trade.entry_time, pd.Timestamp("2024-01-02 08:00", tz="Europe/Brussels"))

        second = entries[1]
        self.assertIs(second.trade.direction, Direction.SHORT)
        self.assertIsNone(second.trade.stop_loss)
        self.assertIsNone(second.trade.take_profit)
        self.assertIsNone(second.entry_quality)
        self.assertEqual(second.trade.entry_time, pd.Timestamp("2024-01-03 10:00", tz="UTC"))

        third = entries[2]
        self.assertEqual(third.trade.exit_price, 0.0)
        self.assertIsNone(third.trade.entry_time)

    def test_symbol_filter(self) -> None:
        entries = JournalCSVLoader(self.path, "UTC").load(["USDJPY"])
        self.assertEqual([e.trade.symbol for e in entries], ["USDJPY"])

    def test_missing_file(self) -> None:
        with self.assertRaises(FileNotFoundError):
            JournalCSVLoader(os.path.join(self._tmp.name, "nope.csv"), "UTC").load()

    def test_missing_columns(self) -> None:
        with open(self.path, "w", encoding="utf-8") as fh:
            fh.write("symbol,entry_price\nEURUSD,1.1\n")
        with self.assertRaises(ValueError):
            JournalCSVLoader(self.path, "UTC").load()

    def test_unknown_direction(self) -> None:
        with open(self.path, "w", encoding="utf-8") as fh:
            fh.write("symbol,direction,entry_price,exit_price,volume\nEURUSD,flat,1.1,1.2,1\n")
        with self.assertRaises(ValueError):
            JournalCSVLoader(self.path, "UTC").load()

    def test_dst_gap_and_overlap_leave_time_undefined(self) -> None:
        # 02:30 is skipped on 31 March and repeated on 27 October in Brussels
        with open(self.path, "w", encoding="utf-8") as fh:
            fh.write(
                "symbol,direction,entry_price,exit_price,volume,entry_time,exit_time\n"
                "EURUSD,long,1.1,1.105,1,2024-03-31 02:30,2024-03-31 04:00\n"
                "EURUSD,long,1.1,1.105,1,2024-10-27 02:30,2024-10-27 04:00\n"
            )
        entries = JournalCSVLoader(self.path, "Europe/Brussels").load()
        self.assertEqual(len(entries), 2)
        for entry in entries:
            self.assertIsNone(entry.trade.entry_time)
            self.assertIsNotNone(entry.trade.exit_time)
            self.assertIsNone(derive_metrics(entry.trade).hold_time_minutes)

    def test_fractional_rating_rejected(self) -> None:
        with open(self.path, "w", encoding="utf-8") as fh:
            fh.write(
                "symbol,direction,entry_price,exit_price,volume,entry_quality,exit_quality\n"
                "EURUSD,long,1.1,1.105,1,4.5,4\n"
            )
        with self.assertRaisesRegex(ValueError, "row 2"):
            JournalCSVLoader(self.path, "UTC").load()

    def test_whole_number_ratings_read_as_int(self) -> None:
        with open(self.path, "w", encoding="utf-8") as fh:
            fh.write(
                "symbol,direction,entry_price,exit_price,volume,entry_quality,exit_quality\n"
                "EURUSD,long,1.1,1.105,1,4.0,3\n"
            )
        entry = JournalCSVLoader(self.path, "UTC").load()[0]
        self.assertEqual((entry.entry_quality, entry.exit_quality), (4, 3))
        self.assertIsInstance(entry.entry_quality, int)


if __name__ == '__main__':
    unittest.main()
