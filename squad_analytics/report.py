"""
Console report for squad analytics.
"""

import shutil
import sys
from typing import Dict, Optional

import pandas as pd

from squad_analytics.config import NO_DATA_MARKER
from squad_analytics.models import AnalyticsReport, Statistics

COLUMNS = ["maxKills", "avgKills", "maxTimeSurvived", "avgTimeSurvived", "matches"]


def build_table(report: Dict[str, Optional[Statistics]]) -> pd.DataFrame:
    """
    One row per player; players without data show the no-data marker.
    """
    rows = []
    for name, stats in report.items():
        if stats is None:
            rows.append({column: NO_DATA_MARKER for column in COLUMNS})
        else:
            rows.append(stats.to_row())

    table = pd.DataFrame(rows, index=list(report.keys()), columns=COLUMNS)
    table.index.name = "player"
    return table


class ConsoleReportSink:
    """Prints the analytics table to a text stream."""

    def __init__(self, stream=None):
        self.stream = stream or sys.stdout

    def _print(self, text=""):
        print(text, file=self.stream)

    def render(self, total_matches: int, report: Dict[str, Optional[Statistics]]):
        """Print the per-player table and the shared-match count."""
        line = "-" * shutil.get_terminal_size().columns

        self._print(line)
        self._print()
        self._print("ANALYTICS")
        self._print()
        if report:
            self._print(build_table(report).to_string())
        else:
            self._print("(no players)")
        self._print()
        self._print(f"Generated from {total_matches} matches.")
        self._print(line)

    def render_report(self, analytics_report: AnalyticsReport):
        """Render the table followed by notes on missing or skipped data."""
        self.render(analytics_report.total_matches, analytics_report.players)

        if analytics_report.total_matches == 0:
            self._print("No matches were played together by the whole roster.")
        if analytics_report.skipped_matches:
            self._print(f"Skipped {len(analytics_report.skipped_matches)} matches that could not be read: "
                        f"{', '.join(analytics_report.skipped_matches)}")
        for name, match_ids in analytics_report.missing_matches.items():
            self._print(f"{name}: no record in {len(match_ids)} shared matches")
        if analytics_report.unresolved_names:
            self._print(f"Players not found: {', '.join(analytics_report.unresolved_names)}")
