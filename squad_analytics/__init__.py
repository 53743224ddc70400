"""
Squad Analytics Module for PUBG

Finds the matches a roster of players played together and summarizes each
player's kills and survival time over those matches.
"""

__version__ = "0.1.0"

from .aggregator import StatsAggregator
from .collector import PubgCollector
from .directory import PlayerDirectory
from .formatting import format_time
from .intersector import intersect_match_ids
from .match_stats import MatchStatsFetcher
from .pipeline import SquadAnalyticsPipeline
from .report import ConsoleReportSink

__all__ = [
    "StatsAggregator",
    "PubgCollector",
    "PlayerDirectory",
    "format_time",
    "intersect_match_ids",
    "MatchStatsFetcher",
    "SquadAnalyticsPipeline",
    "ConsoleReportSink"
]
