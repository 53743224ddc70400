"""
Per-match stat lookup for the roster.
"""

import logging
from typing import Dict, Iterable

from squad_analytics.models import RawMatchStat
from squad_analytics.parser import PubgParser

logger = logging.getLogger(__name__)


class MatchStatsFetcher:
    """Fetches one match and keeps the roster's participant stats."""

    def __init__(self, data_source):
        """
        Args:
            data_source: Object exposing get_match(match_id) -> List[Dict]
        """
        self.data_source = data_source

    def fetch_match_stats(self, match_id: str, names: Iterable[str]) -> Dict[str, RawMatchStat]:
        """
        Raw stats of the named players in one match.

        Players that did not take part in the match are absent from the
        result. TransportError and DataFormatError propagate.
        """
        names = set(names)
        entities = self.data_source.get_match(match_id)
        stats_by_name = PubgParser.parse_participant_stats(entities, names, match_id)

        logger.debug(f"Match {match_id}: stats for {len(stats_by_name)}/{len(names)} players")
        return stats_by_name
