"""
Roster resolution: player names to account ids and recent matches.
"""

import logging
from typing import List, Sequence

from squad_analytics.errors import InvalidInput
from squad_analytics.models import Player

logger = logging.getLogger(__name__)


class PlayerDirectory:
    """Resolves roster names through a data source."""

    def __init__(self, data_source):
        """
        Args:
            data_source: Object exposing get_players(names) -> List[Player]
        """
        self.data_source = data_source

    def resolve(self, names: Sequence[str]) -> List[Player]:
        """
        Resolve names to players, ordered as requested.

        Names the data source does not know are left out and logged.

        Raises:
            InvalidInput: names is empty
        """
        requested = self._dedupe(names)
        if not requested:
            raise InvalidInput("Roster is empty")

        by_name = {}
        for player in self.data_source.get_players(requested):
            by_name.setdefault(player.name, player)

        players = [by_name[name] for name in requested if name in by_name]
        for name in self.unresolved(requested, players):
            logger.warning(f"Player {name} was not returned by the API")

        return players

    @staticmethod
    def unresolved(names: Sequence[str], players: Sequence[Player]) -> List[str]:
        """Requested names without a resolved player, in request order."""
        found = {player.name for player in players}
        return [name for name in PlayerDirectory._dedupe(names) if name not in found]

    @staticmethod
    def _dedupe(names: Sequence[str]) -> List[str]:
        return list(dict.fromkeys(name for name in names if name))
