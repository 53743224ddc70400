"""
JSON:API Parser for PUBG responses
Handles parsing of player lookup and match payloads into squad analytics models.
"""

import logging
import math
from numbers import Real
from typing import Dict, Iterable, List, Set

from squad_analytics.config import PARTICIPANT_TYPE
from squad_analytics.errors import DataFormatError
from squad_analytics.models import Player, RawMatchStat

logger = logging.getLogger(__name__)


class PubgParser:
    """Parse PUBG API JSON:API payloads."""

    @staticmethod
    def parse_players_response(payload: Dict) -> List[Player]:
        """
        Parse players from a /players lookup response.

        Args:
            payload: Decoded JSON from /players?filter[playerNames]=...

        Returns:
            List of Player objects in response order
        """
        data = PubgParser._require(payload, "data", list, "players response")

        players = []
        for item in data:
            try:
                players.append(PubgParser._parse_player_item(item))
            except DataFormatError as e:
                logger.warning(f"Skipping malformed player entry: {e}")

        logger.debug(f"Parsed {len(players)} players from response")
        return players

    @staticmethod
    def _parse_player_item(item: Dict) -> Player:
        """Parse one entry of the players `data` array."""
        if not isinstance(item, dict):
            raise DataFormatError(f"Player entry is not an object: {item!r}")

        player_id = item.get("id")
        name = (item.get("attributes") or {}).get("name")
        if not player_id or not name:
            raise DataFormatError(f"Player entry missing id or attributes.name: {item!r}")

        try:
            match_refs = item["relationships"]["matches"]["data"]
        except (KeyError, TypeError):
            raise DataFormatError(f"Player {name} has no relationships.matches.data")
        if not isinstance(match_refs, list):
            raise DataFormatError(f"Player {name} matches relationship is not a list")

        match_ids = []
        for ref in match_refs:
            match_id = ref.get("id") if isinstance(ref, dict) else None
            if not match_id:
                raise DataFormatError(f"Player {name} has a match reference without id: {ref!r}")
            match_ids.append(match_id)

        return Player(name=name, id=player_id, match_ids=tuple(match_ids))

    @staticmethod
    def parse_match_entities(payload: Dict) -> List[Dict]:
        """
        Extract the entity records from a /matches/{id} response.

        Args:
            payload: Decoded JSON match document

        Returns:
            The `included` entity records (participants, rosters, assets)
        """
        return PubgParser._require(payload, "included", list, "match response")

    @staticmethod
    def parse_participant_stats(entities: Iterable[Dict], names: Set[str],
                                match_id: str = "") -> Dict[str, RawMatchStat]:
        """
        Collect raw stats for the requested players from match entities.

        Args:
            entities: Entity records from parse_match_entities
            names: Player names to keep
            match_id: Match the entities belong to

        Returns:
            Mapping of player name to RawMatchStat; names without a
            usable participant record are absent
        """
        stats_by_name = {}
        for entity in entities:
            if not isinstance(entity, dict) or entity.get("type") != PARTICIPANT_TYPE:
                continue

            stats = (entity.get("attributes") or {}).get("stats")
            if not isinstance(stats, dict) or not stats.get("name"):
                logger.warning(f"Skipping participant {entity.get('id')} in match {match_id}: no attributes.stats.name")
                continue

            name = stats["name"]
            if name not in names:
                continue

            try:
                stats_by_name[name] = PubgParser._parse_raw_stat(stats, match_id)
            except DataFormatError as e:
                logger.warning(f"Skipping record: {e}")
                continue
            logger.debug(f"Parsed stats for {name} in match {match_id}")

        return stats_by_name

    @staticmethod
    def _parse_raw_stat(stats: Dict, match_id: str) -> RawMatchStat:
        """Validate and convert one participant stats object."""
        name = stats["name"]
        kills = stats.get("kills")
        time_survived = stats.get("timeSurvived")

        if not PubgParser._is_number(kills) or not PubgParser._is_number(time_survived):
            raise DataFormatError(
                f"Stats for {name} in match {match_id} lack numeric kills/timeSurvived"
            )
        if kills < 0 or time_survived < 0:
            raise DataFormatError(f"Negative stats for {name} in match {match_id}")
        if kills != int(kills):
            raise DataFormatError(f"Fractional kill count for {name} in match {match_id}: {kills}")

        return RawMatchStat(
            kills=int(kills),
            time_survived=float(time_survived),
            player_name=name,
            match_id=match_id
        )

    @staticmethod
    def _is_number(value) -> bool:
        return isinstance(value, Real) and not isinstance(value, bool) and math.isfinite(value)

    @staticmethod
    def _require(payload, key, expected_type, context):
        if not isinstance(payload, dict) or key not in payload:
            raise DataFormatError(f"Missing '{key}' in {context}")
        value = payload[key]
        if not isinstance(value, expected_type):
            raise DataFormatError(f"'{key}' in {context} is not a {expected_type.__name__}")
        return value
