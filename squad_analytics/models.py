"""
Data models for squad analytics.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple


@dataclass(frozen=True)
class Player:
    """A resolved roster member and their recent match history."""
    name: str
    id: str
    match_ids: Tuple[str, ...] = ()


@dataclass(frozen=True)
class RawMatchStat:
    """One player's performance in one match, as reported by the API."""
    kills: int
    time_survived: float
    player_name: str = ""
    match_id: str = ""


@dataclass(frozen=True)
class Statistics:
    """Summary metrics for one player over the shared matches."""
    max_kills: int
    avg_kills: float
    max_time_survived: str
    avg_time_survived: str
    matches: int = 0

    def to_row(self) -> Dict[str, object]:
        """Column layout used by the console report."""
        return {
            "maxKills": self.max_kills,
            "avgKills": self.avg_kills,
            "maxTimeSurvived": self.max_time_survived,
            "avgTimeSurvived": self.avg_time_survived,
            "matches": self.matches,
        }


@dataclass
class AnalyticsReport:
    """Final output of a pipeline run, handed to the report sink."""
    total_matches: int
    players: Dict[str, Optional[Statistics]]
    missing_matches: Dict[str, List[str]] = field(default_factory=dict)
    skipped_matches: List[str] = field(default_factory=list)
    unresolved_names: List[str] = field(default_factory=list)

    @property
    def players_with_data(self) -> int:
        """Count of players that have a computed summary."""
        return len([s for s in self.players.values() if s is not None])
