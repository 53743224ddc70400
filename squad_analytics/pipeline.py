"""
Squad Analytics Pipeline

Orchestrates a run from roster resolution to the final report:

1. Resolve roster names to players (PlayerDirectory)
2. Intersect recent match histories (intersect_match_ids)
3. Fetch each shared match and fold the roster's records into an accumulator
4. Aggregate each player's records (StatsAggregator)
5. Hand the report to a report sink

Lookup failures in steps 1 and 3 are logged and treated as missing data.
Only an empty requested roster aborts the run.
"""

import logging
import threading
from collections import OrderedDict
from concurrent.futures import ThreadPoolExecutor
from enum import Enum
from typing import Dict, List, Optional, Sequence

from squad_analytics.aggregator import StatsAggregator
from squad_analytics.config import MAX_CONCURRENT_WORKERS
from squad_analytics.directory import PlayerDirectory
from squad_analytics.errors import DataFormatError, InsufficientData, TransportError
from squad_analytics.intersector import intersect_match_ids
from squad_analytics.match_stats import MatchStatsFetcher
from squad_analytics.models import AnalyticsReport, Player, RawMatchStat, Statistics
from squad_analytics.outcomes import Outcome, attempt

logger = logging.getLogger(__name__)


class PipelineState(Enum):
    """Stages of a pipeline run."""
    IDLE = "idle"
    ROSTER_RESOLVED = "roster_resolved"
    INTERSECTION_COMPUTED = "intersection_computed"
    MATCHES_FOLDED = "matches_folded"
    REPORT_READY = "report_ready"
    RENDERED = "rendered"


class RawStatsAccumulator:
    """Raw match records per player, keyed by account id."""

    def __init__(self, players: Sequence[Player]):
        self._records: "OrderedDict[str, List[RawMatchStat]]" = OrderedDict(
            (player.id, []) for player in players
        )
        self._ids_by_name = {player.name: player.id for player in players}
        self._lock = threading.Lock()

    def add(self, name: str, record: RawMatchStat) -> bool:
        """Append a record to the owner of name. Returns False for unknown names."""
        player_id = self._ids_by_name.get(name)
        if player_id is None:
            logger.debug(f"Ignoring record for non-roster player {name}")
            return False
        with self._lock:
            self._records[player_id].append(record)
        return True

    def fold(self, stats_by_name: Dict[str, RawMatchStat]) -> int:
        """Append one match's records. Returns the number accepted."""
        return sum(1 for name, record in stats_by_name.items() if self.add(name, record))

    def records_for(self, player_id: str) -> List[RawMatchStat]:
        with self._lock:
            return list(self._records.get(player_id, []))

    def __len__(self):
        return len(self._records)


class SquadAnalyticsPipeline:
    """Runs the shared-match analytics for a roster."""

    def __init__(self, data_source, report_sink=None,
                 aggregator: Optional[StatsAggregator] = None,
                 max_workers: int = MAX_CONCURRENT_WORKERS):
        """
        Args:
            data_source: Object exposing get_players(names) and get_match(match_id)
            report_sink: Object exposing render_report(report); needed by run_and_render
            aggregator: StatsAggregator to summarize players with
            max_workers: Concurrent match fetches; 1 fetches sequentially
        """
        self.directory = PlayerDirectory(data_source)
        self.fetcher = MatchStatsFetcher(data_source)
        self.aggregator = aggregator or StatsAggregator()
        self.report_sink = report_sink
        self.max_workers = max(1, max_workers)
        self.state = PipelineState.IDLE

    def run(self, names: Sequence[str]) -> AnalyticsReport:
        """
        Compute the report for a roster.

        Raises:
            InvalidInput: names is empty
        """
        self.state = PipelineState.IDLE
        names = list(dict.fromkeys(names))

        # Step 1: roster
        players = self._resolve_roster(names)
        self.state = PipelineState.ROSTER_RESOLVED
        logger.info(f"Resolved {len(players)}/{len(names)} players")

        if not players:
            logger.warning("No roster players resolved; every player is reported without data")
            self.state = PipelineState.REPORT_READY
            return AnalyticsReport(
                total_matches=0,
                players={name: None for name in names if name},
                unresolved_names=PlayerDirectory.unresolved(names, players)
            )

        # Step 2: shared matches
        match_ids = intersect_match_ids([player.match_ids for player in players])
        self.state = PipelineState.INTERSECTION_COMPUTED
        if match_ids:
            logger.info(f"Found {len(match_ids)} matches played together")
        else:
            logger.warning("Roster has no matches in common; report will be empty")

        # Step 3: fold match stats
        accumulator = RawStatsAccumulator(players)
        skipped = self._fold_matches(match_ids, players, accumulator)
        self.state = PipelineState.MATCHES_FOLDED

        # Step 4: summaries
        report = self._build_report(names, players, match_ids, skipped, accumulator)
        self.state = PipelineState.REPORT_READY
        return report

    def run_and_render(self, names: Sequence[str]) -> AnalyticsReport:
        """Run the pipeline and hand the report to the report sink."""
        if self.report_sink is None:
            raise RuntimeError("No report sink configured")

        report = self.run(names)
        self.report_sink.render_report(report)
        self.state = PipelineState.RENDERED
        return report

    def _resolve_roster(self, names: Sequence[str]) -> List[Player]:
        outcome = attempt(self.directory.resolve, names)
        if outcome.failed_with(TransportError, DataFormatError):
            logger.error(f"Roster lookup failed, no players resolved: {outcome.error}")
            return []
        if not outcome.ok:
            raise outcome.error
        return outcome.value

    def _fold_matches(self, match_ids: List[str], players: Sequence[Player],
                      accumulator: RawStatsAccumulator) -> List[str]:
        """Fetch every shared match into the accumulator. Returns skipped match ids."""
        names = {player.name for player in players}
        outcomes = self._fetch_all(match_ids, names)

        skipped = []
        for index, (match_id, outcome) in enumerate(zip(match_ids, outcomes), start=1):
            if outcome.failed_with(TransportError):
                logger.error(f"Could not fetch match {match_id}, treating as no data: {outcome.error}")
                skipped.append(match_id)
                continue
            if outcome.failed_with(DataFormatError):
                logger.warning(f"Skipping malformed match {match_id}: {outcome.error}")
                skipped.append(match_id)
                continue
            if not outcome.ok:
                raise outcome.error

            accepted = accumulator.fold(outcome.value)
            logger.info(f"Progress: {index}/{len(match_ids)} matches, {accepted} player records from {match_id}")

        return skipped

    def _fetch_all(self, match_ids: List[str], names) -> List[Outcome]:
        """Fetch outcomes for every match, in match order."""
        if self.max_workers == 1 or len(match_ids) < 2:
            return [attempt(self.fetcher.fetch_match_stats, match_id, names) for match_id in match_ids]

        logger.info(f"Fetching {len(match_ids)} matches with {self.max_workers} workers")
        with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
            futures = [
                executor.submit(attempt, self.fetcher.fetch_match_stats, match_id, names)
                for match_id in match_ids
            ]
            return [future.result() for future in futures]

    def _build_report(self, names: Sequence[str], players: Sequence[Player],
                      match_ids: List[str], skipped: List[str],
                      accumulator: RawStatsAccumulator) -> AnalyticsReport:
        skipped_ids = set(skipped)
        expected = [match_id for match_id in match_ids if match_id not in skipped_ids]
        summaries: Dict[str, Optional[Statistics]] = {}
        missing_matches: Dict[str, List[str]] = {}

        for player in players:
            records = accumulator.records_for(player.id)
            present = {record.match_id for record in records}
            missing = [match_id for match_id in expected if match_id not in present]
            if missing:
                logger.warning(
                    f"{player.name} has no record in {len(missing)} of {len(expected)} shared matches: "
                    f"{', '.join(missing)}"
                )
                missing_matches[player.name] = missing

            outcome = attempt(self.aggregator.aggregate, records)
            if outcome.failed_with(InsufficientData):
                logger.info(f"No data to summarize for {player.name}")
                summaries[player.name] = None
            elif not outcome.ok:
                raise outcome.error
            else:
                summaries[player.name] = outcome.value

        unresolved = PlayerDirectory.unresolved(names, players)
        for name in unresolved:
            summaries[name] = None

        # Rows follow the requested roster order
        ordered = OrderedDict((name, summaries[name]) for name in names if name in summaries)

        return AnalyticsReport(
            total_matches=len(match_ids),
            players=dict(ordered),
            missing_matches=missing_matches,
            skipped_matches=skipped,
            unresolved_names=unresolved
        )
