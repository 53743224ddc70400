"""
Per-player statistics aggregation over shared matches.
"""

import logging
import math
from decimal import Decimal, ROUND_HALF_UP
from typing import Sequence

from squad_analytics.config import AVERAGE_DECIMALS
from squad_analytics.errors import InsufficientData
from squad_analytics.formatting import format_time
from squad_analytics.models import RawMatchStat, Statistics

logger = logging.getLogger(__name__)


def round_half_up(value: float, decimals: int = AVERAGE_DECIMALS) -> float:
    """
    Round to a fixed number of decimals, halves away from zero.

    Uses the exact decimal value of the float, so 1.0005 stored as
    1.000499999... rounds down.
    """
    quantum = Decimal(1).scaleb(-decimals)
    return float(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))


class StatsAggregator:
    """Folds a player's raw match records into summary Statistics."""

    def __init__(self, decimals: int = AVERAGE_DECIMALS):
        self.decimals = decimals

    def aggregate(self, raw_stats: Sequence[RawMatchStat]) -> Statistics:
        """
        Summarize raw records into max/average kills and survival time.

        Args:
            raw_stats: One record per match, in any order

        Returns:
            Statistics with survival times formatted as HH:MM:SS

        Raises:
            InsufficientData: raw_stats is empty
        """
        if not raw_stats:
            raise InsufficientData("No match records to aggregate")

        max_kills = 0
        max_time = 0.0
        kills = []
        times = []
        for record in raw_stats:
            if record.kills > max_kills:
                max_kills = record.kills
            if record.time_survived > max_time:
                max_time = record.time_survived
            kills.append(record.kills)
            times.append(record.time_survived)

        count = len(raw_stats)
        # fsum is correctly rounded, so the sums do not depend on record order
        avg_kills = round_half_up(math.fsum(kills) / count, self.decimals)
        avg_time = round_half_up(math.fsum(times) / count, self.decimals)

        return Statistics(
            max_kills=max_kills,
            avg_kills=avg_kills,
            max_time_survived=format_time(max_time),
            avg_time_survived=format_time(avg_time),
            matches=count
        )
