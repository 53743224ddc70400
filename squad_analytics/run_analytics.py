"""
Squad Analytics Script
Summarizes kills and survival time over the matches a roster played together.
"""

import logging
import sys

from auth.key_manager import PubgKeyManager
from squad_analytics.collector import PubgCollector
from squad_analytics.config import (
    DEFAULT_ROSTER,
    LOG_FORMAT,
    MAX_CONCURRENT_WORKERS,
    get_log_level
)
from squad_analytics.errors import InvalidInput
from squad_analytics.pipeline import SquadAnalyticsPipeline
from squad_analytics.report import ConsoleReportSink

logger = logging.getLogger(__name__)


def main(argv=None):
    """Command-line interface for a squad analytics run."""
    import argparse

    parser = argparse.ArgumentParser(description="Summarize stats over matches a roster played together")
    parser.add_argument("names", nargs="*",
                        help=f"Player names (default: {', '.join(DEFAULT_ROSTER)})")
    parser.add_argument("--workers", type=int, default=MAX_CONCURRENT_WORKERS,
                        help=f"Concurrent match fetches (default: {MAX_CONCURRENT_WORKERS})")
    parser.add_argument("--debug", action="store_true",
                        help="Enable debug logging")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else getattr(logging, get_log_level()),
        format=LOG_FORMAT
    )

    names = args.names or DEFAULT_ROSTER

    try:
        key_manager = PubgKeyManager()
    except ValueError as e:
        logger.error(str(e))
        return 1

    collector = PubgCollector(key_manager=key_manager)
    pipeline = SquadAnalyticsPipeline(
        collector,
        report_sink=ConsoleReportSink(),
        max_workers=args.workers
    )

    try:
        pipeline.run_and_render(names)
    except InvalidInput as e:
        logger.error(f"Run aborted: {e}")
        return 1
    finally:
        logger.info(
            f"API requests: {collector.stats['requests_made']} made, "
            f"{collector.stats['requests_failed']} failed"
        )
        collector.close()

    return 0


if __name__ == "__main__":
    sys.exit(main())
