"""Build an Analyzer from integer arguments and print its report.

Examples::

    sample-stats --name Sensor-C 1 2
    python -m sample_stats.scripts.analyze_samples --json 10 20 30
"""
from __future__ import annotations

import argparse
import logging
from typing import List, Optional

from sample_stats.analytics.sample_analyzer import Analyzer, SampleStatsError, parse_sample
from sample_stats.common.logging_config import configure_logging
from sample_stats.common.utils import env_bool, env_str, log_level_from_env

logger = logging.getLogger(__name__)

DEFAULT_NAME = "analyzer"


def _sample_arg(raw: str) -> int:
    try:
        return parse_sample(raw)
    except SampleStatsError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Print the average of integer samples as a two-line report.")
    parser.add_argument("values", nargs="*", type=_sample_arg, help="Integer samples, in order")
    parser.add_argument(
        "--name",
        default=env_str("SAMPLE_STATS_NAME", DEFAULT_NAME),
        help="Analyzer label (env SAMPLE_STATS_NAME)",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        default=env_bool("SAMPLE_STATS_JSON", False),
        help="Print the report snapshot as JSON (env SAMPLE_STATS_JSON)",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    configure_logging(level=log_level_from_env("SAMPLE_STATS_LOG_LEVEL"))
    args = build_parser().parse_args(argv)

    analyzer = Analyzer(args.name)
    analyzer.add_samples(args.values)
    logger.info("analyzer %s: %d samples", analyzer.name, analyzer.sample_count())

    if args.json:
        print(analyzer.snapshot().model_dump_json())
    else:
        analyzer.print_report()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
