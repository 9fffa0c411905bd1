"""Integer-sample averaging with a two-line console report."""

from sample_stats.analytics.sample_analyzer import Analyzer, SampleStatsError

__all__ = ["Analyzer", "SampleStatsError"]
