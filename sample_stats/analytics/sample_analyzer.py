"""Named integer-sample accumulator with a running mean and a text report.

Samples are append-only and kept in insertion order. The average is
recomputed on every call, so reports always reflect the current state.
"""
from __future__ import annotations

import logging
import math
import sys
from typing import Iterable, List, Optional, TextIO, Tuple

from sample_stats.contracts.report_schemas import AnalyzerReport

logger = logging.getLogger(__name__)


class SampleStatsError(ValueError):
    pass


def parse_sample(raw: str) -> int:
    """Parse one integer sample from text (surrounding whitespace allowed)."""
    text = str(raw).strip()
    try:
        return int(text, 10)
    except ValueError:
        raise SampleStatsError(f"Not an integer sample: {raw!r}") from None


class Analyzer:
    """Accumulates integer samples under a label and reports their average."""

    def __init__(self, name: str):
        self._name = name
        self._samples: List[int] = []

    @property
    def name(self) -> str:
        return self._name

    @property
    def samples(self) -> Tuple[int, ...]:
        return tuple(self._samples)

    def sample_count(self) -> int:
        return len(self._samples)

    def add_sample(self, value: int) -> None:
        self._samples.append(value)
        logger.debug("analyzer %s: added sample %s (n=%d)", self._name, value, len(self._samples))

    def add_samples(self, values: Iterable[int]) -> None:
        for value in values:
            self.add_sample(value)

    def calculate_average(self) -> float:
        """Arithmetic mean in float; 0.0 when no samples have been added."""
        if not self._samples:
            return 0.0
        try:
            total = 0.0
            for value in self._samples:
                total += float(value)
            if not math.isinf(total):
                return total / len(self._samples)
        except OverflowError:
            pass
        # samples beyond float range: divide exactly in int space
        exact = sum(self._samples)
        try:
            return exact / len(self._samples)
        except OverflowError:
            return math.inf if exact > 0 else -math.inf

    def format_report(self) -> str:
        return f"Analyzer: {self._name}\nAverage: {self.calculate_average()}\n"

    def print_report(self, stream: Optional[TextIO] = None) -> None:
        """Write the two-line report to *stream* (stdout by default)."""
        out = stream if stream is not None else sys.stdout
        out.write(self.format_report())

    def snapshot(self) -> AnalyzerReport:
        return AnalyzerReport(
            name=self._name,
            sample_count=len(self._samples),
            average=self.calculate_average(),
        )
