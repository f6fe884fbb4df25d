"""Tests for analytics metric helpers."""

import math
import random
from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from corpdash.analytics.metrics import (
    FALLBACK_STATS,
    delta_percent,
    format_metric,
    latest_stats,
    metric_series,
)
from corpdash.analytics.synthesizer import synthesize
from corpdash.core.schemas import AnalyticsDataset, AnalyticsPoint

NOW = datetime(2026, 3, 15, tzinfo=timezone.utc)


def _point(**kwargs: float) -> AnalyticsPoint:
    return AnalyticsPoint(date=NOW, **kwargs)  # type: ignore[arg-type]


class TestMetricSeries:
    def test_extracts_values(self) -> None:
        points = [_point(documents=10), _point(documents=20)]
        assert metric_series(points, "documents") == [10, 20]

    def test_missing_reads_as_zero(self) -> None:
        points = [_point(documents=10), _point()]
        assert metric_series(points, "documents") == [10, 0]


class TestDeltaPercent:
    def test_growth(self) -> None:
        assert delta_percent([100, 150, 125]) == 25

    def test_decline(self) -> None:
        assert delta_percent([200, 100]) == -50

    def test_too_short(self) -> None:
        assert delta_percent([]) == 0
        assert delta_percent([5]) == 0

    def test_zero_start(self) -> None:
        assert delta_percent([0, 50]) == 0


class TestLatestStats:
    def test_uses_newest_point(self) -> None:
        dataset = synthesize(7, random.Random(3), NOW)
        last = dataset.points[-1]
        stats = latest_stats(dataset)
        assert stats.documents == last.documents
        assert stats.ai_ops == last.ai_ops
        assert stats.time_saved_hours == last.time_saved_hours
        assert stats.accuracy_percent == last.accuracy

    def test_empty_dataset_falls_back(self) -> None:
        assert latest_stats(AnalyticsDataset()) == FALLBACK_STATS

    def test_fallback_cannot_be_mutated(self) -> None:
        stats = latest_stats(AnalyticsDataset())
        with pytest.raises(ValidationError):
            stats.documents = 0
        assert latest_stats(AnalyticsDataset()).documents == 1247

    def test_partial_point_fills_gaps(self) -> None:
        dataset = AnalyticsDataset(points=[_point(documents=999)])
        stats = latest_stats(dataset)
        assert stats.documents == 999
        assert stats.ai_ops == 3892
        assert stats.accuracy_percent == 94.5


class TestFormatMetric:
    def test_accuracy(self) -> None:
        assert format_metric(94.6, "accuracy") == "95%"

    def test_hours(self) -> None:
        assert format_metric(156, "time_saved_hours") == "156 ч"

    def test_counts_grouped(self) -> None:
        assert format_metric(12345, "documents") == "12\u00a0345"

    def test_counts_rounded_not_truncated(self) -> None:
        assert format_metric(1246.5, "documents") == "1\u00a0247"
        assert format_metric(3891.7, "ai_ops") == "3\u00a0892"

    def test_non_finite(self) -> None:
        assert format_metric(math.nan, "ai_ops") == "—"
