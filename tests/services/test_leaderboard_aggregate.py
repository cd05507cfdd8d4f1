"""Tests for the leaderboard, time series and provider statistics views."""

import math

import pytest

from difr_leaderboard.services.leaderboard import (
    LeaderboardRow,
    build_leaderboard,
    build_provider_stats,
    build_time_series,
    list_models,
    provider_name,
    visible_rows,
)

T1 = "2024-01-15T09:30:00"
T2 = "2024-01-16T09:30:00"
T3 = "2024-01-17T09:30:00"
T4 = "2024-01-18T09:30:00"


class TestProviderName:
    @pytest.mark.parametrize(
        ("endpoint", "expected"),
        [
            pytest.param("providerX/fp8", "providerX", id="variant"),
            pytest.param("providerX/fp8/turbo", "providerX", id="first_slash_only"),
            pytest.param("providerX", "providerX", id="no_slash"),
        ],
    )
    def test_split(self, endpoint: str, expected: str) -> None:
        assert provider_name(endpoint) == expected


class TestBuildLeaderboard:
    """Tests for the overall per-provider leaderboard."""

    def test_two_runs_same_model(self, make_record) -> None:
        records = [
            make_record("org/m", T1, {"p/fp8": 0.9}),
            make_record("org/m", T2, {"p/fp8": 0.8}),
        ]

        [row] = build_leaderboard(records)

        assert row.provider == "p"
        assert row.avg_score == pytest.approx(0.85)
        assert row.model_count == 1
        assert row.data_points == 2

    def test_variants_grouped_under_provider(self, make_record) -> None:
        records = [
            make_record("org/a", T1, {"p/fp8": 0.9, "p/bf16": 1.0, "q/fp8": 0.5}),
            make_record("org/b", T1, {"p/fp4": 0.8}),
        ]

        rows = build_leaderboard(records)

        assert rows[0] == LeaderboardRow(
            provider="p", avg_score=pytest.approx(0.9), model_count=2, data_points=3
        )
        assert rows[1].provider == "q"

    def test_invalid_scores_are_excluded_not_zero(self, make_record) -> None:
        records = [
            make_record("org/a", T1, {"p/fp8": 0.9, "q/fp8": None}),
            make_record("org/b", T2, {"p/fp8": None}),
            make_record("org/c", T3, {"p/fp8": math.nan}),
        ]

        rows = build_leaderboard(records)

        assert [r.provider for r in rows] == ["p"]
        assert rows[0].avg_score == pytest.approx(0.9)
        assert rows[0].data_points == 1
        assert rows[0].model_count == 1

    def test_sorted_descending_with_stable_ties(self, make_record) -> None:
        records = [
            make_record("org/a", T1, {"tie1/x": 0.9, "low/x": 0.5, "tie2/x": 0.9, "top/x": 0.99}),
        ]

        rows = build_leaderboard(records)

        assert [r.provider for r in rows] == ["top", "tie1", "tie2", "low"]

    def test_empty_records(self) -> None:
        assert build_leaderboard([]) == []


class TestVisibleRows:
    def _rows(self, count: int) -> list[LeaderboardRow]:
        return [LeaderboardRow(f"p{i}", 1.0 - i / 100, 1, 1) for i in range(count)]

    def test_top_ten_by_default(self) -> None:
        rows = self._rows(12)

        assert visible_rows(rows, show_all=False) == rows[:10]

    def test_show_all(self) -> None:
        rows = self._rows(12)

        assert visible_rows(rows, show_all=True) == rows


class TestListModels:
    def test_first_seen_order(self, make_record) -> None:
        records = [
            make_record("b", T1, {}),
            make_record("a", T1, {}),
            make_record("b", T2, {}),
        ]

        assert list_models(records) == ["b", "a"]


class TestBuildTimeSeries:
    """Tests for per-model chart data."""

    def test_filters_model_and_sorts_by_timestamp(self, make_record) -> None:
        records = [
            make_record("m", T2, {"p/x": 0.8}),
            make_record("other", T1, {"p/x": 0.1}),
            make_record("m", T1, {"p/x": 0.9}),
        ]

        series = build_time_series(records, "m")

        assert [p.timestamp for p in series.points] == [T1, T2]
        assert [p.scores["p/x"] for p in series.points] == [0.9, 0.8]

    def test_missing_metric_is_absent(self, make_record) -> None:
        records = [
            make_record("m", T1, {"p/x": 0.9, "q/x": None}),
            make_record("m", T2, {"q/x": 0.8}),
        ]

        series = build_time_series(records, "m")

        assert series.points[0].scores == {"p/x": 0.9}
        assert series.points[1].scores == {"q/x": 0.8}
        assert series.endpoints == ("p/x", "q/x")

    def test_endpoint_without_valid_scores_is_inactive(self, make_record) -> None:
        records = [make_record("m", T1, {"p/x": 0.9, "dead/x": None})]

        assert build_time_series(records, "m").endpoints == ("p/x",)

    def test_trailing_points_without_scores_are_trimmed(self, make_record) -> None:
        records = [
            make_record("m", T1, {"p/x": None}),
            make_record("m", T2, {"p/x": 0.9}),
            make_record("m", T3, {"p/x": None}),
            make_record("m", T4, {"new/x": None}),
        ]

        series = build_time_series(records, "m")

        assert [p.timestamp for p in series.points] == [T1, T2]

    def test_interior_gaps_are_kept(self, make_record) -> None:
        records = [
            make_record("m", T1, {"p/x": 0.9}),
            make_record("m", T2, {"p/x": None}),
            make_record("m", T3, {"p/x": 0.95}),
        ]

        series = build_time_series(records, "m")

        assert [p.timestamp for p in series.points] == [T1, T2, T3]
        assert series.points[1].scores == {}

    def test_no_active_endpoints_keeps_all_points(self, make_record) -> None:
        records = [
            make_record("m", T1, {"p/x": None}),
            make_record("m", T2, {}),
        ]

        series = build_time_series(records, "m")

        assert len(series.points) == 2
        assert series.endpoints == ()

    def test_unknown_model_is_empty(self, make_record) -> None:
        series = build_time_series([make_record("m", T1, {"p/x": 0.9})], "other")

        assert series.points == ()


class TestBuildProviderStats:
    """Tests for per-model endpoint statistics."""

    def test_two_runs_trend_and_latest(self, make_record) -> None:
        records = [
            make_record("m", T1, {"p/fp8": 0.9}),
            make_record("m", T2, {"p/fp8": 0.8}),
        ]

        [stat] = build_provider_stats(records, "m")

        assert stat.provider == "p/fp8"
        assert stat.avg_score == pytest.approx(0.85)
        assert stat.min_score == pytest.approx(0.8)
        assert stat.max_score == pytest.approx(0.9)
        assert stat.trend == pytest.approx(-0.1)
        assert stat.latest_score == pytest.approx(0.8)
        assert stat.data_points == 2

    def test_single_valid_score_has_zero_trend(self, make_record) -> None:
        records = [
            make_record("m", T1, {"p/x": None}),
            make_record("m", T2, {"p/x": 0.93}),
        ]

        [stat] = build_provider_stats(records, "m")

        assert stat.trend == 0
        assert stat.data_points == 1

    def test_no_valid_scores_excluded(self, make_record) -> None:
        records = [
            make_record("m", T1, {"p/x": None, "q/x": 0.9}),
            make_record("m", T2, {"p/x": math.nan}),
        ]

        stats = build_provider_stats(records, "m")

        assert [s.provider for s in stats] == ["q/x"]

    def test_latest_skips_missing_recent_runs(self, make_record) -> None:
        records = [
            make_record("m", T1, {"p/x": 0.91}),
            make_record("m", T2, {"p/x": 0.95}),
            make_record("m", T3, {"p/x": None}),
        ]

        [stat] = build_provider_stats(records, "m")

        assert stat.latest_score == pytest.approx(0.95)
        assert stat.trend == pytest.approx(0.04)

    def test_trend_uses_last_two_valid_scores(self, make_record) -> None:
        records = [
            make_record("m", T4, {"p/x": 0.97}),
            make_record("m", T1, {"p/x": 0.90}),
            make_record("m", T3, {"p/x": None}),
            make_record("m", T2, {"p/x": 0.92}),
        ]

        [stat] = build_provider_stats(records, "m")

        assert stat.trend == pytest.approx(0.05)
        assert stat.latest_score == pytest.approx(0.97)

    def test_sorted_by_average_descending(self, make_record) -> None:
        records = [make_record("m", T1, {"low/x": 0.7, "high/x": 0.99, "mid/x": 0.85})]

        stats = build_provider_stats(records, "m")

        assert [s.provider for s in stats] == ["high/x", "mid/x", "low/x"]

    def test_other_models_ignored(self, make_record) -> None:
        records = [
            make_record("m", T1, {"p/x": 0.9}),
            make_record("other", T2, {"p/x": 0.1}),
        ]

        [stat] = build_provider_stats(records, "m")

        assert stat.avg_score == pytest.approx(0.9)
