from __future__ import annotations

from logic.logic_stats import (
    MetricStats,
    compute_stats,
    percent_of_goal,
    progress_value,
    report_averages,
    round_half_up,
    week_change,
)


def test_round_half_up() -> None:
    assert round_half_up(2.5) == 3
    assert round_half_up(3.5) == 4
    assert round_half_up(7.25, 1) == 7.3
    assert isinstance(round_half_up(1.2), int)


def test_compute_stats_basic(make_series) -> None:
    series = make_series([{"steps": 6000}, {"steps": 9000}, {"steps": 12000}])
    stats = compute_stats(series, "steps")
    assert stats.current == 6000
    assert stats.min == 6000
    assert stats.max == 12000
    assert stats.avg == 9000
    assert stats.percent_of_goal == 60


def test_compute_stats_sleep_average_has_one_decimal(make_series) -> None:
    series = make_series([{"sleep_hours": 7.0}, {"sleep_hours": 8.0}, {"sleep_hours": 8.0}])
    assert compute_stats(series, "sleep_hours").avg == 7.7


def test_compute_stats_range_metric_has_no_percent(make_series) -> None:
    stats = compute_stats(make_series([{"heart_rate": 72}]), "heart_rate")
    assert stats.percent_of_goal is None


def test_compute_stats_empty_series() -> None:
    assert compute_stats([], "heart_rate") == MetricStats()
    assert compute_stats([], "steps").percent_of_goal == 0


def test_percent_of_goal_is_uncapped_but_progress_is_clamped(make_series) -> None:
    stats = compute_stats(make_series([{"hydration": 3600}]), "hydration")
    assert stats.percent_of_goal == 120
    assert progress_value(stats.percent_of_goal) == 100


def test_percent_of_goal_without_goal() -> None:
    assert percent_of_goal(500, 0) == 0


def test_progress_value_bounds() -> None:
    assert progress_value(None) == 0
    assert progress_value(-5) == 0
    assert progress_value(42) == 42


def test_report_averages_covers_every_metric(make_series) -> None:
    series = make_series([{"steps": 1000}, {"steps": 2001}])
    averages = report_averages(series)
    assert set(averages) == {"steps", "heart_rate", "oxygen_level", "hydration", "sleep_hours"}
    assert averages["steps"] == 1501
    assert report_averages([])["steps"] == 0


def test_week_change(make_series) -> None:
    rows = [{"steps": 11000}] + [{"steps": 9000}] * 6 + [{"steps": 10000}]
    series = make_series(rows)
    assert week_change(series, "steps") == 10
    assert week_change(series[:7], "steps") is None


def test_week_change_with_zero_baseline(make_series) -> None:
    rows = [{"steps": 500}] + [{"steps": 0}] * 7
    assert week_change(make_series(rows), "steps") is None
