from __future__ import annotations

from datetime import date

from logic.logic_charts import NO_CHART_DATA
from logic.logic_pages import (
    NO_DATA_MD,
    load_series_action,
    metric_card,
    metric_choices,
    render_chart,
    render_dashboard_cards,
    render_insight_sections,
    render_metric_page,
    render_overview,
    render_reports,
    report_footer,
)
from logic.logic_progress import submit_reading_action
from storage import ReadingStore, load_store


def test_load_series_action_seeded() -> None:
    first = load_series_action(delay=0, seed=3)
    second = load_series_action(delay=0, seed=3)
    assert len(first) == 30
    assert first.values("steps") == second.values("steps")


def test_metric_card_week_change(make_series) -> None:
    rows = [{"steps": 10500}] + [{}] * 6 + [{"steps": 10000}]
    card = metric_card(make_series(rows), "steps")
    assert "### 10,500 steps" in card
    assert "+5% from last week" in card


def test_metric_card_without_last_week(make_series) -> None:
    card = metric_card(make_series([{}]), "heart_rate")
    assert "_no data from last week_" in card


def test_dashboard_cards_count(make_series) -> None:
    assert len(render_dashboard_cards(ReadingStore(make_series([{}])))) == 4


def test_overview_clamps_progress(make_series) -> None:
    store = ReadingStore(make_series([{"hydration": 3600, "steps": 5000}]))
    goals_md, steps_bar, hydration_bar, sleep_bar, vitals_md, tips_md = render_overview(store)
    assert "Hydration: 3600 / 3000 ml" in goals_md
    assert steps_bar == 50
    assert hydration_bar == 100
    assert sleep_bar == 100
    assert "Heart Rate: 70 BPM (Normal)" in vitals_md
    assert "Great job!" in tips_md


def test_overview_without_data() -> None:
    goals_md, steps_bar, *_ = render_overview(ReadingStore())
    assert goals_md.startswith("No health data available.")
    assert steps_bar == 0


def test_render_chart_switches_plot(make_series) -> None:
    store = ReadingStore(make_series([{}, {}]))
    line, bar, msg = render_chart(store, "steps", "bar")
    assert line["visible"] is False
    assert bar["visible"] is True
    assert msg == ""

    line, bar, msg = render_chart(ReadingStore(), "steps", "line")
    assert msg == NO_CHART_DATA


def test_render_metric_page(make_series) -> None:
    store = ReadingStore(make_series([{"hydration": 1500}]))
    headline, stats_md, progress, plot, msg = render_metric_page(store, "hydration")
    assert "### 1500 ml" in headline
    assert "50% of goal" in headline
    assert "**1-day average:** 1500 ml" in stats_md
    assert progress == 50
    assert msg == ""


def test_render_metric_page_flags_low_status(make_series) -> None:
    store = ReadingStore(make_series([{"sleep_hours": 5.0}]))
    headline, *_ = render_metric_page(store, "sleep_hours")
    assert "**Insufficient**" in headline
    assert "#f59e0b" in headline


def test_insight_sections(make_series) -> None:
    text = render_insight_sections(ReadingStore(make_series([{}])))
    assert "#### Activity Analysis" in text
    assert "#### Sleep Analysis" in text
    assert render_insight_sections(None) == NO_DATA_MD


def test_report_footer() -> None:
    assert report_footer("steps", 8123, days=30) == (
        "30-day average: 8,123 steps | Goal: 10,000 steps"
    )
    assert report_footer("heart_rate", 72, days=30) == (
        "30-day average: 72 BPM | Normal range: 60-100 BPM"
    )


def test_render_reports(make_series) -> None:
    store = ReadingStore(make_series([{}, {}, {}]))
    out = render_reports(store)
    assert len(out) == 8
    assert out[4].startswith("3-day average:")


def test_metric_choices() -> None:
    assert ("Heart Rate", "heart_rate") in metric_choices()


def test_bar_chart_has_one_row_per_reading_after_save() -> None:
    store = load_store(seed=1, length=30)
    submit_reading_action(4000, 72, 98, 2000, 8, store)

    _, bar, _ = render_chart(store, "steps", "bar")
    frame = bar["value"]
    assert len(frame) == 30
    assert frame["entry"].is_unique
    today = date.today().strftime("%b %d")
    assert frame.loc[frame["entry"] == f"{today} (2)", "value"].tolist() == [4000]


def test_reports_without_data_show_message() -> None:
    out = render_reports(ReadingStore())
    assert list(out[4:]) == [NO_CHART_DATA] * 4
