"""
Render callbacks for the dashboard pages.

Each function takes the session's ReadingStore and returns plain values
(markdown strings, numbers, DataFrames) in the order app.py wires them.
"""

import time
from typing import List, Optional, Sequence

import gradio as gr
import pandas as pd

from health_config import DATA_SEED, LOAD_DELAY
from logging_setup import get_logger
from metrics import DEFAULT_GOALS, METRICS, HealthReading, format_value, metric_info
from storage import ReadingStore, load_store
from .logic_charts import NO_CHART_DATA, chart_frame
from .logic_insights import GOOD_STATUSES, metric_status, section_insight, summary_tips
from .logic_stats import compute_stats, progress_value, report_averages, week_change

logger = get_logger(__name__)

CARD_METRICS = ("steps", "heart_rate", "oxygen_level", "hydration")
REPORT_METRICS = ("steps", "heart_rate", "hydration", "sleep_hours")
INSIGHT_SECTIONS = (
    ("Activity Analysis", "steps"),
    ("Heart Rate Analysis", "heart_rate"),
    ("Hydration Analysis", "hydration"),
    ("Sleep Analysis", "sleep_hours"),
)

NO_DATA_MD = "_No data available. Please add health metrics first._"


def _readings(store: Optional[ReadingStore]) -> List[HealthReading]:
    return store.readings if store is not None else []


def _fmt(metric: str, value) -> str:
    if metric == "steps":
        return f"{int(value):,}"
    return format_value(value)


def load_series_action(delay: Optional[float] = None, seed: Optional[int] = DATA_SEED) -> ReadingStore:
    """Gradio load callback: simulate a data fetch, then hand out a fresh store."""
    pause = LOAD_DELAY if delay is None else delay
    if pause > 0:
        time.sleep(pause)
    store = load_store(seed=seed)
    logger.info("series_loaded", size=len(store))
    return store


# ---------------- Dashboard ----------------


def metric_card(readings: Sequence[HealthReading], metric: str) -> str:
    info = metric_info(metric)
    value = readings[0].value(metric) if readings else 0
    change = week_change(readings, metric)
    if change is None:
        change_line = "_no data from last week_"
    else:
        color = "green" if change >= 0 else "red"
        change_line = f"<span style='color:{color}'>{change:+d}% from last week</span>"
    return f"**{info.title}**\n\n### {_fmt(metric, value)} {info.unit}\n\n{change_line}"


def render_dashboard_cards(store: Optional[ReadingStore]):
    readings = _readings(store)
    return tuple(metric_card(readings, m) for m in CARD_METRICS)


def render_overview(store: Optional[ReadingStore]):
    """
    Outputs: goals markdown, steps/hydration/sleep progress values,
    vital signs markdown, tips markdown.
    """
    readings = _readings(store)
    if not readings:
        msg = "No health data available. Please add your health metrics to see a summary."
        return msg, 0, 0, 0, "", ""

    latest = readings[0]
    goals = DEFAULT_GOALS
    goals_md = (
        "#### Daily Goals\n"
        f"- Steps: {latest.steps} / {goals.steps_goal}\n"
        f"- Hydration: {latest.hydration} / {goals.hydration_goal} ml\n"
        f"- Sleep: {format_value(latest.sleep_hours)} / {format_value(goals.sleep_hours_goal)} hours"
    )
    steps_bar = progress_value(compute_stats(readings, "steps").percent_of_goal)
    hydration_bar = progress_value(compute_stats(readings, "hydration").percent_of_goal)
    sleep_bar = progress_value(compute_stats(readings, "sleep_hours").percent_of_goal)

    vitals_md = (
        "#### Vital Signs\n"
        f"- Heart Rate: {latest.heart_rate} BPM ({metric_status('heart_rate', latest.heart_rate)})\n"
        f"- Oxygen Level: {latest.oxygen_level}% ({metric_status('oxygen_level', latest.oxygen_level)})"
    )
    tips_md = "#### Health Insights\n" + "\n".join(f"- {tip}" for tip in summary_tips(latest))
    return goals_md, steps_bar, hydration_bar, sleep_bar, vitals_md, tips_md


def render_chart(store: Optional[ReadingStore], metric: str, chart_type: str):
    """Chart explorer. Outputs: line plot, bar plot, empty-state message."""
    frame = chart_frame(_readings(store), metric)
    if frame.empty:
        return gr.update(visible=False), gr.update(visible=False), NO_CHART_DATA

    info = metric_info(metric)
    if chart_type == "bar":
        return (
            gr.update(visible=False),
            gr.update(value=frame, visible=True, y_title=info.label),
            "",
        )
    return (
        gr.update(value=frame, visible=True, y_title=info.label),
        gr.update(visible=False),
        "",
    )


# ---------------- Metric pages ----------------


def metric_headline(readings: Sequence[HealthReading], metric: str) -> str:
    info = metric_info(metric)
    stats = compute_stats(readings, metric)
    lines = [f"### {_fmt(metric, stats.current)} {info.unit}"]

    status = metric_status(metric, stats.current)
    if metric == "steps":
        lines.append(f"**{status}** ({info.goal:,} steps is recommended)")
    elif metric == "sleep_hours":
        lines.append(f"**{status}** ({format_value(info.goal)} hours is recommended)")
    elif metric == "hydration":
        lines.append(f"Goal: {info.goal} ml ({stats.percent_of_goal}% of goal)")
    elif status is not None:
        lo, hi = format_value(info.range_min), format_value(info.range_max)
        lines.append(f"**{status}** ({lo}-{hi} {info.unit} is normal range)")

    if status is not None and status not in GOOD_STATUSES:
        lines[-1] = f"<span style='color:#f59e0b'>{lines[-1]}</span>"
    return "\n\n".join(lines)


def metric_stats_md(readings: Sequence[HealthReading], metric: str) -> str:
    info = metric_info(metric)
    stats = compute_stats(readings, metric)
    return (
        f"**{len(readings)}-day average:** {_fmt(metric, stats.avg)} {info.unit}\n\n"
        f"**Range:** {_fmt(metric, stats.min)} to {_fmt(metric, stats.max)} {info.unit}"
    )


def render_metric_page(store: Optional[ReadingStore], metric: str):
    """
    Outputs: headline markdown, stats markdown, progress value,
    history plot, empty-state message.
    """
    readings = _readings(store)
    stats = compute_stats(readings, metric)
    frame = chart_frame(readings, metric, with_goal=True)
    plot = gr.update(value=frame, visible=not frame.empty)
    return (
        metric_headline(readings, metric),
        metric_stats_md(readings, metric),
        progress_value(stats.percent_of_goal),
        plot,
        "" if readings else NO_CHART_DATA,
    )


# ---------------- Assistant & reports ----------------


def render_insight_sections(store: Optional[ReadingStore]) -> str:
    readings = _readings(store)
    if not readings:
        return NO_DATA_MD
    parts = [f"#### {title}\n{section_insight(readings, metric)}" for title, metric in INSIGHT_SECTIONS]
    return "\n\n".join(parts)


def report_footer(metric: str, average, days: int = 30) -> str:
    info = metric_info(metric)
    prefix = f"{days}-day average"
    if info.has_goal:
        return f"{prefix}: {_fmt(metric, average)} {info.unit} | Goal: {_fmt(metric, info.goal)} {info.unit}"
    lo, hi = format_value(info.range_min), format_value(info.range_max)
    return f"{prefix}: {_fmt(metric, average)} {info.unit} | Normal range: {lo}-{hi} {info.unit}"


def render_reports(store: Optional[ReadingStore]):
    """Outputs: one plot and one footer per report metric, in REPORT_METRICS order."""
    readings = _readings(store)
    averages = report_averages(readings)
    plots: List[pd.DataFrame] = []
    footers: List[str] = []
    for metric in REPORT_METRICS:
        plots.append(chart_frame(readings, metric))
        if readings:
            footers.append(report_footer(metric, averages[metric], days=len(readings)))
        else:
            footers.append(NO_CHART_DATA)
    return (*plots, *footers)


def metric_choices():
    return [(info.title, key) for key, info in METRICS.items()]
