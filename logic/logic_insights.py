"""
Status labels and short written insights shown next to the charts.
"""

from typing import List, Optional, Sequence

from metrics import DEFAULT_GOALS, Goals, HealthReading, format_value, metric_info
from .logic_stats import round_half_up


def activity_status(steps: float, goals: Goals = DEFAULT_GOALS) -> str:
    if steps < goals.steps_goal * 0.5:
        return "Low"
    if steps < goals.steps_goal:
        return "Moderate"
    return "Active"


def heart_rate_status(rate: float, goals: Goals = DEFAULT_GOALS) -> str:
    if rate < goals.heart_rate_min:
        return "Below normal"
    if rate > goals.heart_rate_max:
        return "Above normal"
    return "Normal"


def oxygen_status(level: float, goals: Goals = DEFAULT_GOALS) -> str:
    if level < goals.oxygen_level_min:
        return "Below normal"
    return "Normal"


def sleep_status(hours: float, goals: Goals = DEFAULT_GOALS) -> str:
    if hours < goals.sleep_hours_goal * 0.7:
        return "Insufficient"
    if hours < goals.sleep_hours_goal:
        return "Below goal"
    return "Adequate"


STATUS_FUNCS = {
    "steps": activity_status,
    "heart_rate": heart_rate_status,
    "oxygen_level": oxygen_status,
    "sleep_hours": sleep_status,
}

GOOD_STATUSES = {"Active", "Normal", "Adequate"}


def metric_status(metric: str, value: float) -> Optional[str]:
    func = STATUS_FUNCS.get(metric)
    return func(value) if func else None


def section_insight(readings: Sequence[HealthReading], metric: str) -> str:
    """
    One-sentence analysis of the latest value of `metric`.

    Goal metrics are judged by the percentage of the goal reached, range
    metrics by whether the value falls inside the normal range.
    """
    if not readings:
        return "No data available"

    info = metric_info(metric)
    value = readings[0].value(metric)
    goal = format_value(info.goal) if info.has_goal else None
    name = info.title.lower()

    if info.has_goal:
        pct = value / info.goal * 100
        shown = round_half_up(pct)
        if pct >= 100:
            return f"Excellent! You've exceeded your {goal} {info.unit} goal. Keep up the great work!"
        if pct >= 80:
            return f"Good progress! You're at {shown}% of your {goal} {info.unit} goal."
        if pct >= 50:
            return f"You're halfway there! Currently at {shown}% of your {goal} {info.unit} goal."
        return f"Keep working on it! You're at {shown}% of your {goal} {info.unit} goal."

    lo = format_value(info.range_min)
    hi = format_value(info.range_max)
    if value < info.range_min:
        return (
            f"Your {name} is below the normal range ({lo}-{hi} {info.unit}). "
            "Consider consulting a healthcare provider."
        )
    if value > info.range_max:
        return (
            f"Your {name} is above the normal range ({lo}-{hi} {info.unit}). "
            "Consider consulting a healthcare provider."
        )
    return f"Your {name} is within the normal range ({lo}-{hi} {info.unit})."


def summary_tips(latest: Optional[HealthReading], goals: Goals = DEFAULT_GOALS) -> List[str]:
    """Bullet tips for the overview card; a single encouragement when all is well."""
    if latest is None:
        return []

    tips: List[str] = []
    if latest.steps < goals.steps_goal * 0.5:
        tips.append(f"Try to increase your daily steps to at least {goals.steps_goal}")
    if latest.hydration < goals.hydration_goal * 0.7:
        tips.append(f"Drink more water to reach the recommended {goals.hydration_goal} ml")
    if latest.sleep_hours < goals.sleep_hours_goal * 0.9:
        tips.append(f"Aim for {format_value(goals.sleep_hours_goal)} hours of sleep for better health")
    if latest.oxygen_level < goals.oxygen_level_min:
        tips.append("Your oxygen level is below normal, consider consulting a doctor")
    if not tips:
        tips.append("Great job! Your health metrics are looking good")
    return tips
