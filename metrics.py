"""
Data model for daily health readings and the fixed goal thresholds.
"""

from dataclasses import dataclass, replace
from datetime import date, datetime
from typing import Dict, Optional

METRIC_FIELDS = ("steps", "heart_rate", "oxygen_level", "hydration", "sleep_hours")


@dataclass(frozen=True)
class HealthReading:
    """One day's set of health metric values."""

    date: date
    steps: int
    heart_rate: int
    oxygen_level: int
    hydration: int
    sleep_hours: float
    created_at: Optional[datetime] = None

    def value(self, metric: str) -> float:
        if metric not in METRIC_FIELDS:
            raise KeyError(metric)
        return getattr(self, metric)

    def with_value(self, metric: str, value) -> "HealthReading":
        if metric not in METRIC_FIELDS:
            raise KeyError(metric)
        return replace(self, **{metric: value})

    def to_dict(self) -> Dict[str, object]:
        return {
            "date": self.date.isoformat(),
            "steps": self.steps,
            "heart_rate": self.heart_rate,
            "oxygen_level": self.oxygen_level,
            "hydration": self.hydration,
            "sleep_hours": self.sleep_hours,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }


@dataclass(frozen=True)
class Goals:
    steps_goal: int = 10000
    hydration_goal: int = 3000
    sleep_hours_goal: float = 8
    heart_rate_min: int = 60
    heart_rate_max: int = 100
    oxygen_level_min: int = 95


DEFAULT_GOALS = Goals()


@dataclass(frozen=True)
class MetricInfo:
    """Display metadata for one metric field."""

    key: str
    title: str
    label: str
    unit: str
    color: str
    goal: Optional[float] = None
    range_min: Optional[float] = None
    range_max: Optional[float] = None

    @property
    def has_goal(self) -> bool:
        return self.goal is not None


METRICS: Dict[str, MetricInfo] = {
    "steps": MetricInfo(
        key="steps",
        title="Steps",
        label="Steps",
        unit="steps",
        color="#10b981",
        goal=DEFAULT_GOALS.steps_goal,
    ),
    "heart_rate": MetricInfo(
        key="heart_rate",
        title="Heart Rate",
        label="Heart Rate (BPM)",
        unit="BPM",
        color="#ef4444",
        range_min=DEFAULT_GOALS.heart_rate_min,
        range_max=DEFAULT_GOALS.heart_rate_max,
    ),
    "oxygen_level": MetricInfo(
        key="oxygen_level",
        title="Oxygen Level",
        label="Oxygen Level (%)",
        unit="%",
        color="#3b82f6",
        range_min=DEFAULT_GOALS.oxygen_level_min,
        range_max=100,
    ),
    "hydration": MetricInfo(
        key="hydration",
        title="Hydration",
        label="Hydration (ml)",
        unit="ml",
        color="#06b6d4",
        goal=DEFAULT_GOALS.hydration_goal,
    ),
    "sleep_hours": MetricInfo(
        key="sleep_hours",
        title="Sleep",
        label="Sleep (hours)",
        unit="hours",
        color="#8b5cf6",
        goal=DEFAULT_GOALS.sleep_hours_goal,
    ),
}


def metric_info(metric: str) -> MetricInfo:
    return METRICS[metric]


def format_value(value) -> str:
    """Render a metric value the way it is typed: 8.0 -> "8", 7.5 -> "7.5"."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)
