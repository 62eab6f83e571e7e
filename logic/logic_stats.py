import math
from dataclasses import dataclass
from typing import Dict, Optional, Sequence

from metrics import METRICS, HealthReading, metric_info

# Averages are shown with one decimal for sleep, whole numbers elsewhere.
AVG_DECIMALS: Dict[str, int] = {
    "steps": 0,
    "heart_rate": 0,
    "oxygen_level": 0,
    "hydration": 0,
    "sleep_hours": 1,
}

WEEK_OFFSET = 7


@dataclass(frozen=True)
class MetricStats:
    current: float = 0
    min: float = 0
    max: float = 0
    avg: float = 0
    percent_of_goal: Optional[int] = None


def round_half_up(value: float, decimals: int = 0):
    """Round with halves going up (2.5 -> 3), returning an int for 0 decimals."""
    factor = 10 ** decimals
    rounded = math.floor(value * factor + 0.5) / factor
    if decimals == 0:
        return int(rounded)
    return rounded


def percent_of_goal(value: float, goal: float) -> int:
    """Uncapped percentage of `goal` reached by `value`."""
    if not goal:
        return 0
    return round_half_up(value / goal * 100)


def progress_value(percent: Optional[float]) -> int:
    """Clamp a percentage into [0, 100] for rendering as a progress bar."""
    if percent is None:
        return 0
    return int(max(0, min(100, percent)))


def compute_stats(readings: Sequence[HealthReading], metric: str) -> MetricStats:
    """
    current / min / max / avg / percent_of_goal for one metric.

    `current` is the most recent reading. An empty series gives all zeros
    (percent_of_goal stays None for metrics without a goal).
    """
    info = metric_info(metric)
    if not readings:
        return MetricStats(percent_of_goal=0 if info.has_goal else None)

    current = readings[0].value(metric)
    lo = hi = current
    total = 0.0
    for reading in readings:
        value = reading.value(metric)
        lo = min(lo, value)
        hi = max(hi, value)
        total += value

    avg = round_half_up(total / len(readings), AVG_DECIMALS[metric])
    pct = percent_of_goal(current, info.goal) if info.has_goal else None
    return MetricStats(current=current, min=lo, max=hi, avg=avg, percent_of_goal=pct)


def report_averages(readings: Sequence[HealthReading]) -> Dict[str, float]:
    """Series averages for the reports page, one entry per metric."""
    return {metric: compute_stats(readings, metric).avg for metric in METRICS}


def week_change(readings: Sequence[HealthReading], metric: str) -> Optional[int]:
    """
    Percent change of the latest value against the reading one week earlier.

    Returns None when the series is shorter than eight entries or the older
    value is zero.
    """
    if len(readings) <= WEEK_OFFSET:
        return None
    previous = readings[WEEK_OFFSET].value(metric)
    if not previous:
        return None
    current = readings[0].value(metric)
    return round_half_up((current - previous) / previous * 100)
