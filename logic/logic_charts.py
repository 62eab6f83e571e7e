from typing import Dict, List, Sequence

import pandas as pd

from metrics import HealthReading, metric_info

CHART_TYPES = ["line", "bar"]
# `entry` is unique per reading: two readings on the same day get "Mar 30", "Mar 30 (2)"
CHART_COLUMNS = ["date", "label", "entry", "value", "series"]
NO_CHART_DATA = "No data available. Please add health metrics first."
REFERENCE_SERIES = ("Daily Goal", "Min Normal", "Max Normal")
REFERENCE_COLOR = "#9ca3af"


def chart_frame(
    readings: Sequence[HealthReading],
    metric: str,
    with_goal: bool = False,
) -> pd.DataFrame:
    """
    Long-format frame for Gradio's native plots, oldest reading first.

    With `with_goal`, the goal (or the normal range bounds) is added as
    extra series so it renders as a flat reference line.
    """
    info = metric_info(metric)
    if not readings:
        return pd.DataFrame(columns=CHART_COLUMNS)

    base: List[dict] = []
    seen: Dict[str, int] = {}
    for reading in reversed(readings):
        label = reading.date.strftime("%b %d")
        seen[label] = seen.get(label, 0) + 1
        entry = label if seen[label] == 1 else f"{label} ({seen[label]})"
        base.append(
            {
                "date": pd.Timestamp(reading.date),
                "label": label,
                "entry": entry,
                "value": reading.value(metric),
                "series": info.label,
            }
        )

    rows = list(base)
    if with_goal:
        references = []
        if info.has_goal:
            references.append(("Daily Goal", info.goal))
        else:
            references.append(("Min Normal", info.range_min))
            if info.range_max is not None:
                references.append(("Max Normal", info.range_max))
        for name, level in references:
            rows.extend(
                {
                    "date": row["date"],
                    "label": row["label"],
                    "entry": row["entry"],
                    "value": level,
                    "series": name,
                }
                for row in base
            )

    return pd.DataFrame(rows, columns=CHART_COLUMNS)


def series_colors(metric: str) -> dict:
    """Color map for a metric's history plot; reference lines are grey."""
    info = metric_info(metric)
    colors = {info.label: info.color}
    for name in REFERENCE_SERIES:
        colors[name] = REFERENCE_COLOR
    return colors
