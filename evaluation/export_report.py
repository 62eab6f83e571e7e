#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
export_report.py

Generate a reading series and write a report workbook for it.

Run from the repository root:
  python -m evaluation.export_report --seed 42 --out_xlsx report.xlsx

Writes:
  <out_xlsx> (default: health_report.xlsx)

Sheets:
  - readings   one row per day, most recent first
  - stats      current / min / max / avg / percent_of_goal per metric
  - insights   status, written insight and assistant summary per metric
"""

import argparse
from pathlib import Path
from typing import Any, Dict, List, Sequence

import pandas as pd

from agents.assistant import health_assistant
from logic.logic_insights import metric_status, section_insight
from logic.logic_stats import compute_stats
from metrics import METRICS, HealthReading
from storage import generate_mock_series


def readings_frame(readings: Sequence[HealthReading]) -> pd.DataFrame:
    return pd.DataFrame([r.to_dict() for r in readings])


def stats_frame(readings: Sequence[HealthReading]) -> pd.DataFrame:
    rows: List[Dict[str, Any]] = []
    for key, info in METRICS.items():
        stats = compute_stats(readings, key)
        rows.append({
            "metric": info.title,
            "unit": info.unit,
            "current": stats.current,
            "min": stats.min,
            "max": stats.max,
            "avg": stats.avg,
            "goal": info.goal,
            "percent_of_goal": stats.percent_of_goal,
        })
    return pd.DataFrame(rows)


def insights_frame(readings: Sequence[HealthReading]) -> pd.DataFrame:
    rows: List[Dict[str, Any]] = []
    latest = readings[0] if readings else None
    for key, info in METRICS.items():
        rows.append({
            "metric": info.title,
            "status": metric_status(key, latest.value(key)) if latest else None,
            "insight": section_insight(readings, key),
        })
    rows.append({
        "metric": "Overall",
        "status": None,
        "insight": health_assistant.reply("How is my overall health?", readings),
    })
    return pd.DataFrame(rows)


def main() -> int:
    ap = argparse.ArgumentParser()
    ap.add_argument("--days", type=int, default=30, help="Number of daily readings to generate")
    ap.add_argument("--seed", type=int, default=None, help="Seed for reproducible mock data")
    ap.add_argument("--out_xlsx", default="health_report.xlsx", help="Output workbook path")
    args = ap.parse_args()

    if args.days < 1:
        ap.error("--days must be at least 1")

    out_xlsx = Path(args.out_xlsx).expanduser().resolve()
    out_xlsx.parent.mkdir(parents=True, exist_ok=True)

    readings = generate_mock_series(args.days, seed=args.seed)

    with pd.ExcelWriter(out_xlsx, engine="openpyxl") as writer:
        readings_frame(readings).to_excel(writer, sheet_name="readings", index=False)
        stats_frame(readings).to_excel(writer, sheet_name="stats", index=False)
        insights_frame(readings).to_excel(writer, sheet_name="insights", index=False)

    print(f"Saved: {out_xlsx}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
