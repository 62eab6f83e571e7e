from __future__ import annotations

import sys
from pathlib import Path

from openpyxl import load_workbook

from evaluation import export_report


def test_export_report_writes_three_sheets(tmp_path: Path, monkeypatch) -> None:
    out = tmp_path / "nested" / "report.xlsx"
    monkeypatch.setattr(
        sys, "argv", ["export_report.py", "--days", "10", "--seed", "5", "--out_xlsx", str(out)]
    )

    assert export_report.main() == 0

    wb = load_workbook(out)
    assert wb.sheetnames == ["readings", "stats", "insights"]
    assert wb["readings"].max_row == 11
    headers = [cell.value for cell in wb["stats"][1]]
    assert headers[:2] == ["metric", "unit"]
    assert wb["insights"].cell(row=wb["insights"].max_row, column=1).value == "Overall"


def test_stats_frame_has_one_row_per_metric(make_series) -> None:
    frame = export_report.stats_frame(make_series([{}, {}]))
    assert frame["metric"].tolist() == ["Steps", "Heart Rate", "Oxygen Level", "Hydration", "Sleep"]
