from datetime import datetime
import pytest
from dermacare.services.progress_tracker import build_progress_report

def test_empty_history():
    report = build_progress_report([])
    assert report.months == []
    assert report.latest_healthy_percentage == 0.0
    assert report.trend == 0.0

def test_single_month_has_no_trend(history_entry):
    history = [
        history_entry("a", "low", datetime(2024, 3, 2)),
        history_entry("b", "medium", datetime(2024, 3, 5)),
    ]
    report = build_progress_report(history)
    assert len(report.months) == 1
    point = report.months[0]
    assert (point.month, point.healthy, point.issues, point.total) == ("2024-03", 1, 1, 2)
    assert point.healthy_percentage == 50.0
    assert report.trend == 0.0

def test_months_are_chronological_and_trend_uses_last_two(history_entry):
    # History is stored newest first
    history = [
        history_entry("c", "low", datetime(2024, 5, 10)),
        history_entry("b", "high", datetime(2024, 4, 10)),
        history_entry("a", "low", datetime(2024, 4, 1)),
    ]
    report = build_progress_report(history)
    assert [p.month for p in report.months] == ["2024-04", "2024-05"]
    assert report.latest_healthy_percentage == 100.0
    assert report.trend == pytest.approx(50.0)

def test_only_recent_months_are_kept(history_entry):
    history = [history_entry(f"e{m}", "low", datetime(2023, m, 1)) for m in range(1, 13)]
    report = build_progress_report(history)
    assert [p.month for p in report.months] == [f"2023-{m:02d}" for m in range(7, 13)]

def test_year_boundary_ordering(history_entry):
    history = [
        history_entry("jan", "medium", datetime(2025, 1, 3)),
        history_entry("dec", "low", datetime(2024, 12, 28)),
    ]
    report = build_progress_report(history)
    assert [p.month for p in report.months] == ["2024-12", "2025-01"]
    assert report.trend == -100.0
