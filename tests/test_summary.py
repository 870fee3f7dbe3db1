"""Tests for attendance summary figures."""

import uuid
from datetime import date, datetime

import pytest

from gymtracker.engine.summary import (
    month_bounds,
    parse_month,
    round_half_up,
    summarize_classes,
    week_start,
)
from gymtracker.models.gym_class import GymClass


def _cls(day: str, attendance: int) -> GymClass:
    return GymClass(
        id=str(uuid.uuid4()),
        user_id="demo-user-123",
        date=day,
        attendance=attendance,
        created_at=datetime(2024, 3, 1),
    )


class TestHelpers:
    """Test calendar helpers."""

    def test_week_start_is_previous_sunday(self):
        # 2024-03-06 is a Wednesday
        assert week_start(date(2024, 3, 6)) == date(2024, 3, 3)

    def test_week_start_on_sunday(self):
        assert week_start(date(2024, 3, 3)) == date(2024, 3, 3)

    def test_month_bounds_leap_february(self):
        assert month_bounds(date(2024, 2, 14)) == (date(2024, 2, 1), date(2024, 2, 29))

    def test_month_bounds_december(self):
        assert month_bounds(date(2023, 12, 5)) == (date(2023, 12, 1), date(2023, 12, 31))

    def test_month_bounds_last_representable_month(self):
        assert month_bounds(date(9999, 12, 1)) == (date(9999, 12, 1), date(9999, 12, 31))

    def test_parse_month(self):
        assert parse_month("2024-03") == date(2024, 3, 1)

    @pytest.mark.parametrize("value", ["2024-3", "2024/03", "March", "2024-13"])
    def test_parse_month_rejects_bad_values(self, value):
        with pytest.raises(ValueError):
            parse_month(value)

    def test_round_half_up(self):
        assert round_half_up(2.5) == 3
        assert round_half_up(3.5) == 4
        assert round_half_up(2.49) == 2


class TestSummarizeClasses:
    """Test summary computation."""

    def test_empty(self):
        summary = summarize_classes([], date(2024, 3, 1), date(2024, 3, 6))

        assert summary.total_classes == 0
        assert summary.this_week == 0
        assert summary.average_attendance == 0
        assert summary.month == "2024-03"
        assert summary.monthly_classes == 0

    def test_figures(self):
        classes = [
            _cls("2024-03-05", 1),  # this week, March
            _cls("2024-03-03", 4),  # this week (Sunday), March
            _cls("2024-03-02", 1),  # March
            _cls("2024-02-28", 0),  # February
        ]

        summary = summarize_classes(classes, date(2024, 3, 1), date(2024, 3, 6))

        assert summary.total_classes == 4
        assert summary.this_week == 2
        assert summary.average_attendance == 2  # 6 / 4 = 1.5 rounds up
        assert summary.monthly_classes == 3
        assert summary.single_person_classes == 2
        assert summary.multiple_person_classes == 1

    def test_zero_attendance_is_neither_single_nor_multiple(self):
        summary = summarize_classes([_cls("2024-02-28", 0)], date(2024, 2, 1), date(2024, 3, 6))

        assert summary.monthly_classes == 1
        assert summary.single_person_classes == 0
        assert summary.multiple_person_classes == 0


class TestSummaryEndpoint:
    """Test GET /api/gym-classes/summary."""

    def test_summary_for_month(self, test_client):
        for day, attendance in [("2024-03-01", 1), ("2024-03-15", 3), ("2024-04-01", 2)]:
            test_client.post("/api/gym-classes", json={"date": day, "attendance": attendance})

        response = test_client.get("/api/gym-classes/summary", params={"month": "2024-03"})

        assert response.status_code == 200
        data = response.json()
        assert data["totalClasses"] == 3
        assert data["averageAttendance"] == 2
        assert data["month"] == "2024-03"
        assert data["monthlyClasses"] == 2
        assert data["singlePersonClasses"] == 1
        assert data["multiplePersonClasses"] == 1
        assert "thisWeek" in data

    def test_summary_defaults_to_current_month(self, test_client):
        response = test_client.get("/api/gym-classes/summary")

        assert response.status_code == 200
        assert response.json()["month"] == date.today().strftime("%Y-%m")

    @pytest.mark.parametrize("month", ["2024-13", "2024-3", "march", "0000-01"])
    def test_summary_rejects_bad_month(self, test_client, month):
        response = test_client.get("/api/gym-classes/summary", params={"month": month})

        assert response.status_code == 400
        assert response.json()["errors"][0]["path"] == ["month"]

    def test_summary_for_last_representable_month(self, test_client):
        test_client.post("/api/gym-classes", json={"date": "9999-12-31", "attendance": 2})

        response = test_client.get("/api/gym-classes/summary", params={"month": "9999-12"})

        assert response.status_code == 200
        assert response.json()["month"] == "9999-12"
        assert response.json()["monthlyClasses"] == 1
