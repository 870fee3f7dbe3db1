"""Attendance summary figures for a user's class records."""

import calendar
import math
from datetime import date, timedelta
from typing import List, Tuple
from pydantic import BaseModel, Field

from gymtracker.models.gym_class import GymClass


class ClassSummary(BaseModel):
    """Dashboard figures for a set of class records."""

    total_classes: int = Field(..., alias="totalClasses")
    this_week: int = Field(..., alias="thisWeek", description="Classes dated on/after the most recent Sunday")
    average_attendance: int = Field(..., alias="averageAttendance", description="Mean attendance, rounded half up")
    month: str = Field(..., description="Month the monthly figures cover (YYYY-MM)")
    monthly_classes: int = Field(..., alias="monthlyClasses")
    single_person_classes: int = Field(..., alias="singlePersonClasses")
    multiple_person_classes: int = Field(..., alias="multiplePersonClasses")

    class Config:
        """Pydantic configuration."""
        populate_by_name = True


def parse_month(value: str) -> date:
    """Parse 'YYYY-MM' into the first day of that month.

    Raises:
        ValueError: If the value is not a valid year-month
    """
    year_str, sep, month_str = value.partition("-")
    if not sep or len(year_str) != 4 or len(month_str) != 2 or not (year_str + month_str).isdigit():
        raise ValueError("Month must be in YYYY-MM format")
    return date(int(year_str), int(month_str), 1)


def week_start(today: date) -> date:
    """Most recent Sunday on or before `today`."""
    return today - timedelta(days=(today.weekday() + 1) % 7)


def month_bounds(month: date) -> Tuple[date, date]:
    """First and last day of the month containing `month`."""
    first = month.replace(day=1)
    last_day = calendar.monthrange(first.year, first.month)[1]
    return first, first.replace(day=last_day)


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def summarize_classes(classes: List[GymClass], month: date, today: date) -> ClassSummary:
    """Compute summary figures.

    Args:
        classes: Records to summarize (normally one user's full list)
        month: Any day in the month used for the monthly figures
        today: Reference day for the weekly count

    Returns:
        ClassSummary
    """
    start_of_week = week_start(today)
    first, last = month_bounds(month)

    dated = [(date.fromisoformat(c.date), c) for c in classes]
    monthly = [c for d, c in dated if first <= d <= last]

    average = 0
    if classes:
        average = round_half_up(sum(c.attendance for c in classes) / len(classes))

    return ClassSummary(
        total_classes=len(classes),
        this_week=sum(1 for d, _ in dated if d >= start_of_week),
        average_attendance=average,
        month=first.strftime("%Y-%m"),
        monthly_classes=len(monthly),
        single_person_classes=sum(1 for c in monthly if c.attendance == 1),
        multiple_person_classes=sum(1 for c in monthly if c.attendance > 1),
    )
