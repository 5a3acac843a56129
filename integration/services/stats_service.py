"""
Registration statistics for the dashboard and the statistics page.

Computed in memory over the member list. Calendar weeks start on Sunday and
ages are completed years at `today`.
"""
import calendar
from collections import Counter
from datetime import date, datetime, timedelta
from typing import Iterable

from sqlalchemy.orm import Session

from ..models.member import Member
from ..schemas.stats import AgeBucket, DashboardOut, DemographicsOut, GenderCount, MonthlyBucket, WeeklyBucket
from ..schemas.member import MemberOut
from .member_service import list_members

RECENT_COUNT = 5

AGE_RANGES = [
    ("10-12", 10, 12),
    ("13-15", 13, 15),
    ("16-18", 16, 18),
    ("19-21", 19, 21),
    ("22+", 22, 100),
]

PERIODS = ("year", "month", "day")


def _day(value: date | datetime) -> date:
    return value.date() if isinstance(value, datetime) else value


def start_of_week(d: date) -> date:
    return d - timedelta(days=(d.weekday() + 1) % 7)


def age_on(birth: date, today: date) -> int:
    return today.year - birth.year - ((today.month, today.day) < (birth.month, birth.day))


def dashboard(db: Session, today: date | None = None) -> DashboardOut:
    today = today or date.today()
    members = list_members(db)
    registered = [_day(m.registration_date) for m in members]
    week = start_of_week(today)
    return DashboardOut(
        total=len(members),
        this_week=sum(1 for d in registered if start_of_week(d) == week),
        this_month=sum(1 for d in registered if (d.year, d.month) == (today.year, today.month)),
        this_year=sum(1 for d in registered if d.year == today.year),
        recent=[MemberOut.model_validate(m) for m in members[:RECENT_COUNT]],
    )


def monthly_trend(members: Iterable[Member], year: int) -> list[MonthlyBucket]:
    counts = Counter(
        d.month for d in (_day(m.registration_date) for m in members) if d.year == year
    )
    return [
        MonthlyBucket(
            month=calendar.month_abbr[month],
            full_month=f"{calendar.month_name[month]} {year}",
            count=counts[month],
        )
        for month in range(1, 13)
    ]


def weekly_trend(members: Iterable[Member], year: int, month: int) -> list[WeeklyBucket]:
    """Sunday-start weeks touching the month; a week's count includes days outside the month."""
    counts = Counter(start_of_week(_day(m.registration_date)) for m in members)
    month_end = date(year, month, calendar.monthrange(year, month)[1])

    buckets = []
    week_start = start_of_week(date(year, month, 1))
    while week_start <= month_end:
        week_end = week_start + timedelta(days=6)
        buckets.append(WeeklyBucket(
            name=f"Week {len(buckets) + 1}",
            range=f"{week_start.day} {calendar.month_abbr[week_start.month]} - {week_end.day} {calendar.month_abbr[week_end.month]}",
            count=counts[week_start],
        ))
        week_start += timedelta(days=7)
    return buckets


def filter_by_period(members: Iterable[Member], period: str, year: int, month: int | None = None, day: int | None = None) -> list[Member]:
    if period not in PERIODS:
        raise ValueError(f"Unknown period: {period}")
    if period != "year" and month is None:
        raise ValueError("month is required for this period")
    if period == "day" and day is None:
        raise ValueError("day is required for this period")

    selected = []
    for m in members:
        d = _day(m.registration_date)
        if d.year != year:
            continue
        if period in ("month", "day") and d.month != month:
            continue
        if period == "day" and d.day != day:
            continue
        selected.append(m)
    return selected


def demographics(members: Iterable[Member], today: date | None = None) -> DemographicsOut:
    today = today or date.today()
    members = list(members)
    if not members:
        return DemographicsOut(total=0)

    genders = Counter(str(m.gender).capitalize() for m in members)
    ages = [age_on(m.date_of_birth, today) for m in members]
    return DemographicsOut(
        total=len(members),
        gender=[GenderCount(name=name, value=value) for name, value in genders.items()],
        ages=[
            AgeBucket(range=label, count=sum(1 for a in ages if low <= a <= high))
            for label, low, high in AGE_RANGES
        ],
    )
