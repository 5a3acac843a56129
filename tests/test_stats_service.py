from datetime import date, datetime
from types import SimpleNamespace

import pytest

from integration.models.member import Gender
from integration.services.stats_service import (
    age_on,
    dashboard,
    demographics,
    filter_by_period,
    monthly_trend,
    start_of_week,
    weekly_trend,
)

TODAY = date(2026, 10, 19)  # a Monday


def member(registered, gender=Gender.FEMALE, born=date(2010, 6, 1)):
    return SimpleNamespace(registration_date=registered, gender=gender, date_of_birth=born)


def test_weeks_start_on_sunday():
    assert start_of_week(TODAY) == date(2026, 10, 18)
    assert start_of_week(date(2026, 10, 18)) == date(2026, 10, 18)
    assert start_of_week(date(2026, 10, 24)) == date(2026, 10, 18)


@pytest.mark.parametrize("born, age", [
    (date(2010, 10, 19), 16),
    (date(2010, 10, 20), 15),
    (date(2000, 1, 1), 26),
])
def test_age_in_completed_years(born, age):
    assert age_on(born, TODAY) == age


def test_monthly_trend_has_twelve_buckets():
    members = [
        member(datetime(2026, 1, 5, 10)),
        member(datetime(2026, 1, 28, 18)),
        member(datetime(2026, 10, 2, 9)),
        member(datetime(2025, 1, 15, 9)),
    ]

    trend = monthly_trend(members, 2026)

    assert len(trend) == 12
    assert trend[0].month == "Jan" and trend[0].full_month == "January 2026"
    assert trend[0].count == 2
    assert trend[9].count == 1
    assert sum(b.count for b in trend) == 3


def test_weekly_trend_for_october_2026():
    members = [
        member(datetime(2026, 10, 2, 9)),
        member(datetime(2026, 9, 28, 9)),
        member(datetime(2026, 10, 19, 9)),
    ]

    weeks = weekly_trend(members, 2026, 10)

    assert [w.name for w in weeks] == ["Week 1", "Week 2", "Week 3", "Week 4", "Week 5"]
    assert weeks[0].range == "27 Sep - 3 Oct"
    assert weeks[-1].range == "25 Oct - 31 Oct"
    assert [w.count for w in weeks] == [2, 0, 0, 1, 0]


def test_filter_by_period():
    members = [
        member(datetime(2026, 10, 19, 9)),
        member(datetime(2026, 10, 1, 9)),
        member(datetime(2026, 3, 1, 9)),
        member(datetime(2025, 10, 19, 9)),
    ]
    assert len(filter_by_period(members, "year", 2026)) == 3
    assert len(filter_by_period(members, "month", 2026, 10)) == 2
    assert len(filter_by_period(members, "day", 2026, 10, 19)) == 1
    with pytest.raises(ValueError):
        filter_by_period(members, "week", 2026)
    with pytest.raises(ValueError):
        filter_by_period(members, "month", 2026)


def test_demographics_counts_genders_and_ages():
    members = [
        member(datetime(2026, 1, 1), Gender.FEMALE, date(2014, 1, 1)),   # 12
        member(datetime(2026, 1, 1), Gender.MALE, date(2010, 1, 1)),     # 16
        member(datetime(2026, 1, 1), Gender.MALE, date(1990, 1, 1)),     # 36
        member(datetime(2026, 1, 1), Gender.OTHER, date(2020, 1, 1)),    # 6, no bucket
    ]

    stats = demographics(members, today=TODAY)

    assert stats.total == 4
    assert {g.name: g.value for g in stats.gender} == {"Female": 1, "Male": 2, "Other": 1}
    assert {a.range: a.count for a in stats.ages} == {"10-12": 1, "13-15": 0, "16-18": 1, "19-21": 0, "22+": 1}


def test_demographics_empty():
    stats = demographics([], today=TODAY)
    assert stats.total == 0 and stats.gender == [] and stats.ages == []


def test_dashboard_counts(db, make_member):
    dates = [
        datetime(2026, 10, 19, 8),   # this week
        datetime(2026, 10, 18, 8),   # this week (Sunday)
        datetime(2026, 10, 3, 8),    # this month
        datetime(2026, 2, 3, 8),     # this year
        datetime(2025, 12, 31, 8),
        datetime(2025, 6, 1, 8),
    ]
    for i, registered in enumerate(dates):
        make_member(first_name=f"M{i}", registration_date=registered)

    stats = dashboard(db, today=TODAY)

    assert stats.total == 6
    assert stats.this_week == 2
    assert stats.this_month == 3
    assert stats.this_year == 4
    assert [m.first_name for m in stats.recent] == ["M0", "M1", "M2", "M3", "M4"]
