from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from ...schemas.stats import DashboardOut, DemographicsOut, MonthlyBucket, WeeklyBucket
from ...services.member_service import list_members
from ...services.stats_service import dashboard, demographics, filter_by_period, monthly_trend, weekly_trend
from ..deps import get_db

router = APIRouter()


@router.get("/dashboard", response_model=DashboardOut)
def get_dashboard(db: Session = Depends(get_db)):
    return dashboard(db)


@router.get("/monthly", response_model=list[MonthlyBucket])
def get_monthly(year: Optional[int] = Query(None, ge=1, le=9998), db: Session = Depends(get_db)):
    return monthly_trend(list_members(db), year or date.today().year)


@router.get("/weekly", response_model=list[WeeklyBucket])
def get_weekly(
    year: Optional[int] = Query(None, ge=1, le=9998),
    month: Optional[int] = Query(None, ge=1, le=12),
    db: Session = Depends(get_db),
):
    today = date.today()
    return weekly_trend(list_members(db), year or today.year, month or today.month)


@router.get("/demographics", response_model=DemographicsOut)
def get_demographics(
    period: str = Query("year", pattern="^(year|month|day)$"),
    year: Optional[int] = Query(None, ge=1, le=9998),
    month: Optional[int] = Query(None, ge=1, le=12),
    day: Optional[int] = Query(None, ge=1, le=31),
    db: Session = Depends(get_db),
):
    try:
        members = filter_by_period(list_members(db), period, year or date.today().year, month, day)
    except ValueError as e:
        raise HTTPException(400, str(e))
    return demographics(members)
