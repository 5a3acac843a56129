from pydantic import BaseModel
from .member import MemberOut


class DashboardOut(BaseModel):
    total: int
    this_week: int
    this_month: int
    this_year: int
    recent: list[MemberOut] = []


class MonthlyBucket(BaseModel):
    month: str
    full_month: str
    count: int


class WeeklyBucket(BaseModel):
    name: str
    range: str
    count: int


class GenderCount(BaseModel):
    name: str
    value: int


class AgeBucket(BaseModel):
    range: str
    count: int


class DemographicsOut(BaseModel):
    total: int
    gender: list[GenderCount] = []
    ages: list[AgeBucket] = []
