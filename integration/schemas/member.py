from datetime import date, datetime
from pydantic import BaseModel, Field, EmailStr, model_validator
from .common import ORMModel
from ..models.member import Gender


def _check_coordinates(latitude, longitude):
    if (latitude is None) != (longitude is None):
        raise ValueError("latitude and longitude must be provided together")


class MemberCreate(BaseModel):
    first_name: str = Field(min_length=2)
    last_name: str = Field(min_length=2)
    email: EmailStr
    phone: str = Field(min_length=10)
    date_of_birth: date
    gender: Gender
    address: str = Field(min_length=5)
    parent_name: str | None = None
    parent_phone: str | None = None
    notes: str | None = None
    latitude: float | None = Field(default=None, ge=-90, le=90)
    longitude: float | None = Field(default=None, ge=-180, le=180)

    @model_validator(mode="after")
    def coordinates_pair(self):
        _check_coordinates(self.latitude, self.longitude)
        return self


class MemberUpdate(BaseModel):
    first_name: str | None = Field(default=None, min_length=2)
    last_name: str | None = Field(default=None, min_length=2)
    email: EmailStr | None = None
    phone: str | None = Field(default=None, min_length=10)
    date_of_birth: date | None = None
    gender: Gender | None = None
    address: str | None = Field(default=None, min_length=5)
    parent_name: str | None = None
    parent_phone: str | None = None
    notes: str | None = None


class MemberOut(ORMModel):
    id: str
    first_name: str
    last_name: str
    email: str
    phone: str
    gender: Gender
    date_of_birth: date
    registration_date: datetime
    parent_name: str | None = None
    parent_phone: str | None = None
    address: str | None = None
    notes: str | None = None
    latitude: float | None = None
    longitude: float | None = None
    is_contacted: bool = False
    contact_date: datetime | None = None
    leader_notes: str | None = None
    family_id: str | None = None


class PageMetadata(BaseModel):
    total: int
    page: int
    page_size: int
    total_pages: int
    has_next_page: bool
    has_prev_page: bool


class MemberPage(BaseModel):
    members: list[MemberOut]
    metadata: PageMetadata
