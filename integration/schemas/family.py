from typing import List
from pydantic import BaseModel, Field, model_validator
from .common import ORMModel
from .member import MemberOut, _check_coordinates
from .user import UserOut

class FamilyCreate(BaseModel):
    name: str
    address: str
    latitude: float | None = Field(default=None, ge=-90, le=90)
    longitude: float | None = Field(default=None, ge=-180, le=180)
    pilote_id: str | None = None
    copilote_id: str | None = None

    @model_validator(mode="after")
    def coordinates_pair(self):
        _check_coordinates(self.latitude, self.longitude)
        return self

class FamilyUpdate(FamilyCreate):
    pass

class FamilyOut(ORMModel):
    id: str
    name: str
    address: str
    latitude: float | None = None
    longitude: float | None = None
    pilote_id: str | None = None
    copilote_id: str | None = None
    pilote: UserOut | None = None
    copilote: UserOut | None = None
    members: List[MemberOut] = []

class FamilyDetailsOut(BaseModel):
    family: FamilyOut
    available_members: List[MemberOut] = []
