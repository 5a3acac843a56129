from pydantic import BaseModel
from .common import ORMModel
from .member import MemberOut


class FollowUpUpdate(BaseModel):
    is_contacted: bool
    leader_notes: str = ""


class FollowUpFamily(ORMModel):
    id: str
    name: str


class FollowUpOut(MemberOut):
    family: FollowUpFamily | None = None
