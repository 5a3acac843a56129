from pydantic import BaseModel
from .common import ORMModel, OperationResult
from .family import FamilyOut
from .member import MemberOut


class AssignIn(BaseModel):
    family_id: str


class NotificationPayload(BaseModel):
    phone_formatted: str
    link_url: str


class EmailDraft(BaseModel):
    recipients: list[str]
    subject: str
    body: str


class AssignmentResult(OperationResult):
    pilote: NotificationPayload | None = None
    copilote: NotificationPayload | None = None
    email: EmailDraft | None = None


class FamilyDistanceOut(ORMModel):
    family: FamilyOut
    distance_km: float


class ClosestFamiliesOut(ORMModel):
    member: MemberOut
    closest_families: list[FamilyDistanceOut]
