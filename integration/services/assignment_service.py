"""
Nearest-family suggestions and member assignment.

A freshly registered member with a geocoded address is ranked against every
family that has coordinates; the closest ones are offered to the operator.
Once a family is chosen the member is attached to it and the leaders get a
pre-filled WhatsApp link (and an email draft) to welcome the newcomer.

Public operations never raise: failures come back as results with `error` set.
"""
import logging
from dataclasses import dataclass, field

from sqlalchemy.exc import SQLAlchemyError

from ..models.family import Family
from ..models.member import Member
from ..schemas.assignment import AssignmentResult
from ..schemas.common import OperationResult
from .geo import haversine_distance
from .notification import NotificationLinkBuilder
from .repository import FamilyRepository, RecordNotFound

logger = logging.getLogger(__name__)

DEFAULT_LIMIT = 3


@dataclass
class FamilyDistance:
    family: Family
    distance_km: float


@dataclass
class ClosestFamilies:
    member: Member | None
    closest_families: list[FamilyDistance] = field(default_factory=list)
    error: str | None = None


class ProximityAssignmentService:
    def __init__(self, repository: FamilyRepository, link_builder: NotificationLinkBuilder, limit: int = DEFAULT_LIMIT):
        self.repository = repository
        self.link_builder = link_builder
        self.limit = limit

    def find_closest_families(self, member_id: str, limit: int | None = None) -> ClosestFamilies:
        limit = self.limit if limit is None else limit
        try:
            member = self.repository.get_member_by_id(member_id)
            if not member or not member.has_coordinates:
                return ClosestFamilies(member=member)
            families = self.repository.list_families_with_coordinates()
        except SQLAlchemyError:
            logger.error(f"Failed to load families for member {member_id}", exc_info=True)
            return ClosestFamilies(member=None, error="Failed to load families")

        ranked = [
            FamilyDistance(
                family=f,
                distance_km=haversine_distance(member.latitude, member.longitude, f.latitude, f.longitude),
            )
            for f in families
        ]
        # sorted() is stable: equal distances keep repository order
        ranked = sorted(ranked, key=lambda fd: fd.distance_km)[:max(limit, 0)]
        logger.debug(f"Closest families for member {member_id}: {[(fd.family.name, round(fd.distance_km, 1)) for fd in ranked]}")
        return ClosestFamilies(member=member, closest_families=ranked)

    def assign_member_to_family(self, family_id: str, member_id: str) -> AssignmentResult:
        # last write wins: a concurrent assignment of the same member is overwritten
        try:
            member = self.repository.set_member_family(member_id, family_id)
            family = self.repository.get_family_by_id(family_id)
        except RecordNotFound as e:
            logger.warning(f"Assignment of member {member_id} to family {family_id} failed: {e}")
            self.repository.rollback()
            return AssignmentResult(success=False, error=str(e))
        except SQLAlchemyError:
            logger.error(f"Failed to assign member {member_id} to family {family_id}", exc_info=True)
            self.repository.rollback()
            return AssignmentResult(success=False, error="Failed to add member")

        logger.info(f"Member {member.id} assigned to family {family_id}")
        if family is None:
            return AssignmentResult(success=True)
        return AssignmentResult(
            success=True,
            pilote=self.link_builder.leader_notification(family.pilote, family, member),
            copilote=self.link_builder.leader_notification(family.copilote, family, member),
            email=self.link_builder.assignment_email(family, member),
        )

    def remove_member_from_family(self, member_id: str) -> OperationResult:
        try:
            self.repository.set_member_family(member_id, None)
        except RecordNotFound as e:
            self.repository.rollback()
            return OperationResult(success=False, error=str(e))
        except SQLAlchemyError:
            logger.error(f"Failed to remove member {member_id} from family", exc_info=True)
            self.repository.rollback()
            return OperationResult(success=False, error="Failed to remove member")
        logger.info(f"Member {member_id} removed from family")
        return OperationResult(success=True)
