"""
Leader notifications for a new family assignment.

Builds WhatsApp deep links (https://wa.me/<phone>?text=...) and the plain-text
email draft sent to the pilote/copilote. Nothing is delivered from here.
"""
import re
from dataclasses import dataclass
from urllib.parse import quote

from ..core.config import Settings
from ..models.family import Family
from ..models.member import Member
from ..models.user import User
from ..schemas.assignment import EmailDraft, NotificationPayload

DEFAULT_BASE_URL = "http://localhost:3000"
DEFAULT_COUNTRY_CODE = "33"
WHATSAPP_URL = "https://wa.me"

# same character set as JavaScript's encodeURIComponent
_URI_COMPONENT_SAFE = "-_.!~*'()"


def format_for_whatsapp(phone: str, country_code: str = DEFAULT_COUNTRY_CODE) -> str:
    """Digits only; a national number (leading 0) gets the country code instead."""
    clean = re.sub(r"\D", "", phone)
    if clean.startswith("0"):
        return f"{country_code}{clean[1:]}"
    return clean


@dataclass(frozen=True)
class NotificationConfig:
    base_url: str = DEFAULT_BASE_URL
    country_code: str = DEFAULT_COUNTRY_CODE

    @classmethod
    def from_settings(cls, settings: Settings) -> "NotificationConfig":
        return cls(
            base_url=settings.APP_URL or DEFAULT_BASE_URL,
            country_code=settings.DEFAULT_COUNTRY_CODE,
        )


class NotificationLinkBuilder:
    def __init__(self, config: NotificationConfig):
        self.config = config

    def follow_up_url(self, member_id: str) -> str:
        return f"{self.config.base_url.rstrip('/')}/follow-up/{member_id}/"

    def whatsapp_message(self, leader: User, family: Family, member: Member) -> str:
        return "\n".join([
            f"Bonjour {leader.first_name},",
            "",
            f"Nouveau membre assigné à votre famille \"{family.name}\" ! 🏠",
            "",
            f"👤 *{member.first_name} {member.last_name}*",
            f"📞 {member.phone}",
            f"📍 {member.address or ''}",
            "",
            "Merci de prendre contact pour l'accueillir !",
            f">>> Merci de valider le fait que vous les ayez contactés via ce lien : {self.follow_up_url(member.id)} <<<",
        ])

    def leader_notification(self, leader: User | None, family: Family, member: Member) -> NotificationPayload | None:
        if leader is None or not leader.phone:
            return None
        phone = format_for_whatsapp(leader.phone, self.config.country_code)
        if not phone:
            return None
        text = quote(self.whatsapp_message(leader, family, member), safe=_URI_COMPONENT_SAFE)
        return NotificationPayload(
            phone_formatted=phone,
            link_url=f"{WHATSAPP_URL}/{phone}?text={text}",
        )

    def assignment_email(self, family: Family, member: Member) -> EmailDraft | None:
        recipients = [
            leader.email
            for leader in (family.pilote, family.copilote)
            if leader is not None and leader.email
        ]
        if not recipients:
            return None

        subject = f"Nouveau membre assigné: {member.first_name} {member.last_name}"
        body = "\n".join([
            "Bonjour Cher Pilote/Copilote,",
            "",
            f"Un nouveau membre vient d'être assigné à votre Famille d'Impact \"{family.name}\".",
            "",
            "--- Détails ---",
            f"Nom: {member.last_name}",
            f"Prénom: {member.first_name}",
            f"Téléphone: {member.phone}",
            f"Email: {member.email}",
            f"Adresse: {member.address or ''}",
            "",
            f"Parent: {member.parent_name or 'N/A'} ({member.parent_phone or 'N/A'})",
            f"Notes: {member.notes or 'Aucune'}",
            "",
            "Veuillez les contacter le plus tôt possible pour leur souhaiter la bienvenue "
            "et les intégrer dans la famille d'impact.",
            f">>> Merci de valider le fait que vous les ayez contactés via ce lien : {self.follow_up_url(member.id)} <<<",
            "",
            "Cordialement,",
            "Team Intégration",
        ])
        return EmailDraft(recipients=recipients, subject=subject, body=body)
