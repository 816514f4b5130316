"""
Profile and support service
"""
import logging
from sqlalchemy.orm import Session
from hotelpms.models.tables import Profile, SupportTicket, TicketStatus
from hotelpms.models.schemas import ProfileUpdate, SupportTicketCreate
from hotelpms.security.auth import AuthUser

logger = logging.getLogger(__name__)


class ProfileService:
    """Profile service"""

    def __init__(self, db: Session):
        self.db = db

    def get_or_create(self, user: AuthUser) -> Profile:
        """Profile of the caller; created from token claims on first access"""
        profile = self.db.query(Profile).filter(Profile.id == user.id).first()
        if profile:
            return profile

        profile = Profile(id=user.id, email=user.email)
        self.db.add(profile)
        self.db.commit()
        self.db.refresh(profile)
        logger.info(f"Profile created for user {user.id}")
        return profile

    def update_profile(self, user: AuthUser, data: ProfileUpdate) -> Profile:
        profile = self.get_or_create(user)
        for key, value in data.model_dump(exclude_unset=True).items():
            setattr(profile, key, value)
        self.db.commit()
        self.db.refresh(profile)
        return profile

    def set_avatar(self, user: AuthUser, url: str) -> Profile:
        profile = self.get_or_create(user)
        profile.avatar_url = url
        self.db.commit()
        self.db.refresh(profile)
        return profile

    def create_ticket(self, user: AuthUser, data: SupportTicketCreate) -> SupportTicket:
        subject = data.subject.strip()
        message = data.message.strip()
        if not subject or not message:
            raise ValueError("Subject and message are required")

        ticket = SupportTicket(
            user_id=user.id,
            subject=subject,
            message=message,
            status=TicketStatus.OPEN
        )
        self.db.add(ticket)
        self.db.commit()
        self.db.refresh(ticket)
        logger.info(f"Support ticket {ticket.id} opened by user {user.id}")
        return ticket
