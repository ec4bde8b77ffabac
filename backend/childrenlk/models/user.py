"""User model for authentication."""

from sqlalchemy import Column, String, Boolean, DateTime
from sqlalchemy.orm import relationship

from childrenlk.models.base import Base, TimestampMixin, UUIDMixin

ROLES = ("admin", "organizer", "parent")


class User(UUIDMixin, TimestampMixin, Base):
    __tablename__ = "users"

    email = Column(String(255), unique=True, nullable=False, index=True)
    name = Column(String(100), nullable=False)
    hashed_password = Column(String(255), nullable=False)
    role = Column(String(20), nullable=False, index=True)  # admin, organizer, parent
    is_active = Column(Boolean, default=True, nullable=False)
    last_login_at = Column(DateTime(timezone=True))

    # Profile
    avatar = Column(String(500))
    phone = Column(String(20))
    address = Column(String(500))

    # Password reset
    otp = Column(String(6))
    otp_expires_at = Column(DateTime(timezone=True))

    # Relationships
    organization = relationship("Organization", back_populates="user", uselist=False)
