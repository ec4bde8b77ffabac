"""Organization model: the tenant owned by one organizer account."""

from sqlalchemy import Column, String, Text, ForeignKey, Uuid
from sqlalchemy.orm import relationship

from childrenlk.models.base import Base, TimestampMixin, UUIDMixin


class Organization(UUIDMixin, TimestampMixin, Base):
    __tablename__ = "organizations"

    # Identity
    name = Column(String(255), nullable=False)
    short_description = Column(Text, nullable=False)
    logo = Column(String(500))
    website = Column(String(500))

    # Contact
    contact_email = Column(String(255), nullable=False)
    contact_phone = Column(String(20), nullable=False)
    address = Column(String(500), nullable=False)

    # Owner
    user_id = Column(Uuid(as_uuid=True), ForeignKey("users.id", ondelete="CASCADE"), unique=True, nullable=False)

    # Relationships
    user = relationship("User", back_populates="organization")
