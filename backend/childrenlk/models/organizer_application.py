"""Organizer application: a visitor asking to become an organizer."""

from sqlalchemy import Column, String, Text

from childrenlk.models.base import Base, TimestampMixin, UUIDMixin


class OrganizerApplication(UUIDMixin, TimestampMixin, Base):
    __tablename__ = "organizer_applications"

    name = Column(String(100), nullable=False)
    email = Column(String(255), nullable=False)
    phone = Column(String(20))
    message = Column(Text)
