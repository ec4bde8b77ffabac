"""Announcement model: admin notices shown to visitors while live."""

from sqlalchemy import Column, String, Text, Boolean

from childrenlk.models.base import Base, TimestampMixin, UUIDMixin


class Announcement(UUIDMixin, TimestampMixin, Base):
    __tablename__ = "announcements"

    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=False)
    is_live = Column(Boolean, default=False, nullable=False, index=True)
