"""Tag registry: distinct tag names offered for autocomplete."""

from sqlalchemy import Column, String

from childrenlk.models.base import Base, TimestampMixin, UUIDMixin


class Tag(UUIDMixin, TimestampMixin, Base):
    __tablename__ = "tags"

    name = Column(String(100), unique=True, nullable=False, index=True)
