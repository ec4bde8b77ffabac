"""Published entities: public copies of approved requests."""

from sqlalchemy import Column, String, Text, DateTime, ForeignKey, Uuid
from sqlalchemy.orm import relationship

from childrenlk.models.base import Base, JSONList, TimestampMixin, UUIDMixin


class Resource(UUIDMixin, TimestampMixin, Base):
    __tablename__ = "resources"

    request_id = Column(Uuid(as_uuid=True), ForeignKey("resource_requests.id"), unique=True)
    organization_id = Column(Uuid(as_uuid=True), ForeignKey("organizations.id", ondelete="CASCADE"), nullable=False, index=True)

    name = Column(String(255), nullable=False)
    short_description = Column(Text, nullable=False)
    picture = Column(String(500))
    picture_public_id = Column(String(255))
    documents = Column(JSONList, nullable=False, default=list)
    tags = Column(JSONList, nullable=False, default=list)
    target_audience = Column(String(30), default="children", nullable=False)
    age_group = Column(String(10))

    organization = relationship("Organization")


class Media(UUIDMixin, TimestampMixin, Base):
    __tablename__ = "media"

    request_id = Column(Uuid(as_uuid=True), ForeignKey("media_requests.id"), unique=True)
    organization_id = Column(Uuid(as_uuid=True), ForeignKey("organizations.id", ondelete="CASCADE"), nullable=False, index=True)

    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=False)
    content_type = Column(String(20), default="pictures", nullable=False)
    text_content = Column(Text)
    files = Column(JSONList, nullable=False, default=list)
    tags = Column(JSONList, nullable=False, default=list)
    target_audience = Column(String(30), default="children", nullable=False)
    age_group = Column(String(10))

    organization = relationship("Organization")


class Event(UUIDMixin, TimestampMixin, Base):
    __tablename__ = "events"

    request_id = Column(Uuid(as_uuid=True), ForeignKey("event_requests.id"), unique=True)
    organization_id = Column(Uuid(as_uuid=True), ForeignKey("organizations.id", ondelete="CASCADE"), nullable=False, index=True)

    name = Column(String(255), nullable=False)
    location = Column(String(500), nullable=False)
    start_date = Column(DateTime(timezone=True), nullable=False, index=True)
    end_date = Column(DateTime(timezone=True))
    description = Column(Text, nullable=False)
    registration_link = Column(String(500))
    cover_image = Column(String(500))
    cover_image_public_id = Column(String(255))
    tags = Column(JSONList, nullable=False, default=list)
    target_audience = Column(String(30), default="children", nullable=False)
    age_group = Column(String(10))

    organization = relationship("Organization")


class SuperHero(UUIDMixin, TimestampMixin, Base):
    __tablename__ = "super_heroes"

    # Null when an admin added the hero directly
    request_id = Column(Uuid(as_uuid=True), ForeignKey("super_hero_requests.id"), unique=True)
    organization_id = Column(Uuid(as_uuid=True), ForeignKey("organizations.id", ondelete="SET NULL"), index=True)

    name = Column(String(255), nullable=False)
    icon = Column(String(500), nullable=False)
    icon_type = Column(String(10), default="emoji", nullable=False)
    icon_public_id = Column(String(255))
    phone = Column(String(20), nullable=False)
    short_description = Column(Text, nullable=False)

    organization = relationship("Organization")
