"""Submission models: one table per request type awaiting admin review."""

from sqlalchemy import Column, String, Text, DateTime, ForeignKey, Index, Uuid
from sqlalchemy.orm import declared_attr, relationship

from childrenlk.models.base import Base, JSONList, TimestampMixin, UUIDMixin

STATUSES = ("pending", "approved", "denied")
TARGET_AUDIENCES = ("children", "people_work_for_children")
AGE_GROUPS = ("1-5", "5-10", "11-15", "15-18", "above-18")


class ReviewMixin:
    """Ownership and review state shared by every request type."""

    status = Column(String(20), default="pending", nullable=False, index=True)  # pending, approved, denied
    admin_reason = Column(Text)
    reviewed_at = Column(DateTime(timezone=True))

    @declared_attr
    def organization_id(cls):
        return Column(
            Uuid(as_uuid=True), ForeignKey("organizations.id", ondelete="CASCADE"), nullable=False, index=True,
        )

    @declared_attr
    def reviewed_by(cls):
        return Column(Uuid(as_uuid=True), ForeignKey("users.id", ondelete="SET NULL"))

    @declared_attr
    def organization(cls):
        return relationship("Organization")


class AudienceMixin:
    target_audience = Column(String(30), default="children", nullable=False)  # children, people_work_for_children
    age_group = Column(String(10))  # only when target_audience == children


class ResourceRequest(UUIDMixin, TimestampMixin, ReviewMixin, AudienceMixin, Base):
    __tablename__ = "resource_requests"

    name = Column(String(255), nullable=False)
    short_description = Column(Text, nullable=False)
    picture = Column(String(500))
    picture_public_id = Column(String(255))
    documents = Column(JSONList, nullable=False, default=list)  # [{url, publicId, type, name}]
    tags = Column(JSONList, nullable=False, default=list)

    __table_args__ = (
        Index("idx_resource_requests_org_status", "organization_id", "status"),
    )


class MediaRequest(UUIDMixin, TimestampMixin, ReviewMixin, AudienceMixin, Base):
    __tablename__ = "media_requests"

    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=False)
    content_type = Column(String(20), default="pictures", nullable=False)
    text_content = Column(Text)  # article and poem only
    files = Column(JSONList, nullable=False, default=list)  # [{url, publicId, type, name}]
    tags = Column(JSONList, nullable=False, default=list)

    __table_args__ = (
        Index("idx_media_requests_org_status", "organization_id", "status"),
    )


class EventRequest(UUIDMixin, TimestampMixin, ReviewMixin, AudienceMixin, Base):
    __tablename__ = "event_requests"

    name = Column(String(255), nullable=False)
    location = Column(String(500), nullable=False)
    start_date = Column(DateTime(timezone=True), nullable=False)
    end_date = Column(DateTime(timezone=True))
    description = Column(Text, nullable=False)
    registration_link = Column(String(500))
    cover_image = Column(String(500))
    cover_image_public_id = Column(String(255))
    tags = Column(JSONList, nullable=False, default=list)

    __table_args__ = (
        Index("idx_event_requests_org_status", "organization_id", "status"),
    )


class SuperHeroRequest(UUIDMixin, TimestampMixin, ReviewMixin, Base):
    __tablename__ = "super_hero_requests"

    name = Column(String(255), nullable=False)
    icon = Column(String(500), nullable=False)  # emoji or image URL
    icon_type = Column(String(10), default="emoji", nullable=False)  # emoji, image
    icon_public_id = Column(String(255))
    phone = Column(String(20), nullable=False)
    short_description = Column(Text, nullable=False)

    __table_args__ = (
        Index("idx_super_hero_requests_org_status", "organization_id", "status"),
    )
