"""Pydantic schemas for organizations and organizer accounts."""

from datetime import datetime
from uuid import UUID

from pydantic import EmailStr

from childrenlk.schemas.common import CamelModel, NonEmptyStr, OptionalStr, Phone


class OrganizationRead(CamelModel):
    """Full organization output."""

    id: UUID
    name: str
    short_description: str
    logo: str | None = None
    contact_email: str
    contact_phone: str
    address: str
    website: str | None = None
    user_id: UUID
    created_at: datetime
    updated_at: datetime


class OrganizationUpdate(CamelModel):
    """Partial update by the owning organizer; omitted fields are kept."""

    name: NonEmptyStr | None = None
    short_description: NonEmptyStr | None = None
    logo: str | None = None
    contact_email: EmailStr | None = None
    contact_phone: Phone | None = None
    address: NonEmptyStr | None = None
    website: str | None = None


class OrganizerCreate(CamelModel):
    """Admin form creating an organizer account together with its organization."""

    name: NonEmptyStr
    email: EmailStr
    password: NonEmptyStr
    organization_name: NonEmptyStr
    short_description: NonEmptyStr
    logo: OptionalStr = None
    contact_email: EmailStr
    contact_phone: Phone
    address: NonEmptyStr
    website: OptionalStr = None


class OrganizerOrganization(CamelModel):
    id: UUID
    name: str
    contact_email: str
    contact_phone: str


class OrganizerRead(CamelModel):
    id: UUID
    name: str
    email: str
    created_at: datetime
    organization: OrganizerOrganization | None = None


class SubmissionSummary(CamelModel):
    id: UUID
    name: str
    status: str
    target_audience: str | None = None
    age_group: str | None = None
    created_at: datetime


class OrganizerStats(CamelModel):
    total_resources: int = 0
    approved_resources: int = 0
    total_media: int = 0
    approved_media: int = 0
    total_events: int = 0
    approved_events: int = 0
    total_super_heroes: int = 0
    approved_super_heroes: int = 0


class OrganizerProfile(CamelModel):
    id: UUID
    name: str
    email: str
    created_at: datetime
    organization: OrganizationRead


class OrganizerDetail(CamelModel):
    """Organizer with organization, every submission and approval counts."""

    organizer: OrganizerProfile
    resources: list[SubmissionSummary]
    media: list[SubmissionSummary]
    events: list[SubmissionSummary]
    super_heroes: list[SubmissionSummary]
    stats: OrganizerStats
