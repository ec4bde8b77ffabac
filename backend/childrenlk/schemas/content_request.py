"""Pydantic schemas for the four submission types and their review."""

from datetime import datetime
from typing import Literal
from uuid import UUID

from pydantic import Field, field_validator, model_validator

from childrenlk.schemas.common import CamelModel, NonEmptyStr, OptionalStr, Phone

TargetAudience = Literal["children", "people_work_for_children"]
AgeGroup = Literal["1-5", "5-10", "11-15", "15-18", "above-18"]
MediaContentType = Literal["article", "poem", "video", "audio", "pictures", "picture_story"]

DEFAULT_AGE_GROUP = "1-5"

# Content types that carry text instead of uploaded files
TEXT_CONTENT_TYPES = ("article", "poem")

# File type is implied by the declared content type, never sniffed
MEDIA_FILE_TYPES = {
    "video": "video",
    "audio": "audio",
    "pictures": "image",
    "picture_story": "image",
}


def normalize_tags(tags: list[str] | None) -> list[str]:
    """Trim, drop blanks and de-duplicate, keeping first-seen order."""
    seen = []
    for tag in tags or []:
        name = tag.strip()
        if name and name not in seen:
            seen.append(name)
    return seen


# --- File references ---

class DocumentFile(CamelModel):
    url: NonEmptyStr
    public_id: NonEmptyStr
    type: Literal["pdf", "video", "audio", "docx", "ppt", "image"]
    name: str | None = None


class MediaFile(CamelModel):
    url: NonEmptyStr
    public_id: NonEmptyStr
    type: Literal["video", "audio", "image"] | None = None
    name: str | None = None


# --- Submission payloads ---

class AudienceFields(CamelModel):
    target_audience: TargetAudience = "children"
    age_group: AgeGroup | None = None

    @model_validator(mode="after")
    def _age_group_for_children_only(self):
        if self.target_audience == "children":
            self.age_group = self.age_group or DEFAULT_AGE_GROUP
        else:
            self.age_group = None
        return self


class TaggedFields(CamelModel):
    tags: list[str] = []

    @field_validator("tags")
    @classmethod
    def _normalize_tags(cls, value: list[str]) -> list[str]:
        return normalize_tags(value)


class ResourceRequestCreate(AudienceFields, TaggedFields):
    name: NonEmptyStr
    short_description: NonEmptyStr
    picture: OptionalStr = None
    picture_public_id: OptionalStr = None
    documents: list[DocumentFile] = []


class MediaRequestCreate(AudienceFields, TaggedFields):
    name: NonEmptyStr
    description: NonEmptyStr
    content_type: MediaContentType = "pictures"
    text_content: str | None = None
    files: list[MediaFile] = []

    @model_validator(mode="after")
    def _content_matches_type(self):
        if self.content_type in TEXT_CONTENT_TYPES:
            text = (self.text_content or "").strip()
            if not text:
                raise ValueError(f"{self.content_type} content is required")
            self.text_content = text
            self.files = []
        else:
            if not self.files:
                raise ValueError("At least one file is required")
            file_type = MEDIA_FILE_TYPES[self.content_type]
            self.files = [f.model_copy(update={"type": file_type}) for f in self.files]
            self.text_content = None
        return self


class EventRequestCreate(AudienceFields, TaggedFields):
    name: NonEmptyStr
    location: NonEmptyStr
    start_date: datetime
    end_date: datetime | None = None
    description: NonEmptyStr
    registration_link: OptionalStr = None
    cover_image: OptionalStr = None
    cover_image_public_id: OptionalStr = None


class SuperHeroRequestCreate(CamelModel):
    name: NonEmptyStr
    icon: NonEmptyStr
    icon_type: Literal["emoji", "image"] = "emoji"
    icon_public_id: OptionalStr = None
    phone: Phone
    short_description: NonEmptyStr


# --- Review ---

class ReviewDecision(CamelModel):
    """Admin decision on a pending request."""

    status: str | None = Field(default=None, validate_default=True)
    admin_reason: str | None = None

    @field_validator("status")
    @classmethod
    def _known_status(cls, value):
        if value not in ("approved", "denied"):
            raise ValueError("status must be approved or denied")
        return value

    @model_validator(mode="after")
    def _reason_when_denying(self):
        if self.status == "denied":
            reason = (self.admin_reason or "").strip()
            if not reason:
                raise ValueError("Reason is required when denying")
            self.admin_reason = reason
        else:
            # Optional note on approval
            self.admin_reason = (self.admin_reason or "").strip() or None
        return self


# --- Output ---

class OrganizationContact(CamelModel):
    id: UUID
    name: str
    contact_email: str | None = None
    contact_phone: str | None = None


class RequestRead(CamelModel):
    """Review state common to every request type."""

    id: UUID
    organization_id: UUID
    status: str
    admin_reason: str | None = None
    reviewed_at: datetime | None = None
    reviewed_by: UUID | None = None
    created_at: datetime
    updated_at: datetime


class ResourceRequestRead(RequestRead):
    name: str
    short_description: str
    picture: str | None = None
    picture_public_id: str | None = None
    documents: list[DocumentFile] = []
    tags: list[str] = []
    target_audience: str
    age_group: str | None = None


class MediaRequestRead(RequestRead):
    name: str
    description: str
    content_type: str
    text_content: str | None = None
    files: list[MediaFile] = []
    tags: list[str] = []
    target_audience: str
    age_group: str | None = None


class EventRequestRead(RequestRead):
    name: str
    location: str
    start_date: datetime
    end_date: datetime | None = None
    description: str
    registration_link: str | None = None
    cover_image: str | None = None
    cover_image_public_id: str | None = None
    tags: list[str] = []
    target_audience: str
    age_group: str | None = None


class SuperHeroRequestRead(RequestRead):
    name: str
    icon: str
    icon_type: str
    icon_public_id: str | None = None
    phone: str
    short_description: str


class AdminResourceRequestRead(ResourceRequestRead):
    organization: OrganizationContact | None = None


class AdminMediaRequestRead(MediaRequestRead):
    organization: OrganizationContact | None = None


class AdminEventRequestRead(EventRequestRead):
    organization: OrganizationContact | None = None


class AdminSuperHeroRequestRead(SuperHeroRequestRead):
    organization: OrganizationContact | None = None
