"""Models package - imports every model so relationships resolve."""

from childrenlk.models.base import Base
from childrenlk.models.user import User
from childrenlk.models.organization import Organization
from childrenlk.models.content_request import (
    ResourceRequest,
    MediaRequest,
    EventRequest,
    SuperHeroRequest,
)
from childrenlk.models.published import Resource, Media, Event, SuperHero
from childrenlk.models.tag import Tag
from childrenlk.models.download_count import DocumentDownloadCount
from childrenlk.models.announcement import Announcement
from childrenlk.models.organizer_application import OrganizerApplication

__all__ = [
    "Base",
    "User",
    "Organization",
    "ResourceRequest",
    "MediaRequest",
    "EventRequest",
    "SuperHeroRequest",
    "Resource",
    "Media",
    "Event",
    "SuperHero",
    "Tag",
    "DocumentDownloadCount",
    "Announcement",
    "OrganizerApplication",
]
