"""Pydantic schemas package."""

from childrenlk.schemas.common import CamelModel, SuccessResponse
from childrenlk.schemas.content_request import (
    ResourceRequestCreate,
    MediaRequestCreate,
    EventRequestCreate,
    SuperHeroRequestCreate,
    ReviewDecision,
    ResourceRequestRead,
    MediaRequestRead,
    EventRequestRead,
    SuperHeroRequestRead,
    AdminResourceRequestRead,
    AdminMediaRequestRead,
    AdminEventRequestRead,
    AdminSuperHeroRequestRead,
)
from childrenlk.schemas.published import (
    ResourceRead,
    MediaRead,
    EventRead,
    SuperHeroRead,
    SuperHeroCreate,
    SuperHeroUpdate,
    DownloadRecord,
    DownloadRecorded,
    DownloadSummary,
)
from childrenlk.schemas.organization import (
    OrganizationRead,
    OrganizationUpdate,
    OrganizerCreate,
    OrganizerRead,
    OrganizerDetail,
)
from childrenlk.schemas.user import (
    SignupRequest,
    LoginRequest,
    UserRead,
    ProfileRead,
    ProfileUpdate,
    ChangePasswordRequest,
    ForgotPasswordRequest,
    ResetPasswordRequest,
)
from childrenlk.schemas.site import (
    AnnouncementCreate,
    AnnouncementUpdate,
    AnnouncementRead,
    OrganizerApplicationCreate,
    OrganizerApplicationRead,
    UploadRequest,
    UploadResponse,
    AdminDashboardStats,
    OrganizerDashboardStats,
)

__all__ = [
    "CamelModel",
    "SuccessResponse",
    # Requests
    "ResourceRequestCreate",
    "MediaRequestCreate",
    "EventRequestCreate",
    "SuperHeroRequestCreate",
    "ReviewDecision",
    "ResourceRequestRead",
    "MediaRequestRead",
    "EventRequestRead",
    "SuperHeroRequestRead",
    "AdminResourceRequestRead",
    "AdminMediaRequestRead",
    "AdminEventRequestRead",
    "AdminSuperHeroRequestRead",
    # Published
    "ResourceRead",
    "MediaRead",
    "EventRead",
    "SuperHeroRead",
    "SuperHeroCreate",
    "SuperHeroUpdate",
    "DownloadRecord",
    "DownloadRecorded",
    "DownloadSummary",
    # Organizations
    "OrganizationRead",
    "OrganizationUpdate",
    "OrganizerCreate",
    "OrganizerRead",
    "OrganizerDetail",
    # Accounts
    "SignupRequest",
    "LoginRequest",
    "UserRead",
    "ProfileRead",
    "ProfileUpdate",
    "ChangePasswordRequest",
    "ForgotPasswordRequest",
    "ResetPasswordRequest",
    # Site
    "AnnouncementCreate",
    "AnnouncementUpdate",
    "AnnouncementRead",
    "OrganizerApplicationCreate",
    "OrganizerApplicationRead",
    "UploadRequest",
    "UploadResponse",
    "AdminDashboardStats",
    "OrganizerDashboardStats",
]
