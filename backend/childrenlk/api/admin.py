"""Admin endpoints: review queues, organizers, site content and dashboard."""

from typing import Literal
from uuid import UUID

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from childrenlk.config import Settings
from childrenlk.dependencies.auth import Principal, require_admin
from childrenlk.dependencies.clients import get_mailer, get_settings_from_app
from childrenlk.models.base import get_db
from childrenlk.schemas.common import SuccessResponse
from childrenlk.schemas.content_request import ReviewDecision
from childrenlk.schemas.organization import OrganizerCreate, OrganizerDetail, OrganizerRead
from childrenlk.schemas.published import SuperHeroCreate, SuperHeroRead, SuperHeroUpdate
from childrenlk.schemas.site import (
    AdminDashboardStats,
    AnnouncementCreate,
    AnnouncementRead,
    AnnouncementUpdate,
    OrganizerApplicationRead,
)
from childrenlk.services import dashboard_service, organization_service, request_service, site_service
from childrenlk.services.mailer import Mailer
from childrenlk.services.request_service import REQUEST_KINDS, RequestKind

router = APIRouter(prefix="/admin", tags=["admin"])

StatusFilter = Literal["pending", "approved", "denied"]


# --- Review queues ---

def _register_review_routes(kind: RequestKind) -> None:
    """List, fetch and review routes for one request type across all organizations."""
    path = f"/{kind.slug}-requests"

    @router.get(path, response_model=list[kind.admin_read_schema], name=f"admin_list_{kind.slug}_requests")
    async def list_requests(
        status: StatusFilter | None = Query(None, description="Filter by review status"),
        principal: Principal = Depends(require_admin),
        db: AsyncSession = Depends(get_db),
    ):
        return await request_service.list_requests(db, kind, principal, status)

    @router.get(f"{path}/{{request_id}}", response_model=kind.admin_read_schema, name=f"admin_get_{kind.slug}_request")
    async def get_request(
        request_id: str,
        principal: Principal = Depends(require_admin),
        db: AsyncSession = Depends(get_db),
    ):
        return await request_service.get_request(db, kind, principal, request_id)

    @router.patch(
        f"{path}/{{request_id}}",
        response_model=SuccessResponse,
        response_model_exclude_none=True,
        name=f"review_{kind.slug}_request",
    )
    async def review_request(
        request_id: str,
        body: ReviewDecision,
        principal: Principal = Depends(require_admin),
        db: AsyncSession = Depends(get_db),
    ):
        """Approve (publishing a copy) or deny with a reason."""
        await request_service.review_request(db, kind, request_id, body, principal)
        return SuccessResponse()


for _kind in REQUEST_KINDS.values():
    _register_review_routes(_kind)


# --- Organizers ---

@router.get("/organizers", response_model=list[OrganizerRead])
async def list_organizers(
    principal: Principal = Depends(require_admin),
    db: AsyncSession = Depends(get_db),
):
    return await organization_service.list_organizers(db)


@router.post("/organizers", response_model=SuccessResponse)
async def create_organizer(
    body: OrganizerCreate,
    principal: Principal = Depends(require_admin),
    db: AsyncSession = Depends(get_db),
    mailer: Mailer = Depends(get_mailer),
    settings: Settings = Depends(get_settings_from_app),
):
    """Create an organizer with their organization and email the login details."""
    user = await organization_service.create_organizer(db, mailer, body, settings.password_min_length)
    return SuccessResponse(id=str(user.id))


@router.get("/organizers/{organizer_id}", response_model=OrganizerDetail)
async def get_organizer(
    organizer_id: UUID,
    principal: Principal = Depends(require_admin),
    db: AsyncSession = Depends(get_db),
):
    return await organization_service.get_organizer_detail(db, organizer_id)


@router.get("/organizer-requests", response_model=list[OrganizerApplicationRead])
async def list_organizer_applications(
    principal: Principal = Depends(require_admin),
    db: AsyncSession = Depends(get_db),
):
    return await site_service.list_organizer_applications(db)


# --- Announcements ---

@router.get("/announcements", response_model=list[AnnouncementRead])
async def list_announcements(
    principal: Principal = Depends(require_admin),
    db: AsyncSession = Depends(get_db),
):
    return await site_service.list_announcements(db)


@router.post("/announcements", response_model=AnnouncementRead)
async def create_announcement(
    body: AnnouncementCreate,
    principal: Principal = Depends(require_admin),
    db: AsyncSession = Depends(get_db),
):
    return await site_service.create_announcement(db, body)


@router.patch("/announcements/{announcement_id}", response_model=AnnouncementRead)
async def update_announcement(
    announcement_id: UUID,
    body: AnnouncementUpdate,
    principal: Principal = Depends(require_admin),
    db: AsyncSession = Depends(get_db),
):
    return await site_service.update_announcement(db, announcement_id, body)


@router.delete("/announcements/{announcement_id}", response_model=SuccessResponse)
async def delete_announcement(
    announcement_id: UUID,
    principal: Principal = Depends(require_admin),
    db: AsyncSession = Depends(get_db),
):
    await site_service.delete_announcement(db, announcement_id)
    return SuccessResponse()


# --- Super heroes ---

@router.get("/super-heroes", response_model=list[SuperHeroRead])
async def list_super_heroes(
    principal: Principal = Depends(require_admin),
    db: AsyncSession = Depends(get_db),
):
    return await site_service.list_super_heroes(db)


@router.post("/super-heroes", response_model=SuperHeroRead)
async def create_super_hero(
    body: SuperHeroCreate,
    principal: Principal = Depends(require_admin),
    db: AsyncSession = Depends(get_db),
):
    return await site_service.create_super_hero(db, body)


@router.patch("/super-heroes/{hero_id}", response_model=SuperHeroRead)
async def update_super_hero(
    hero_id: UUID,
    body: SuperHeroUpdate,
    principal: Principal = Depends(require_admin),
    db: AsyncSession = Depends(get_db),
):
    return await site_service.update_super_hero(db, hero_id, body)


@router.delete("/super-heroes/{hero_id}", response_model=SuccessResponse)
async def delete_super_hero(
    hero_id: UUID,
    principal: Principal = Depends(require_admin),
    db: AsyncSession = Depends(get_db),
):
    await site_service.delete_super_hero(db, hero_id)
    return SuccessResponse()


# --- Dashboard ---

@router.get("/dashboard-stats", response_model=AdminDashboardStats)
async def dashboard_stats(
    principal: Principal = Depends(require_admin),
    db: AsyncSession = Depends(get_db),
):
    return await dashboard_service.admin_stats(db)
