"""Organizer endpoints: submissions, own organization and dashboard."""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from childrenlk.dependencies.auth import Principal, require_organizer
from childrenlk.models.base import get_db
from childrenlk.schemas.common import SuccessResponse
from childrenlk.schemas.organization import OrganizationRead, OrganizationUpdate
from childrenlk.schemas.site import OrganizerDashboardStats
from childrenlk.services import dashboard_service, organization_service, request_service
from childrenlk.services.request_service import REQUEST_KINDS, RequestKind

router = APIRouter(prefix="/organizer", tags=["organizer"])


def _register_request_routes(kind: RequestKind) -> None:
    """List, create and fetch routes for one request type, scoped to the caller's organization."""
    path = f"/{kind.slug}-requests"

    @router.get(path, response_model=list[kind.read_schema], name=f"list_{kind.slug}_requests")
    async def list_requests(
        principal: Principal = Depends(require_organizer),
        db: AsyncSession = Depends(get_db),
    ):
        return await request_service.list_requests(db, kind, principal)

    @router.post(path, response_model=SuccessResponse, name=f"create_{kind.slug}_request")
    async def create_request(
        body: kind.create_schema,
        principal: Principal = Depends(require_organizer),
        db: AsyncSession = Depends(get_db),
    ):
        request = await request_service.submit_request(db, kind, principal, body)
        return SuccessResponse(id=str(request.id))

    @router.get(f"{path}/{{request_id}}", response_model=kind.read_schema, name=f"get_{kind.slug}_request")
    async def get_request(
        request_id: str,
        principal: Principal = Depends(require_organizer),
        db: AsyncSession = Depends(get_db),
    ):
        return await request_service.get_request(db, kind, principal, request_id)


for _kind in REQUEST_KINDS.values():
    _register_request_routes(_kind)


@router.get("/organization", response_model=OrganizationRead)
async def get_organization(
    principal: Principal = Depends(require_organizer),
    db: AsyncSession = Depends(get_db),
):
    return await organization_service.get_own_organization(db, principal.user)


@router.patch("/organization", response_model=OrganizationRead)
async def update_organization(
    body: OrganizationUpdate,
    principal: Principal = Depends(require_organizer),
    db: AsyncSession = Depends(get_db),
):
    return await organization_service.update_own_organization(db, principal.user, body)


@router.get("/dashboard-stats", response_model=OrganizerDashboardStats)
async def dashboard_stats(
    principal: Principal = Depends(require_organizer),
    db: AsyncSession = Depends(get_db),
):
    return await dashboard_service.organizer_stats(db, principal)
