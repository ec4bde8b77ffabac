"""Public read-only endpoints for visitors; no session required."""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from childrenlk.models.base import get_db
from childrenlk.schemas.common import SuccessResponse
from childrenlk.schemas.published import DownloadRecord, DownloadRecorded, DownloadSummary
from childrenlk.schemas.site import AnnouncementRead, OrganizerApplicationCreate
from childrenlk.services import download_service, publication_service, site_service
from childrenlk.services.request_service import REQUEST_KINDS, RequestKind

router = APIRouter(tags=["public"])


# --- Downloads (registered before /{entity_id} so the literal path wins) ---

@router.post("/public/resources/download", response_model=DownloadRecorded)
async def record_download(body: DownloadRecord, db: AsyncSession = Depends(get_db)):
    """Count one download of a document inside a published resource."""
    count = await download_service.record_download(db, body.resource_id, body.document_public_id)
    return DownloadRecorded(count=count)


@router.get("/public/resources/{resource_id}/downloads", response_model=DownloadSummary)
async def download_summary(resource_id: str, db: AsyncSession = Depends(get_db)):
    return await download_service.download_summary(db, resource_id)


# --- Published content ---

def _register_published_routes(kind: RequestKind) -> None:
    path = f"/public/{kind.public_slug}"

    @router.get(path, response_model=list[kind.published_schema], name=f"list_{kind.public_slug}")
    async def list_published(db: AsyncSession = Depends(get_db)):
        return await publication_service.list_published(db, kind)

    @router.get(f"{path}/{{entity_id}}", response_model=kind.published_schema, name=f"get_{kind.public_slug}")
    async def get_published(entity_id: str, db: AsyncSession = Depends(get_db)):
        return await publication_service.get_published(db, kind, entity_id)


for _kind in REQUEST_KINDS.values():
    _register_published_routes(_kind)


@router.get("/public/announcements", response_model=list[AnnouncementRead])
async def live_announcements(db: AsyncSession = Depends(get_db)):
    return await site_service.list_announcements(db, live_only=True)


@router.post("/organizer-request", response_model=SuccessResponse)
async def apply_as_organizer(body: OrganizerApplicationCreate, db: AsyncSession = Depends(get_db)):
    """Visitor asks to become an organizer; admins follow up manually."""
    application = await site_service.submit_organizer_application(db, body)
    return SuccessResponse(id=str(application.id))
