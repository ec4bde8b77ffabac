"""Submission store and review workflow shared by the four request types."""

import logging
from dataclasses import dataclass
from uuid import UUID

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from childrenlk.dependencies.auth import Principal
from childrenlk.errors import Conflict, InvalidInput, NotFound
from childrenlk.models.base import utcnow
from childrenlk.models.content_request import EventRequest, MediaRequest, ResourceRequest, SuperHeroRequest
from childrenlk.models.published import Event, Media, Resource, SuperHero
from childrenlk.schemas import content_request as schemas
from childrenlk.schemas import published as published_schemas
from childrenlk.schemas.content_request import ReviewDecision
from childrenlk.services.scoping import organization_scope
from childrenlk.services.tag_service import ensure_tags
from childrenlk.services.validation import parse_uuid

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RequestKind:
    """Everything the generic workflow needs to know about one request type."""

    slug: str  # URL segment, e.g. "super-hero"
    label: str  # human name used in messages
    request_model: type
    published_model: type
    create_schema: type
    read_schema: type
    admin_read_schema: type
    published_schema: type
    public_slug: str  # URL segment under /api/public
    # Payload columns copied onto the published entity on approval
    payload_fields: tuple[str, ...]
    # JSON list columns holding file references
    file_fields: tuple[str, ...] = ()
    has_tags: bool = True


RESOURCE = RequestKind(
    slug="resource",
    label="Resource",
    request_model=ResourceRequest,
    published_model=Resource,
    create_schema=schemas.ResourceRequestCreate,
    read_schema=schemas.ResourceRequestRead,
    admin_read_schema=schemas.AdminResourceRequestRead,
    published_schema=published_schemas.ResourceRead,
    public_slug="resources",
    payload_fields=(
        "name", "short_description", "picture", "picture_public_id",
        "documents", "tags", "target_audience", "age_group",
    ),
    file_fields=("documents",),
)

MEDIA = RequestKind(
    slug="media",
    label="Media",
    request_model=MediaRequest,
    published_model=Media,
    create_schema=schemas.MediaRequestCreate,
    read_schema=schemas.MediaRequestRead,
    admin_read_schema=schemas.AdminMediaRequestRead,
    published_schema=published_schemas.MediaRead,
    public_slug="media",
    payload_fields=(
        "name", "description", "content_type", "text_content",
        "files", "tags", "target_audience", "age_group",
    ),
    file_fields=("files",),
)

EVENT = RequestKind(
    slug="event",
    label="Event",
    request_model=EventRequest,
    published_model=Event,
    create_schema=schemas.EventRequestCreate,
    read_schema=schemas.EventRequestRead,
    admin_read_schema=schemas.AdminEventRequestRead,
    published_schema=published_schemas.EventRead,
    public_slug="events",
    payload_fields=(
        "name", "location", "start_date", "end_date", "description", "registration_link",
        "cover_image", "cover_image_public_id", "tags", "target_audience", "age_group",
    ),
)

SUPER_HERO = RequestKind(
    slug="super-hero",
    label="Super hero",
    request_model=SuperHeroRequest,
    published_model=SuperHero,
    create_schema=schemas.SuperHeroRequestCreate,
    read_schema=schemas.SuperHeroRequestRead,
    admin_read_schema=schemas.AdminSuperHeroRequestRead,
    published_schema=published_schemas.SuperHeroRead,
    public_slug="super-heroes",
    payload_fields=("name", "icon", "icon_type", "icon_public_id", "phone", "short_description"),
    has_tags=False,
)

REQUEST_KINDS: dict[str, RequestKind] = {kind.slug: kind for kind in (RESOURCE, MEDIA, EVENT, SUPER_HERO)}


def _row_values(kind: RequestKind, payload) -> dict:
    """Column values for a new request row; file references keep their camelCase JSON shape."""
    values = payload.model_dump()
    for field in kind.file_fields:
        values[field] = [f.model_dump(by_alias=True, exclude_none=True) for f in getattr(payload, field)]
    return values


async def submit_request(db: AsyncSession, kind: RequestKind, principal: Principal, payload):
    """Store a new submission for the caller's organization. Status is always pending."""
    if principal.organization_id is None:
        raise InvalidInput("No organization found")

    request = kind.request_model(
        **_row_values(kind, payload),
        organization_id=principal.organization_id,
        status="pending",
    )
    db.add(request)
    await db.commit()
    logger.info("%s request %s submitted by organization %s", kind.label, request.id, principal.organization_id)

    if kind.has_tags and not await ensure_tags(db, request.tags):
        # The rollback expired the committed request
        await db.refresh(request)
    return request


async def list_requests(
    db: AsyncSession,
    kind: RequestKind,
    principal: Principal,
    status: str | None = None,
) -> list:
    """Requests visible to ``principal``, newest first."""
    model = kind.request_model
    query = select(model).where(organization_scope(model, principal))
    if status:
        query = query.where(model.status == status)
    if principal.is_admin:
        query = query.options(selectinload(model.organization))
    result = await db.execute(query.order_by(model.created_at.desc()))
    return list(result.scalars().all())


async def get_request(db: AsyncSession, kind: RequestKind, principal: Principal, request_id: UUID | str):
    """One request inside the caller's scope; anything else is reported as not found."""
    model = kind.request_model
    request_id = parse_uuid(request_id)
    if request_id is None:
        raise NotFound(f"{kind.label} request not found")
    query = select(model).where(model.id == request_id, organization_scope(model, principal))
    if principal.is_admin:
        query = query.options(selectinload(model.organization))
    request = (await db.execute(query)).scalar_one_or_none()
    if not request:
        raise NotFound(f"{kind.label} request not found")
    return request


async def review_request(
    db: AsyncSession,
    kind: RequestKind,
    request_id: UUID | str,
    decision: ReviewDecision,
    reviewer: Principal,
) -> None:
    """Move a pending request to approved or denied, exactly once.

    The status change is a conditional UPDATE (``WHERE status = 'pending'``)
    and, on approval, the published entity is inserted in the same
    transaction. Either both are committed or neither is.
    """
    model = kind.request_model
    request_id = parse_uuid(request_id)
    request = None
    if request_id is not None:
        request = (await db.execute(select(model).where(model.id == request_id))).scalar_one_or_none()
    if not request:
        raise NotFound(f"{kind.label} request not found")
    if request.status != "pending":
        raise Conflict("Request already reviewed")

    reviewed_at = utcnow()
    result = await db.execute(
        update(model)
        .where(model.id == request_id, model.status == "pending")
        .values(
            status=decision.status,
            admin_reason=decision.admin_reason,
            reviewed_at=reviewed_at,
            reviewed_by=reviewer.id,
            updated_at=reviewed_at,
        )
        .execution_options(synchronize_session=False)
    )
    if result.rowcount != 1:
        # Lost the race against a concurrent review
        await db.rollback()
        raise Conflict("Request already reviewed")

    if decision.status == "approved":
        db.add(kind.published_model(
            request_id=request.id,
            organization_id=request.organization_id,
            **{field: getattr(request, field) for field in kind.payload_fields},
        ))

    await db.commit()
    logger.info(
        "%s request %s %s by %s", kind.label, request_id, decision.status, reviewer.user.email,
    )
