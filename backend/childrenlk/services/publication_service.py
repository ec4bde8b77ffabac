"""Read access to published (approved) content for visitors."""

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from childrenlk.errors import NotFound
from childrenlk.services.request_service import RequestKind
from childrenlk.services.validation import parse_uuid


def _ordering(model):
    # Events are listed by when they happen, everything else newest first
    if hasattr(model, "start_date"):
        return model.start_date.asc()
    return model.created_at.desc()


async def list_published(db: AsyncSession, kind: RequestKind) -> list:
    model = kind.published_model
    result = await db.execute(
        select(model).options(selectinload(model.organization)).order_by(_ordering(model))
    )
    return list(result.scalars().all())


async def get_published(db: AsyncSession, kind: RequestKind, entity_id: UUID | str):
    model = kind.published_model
    entity_id = parse_uuid(entity_id)
    if entity_id is None:
        raise NotFound(f"{kind.label} not found")
    result = await db.execute(
        select(model).where(model.id == entity_id).options(selectinload(model.organization))
    )
    entity = result.scalar_one_or_none()
    if not entity:
        raise NotFound(f"{kind.label} not found")
    return entity
