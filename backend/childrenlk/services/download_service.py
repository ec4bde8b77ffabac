"""Per-document download counter for published resources."""

import uuid
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from childrenlk.errors import NotFound
from childrenlk.models.base import dialect_insert, utcnow
from childrenlk.models.download_count import DocumentDownloadCount
from childrenlk.models.published import Resource
from childrenlk.services.validation import parse_uuid


async def _published_resource(db: AsyncSession, resource_id: UUID) -> Resource:
    resource = await db.get(Resource, resource_id) if resource_id is not None else None
    if not resource:
        raise NotFound("Resource not found or not approved")
    return resource


async def record_download(db: AsyncSession, resource_id: UUID, document_public_id: str) -> int:
    """Increment the counter for one document and return the new count.

    A single upsert statement, so concurrent downloads never lose an increment.
    """
    resource = await _published_resource(db, resource_id)
    if not any(doc.get("publicId") == document_public_id for doc in resource.documents or []):
        raise NotFound("Document not found in this resource")

    now = utcnow()
    stmt = dialect_insert(db, DocumentDownloadCount).values(
        id=uuid.uuid4(),
        resource_id=resource_id,
        document_public_id=document_public_id,
        count=1,
        created_at=now,
        updated_at=now,
    )
    stmt = stmt.on_conflict_do_update(
        index_elements=["resource_id", "document_public_id"],
        set_={"count": DocumentDownloadCount.count + 1, "updated_at": now},
    ).returning(DocumentDownloadCount.count)

    count = (await db.execute(stmt)).scalar_one()
    await db.commit()
    return count


async def download_summary(db: AsyncSession, resource_id: UUID | str) -> dict:
    resource_id = parse_uuid(resource_id)
    await _published_resource(db, resource_id)
    result = await db.execute(
        select(DocumentDownloadCount.document_public_id, DocumentDownloadCount.count)
        .where(DocumentDownloadCount.resource_id == resource_id)
        .order_by(DocumentDownloadCount.count.desc(), DocumentDownloadCount.document_public_id)
    )
    rows = result.all()
    return {
        "resource_id": resource_id,
        "total": sum(count for _, count in rows),
        "by_document": [{"document_public_id": public_id, "count": count} for public_id, count in rows],
    }
