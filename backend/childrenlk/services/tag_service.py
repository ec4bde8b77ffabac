"""Tag registry for autocomplete; writes are best effort."""

import logging
import uuid

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from childrenlk.models.base import dialect_insert, utcnow
from childrenlk.models.tag import Tag
from childrenlk.schemas.content_request import normalize_tags

logger = logging.getLogger(__name__)


async def ensure_tags(db: AsyncSession, names: list[str]) -> bool:
    """Register any new tag names. Never raises: a registry failure is only logged.

    Runs in its own transaction, after the submission has committed. Returns
    False when the registry write failed and the session was rolled back.
    """
    names = normalize_tags(names)
    if not names:
        return True
    now = utcnow()
    rows = [{"id": uuid.uuid4(), "name": name, "created_at": now, "updated_at": now} for name in names]
    try:
        stmt = dialect_insert(db, Tag).values(rows).on_conflict_do_nothing(index_elements=["name"])
        await db.execute(stmt)
        await db.commit()
    except SQLAlchemyError:
        await db.rollback()
        logger.warning("Could not register tags %s", names, exc_info=True)
        return False
    return True


def _escape_like(value: str) -> str:
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


async def search_tags(db: AsyncSession, query: str | None = None) -> list[str]:
    """Tag names containing ``query`` (case-insensitive), alphabetical."""
    stmt = select(Tag.name)
    q = (query or "").strip().lower()
    if q:
        stmt = stmt.where(Tag.name.ilike(f"%{_escape_like(q)}%", escape="\\"))
    result = await db.execute(stmt.order_by(Tag.name))
    return list(result.scalars().all())
