"""Tag autocomplete."""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from childrenlk.dependencies.auth import require_user_api
from childrenlk.models.base import get_db
from childrenlk.models.user import User
from childrenlk.services.tag_service import search_tags

router = APIRouter(prefix="/tags", tags=["tags"])


@router.get("", response_model=list[str])
async def list_tags(
    q: str | None = Query(None, description="Case-insensitive substring"),
    user: User = Depends(require_user_api),
    db: AsyncSession = Depends(get_db),
):
    return await search_tags(db, q)
