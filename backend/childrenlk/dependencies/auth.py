"""Authentication and role dependencies for FastAPI routes."""

from dataclasses import dataclass
from uuid import UUID

from fastapi import Depends, Request
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from childrenlk.errors import Unauthorized
from childrenlk.models.base import get_db
from childrenlk.models.organization import Organization
from childrenlk.models.user import User


@dataclass
class Principal:
    """The caller of a role-gated route, with the organization they may act for."""

    user: User
    organization_id: UUID | None = None

    @property
    def id(self) -> UUID:
        return self.user.id

    @property
    def role(self) -> str:
        return self.user.role

    @property
    def is_admin(self) -> bool:
        return self.user.role == "admin"


async def get_current_user(request: Request, db: AsyncSession = Depends(get_db)) -> User | None:
    """Return the logged-in user or None."""
    user_id = request.session.get("user_id")
    if not user_id:
        return None
    try:
        user_uuid = UUID(user_id)
    except ValueError:
        return None
    result = await db.execute(
        select(User).where(User.id == user_uuid, User.is_active == True)  # noqa: E712
    )
    return result.scalar_one_or_none()


async def require_user_api(user: User | None = Depends(get_current_user)) -> User:
    """Return the logged-in user or raise 401."""
    if not user:
        raise Unauthorized()
    return user


async def require_admin(user: User | None = Depends(get_current_user)) -> Principal:
    if not user or user.role != "admin":
        raise Unauthorized()
    return Principal(user=user)


async def require_organizer(
    user: User | None = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
) -> Principal:
    """Organizer caller resolved to their organization (None if they have none yet)."""
    if not user or user.role != "organizer":
        raise Unauthorized()
    result = await db.execute(select(Organization.id).where(Organization.user_id == user.id))
    return Principal(user=user, organization_id=result.scalar_one_or_none())
