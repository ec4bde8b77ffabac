"""Organizer accounts and the organizations they own."""

import logging
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from childrenlk.errors import NotFound
from childrenlk.models.organization import Organization
from childrenlk.models.user import User
from childrenlk.schemas.organization import OrganizationUpdate, OrganizerCreate
from childrenlk.services.account_service import check_password_length, ensure_email_available, normalize_email
from childrenlk.services.auth_service import hash_password
from childrenlk.services.mailer import Mailer, MailerError
from childrenlk.services.request_service import REQUEST_KINDS

logger = logging.getLogger(__name__)

# Columns that cannot be cleared by a partial update
_REQUIRED_ORGANIZATION_FIELDS = {"name", "short_description", "contact_email", "contact_phone", "address"}


async def create_organizer(db: AsyncSession, mailer: Mailer, data: OrganizerCreate, min_length: int = 6) -> User:
    """Create an organizer account and its organization, then email the credentials.

    The email is best effort: the account exists whether or not it is delivered.
    """
    check_password_length(data.password, min_length)
    await ensure_email_available(db, data.email)

    user = User(
        email=normalize_email(data.email),
        name=data.name,
        hashed_password=hash_password(data.password),
        role="organizer",
    )
    user.organization = Organization(
        name=data.organization_name,
        short_description=data.short_description,
        logo=data.logo,
        contact_email=str(data.contact_email),
        contact_phone=data.contact_phone,
        address=data.address,
        website=data.website,
    )
    db.add(user)
    await db.commit()
    logger.info("Created organizer %s for organization %s", user.email, user.organization.name)

    try:
        await mailer.send_organizer_credentials(user.email, user.name, user.email, data.password)
    except MailerError:
        logger.warning("Could not deliver organizer credentials to %s", user.email, exc_info=True)
    return user


async def list_organizers(db: AsyncSession) -> list[User]:
    result = await db.execute(
        select(User)
        .where(User.role == "organizer")
        .options(selectinload(User.organization))
        .order_by(User.created_at.desc())
    )
    return list(result.scalars().all())


async def _count(db: AsyncSession, model, organization_id: UUID, status: str | None = None) -> int:
    query = select(func.count()).select_from(model).where(model.organization_id == organization_id)
    if status:
        query = query.where(model.status == status)
    return (await db.execute(query)).scalar_one()


async def get_organizer_detail(db: AsyncSession, organizer_id: UUID) -> dict:
    """Organizer, organization, every submission and approval counts."""
    result = await db.execute(
        select(User)
        .where(User.id == organizer_id, User.role == "organizer")
        .options(selectinload(User.organization))
    )
    user = result.scalar_one_or_none()
    if not user or not user.organization:
        raise NotFound("Organizer not found")

    org_id = user.organization.id
    detail = {"organizer": user, "stats": {}}
    for kind, key in (("resource", "resources"), ("media", "media"), ("event", "events"), ("super-hero", "super_heroes")):
        model = REQUEST_KINDS[kind].request_model
        rows = await db.execute(
            select(model).where(model.organization_id == org_id).order_by(model.created_at.desc())
        )
        detail[key] = list(rows.scalars().all())
        detail["stats"][f"total_{key}"] = await _count(db, model, org_id)
        detail["stats"][f"approved_{key}"] = await _count(db, model, org_id, "approved")
    return detail


async def get_own_organization(db: AsyncSession, user: User) -> Organization:
    result = await db.execute(select(Organization).where(Organization.user_id == user.id))
    organization = result.scalar_one_or_none()
    if not organization:
        raise NotFound("No organization found")
    return organization


async def update_own_organization(db: AsyncSession, user: User, changes: OrganizationUpdate) -> Organization:
    organization = await get_own_organization(db, user)
    for field, value in changes.model_dump(exclude_unset=True).items():
        if value is None and field in _REQUIRED_ORGANIZATION_FIELDS:
            continue
        setattr(organization, field, str(value) if field == "contact_email" else value)
    await db.commit()
    return organization
