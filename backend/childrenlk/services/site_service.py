"""Admin-managed site content: announcements, super heroes and organizer applications."""

import logging
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from childrenlk.errors import NotFound
from childrenlk.models.announcement import Announcement
from childrenlk.models.organization import Organization
from childrenlk.models.organizer_application import OrganizerApplication
from childrenlk.models.published import SuperHero
from childrenlk.schemas.published import SuperHeroCreate, SuperHeroUpdate
from childrenlk.schemas.site import AnnouncementCreate, AnnouncementUpdate, OrganizerApplicationCreate

logger = logging.getLogger(__name__)


def _apply(obj, changes) -> None:
    """Copy explicitly sent, non-null fields onto ``obj``."""
    for field, value in changes.model_dump(exclude_unset=True).items():
        if value is not None:
            setattr(obj, field, value)


# --- Announcements ---

async def list_announcements(db: AsyncSession, live_only: bool = False) -> list[Announcement]:
    query = select(Announcement)
    if live_only:
        query = query.where(Announcement.is_live == True)  # noqa: E712
    result = await db.execute(query.order_by(Announcement.created_at.desc()))
    return list(result.scalars().all())


async def _announcement(db: AsyncSession, announcement_id: UUID) -> Announcement:
    announcement = await db.get(Announcement, announcement_id)
    if not announcement:
        raise NotFound("Announcement not found")
    return announcement


async def create_announcement(db: AsyncSession, data: AnnouncementCreate) -> Announcement:
    announcement = Announcement(**data.model_dump())
    db.add(announcement)
    await db.commit()
    return announcement


async def update_announcement(db: AsyncSession, announcement_id: UUID, changes: AnnouncementUpdate) -> Announcement:
    announcement = await _announcement(db, announcement_id)
    _apply(announcement, changes)
    await db.commit()
    return announcement


async def delete_announcement(db: AsyncSession, announcement_id: UUID) -> None:
    await db.delete(await _announcement(db, announcement_id))
    await db.commit()


# --- Super heroes added directly by admins ---

async def _check_organization(db: AsyncSession, organization_id: UUID | None) -> None:
    if organization_id is not None and not await db.get(Organization, organization_id):
        raise NotFound("Organization not found")


async def _super_hero(db: AsyncSession, hero_id: UUID) -> SuperHero:
    result = await db.execute(
        select(SuperHero)
        .where(SuperHero.id == hero_id)
        .options(selectinload(SuperHero.organization))
        .execution_options(populate_existing=True)
    )
    hero = result.scalar_one_or_none()
    if not hero:
        raise NotFound("Super hero not found")
    return hero


async def list_super_heroes(db: AsyncSession) -> list[SuperHero]:
    result = await db.execute(
        select(SuperHero).options(selectinload(SuperHero.organization)).order_by(SuperHero.created_at.desc())
    )
    return list(result.scalars().all())


async def create_super_hero(db: AsyncSession, data: SuperHeroCreate) -> SuperHero:
    await _check_organization(db, data.organization_id)
    hero = SuperHero(**data.model_dump())
    db.add(hero)
    await db.commit()
    logger.info("Super hero %s added by admin", hero.id)
    return await _super_hero(db, hero.id)


async def update_super_hero(db: AsyncSession, hero_id: UUID, changes: SuperHeroUpdate) -> SuperHero:
    hero = await _super_hero(db, hero_id)
    await _check_organization(db, changes.organization_id)
    _apply(hero, changes)
    await db.commit()
    return await _super_hero(db, hero_id)


async def delete_super_hero(db: AsyncSession, hero_id: UUID) -> None:
    await db.delete(await _super_hero(db, hero_id))
    await db.commit()


# --- Organizer applications ---

async def submit_organizer_application(db: AsyncSession, data: OrganizerApplicationCreate) -> OrganizerApplication:
    application = OrganizerApplication(**data.model_dump(mode="json"))
    db.add(application)
    await db.commit()
    logger.info("Organizer application from %s", application.email)
    return application


async def list_organizer_applications(db: AsyncSession) -> list[OrganizerApplication]:
    result = await db.execute(select(OrganizerApplication).order_by(OrganizerApplication.created_at.desc()))
    return list(result.scalars().all())
