"""Counters for the admin and organizer dashboards."""

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from childrenlk.dependencies.auth import Principal
from childrenlk.models.organizer_application import OrganizerApplication
from childrenlk.services.request_service import REQUEST_KINDS


async def _status_counts(db: AsyncSession, model, organization_id=None) -> dict[str, int]:
    query = select(model.status, func.count()).group_by(model.status)
    if organization_id is not None:
        query = query.where(model.organization_id == organization_id)
    return dict((await db.execute(query)).all())


async def admin_stats(db: AsyncSession) -> dict[str, int]:
    """Pending requests per type plus organizer applications."""
    stats = {}
    for slug, kind in REQUEST_KINDS.items():
        counts = await _status_counts(db, kind.request_model)
        stats[f"{slug.replace('-', '_')}_requests"] = counts.get("pending", 0)
    stats["organizer_requests"] = (
        await db.execute(select(func.count()).select_from(OrganizerApplication))
    ).scalar_one()
    return stats


async def organizer_stats(db: AsyncSession, principal: Principal) -> dict[str, int]:
    """Pending and approved counts for the caller's organization; zeros without one."""
    prefixes = {"resource": "resources", "media": "media", "event": "events", "super-hero": "super_hero"}
    stats = {}
    for slug, kind in REQUEST_KINDS.items():
        counts = {}
        if principal.organization_id is not None:
            counts = await _status_counts(db, kind.request_model, principal.organization_id)
        stats[f"{prefixes[slug]}_pending"] = counts.get("pending", 0)
        stats[f"{prefixes[slug]}_approved"] = counts.get("approved", 0)
    return stats
