"""Submission, review and publication across the four request types."""

import uuid

import pytest
from sqlalchemy import func, select

from childrenlk.dependencies.auth import Principal
from childrenlk.errors import Conflict
from childrenlk.models.content_request import ResourceRequest
from childrenlk.models.published import Event, Media, Resource, SuperHero
from childrenlk.models.tag import Tag
from childrenlk.schemas.content_request import ReviewDecision
from childrenlk.services.request_service import RESOURCE, review_request
from tests.helpers import create_user, login, resource_payload, super_hero_payload


async def _submit(client, kind: str, payload: dict) -> str:
    response = await client.post(f"/api/organizer/{kind}-requests", json=payload)
    assert response.status_code == 200, response.text
    return response.json()["id"]


async def _count(database, model) -> int:
    async with database.session_factory() as session:
        return (await session.execute(select(func.count()).select_from(model))).scalar_one()


async def test_approve_publishes_resource(organizer_client, admin_client, client):
    request_id = await _submit(organizer_client, "resource", {
        "name": "Math Worksheet",
        "shortDescription": "Grade 3 addition",
        "targetAudience": "children",
        "ageGroup": "5-10",
    })

    created = (await organizer_client.get(f"/api/organizer/resource-requests/{request_id}")).json()
    assert created["status"] == "pending"
    assert created["ageGroup"] == "5-10"
    assert (await client.get("/api/public/resources")).json() == []

    response = await admin_client.patch(f"/api/admin/resource-requests/{request_id}", json={"status": "approved"})
    assert response.status_code == 200
    assert response.json() == {"success": True}

    reviewed = (await admin_client.get(f"/api/admin/resource-requests/{request_id}")).json()
    assert reviewed["status"] == "approved"
    assert reviewed["reviewedAt"] is not None
    assert reviewed["adminReason"] is None
    assert reviewed["organization"]["name"] == "Org A"

    published = (await client.get("/api/public/resources")).json()
    assert len(published) == 1
    assert published[0]["name"] == "Math Worksheet"
    assert published[0]["shortDescription"] == "Grade 3 addition"
    assert published[0]["organization"]["name"] == "Org A"

    detail = await client.get(f"/api/public/resources/{published[0]['id']}")
    assert detail.status_code == 200


async def test_deny_with_empty_reason_is_rejected(organizer_client, admin_client):
    request_id = await _submit(organizer_client, "resource", resource_payload())

    response = await admin_client.patch(
        f"/api/admin/resource-requests/{request_id}", json={"status": "denied", "adminReason": ""},
    )
    assert response.status_code == 400
    assert response.json()["detail"] == "Reason is required when denying"

    reviewed = (await admin_client.get(f"/api/admin/resource-requests/{request_id}")).json()
    assert reviewed["status"] == "pending"
    assert reviewed["reviewedAt"] is None


async def test_deny_records_reason_and_publishes_nothing(organizer_client, admin_client, database):
    request_id = await _submit(organizer_client, "resource", resource_payload())

    response = await admin_client.patch(
        f"/api/admin/resource-requests/{request_id}",
        json={"status": "denied", "adminReason": "  Document is unreadable "},
    )
    assert response.status_code == 200

    reviewed = (await organizer_client.get(f"/api/organizer/resource-requests/{request_id}")).json()
    assert reviewed["status"] == "denied"
    assert reviewed["adminReason"] == "Document is unreadable"
    assert await _count(database, Resource) == 0


@pytest.mark.parametrize("status", ["pending", "archived"])
async def test_unsupported_status_rejected(organizer_client, admin_client, status):
    request_id = await _submit(organizer_client, "resource", resource_payload())
    response = await admin_client.patch(f"/api/admin/resource-requests/{request_id}", json={"status": status})
    assert response.status_code == 400
    assert response.json()["detail"] == "status must be approved or denied"


async def test_second_review_conflicts(organizer_client, admin_client, database):
    request_id = await _submit(organizer_client, "resource", resource_payload())
    url = f"/api/admin/resource-requests/{request_id}"

    assert (await admin_client.patch(url, json={"status": "approved"})).status_code == 200

    again = await admin_client.patch(url, json={"status": "approved"})
    assert again.status_code == 400
    assert again.json()["detail"] == "Request already reviewed"

    flip = await admin_client.patch(url, json={"status": "denied", "adminReason": "changed my mind"})
    assert flip.status_code == 400
    assert flip.json()["detail"] == "Request already reviewed"

    assert await _count(database, Resource) == 1
    reviewed = (await admin_client.get(url)).json()
    assert reviewed["status"] == "approved"


async def test_review_requires_admin(organizer_client, client):
    request_id = await _submit(organizer_client, "resource", resource_payload())
    url = f"/api/admin/resource-requests/{request_id}"

    assert (await client.patch(url, json={"status": "approved"})).status_code == 401
    # Auth is checked before the body
    assert (await organizer_client.patch(url, json={"status": "bogus"})).status_code == 401


async def test_review_unknown_request(admin_client):
    response = await admin_client.patch(
        "/api/admin/media-requests/00000000-0000-0000-0000-000000000000", json={"status": "approved"},
    )
    assert response.status_code == 404


async def test_submit_forces_pending_and_registers_tags(organizer_client, database):
    request_id = await _submit(organizer_client, "resource", resource_payload(status="approved"))

    created = (await organizer_client.get(f"/api/organizer/resource-requests/{request_id}")).json()
    assert created["status"] == "pending"
    assert created["tags"] == ["reading", "Early Years"]
    assert created["documents"][0]["publicId"] == "docs/guide"

    async with database.session_factory() as session:
        names = (await session.execute(select(Tag.name).order_by(Tag.name))).scalars().all()
    assert names == ["Early Years", "reading"]


async def test_submit_missing_fields(organizer_client):
    response = await organizer_client.post("/api/organizer/resource-requests", json={"name": "  "})
    assert response.status_code == 400
    assert response.json()["detail"] == "Missing required fields: name, shortDescription"


async def test_super_hero_phone_checked(organizer_client):
    response = await organizer_client.post(
        "/api/organizer/super-hero-requests", json=super_hero_payload(phone="0771234567"),
    )
    assert response.status_code == 400
    assert response.json()["detail"] == "Phone must start with +94 followed by 9 digits (e.g. +94771234567)"


async def test_every_type_publishes_on_approval(organizer_client, admin_client, client, database):
    submissions = {
        "media": {
            "name": "Counting Song", "description": "Sing along", "contentType": "audio",
            "files": [{"url": "https://cdn/song.mp3", "publicId": "media/song"}],
        },
        "event": {
            "name": "Story Hour", "location": "Kandy Library", "startDate": "2026-11-01T10:00:00Z",
            "description": "Weekly reading",
        },
        "super-hero": super_hero_payload(),
    }
    for kind, payload in submissions.items():
        request_id = await _submit(organizer_client, kind, payload)
        response = await admin_client.patch(f"/api/admin/{kind}-requests/{request_id}", json={"status": "approved"})
        assert response.status_code == 200, response.text

    assert await _count(database, Media) == 1
    assert await _count(database, Event) == 1
    assert await _count(database, SuperHero) == 1

    media = (await client.get("/api/public/media")).json()
    assert media[0]["files"][0]["type"] == "audio"
    heroes = (await client.get("/api/public/super-heroes")).json()
    assert heroes[0]["phone"] == "+94771234567"
    events = (await client.get("/api/public/events")).json()
    assert events[0]["location"] == "Kandy Library"


async def test_admin_status_filter(organizer_client, admin_client):
    first = await _submit(organizer_client, "resource", resource_payload(name="First"))
    await _submit(organizer_client, "resource", resource_payload(name="Second"))
    await admin_client.patch(f"/api/admin/resource-requests/{first}", json={"status": "approved"})

    pending = (await admin_client.get("/api/admin/resource-requests", params={"status": "pending"})).json()
    assert [r["name"] for r in pending] == ["Second"]

    everything = (await admin_client.get("/api/admin/resource-requests")).json()
    assert [r["name"] for r in everything] == ["Second", "First"]


async def test_organizer_without_organization_cannot_submit(make_client, db_session):
    user = await create_user(db_session, "organizer")
    async with make_client() as c:
        await login(c, user.email)
        response = await c.post("/api/organizer/resource-requests", json=resource_payload())
        assert response.status_code == 400
        assert response.json()["detail"] == "No organization found"
        assert (await c.get("/api/organizer/resource-requests")).json() == []


async def test_stale_read_loses_to_concurrent_review(organizer_client, admin_user, database):
    """A reviewer holding a stale pending copy must not publish a second entity."""
    request_id = await _submit(organizer_client, "resource", resource_payload())
    reviewer = Principal(user=admin_user)

    async with database.session_factory() as slow, database.session_factory() as fast:
        result = await slow.execute(select(ResourceRequest).where(ResourceRequest.id == uuid.UUID(request_id)))
        stale = result.scalar_one()
        assert stale.status == "pending"
        await slow.commit()

        await review_request(fast, RESOURCE, stale.id, ReviewDecision(status="approved"), reviewer)

        with pytest.raises(Conflict):
            await review_request(slow, RESOURCE, stale.id, ReviewDecision(status="approved"), reviewer)

    assert await _count(database, Resource) == 1


async def test_approval_note_is_stored(organizer_client, admin_client):
    request_id = await _submit(organizer_client, "resource", resource_payload())
    url = f"/api/admin/resource-requests/{request_id}"

    response = await admin_client.patch(url, json={"status": "approved", "adminReason": " Great material "})
    assert response.status_code == 200

    reviewed = (await admin_client.get(url)).json()
    assert reviewed["status"] == "approved"
    assert reviewed["adminReason"] == "Great material"


async def test_malformed_request_id_is_not_found(organizer_client, admin_client):
    assert (await organizer_client.get("/api/organizer/resource-requests/not-a-uuid")).status_code == 404
    assert (await admin_client.get("/api/admin/event-requests/not-a-uuid")).status_code == 404

    response = await admin_client.patch("/api/admin/media-requests/not-a-uuid", json={"status": "approved"})
    assert response.status_code == 404
    assert response.json()["detail"] == "Media request not found"
