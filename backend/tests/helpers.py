"""Helpers for building test data and logging in."""

from faker import Faker
from httpx import AsyncClient

from childrenlk.models.organization import Organization
from childrenlk.models.user import User
from childrenlk.services.auth_service import hash_password

fake = Faker()

PASSWORD = "password123"


async def login(client: AsyncClient, email: str, password: str = PASSWORD) -> None:
    response = await client.post("/api/auth/login", json={"email": email, "password": password})
    assert response.status_code == 200, response.text


async def create_user(session, role: str, email: str | None = None, **fields) -> User:
    user = User(
        email=email or fake.unique.email(),
        name=fake.name(),
        hashed_password=hash_password(PASSWORD),
        role=role,
        **fields,
    )
    session.add(user)
    await session.commit()
    return user


async def create_organizer(session, org_name: str | None = None) -> tuple[User, Organization]:
    user = await create_user(session, "organizer")
    org = Organization(
        name=org_name or fake.company(),
        short_description="Helping children learn",
        contact_email=fake.email(),
        contact_phone="+94771234567",
        address="Colombo",
        user_id=user.id,
    )
    session.add(org)
    await session.commit()
    return user, org


def resource_payload(**overrides) -> dict:
    payload = {
        "name": "Reading Guide",
        "shortDescription": "A guide to early reading",
        "documents": [
            {"url": "https://res.cloudinary.com/demo/guide.pdf", "publicId": "docs/guide", "type": "pdf", "name": "Guide"},
        ],
        "tags": ["reading", "Early Years", "reading"],
        "targetAudience": "children",
    }
    payload.update(overrides)
    return payload


def super_hero_payload(**overrides) -> dict:
    payload = {
        "name": "Amara",
        "icon": "🦸",
        "iconType": "emoji",
        "phone": "+94771234567",
        "shortDescription": "Volunteer tutor",
    }
    payload.update(overrides)
    return payload
