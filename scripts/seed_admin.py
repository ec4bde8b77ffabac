"""Create the first admin account.

Does nothing if any admin already exists. The password defaults to
``admin123``; override it with ``ADMIN_PASSWORD`` and change it after the
first login.

Usage:
    python -m scripts.seed_admin
    ADMIN_EMAIL=ops@children.lk ADMIN_PASSWORD=... python -m scripts.seed_admin
"""

import asyncio
import os

from sqlalchemy import select

import childrenlk.models  # noqa: F401  registers every model
from childrenlk.config import get_settings
from childrenlk.models.base import Database
from childrenlk.models.user import User
from childrenlk.services.auth_service import hash_password

settings = get_settings()

DEFAULT_EMAIL = "admin@children.lk"
DEFAULT_PASSWORD = "admin123"


async def seed() -> None:
    email = os.environ.get("ADMIN_EMAIL", DEFAULT_EMAIL).strip().lower()
    password = os.environ.get("ADMIN_PASSWORD", DEFAULT_PASSWORD)

    database = Database(settings.database_url)
    try:
        async with database.session_factory() as db:
            existing = (await db.execute(select(User).where(User.role == "admin").limit(1))).scalar_one_or_none()
            if existing:
                print(f"Admin already exists: {existing.email}")
                return

            db.add(User(email=email, name="Admin", hashed_password=hash_password(password), role="admin"))
            await db.commit()
            print(f"Admin user created: {email}")
    finally:
        await database.dispose()


if __name__ == "__main__":
    asyncio.run(seed())
