"""Signup, login, profile and OTP password reset."""

from datetime import datetime, timedelta, timezone

from sqlalchemy import select

from childrenlk.models.user import User
from tests.helpers import PASSWORD, login


async def _load_user(database, email: str) -> User:
    async with database.session_factory() as session:
        return (await session.execute(select(User).where(User.email == email))).scalar_one()


class TestSessions:
    async def test_signup_then_login(self, client):
        response = await client.post(
            "/api/auth/signup", json={"email": "Parent@Example.com", "password": "secret1", "name": "Kamala"},
        )
        assert response.status_code == 200
        assert response.json()["role"] == "parent"
        assert response.json()["email"] == "parent@example.com"

        await login(client, "parent@example.com", "secret1")
        me = await client.get("/api/auth/me")
        assert me.json()["name"] == "Kamala"

    async def test_duplicate_email(self, client, parent_user):
        response = await client.post(
            "/api/auth/signup", json={"email": parent_user.email, "password": "secret1", "name": "Again"},
        )
        assert response.status_code == 400
        assert response.json()["detail"] == "An account with this email already exists"

    async def test_short_password(self, client):
        response = await client.post("/api/auth/signup", json={"email": "a@example.com", "password": "123", "name": "A"})
        assert response.status_code == 400

    async def test_bad_credentials(self, client, parent_user):
        response = await client.post("/api/auth/login", json={"email": parent_user.email, "password": "nope"})
        assert response.status_code == 401
        assert response.json()["detail"] == "Invalid email or password"

    async def test_logout_clears_session(self, parent_client):
        assert (await parent_client.get("/api/auth/me")).status_code == 200
        await parent_client.post("/api/auth/logout")
        assert (await parent_client.get("/api/auth/me")).status_code == 401


class TestProfile:
    async def test_update_and_read(self, parent_client):
        response = await parent_client.patch(
            "/api/profile", json={"name": "New Name", "phone": "+94712345678", "address": "Galle"},
        )
        assert response.status_code == 200
        profile = (await parent_client.get("/api/profile")).json()
        assert profile["name"] == "New Name"
        assert profile["phone"] == "+94712345678"
        assert profile["address"] == "Galle"

    async def test_invalid_phone(self, parent_client):
        response = await parent_client.patch("/api/profile", json={"phone": "0712345678"})
        assert response.status_code == 400
        assert response.json()["detail"].startswith("Phone must start with +94")

    async def test_blank_phone_clears(self, parent_client):
        await parent_client.patch("/api/profile", json={"phone": "+94712345678"})
        await parent_client.patch("/api/profile", json={"phone": ""})
        assert (await parent_client.get("/api/profile")).json()["phone"] is None

    async def test_change_password(self, parent_client, parent_user, client):
        wrong = await parent_client.post(
            "/api/profile/change-password", json={"currentPassword": "nope", "newPassword": "another1"},
        )
        assert wrong.status_code == 400
        assert wrong.json()["detail"] == "Current password is incorrect"

        ok = await parent_client.post(
            "/api/profile/change-password", json={"currentPassword": PASSWORD, "newPassword": "another1"},
        )
        assert ok.status_code == 200
        await login(client, parent_user.email, "another1")


class TestPasswordReset:
    async def test_otp_round_trip(self, client, parent_user, mailer, database):
        response = await client.post("/api/auth/forgot-password", json={"email": parent_user.email})
        assert response.status_code == 200

        assert len(mailer.sent) == 1
        otp = mailer.sent[0]["otp"]
        assert len(otp) == 6 and otp.isdigit()

        stored = await _load_user(database, parent_user.email)
        assert stored.otp == otp
        expires = stored.otp_expires_at.replace(tzinfo=stored.otp_expires_at.tzinfo or timezone.utc)
        expected = datetime.now(timezone.utc) + timedelta(minutes=10)
        assert abs((expires - expected).total_seconds()) < 60

        reset = await client.post(
            "/api/auth/reset-password", json={"email": parent_user.email, "otp": otp, "newPassword": "brandnew1"},
        )
        assert reset.status_code == 200

        cleared = await _load_user(database, parent_user.email)
        assert cleared.otp is None
        assert cleared.otp_expires_at is None
        await login(client, parent_user.email, "brandnew1")

        reused = await client.post(
            "/api/auth/reset-password", json={"email": parent_user.email, "otp": otp, "newPassword": "again123"},
        )
        assert reused.status_code == 400
        assert reused.json()["detail"] == "Invalid or expired OTP"

    async def test_wrong_otp(self, client, parent_user, mailer):
        await client.post("/api/auth/forgot-password", json={"email": parent_user.email})
        wrong = "000000" if mailer.sent[0]["otp"] != "000000" else "111111"
        response = await client.post(
            "/api/auth/reset-password", json={"email": parent_user.email, "otp": wrong, "newPassword": "brandnew1"},
        )
        assert response.status_code == 400
        assert response.json()["detail"] == "Invalid or expired OTP"

    async def test_expired_otp(self, client, parent_user, database):
        async with database.session_factory() as session:
            user = (await session.execute(select(User).where(User.id == parent_user.id))).scalar_one()
            user.otp = "123456"
            user.otp_expires_at = datetime.now(timezone.utc) - timedelta(minutes=1)
            await session.commit()

        response = await client.post(
            "/api/auth/reset-password", json={"email": parent_user.email, "otp": "123456", "newPassword": "brandnew1"},
        )
        assert response.status_code == 400

    async def test_unknown_email(self, client):
        response = await client.post("/api/auth/forgot-password", json={"email": "nobody@example.com"})
        assert response.status_code == 404
        assert response.json()["detail"] == "No account found with this email"

    async def test_delivery_failure_still_succeeds(self, client, parent_user, mailer, database):
        mailer.fail = True
        response = await client.post("/api/auth/forgot-password", json={"email": parent_user.email})
        assert response.status_code == 200
        assert (await _load_user(database, parent_user.email)).otp is not None
