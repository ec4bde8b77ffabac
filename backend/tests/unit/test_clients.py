"""Tests for the Cloudinary and Brevo clients against a mocked transport."""

import hashlib
import json
from urllib.parse import parse_qs

import httpx
import pytest

from childrenlk.services.mailer import Mailer, MailerError, render
from childrenlk.services.media_host import MediaHost, UploadError, sign_params


def test_sign_params_sorts_and_appends_secret():
    expected = hashlib.sha1(b"folder=kids&timestamp=1700000000abc").hexdigest()
    assert sign_params({"timestamp": 1700000000, "folder": "kids"}, "abc") == expected


class TestMediaHost:
    async def test_upload_returns_url_and_public_id(self):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["url"] = str(request.url)
            seen["form"] = parse_qs(request.content.decode())
            return httpx.Response(200, json={"secure_url": "https://cdn/x.png", "public_id": "kids/x"})

        host = MediaHost("demo", "key", "secret", client=httpx.AsyncClient(transport=httpx.MockTransport(handler)))
        result = await host.upload("data:image/png;base64,AAAA", folder="kids", resource_type="image")

        assert result.url == "https://cdn/x.png"
        assert result.public_id == "kids/x"
        assert seen["url"] == "https://api.cloudinary.com/v1_1/demo/image/upload"
        assert seen["form"]["folder"] == ["kids"]
        assert seen["form"]["api_key"] == ["key"]
        assert "signature" in seen["form"]
        await host.aclose()

    async def test_default_folder(self):
        def handler(request):
            assert parse_qs(request.content.decode())["folder"] == ["childrenlk"]
            return httpx.Response(200, json={"secure_url": "u", "public_id": "p"})

        host = MediaHost("demo", "key", "secret", client=httpx.AsyncClient(transport=httpx.MockTransport(handler)))
        await host.upload("AAAA")

    async def test_provider_error_raises_upload_error(self):
        host = MediaHost(
            "demo", "key", "secret",
            client=httpx.AsyncClient(transport=httpx.MockTransport(lambda r: httpx.Response(500))),
        )
        with pytest.raises(UploadError):
            await host.upload("AAAA")


class TestMailer:
    async def test_send_otp_posts_brevo_payload(self):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["headers"] = request.headers
            seen["body"] = json.loads(request.content)
            return httpx.Response(201, json={"messageId": "1"})

        mailer = Mailer(
            "https://api.brevo.com/v3/smtp/email", "brevo-key", "Children.lk", "noreply@children.lk",
            client=httpx.AsyncClient(transport=httpx.MockTransport(handler)),
        )
        await mailer.send_otp("parent@example.com", "042817")

        assert seen["headers"]["api-key"] == "brevo-key"
        body = seen["body"]
        assert body["to"] == [{"email": "parent@example.com"}]
        assert body["sender"]["email"] == "noreply@children.lk"
        assert "042817" in body["htmlContent"]
        await mailer.aclose()

    async def test_rejection_raises_mailer_error(self):
        mailer = Mailer(
            "https://api.brevo.com/v3/smtp/email", "bad", "Children.lk", "noreply@children.lk",
            client=httpx.AsyncClient(transport=httpx.MockTransport(lambda r: httpx.Response(401))),
        )
        with pytest.raises(MailerError):
            await mailer.send("x@example.com", "Hi", "<p>Hi</p>")


def test_credentials_template_escapes_html():
    html = render(
        "email/organizer_credentials.html",
        name="<b>Nimal</b>", login_email="nimal@example.com", password="pw",
    )
    assert "&lt;b&gt;Nimal&lt;/b&gt;" in html
    assert "nimal@example.com" in html
