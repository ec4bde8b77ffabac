"""Brevo transactional email client with Jinja2-rendered bodies."""

import logging

import httpx
from jinja2 import Environment, PackageLoader, select_autoescape

logger = logging.getLogger(__name__)

_templates = Environment(
    loader=PackageLoader("childrenlk", "templates"),
    autoescape=select_autoescape(["html"]),
)


class MailerError(Exception):
    """Raised when the email provider rejects a message."""


def render(template_name: str, **context) -> str:
    return _templates.get_template(template_name).render(**context)


class Mailer:
    """Sends one message per call; callers decide whether a failure matters."""

    def __init__(
        self,
        api_url: str,
        api_key: str,
        sender_name: str,
        sender_email: str,
        timeout: float = 30,
        client: httpx.AsyncClient | None = None,
    ):
        self.api_url = api_url
        self.api_key = api_key
        self.sender = {"name": sender_name, "email": sender_email}
        self._client = client or httpx.AsyncClient(timeout=timeout)

    async def send(self, to: str, subject: str, html: str) -> None:
        payload = {
            "sender": self.sender,
            "to": [{"email": to}],
            "subject": subject,
            "htmlContent": html,
        }
        try:
            response = await self._client.post(
                self.api_url,
                json=payload,
                headers={"api-key": self.api_key, "accept": "application/json"},
            )
            response.raise_for_status()
        except httpx.HTTPError as e:
            raise MailerError(f"Brevo rejected email to {to}: {e}") from e
        logger.info("Sent '%s' to %s", subject, to)

    async def send_otp(self, to: str, otp: str, ttl_minutes: int = 10) -> None:
        html = render("email/otp.html", otp=otp, ttl_minutes=ttl_minutes)
        await self.send(to, "Your password reset OTP - Children.lk", html)

    async def send_organizer_credentials(self, to: str, name: str, login_email: str, password: str) -> None:
        html = render("email/organizer_credentials.html", name=name, login_email=login_email, password=password)
        await self.send(to, "Your organizer account - Children.lk", html)

    async def aclose(self) -> None:
        await self._client.aclose()
