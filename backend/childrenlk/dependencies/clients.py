"""Third-party clients owned by the application lifespan."""

from fastapi import Request

from childrenlk.config import Settings
from childrenlk.services.mailer import Mailer
from childrenlk.services.media_host import MediaHost


def get_settings_from_app(request: Request) -> Settings:
    return request.app.state.settings


def get_media_host(request: Request) -> MediaHost:
    return request.app.state.media_host


def get_mailer(request: Request) -> Mailer:
    return request.app.state.mailer
