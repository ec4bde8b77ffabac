"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.middleware.gzip import GZipMiddleware
from starlette.middleware.sessions import SessionMiddleware

import childrenlk.models  # noqa: F401  registers every model
from childrenlk.api import router as api_router
from childrenlk.config import Settings, get_settings
from childrenlk.errors import AppError
from childrenlk.models.base import Database
from childrenlk.services.mailer import Mailer
from childrenlk.services.media_host import MediaHost

logger = logging.getLogger(__name__)

# Pydantic error types reported together as missing fields
_MISSING_TYPES = {"missing", "string_too_short"}


def validation_message(errors: list[dict]) -> str:
    """Collapse pydantic errors into one readable message.

    Custom validator messages are passed through verbatim; missing or blank
    fields are listed by their wire name.
    """
    missing = []
    messages = []
    for error in errors:
        field = error["loc"][-1] if error.get("loc") else None
        if error["type"] in _MISSING_TYPES and isinstance(field, str) and field != "body":
            if field not in missing:
                missing.append(field)
        elif error["type"] == "value_error" and "error" in error.get("ctx", {}):
            messages.append(str(error["ctx"]["error"]))
        elif isinstance(field, str) and field != "body":
            messages.append(f"{field}: {error['msg']}")
        else:
            messages.append(error["msg"])
    if missing:
        return "Missing required fields: " + ", ".join(missing)
    return messages[0] if messages else "Invalid request"


async def app_error_handler(request: Request, exc: AppError):
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


async def validation_error_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(status_code=400, content={"detail": validation_message(exc.errors())})


async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"detail": "Something went wrong"})


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Build the database and third-party clients; close them on shutdown."""
    settings: Settings = app.state.settings
    logger.info("Starting %s...", settings.app_name)

    app.state.database = Database(settings.database_url, echo=settings.debug)
    app.state.media_host = MediaHost(
        cloud_name=settings.cloudinary_cloud_name,
        api_key=settings.cloudinary_api_key,
        api_secret=settings.cloudinary_api_secret,
        default_folder=settings.cloudinary_folder,
        timeout=settings.upload_timeout,
    )
    app.state.mailer = Mailer(
        api_url=settings.brevo_api_url,
        api_key=settings.brevo_api_key,
        sender_name=settings.brevo_sender_name,
        sender_email=settings.brevo_sender_email,
    )
    yield
    logger.info("Shutting down...")
    await app.state.media_host.aclose()
    await app.state.mailer.aclose()
    await app.state.database.dispose()


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = FastAPI(
        title=settings.app_name,
        description="Content moderation backend for Children.lk",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.settings = settings

    app.add_middleware(GZipMiddleware, minimum_size=500)
    app.add_middleware(
        SessionMiddleware,
        secret_key=settings.secret_key,
        max_age=settings.session_max_age,
        same_site="lax",
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)

    app.include_router(api_router)

    @app.get("/health")
    async def health_check():
        try:
            await app.state.database.ping()
        except Exception:
            logger.exception("Database health check failed")
            return JSONResponse(
                status_code=503,
                content={"status": "degraded", "app": settings.app_name, "database": False},
            )
        return {"status": "healthy", "app": settings.app_name, "database": True}

    return app


app = create_app()
