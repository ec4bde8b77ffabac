"""API router aggregation."""

from fastapi import APIRouter

from childrenlk.api.admin import router as admin_router
from childrenlk.api.auth import router as auth_router
from childrenlk.api.organizer import router as organizer_router
from childrenlk.api.profile import router as profile_router
from childrenlk.api.public import router as public_router
from childrenlk.api.tags import router as tags_router
from childrenlk.api.upload import router as upload_router

router = APIRouter(prefix="/api")

router.include_router(auth_router)
router.include_router(profile_router)
router.include_router(organizer_router)
router.include_router(admin_router)
router.include_router(public_router)
router.include_router(upload_router)
router.include_router(tags_router)
