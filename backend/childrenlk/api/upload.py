"""Upload proxy to the media host."""

import logging

from fastapi import APIRouter, Depends

from childrenlk.dependencies.auth import require_user_api
from childrenlk.dependencies.clients import get_media_host
from childrenlk.errors import AppError
from childrenlk.models.user import User
from childrenlk.schemas.site import UploadRequest, UploadResponse
from childrenlk.services.media_host import MediaHost, UploadError

logger = logging.getLogger(__name__)

router = APIRouter(tags=["upload"])


@router.post("/upload", response_model=UploadResponse)
async def upload(
    body: UploadRequest,
    user: User = Depends(require_user_api),
    media_host: MediaHost = Depends(get_media_host),
):
    """Forward a base64 file to the media host and return its URL and public id."""
    try:
        result = await media_host.upload(body.file, body.folder, body.resource_type)
    except UploadError:
        logger.exception("Upload by %s failed", user.email)
        raise AppError("Upload failed")
    return UploadResponse(url=result.url, public_id=result.public_id)
