"""Cloudinary upload client (signed REST upload over httpx)."""

import hashlib
import logging
import time
from dataclasses import dataclass

import httpx

logger = logging.getLogger(__name__)

CLOUDINARY_API_BASE = "https://api.cloudinary.com/v1_1"
RESOURCE_TYPES = ("image", "video", "raw", "auto")


class UploadError(Exception):
    """Raised when the media host rejects or fails an upload."""


@dataclass
class UploadResult:
    url: str
    public_id: str


def sign_params(params: dict, api_secret: str) -> str:
    """Cloudinary signature: sha1 of the sorted ``key=value`` pairs followed by the secret."""
    to_sign = "&".join(f"{key}={params[key]}" for key in sorted(params) if params[key] not in (None, ""))
    return hashlib.sha1((to_sign + api_secret).encode("utf-8")).hexdigest()


class MediaHost:
    """Forwards base64 payloads to Cloudinary; one attempt per call, no retries."""

    def __init__(
        self,
        cloud_name: str,
        api_key: str,
        api_secret: str,
        default_folder: str = "childrenlk",
        timeout: float = 120,
        client: httpx.AsyncClient | None = None,
    ):
        self.cloud_name = cloud_name
        self.api_key = api_key
        self.api_secret = api_secret
        self.default_folder = default_folder
        self._client = client or httpx.AsyncClient(timeout=timeout)

    async def upload(self, file: str, folder: str | None = None, resource_type: str = "auto") -> UploadResult:
        if resource_type not in RESOURCE_TYPES:
            raise ValueError(f"Unsupported resource type: {resource_type}")

        params = {
            "folder": folder or self.default_folder,
            "timestamp": int(time.time()),
        }
        data = {
            **params,
            "file": file,
            "api_key": self.api_key,
            "signature": sign_params(params, self.api_secret),
        }
        url = f"{CLOUDINARY_API_BASE}/{self.cloud_name}/{resource_type}/upload"

        try:
            response = await self._client.post(url, data=data)
            response.raise_for_status()
        except httpx.HTTPError as e:
            raise UploadError(f"Cloudinary upload failed: {e}") from e

        body = response.json()
        logger.info("Uploaded %s to %s (%s)", body.get("public_id"), params["folder"], resource_type)
        return UploadResult(url=body["secure_url"], public_id=body["public_id"])

    async def aclose(self) -> None:
        await self._client.aclose()
