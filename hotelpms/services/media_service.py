"""
Media upload client
Forwards uploaded files to Cloudinary and returns the secure URL of the
stored asset
"""
import logging
from typing import Optional

import cloudinary
import cloudinary.exceptions
import cloudinary.uploader

from hotelpms.config import settings

logger = logging.getLogger(__name__)


class MediaUploadError(Exception):
    """Upload to the media service failed"""


def public_id_from_url(url: str) -> str:
    """Last path segment of an asset URL without its extension"""
    return url.rstrip('/').rsplit('/', 1)[-1].split('.')[0]


class MediaUploader:
    """Cloudinary uploader"""

    def __init__(
        self,
        cloud_name: str,
        api_key: str,
        api_secret: str,
        folder: str = "hotel_images",
        timeout: float = 30.0,
    ):
        self.cloud_name = cloud_name
        self.api_key = api_key
        self.api_secret = api_secret
        self.folder = folder
        self.timeout = timeout

    @classmethod
    def from_settings(cls) -> "MediaUploader":
        return cls(
            cloud_name=settings.CLOUDINARY_CLOUD_NAME,
            api_key=settings.CLOUDINARY_API_KEY,
            api_secret=settings.CLOUDINARY_API_SECRET,
            folder=settings.CLOUDINARY_UPLOAD_FOLDER,
            timeout=settings.MEDIA_UPLOAD_TIMEOUT,
        )

    @property
    def is_configured(self) -> bool:
        return bool(self.cloud_name and self.api_key and self.api_secret)

    def configure(self):
        cloudinary.config(
            cloud_name=self.cloud_name,
            api_key=self.api_key,
            api_secret=self.api_secret,
            secure=True
        )

    def upload(self, content: bytes, filename: str,
               content_type: Optional[str] = None) -> str:
        """Upload file bytes and return the asset's secure URL"""
        if not self.is_configured:
            raise MediaUploadError("Media upload service is not configured")

        self.configure()
        try:
            result = cloudinary.uploader.upload(
                content,
                folder=self.folder,
                resource_type="image",
                timeout=self.timeout
            )
        except cloudinary.exceptions.Error as e:
            logger.error(f"Upload of {filename} to media service failed: {e}")
            raise MediaUploadError(f"Upload failed: {e}") from e

        secure_url = result.get("secure_url") if isinstance(result, dict) else None
        if not secure_url:
            raise MediaUploadError("Failed to get secure URL from the media service")

        logger.info(f"Uploaded {filename} ({content_type or 'unknown type'}) to {secure_url}")
        return secure_url


def get_media_uploader() -> MediaUploader:
    """Dependency: uploader built from settings"""
    return MediaUploader.from_settings()
