"""
Media upload proxy
Receives one multipart file and forwards it to the media service
"""
import logging
from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, status, UploadFile, File
from hotelpms.models.schemas import UploadResponse
from hotelpms.security.auth import AuthUser, get_current_user
from hotelpms.services.media_service import (
    MediaUploader, MediaUploadError, get_media_uploader
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/upload", tags=["Media"])


def upload_to_media(uploader: MediaUploader, file: Optional[UploadFile]) -> str:
    """Forward an UploadFile and return its secure URL, mapping failures to HTTP errors"""
    if file is None or not file.filename:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="No file uploaded")

    content = file.file.read()
    try:
        return uploader.upload(content, file.filename, file.content_type)
    except MediaUploadError as e:
        logger.error(f"Media upload failed for {file.filename}: {e}")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e))


@router.post("", response_model=UploadResponse)
def upload_file(
    file: Optional[UploadFile] = File(None),
    uploader: MediaUploader = Depends(get_media_uploader),
    current_user: AuthUser = Depends(get_current_user)
):
    """Upload one file and return its secure URL"""
    return UploadResponse(secure_url=upload_to_media(uploader, file))
