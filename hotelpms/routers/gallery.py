"""
Gallery routes
"""
import logging
from typing import List
from fastapi import APIRouter, Depends, HTTPException, status, UploadFile, File
from sqlalchemy.orm import Session
from hotelpms.database import get_db
from hotelpms.models.tables import Hotel
from hotelpms.models.schemas import HotelImageResponse
from hotelpms.routers.upload import upload_to_media
from hotelpms.security.auth import get_current_hotel
from hotelpms.services.gallery_service import GalleryService
from hotelpms.services.media_service import MediaUploader, get_media_uploader

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/gallery", tags=["Gallery"])


@router.get("", response_model=List[HotelImageResponse])
def list_images(
    db: Session = Depends(get_db),
    hotel: Hotel = Depends(get_current_hotel)
):
    """Gallery images, newest first"""
    return GalleryService(db, hotel).get_images()


@router.post("", response_model=List[HotelImageResponse])
def upload_images(
    files: List[UploadFile] = File(...),
    db: Session = Depends(get_db),
    hotel: Hotel = Depends(get_current_hotel),
    uploader: MediaUploader = Depends(get_media_uploader)
):
    """Upload one or more images to the gallery"""
    service = GalleryService(db, hotel)
    try:
        service.check_upload([f.content_type for f in files])
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

    images = []
    for file in files:
        url = upload_to_media(uploader, file)
        images.append(service.add_image(url))
    logger.info(f"{len(images)} image(s) uploaded to hotel {hotel.id}")
    return images


@router.delete("/{image_id}")
def delete_image(
    image_id: str,
    db: Session = Depends(get_db),
    hotel: Hotel = Depends(get_current_hotel)
):
    try:
        GalleryService(db, hotel).delete_image(image_id)
        return {"message": "Image deleted"}
    except LookupError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
