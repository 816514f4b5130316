"""
Hotel routes
The operator's hotel record, onboarding check and public profile editing
"""
import logging
from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, status, UploadFile, File
from sqlalchemy.orm import Session
from hotelpms.database import get_db
from hotelpms.models.tables import Hotel
from hotelpms.models.schemas import (
    HotelCreate, HotelUpdate, HotelResponse, AmenityCreate, ServiceItem,
    OnboardingResponse
)
from hotelpms.routers.upload import upload_to_media
from hotelpms.security.auth import AuthUser, get_current_user, get_current_hotel
from hotelpms.services.hotel_service import HotelService
from hotelpms.services.media_service import MediaUploader, get_media_uploader

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/hotel", tags=["Hotel"])


@router.get("", response_model=HotelResponse)
def get_hotel(hotel: Hotel = Depends(get_current_hotel)):
    """Current operator's hotel"""
    return hotel


@router.post("", response_model=HotelResponse)
def create_hotel(
    data: HotelCreate,
    db: Session = Depends(get_db),
    current_user: AuthUser = Depends(get_current_user)
):
    """Create the operator's hotel"""
    service = HotelService(db)
    try:
        return service.create_hotel(current_user.id, data)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.put("", response_model=HotelResponse)
def update_hotel(
    data: HotelUpdate,
    db: Session = Depends(get_db),
    hotel: Hotel = Depends(get_current_hotel)
):
    """Update hotel information"""
    return HotelService(db).update_hotel(hotel, data)


@router.get("/onboarding", response_model=OnboardingResponse)
def get_onboarding(
    db: Session = Depends(get_db),
    current_user: AuthUser = Depends(get_current_user)
):
    """Whether the welcome screen should be shown"""
    return OnboardingResponse(show_welcome=HotelService(db).needs_onboarding(current_user.id))


# ============== Amenities / services ==============

@router.post("/amenities", response_model=HotelResponse)
def add_amenity(
    data: AmenityCreate,
    db: Session = Depends(get_db),
    hotel: Hotel = Depends(get_current_hotel)
):
    try:
        return HotelService(db).add_amenity(hotel, data.name)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.delete("/amenities/{name}", response_model=HotelResponse)
def remove_amenity(
    name: str,
    db: Session = Depends(get_db),
    hotel: Hotel = Depends(get_current_hotel)
):
    try:
        return HotelService(db).remove_amenity(hotel, name)
    except LookupError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.post("/services", response_model=HotelResponse)
def add_service(
    data: ServiceItem,
    db: Session = Depends(get_db),
    hotel: Hotel = Depends(get_current_hotel)
):
    try:
        return HotelService(db).add_service(hotel, data)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.delete("/services/{index}", response_model=HotelResponse)
def remove_service(
    index: int,
    db: Session = Depends(get_db),
    hotel: Hotel = Depends(get_current_hotel)
):
    try:
        return HotelService(db).remove_service(hotel, index)
    except LookupError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


# ============== Logo / cover ==============

def _replace_image(db: Session, hotel: Hotel, field: str,
                   file: Optional[UploadFile], uploader: MediaUploader) -> Hotel:
    url = upload_to_media(uploader, file)
    logger.info(f"Hotel {hotel.id} {field} replaced")
    return HotelService(db).set_image_url(hotel, field, url)


@router.put("/logo", response_model=HotelResponse)
def update_logo(
    file: Optional[UploadFile] = File(None),
    db: Session = Depends(get_db),
    hotel: Hotel = Depends(get_current_hotel),
    uploader: MediaUploader = Depends(get_media_uploader)
):
    """Upload a new logo"""
    return _replace_image(db, hotel, 'logo_url', file, uploader)


@router.put("/cover", response_model=HotelResponse)
def update_cover(
    file: Optional[UploadFile] = File(None),
    db: Session = Depends(get_db),
    hotel: Hotel = Depends(get_current_hotel),
    uploader: MediaUploader = Depends(get_media_uploader)
):
    """Upload a new cover image"""
    return _replace_image(db, hotel, 'cover_url', file, uploader)
