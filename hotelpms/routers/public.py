"""
Public hotel page routes
No operator token is needed; bookings need a signed-in guest
"""
import logging
from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException, status, Query
from sqlalchemy.orm import Session
from hotelpms.database import get_db
from hotelpms.models.tables import Hotel
from hotelpms.models.schemas import (
    PublicHotelResponse, ReviewResponse, RoomTypeResponse, BookingRequest,
    ReservationResponse, ChatRequest, ChatResponse
)
from hotelpms.security.auth import AuthUser, get_optional_user
from hotelpms.services.booking_service import BookingService, BookingAuthRequired
from hotelpms.services.chat_service import chat
from hotelpms.services.gallery_service import GalleryService
from hotelpms.services.gallery_view import GalleryView, build_gallery
from hotelpms.services.hotel_service import HotelService
from hotelpms.services.review_service import ReviewService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/public/hotels", tags=["Public"])


def _get_public_hotel(db: Session, hotel_id: str) -> Hotel:
    hotel = HotelService(db).get_hotel(hotel_id)
    if not hotel or not hotel.public_profile:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Hotel not found")
    return hotel


@router.get("/{hotel_id}", response_model=PublicHotelResponse)
def get_public_hotel(hotel_id: str, db: Session = Depends(get_db)):
    """Public hotel page"""
    data = HotelService(db).get_public_hotel(hotel_id)
    if data is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Hotel not found")
    return data


@router.get("/{hotel_id}/reviews", response_model=List[ReviewResponse])
def get_public_reviews(hotel_id: str, db: Session = Depends(get_db)):
    """Most recent published reviews"""
    hotel = _get_public_hotel(db, hotel_id)
    return ReviewService(db, hotel.id).get_public_reviews()


@router.get("/{hotel_id}/gallery")
def get_public_gallery(
    hotel_id: str,
    view: GalleryView = GalleryView.CAROUSEL,
    index: int = 0,
    page: int = Query(1),
    db: Session = Depends(get_db)
):
    """Gallery as a carousel position or a grid page"""
    hotel = _get_public_hotel(db, hotel_id)
    images = GalleryService(db, hotel).get_public_images()
    return build_gallery(images, view, index=index, page=page)


@router.get("/{hotel_id}/availability", response_model=List[RoomTypeResponse])
def get_availability(
    hotel_id: str,
    adults: int = Query(1, ge=1),
    children: int = Query(0, ge=0),
    db: Session = Depends(get_db)
):
    """Room types that fit the party"""
    hotel = _get_public_hotel(db, hotel_id)
    return BookingService(db, hotel).get_available_room_types(adults, children)


@router.post("/{hotel_id}/bookings", response_model=ReservationResponse)
def create_booking(
    hotel_id: str,
    data: BookingRequest,
    db: Session = Depends(get_db),
    current_user: Optional[AuthUser] = Depends(get_optional_user)
):
    """Guest self-booking"""
    hotel = _get_public_hotel(db, hotel_id)
    try:
        return BookingService(db, hotel).create_booking(data, current_user)
    except BookingAuthRequired as e:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.post("/{hotel_id}/chat", response_model=ChatResponse)
def chat_with_assistant(
    hotel_id: str,
    data: ChatRequest,
    db: Session = Depends(get_db)
):
    """Simulated assistant"""
    hotel = _get_public_hotel(db, hotel_id)
    if not hotel.chatbot_enabled:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Chat assistant is not available for this hotel"
        )
    try:
        return chat(data.message, data.history)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
