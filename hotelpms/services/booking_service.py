"""
Booking engine service
Guest self-booking from the public hotel page. Availability only compares
room type capacity with the party size; dates are not checked for conflicts
"""
import logging
from typing import List, Optional
from sqlalchemy.orm import Session
from hotelpms.models.tables import (
    Hotel, RoomType, Reservation, ReservationStatus, ReservationSource
)
from hotelpms.models.schemas import BookingRequest
from hotelpms.security.auth import AuthUser
from hotelpms.services.reservation_service import validate_stay_dates

logger = logging.getLogger(__name__)


class BookingAuthRequired(Exception):
    """Booking attempted without a signed-in guest"""


class BookingService:
    """Booking engine service"""

    def __init__(self, db: Session, hotel: Hotel):
        self.db = db
        self.hotel = hotel

    def get_available_room_types(self, adults: int = 1, children: int = 0) -> List[RoomType]:
        """Room types large enough for the party"""
        guests = adults + children
        return self.db.query(RoomType).filter(
            RoomType.hotel_id == self.hotel.id,
            RoomType.capacity >= guests
        ).order_by(RoomType.name).all()

    def create_booking(self, data: BookingRequest, user: Optional[AuthUser]) -> Reservation:
        if not data.room_type_id or not data.check_in or not data.check_out:
            raise ValueError("Please complete all fields")
        if user is None:
            raise BookingAuthRequired("Please sign in to complete your booking")
        if not self.hotel.booking_enabled:
            raise ValueError("Online booking is not available for this hotel")

        validate_stay_dates(data.check_in, data.check_out)

        room_type = self.db.query(RoomType).filter(
            RoomType.id == data.room_type_id,
            RoomType.hotel_id == self.hotel.id
        ).first()
        if not room_type:
            raise ValueError("Room type not found")

        reservation = Reservation(
            hotel_id=self.hotel.id,
            room_type_id=room_type.id,
            guest_id=user.id,
            guest_email=user.email,
            source=ReservationSource.DIRECT,
            check_in=data.check_in,
            check_out=data.check_out,
            adults=data.adults,
            children=data.children,
            status=ReservationStatus.PENDING
        )
        self.db.add(reservation)
        self.db.commit()
        self.db.refresh(reservation)
        logger.info(f"Booking {reservation.id} created by guest {user.id} at hotel {self.hotel.id}")
        return reservation
