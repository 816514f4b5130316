"""
Reservation service
Dashboard reservation list and form handling. No availability or overlap
checks are made: reservations are stored as submitted once the form is valid
"""
import logging
from datetime import datetime
from typing import List, Optional
from sqlalchemy.orm import Session, joinedload
from hotelpms.models.tables import Reservation, Room
from hotelpms.models.schemas import ReservationCreate, ReservationUpdate, to_naive_utc
from hotelpms.services.pagination import paginate

logger = logging.getLogger(__name__)

ITEMS_PER_PAGE = 10

CHECK_OUT_BEFORE_CHECK_IN = "Check-out date must be after check-in date"


def validate_stay_dates(check_in: Optional[datetime], check_out: Optional[datetime]) -> None:
    """The only date rule: check-out strictly after check-in"""
    if check_in is None or check_out is None:
        raise ValueError("Check-in and check-out dates are required")
    if to_naive_utc(check_out) <= to_naive_utc(check_in):
        raise ValueError(CHECK_OUT_BEFORE_CHECK_IN)


class ReservationService:
    """Reservation service"""

    def __init__(self, db: Session, hotel_id: str):
        self.db = db
        self.hotel_id = hotel_id

    def get_reservations(self) -> List[Reservation]:
        """All reservations of the hotel ordered by check-in"""
        return self.db.query(Reservation).options(
            joinedload(Reservation.room).joinedload(Room.room_type)
        ).filter(
            Reservation.hotel_id == self.hotel_id
        ).order_by(Reservation.check_in.asc()).all()

    def get_reservation_page(self, page: int = 1) -> dict:
        return paginate(self.get_reservations(), page, ITEMS_PER_PAGE)

    def get_reservation(self, reservation_id: str) -> Optional[Reservation]:
        return self.db.query(Reservation).filter(
            Reservation.id == reservation_id,
            Reservation.hotel_id == self.hotel_id
        ).first()

    def _check_room(self, room_id: Optional[str]):
        if not room_id:
            return
        room = self.db.query(Room).filter(
            Room.id == room_id,
            Room.hotel_id == self.hotel_id
        ).first()
        if not room:
            raise ValueError("Room not found")

    def create_reservation(self, data: ReservationCreate) -> Reservation:
        validate_stay_dates(data.check_in, data.check_out)
        self._check_room(data.room_id)

        reservation = Reservation(hotel_id=self.hotel_id, **data.model_dump())
        self.db.add(reservation)
        self.db.commit()
        self.db.refresh(reservation)
        logger.info(f"Reservation {reservation.id} created for {reservation.guest_name}")
        return reservation

    def update_reservation(self, reservation_id: str, data: ReservationUpdate) -> Reservation:
        reservation = self.get_reservation(reservation_id)
        if not reservation:
            raise LookupError("Reservation not found")

        update_data = {
            key: value for key, value in data.model_dump(exclude_unset=True).items()
            if value is not None or key in ('room_id', 'guest_phone', 'special_requests', 'notes', 'external_id')
        }

        validate_stay_dates(
            update_data.get('check_in', reservation.check_in),
            update_data.get('check_out', reservation.check_out)
        )
        if 'room_id' in update_data:
            self._check_room(update_data['room_id'])

        for key, value in update_data.items():
            setattr(reservation, key, value)

        self.db.commit()
        self.db.refresh(reservation)
        return reservation

    def delete_reservation(self, reservation_id: str) -> bool:
        reservation = self.get_reservation(reservation_id)
        if not reservation:
            raise LookupError("Reservation not found")

        self.db.delete(reservation)
        self.db.commit()
        logger.info(f"Reservation {reservation_id} deleted")
        return True
