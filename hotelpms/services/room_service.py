"""
Room service
Rooms and room types of one hotel
"""
import logging
from typing import List, Optional
from sqlalchemy.orm import Session, joinedload
from hotelpms.models.tables import Room, RoomType, RoomStatus, Reservation
from hotelpms.models.schemas import (
    RoomCreate, RoomUpdate, RoomTypeCreate, RoomTypeUpdate
)

logger = logging.getLogger(__name__)

# Shown for rooms without an uploaded photo
DEFAULT_ROOM_IMAGE = "/stock-hotel-room.jpg"


class RoomService:
    """Room service"""

    def __init__(self, db: Session, hotel_id: str):
        self.db = db
        self.hotel_id = hotel_id

    # ============== Room types ==============

    def get_room_types(self) -> List[RoomType]:
        """Room types ordered by name"""
        return self.db.query(RoomType).filter(
            RoomType.hotel_id == self.hotel_id
        ).order_by(RoomType.name).all()

    def get_room_type(self, room_type_id: str) -> Optional[RoomType]:
        return self.db.query(RoomType).filter(
            RoomType.id == room_type_id,
            RoomType.hotel_id == self.hotel_id
        ).first()

    def create_room_type(self, data: RoomTypeCreate) -> RoomType:
        room_type = RoomType(hotel_id=self.hotel_id, **data.model_dump())
        self.db.add(room_type)
        self.db.commit()
        self.db.refresh(room_type)
        return room_type

    def update_room_type(self, room_type_id: str, data: RoomTypeUpdate) -> RoomType:
        room_type = self.get_room_type(room_type_id)
        if not room_type:
            raise LookupError("Room type not found")

        for key, value in data.model_dump(exclude_unset=True).items():
            if value is None and key in ('name', 'capacity', 'base_price'):
                continue
            setattr(room_type, key, value)

        self.db.commit()
        self.db.refresh(room_type)
        return room_type

    def delete_room_type(self, room_type_id: str) -> bool:
        room_type = self.get_room_type(room_type_id)
        if not room_type:
            raise LookupError("Room type not found")

        room_count = self.db.query(Room).filter(Room.room_type_id == room_type_id).count()
        if room_count > 0:
            raise ValueError(f"{room_count} room(s) still use this room type")

        self.db.delete(room_type)
        self.db.commit()
        return True

    # ============== Rooms ==============

    def get_rooms(self, status: Optional[RoomStatus] = None) -> List[Room]:
        """Rooms ordered by room number"""
        query = self.db.query(Room).options(joinedload(Room.room_type)).filter(
            Room.hotel_id == self.hotel_id
        )
        if status:
            query = query.filter(Room.status == status)
        return query.order_by(Room.room_number).all()

    def get_room_detail(self, room: Room) -> dict:
        """Room with its type; missing photos replaced by the stock image"""
        room_type = room.room_type
        return {
            'id': room.id,
            'hotel_id': room.hotel_id,
            'room_number': room.room_number,
            'floor': room.floor,
            'status': room.status,
            'image_url': room.image_url or DEFAULT_ROOM_IMAGE,
            'thumbnail_url': room.thumbnail_url,
            'room_type': {
                'id': room_type.id,
                'name': room_type.name,
                'capacity': room_type.capacity,
            } if room_type else None,
        }

    def get_available_rooms(self) -> List[Room]:
        """Rooms offered in the reservation form"""
        return self.get_rooms(RoomStatus.AVAILABLE)

    def get_room(self, room_id: str) -> Optional[Room]:
        return self.db.query(Room).filter(
            Room.id == room_id,
            Room.hotel_id == self.hotel_id
        ).first()

    def _check_room_number(self, room_number: str, exclude_id: Optional[str] = None):
        query = self.db.query(Room).filter(
            Room.hotel_id == self.hotel_id,
            Room.room_number == room_number
        )
        if exclude_id:
            query = query.filter(Room.id != exclude_id)
        if query.first():
            raise ValueError(f"Room number '{room_number}' already exists")

    def create_room(self, data: RoomCreate) -> Room:
        if not self.get_room_type(data.room_type_id):
            raise ValueError("Room type not found")
        self._check_room_number(data.room_number)

        room = Room(hotel_id=self.hotel_id, **data.model_dump())
        self.db.add(room)
        self.db.commit()
        self.db.refresh(room)
        logger.info(f"Room {room.room_number} created in hotel {self.hotel_id}")
        return room

    def update_room(self, room_id: str, data: RoomUpdate) -> Room:
        room = self.get_room(room_id)
        if not room:
            raise LookupError("Room not found")

        update_data = data.model_dump(exclude_unset=True)
        if update_data.get('room_type_id') and not self.get_room_type(update_data['room_type_id']):
            raise ValueError("Room type not found")
        if update_data.get('room_number'):
            self._check_room_number(update_data['room_number'], exclude_id=room_id)

        for key, value in update_data.items():
            if value is None and key in ('room_number', 'floor', 'room_type_id', 'status'):
                continue
            setattr(room, key, value)

        self.db.commit()
        self.db.refresh(room)
        return room

    def set_room_image(self, room_id: str, url: str) -> Room:
        """Store an uploaded room photo"""
        room = self.get_room(room_id)
        if not room:
            raise LookupError("Room not found")

        room.image_url = url
        self.db.commit()
        self.db.refresh(room)
        logger.info(f"Room {room.room_number} photo replaced in hotel {self.hotel_id}")
        return room

    def delete_room(self, room_id: str) -> bool:
        room = self.get_room(room_id)
        if not room:
            raise LookupError("Room not found")

        # reservations keep their history without the room link
        self.db.query(Reservation).filter(Reservation.room_id == room_id).update(
            {Reservation.room_id: None}, synchronize_session=False
        )
        self.db.delete(room)
        self.db.commit()
        return True
