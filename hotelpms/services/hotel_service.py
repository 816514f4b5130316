"""
Hotel service
Operator hotel record, public profile editing and the public hotel page
"""
import logging
from typing import List, Optional
from sqlalchemy.orm import Session
from hotelpms.models.tables import Hotel, RoomType
from hotelpms.models.schemas import HotelCreate, HotelUpdate, ServiceItem

logger = logging.getLogger(__name__)

# Columns that must never be persisted as NULL; an explicit null leaves them unchanged
_NON_NULL_FIELDS = (
    'name', 'amenities', 'services', 'gallery_urls',
    'public_profile', 'chatbot_enabled', 'booking_enabled'
)


class HotelService:
    """Hotel service"""

    def __init__(self, db: Session):
        self.db = db

    def get_hotel(self, hotel_id: str) -> Optional[Hotel]:
        return self.db.query(Hotel).filter(Hotel.id == hotel_id).first()

    def get_hotel_for_user(self, user_id: str) -> Optional[Hotel]:
        """Hotel owned by an operator"""
        return self.db.query(Hotel).filter(Hotel.user_id == user_id).first()

    def needs_onboarding(self, user_id: str) -> bool:
        """First-time operators have no hotel yet"""
        return self.get_hotel_for_user(user_id) is None

    def create_hotel(self, user_id: str, data: HotelCreate) -> Hotel:
        """Create the operator's hotel (one per account)"""
        if self.get_hotel_for_user(user_id):
            raise ValueError("A hotel already exists for this user")

        hotel = Hotel(user_id=user_id, amenities=[], services=[], gallery_urls=[], **data.model_dump())
        self.db.add(hotel)
        self.db.commit()
        self.db.refresh(hotel)
        logger.info(f"Hotel {hotel.id} created for user {user_id}")
        return hotel

    def update_hotel(self, hotel: Hotel, data: HotelUpdate) -> Hotel:
        """Partial update of the hotel record"""
        update_data = data.model_dump(exclude_unset=True)
        for key, value in update_data.items():
            if key in _NON_NULL_FIELDS and value is None:
                continue
            setattr(hotel, key, value)

        self.db.commit()
        self.db.refresh(hotel)
        return hotel

    def set_image_url(self, hotel: Hotel, field: str, url: str) -> Hotel:
        """Store an uploaded logo or cover URL"""
        if field not in ('logo_url', 'cover_url'):
            raise ValueError(f"Unknown image field: {field}")
        setattr(hotel, field, url)
        self.db.commit()
        self.db.refresh(hotel)
        return hotel

    # ============== Public profile lists ==============

    def add_amenity(self, hotel: Hotel, name: str) -> Hotel:
        name = name.strip()
        if not name:
            raise ValueError("Amenity name cannot be empty")
        amenities = list(hotel.amenities or [])
        if name in amenities:
            raise ValueError(f"Amenity '{name}' already exists")
        # reassign so the JSON column is flagged dirty
        hotel.amenities = amenities + [name]
        self.db.commit()
        self.db.refresh(hotel)
        return hotel

    def remove_amenity(self, hotel: Hotel, name: str) -> Hotel:
        amenities = list(hotel.amenities or [])
        if name not in amenities:
            raise LookupError(f"Amenity '{name}' not found")
        amenities.remove(name)
        hotel.amenities = amenities
        self.db.commit()
        self.db.refresh(hotel)
        return hotel

    def add_service(self, hotel: Hotel, item: ServiceItem) -> Hotel:
        name = item.name.strip()
        if not name:
            raise ValueError("Service name cannot be empty")
        hotel.services = list(hotel.services or []) + [
            {'name': name, 'description': item.description.strip()}
        ]
        self.db.commit()
        self.db.refresh(hotel)
        return hotel

    def remove_service(self, hotel: Hotel, index: int) -> Hotel:
        services = list(hotel.services or [])
        if index < 0 or index >= len(services):
            raise LookupError("Service not found")
        del services[index]
        hotel.services = services
        self.db.commit()
        self.db.refresh(hotel)
        return hotel

    # ============== Public page ==============

    def get_public_hotel(self, hotel_id: str) -> Optional[dict]:
        """Public hotel page data, or None when the hotel is not published"""
        hotel = self.get_hotel(hotel_id)
        if not hotel or not hotel.public_profile:
            return None

        room_types: List[RoomType] = self.db.query(RoomType).filter(
            RoomType.hotel_id == hotel.id
        ).order_by(RoomType.name).all()

        return {
            'id': hotel.id,
            'user_id': hotel.user_id,
            'name': hotel.name,
            'description': hotel.description,
            'email': hotel.email,
            'phone': hotel.phone,
            'website': hotel.website,
            'address': hotel.address,
            'city': hotel.city,
            'country': hotel.country,
            'postal_code': hotel.postal_code,
            'latitude': hotel.latitude,
            'longitude': hotel.longitude,
            'check_in_time': hotel.check_in_time,
            'check_out_time': hotel.check_out_time,
            'public_profile': hotel.public_profile,
            'chatbot_enabled': bool(hotel.chatbot_enabled),
            'booking_enabled': bool(hotel.booking_enabled),
            'logo_url': hotel.logo_url,
            'cover_url': hotel.cover_url,
            'gallery_urls': hotel.gallery_urls or [],
            'amenities': hotel.amenities or [],
            'services': hotel.services or [],
            'rating': hotel.rating,
            'created_at': hotel.created_at,
            'room_types': room_types,
        }
