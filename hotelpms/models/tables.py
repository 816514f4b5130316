"""
Table definitions
Each record mirrors one table of the hosted database; the database schema
owns referential integrity, the application only validates form input
"""
import uuid
from datetime import datetime
from enum import Enum
from sqlalchemy import (
    Column, Integer, String, Float, DateTime, ForeignKey, Text,
    Enum as SQLEnum, Boolean, Numeric, JSON, UniqueConstraint
)
from sqlalchemy.orm import relationship
from hotelpms.database import Base


def _uuid() -> str:
    return str(uuid.uuid4())


# ============== Enums ==============

class RoomStatus(str, Enum):
    """Room status"""
    AVAILABLE = "available"
    OCCUPIED = "occupied"
    MAINTENANCE = "maintenance"


class ReservationStatus(str, Enum):
    """Reservation status"""
    PENDING = "pending"
    CONFIRMED = "confirmed"
    CANCELLED = "cancelled"
    COMPLETED = "completed"


class ReservationSource(str, Enum):
    """Channel a reservation came from"""
    DIRECT = "direct"
    BOOKING = "booking"
    EXPEDIA = "expedia"
    AIRBNB = "airbnb"
    OTHER = "other"


class ReviewStatus(str, Enum):
    """Review moderation status"""
    PUBLISHED = "published"
    PENDING = "pending"
    REJECTED = "rejected"


class ImageType(str, Enum):
    LOGO = "logo"
    COVER = "cover"
    GALLERY = "gallery"


class TicketStatus(str, Enum):
    OPEN = "open"
    CLOSED = "closed"


# ============== Tables ==============

class Profile(Base):
    """
    Operator profile
    id is the auth provider's user id
    """
    __tablename__ = "profiles"

    id = Column(String(36), primary_key=True)
    email = Column(String(255))
    full_name = Column(String(120))
    phone = Column(String(40))
    avatar_url = Column(Text)
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)


class Hotel(Base):
    """
    Hotel - one per operator account
    amenities/services/gallery_urls are JSON lists
    """
    __tablename__ = "hotels"

    id = Column(String(36), primary_key=True, default=_uuid)
    user_id = Column(String(36), unique=True, nullable=False, index=True)
    name = Column(String(150), nullable=False)
    description = Column(Text)
    email = Column(String(255))
    phone = Column(String(40))
    website = Column(String(255))
    address = Column(String(255))
    city = Column(String(100))
    country = Column(String(100))
    postal_code = Column(String(20))
    latitude = Column(Float)
    longitude = Column(Float)
    logo_url = Column(Text)
    cover_url = Column(Text)
    gallery_urls = Column(JSON, default=list)
    amenities = Column(JSON, default=list)
    services = Column(JSON, default=list)          # [{name, description}]
    public_profile = Column(Boolean, default=False)
    chatbot_enabled = Column(Boolean, default=False)
    booking_enabled = Column(Boolean, default=True)
    check_in_time = Column(String(5))              # HH:MM
    check_out_time = Column(String(5))
    rating = Column(Float)
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    room_types = relationship("RoomType", back_populates="hotel", cascade="all, delete-orphan")
    rooms = relationship("Room", back_populates="hotel", cascade="all, delete-orphan")
    reservations = relationship("Reservation", back_populates="hotel", cascade="all, delete-orphan")
    reviews = relationship("Review", back_populates="hotel", cascade="all, delete-orphan")
    connections = relationship("OTAConnection", back_populates="hotel", cascade="all, delete-orphan")
    images = relationship("HotelImage", back_populates="hotel", cascade="all, delete-orphan")


class RoomType(Base):
    __tablename__ = "room_types"

    id = Column(String(36), primary_key=True, default=_uuid)
    hotel_id = Column(String(36), ForeignKey("hotels.id"), nullable=False, index=True)
    name = Column(String(80), nullable=False)
    description = Column(Text)
    capacity = Column(Integer, default=2)
    base_price = Column(Numeric(10, 2), default=0)
    image_url = Column(Text)
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    hotel = relationship("Hotel", back_populates="room_types")
    rooms = relationship("Room", back_populates="room_type")


class Room(Base):
    __tablename__ = "rooms"
    __table_args__ = (UniqueConstraint("hotel_id", "room_number", name="uq_room_number_per_hotel"),)

    id = Column(String(36), primary_key=True, default=_uuid)
    hotel_id = Column(String(36), ForeignKey("hotels.id"), nullable=False, index=True)
    room_number = Column(String(10), nullable=False)
    floor = Column(String(10), nullable=False)
    room_type_id = Column(String(36), ForeignKey("room_types.id"), nullable=False)
    status = Column(SQLEnum(RoomStatus), default=RoomStatus.AVAILABLE)
    image_url = Column(Text)
    thumbnail_url = Column(Text)
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    hotel = relationship("Hotel", back_populates="rooms")
    room_type = relationship("RoomType", back_populates="rooms")
    reservations = relationship("Reservation", back_populates="room")


class Reservation(Base):
    """
    Reservation
    Dashboard entries carry room_id, booking-widget entries carry room_type_id
    """
    __tablename__ = "reservations"

    id = Column(String(36), primary_key=True, default=_uuid)
    hotel_id = Column(String(36), ForeignKey("hotels.id"), nullable=False, index=True)
    room_id = Column(String(36), ForeignKey("rooms.id"))
    room_type_id = Column(String(36), ForeignKey("room_types.id"))
    guest_id = Column(String(36))                      # auth user id of a self-booking guest
    source = Column(SQLEnum(ReservationSource), default=ReservationSource.DIRECT)
    external_id = Column(String(100))                  # OTA reference
    guest_name = Column(String(120))
    guest_email = Column(String(255))
    guest_phone = Column(String(40))
    check_in = Column(DateTime, nullable=False)
    check_out = Column(DateTime, nullable=False)
    adults = Column(Integer, default=1)
    children = Column(Integer, default=0)
    status = Column(SQLEnum(ReservationStatus), default=ReservationStatus.PENDING)
    total_price = Column(Numeric(10, 2), default=0)
    special_requests = Column(Text)
    notes = Column(Text)
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    hotel = relationship("Hotel", back_populates="reservations")
    room = relationship("Room", back_populates="reservations")
    room_type = relationship("RoomType")


class Review(Base):
    __tablename__ = "hotel_reviews"

    id = Column(String(36), primary_key=True, default=_uuid)
    hotel_id = Column(String(36), ForeignKey("hotels.id"), nullable=False, index=True)
    user_name = Column(String(120), nullable=False)
    rating = Column(Integer, nullable=False)
    comment = Column(Text, default="")
    helpful_count = Column(Integer, default=0)
    not_helpful_count = Column(Integer, default=0)
    status = Column(SQLEnum(ReviewStatus), default=ReviewStatus.PENDING)
    reply = Column(Text)
    replied_at = Column(DateTime)
    created_at = Column(DateTime, default=datetime.utcnow)

    hotel = relationship("Hotel", back_populates="reviews")


class OTAConnection(Base):
    __tablename__ = "ota_connections"
    __table_args__ = (UniqueConstraint("hotel_id", "ota_name", name="uq_ota_per_hotel"),)

    id = Column(String(36), primary_key=True, default=_uuid)
    hotel_id = Column(String(36), ForeignKey("hotels.id"), nullable=False, index=True)
    ota_name = Column(String(50), nullable=False)
    api_key = Column(String(255))
    api_secret = Column(String(255))
    is_active = Column(Boolean, default=False)
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    hotel = relationship("Hotel", back_populates="connections")


class HotelImage(Base):
    __tablename__ = "hotel_images"

    id = Column(String(36), primary_key=True, default=_uuid)
    hotel_id = Column(String(36), ForeignKey("hotels.id"), nullable=False, index=True)
    url = Column(Text, nullable=False)
    public_id = Column(String(255))
    image_type = Column(SQLEnum(ImageType), default=ImageType.GALLERY)
    created_at = Column(DateTime, default=datetime.utcnow)

    hotel = relationship("Hotel", back_populates="images")


class SupportTicket(Base):
    __tablename__ = "support_tickets"

    id = Column(String(36), primary_key=True, default=_uuid)
    user_id = Column(String(36), nullable=False, index=True)
    subject = Column(String(200), nullable=False)
    message = Column(Text, nullable=False)
    status = Column(SQLEnum(TicketStatus), default=TicketStatus.OPEN)
    created_at = Column(DateTime, default=datetime.utcnow)
