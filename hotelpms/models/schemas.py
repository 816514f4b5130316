"""
Pydantic schemas
Request/response validation for the API
"""
from datetime import datetime, timezone
from enum import Enum
from decimal import Decimal
from typing import Optional, List, Literal
from pydantic import BaseModel, Field, ConfigDict, field_validator
from hotelpms.models.tables import (
    RoomStatus, ReservationStatus, ReservationSource, ReviewStatus,
    ImageType, TicketStatus
)


# ============== Hotel Schemas ==============

class ServiceItem(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    description: str = ""


class HotelBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=150)
    description: Optional[str] = None
    email: Optional[str] = Field(None, max_length=255)
    phone: Optional[str] = Field(None, max_length=40)
    website: Optional[str] = Field(None, max_length=255)
    address: Optional[str] = Field(None, max_length=255)
    city: Optional[str] = Field(None, max_length=100)
    country: Optional[str] = Field(None, max_length=100)
    postal_code: Optional[str] = Field(None, max_length=20)
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    check_in_time: Optional[str] = Field(None, max_length=5)
    check_out_time: Optional[str] = Field(None, max_length=5)
    public_profile: bool = False
    chatbot_enabled: bool = False
    booking_enabled: bool = True


class HotelCreate(HotelBase):
    pass


class HotelUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=150)
    description: Optional[str] = None
    email: Optional[str] = Field(None, max_length=255)
    phone: Optional[str] = Field(None, max_length=40)
    website: Optional[str] = Field(None, max_length=255)
    address: Optional[str] = Field(None, max_length=255)
    city: Optional[str] = Field(None, max_length=100)
    country: Optional[str] = Field(None, max_length=100)
    postal_code: Optional[str] = Field(None, max_length=20)
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    check_in_time: Optional[str] = Field(None, max_length=5)
    check_out_time: Optional[str] = Field(None, max_length=5)
    public_profile: Optional[bool] = None
    chatbot_enabled: Optional[bool] = None
    booking_enabled: Optional[bool] = None
    amenities: Optional[List[str]] = None
    services: Optional[List[ServiceItem]] = None


class HotelResponse(HotelBase):
    id: str
    user_id: str
    logo_url: Optional[str] = None
    cover_url: Optional[str] = None
    gallery_urls: List[str] = []
    amenities: List[str] = []
    services: List[ServiceItem] = []
    rating: Optional[float] = None
    created_at: datetime
    model_config = ConfigDict(from_attributes=True)


class AmenityCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=60)


class OnboardingResponse(BaseModel):
    show_welcome: bool


# ============== Room Type Schemas ==============

class RoomTypeBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=80)
    description: Optional[str] = None
    capacity: int = Field(default=2, ge=1)
    base_price: Decimal = Field(default=0, ge=0)
    image_url: Optional[str] = None


class RoomTypeCreate(RoomTypeBase):
    pass


class RoomTypeUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=80)
    description: Optional[str] = None
    capacity: Optional[int] = Field(None, ge=1)
    base_price: Optional[Decimal] = Field(None, ge=0)
    image_url: Optional[str] = None


class RoomTypeResponse(RoomTypeBase):
    id: str
    hotel_id: str
    model_config = ConfigDict(from_attributes=True)


class RoomTypeBrief(BaseModel):
    id: str
    name: str
    capacity: int
    model_config = ConfigDict(from_attributes=True)


class PublicHotelResponse(HotelResponse):
    room_types: List[RoomTypeResponse] = []


# ============== Room Schemas ==============

class RoomBase(BaseModel):
    room_number: str = Field(..., min_length=1, max_length=10)
    floor: str = Field(..., min_length=1, max_length=10)
    room_type_id: str
    status: RoomStatus = RoomStatus.AVAILABLE
    image_url: Optional[str] = None
    thumbnail_url: Optional[str] = None


class RoomCreate(RoomBase):
    pass


class RoomUpdate(BaseModel):
    room_number: Optional[str] = Field(None, min_length=1, max_length=10)
    floor: Optional[str] = Field(None, min_length=1, max_length=10)
    room_type_id: Optional[str] = None
    status: Optional[RoomStatus] = None
    image_url: Optional[str] = None
    thumbnail_url: Optional[str] = None


class RoomResponse(BaseModel):
    id: str
    hotel_id: str
    room_number: str
    floor: str
    status: RoomStatus
    image_url: Optional[str] = None
    thumbnail_url: Optional[str] = None
    room_type: Optional[RoomTypeBrief] = None
    model_config = ConfigDict(from_attributes=True)


# ============== Reservation Schemas ==============

def to_naive_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Stored datetimes are naive UTC; offset-aware input is converted"""
    if value is not None and value.tzinfo is not None:
        return value.astimezone(timezone.utc).replace(tzinfo=None)
    return value


class ReservationBase(BaseModel):
    guest_name: str = Field(..., min_length=1, max_length=120)
    guest_email: str = Field(..., min_length=3, max_length=255)
    guest_phone: Optional[str] = Field(None, max_length=40)
    check_in: datetime
    check_out: datetime
    room_id: Optional[str] = None
    source: ReservationSource = ReservationSource.DIRECT
    external_id: Optional[str] = None
    status: ReservationStatus = ReservationStatus.PENDING
    adults: int = Field(default=1, ge=1)
    children: int = Field(default=0, ge=0)
    total_price: Decimal = Field(default=0, ge=0)
    special_requests: Optional[str] = None
    notes: Optional[str] = None

    @field_validator('check_in', 'check_out')
    @classmethod
    def normalize_stay_dates(cls, v: datetime) -> datetime:
        return to_naive_utc(v)


class ReservationCreate(ReservationBase):
    pass


class ReservationUpdate(BaseModel):
    guest_name: Optional[str] = Field(None, min_length=1, max_length=120)
    guest_email: Optional[str] = Field(None, min_length=3, max_length=255)
    guest_phone: Optional[str] = Field(None, max_length=40)
    check_in: Optional[datetime] = None
    check_out: Optional[datetime] = None
    room_id: Optional[str] = None
    source: Optional[ReservationSource] = None
    external_id: Optional[str] = None
    status: Optional[ReservationStatus] = None
    adults: Optional[int] = Field(None, ge=1)
    children: Optional[int] = Field(None, ge=0)
    total_price: Optional[Decimal] = Field(None, ge=0)
    special_requests: Optional[str] = None
    notes: Optional[str] = None

    @field_validator('check_in', 'check_out')
    @classmethod
    def normalize_stay_dates(cls, v: Optional[datetime]) -> Optional[datetime]:
        return to_naive_utc(v)


class ReservationRoomType(BaseModel):
    name: str
    capacity: int
    model_config = ConfigDict(from_attributes=True)


class ReservationRoom(BaseModel):
    room_number: str
    floor: str
    room_type_id: str
    room_type: Optional[ReservationRoomType] = None
    model_config = ConfigDict(from_attributes=True)


class ReservationResponse(BaseModel):
    id: str
    hotel_id: str
    room_id: Optional[str] = None
    room_type_id: Optional[str] = None
    guest_id: Optional[str] = None
    source: ReservationSource
    external_id: Optional[str] = None
    guest_name: Optional[str] = None
    guest_email: Optional[str] = None
    guest_phone: Optional[str] = None
    check_in: datetime
    check_out: datetime
    adults: int
    children: int
    status: ReservationStatus
    total_price: Optional[Decimal] = None
    special_requests: Optional[str] = None
    notes: Optional[str] = None
    created_at: datetime
    room: Optional[ReservationRoom] = None
    model_config = ConfigDict(from_attributes=True)


class ReservationPage(BaseModel):
    items: List[ReservationResponse]
    page: int
    total_pages: int
    total: int


# ============== Review Schemas ==============

class ReviewResponse(BaseModel):
    id: str
    hotel_id: str
    user_name: str
    rating: int
    comment: str
    helpful_count: int
    not_helpful_count: int
    status: ReviewStatus
    reply: Optional[str] = None
    replied_at: Optional[datetime] = None
    created_at: datetime
    model_config = ConfigDict(from_attributes=True)


class ReviewStatusUpdate(BaseModel):
    status: ReviewStatus


class ReviewReply(BaseModel):
    reply: str = Field(..., min_length=1)


class ReviewPage(BaseModel):
    items: List[ReviewResponse]
    page: int
    total_pages: int
    total: int


# ============== OTA Connection Schemas ==============

class ConnectionCreate(BaseModel):
    ota_name: str
    api_key: str = Field(..., min_length=1, max_length=255)
    api_secret: Optional[str] = Field(None, max_length=255)


class ConnectionResponse(BaseModel):
    id: Optional[str] = None
    ota_name: str
    api_key: str = ""
    is_active: bool = False
    color: str
    description: str
    is_configured: bool = False


# ============== Image Schemas ==============

class HotelImageResponse(BaseModel):
    id: str
    hotel_id: str
    url: str
    public_id: Optional[str] = None
    image_type: ImageType
    created_at: datetime
    model_config = ConfigDict(from_attributes=True)


class UploadResponse(BaseModel):
    secure_url: str


# ============== Booking Engine Schemas ==============

class BookingRequest(BaseModel):
    room_type_id: Optional[str] = None
    check_in: Optional[datetime] = None
    check_out: Optional[datetime] = None
    adults: int = Field(default=1, ge=1)
    children: int = Field(default=0, ge=0)

    @field_validator('check_in', 'check_out')
    @classmethod
    def normalize_stay_dates(cls, v: Optional[datetime]) -> Optional[datetime]:
        return to_naive_utc(v)


# ============== Chat Schemas ==============

class ChatMessage(BaseModel):
    role: Literal["user", "assistant"]
    content: str


class ChatRequest(BaseModel):
    message: str
    history: List[ChatMessage] = []


class ChatResponse(BaseModel):
    reply: ChatMessage
    history: List[ChatMessage]


# ============== Profile / Support Schemas ==============

class ProfileResponse(BaseModel):
    id: str
    email: Optional[str] = None
    full_name: Optional[str] = None
    phone: Optional[str] = None
    avatar_url: Optional[str] = None
    model_config = ConfigDict(from_attributes=True)


class ProfileUpdate(BaseModel):
    full_name: Optional[str] = Field(None, max_length=120)
    phone: Optional[str] = Field(None, max_length=40)


class SupportTicketCreate(BaseModel):
    subject: str = Field(..., min_length=1, max_length=200)
    message: str = Field(..., min_length=1)


class SupportTicketResponse(BaseModel):
    id: str
    user_id: str
    subject: str
    message: str
    status: TicketStatus
    created_at: datetime
    model_config = ConfigDict(from_attributes=True)


# ============== Dashboard Schemas ==============

class DashboardStats(BaseModel):
    hotel_id: str
    hotel_name: str
    total_rooms: int
    available_rooms: int
    total_reservations: int
    pending_reservations: int
    monthly_revenue: Decimal
    yearly_revenue: Decimal
    occupancy_rate: float
    average_daily_rate: Decimal
    revenue_per_available_room: Decimal


# ============== UI view toggles ==============

class ViewMode(str, Enum):
    """Grid/list toggle of dashboard screens; echoed back, never stored"""
    GRID = "grid"
    LIST = "list"
