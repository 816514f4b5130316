# Table models
from hotelpms.models.tables import (
    Profile, Hotel, RoomType, Room, Reservation, Review,
    OTAConnection, HotelImage, SupportTicket
)

__all__ = [
    'Profile', 'Hotel', 'RoomType', 'Room', 'Reservation', 'Review',
    'OTAConnection', 'HotelImage', 'SupportTicket'
]
