# API Routers
from hotelpms.routers import (
    hotel, rooms, reservations, reviews, connections, gallery, upload, public,
    profile, dashboard
)

__all__ = [
    'hotel', 'rooms', 'reservations', 'reviews', 'connections', 'gallery',
    'upload', 'public', 'profile', 'dashboard'
]
