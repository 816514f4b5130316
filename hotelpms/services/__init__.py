# Business Services
from hotelpms.services.hotel_service import HotelService
from hotelpms.services.room_service import RoomService
from hotelpms.services.reservation_service import ReservationService
from hotelpms.services.review_service import ReviewService
from hotelpms.services.connection_service import ConnectionService
from hotelpms.services.gallery_service import GalleryService
from hotelpms.services.booking_service import BookingService
from hotelpms.services.profile_service import ProfileService
from hotelpms.services.report_service import ReportService
from hotelpms.services.media_service import MediaUploader, MediaUploadError

__all__ = [
    'HotelService', 'RoomService', 'ReservationService', 'ReviewService',
    'ConnectionService', 'GalleryService', 'BookingService', 'ProfileService',
    'ReportService', 'MediaUploader', 'MediaUploadError'
]
