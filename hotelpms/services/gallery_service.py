"""
Gallery service
Hotel gallery images; hotels.gallery_urls is kept in step with the image rows
"""
import logging
from typing import List, Optional, Sequence
from sqlalchemy.orm import Session
from hotelpms.config import settings
from hotelpms.models.tables import Hotel, HotelImage, ImageType
from hotelpms.services.media_service import public_id_from_url

logger = logging.getLogger(__name__)


class GalleryService:
    """Gallery service"""

    def __init__(self, db: Session, hotel: Hotel):
        self.db = db
        self.hotel = hotel

    def get_images(self) -> List[HotelImage]:
        """Gallery images, newest first"""
        return self.db.query(HotelImage).filter(
            HotelImage.hotel_id == self.hotel.id,
            HotelImage.image_type == ImageType.GALLERY
        ).order_by(HotelImage.created_at.desc()).all()

    def get_image(self, image_id: str) -> Optional[HotelImage]:
        return self.db.query(HotelImage).filter(
            HotelImage.id == image_id,
            HotelImage.hotel_id == self.hotel.id
        ).first()

    def check_upload(self, content_types: Sequence[Optional[str]]):
        """Reject a batch that would overflow the gallery or has unsupported files"""
        if not content_types:
            raise ValueError("No file uploaded")

        existing = self.db.query(HotelImage).filter(
            HotelImage.hotel_id == self.hotel.id,
            HotelImage.image_type == ImageType.GALLERY
        ).count()
        max_images = settings.GALLERY_MAX_IMAGES
        if existing + len(content_types) > max_images:
            raise ValueError(f"You can upload a maximum of {max_images} images")

        for content_type in content_types:
            if content_type not in settings.GALLERY_ALLOWED_TYPES:
                raise ValueError(f"Unsupported file type: {content_type or 'unknown'}")

    def add_image(self, url: str) -> HotelImage:
        image = HotelImage(
            hotel_id=self.hotel.id,
            url=url,
            public_id=public_id_from_url(url),
            image_type=ImageType.GALLERY
        )
        self.db.add(image)
        self.hotel.gallery_urls = list(self.hotel.gallery_urls or []) + [url]
        self.db.commit()
        self.db.refresh(image)
        logger.info(f"Gallery image {image.public_id} added to hotel {self.hotel.id}")
        return image

    def delete_image(self, image_id: str) -> bool:
        image = self.get_image(image_id)
        if not image:
            raise LookupError("Image not found")

        self.hotel.gallery_urls = [u for u in (self.hotel.gallery_urls or []) if u != image.url]
        self.db.delete(image)
        self.db.commit()
        logger.info(f"Gallery image {image_id} removed from hotel {self.hotel.id}")
        return True

    def get_public_images(self) -> List[str]:
        """Image URLs shown on the public page"""
        urls = [image.url for image in self.get_images()]
        return urls or list(self.hotel.gallery_urls or [])
