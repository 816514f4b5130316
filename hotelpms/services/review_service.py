"""
Review service
Moderation list for operators and the public review strip
"""
import logging
from datetime import datetime
from enum import Enum
from typing import List, Optional
from sqlalchemy.orm import Session
from hotelpms.models.tables import Review, ReviewStatus
from hotelpms.services.pagination import paginate

logger = logging.getLogger(__name__)

REVIEWS_PER_PAGE = 5
PUBLIC_REVIEW_LIMIT = 5


class ReviewFilter(str, Enum):
    ALL = "all"
    PUBLISHED = "published"
    PENDING = "pending"
    REJECTED = "rejected"


class ReviewSort(str, Enum):
    NEWEST = "newest"
    OLDEST = "oldest"
    HIGHEST = "highest"
    LOWEST = "lowest"


def filter_and_sort_reviews(reviews: List[Review],
                            status_filter: ReviewFilter = ReviewFilter.ALL,
                            sort: ReviewSort = ReviewSort.NEWEST,
                            search: Optional[str] = None) -> List[Review]:
    """Filter by status, search name/comment (case-insensitive), then sort"""
    result = list(reviews)

    if status_filter != ReviewFilter.ALL:
        wanted = ReviewStatus(status_filter.value)
        result = [r for r in result if r.status == wanted]

    if search:
        term = search.lower()
        result = [
            r for r in result
            if term in (r.user_name or '').lower() or term in (r.comment or '').lower()
        ]

    if sort == ReviewSort.NEWEST:
        result.sort(key=lambda r: r.created_at, reverse=True)
    elif sort == ReviewSort.OLDEST:
        result.sort(key=lambda r: r.created_at)
    elif sort == ReviewSort.HIGHEST:
        result.sort(key=lambda r: r.rating, reverse=True)
    elif sort == ReviewSort.LOWEST:
        result.sort(key=lambda r: r.rating)

    return result


class ReviewService:
    """Review service"""

    def __init__(self, db: Session, hotel_id: str):
        self.db = db
        self.hotel_id = hotel_id

    def get_reviews(self) -> List[Review]:
        return self.db.query(Review).filter(Review.hotel_id == self.hotel_id).all()

    def get_review(self, review_id: str) -> Optional[Review]:
        return self.db.query(Review).filter(
            Review.id == review_id,
            Review.hotel_id == self.hotel_id
        ).first()

    def list_reviews(self, status_filter: ReviewFilter = ReviewFilter.ALL,
                     sort: ReviewSort = ReviewSort.NEWEST,
                     search: Optional[str] = None, page: int = 1) -> dict:
        reviews = filter_and_sort_reviews(self.get_reviews(), status_filter, sort, search)
        return paginate(reviews, page, REVIEWS_PER_PAGE)

    def update_status(self, review_id: str, status: ReviewStatus) -> Review:
        review = self.get_review(review_id)
        if not review:
            raise LookupError("Review not found")

        review.status = status
        self.db.commit()
        self.db.refresh(review)
        logger.info(f"Review {review_id} set to {status.value}")
        return review

    def reply(self, review_id: str, text: str) -> Review:
        review = self.get_review(review_id)
        if not review:
            raise LookupError("Review not found")
        if not text.strip():
            raise ValueError("Reply cannot be empty")

        review.reply = text.strip()
        review.replied_at = datetime.utcnow()
        self.db.commit()
        self.db.refresh(review)
        return review

    def get_public_reviews(self) -> List[Review]:
        """Most recent published reviews for the public page"""
        return self.db.query(Review).filter(
            Review.hotel_id == self.hotel_id,
            Review.status == ReviewStatus.PUBLISHED
        ).order_by(Review.created_at.desc()).limit(PUBLIC_REVIEW_LIMIT).all()
