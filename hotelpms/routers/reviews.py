"""
Review moderation routes
"""
import logging
from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, status, Query
from sqlalchemy.orm import Session
from hotelpms.database import get_db
from hotelpms.models.tables import Hotel
from hotelpms.models.schemas import (
    ReviewResponse, ReviewStatusUpdate, ReviewReply, ReviewPage
)
from hotelpms.security.auth import get_current_hotel
from hotelpms.services.review_service import ReviewService, ReviewFilter, ReviewSort

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/reviews", tags=["Reviews"])


@router.get("", response_model=ReviewPage)
def list_reviews(
    status_filter: ReviewFilter = Query(ReviewFilter.ALL, alias="status"),
    sort: ReviewSort = ReviewSort.NEWEST,
    q: Optional[str] = None,
    page: int = 1,
    db: Session = Depends(get_db),
    hotel: Hotel = Depends(get_current_hotel)
):
    """Filtered, searched and sorted review page"""
    return ReviewService(db, hotel.id).list_reviews(status_filter, sort, q, page)


@router.patch("/{review_id}/status", response_model=ReviewResponse)
def update_review_status(
    review_id: str,
    data: ReviewStatusUpdate,
    db: Session = Depends(get_db),
    hotel: Hotel = Depends(get_current_hotel)
):
    try:
        return ReviewService(db, hotel.id).update_status(review_id, data.status)
    except LookupError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.post("/{review_id}/reply", response_model=ReviewResponse)
def reply_to_review(
    review_id: str,
    data: ReviewReply,
    db: Session = Depends(get_db),
    hotel: Hotel = Depends(get_current_hotel)
):
    try:
        return ReviewService(db, hotel.id).reply(review_id, data.reply)
    except LookupError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
