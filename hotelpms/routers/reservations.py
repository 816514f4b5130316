"""
Reservation routes
List, paged table, calendar and the reservation form
"""
from datetime import date
from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException, status, Query
from sqlalchemy.orm import Session
from hotelpms.database import get_db
from hotelpms.models.tables import Hotel
from hotelpms.models.schemas import (
    ReservationCreate, ReservationUpdate, ReservationResponse, ReservationPage
)
from hotelpms.security.auth import get_current_hotel
from hotelpms.services.calendar_view import CalendarView, build_view, shift
from hotelpms.services.reservation_service import ReservationService

router = APIRouter(prefix="/reservations", tags=["Reservations"])


@router.get("", response_model=List[ReservationResponse])
def list_reservations(
    db: Session = Depends(get_db),
    hotel: Hotel = Depends(get_current_hotel)
):
    """Reservations ordered by check-in"""
    return ReservationService(db, hotel.id).get_reservations()


@router.get("/page", response_model=ReservationPage)
def list_reservation_page(
    page: int = Query(1),
    db: Session = Depends(get_db),
    hotel: Hotel = Depends(get_current_hotel)
):
    """One page of the reservation table"""
    return ReservationService(db, hotel.id).get_reservation_page(page)


@router.get("/calendar")
def get_calendar(
    view: str = "month",
    day: Optional[date] = Query(None, alias="date"),
    step: int = Query(0, ge=-1200, le=1200),
    db: Session = Depends(get_db),
    hotel: Hotel = Depends(get_current_hotel)
):
    """Reservation calendar for the day, week or month around a date

    step moves the cursor by whole days, weeks or months before grouping.
    """
    try:
        calendar_view = CalendarView(view)
    except ValueError:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Unknown calendar view: {view}"
        )

    reservations = [
        ReservationResponse.model_validate(r)
        for r in ReservationService(db, hotel.id).get_reservations()
    ]

    try:
        cursor = shift(calendar_view, day or date.today(), step)
        result = build_view(calendar_view, reservations, cursor)
        result['previous'] = shift(calendar_view, cursor, -1)
        result['next'] = shift(calendar_view, cursor, 1)
    except (ValueError, OverflowError):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Calendar date out of range"
        )
    return result


@router.get("/{reservation_id}", response_model=ReservationResponse)
def get_reservation(
    reservation_id: str,
    db: Session = Depends(get_db),
    hotel: Hotel = Depends(get_current_hotel)
):
    reservation = ReservationService(db, hotel.id).get_reservation(reservation_id)
    if not reservation:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Reservation not found")
    return reservation


@router.post("", response_model=ReservationResponse)
def create_reservation(
    data: ReservationCreate,
    db: Session = Depends(get_db),
    hotel: Hotel = Depends(get_current_hotel)
):
    """Create a reservation"""
    try:
        return ReservationService(db, hotel.id).create_reservation(data)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.put("/{reservation_id}", response_model=ReservationResponse)
def update_reservation(
    reservation_id: str,
    data: ReservationUpdate,
    db: Session = Depends(get_db),
    hotel: Hotel = Depends(get_current_hotel)
):
    try:
        return ReservationService(db, hotel.id).update_reservation(reservation_id, data)
    except LookupError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.delete("/{reservation_id}")
def delete_reservation(
    reservation_id: str,
    db: Session = Depends(get_db),
    hotel: Hotel = Depends(get_current_hotel)
):
    try:
        ReservationService(db, hotel.id).delete_reservation(reservation_id)
        return {"message": "Reservation deleted"}
    except LookupError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
