"""
Report service
Dashboard statistics for one hotel
"""
import calendar
from datetime import date, datetime
from decimal import Decimal, ROUND_HALF_UP
from typing import Optional
from sqlalchemy.orm import Session
from hotelpms.models.tables import (
    Hotel, Room, RoomStatus, Reservation, ReservationStatus
)

_CENT = Decimal('0.01')


def _money(value: Decimal) -> Decimal:
    return Decimal(value).quantize(_CENT, rounding=ROUND_HALF_UP)


def _nights_in_range(check_in: datetime, check_out: datetime,
                     start: date, end: date) -> int:
    """Nights of a stay that fall inside [start, end)"""
    first = max(check_in.date(), start)
    last = min(check_out.date(), end)
    return max(0, (last - first).days)


class ReportService:
    """Report service"""

    def __init__(self, db: Session, hotel: Hotel):
        self.db = db
        self.hotel = hotel

    def get_dashboard_stats(self, today: Optional[date] = None) -> dict:
        """Dashboard statistics"""
        today = today or date.today()

        # Rooms
        rooms = self.db.query(Room).filter(Room.hotel_id == self.hotel.id).all()
        total_rooms = len(rooms)
        available_rooms = len([r for r in rooms if r.status == RoomStatus.AVAILABLE])
        occupied = len([r for r in rooms if r.status == RoomStatus.OCCUPIED])

        # Reservations
        reservations = self.db.query(Reservation).filter(
            Reservation.hotel_id == self.hotel.id
        ).all()
        pending = len([r for r in reservations if r.status == ReservationStatus.PENDING])
        billable = [r for r in reservations if r.status != ReservationStatus.CANCELLED]

        month_start = today.replace(day=1)
        days_in_month = calendar.monthrange(today.year, today.month)[1]
        if today.month == 12:
            month_end = date(today.year + 1, 1, 1)
        else:
            month_end = date(today.year, today.month + 1, 1)

        monthly = [
            r for r in billable
            if r.check_in.year == today.year and r.check_in.month == today.month
        ]
        monthly_revenue = sum((Decimal(r.total_price or 0) for r in monthly), Decimal('0'))
        yearly_revenue = sum(
            (Decimal(r.total_price or 0) for r in billable if r.check_in.year == today.year),
            Decimal('0')
        )

        nights_sold = sum(
            _nights_in_range(r.check_in, r.check_out, month_start, month_end)
            for r in billable
        )

        occupancy_rate = (occupied / total_rooms * 100) if total_rooms > 0 else 0
        adr = monthly_revenue / nights_sold if nights_sold > 0 else Decimal('0')
        available_nights = total_rooms * days_in_month
        revpar = monthly_revenue / available_nights if available_nights > 0 else Decimal('0')

        return {
            'hotel_id': self.hotel.id,
            'hotel_name': self.hotel.name,
            'total_rooms': total_rooms,
            'available_rooms': available_rooms,
            'total_reservations': len(reservations),
            'pending_reservations': pending,
            'monthly_revenue': _money(monthly_revenue),
            'yearly_revenue': _money(yearly_revenue),
            'occupancy_rate': round(occupancy_rate, 1),
            'average_daily_rate': _money(adr),
            'revenue_per_available_room': _money(revpar),
        }
