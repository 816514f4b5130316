"""
Reservation calendar grouping
Day / week / month views built from an already-fetched reservation list.
Matching is by calendar day only; nothing here checks room availability.
"""
import calendar
from datetime import date, timedelta
from enum import Enum
from typing import Iterable, Optional, Sequence


class CalendarView(str, Enum):
    DAY = "day"
    WEEK = "week"
    MONTH = "month"


MONTH_MAX_PER_DAY = 3


def _checks_in_on(reservation, day: date) -> bool:
    return reservation.check_in.date() == day


def _reservations_checking_in(reservations: Iterable, day: date) -> list:
    return [r for r in reservations if _checks_in_on(r, day)]


def day_view(reservations: Sequence, day: date) -> dict:
    """24 hourly slots for one day

    A reservation belongs to the day when it checks in or checks out on it,
    and sits in the slot of its check-in hour.
    """
    day_reservations = [
        r for r in reservations
        if r.check_in.date() == day or r.check_out.date() == day
    ]
    hours = [
        {
            'hour': hour,
            'label': f"{hour:02d}:00",
            'reservations': [r for r in day_reservations if r.check_in.hour == hour],
        }
        for hour in range(24)
    ]
    return {'view': CalendarView.DAY.value, 'date': day, 'hours': hours}


def week_bounds(day: date) -> tuple:
    """Monday..Sunday of the week containing day"""
    start = day - timedelta(days=day.weekday())
    return start, start + timedelta(days=6)


def week_view(reservations: Sequence, day: date) -> dict:
    start, end = week_bounds(day)
    days = []
    for offset in range(7):
        current = start + timedelta(days=offset)
        days.append({
            'date': current,
            'weekday': current.strftime('%a'),
            'reservations': _reservations_checking_in(reservations, current),
        })
    return {'view': CalendarView.WEEK.value, 'start': start, 'end': end, 'days': days}


def month_view(reservations: Sequence, day: date,
               max_per_day: int = MONTH_MAX_PER_DAY,
               today: Optional[date] = None) -> dict:
    """Month grid with Monday as the first column

    leading_blanks is the number of empty cells before the 1st. Each day lists
    at most max_per_day check-ins; the rest are counted in overflow.
    """
    today = today or date.today()
    first = day.replace(day=1)
    days_in_month = calendar.monthrange(first.year, first.month)[1]

    days = []
    for offset in range(days_in_month):
        current = first + timedelta(days=offset)
        arriving = _reservations_checking_in(reservations, current)
        days.append({
            'date': current,
            'reservations': arriving[:max_per_day],
            'overflow': max(0, len(arriving) - max_per_day),
            'is_today': current == today,
        })

    return {
        'view': CalendarView.MONTH.value,
        'year': first.year,
        'month': first.month,
        'title': first.strftime('%B %Y'),
        'leading_blanks': first.weekday(),
        'days': days,
    }


def shift(view: CalendarView, day: date, step: int) -> date:
    """Move the calendar cursor by step days, weeks or months"""
    view = CalendarView(view)
    if view == CalendarView.DAY:
        return day + timedelta(days=step)
    if view == CalendarView.WEEK:
        return day + timedelta(weeks=step)

    month_index = day.year * 12 + (day.month - 1) + step
    year, month = divmod(month_index, 12)
    month += 1
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, min(day.day, last_day))


def build_view(view: CalendarView, reservations: Sequence, day: date) -> dict:
    view = CalendarView(view)
    if view == CalendarView.DAY:
        return day_view(reservations, day)
    if view == CalendarView.WEEK:
        return week_view(reservations, day)
    return month_view(reservations, day)
