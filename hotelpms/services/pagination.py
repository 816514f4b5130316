"""
List pagination shared by the dashboard tables
"""
import math
from typing import Sequence, TypeVar

T = TypeVar("T")


def paginate(items: Sequence[T], page: int, per_page: int) -> dict:
    """Slice one page out of an already-fetched list

    page is clamped to [1, total_pages]; an empty list has zero pages and
    still reports page 1.
    """
    total = len(items)
    total_pages = math.ceil(total / per_page) if per_page > 0 else 0
    page = max(1, min(page, total_pages or 1))
    start = (page - 1) * per_page
    return {
        'items': list(items[start:start + per_page]),
        'page': page,
        'total_pages': total_pages,
        'total': total,
    }
