"""
Public gallery navigation
Carousel stepping and grid paging over a list of image URLs
"""
from enum import Enum
from typing import Sequence

from hotelpms.services.pagination import paginate

GRID_PER_PAGE = 6


class GalleryView(str, Enum):
    CAROUSEL = "carousel"
    GRID = "grid"


def carousel_step(index: int, count: int, direction: int) -> int:
    """Next carousel index; wraps around at both ends"""
    if count <= 0:
        return 0
    return (index + direction) % count


def grid_page(items: Sequence, page: int, per_page: int = GRID_PER_PAGE) -> dict:
    return paginate(items, page, per_page)


def build_gallery(images: Sequence[str], view: GalleryView,
                  index: int = 0, page: int = 1) -> dict:
    view = GalleryView(view)
    if view == GalleryView.CAROUSEL:
        count = len(images)
        current = carousel_step(index, count, 0)
        return {
            'view': view.value,
            'index': current,
            'count': count,
            'image': images[current] if count else None,
            'previous_index': carousel_step(current, count, -1),
            'next_index': carousel_step(current, count, 1),
        }

    result = grid_page(images, page)
    result['view'] = view.value
    return result
