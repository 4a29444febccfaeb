"""Offset/window pagination over an already filtered and sorted result list."""

import math
from collections.abc import Sequence
from typing import TypeVar

from app.schemas.product import Pagination

T = TypeVar("T")


def paginate(items: Sequence[T], page: int = 1, limit: int = 10) -> tuple[list[T], Pagination]:
    """Slice one page (1-indexed). Pages past the end are empty, not an error."""
    if page < 1 or limit < 1:
        raise ValueError("page and limit must be positive")
    start = (page - 1) * limit
    total = len(items)
    window = list(items[start:start + limit])
    return window, Pagination(page=page, limit=limit, total=total, pages=math.ceil(total / limit))
