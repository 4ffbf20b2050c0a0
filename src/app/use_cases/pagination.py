"""
Page/limit windowing shared by every list use case.
"""

import math
from typing import Generic, List, Optional, TypeVar

from pydantic import BaseModel

from src.app.error_codes import ErrorCode
from src.libs.result import Error

T = TypeVar("T")

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10
MAX_LIMIT = 100


class PaginationInfo(BaseModel):
    total_items: int
    total_pages: int
    current_page: int
    limit: int
    has_next: bool
    has_prev: bool

    @classmethod
    def build(cls, total_items: int, page: int, limit: int) -> "PaginationInfo":
        total_pages = math.ceil(total_items / limit) if total_items else 0
        return cls(
            total_items=total_items,
            total_pages=total_pages,
            current_page=page,
            limit=limit,
            has_next=page < total_pages,
            has_prev=page > 1,
        )


class Page(BaseModel, Generic[T]):
    data: List[T]
    pagination: PaginationInfo


def validate_window(page: int, limit: int) -> Optional[Error]:
    """Return an INVALID_INPUT error for an out-of-range window, else None."""
    if page < 1:
        return Error(ErrorCode.INVALID_INPUT, "Page must be greater than 0")
    if limit < 1 or limit > MAX_LIMIT:
        return Error(ErrorCode.INVALID_INPUT, f"Limit must be between 1 and {MAX_LIMIT}")
    return None


def offset_of(page: int, limit: int) -> int:
    return (page - 1) * limit
