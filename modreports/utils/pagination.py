from typing import Optional, Tuple

from modreports.config import settings
from modreports.errors import InvalidPagination


def limit_and_offset(page: Optional[int], limit: Optional[int]) -> Tuple[int, int]:
    """
    Turn a 1-based page number and page size into SQL limit/offset.

    Args:
        page: Page number; None or 0 means the first page
        limit: Page size; None means settings.FETCH_LIMIT_DEFAULT

    Returns:
        Tuple of (limit, offset)

    Raises:
        InvalidPagination: If page is negative or limit is outside
            1..settings.FETCH_LIMIT_MAX
    """
    if page is None or page == 0:
        page = 1
    elif page < 0:
        raise InvalidPagination(f"Page must be 1 or greater, got {page}")

    if limit is None:
        limit = settings.FETCH_LIMIT_DEFAULT
    elif not (1 <= limit <= settings.FETCH_LIMIT_MAX):
        raise InvalidPagination(
            f"Limit must be between 1 and {settings.FETCH_LIMIT_MAX}, got {limit}"
        )

    return limit, limit * (page - 1)
