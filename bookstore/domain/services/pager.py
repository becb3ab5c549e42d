"""
Manual pagination over an already ordered candidate list.
"""

from typing import Sequence, Tuple

from bookstore.domain.entities import CatalogRecord, PagedResult
from bookstore.domain.value_objects import ClampPolicy


def page_bounds(
    page: int,
    size: int,
    total: int,
    clamp: ClampPolicy,
) -> Tuple[int, int]:
    """
    Compute the half-open slice [from_index, to_index) for a page request.

    When the requested page starts at or past ``total`` the start index is
    clamped according to ``clamp``. Requests with ``page < 1`` or
    ``size < 1`` produce an empty range.

    Args:
        page: 1-based page index
        size: Page capacity
        total: Number of candidates
        clamp: Start index policy for out-of-range pages

    Returns:
        Tuple of (from_index, to_index); empty when from_index >= to_index
    """
    if page < 1 or size < 1:
        return 0, 0

    from_index = (page - 1) * size
    if from_index >= total:
        if clamp == ClampPolicy.LAST_FULL_PAGE:
            from_index = max(0, total - size)
        else:
            from_index = 0

    to_index = min(from_index + size, total)
    return from_index, to_index


def paginate(
    candidates: Sequence[CatalogRecord],
    page: int,
    size: int,
    clamp: ClampPolicy,
) -> PagedResult:
    """
    Slice one page out of ``candidates``.

    The result echoes the requested ``page`` and ``size`` even when the
    slice was clamped, and always reports the full candidate count.
    """
    total = len(candidates)
    from_index, to_index = page_bounds(page, size, total, clamp)

    records = list(candidates[from_index:to_index]) if from_index < to_index else []

    return PagedResult(records=records, page=page, size=size, total=total)
