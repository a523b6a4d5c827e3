"""Page planning: map (offset, limit, delivered) to the next page to request."""

from abc import ABC, abstractmethod
from math import isqrt

from offset_page.models.pagination import PagePlan


class PagePlanner(ABC):
    @abstractmethod
    def plan(self, offset: int, limit: int, delivered: int = 0) -> PagePlan | None:
        """Return the next page to fetch, or None when nothing more is needed."""
        ...


def largest_divisor_at_most(n: int, bound: int) -> int:
    """Largest d <= bound dividing n (n, bound >= 1)."""
    root = isqrt(n)
    if bound <= root:
        return next(d for d in range(bound, 0, -1) if n % d == 0)
    best = 1
    for d in range(1, root + 1):
        if n % d:
            continue
        pair = n // d
        if pair <= bound:
            # Pairs shrink as d grows, so the first fitting one is the largest
            return pair
        best = d
    return best


class OffsetPlanner(PagePlanner):
    """
    Default planner.
    Picks a page size so that the first item of the planned page sits exactly at
    absolute position offset + delivered. For offset >= limit the size is the
    largest divisor of offset not above limit, so a prime offset falls back to
    single-item pages until the position realigns.
    """

    def plan(self, offset: int, limit: int, delivered: int = 0) -> PagePlan | None:
        offset = max(0, offset)
        limit = max(0, limit)
        delivered = max(0, delivered)

        if offset == 0 and limit == 0 and delivered == 0:
            return PagePlan(page=0, page_size=0)
        if delivered > 0:
            if limit > delivered:
                return self.plan(offset + delivered, limit - delivered)
            return None
        if offset == 0:
            return PagePlan(page=1, page_size=limit)
        if limit == 0 or offset < limit:
            return PagePlan(page=2, page_size=offset)
        size = largest_divisor_at_most(offset, limit)
        return PagePlan(page=offset // size + 1, page_size=size)
