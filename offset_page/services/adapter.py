"""Offset/limit access on top of a page-based Source."""

from collections.abc import Callable, Iterator
from dataclasses import dataclass
from itertools import chain
from typing import Any, Generic

from offset_page.core.exceptions import InvalidPaginationResultError
from offset_page.core.logging import get_logger
from offset_page.models.pagination import PagePlan, PaginationRequest
from offset_page.services.planner import OffsetPlanner, PagePlanner
from offset_page.services.result import OffsetResult
from offset_page.sources.base import Source, T
from offset_page.sources.callback import SourceCallbackAdapter

log = get_logger(__name__)

_MISSING = object()


@dataclass
class DeliveryProgress:
    """Counters for one execute() call, shared by the page loop and its page wrappers."""

    total: int = 0  # yielded during this call
    current: int = 0  # caller baseline + yielded, fed to the planner

    def advance(self) -> None:
        self.total += 1
        self.current += 1

    def reached(self, request: PaginationRequest) -> bool:
        return not request.is_unlimited and self.total >= request.limit


class OffsetAdapter(Generic[T]):
    def __init__(self, source: Source[T], planner: PagePlanner | None = None) -> None:
        self.source = source
        self.planner = planner or OffsetPlanner()

    @classmethod
    def from_callback(
        cls, callback: Callable[[int, int], Any], planner: PagePlanner | None = None
    ) -> "OffsetAdapter[T]":
        return cls(SourceCallbackAdapter(callback), planner=planner)

    def execute(self, offset: int, limit: int, delivered: int = 0) -> OffsetResult[T]:
        """
        Plan and lazily fetch items [offset + delivered, offset + limit).
        Arguments are validated here; no page is fetched until the result is pulled.
        """
        request = PaginationRequest.from_arguments(offset, limit, delivered)
        if request.is_noop:
            return OffsetResult.empty()
        return OffsetResult(self._pages(request))

    def fetch_all(self, offset: int, limit: int, delivered: int = 0) -> list[T]:
        return self.execute(offset, limit, delivered).fetch_all()

    def _pages(self, request: PaginationRequest) -> Iterator[Iterator[T]]:
        progress = DeliveryProgress(current=request.delivered)
        reason = "limit_reached"
        while not progress.reached(request):
            plan = self.planner.plan(request.offset, request.limit, progress.current)
            if plan is None:
                reason = "planner_done"
                break
            if not plan.is_fetchable:
                log.warning("invalid_page_plan", page=plan.page, page_size=plan.page_size)
                reason = "invalid_plan"
                break
            items = self._fetch_page(plan, progress)
            first = next(items, _MISSING)
            if first is _MISSING:
                reason = "empty_page"
                break
            yield self._deliver(chain((first,), items), request, progress)
        log.debug(
            "pagination_done",
            reason=reason,
            offset=request.offset,
            limit=request.limit,
            delivered=progress.total,
        )

    def _fetch_page(self, plan: PagePlan, progress: DeliveryProgress) -> Iterator[T]:
        log.debug("page_fetch", page=plan.page, page_size=plan.page_size, delivered=progress.current)
        items = self.source.fetch(plan.page, plan.page_size)
        if not isinstance(items, Iterator):
            raise InvalidPaginationResultError.for_invalid_source_result(items, "Iterator", self.source)
        return items

    @staticmethod
    def _deliver(items: Iterator[T], request: PaginationRequest, progress: DeliveryProgress) -> Iterator[T]:
        for item in items:
            progress.advance()
            yield item
            # Stop before pulling the next source item
            if progress.reached(request):
                return
