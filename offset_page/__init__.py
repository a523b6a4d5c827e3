# Offset/limit pagination over page-based sources
from offset_page.core.config import Settings, get_settings
from offset_page.core.exceptions import (
    InvalidPaginationArgumentError,
    InvalidPaginationResultError,
    PaginationError,
)
from offset_page.core.logging import bind_context, configure_logging, get_logger, reset_logging
from offset_page.models.pagination import PagePlan, PaginationRequest
from offset_page.services.adapter import DeliveryProgress, OffsetAdapter
from offset_page.services.planner import OffsetPlanner, PagePlanner
from offset_page.services.result import ConsumptionState, OffsetResult
from offset_page.sources.base import Source
from offset_page.sources.callback import SourceCallbackAdapter
from offset_page.sources.memory import ArraySource

__version__ = "2.0.0"

__all__ = [
    "ArraySource",
    "ConsumptionState",
    "DeliveryProgress",
    "InvalidPaginationArgumentError",
    "InvalidPaginationResultError",
    "OffsetAdapter",
    "OffsetPlanner",
    "OffsetResult",
    "PagePlan",
    "PagePlanner",
    "PaginationError",
    "PaginationRequest",
    "Settings",
    "Source",
    "SourceCallbackAdapter",
    "bind_context",
    "configure_logging",
    "get_logger",
    "get_settings",
    "reset_logging",
]
