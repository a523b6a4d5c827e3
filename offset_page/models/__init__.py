from offset_page.models.pagination import PagePlan, PaginationRequest

__all__ = [
    "PagePlan",
    "PaginationRequest",
]
