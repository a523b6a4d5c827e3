"""Pagination request and page plan models."""

from pydantic import BaseModel, ConfigDict

from offset_page.core.exceptions import InvalidPaginationArgumentError

FIELD_DESCRIPTIONS = {
    "offset": "number of items to skip before the first returned item",
    "limit": "maximum number of items to return",
    "delivered": "number of items already delivered for this request",
}


class PaginationRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    offset: int
    limit: int
    delivered: int = 0

    @classmethod
    def from_arguments(cls, offset: int, limit: int, delivered: int = 0) -> "PaginationRequest":
        """
        Validate raw offset/limit/delivered values and build a request.
        Raises InvalidPaginationArgumentError (never pydantic's ValidationError).
        """
        values = {"offset": offset, "limit": limit, "delivered": delivered}
        for name, value in values.items():
            if not isinstance(value, int) or isinstance(value, bool):
                raise InvalidPaginationArgumentError.for_non_integer(name, value, FIELD_DESCRIPTIONS[name])
            if value < 0:
                raise InvalidPaginationArgumentError.for_invalid_parameter(name, value, FIELD_DESCRIPTIONS[name])
        if limit == 0 and (offset != 0 or delivered != 0):
            raise InvalidPaginationArgumentError.for_invalid_zero_limit(offset, limit, delivered)
        return cls(offset=offset, limit=limit, delivered=delivered)

    @property
    def is_unlimited(self) -> bool:
        return self.limit == 0

    @property
    def is_noop(self) -> bool:
        """All-zero request: start of pagination, fetch nothing."""
        return self.offset == 0 and self.limit == 0 and self.delivered == 0


class PagePlan(BaseModel):
    model_config = ConfigDict(frozen=True)

    page: int
    page_size: int

    @property
    def is_fetchable(self) -> bool:
        return self.page > 0 and self.page_size > 0
