from collections.abc import Callable, Iterator
from typing import Any

from offset_page.core.exceptions import InvalidPaginationResultError
from offset_page.sources.base import Source, T


class SourceCallbackAdapter(Source[T]):
    """Expose a plain `(page, page_size)` function as a Source."""

    def __init__(self, callback: Callable[[int, int], Any]) -> None:
        self.callback = callback

    def fetch(self, page: int, page_size: int) -> Iterator[T]:
        result = self.callback(page, page_size)
        if not isinstance(result, Iterator):
            raise InvalidPaginationResultError.for_invalid_callback_result(
                result, "Iterator", "should return Iterator"
            )
        return result
