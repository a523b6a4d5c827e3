from collections.abc import Iterator, Sequence

from offset_page.sources.base import Source, T


class ArraySource(Source[T]):
    def __init__(self, data: Sequence[T]) -> None:
        self.data = data

    def fetch(self, page: int, page_size: int) -> Iterator[T]:
        # Pages below 1 read as the first page
        page = max(1, page)
        if page_size > 0:
            start = (page - 1) * page_size
            yield from self.data[start : start + page_size]
