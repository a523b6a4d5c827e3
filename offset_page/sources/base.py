from abc import ABC, abstractmethod
from collections.abc import Iterator
from typing import Generic, TypeVar

T = TypeVar("T")


class Source(ABC, Generic[T]):
    @abstractmethod
    def fetch(self, page: int, page_size: int) -> Iterator[T]:
        """Return a lazy iterator over one page (pages start at 1); empty when out of range."""
        ...
