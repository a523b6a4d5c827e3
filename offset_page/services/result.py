"""Flat, one-shot view over per-page item iterators."""

from collections.abc import Iterable, Iterator
from enum import Enum
from typing import Any, Generic, TypeVar

T = TypeVar("T")


class ConsumptionState(str, Enum):
    NOT_STARTED = "not_started"
    IN_PROGRESS = "in_progress"
    EXHAUSTED = "exhausted"


class OffsetResult(Generic[T]):
    """
    Items from a sequence of pages, pulled lazily and counted as they are produced.
    A result is drained at most once: once exhausted, fetch() keeps returning its
    default and generator() keeps returning the same spent iterator.
    """

    def __init__(self, pages: Iterable[Iterable[T]]) -> None:
        self._pages = pages
        self._items: Iterator[T] | None = None
        self._fetched_count = 0
        self._state = ConsumptionState.NOT_STARTED

    @classmethod
    def empty(cls) -> "OffsetResult[T]":
        return cls(())

    @property
    def fetched_count(self) -> int:
        return self._fetched_count

    @property
    def state(self) -> ConsumptionState:
        return self._state

    def generator(self) -> Iterator[T]:
        if self._items is None:
            self._items = self._flatten()
        return self._items

    def __iter__(self) -> Iterator[T]:
        return self.generator()

    def fetch(self, default: Any = None) -> T | Any:
        """Pull one item; `default` once exhausted."""
        if self._state is ConsumptionState.EXHAUSTED:
            return default
        return next(self.generator(), default)

    def fetch_all(self) -> list[T]:
        """Pull every remaining item in arrival order."""
        if self._state is ConsumptionState.EXHAUSTED:
            return []
        return list(self.generator())

    def _flatten(self) -> Iterator[T]:
        self._state = ConsumptionState.IN_PROGRESS
        try:
            for page in self._pages:
                for item in page:
                    self._fetched_count += 1
                    yield item
        finally:
            self._state = ConsumptionState.EXHAUSTED
