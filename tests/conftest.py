import io
import os
from collections.abc import Callable, Iterator

import pytest

os.environ.setdefault("OFFSET_PAGE_DEBUG", "false")


@pytest.fixture
def log_stream() -> Iterator[Callable[..., io.StringIO]]:
    """Route library logs into a StringIO for one test; the logger is reset afterwards."""
    from offset_page.core.logging import configure_logging, reset_logging

    def configure(debug: bool = False) -> io.StringIO:
        stream = io.StringIO()
        configure_logging(debug=debug, stream=stream)
        return stream

    yield configure
    reset_logging()


@pytest.fixture
def recording_callback() -> Callable[[list], Callable[[int, int], Iterator]]:
    """Build a page callback over `data` that records every (page, size) it is called with."""

    def build(data: list):
        calls: list[tuple[int, int]] = []

        def callback(page: int, size: int) -> Iterator:
            calls.append((page, size))
            start = (page - 1) * size
            return iter(data[start : start + size])

        callback.calls = calls
        return callback

    return build
