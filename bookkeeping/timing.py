import time
from contextlib import contextmanager
from typing import Callable, Iterator

from bookkeeping.logging_setup import get_logger

logger = get_logger("bookkeeping.timing")


class Timing:
    def __init__(self, description: str):
        self.description = description
        self.elapsed_ms: float = 0.0


@contextmanager
def timed(description: str) -> Iterator[Timing]:
    """Time the enclosed block; ``elapsed_ms`` is set once it exits, even on error."""
    timing = Timing(description)
    start = time.perf_counter()
    try:
        yield timing
    finally:
        timing.elapsed_ms = (time.perf_counter() - start) * 1000
        logger.info("%s took %.3f ms", description, timing.elapsed_ms)


def measure_execution_time(func: Callable[[], object], description: str) -> float:
    with timed(description) as timing:
        func()
    return timing.elapsed_ms
