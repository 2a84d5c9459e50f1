"""Fork-join helper used for every phase of the transform."""

from concurrent.futures import Future, ThreadPoolExecutor
from typing import Callable, Iterable, List, TypeVar

T = TypeVar('T')
R = TypeVar('R')


def parallel_for(fn: Callable[[T], R], items: Iterable[T], max_workers: int = 1) -> List[R]:
    """Run fn over items and return results in item order.

    Returns only after every unit has finished, so consecutive calls are
    separated by a barrier. The first exception raised by a unit propagates.
    """
    items = list(items)
    if max_workers <= 1 or len(items) <= 1:
        return [fn(item) for item in items]

    with ThreadPoolExecutor(max_workers=min(max_workers, len(items))) as pool:
        futures: List[Future] = [pool.submit(fn, item) for item in items]
        return [fut.result() for fut in futures]


def chunk_ranges(n: int, parts: int) -> List[range]:
    """Split range(n) into at most ``parts`` contiguous bands."""
    if n <= 0:
        return []
    parts = max(1, min(parts, n))
    chunk = (n + parts - 1) // parts
    return [range(start, min(start + chunk, n)) for start in range(0, n, chunk)]
