"""Sequential and parallel execution strategies.

Every engine takes one of these objects and routes its per-entry map, its
sorts and its partial reductions through it. The parallel strategy splits
the input into one contiguous partition per worker and runs them on a
fixed-size thread pool; results come back in partition order so the outcome
never depends on which worker finishes first.
"""

from __future__ import annotations

import heapq
import logging
import os
from concurrent.futures import ThreadPoolExecutor
from contextlib import contextmanager
from dataclasses import dataclass, field, replace
from typing import Callable, Iterator, Optional, Sequence, TypeVar, Union

from .errors import ConfigurationError, UnknownExecutionMode

logger = logging.getLogger(__name__)

T = TypeVar("T")
R = TypeVar("R")

DEFAULT_MIN_PARALLEL_ITEMS = 64


@dataclass(frozen=True)
class Sequential:
    """Run everything on the calling thread."""

    name = "sequential"

    @contextmanager
    def pool(self) -> Iterator["Sequential"]:
        yield self

    def map(self, fn: Callable[[T], R], items: Sequence[T]) -> list[R]:
        return [fn(item) for item in items]

    def sort(self, items: Sequence[T]) -> list[T]:
        return sorted(items)

    def reduce_partitions(self, fn: Callable[[Sequence[T]], R], items: Sequence[T]) -> list[R]:
        return [fn(items)]


@dataclass(frozen=True)
class Parallel:
    """Fan work out over a fixed-size thread pool.

    ``workers`` defaults to the CPU count. Inputs shorter than
    ``min_parallel_items`` run inline because a pool does not pay off for
    them; the results are the same either way.
    """

    workers: int | None = None
    min_parallel_items: int = DEFAULT_MIN_PARALLEL_ITEMS
    executor: Optional[ThreadPoolExecutor] = field(default=None, compare=False, repr=False)

    name = "parallel"

    def __post_init__(self) -> None:
        if self.workers is not None and self.workers < 1:
            raise ConfigurationError(f"workers must be at least 1, got {self.workers}")
        if self.min_parallel_items < 0:
            raise ConfigurationError(
                f"min_parallel_items must not be negative, got {self.min_parallel_items}"
            )

    @contextmanager
    def pool(self) -> Iterator["Parallel"]:
        """Hold one thread pool open for every phase run inside the block."""
        if self.executor is not None:
            yield self
            return
        with ThreadPoolExecutor(max_workers=self.worker_count) as ex:
            yield replace(self, executor=ex)

    @property
    def worker_count(self) -> int:
        return self.workers or os.cpu_count() or 1

    def _should_fan_out(self, items: Sequence) -> bool:
        return self.worker_count > 1 and len(items) >= max(self.min_parallel_items, 2)

    def partitions(self, items: Sequence[T]) -> list[Sequence[T]]:
        """Split ``items`` into at most ``worker_count`` contiguous slices."""
        n = len(items)
        if n == 0:
            return []
        k = min(self.worker_count, n)
        size = -(-n // k)
        return [items[i : i + size] for i in range(0, n, size)]

    def _run(self, fn: Callable[[Sequence[T]], R], parts: list[Sequence[T]]) -> list[R]:
        logger.debug("running %d partitions on %d workers", len(parts), self.worker_count)
        # Executor.map yields in submission order and re-raises worker errors.
        if self.executor is not None:
            return list(self.executor.map(fn, parts))
        with ThreadPoolExecutor(max_workers=self.worker_count) as ex:
            return list(ex.map(fn, parts))

    def map(self, fn: Callable[[T], R], items: Sequence[T]) -> list[R]:
        if not self._should_fan_out(items):
            return [fn(item) for item in items]
        chunks = self._run(lambda part: [fn(item) for item in part], self.partitions(items))
        out: list[R] = []
        for chunk in chunks:
            out.extend(chunk)
        return out

    def sort(self, items: Sequence[T]) -> list[T]:
        if not self._should_fan_out(items):
            return sorted(items)
        runs = self._run(sorted, self.partitions(items))
        return list(heapq.merge(*runs))

    def reduce_partitions(self, fn: Callable[[Sequence[T]], R], items: Sequence[T]) -> list[R]:
        if not self._should_fan_out(items):
            return [fn(items)]
        return self._run(fn, self.partitions(items))


ExecutionMode = Union[Sequential, Parallel]

SEQUENTIAL = Sequential()
PARALLEL = Parallel()


def get_mode(
    mode: str | ExecutionMode,
    workers: int | None = None,
    min_parallel_items: int = DEFAULT_MIN_PARALLEL_ITEMS,
) -> ExecutionMode:
    """Resolve ``"sequential"`` / ``"parallel"``, passing mode objects through."""
    if isinstance(mode, (Sequential, Parallel)):
        return mode
    key = mode.lower()
    if key in ("sequential", "seq"):
        return SEQUENTIAL
    if key in ("parallel", "par"):
        return Parallel(workers=workers, min_parallel_items=min_parallel_items)
    raise UnknownExecutionMode(mode)
