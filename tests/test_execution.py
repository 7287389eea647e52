import threading

import pytest

from unordered_compare import (
    ConfigurationError,
    Parallel,
    SEQUENTIAL,
    Sequential,
    UnknownExecutionMode,
    get_mode,
)


def test_get_mode() -> None:
    assert get_mode("sequential") is SEQUENTIAL
    assert get_mode("SEQ") is SEQUENTIAL
    mode = get_mode("parallel", workers=3, min_parallel_items=10)
    assert mode == Parallel(workers=3, min_parallel_items=10)
    assert get_mode(mode) is mode


def test_unknown_mode() -> None:
    with pytest.raises(UnknownExecutionMode):
        get_mode("async")


def test_invalid_parallel_settings() -> None:
    with pytest.raises(ConfigurationError):
        Parallel(workers=0)
    with pytest.raises(ConfigurationError):
        Parallel(min_parallel_items=-1)


def test_partitions_are_contiguous_and_cover_input() -> None:
    mode = Parallel(workers=3)
    items = list(range(10))
    parts = mode.partitions(items)
    assert len(parts) == 3
    assert [x for p in parts for x in p] == items
    assert mode.partitions([]) == []
    assert mode.partitions([1]) == [[1]]


def test_parallel_map_preserves_order_and_uses_threads(parallel: Parallel) -> None:
    seen: set[int] = set()

    def fn(x: int) -> int:
        seen.add(threading.get_ident())
        return x * 2

    items = list(range(1000))
    assert parallel.map(fn, items) == [x * 2 for x in items]
    assert threading.get_ident() not in seen


def test_small_inputs_run_inline() -> None:
    mode = Parallel(workers=4, min_parallel_items=100)
    seen: set[int] = set()

    def fn(x: int) -> int:
        seen.add(threading.get_ident())
        return x

    mode.map(fn, list(range(10)))
    assert seen == {threading.get_ident()}


def test_parallel_sort_matches_sorted(parallel: Parallel, rng) -> None:
    items = [rng.randbytes(rng.randint(0, 8)) for _ in range(500)]
    assert parallel.sort(items) == sorted(items)
    assert Sequential().sort(items) == sorted(items)


def test_reduce_partitions(parallel: Parallel) -> None:
    items = list(range(100))
    assert sum(parallel.reduce_partitions(sum, items)) == sum(items)
    assert len(parallel.reduce_partitions(sum, items)) == 4
    assert SEQUENTIAL.reduce_partitions(sum, items) == [sum(items)]


def test_worker_errors_propagate(parallel: Parallel) -> None:
    def boom(x: int) -> int:
        if x == 7:
            raise RuntimeError("boom")
        return x

    with pytest.raises(RuntimeError, match="boom"):
        parallel.map(boom, list(range(20)))
