"""Synthetic data and timing helpers for the ``bench`` command."""

from __future__ import annotations

import random
import time
from dataclasses import dataclass
from typing import Callable, Iterator, Sequence

from .combine import get_combiner
from .digest import get_family
from .equality import equal
from .execution import ExecutionMode, get_mode
from .fingerprint import fingerprint
from .oracle import equal_by_sorting


@dataclass(frozen=True)
class BenchResult:
    label: str
    seconds: float
    bytes_processed: int
    outcome: str


def pretty_bytes(b):
    g = 1024**3
    m = 1024**2
    if b >= g:
        return f"{b/g:.2f} GB"
    if b >= m:
        return f"{b/m:.2f} MB"
    return f"{b/1024:.2f} KB"


def pretty_time(s):
    if s < 1:
        return f"{s*1000:.0f}ms"
    if s < 60:
        return f"{s:.2f}s"
    m = int(s // 60)
    sec = s - m*60
    return f"{m}m{sec:.0f}s"


def random_entries(count: int, entry_size: int, seed: int | None = None) -> list[bytes]:
    rng = random.Random(seed)
    return [rng.randbytes(entry_size) for _ in range(count)]


def shuffled(entries: Sequence[bytes], seed: int | None = None) -> list[bytes]:
    out = list(entries)
    random.Random(seed).shuffle(out)
    return out


def _time(label: str, fn: Callable[[], object], size: int) -> BenchResult:
    t0 = time.perf_counter()
    out = fn()
    dt = time.perf_counter() - t0
    outcome = out.hex() if isinstance(out, bytes) else str(out)
    return BenchResult(label, dt, size, outcome)


def run_benchmarks(
    entries: Sequence[bytes],
    families: Sequence[str],
    modes: Sequence[str | ExecutionMode],
    combiner: str = "sorted",
    seed: int | None = None,
) -> Iterator[BenchResult]:
    """Time fingerprint and equality runs for every family and mode.

    Equality runs compare ``entries`` against a shuffled copy, and each mode
    also gets a compare-via-sorting baseline.
    """
    other = shuffled(entries, seed)
    size = sum(len(e) for e in entries)
    resolved = [get_mode(m) for m in modes]
    comb = get_combiner(combiner)
    for mode in resolved:
        for name in families:
            fam = get_family(name)
            yield _time(
                f"{mode.name} {fam.name} fingerprint",
                lambda: fingerprint(entries, fam, comb, mode),
                size,
            )
    for mode in resolved:
        yield _time(
            f"{mode.name} compare via sorting",
            lambda: equal_by_sorting(entries, other, mode),
            size * 2,
        )
        for name in families:
            fam = get_family(name)
            yield _time(
                f"{mode.name} compare via {fam.name}",
                lambda: equal(entries, other, fam, comb, mode),
                size * 2,
            )


def format_result(result: BenchResult) -> str:
    rate = (result.bytes_processed / result.seconds) if result.seconds > 0 else 0
    return (
        f"{result.label:<32} {result.outcome:<16.16} "
        f"took {pretty_time(result.seconds)} "
        f"rate {pretty_bytes(rate)}/s"
    )
