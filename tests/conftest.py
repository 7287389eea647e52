from __future__ import annotations

import random
from typing import Callable

import pytest

from unordered_compare import Parallel

Collection = list[bytes]


@pytest.fixture
def rng() -> random.Random:
    return random.Random(20240611)


@pytest.fixture
def make_collection(rng: random.Random) -> Callable[[], Collection]:
    """Random entries of uneven length, with repeats and empty entries mixed in."""

    def make(max_entries: int = 40) -> Collection:
        out: Collection = []
        for _ in range(rng.randint(0, max_entries)):
            roll = rng.random()
            if out and roll < 0.15:
                out.append(rng.choice(out))
            elif roll < 0.2:
                out.append(b"")
            else:
                out.append(rng.randbytes(rng.randint(1, 24)))
        return out

    return make


@pytest.fixture
def parallel() -> Parallel:
    # min_parallel_items=0 forces the pool even for tiny inputs
    return Parallel(workers=4, min_parallel_items=0)
