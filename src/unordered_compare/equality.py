"""Order-insensitive equality between two collections."""

from __future__ import annotations

import logging
from typing import Iterable

from .combine import Combiner, get_combiner
from .digest import Entry, HashFamily, get_family
from .execution import SEQUENTIAL, ExecutionMode, get_mode
from .fingerprint import fingerprint, summarize

logger = logging.getLogger(__name__)


def equal(
    x: Iterable[Entry],
    y: Iterable[Entry],
    family: str | HashFamily = "xxh3",
    combiner: str | Combiner = "sorted",
    mode: str | ExecutionMode = SEQUENTIAL,
) -> bool:
    """Compare the combiner summaries of ``x`` and ``y`` without folding them."""
    family = get_family(family)
    combiner = get_combiner(combiner)
    mode = get_mode(mode)
    left = list(x)
    right = list(y)
    if combiner.preserves_multiplicity and len(left) != len(right):
        logger.debug("length mismatch %d != %d", len(left), len(right))
        return False
    with mode.pool() as pooled:
        return summarize(left, family, combiner, pooled) == summarize(right, family, combiner, pooled)


def equal_by_fingerprint(
    x: Iterable[Entry],
    y: Iterable[Entry],
    family: str | HashFamily = "xxh3",
    combiner: str | Combiner = "sorted",
    mode: str | ExecutionMode = SEQUENTIAL,
) -> bool:
    """Fingerprint both collections and compare the results."""
    with get_mode(mode).pool() as pooled:
        return fingerprint(x, family, combiner, pooled) == fingerprint(y, family, combiner, pooled)
