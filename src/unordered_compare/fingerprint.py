"""Fingerprints for whole collections."""

from __future__ import annotations

import logging
from typing import Iterable

from .combine import Combiner, get_combiner
from .digest import Digest, Entry, HashFamily, get_family
from .execution import SEQUENTIAL, ExecutionMode, get_mode

logger = logging.getLogger(__name__)


def entry_digests(
    collection: Iterable[Entry],
    family: str | HashFamily = "xxh3",
    mode: str | ExecutionMode = SEQUENTIAL,
) -> list[Digest]:
    """Digest every entry, keeping the input order."""
    family = get_family(family)
    mode = get_mode(mode)
    entries = collection if isinstance(collection, (list, tuple)) else list(collection)
    return mode.map(family.digest, entries)


def summarize(
    collection: Iterable[Entry],
    family: HashFamily,
    combiner: Combiner,
    mode: ExecutionMode,
):
    """Digest ``collection`` and reduce the digests to the combiner's summary."""
    digests = entry_digests(collection, family, mode)
    logger.debug(
        "summarizing %d digests with %s/%s/%s", len(digests), family.name, combiner.name, mode.name
    )
    return combiner.summarize(digests, family, mode)


def fingerprint(
    collection: Iterable[Entry],
    family: str | HashFamily = "xxh3",
    combiner: str | Combiner = "sorted",
    mode: str | ExecutionMode = SEQUENTIAL,
) -> Digest:
    """Return one digest-sized value that ignores the order of ``collection``.

    Equal multisets always produce equal fingerprints (equal sets, for the
    ``set`` combiner). Different collections collide only as often as the
    family's digest width allows.
    """
    family = get_family(family)
    combiner = get_combiner(combiner)
    mode = get_mode(mode)
    with mode.pool() as pooled:
        summary = summarize(collection, family, combiner, pooled)
    return combiner.fold(summary, family)
