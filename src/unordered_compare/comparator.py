"""A reusable bundle of hash family, combiner and execution mode."""

from __future__ import annotations

from typing import Iterable

from .combine import Combiner, get_combiner
from .config import Settings
from .digest import Digest, Entry, HashFamily, get_family
from .equality import equal, equal_by_fingerprint
from .execution import SEQUENTIAL, ExecutionMode, get_mode
from .fingerprint import fingerprint


class Comparator:
    """Fingerprint and compare collections with one fixed configuration.

    Names are resolved once, so a bad family or combiner fails at
    construction rather than on first use.
    """

    def __init__(
        self,
        family: str | HashFamily = "xxh3",
        combiner: str | Combiner = "sorted",
        mode: str | ExecutionMode = SEQUENTIAL,
    ) -> None:
        self.family = get_family(family)
        self.combiner = get_combiner(combiner)
        self.mode = get_mode(mode)

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> "Comparator":
        if settings is None:
            settings = Settings.from_env()
        mode = get_mode(settings.mode, settings.workers, settings.min_parallel_items)
        return cls(settings.hash, settings.combiner, mode)

    def __repr__(self) -> str:
        return f"Comparator(family={self.family.name!r}, combiner={self.combiner.name!r}, mode={self.mode.name!r})"

    def fingerprint(self, collection: Iterable[Entry]) -> Digest:
        return fingerprint(collection, self.family, self.combiner, self.mode)

    def hexdigest(self, collection: Iterable[Entry]) -> str:
        return self.fingerprint(collection).hex()

    def equal(self, x: Iterable[Entry], y: Iterable[Entry]) -> bool:
        return equal(x, y, self.family, self.combiner, self.mode)

    def equal_by_fingerprint(self, x: Iterable[Entry], y: Iterable[Entry]) -> bool:
        return equal_by_fingerprint(x, y, self.family, self.combiner, self.mode)
