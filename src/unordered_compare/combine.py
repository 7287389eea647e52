"""Order-insensitive combiners.

A combiner turns a group of entry digests into a summary that does not
depend on the order the digests arrived in, and folds that summary into a
single fingerprint. Equality checks compare summaries directly and never
pay for the fold.

``sorted``
    Sort the digests and chain them through the family's hasher. Keeps
    duplicate counts. The chain is a sequential fold in every mode.
``set``
    Collapse the digests into a frozenset. Parallel-friendly, but duplicates
    collapse to one occurrence, so two collections that differ only in how
    often an entry repeats compare equal.
``sum``
    Add the digests as unsigned integers modulo ``2 ** (8 * digest_size)``,
    keeping the entry count next to the total. Keeps duplicate counts and
    merges partial sums from any number of workers. The linear structure is
    easier to collide on purpose than a hash chain.
"""

from __future__ import annotations

from typing import Any, Sequence

from .digest import Digest, HashFamily
from .errors import UnknownCombiner
from .execution import ExecutionMode


class SortedChain:
    name = "sorted"
    preserves_multiplicity = True

    def summarize(self, digests: Sequence[Digest], family: HashFamily, mode: ExecutionMode) -> list[Digest]:
        return mode.sort(digests)

    def fold(self, summary: list[Digest], family: HashFamily) -> Digest:
        return family.chain(summary)


class SetCollapse:
    name = "set"
    preserves_multiplicity = False

    def summarize(self, digests: Sequence[Digest], family: HashFamily, mode: ExecutionMode) -> frozenset[Digest]:
        partials = mode.reduce_partitions(frozenset, digests)
        return frozenset().union(*partials)

    def fold(self, summary: frozenset[Digest], family: HashFamily) -> Digest:
        return family.chain(sorted(summary))


class AdditiveSum:
    name = "sum"
    preserves_multiplicity = True

    def summarize(self, digests: Sequence[Digest], family: HashFamily, mode: ExecutionMode) -> tuple[int, int]:
        modulus = 1 << (8 * family.digest_size)

        def partial(part: Sequence[Digest]) -> int:
            acc = 0
            for d in part:
                acc = (acc + int.from_bytes(d, "big")) % modulus
            return acc

        total = sum(mode.reduce_partitions(partial, digests)) % modulus
        return len(digests), total

    def fold(self, summary: tuple[int, int], family: HashFamily) -> Digest:
        count, total = summary
        hasher = family.new()
        hasher.update(count.to_bytes(8, "big"))
        hasher.update(total.to_bytes(family.digest_size, "big"))
        return hasher.digest()


Combiner = Any

_COMBINERS: dict[str, Combiner] = {c.name: c for c in (SortedChain(), SetCollapse(), AdditiveSum())}


def available_combiners() -> list[str]:
    return sorted(_COMBINERS)


def get_combiner(combiner: str | Combiner) -> Combiner:
    """Resolve a combiner name, passing combiner objects through."""
    if not isinstance(combiner, str):
        return combiner
    try:
        return _COMBINERS[combiner.lower()]
    except KeyError:
        raise UnknownCombiner(combiner, available_combiners()) from None
