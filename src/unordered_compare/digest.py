"""Per-entry digests under pluggable hash families.

A hash family is a plain value: a name, a digest size and two callables.
One digests a single entry, the other returns an incremental hasher used
when digests are folded into a fingerprint. Families are picked by name at
call time.
"""

from __future__ import annotations

import hashlib
import logging
from dataclasses import dataclass
from typing import Any, Callable, Iterable, Union

import blake3
import xxhash

from .errors import UnknownHashFamily

logger = logging.getLogger(__name__)

Entry = Union[bytes, bytearray, memoryview]
Digest = bytes


@dataclass(frozen=True)
class HashFamily:
    """A named hash function producing fixed-size digests."""

    name: str
    digest_size: int
    digest: Callable[[Entry], Digest]
    new: Callable[[], Any]
    cryptographic: bool = False

    def chain(self, digests: Iterable[Digest]) -> Digest:
        """Feed ``digests`` into one hasher in iteration order."""
        hasher = self.new()
        for d in digests:
            hasher.update(d)
        return hasher.digest()


def _sha256(entry: Entry) -> Digest:
    return hashlib.sha256(entry).digest()


def _blake3(entry: Entry) -> Digest:
    return blake3.blake3(entry).digest()


XXH3 = HashFamily(
    name="xxh3",
    digest_size=8,
    digest=xxhash.xxh3_64_digest,
    new=xxhash.xxh3_64,
)

SHA256 = HashFamily(
    name="sha256",
    digest_size=32,
    digest=_sha256,
    new=hashlib.sha256,
    cryptographic=True,
)

BLAKE3 = HashFamily(
    name="blake3",
    digest_size=32,
    digest=_blake3,
    new=blake3.blake3,
    cryptographic=True,
)

_FAMILIES: dict[str, HashFamily] = {f.name: f for f in (XXH3, SHA256, BLAKE3)}


def available_families() -> list[str]:
    """Return the registered family names."""
    return sorted(_FAMILIES)


def register_family(family: HashFamily) -> None:
    """Make ``family`` selectable by name."""
    logger.debug("registering hash family %s (%d bytes)", family.name, family.digest_size)
    _FAMILIES[family.name] = family


def get_family(family: str | HashFamily) -> HashFamily:
    """Resolve a family name, passing HashFamily values through."""
    if isinstance(family, HashFamily):
        return family
    try:
        return _FAMILIES[family.lower()]
    except KeyError:
        raise UnknownHashFamily(family, available_families()) from None
