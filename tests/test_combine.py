import pytest

from unordered_compare import SEQUENTIAL, UnknownCombiner, available_combiners, get_combiner
from unordered_compare.combine import AdditiveSum, SetCollapse, SortedChain
from unordered_compare.digest import SHA256, XXH3


def test_available_combiners() -> None:
    assert available_combiners() == ["set", "sorted", "sum"]
    assert isinstance(get_combiner("sorted"), SortedChain)
    assert isinstance(get_combiner("SET"), SetCollapse)
    assert isinstance(get_combiner("sum"), AdditiveSum)


def test_unknown_combiner() -> None:
    with pytest.raises(UnknownCombiner):
        get_combiner("xor")


def test_sorted_chain_folds_digests_in_byte_order() -> None:
    digests = [SHA256.digest(b"b"), SHA256.digest(b"a"), SHA256.digest(b"c")]
    comb = SortedChain()
    summary = comb.summarize(digests, SHA256, SEQUENTIAL)
    assert summary == sorted(digests)
    assert comb.fold(summary, SHA256) == SHA256.chain(sorted(digests))


def test_set_collapse_drops_duplicates() -> None:
    d = XXH3.digest(b"x")
    summary = SetCollapse().summarize([d, d, d], XXH3, SEQUENTIAL)
    assert summary == frozenset([d])


def test_additive_sum_wraps_at_digest_width() -> None:
    top = b"\xff" * XXH3.digest_size
    one = (1).to_bytes(XXH3.digest_size, "big")
    assert AdditiveSum().summarize([top, one], XXH3, SEQUENTIAL) == (2, 0)


def test_partial_summaries_merge_to_sequential_result(parallel, rng) -> None:
    digests = [SHA256.digest(rng.randbytes(4)) for _ in range(300)]
    digests += digests[:50]
    for comb in (SortedChain(), SetCollapse(), AdditiveSum()):
        assert comb.summarize(digests, SHA256, parallel) == comb.summarize(digests, SHA256, SEQUENTIAL)
