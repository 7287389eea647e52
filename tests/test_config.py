import pytest

from unordered_compare import Comparator, ConfigurationError, Parallel, SEQUENTIAL, Settings, UnknownHashFamily
from unordered_compare.execution import DEFAULT_MIN_PARALLEL_ITEMS


def test_defaults_with_empty_environment() -> None:
    settings = Settings.from_env({})
    assert settings == Settings()
    assert settings.hash == "xxh3"
    assert settings.combiner == "sorted"
    assert settings.mode == "sequential"
    assert settings.workers is None
    assert settings.min_parallel_items == DEFAULT_MIN_PARALLEL_ITEMS


def test_reads_environment(monkeypatch) -> None:
    monkeypatch.setenv("UNORDERED_HASH", "blake3")
    monkeypatch.setenv("UNORDERED_COMBINER", "sum")
    monkeypatch.setenv("UNORDERED_MODE", "parallel")
    monkeypatch.setenv("UNORDERED_WORKERS", "3")
    monkeypatch.setenv("UNORDERED_MIN_PARALLEL", "0")
    settings = Settings.from_env()
    assert settings == Settings("blake3", "sum", "parallel", 3, 0)


def test_bad_integer_in_environment() -> None:
    with pytest.raises(ConfigurationError, match="UNORDERED_WORKERS"):
        Settings.from_env({"UNORDERED_WORKERS": "many"})


def test_override_skips_none() -> None:
    settings = Settings().override(hash="sha256", mode=None)
    assert settings.hash == "sha256"
    assert settings.mode == "sequential"
    with pytest.raises(ConfigurationError):
        Settings().override(colour="blue")


def test_comparator_from_settings() -> None:
    cmp = Comparator.from_settings(Settings("sha256", "set", "parallel", 2, 5))
    assert cmp.family.name == "sha256"
    assert cmp.combiner.name == "set"
    assert cmp.mode == Parallel(workers=2, min_parallel_items=5)
    assert "sha256" in repr(cmp)


def test_comparator_rejects_unknown_names() -> None:
    with pytest.raises(UnknownHashFamily):
        Comparator.from_settings(Settings(hash="crc32"))


def test_comparator_methods_agree() -> None:
    cmp = Comparator("blake3", "sorted", SEQUENTIAL)
    x = [b"abc", b"de"]
    y = [b"de", b"abc"]
    assert cmp.equal(x, y)
    assert cmp.equal_by_fingerprint(x, y)
    assert cmp.hexdigest(x) == cmp.fingerprint(y).hex()
    assert not cmp.equal(x, [b"de", b"abc", b"abc"])


@pytest.mark.parametrize(
    "environ",
    [
        {"UNORDERED_WORKERS": "0"},
        {"UNORDERED_WORKERS": "-2", "UNORDERED_MODE": "parallel"},
        {"UNORDERED_MIN_PARALLEL": "-1"},
    ],
)
def test_out_of_range_integers_fail_in_any_mode(environ) -> None:
    with pytest.raises(ConfigurationError):
        Settings.from_env(environ)
