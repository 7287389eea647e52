"""Settings read from ``UNORDERED_*`` environment variables."""

from __future__ import annotations

import os
from dataclasses import dataclass, fields, replace
from typing import Mapping, Optional

from .errors import ConfigurationError
from .execution import DEFAULT_MIN_PARALLEL_ITEMS


def _get_int(environ: Mapping[str, str], key: str) -> Optional[int]:
    raw = environ.get(key)
    if raw is None or raw.strip() == "":
        return None
    try:
        return int(raw)
    except ValueError:
        raise ConfigurationError(f"{key} must be an integer, got '{raw}'") from None


@dataclass(frozen=True)
class Settings:
    hash: str = "xxh3"
    combiner: str = "sorted"
    mode: str = "sequential"
    workers: Optional[int] = None
    min_parallel_items: int = DEFAULT_MIN_PARALLEL_ITEMS

    def __post_init__(self) -> None:
        if self.workers is not None and self.workers < 1:
            raise ConfigurationError(f"workers must be at least 1, got {self.workers}")
        if self.min_parallel_items < 0:
            raise ConfigurationError(
                f"min_parallel_items must not be negative, got {self.min_parallel_items}"
            )

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """Build settings from ``environ`` (defaults to ``os.environ``)."""
        if environ is None:
            environ = os.environ
        min_parallel = _get_int(environ, "UNORDERED_MIN_PARALLEL")
        return cls(
            hash=environ.get("UNORDERED_HASH") or cls.hash,
            combiner=environ.get("UNORDERED_COMBINER") or cls.combiner,
            mode=environ.get("UNORDERED_MODE") or cls.mode,
            workers=_get_int(environ, "UNORDERED_WORKERS"),
            min_parallel_items=DEFAULT_MIN_PARALLEL_ITEMS if min_parallel is None else min_parallel,
        )

    def override(self, **values) -> "Settings":
        """Return a copy with every non-None value in ``values`` applied."""
        known = {f.name for f in fields(self)}
        unknown = set(values) - known
        if unknown:
            raise ConfigurationError(f"Unknown settings: {', '.join(sorted(unknown))}")
        return replace(self, **{k: v for k, v in values.items() if v is not None})
