"""Order-insensitive equality and fingerprints for collections of byte entries."""

from __future__ import annotations

__version__ = "0.1.0"

from .combine import available_combiners, get_combiner
from .comparator import Comparator
from .config import Settings
from .digest import HashFamily, available_families, get_family, register_family
from .equality import equal, equal_by_fingerprint
from .errors import (
    ConfigurationError,
    UnknownCombiner,
    UnknownExecutionMode,
    UnknownHashFamily,
    UnorderedCompareError,
)
from .execution import PARALLEL, SEQUENTIAL, Parallel, Sequential, get_mode
from .fingerprint import entry_digests, fingerprint
from .oracle import equal_as_sets, equal_by_sorting

__all__ = [
    "__version__",
    "Comparator",
    "ConfigurationError",
    "HashFamily",
    "PARALLEL",
    "Parallel",
    "SEQUENTIAL",
    "Sequential",
    "Settings",
    "UnknownCombiner",
    "UnknownExecutionMode",
    "UnknownHashFamily",
    "UnorderedCompareError",
    "available_combiners",
    "available_families",
    "entry_digests",
    "equal",
    "equal_as_sets",
    "equal_by_fingerprint",
    "equal_by_sorting",
    "fingerprint",
    "get_combiner",
    "get_family",
    "get_mode",
    "register_family",
]
