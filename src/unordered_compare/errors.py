"""Exceptions raised for invalid configuration."""

from __future__ import annotations


class UnorderedCompareError(ValueError):
    """Base class for configuration errors raised by unordered_compare."""


class UnknownHashFamily(UnorderedCompareError):
    def __init__(self, name: str, known: list[str]) -> None:
        super().__init__(f"Unknown hash family '{name}' (available: {', '.join(known)})")
        self.name = name


class UnknownCombiner(UnorderedCompareError):
    def __init__(self, name: str, known: list[str]) -> None:
        super().__init__(f"Unknown combiner '{name}' (available: {', '.join(known)})")
        self.name = name


class UnknownExecutionMode(UnorderedCompareError):
    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown execution mode '{name}' (available: sequential, parallel)")
        self.name = name


class ConfigurationError(UnorderedCompareError):
    """Raised when a setting has an invalid value."""
