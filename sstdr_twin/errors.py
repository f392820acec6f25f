"""Error types raised while selecting and resolving SSTDR configurations."""

from __future__ import annotations

from typing import Iterable


class SstdrConfigError(Exception):
    """Base class for SSTDR configuration errors."""


class UnknownConfigurationError(SstdrConfigError, LookupError):
    """Raised when a preset name does not match any catalog entry."""

    def __init__(self, name: str, available: Iterable[str]) -> None:
        self.name = name
        self.available = tuple(available)
        super().__init__(f"Unknown configuration: {name}. Available: {', '.join(self.available)}")


class GenerationError(SstdrConfigError, ValueError):
    """Raised when the PN generator rejects its parameters."""


class PresetValidationError(SstdrConfigError, ValueError):
    """Raised when a preset breaks one or more configuration invariants."""

    def __init__(self, key: str, problems: Iterable[str]) -> None:
        self.key = key
        self.problems = tuple(problems)
        super().__init__(f"Invalid preset '{key}': " + "; ".join(self.problems))
