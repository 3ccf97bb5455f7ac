"""
Immutable analysis configuration.
"""

from dataclasses import dataclass
from typing import Iterable, Optional, Tuple

DEFAULT_TARGET_BROWSERS: Tuple[str, ...] = (
    "last 2 Chrome versions",
    "last 2 Firefox versions",
    "last 2 Safari versions",
    "last 2 Edge versions",
    "IE 11",
)

# Features commonly polyfilled on real sites
DEFAULT_POLYFILLS: Tuple[str, ...] = (
    "Promise",
    "fetch",
    "Array.prototype.includes",
    "Array.prototype.find",
    "Object.assign",
)

DEFAULT_MAX_WORKERS = 4


@dataclass(frozen=True)
class AnalysisConfig:
    """Per-run settings. Passed explicitly into every analysis call, never mutated."""
    target_browsers: Tuple[str, ...] = DEFAULT_TARGET_BROWSERS
    known_polyfills: Tuple[str, ...] = DEFAULT_POLYFILLS
    max_workers: int = DEFAULT_MAX_WORKERS

    def __post_init__(self):
        if self.max_workers < 1:
            raise ValueError(f"max_workers must be >= 1, got {self.max_workers}")
        if not self.target_browsers:
            raise ValueError("target_browsers must not be empty")

    def with_overrides(
        self,
        target_browsers: Optional[Iterable[str]] = None,
        known_polyfills: Optional[Iterable[str]] = None,
        max_workers: Optional[int] = None,
    ) -> "AnalysisConfig":
        """Return a copy with any non-empty override applied."""
        targets = tuple(t for t in (target_browsers or ()) if t.strip())
        polyfills = known_polyfills
        return AnalysisConfig(
            target_browsers=targets or self.target_browsers,
            known_polyfills=tuple(polyfills) if polyfills is not None else self.known_polyfills,
            max_workers=max_workers if max_workers is not None else self.max_workers,
        )
