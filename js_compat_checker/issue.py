"""
Data models for the JavaScript compatibility analyzer.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Tuple


class Severity(Enum):
    """Diagnostic severity levels."""
    ERROR = "error"
    WARNING = "warning"


class SourceKind(Enum):
    """Where a script came from on the page."""
    INLINE = "inline"
    EXTERNAL = "external"


@dataclass(frozen=True)
class SourceUnit:
    """One JavaScript source (inline block or referenced file) discovered on a page."""
    origin_id: str
    kind: SourceKind
    content: str

    @property
    def size_bytes(self) -> int:
        return len(self.content.encode("utf-8"))


@dataclass(frozen=True)
class Diagnostic:
    """One compatibility finding emitted by the lint engine for one source unit."""
    origin_id: str
    line: int
    column: int
    message: str
    severity: Severity


@dataclass(frozen=True)
class BrowserRequirement:
    """A distinct diagnostic message mapped to the browser clause it cites as unsupported."""
    feature_message: str
    unsupported_in: str


@dataclass(frozen=True)
class PlatformIssue:
    """A diagnostic whose unsupported clause names the target platform."""
    feature: str
    issue: str
    browsers: str


@dataclass(frozen=True)
class PlatformLimitation:
    """Lexical hit of an API known to behave specially on the target platform."""
    api: str
    issue_description: str
    found_in_origin_id: str


@dataclass(frozen=True)
class NothingToAnalyze:
    """Result of a run that found no JavaScript at all."""
    message: str = "No JavaScript found on this page"


@dataclass
class UnitCheck:
    """Partial result of checking a single source unit."""
    index: int
    diagnostics: List[Diagnostic] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class CheckResult:
    """Merged adapter output for a whole run, in discovery order."""
    diagnostics: Tuple[Diagnostic, ...]
    warnings: Tuple[str, ...]
