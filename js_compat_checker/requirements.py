"""
Browser-requirement extraction from free-text compatibility messages.

eslint-plugin-compat reports findings as prose, e.g.
``"fetch is not supported in Safari 9, IE 11"``. Everything that depends on
that message shape goes through :func:`parse_unsupported_clause`.
"""

import logging
import re
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Tuple

from .issue import BrowserRequirement, Diagnostic, PlatformIssue
from .utils import feature_key

logger = logging.getLogger(__name__)

_UNSUPPORTED_PATTERN = re.compile(r"not supported in (.+)")
PLATFORM_MARKERS = ("safari", "ios")


def parse_unsupported_clause(message: str) -> Optional[str]:
    """Return the browser clause of a 'not supported in <clause>' message, or None."""
    match = _UNSUPPORTED_PATTERN.search(message)
    return match.group(1) if match else None


def mentions_platform(clause: str) -> bool:
    lowered = clause.lower()
    return any(marker in lowered for marker in PLATFORM_MARKERS)


@dataclass(frozen=True)
class RequirementExtraction:
    """Requirements, platform issues and unparsed diagnostics derived from one diagnostic set."""
    requirements: Tuple[BrowserRequirement, ...]
    platform_issues: Tuple[PlatformIssue, ...]
    unparsed: Tuple[Diagnostic, ...]


def extract_browser_requirements(diagnostics: Iterable[Diagnostic]) -> RequirementExtraction:
    """Derive requirements and platform issues from diagnostics, in diagnostic order."""
    # Keyed by message text; the last clause seen wins but keeps the first position.
    by_message: Dict[str, str] = {}
    platform_issues: List[PlatformIssue] = []
    unparsed: List[Diagnostic] = []

    for diagnostic in diagnostics:
        clause = parse_unsupported_clause(diagnostic.message)
        if clause is None:
            unparsed.append(diagnostic)
            continue

        by_message[diagnostic.message] = clause

        if mentions_platform(clause):
            platform_issues.append(PlatformIssue(
                feature=feature_key(diagnostic.message),
                issue=diagnostic.message,
                browsers=clause,
            ))

    if unparsed:
        logger.debug("%d diagnostic message(s) had no 'not supported in' clause", len(unparsed))
    return RequirementExtraction(
        requirements=tuple(BrowserRequirement(m, c) for m, c in by_message.items()),
        platform_issues=tuple(platform_issues),
        unparsed=tuple(unparsed),
    )
