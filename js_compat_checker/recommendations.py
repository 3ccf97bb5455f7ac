"""
Recommendation synthesis: ranked, human-readable guidance from diagnostics
and platform findings. Both streams return display lines; blank strings
separate sections.
"""

from collections import Counter
from typing import List, Sequence, Tuple

from .issue import Diagnostic, PlatformIssue
from .platform_profile import PlatformProfile
from .utils import feature_key

TOP_FEATURES = 5
NO_ISSUES_LINE = "✅ No compatibility issues detected with current browser targets"
BULLET = "   • "

GENERAL_SUGGESTIONS = (
    "Consider using polyfills for unsupported features",
    "Update browserslist configuration to match your target audience",
    "Use transpilation tools like Babel for newer JavaScript features",
    "Test on actual target browsers",
)


def rank_features(diagnostics: Sequence[Diagnostic], limit: int = TOP_FEATURES) -> List[Tuple[str, int]]:
    """Feature keys by descending count; ties keep first-seen order."""
    counts = Counter(feature_key(d.message) for d in diagnostics)
    # Counter preserves insertion order and sorted() is stable
    return sorted(counts.items(), key=lambda item: item[1], reverse=True)[:limit]


def _issue_lines(platform_issues: Sequence[PlatformIssue]) -> List[str]:
    return [f"{BULLET}{issue.feature}: {issue.issue}" for issue in platform_issues]


def general_recommendations(
    diagnostics: Sequence[Diagnostic],
    platform_issues: Sequence[PlatformIssue],
) -> List[str]:
    if not diagnostics and not platform_issues:
        return [NO_ISSUES_LINE]

    lines: List[str] = []
    if diagnostics:
        lines.append("🔧 Compatibility Issues Found:")
        for feature, count in rank_features(diagnostics):
            lines.append(f"{BULLET}{feature}: {count} occurrence(s)")
        lines.append("")

    if platform_issues:
        lines.append("📱 iOS Safari Specific Concerns:")
        lines.extend(_issue_lines(platform_issues))
        lines.append("")

    lines.append("💡 General Suggestions:")
    lines.extend(f"{BULLET}{s}" for s in GENERAL_SUGGESTIONS)
    return lines


def platform_recommendations(
    platform_issues: Sequence[PlatformIssue],
    profile: PlatformProfile,
) -> List[str]:
    lines: List[str] = []
    if platform_issues:
        lines.append(f"📱 {profile.target_version} Specific Issues:")
        lines.extend(_issue_lines(platform_issues))
        lines.append("")

    lines.append(f"🍎 {profile.target_version} Best Practices:")
    lines.extend(f"{BULLET}{p}" for p in profile.best_practices)
    return lines
