"""
Report generation for the JavaScript compatibility analyzer.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, List, Optional, Sequence, Tuple

from .issue import (
    BrowserRequirement,
    Diagnostic,
    PlatformIssue,
    PlatformLimitation,
    Severity,
    SourceKind,
    SourceUnit,
)
from .utils import iso_timestamp


@dataclass(frozen=True)
class Summary:
    total_scripts: int
    inline_scripts: int
    external_scripts: int
    compatibility_issues: int
    errors: int
    warnings: int
    ios_specific_issues: int


@dataclass(frozen=True)
class PlatformAnalysis:
    target_version: str
    specific_issues: Tuple[PlatformIssue, ...]
    known_limitations: Tuple[PlatformLimitation, ...]
    recommendations: Tuple[str, ...]


@dataclass(frozen=True)
class Report:
    """Final result of one analysis run."""
    timestamp: str
    summary: Summary
    sources: Tuple[SourceUnit, ...]
    diagnostics: Tuple[Diagnostic, ...]
    browser_requirements: Tuple[BrowserRequirement, ...]
    platform_analysis: PlatformAnalysis
    recommendations: Tuple[str, ...]
    # Non-fatal problems hit during the run; not part of the serialized body.
    warnings: Tuple[str, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to the report's key/value form (camelCase keys)."""
        s = self.summary
        pa = self.platform_analysis
        return {
            "timestamp": self.timestamp,
            "summary": {
                "totalScripts": s.total_scripts,
                "inlineScripts": s.inline_scripts,
                "externalScripts": s.external_scripts,
                "compatibilityIssues": s.compatibility_issues,
                "errors": s.errors,
                "warnings": s.warnings,
                "iosSpecificIssues": s.ios_specific_issues,
            },
            "javascriptSources": [
                {"type": u.kind.value, "url": u.origin_id, "size": u.size_bytes}
                for u in self.sources
            ],
            "compatibilityIssues": [
                {
                    "file": d.origin_id,
                    "line": d.line,
                    "column": d.column,
                    "message": d.message,
                    "severity": d.severity.value,
                }
                for d in self.diagnostics
            ],
            "browserRequirements": [
                {"feature": r.feature_message, "unsupportedIn": r.unsupported_in}
                for r in self.browser_requirements
            ],
            "iosSpecificAnalysis": {
                "targetVersion": pa.target_version,
                "specificIssues": [
                    {"feature": i.feature, "issue": i.issue, "browsers": i.browsers}
                    for i in pa.specific_issues
                ],
                "knownLimitations": [
                    {"api": l.api, "issue": l.issue_description, "foundIn": l.found_in_origin_id}
                    for l in pa.known_limitations
                ],
                "recommendations": list(pa.recommendations),
            },
            "recommendations": list(self.recommendations),
        }


class ReportBuilder:
    """Assembles a Report from the outputs of the analysis stages."""

    @staticmethod
    def build(
        sources: Sequence[SourceUnit],
        diagnostics: Sequence[Diagnostic],
        browser_requirements: Sequence[BrowserRequirement],
        platform_issues: Sequence[PlatformIssue],
        limitations: Sequence[PlatformLimitation],
        target_version: str,
        platform_recommendations: Sequence[str],
        general_recommendations: Sequence[str],
        warnings: Sequence[str] = (),
        now: Optional[datetime] = None,
    ) -> Report:
        summary = ReportBuilder.summarize(sources, diagnostics, platform_issues)
        return Report(
            timestamp=iso_timestamp(now),
            summary=summary,
            sources=tuple(sources),
            diagnostics=tuple(diagnostics),
            browser_requirements=tuple(browser_requirements),
            platform_analysis=PlatformAnalysis(
                target_version=target_version,
                specific_issues=tuple(platform_issues),
                known_limitations=tuple(limitations),
                recommendations=tuple(platform_recommendations),
            ),
            recommendations=tuple(general_recommendations),
            warnings=tuple(warnings),
        )

    @staticmethod
    def summarize(
        sources: Sequence[SourceUnit],
        diagnostics: Sequence[Diagnostic],
        platform_issues: Sequence[PlatformIssue],
    ) -> Summary:
        """Counts by source kind and diagnostic severity."""
        inline = [u for u in sources if u.kind == SourceKind.INLINE]
        external = [u for u in sources if u.kind == SourceKind.EXTERNAL]
        errors: List[Diagnostic] = [d for d in diagnostics if d.severity == Severity.ERROR]
        return Summary(
            total_scripts=len(sources),
            inline_scripts=len(inline),
            external_scripts=len(external),
            compatibility_issues=len(diagnostics),
            errors=len(errors),
            warnings=len(diagnostics) - len(errors),
            ios_specific_issues=len(platform_issues),
        )
