"""
Main analyzer class that coordinates the compatibility analysis stages.
"""

import logging
from datetime import datetime
from typing import Iterable, Optional, Sequence, Union

from .checker_adapter import CompatibilityChecker
from .config import AnalysisConfig
from .errors import AnalysisError, EngineUnavailableError, StagingError
from .issue import NothingToAnalyze, SourceUnit
from .lint_engine import ESLintEngine, LintEngine
from .platform_profile import PlatformProfile, load_platform_profile
from .platform_scanner import PlatformLimitationScanner
from .recommendations import general_recommendations, platform_recommendations
from .report import Report, ReportBuilder
from .requirements import extract_browser_requirements
from .source_registry import SourceRegistry

logger = logging.getLogger(__name__)


class CompatibilityAnalyzer:
    """Runs one source collection through checking, extraction, scanning and reporting."""

    def __init__(
        self,
        engine: Optional[LintEngine] = None,
        profile: Optional[PlatformProfile] = None,
    ):
        self.checker = CompatibilityChecker(engine or ESLintEngine())
        self.profile = profile or load_platform_profile()
        self.scanner = PlatformLimitationScanner(self.profile)

    def analyze(
        self,
        sources: Union[SourceRegistry, Iterable[SourceUnit]],
        config: Optional[AnalysisConfig] = None,
        warnings: Sequence[str] = (),
        now: Optional[datetime] = None,
    ) -> Union[Report, NothingToAnalyze]:
        """Analyze the given sources.

        Args:
            sources: Registry (or iterable) of source units in discovery order
            config: Targets, polyfills and concurrency for this run
            warnings: Non-fatal warnings already raised upstream (e.g. skipped downloads)
            now: Fixed timestamp for the report

        Returns:
            A completed Report, or NothingToAnalyze when there are no sources.

        Raises:
            AnalysisError: the lint engine is unavailable or staging failed.
        """
        config = config or AnalysisConfig()
        registry = sources if isinstance(sources, SourceRegistry) else SourceRegistry(sources)
        if not len(registry):
            logger.info("No JavaScript found; nothing to analyze")
            return NothingToAnalyze()

        units = registry.units
        logger.info("Analyzing %d JavaScript source(s) against %s", len(units), ", ".join(config.target_browsers))
        try:
            checked = self.checker.check(units, config)
        except (EngineUnavailableError, StagingError) as e:
            raise AnalysisError(f"Analysis failed: {e}") from e

        extraction = extract_browser_requirements(checked.diagnostics)
        unparsed = [
            f"No browser requirement in {d.origin_id}:{d.line}:{d.column}: {d.message}"
            for d in extraction.unparsed
        ]
        for line in unparsed:
            logger.info("%s", line)
        limitations = self.scanner.scan(units)
        logger.info(
            "Found %d compatibility issue(s), %d platform limitation(s)",
            len(checked.diagnostics), len(limitations),
        )

        return ReportBuilder.build(
            sources=units,
            diagnostics=checked.diagnostics,
            browser_requirements=extraction.requirements,
            platform_issues=extraction.platform_issues,
            limitations=limitations,
            target_version=self.profile.target_version,
            platform_recommendations=platform_recommendations(extraction.platform_issues, self.profile),
            general_recommendations=general_recommendations(checked.diagnostics, extraction.platform_issues),
            warnings=list(warnings) + list(checked.warnings) + unparsed,
            now=now,
        )
