"""Checker service: wraps js_compat_checker for use by the API and CLI."""

from deps import Callable, Iterable, List, Optional, Union, dataclass, field, logging

from js_compat_checker.config import AnalysisConfig
from js_compat_checker.issue import NothingToAnalyze, SourceUnit
from js_compat_checker.lint_engine import ESLintEngine, LintEngine
from js_compat_checker.main_checker import CompatibilityAnalyzer
from js_compat_checker.platform_profile import PlatformProfile, load_platform_profile
from js_compat_checker.report import Report
from js_compat_checker.source_registry import SourceRegistry

from ..config import (
    get_analysis_config,
    get_eslint_command,
    get_eslint_timeout,
    get_fetch_timeout,
    get_platform_profile_path,
)
from .page_fetcher import fetch_text, validate_url
from .script_extractor import extract_scripts

logger = logging.getLogger(__name__)


@dataclass
class AnalysisOutcome:
    """Result of analyzing a page or a set of supplied sources."""
    result: Union[Report, NothingToAnalyze]
    url: Optional[str] = None
    warnings: List[str] = field(default_factory=list)


class CheckerService:
    """Builds an analyzer from configuration and runs pages or raw sources through it."""

    def __init__(
        self,
        engine: Optional[LintEngine] = None,
        profile: Optional[PlatformProfile] = None,
        fetch: Optional[Callable[[str], str]] = None,
    ):
        self._engine = engine
        self._profile = profile
        self._fetch = fetch
        self._analyzer: Optional[CompatibilityAnalyzer] = None

    @property
    def analyzer(self) -> CompatibilityAnalyzer:
        if self._analyzer is None:
            engine = self._engine or ESLintEngine(get_eslint_command(), get_eslint_timeout())
            profile = self._profile or load_platform_profile(get_platform_profile_path())
            self._analyzer = CompatibilityAnalyzer(engine, profile)
        return self._analyzer

    def fetch(self, url: str) -> str:
        if self._fetch is not None:
            return self._fetch(url)
        return fetch_text(url, timeout=get_fetch_timeout())

    def config_for(
        self,
        target_browsers: Optional[Iterable[str]] = None,
        known_polyfills: Optional[Iterable[str]] = None,
        max_workers: Optional[int] = None,
    ) -> AnalysisConfig:
        """Environment defaults with per-request overrides applied."""
        return get_analysis_config().with_overrides(target_browsers, known_polyfills, max_workers)

    def analyze_page(self, url: str, config: Optional[AnalysisConfig] = None) -> AnalysisOutcome:
        """Fetch a page, extract its scripts and analyze them.

        Raises:
            ValueError: url is not an absolute http(s) URL
            FetchError: the page itself could not be downloaded
            AnalysisError: the lint engine is unavailable or staging failed
        """
        url = validate_url(url)
        config = config or self.config_for()
        logger.info("Analyzing JavaScript compatibility for: %s", url)
        html = self.fetch(url)
        registry, warnings = extract_scripts(html, url, self.fetch, max_workers=config.max_workers)
        logger.info("Found %d JavaScript sources", len(registry))
        result = self.analyzer.analyze(registry, config, warnings=warnings)
        return AnalysisOutcome(result=result, url=url, warnings=self._warnings(result, warnings))

    def analyze_sources(
        self,
        sources: Iterable[SourceUnit],
        config: Optional[AnalysisConfig] = None,
    ) -> AnalysisOutcome:
        """Analyze caller-supplied sources. Duplicate origin ids raise ValueError."""
        registry = SourceRegistry(sources)
        result = self.analyzer.analyze(registry, config or self.config_for())
        return AnalysisOutcome(result=result, warnings=self._warnings(result, []))

    @staticmethod
    def _warnings(result: Union[Report, NothingToAnalyze], upstream: List[str]) -> List[str]:
        if isinstance(result, Report):
            return list(result.warnings)
        return list(upstream)
