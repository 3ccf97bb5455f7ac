"""JavaScript browser-compatibility analysis engine."""

from .config import AnalysisConfig
from .errors import AnalysisError, CompatCheckerError
from .issue import NothingToAnalyze, SourceKind, SourceUnit
from .main_checker import CompatibilityAnalyzer
from .report import Report
from .source_registry import SourceRegistry

__all__ = [
    "AnalysisConfig",
    "AnalysisError",
    "CompatCheckerError",
    "CompatibilityAnalyzer",
    "NothingToAnalyze",
    "Report",
    "SourceKind",
    "SourceRegistry",
    "SourceUnit",
]
