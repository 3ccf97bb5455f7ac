"""Services for page retrieval, script extraction and compatibility analysis."""

from .checker import AnalysisOutcome, CheckerService
from .page_fetcher import FetchError

__all__ = ["AnalysisOutcome", "CheckerService", "FetchError"]
