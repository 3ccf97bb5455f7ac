"""Utility functions for the API."""

from deps import HTTPException, List, logging

from js_compat_checker.errors import AnalysisError
from js_compat_checker.issue import NothingToAnalyze, SourceKind, SourceUnit

from .schemas import AnalyzeResponse, AnalyzeUrlRequest, CheckSourcesRequest
from .services import AnalysisOutcome, CheckerService, FetchError

logger = logging.getLogger(__name__)

checker_svc = CheckerService()


def outcome_to_response(outcome: AnalysisOutcome) -> AnalyzeResponse:
    if isinstance(outcome.result, NothingToAnalyze):
        return AnalyzeResponse(url=outcome.url, message=outcome.result.message, warnings=outcome.warnings)
    return AnalyzeResponse(url=outcome.url, report=outcome.result.to_dict(), warnings=outcome.warnings)


def run_page_analysis(req: AnalyzeUrlRequest) -> AnalysisOutcome:
    """Run page analysis. Maps failures to HTTP errors."""
    config = checker_svc.config_for(req.target_browsers, req.known_polyfills)
    try:
        return checker_svc.analyze_page(req.url, config)
    except ValueError as e:
        raise HTTPException(400, str(e))
    except FetchError as e:
        raise HTTPException(502, str(e))
    except AnalysisError as e:
        logger.error("%s (cause: %r)", e, e.__cause__)
        raise HTTPException(503, str(e))


def run_source_analysis(req: CheckSourcesRequest) -> AnalysisOutcome:
    """Run analysis on supplied sources. Maps failures to HTTP errors."""
    units: List[SourceUnit] = [
        SourceUnit(s.origin_id, SourceKind(s.kind), s.content) for s in req.sources
    ]
    config = checker_svc.config_for(req.target_browsers, req.known_polyfills)
    try:
        return checker_svc.analyze_sources(units, config)
    except ValueError as e:
        raise HTTPException(400, str(e))
    except AnalysisError as e:
        logger.error("%s (cause: %r)", e, e.__cause__)
        raise HTTPException(503, str(e))
