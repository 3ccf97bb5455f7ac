"""Check route (analysis of supplied sources, no network access)."""

from fastapi import APIRouter

from ..schemas import AnalyzeResponse, CheckSourcesRequest
from ..utils import outcome_to_response, run_source_analysis

router = APIRouter()


@router.post("/check", response_model=AnalyzeResponse)
def check(req: CheckSourcesRequest) -> AnalyzeResponse:
    """Analyze the given JavaScript sources."""
    return outcome_to_response(run_source_analysis(req))
