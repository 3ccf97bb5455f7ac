"""Analyze routes (fetch a page by URL, then analyze its JavaScript)."""

import re
from urllib.parse import urlparse

from fastapi import APIRouter
from fastapi.responses import Response

from ..report_formatter import format_text_report
from ..schemas import AnalyzeResponse, AnalyzeUrlRequest
from ..utils import outcome_to_response, run_page_analysis

router = APIRouter()


def _report_filename(url: str) -> str:
    """Filesystem-safe report name derived from the page host."""
    host = urlparse(url).netloc or "page"
    safe = re.sub(r"[^\w\-]", "_", host)[:80].strip("_") or "page"
    return f"compatibility_report_{safe}.md"


@router.post("/analyze", response_model=AnalyzeResponse)
def analyze(req: AnalyzeUrlRequest) -> AnalyzeResponse:
    """Fetch the page, extract inline and external scripts, return the report."""
    return outcome_to_response(run_page_analysis(req))


@router.post("/analyze/markdown")
def analyze_markdown(req: AnalyzeUrlRequest) -> Response:
    """Same as /analyze, rendered as a downloadable Markdown report."""
    outcome = run_page_analysis(req)
    response = outcome_to_response(outcome)
    if response.report is None:
        body = f"# Compatibility Report: {response.url}\n\n{response.message}\n"
    else:
        body = format_text_report(response.url, response.report)
    return Response(
        content=body,
        media_type="text/markdown; charset=utf-8",
        headers={"Content-Disposition": f'attachment; filename="{_report_filename(response.url or "")}"'},
    )
