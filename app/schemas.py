"""Pydantic request/response models."""

from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, Field


# --- Request ---


class AnalyzeUrlRequest(BaseModel):
    """Request body for page analysis by URL."""

    url: str = Field(..., description="Absolute http(s) URL of the page to analyze")
    target_browsers: Optional[List[str]] = Field(
        default=None, description="Browserslist queries; defaults to the configured baseline"
    )
    known_polyfills: Optional[List[str]] = Field(
        default=None, description="Features the page polyfills; their diagnostics are suppressed"
    )


class SourceIn(BaseModel):
    """One JavaScript source supplied directly by the caller."""

    origin_id: str = Field(..., min_length=1, description="Unique id, e.g. script URL or inline-1")
    kind: Literal["inline", "external"] = Field(default="inline")
    content: str = Field(..., description="JavaScript source text")


class CheckSourcesRequest(BaseModel):
    """Request body for analysis of supplied sources (no network access)."""

    sources: List[SourceIn] = Field(default_factory=list)
    target_browsers: Optional[List[str]] = None
    known_polyfills: Optional[List[str]] = None


# --- Responses ---


class AnalyzeResponse(BaseModel):
    """Response for POST /analyze and POST /check."""

    url: Optional[str] = Field(default=None, description="Analyzed page URL (absent for /check)")
    message: Optional[str] = Field(default=None, description="Set when there was nothing to analyze")
    report: Optional[Dict[str, Any]] = Field(default=None, description="Serialized compatibility report")
    warnings: List[str] = Field(default_factory=list, description="Non-fatal problems during the run")


class ErrorDetail(BaseModel):
    """Error response detail."""

    detail: str = Field(..., description="Error message")
