"""Health check route."""

from fastapi import APIRouter

from ..startup import eslint_launcher_available

router = APIRouter()


@router.get("/health")
def health() -> dict:
    """Liveness check, plus whether the ESLint launcher is on PATH."""
    return {"status": "ok", "engine": "available" if eslint_launcher_available() else "missing"}
