"""FastAPI app: /health, /check, /analyze."""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .config import get_host, get_port
from .routes import analyze_router, check_router, health_router, root_router
from .startup import configure_logging, validate_config

configure_logging()

app = FastAPI(
    title="JavaScript Compatibility Analyzer API",
    description="Finds JavaScript APIs a page uses that its target browsers (and iOS Safari 15.5) do not support.",
    version="0.1.0",
)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(root_router)
app.include_router(health_router)
app.include_router(check_router)
app.include_router(analyze_router)


@app.on_event("startup")
def _validate_config() -> None:
    """Warn at startup if ESLint or the platform profile are unusable."""
    validate_config()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=get_host(), port=get_port())
