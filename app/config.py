"""Configuration from environment."""

import os
from pathlib import Path
from typing import Optional, Tuple

from dotenv import load_dotenv

from js_compat_checker.config import (
    DEFAULT_MAX_WORKERS,
    DEFAULT_POLYFILLS,
    DEFAULT_TARGET_BROWSERS,
    AnalysisConfig,
)
from js_compat_checker.lint_engine import DEFAULT_ESLINT_COMMAND

load_dotenv()


def _split_list(value: str) -> Tuple[str, ...]:
    return tuple(part.strip() for part in value.split(",") if part.strip())


def _get_float(name: str, default: float) -> float:
    try:
        return float(os.environ.get(name, str(default)))
    except ValueError:
        return default


def get_host() -> str:
    return os.environ.get("HOST", "0.0.0.0").strip()


def get_port() -> int:
    try:
        return int(os.environ.get("PORT", "8000"))
    except ValueError:
        return 8000


def get_log_level() -> str:
    return os.environ.get("LOG_LEVEL", "INFO").strip().upper() or "INFO"


def get_target_browsers() -> Tuple[str, ...]:
    """Browserslist queries, comma-separated. Default: modern browsers plus IE 11."""
    value = os.environ.get("JS_COMPAT_TARGET_BROWSERS", "")
    return _split_list(value) or DEFAULT_TARGET_BROWSERS


def get_known_polyfills() -> Tuple[str, ...]:
    """Features the site is known to polyfill. Set to an empty string to disable."""
    value = os.environ.get("JS_COMPAT_POLYFILLS")
    if value is None:
        return DEFAULT_POLYFILLS
    return _split_list(value)


def get_max_workers() -> int:
    try:
        workers = int(os.environ.get("JS_COMPAT_MAX_WORKERS", str(DEFAULT_MAX_WORKERS)))
    except ValueError:
        return DEFAULT_MAX_WORKERS
    return workers if workers >= 1 else DEFAULT_MAX_WORKERS


def get_eslint_command() -> str:
    return os.environ.get("JS_COMPAT_ESLINT_COMMAND", DEFAULT_ESLINT_COMMAND).strip() or DEFAULT_ESLINT_COMMAND


def get_eslint_timeout() -> float:
    return _get_float("JS_COMPAT_ESLINT_TIMEOUT", 60.0)


def get_fetch_timeout() -> float:
    return _get_float("JS_COMPAT_FETCH_TIMEOUT", 15.0)


def get_platform_profile_path() -> Optional[Path]:
    """Alternate platform profile JSON; None means the bundled iOS Safari 15.5 profile."""
    value = os.environ.get("JS_COMPAT_PLATFORM_PROFILE", "").strip()
    return Path(value) if value else None


def get_analysis_config() -> AnalysisConfig:
    return AnalysisConfig(
        target_browsers=get_target_browsers(),
        known_polyfills=get_known_polyfills(),
        max_workers=get_max_workers(),
    )
