"""
Utility functions for the JavaScript compatibility analyzer.
"""

import re
from datetime import datetime, timezone
from typing import Iterable, Optional

_UNSAFE_FILENAME_CHARS = re.compile(r"[^a-zA-Z0-9]")
_WHITESPACE = re.compile(r"\s+")


def feature_key(message: str) -> str:
    """First whitespace-delimited token of a diagnostic message ('' for blank messages)."""
    parts = message.split()
    return parts[0] if parts else ""


def normalize_feature_name(name: str) -> str:
    """Strip call parentheses so 'Array.prototype.includes()' matches 'Array.prototype.includes'."""
    name = name.strip()
    if name.endswith("()"):
        name = name[:-2]
    return name


def is_polyfilled(message: str, polyfills: Iterable[str]) -> bool:
    """True if the diagnostic's feature is one of the known polyfilled features."""
    feature = normalize_feature_name(feature_key(message))
    if not feature:
        return False
    return any(normalize_feature_name(p) == feature for p in polyfills)


def strip_whitespace(text: str) -> str:
    """Remove all whitespace, e.g. 'Web Audio API' -> 'WebAudioAPI'."""
    return _WHITESPACE.sub("", text)


def staging_filename(index: int, origin_id: str) -> str:
    """Filesystem-safe name for a staged script, unique per unit index."""
    return f"script-{index}-{_UNSAFE_FILENAME_CHARS.sub('_', origin_id)[:100]}.js"


def iso_timestamp(now: Optional[datetime] = None) -> str:
    """ISO-8601 UTC timestamp with millisecond precision and a 'Z' suffix."""
    now = now or datetime.now(timezone.utc)
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    return now.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")
