"""
Platform profiles: curated, data-only tables for the target platform.
"""

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

PROFILES_DIR = Path(__file__).parent / "profiles"
DEFAULT_PROFILE = "ios_safari_15_5"
SUPPORTED_PROFILE_VERSION = 1


@dataclass(frozen=True)
class PlatformProfile:
    """Known quirks of one target platform, loaded from a profile JSON file."""
    target_version: str
    known_issues: Tuple[Tuple[str, str], ...]
    interaction_gated_apis: Tuple[str, ...]
    interaction_issue: str
    touch_viewport_api: str
    touch_viewport_issue: str
    touch_viewport_triggers: Tuple[str, ...]
    best_practices: Tuple[str, ...]
    # Language features and their support level; reference data, not scanned
    js_features: Tuple[Tuple[str, str], ...] = ()

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PlatformProfile":
        version = data.get("profileVersion")
        if version != SUPPORTED_PROFILE_VERSION:
            raise ValueError(f"Unsupported profile version: {version!r}")
        try:
            touch = data["touchViewport"]
            return cls(
                target_version=data["targetVersion"],
                known_issues=tuple((str(k), str(v)) for k, v in data["knownIssues"].items()),
                interaction_gated_apis=tuple(str(a) for a in data["interactionGatedApis"]),
                interaction_issue=data["interactionIssue"],
                touch_viewport_api=touch["api"],
                touch_viewport_issue=touch["issue"],
                touch_viewport_triggers=tuple(str(t) for t in touch["triggers"]),
                best_practices=tuple(str(p) for p in data.get("bestPractices", [])),
                js_features=tuple((str(k), str(v)) for k, v in data.get("jsFeatures", {}).items()),
            )
        except (KeyError, AttributeError, TypeError) as e:
            raise ValueError(f"Malformed platform profile: {e}") from e


def load_platform_profile(path: Optional[Path] = None) -> PlatformProfile:
    """Load a profile JSON file; defaults to the bundled iOS Safari 15.5 profile."""
    path = path or PROFILES_DIR / f"{DEFAULT_PROFILE}.json"
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    return PlatformProfile.from_dict(data)
