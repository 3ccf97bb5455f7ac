"""
Platform limitation scanner: lexical search of raw script text for APIs with
special behavior on the target platform.

Matching is plain case-insensitive substring search, so a hit in a comment
or string literal is reported too.
"""

from typing import Iterable, List

from .issue import PlatformLimitation, SourceUnit
from .platform_profile import PlatformProfile
from .utils import strip_whitespace


class PlatformLimitationScanner:
    """Scans source units against a platform profile's tables."""

    def __init__(self, profile: PlatformProfile):
        self.profile = profile

    def scan(self, units: Iterable[SourceUnit]) -> List[PlatformLimitation]:
        limitations: List[PlatformLimitation] = []
        for unit in units:
            limitations.extend(self.scan_unit(unit))
        return limitations

    def scan_unit(self, unit: SourceUnit) -> List[PlatformLimitation]:
        content = unit.content.lower()
        found: List[PlatformLimitation] = []

        for api, description in self.profile.known_issues:
            api_lower = api.lower()
            if strip_whitespace(api_lower) in content or api_lower in content:
                found.append(PlatformLimitation(api, description, unit.origin_id))

        for fragment in self.profile.interaction_gated_apis:
            if fragment.lower() in content:
                found.append(PlatformLimitation(fragment, self.profile.interaction_issue, unit.origin_id))

        # One generic touch/viewport entry per unit, however many triggers hit
        if any(t.lower() in content for t in self.profile.touch_viewport_triggers):
            found.append(PlatformLimitation(
                self.profile.touch_viewport_api,
                self.profile.touch_viewport_issue,
                unit.origin_id,
            ))
        return found
