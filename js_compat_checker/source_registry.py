"""
Source registry: the ordered set of JavaScript sources for one analysis run.
"""

from typing import Dict, Iterable, Iterator, List, Optional

from .issue import SourceKind, SourceUnit


class SourceRegistry:
    """Holds source units in discovery order, keyed by origin id."""

    def __init__(self, units: Optional[Iterable[SourceUnit]] = None):
        self._units: List[SourceUnit] = []
        self._by_origin: Dict[str, SourceUnit] = {}
        for unit in units or ():
            self.add(unit)

    def add(self, unit: SourceUnit) -> None:
        """Register a unit. Origin ids must be unique within a run."""
        if unit.origin_id in self._by_origin:
            raise ValueError(f"Duplicate origin id: {unit.origin_id}")
        self._units.append(unit)
        self._by_origin[unit.origin_id] = unit

    def add_inline(self, content: str) -> SourceUnit:
        """Register an inline script under the next ``inline-N`` origin id."""
        n = sum(1 for u in self._units if u.kind == SourceKind.INLINE) + 1
        unit = SourceUnit(f"inline-{n}", SourceKind.INLINE, content)
        self.add(unit)
        return unit

    def add_external(self, url: str, content: str) -> SourceUnit:
        unit = SourceUnit(url, SourceKind.EXTERNAL, content)
        self.add(unit)
        return unit

    def get(self, origin_id: str) -> Optional[SourceUnit]:
        return self._by_origin.get(origin_id)

    def count(self, kind: Optional[SourceKind] = None) -> int:
        if kind is None:
            return len(self._units)
        return sum(1 for u in self._units if u.kind == kind)

    @property
    def units(self) -> List[SourceUnit]:
        return list(self._units)

    def __contains__(self, origin_id: object) -> bool:
        return origin_id in self._by_origin

    def __iter__(self) -> Iterator[SourceUnit]:
        return iter(list(self._units))

    def __len__(self) -> int:
        return len(self._units)
