"""Client-side narrowing of the module list.

Every dimension is optional. A module stays visible only when it passes all
active dimensions, so activating another one can never grow the result.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import AbstractSet, Iterable, List, Optional, Set

from keuzekompas.features.modules.schemas import ModuleOut

SEARCH_FIELDS = ("name", "shortdescription", "description")


@dataclass
class ModuleFilters:
    search_term: str = ""
    credits: Set[int] = field(default_factory=set)
    levels: Set[str] = field(default_factory=set)
    locations: Set[str] = field(default_factory=set)
    favorites_only: bool = False

    @property
    def term(self) -> str:
        return (self.search_term or "").strip().lower()

    def is_active(self) -> bool:
        return active_filter_count(self) > 0


def active_filter_count(filters: ModuleFilters) -> int:
    return sum(
        (
            bool(filters.term),
            bool(filters.credits),
            bool(filters.levels),
            bool(filters.locations),
            filters.favorites_only,
        )
    )


def matches_search(module: ModuleOut, term: str) -> bool:
    if not term:
        return True
    for name in SEARCH_FIELDS:
        value: Optional[str] = getattr(module, name, None)
        if value and term in value.lower():
            return True
    return False


def matches(module: ModuleOut, filters: ModuleFilters, favorite_ids: AbstractSet[int] = frozenset()) -> bool:
    if not matches_search(module, filters.term):
        return False
    if filters.credits and module.studycredit not in filters.credits:
        return False
    if filters.levels and module.level not in filters.levels:
        return False
    if filters.locations and module.location not in filters.locations:
        return False
    if filters.favorites_only and module.id not in favorite_ids:
        return False
    return True


def apply_filters(
    modules: Iterable[ModuleOut],
    filters: ModuleFilters,
    favorite_ids: AbstractSet[int] = frozenset(),
) -> List[ModuleOut]:
    """Return the modules passing ``filters``, in their original order."""
    return [m for m in modules if matches(m, filters, favorite_ids)]
