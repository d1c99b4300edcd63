"""Headless state for the module overview page."""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional

from keuzekompas.features.modules.schemas import ModuleOut
from .api import ApiError
from .favorites import FavoriteState
from .filters import ModuleFilters, active_filter_count, apply_filters
from .modules import ModuleClient

logger = logging.getLogger("client.catalog")


def level_badge(level: Optional[str]) -> str:
    return "level-advanced" if level and "6" in level else "level-beginner"


class CatalogView:
    """Modules are fetched once by ``load()``; filtering happens locally."""

    def __init__(self, modules: ModuleClient, favorites: FavoriteState) -> None:
        self.modules = modules
        self.favorites = favorites
        self.filters = ModuleFilters()
        self.error: str = ""
        self.loading: bool = False
        self._all: List[ModuleOut] = []

    def load(self) -> bool:
        self.loading = True
        self.error = ""
        try:
            self._all = self.modules.list()
            self.favorites.load()
        except ApiError as e:
            logger.warning("loading catalog failed: %s", e.message)
            self.error = e.message
            return False
        finally:
            self.loading = False
        return True

    @property
    def all_modules(self) -> List[ModuleOut]:
        return list(self._all)

    @property
    def filtered_modules(self) -> List[ModuleOut]:
        return apply_filters(self._all, self.filters, self.favorites.ids)

    @property
    def available_credits(self) -> List[int]:
        return sorted({m.studycredit for m in self._all})

    @property
    def available_levels(self) -> List[str]:
        return sorted({m.level for m in self._all})

    @property
    def available_locations(self) -> List[str]:
        return sorted({m.location for m in self._all})

    @property
    def active_filter_count(self) -> int:
        return active_filter_count(self.filters)

    def set_search_term(self, term: str) -> None:
        self.filters.search_term = term

    def set_credits(self, credits: Iterable[int]) -> None:
        self.filters.credits = set(credits)

    def set_levels(self, levels: Iterable[str]) -> None:
        self.filters.levels = set(levels)

    def set_locations(self, locations: Iterable[str]) -> None:
        self.filters.locations = set(locations)

    def set_favorites_only(self, value: bool) -> None:
        self.filters.favorites_only = value

    def clear_filters(self) -> None:
        self.filters = ModuleFilters()

    def toggle_favorite(self, module_id: int) -> Optional[bool]:
        """Returns the new status, or None when the request failed (see ``error``)."""
        self.error = ""
        try:
            return self.favorites.toggle(module_id)
        except ApiError as e:
            self.error = e.message
            return None

    def is_favorite(self, module_id: int) -> bool:
        return self.favorites.is_favorite(module_id)

    def result_text(self) -> str:
        total = len(self._all)
        noun = "module" if total == 1 else "modules"
        filtered = len(self.filtered_modules)
        if filtered == total:
            return f"{total} {noun} available"
        return f"{filtered} of {total} {noun} found"

    level_badge = staticmethod(level_badge)
