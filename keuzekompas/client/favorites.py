from __future__ import annotations

import logging
from typing import FrozenSet, Set

from .api import ApiClient

logger = logging.getLogger("client.favorites")


class FavoriteState:
    """The signed-in user's favorite module ids, mirrored from the server.

    The local set changes only after the matching request succeeded, so a
    failed call leaves it untouched (the ``ApiError`` propagates).
    """

    def __init__(self, api: ApiClient) -> None:
        self.api = api
        self._ids: Set[int] = set()

    @property
    def ids(self) -> FrozenSet[int]:
        return frozenset(self._ids)

    def load(self) -> FrozenSet[int]:
        rows = self.api.get("/favorites")
        self._ids = {int(r["module_id"]) for r in rows}
        return self.ids

    def add(self, module_id: int) -> None:
        self.api.post("/favorites", json={"module_id": module_id})
        self._ids.add(module_id)

    def remove(self, module_id: int) -> None:
        self.api.delete("/favorites", json={"module_id": module_id})
        self._ids.discard(module_id)

    def toggle(self, module_id: int) -> bool:
        """Flip favorite status; returns the new status."""
        if module_id in self._ids:
            self.remove(module_id)
            return False
        self.add(module_id)
        return True

    def is_favorite(self, module_id: int) -> bool:
        return module_id in self._ids

    def count(self) -> int:
        return len(self._ids)

    def clear(self) -> None:
        self._ids.clear()
