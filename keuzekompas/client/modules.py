from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional, Union

from keuzekompas.features.modules.schemas import ModuleCreate, ModuleOut, ModuleUpdate
from .api import ApiClient, ApiError


def _payload(data: Union[dict, ModuleCreate, ModuleUpdate], **dump_opts) -> Dict[str, Any]:
    if isinstance(data, dict):
        return data
    return data.model_dump(mode="json", **dump_opts)


class ModuleClient:
    """CRUD and search calls for ``/modules``."""

    def __init__(self, api: ApiClient) -> None:
        self.api = api

    def list(
        self,
        q: Optional[str] = None,
        studycredit: Iterable[int] = (),
        level: Iterable[str] = (),
        location: Iterable[str] = (),
    ) -> List[ModuleOut]:
        params: Dict[str, Any] = {}
        if q and q.strip():
            params["q"] = q.strip()
        for key, values in (("studycredit", studycredit), ("level", level), ("location", location)):
            values = list(values)
            if values:
                params[key] = values
        rows = self.api.get("/modules", params=params or None)
        return [ModuleOut.model_validate(r) for r in rows]

    def search(self, q: str) -> List[ModuleOut]:
        rows = self.api.get("/modules/search", params={"q": q})
        return [ModuleOut.model_validate(r) for r in rows]

    def get(self, module_id: int) -> Optional[ModuleOut]:
        try:
            row = self.api.get(f"/modules/{module_id}")
        except ApiError as e:
            if e.status_code == 404:
                return None
            raise
        return ModuleOut.model_validate(row)

    def create(self, module: Union[dict, ModuleCreate]) -> ModuleOut:
        return ModuleOut.model_validate(self.api.post("/modules", json=_payload(module)))

    def update(self, module_id: int, changes: Union[dict, ModuleUpdate]) -> ModuleOut:
        row = self.api.put(f"/modules/{module_id}", json=_payload(changes, exclude_unset=True))
        return ModuleOut.model_validate(row)

    def delete(self, module_id: int) -> str:
        return self.api.delete(f"/modules/{module_id}")["message"]
