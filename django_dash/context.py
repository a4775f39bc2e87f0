"""Request-scoped state handed to data sources and data grids."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass
class DashContext:
    """Who is viewing which block instance, and the request parameters.

    Request parameters are namespaced per block instance so several blocks
    on one page keep independent filters and pages, e.g.
    ``dash__<instance_id>__filters.<name>`` and ``dash__<instance_id>__page``.
    """

    user: Any = None
    request: Any = None
    instance_id: Optional[Any] = None

    @classmethod
    def from_request(cls, request, instance_id=None) -> "DashContext":
        return cls(user=getattr(request, "user", None), request=request, instance_id=instance_id)

    @property
    def namespace(self) -> str:
        return f"dash__{self.instance_id}__" if self.instance_id is not None else "dash__"

    def _params(self):
        return getattr(self.request, "GET", None) or {}

    def get_page_number(self):
        return self._params().get(f"{self.namespace}page") or 1

    def get_filter_values(self) -> Dict[str, Any]:
        params = self._params()
        prefix = f"{self.namespace}filters."
        values: Dict[str, Any] = {}
        for key in params.keys():
            if not key.startswith(prefix):
                continue
            name = key[len(prefix):]
            if name.endswith(".after") or name.endswith(".before"):
                name, bound = name.rsplit(".", 1)
                bounds = values.get(name)
                if not isinstance(bounds, dict):
                    bounds = {}
                    values[name] = bounds
                bounds[bound] = params.get(key)
                continue
            raw = params.getlist(key) if hasattr(params, "getlist") else [params.get(key)]
            values[name] = raw if len(raw) > 1 else raw[0]
        return values
