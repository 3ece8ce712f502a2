"""HTTP client for the catalog API.

The client fetches materials over HTTP and re-filters and re-sorts them
locally with `catalog.query`, the same functions the API uses, so a
caller can change filters without another round trip.
"""

import logging
from typing import Dict, List, Optional, Union
from urllib.parse import quote, unquote

import httpx

from . import models, query
from .config import settings
from .errors import CatalogError, InvalidEnum, MalformedId, MaterialValidationError, NotFound
from .schemas import FilterState, MaterialIn, MaterialOut

logger = logging.getLogger("catalog.client")


def _last_segment(resp: httpx.Response) -> str:
    return unquote(resp.request.url.path.rsplit("/", 1)[-1])


class CatalogClient:
    """Thin wrapper over `httpx.Client` returning `Material` models.

    Pass `http` to reuse an existing client (for example FastAPI's
    `TestClient`); otherwise one is created for `base_url`, which
    defaults to `CATALOG_API_URL`.
    """
    def __init__(self, base_url: Optional[str] = None, http: Optional[httpx.Client] = None, timeout: float = 10.0):
        self._owns_http = http is None
        self.http = http or httpx.Client(base_url=base_url or settings.CATALOG_API_URL, timeout=timeout)

    def close(self):
        if self._owns_http:
            self.http.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()

    def _request(self, method: str, path: str, **kwargs):
        resp = self.http.request(method, path, **kwargs)
        if resp.status_code in (400, 404):
            self._raise_for_detail(resp)
        resp.raise_for_status()
        return resp.json()

    @staticmethod
    def _raise_for_detail(resp: httpx.Response):
        try:
            detail = resp.json().get("detail")
        except ValueError:
            detail = resp.text
        logger.debug("catalog_error status=%s detail=%s", resp.status_code, detail)
        if resp.status_code == 404:
            raise NotFound(str(detail))
        if isinstance(detail, dict):
            raise MaterialValidationError(detail.get("errors"))
        if detail == "Invalid ID format":
            raise MalformedId(_last_segment(resp))
        if isinstance(detail, str) and detail.startswith("Invalid "):
            raise InvalidEnum(detail[len("Invalid "):], _last_segment(resp))
        raise CatalogError(str(detail))

    def _materials(self, path: str, **kwargs) -> List[models.Material]:
        return [MaterialOut.model_validate(item).to_material() for item in self._request("GET", path, **kwargs)]

    def list_materials(self) -> List[models.Material]:
        return self._materials("/materials")

    def featured(self, limit: Optional[int] = None) -> List[models.Material]:
        params = {"limit": limit} if limit is not None else None
        return self._materials("/materials/featured", params=params)

    def get(self, material_id: int) -> models.Material:
        return MaterialOut.model_validate(self._request("GET", f"/materials/{material_id}")).to_material()

    def search(self, text: str) -> List[models.Material]:
        return self._materials(f"/materials/search/{quote(text, safe='')}")

    def by_category(self, category: str) -> List[models.Material]:
        return self._materials(f"/materials/category/{quote(category, safe='')}")

    def by_subject(self, subject: str) -> List[models.Material]:
        return self._materials(f"/materials/subject/{quote(subject, safe='')}")

    def by_year_level(self, year_level: str) -> List[models.Material]:
        return self._materials(f"/materials/year-level/{quote(year_level, safe='')}")

    def record_download(self, material_id: int) -> models.Material:
        return MaterialOut.model_validate(self._request("POST", f"/materials/{material_id}/download")).to_material()

    def category_counts(self) -> Dict[str, int]:
        return self._request("GET", "/categories/counts")

    def create(self, draft: Union[MaterialIn, dict]) -> models.Material:
        """Create a material; a plain dict is sent as-is for the server to validate."""
        payload = draft.model_dump(mode="json", by_alias=True) if isinstance(draft, MaterialIn) else draft
        return MaterialOut.model_validate(self._request("POST", "/materials", json=payload)).to_material()

    def browse(self, filters: FilterState, sort: str = "popular", text: Optional[str] = None) -> List[models.Material]:
        """Fetch all materials and search, filter and sort them locally.

        Produces the same result as `GET /materials/browse` for the same
        arguments.
        """
        materials = self.list_materials()
        if text:
            materials = query.search(materials, text)
        return refilter(materials, filters, sort, text or "")


def refilter(materials: List[models.Material], filters: FilterState, sort: str = "popular", text: str = "") -> List[models.Material]:
    """Apply a filter state and ordering to already-fetched materials."""
    return query.sort(query.apply_filter_state(materials, filters), sort, text)
