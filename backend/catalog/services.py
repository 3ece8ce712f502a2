"""Business logic used by HTTP controllers.

`CatalogService` validates boundary values (enum membership, ids, the
search length policy) and composes the store with the query functions.
Controllers stay thin: they translate `CatalogError`s into HTTP errors.
"""

import re
from typing import Dict, Iterable, List, Optional

from . import models, query
from .config import settings
from .errors import InvalidEnum, MalformedId, NotFound
from .repositories import MaterialStore
from .schemas import FilterState, MaterialIn

_ID_RE = re.compile(r"-?[0-9]+")


def parse_id(raw: str) -> int:
    """Convert a path segment into a material id.

    Only plain ASCII digits with an optional leading minus are accepted;
    anything else raises `MalformedId`.
    """
    if not isinstance(raw, str) or not _ID_RE.fullmatch(raw):
        raise MalformedId(raw)
    return int(raw)


def _require(kind: str, value: str, allowed) -> str:
    if value not in allowed:
        raise InvalidEnum(kind, value)
    return value


def build_filter_state(categories: Iterable[str], subject: str, year_levels: Iterable[str]) -> FilterState:
    """Validate raw filter values and build a `FilterState`.

    Empty category or year-level selections mean no restriction.
    """
    categories = [_require("category", c, models.CATEGORIES) for c in categories]
    if subject != "all":
        _require("subject", subject, models.SUBJECTS)
    year_levels = [_require("year level", y, models.YEAR_LEVELS) for y in year_levels]
    return FilterState(categories=set(categories), subject=subject, year_levels=set(year_levels))


class CatalogService:
    """Catalog operations over a single `MaterialStore`."""
    def __init__(self, store: MaterialStore, search_min_length: Optional[int] = None):
        self.store = store
        self.search_min_length = settings.SEARCH_MIN_LENGTH if search_min_length is None else search_min_length

    def list_all(self) -> List[models.Material]:
        return self.store.get_all()

    def featured(self, limit: Optional[int] = None) -> List[models.Material]:
        """Return featured materials in store order, `FEATURED_LIMIT` by default."""
        if limit is None:
            limit = settings.FEATURED_LIMIT
        return query.featured(self.store.get_all(), limit)

    def get(self, material_id: int) -> models.Material:
        material = self.store.get_by_id(material_id)
        if material is None:
            raise NotFound("Material not found")
        return material

    def by_category(self, category: str) -> List[models.Material]:
        _require("category", category, models.CATEGORIES)
        return query.by_category(self.store.get_all(), category)

    def by_subject(self, subject: str) -> List[models.Material]:
        _require("subject", subject, models.SUBJECTS)
        return query.by_subject(self.store.get_all(), subject)

    def by_year_level(self, year_level: str) -> List[models.Material]:
        _require("year level", year_level, models.YEAR_LEVELS)
        return query.by_year_level(self.store.get_all(), year_level)

    def search(self, text: str) -> List[models.Material]:
        """Search the catalog.

        The query is trimmed; shorter than the configured minimum length
        it returns no results rather than the whole catalog.
        """
        text = text.strip()
        if len(text) < self.search_min_length:
            return []
        return query.search(self.store.get_all(), text)

    def browse(self, filters: FilterState, sort: str = "popular", text: Optional[str] = None) -> List[models.Material]:
        """Filter by `filters`, optionally search, then sort.

        `relevance` ordering uses `text` as its query.
        """
        materials = self.store.get_all()
        if text:
            materials = query.search(materials, text)
        materials = query.apply_filter_state(materials, filters)
        return query.sort(materials, sort, text or "")

    def record_download(self, material_id: int) -> models.Material:
        """Count one download; the file transfer itself is not tracked."""
        material = self.store.increment_downloads(material_id)
        if material is None:
            raise NotFound("Material not found")
        return material

    def category_counts(self) -> Dict[str, int]:
        return query.category_counts(self.store.get_all())

    def create(self, payload: MaterialIn) -> models.Material:
        return self.store.insert(payload.to_draft())
