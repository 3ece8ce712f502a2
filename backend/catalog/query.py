"""Selection, search and ordering over sequences of materials.

Every function here is pure: it returns a new list and never mutates
its input or the store. The API layer and `catalog.client` both use
these functions so server-side and client-side results agree.

Functions accept any objects exposing the `Material` attributes.
"""

import unicodedata
from typing import Dict, Iterable, List, Optional

from .models import CATEGORIES, Material
from .schemas import FilterState

SORT_OPTIONS = ("popular", "newest", "az", "za", "relevance")


def by_category(materials: Iterable[Material], category: str) -> List[Material]:
    """Keep materials whose category equals `category` exactly."""
    return [m for m in materials if m.category == category]


def by_subject(materials: Iterable[Material], subject: str) -> List[Material]:
    """Keep materials whose subject equals `subject` exactly."""
    return [m for m in materials if m.subject == subject]


def by_year_level(materials: Iterable[Material], year_level: str) -> List[Material]:
    """Keep materials tagged with `year_level`.

    Materials without a year level are excluded here, unlike in
    `apply_filter_state` with an empty year-level set.
    """
    return [m for m in materials if m.year_level is not None and m.year_level == year_level]


def _contains(value: Optional[str], needle: str) -> bool:
    return value is not None and needle in value.lower()


def search(materials: Iterable[Material], query: str) -> List[Material]:
    """Case-insensitive substring search.

    A material matches when its title, description, author or
    institution contains the query. An empty query matches everything;
    minimum-length policies belong to the caller.
    """
    needle = query.lower()
    return [
        m for m in materials
        if _contains(m.title, needle)
        or _contains(m.description, needle)
        or _contains(m.author, needle)
        or _contains(m.institution, needle)
    ]


def _matches_filters(material: Material, filters: FilterState) -> bool:
    if filters.categories and material.category not in filters.categories:
        return False
    if filters.subject != "all" and material.subject != filters.subject:
        return False
    if filters.year_levels and (material.year_level is None or material.year_level not in filters.year_levels):
        return False
    return True


def apply_filter_state(materials: Iterable[Material], filters: FilterState) -> List[Material]:
    """Apply the conjunction of category, subject and year-level filters."""
    return [m for m in materials if _matches_filters(m, filters)]


def title_sort_key(title: str):
    """Collation key approximating a locale-aware title comparison.

    Primary: accents stripped and casefolded. Ties fall back to the
    casefolded title, then lowercase before uppercase.
    """
    folded = title.casefold()
    decomposed = unicodedata.normalize("NFKD", folded)
    base = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return (base, folded, title.swapcase())


def sort(materials: Iterable[Material], option: str, query: str = "") -> List[Material]:
    """Return a new, stably sorted list of materials.

    Options:
    - `popular`: most downloads first
    - `newest`: most recently created first
    - `az` / `za`: by title, ascending / descending
    - `relevance`: titles containing `query` first, then by downloads
    Unknown options keep the input order.
    """
    items = list(materials)
    if option == "popular":
        return sorted(items, key=lambda m: m.downloads, reverse=True)
    if option == "newest":
        return sorted(items, key=lambda m: m.created_at, reverse=True)
    if option == "az":
        return sorted(items, key=lambda m: title_sort_key(m.title))
    if option == "za":
        return sorted(items, key=lambda m: title_sort_key(m.title), reverse=True)
    if option == "relevance":
        needle = query.lower()
        return sorted(items, key=lambda m: (needle not in m.title.lower(), -m.downloads))
    return items


def category_counts(materials: Iterable[Material]) -> Dict[str, int]:
    """Count materials per category; every category appears, zeros included."""
    counts = {category: 0 for category in CATEGORIES}
    for m in materials:
        if m.category in counts:
            counts[m.category] += 1
    return counts


def featured(materials: Iterable[Material], limit: int) -> List[Material]:
    """Return the first `limit` featured materials in their given order."""
    if limit <= 0:
        return []
    return [m for m in materials if m.featured][:limit]
