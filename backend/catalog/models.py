"""SQLModel data models and the catalog's fixed enumerations.

`Material` is the single catalog record. It is declared as a SQLModel
model so the same class describes the stored record and its validation
rules; the catalog keeps records in memory rather than in a table.
"""

from typing import Optional
from sqlmodel import SQLModel, Field
from datetime import datetime, timezone


CATEGORIES = ("book", "notes", "past_paper", "research")
SUBJECTS = ("mathematics", "physics", "chemistry")
YEAR_LEVELS = ("bsc_first_year", "bsc_second_year", "bsc_third_year")

CATEGORY_LABELS = {
    "book": "Book",
    "notes": "Notes",
    "past_paper": "Past Paper",
    "research": "Research",
}
SUBJECT_LABELS = {
    "mathematics": "Mathematics",
    "physics": "Physics",
    "chemistry": "Chemistry",
}
YEAR_LEVEL_LABELS = {
    "bsc_first_year": "B.Sc. 1st Year",
    "bsc_second_year": "B.Sc. 2nd Year",
    "bsc_third_year": "B.Sc. 3rd Year",
}


def category_label(category: str) -> str:
    return CATEGORY_LABELS.get(category, category)


def subject_label(subject: str) -> str:
    return SUBJECT_LABELS.get(subject, subject)


def year_level_label(year_level: Optional[str]) -> str:
    """Return the display label for a year level; absent means all years."""
    if not year_level:
        return "All Years"
    return YEAR_LEVEL_LABELS.get(year_level, year_level)


class MaterialDraft(SQLModel):
    """A material as submitted for creation.

    Fields mirror `Material` minus the store-assigned `id`, `downloads`
    and `created_at`.
    """
    title: str
    description: str
    category: str
    subject: str
    year_level: Optional[str] = None
    author: Optional[str] = None
    institution: Optional[str] = None
    file_path: str
    cover_image: str
    featured: bool = False


class Material(MaterialDraft):
    """A catalog entry (book, notes, past paper or research item).

    Fields:
    - `id`: positive integer assigned by the store, never reused
    - `downloads`: counter that only ever increases
    - `created_at`: UTC timestamp set once at insertion
    """
    id: int = Field(gt=0)
    downloads: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
