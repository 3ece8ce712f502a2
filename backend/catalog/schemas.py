"""Pydantic request/response schemas used by the API.

Schemas keep the JSON wire format (camelCase keys) stable while the
Python models use snake_case attributes. Input accepts either spelling.
"""

from datetime import datetime
from typing import List, Literal, Optional, Set

from pydantic import BaseModel, ConfigDict, Field, StrictBool, ValidationError, field_validator
from pydantic.alias_generators import to_camel

from . import models
from .errors import MaterialValidationError

Category = Literal["book", "notes", "past_paper", "research"]
Subject = Literal["mathematics", "physics", "chemistry"]
YearLevel = Literal["bsc_first_year", "bsc_second_year", "bsc_third_year"]


class MaterialIn(BaseModel):
    """Creation payload: a material minus id, downloads and createdAt."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, str_strip_whitespace=True)

    title: str = Field(min_length=1)
    description: str = Field(min_length=1)
    category: Category
    subject: Subject
    year_level: Optional[YearLevel] = None
    author: Optional[str] = None
    institution: Optional[str] = None
    file_path: str
    cover_image: str
    featured: StrictBool = False

    @field_validator("year_level", "author", "institution", mode="before")
    @classmethod
    def _blank_to_none(cls, value):
        # empty optional fields are stored as "no value"
        if isinstance(value, str) and not value.strip():
            return None
        return value

    def to_draft(self) -> models.MaterialDraft:
        return models.MaterialDraft(**self.model_dump())


def parse_material_in(payload) -> MaterialIn:
    """Validate a raw creation payload.

    Raises `MaterialValidationError` listing every offending field.
    """
    if not isinstance(payload, dict):
        raise MaterialValidationError([{"field": "body", "message": "material must be a JSON object"}])
    try:
        return MaterialIn.model_validate(payload)
    except ValidationError as exc:
        errors = []
        for err in exc.errors():
            field = ".".join(str(part) for part in err.get("loc", ())) or "body"
            errors.append({"field": field, "message": err.get("msg", "invalid value")})
        raise MaterialValidationError(errors) from exc


class MaterialOut(BaseModel):
    """Material as returned by the API."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)

    id: int
    title: str
    description: str
    category: str
    subject: str
    year_level: Optional[str] = None
    author: Optional[str] = None
    institution: Optional[str] = None
    file_path: str
    cover_image: str
    downloads: int
    featured: bool
    created_at: datetime

    def to_material(self) -> models.Material:
        return models.Material(**self.model_dump())


class DownloadOut(BaseModel):
    """Response of the file download endpoint."""
    message: str
    material: MaterialOut


class FilterState(BaseModel):
    """Transient multi-field filter selection.

    An empty `categories` or `year_levels` set means no restriction on
    that field; `subject` is either a single subject or "all".
    """
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    categories: Set[Category] = Field(default_factory=lambda: set(models.CATEGORIES))
    subject: Literal["all", "mathematics", "physics", "chemistry"] = "all"
    year_levels: Set[YearLevel] = Field(default_factory=set)


class EnumOption(BaseModel):
    value: str
    label: str


class CatalogMeta(BaseModel):
    """Fixed enumerations with their display labels."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    categories: List[EnumOption]
    subjects: List[EnumOption]
    year_levels: List[EnumOption]
    sort_options: List[str]

