"""Domain models (Pydantic v2).

Notes:
- These models describe *what* a recipe is, not *how* it is fetched.
- The catalog's flat upstream shape (`strMeal`, `strIngredient1..20`) is
  translated in the adapter layer; nothing here knows about HTTP.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

Region = str

MAX_INGREDIENT_SLOTS = 20


class RecipeSummary(BaseModel):
    """Minimal record returned by a region listing.

    `name` is the natural key for detail lookups.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(
        ...,
        min_length=1,
        description="Recipe name exactly as the catalog returns it.",
    )
    thumbnail_url: str = Field(
        default="",
        description="Thumbnail image URL (may be empty).",
    )


class IngredientLine(BaseModel):
    """One populated ingredient slot of a recipe."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1)
    measure: str = Field(default="")

    @property
    def label(self) -> str:
        """`"<measure> <name>"`, or just the name when there is no measure."""

        return f"{self.measure} {self.name}".strip()


class RecipeDetail(BaseModel):
    """Fully detailed recipe record."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1)
    category: str | None = None
    area: str | None = None
    instructions: str | None = None
    thumbnail_url: str | None = None
    ingredients: tuple[IngredientLine, ...] = Field(
        default=(),
        max_length=MAX_INGREDIENT_SLOTS,
        description="Populated ingredient slots in upstream order.",
    )

    @property
    def ingredient_labels(self) -> list[str]:
        return [line.label for line in self.ingredients]


def build_ingredient_lines(
    ingredient_names: list[str | None],
    measures: list[str | None],
) -> tuple[IngredientLine, ...]:
    """Assemble ingredient lines from parallel numbered slots.

    Slots whose ingredient name is empty or whitespace are dropped; the
    order of the remaining slots is kept. Measures are trimmed and may be
    empty.
    """

    lines: list[IngredientLine] = []
    for index, raw_name in enumerate(ingredient_names[:MAX_INGREDIENT_SLOTS]):
        name = (raw_name or "").strip()
        if not name:
            continue
        raw_measure = measures[index] if index < len(measures) else None
        lines.append(IngredientLine(name=name, measure=(raw_measure or "").strip()))
    return tuple(lines)


class LookupStatus(str, Enum):
    """Outcome of a catalog read."""

    FOUND = "found"
    NOT_FOUND = "not_found"
    ERROR = "error"


class RegionListing(BaseModel):
    """Region listing with the outcome kept for diagnostics."""

    region: Region
    recipes: list[RecipeSummary] = Field(default_factory=list)
    status: LookupStatus = LookupStatus.FOUND
    error: str | None = None


class DetailLookup(BaseModel):
    """Detail search with the outcome kept for diagnostics.

    `detail` is None for both NOT_FOUND and ERROR.
    """

    name: str
    detail: RecipeDetail | None = None
    status: LookupStatus = LookupStatus.FOUND
    error: str | None = None


class EmptyReason(str, Enum):
    """Why a filter run produced nothing to show."""

    NONE = "none"
    NO_CANDIDATES = "no_candidates"
    ALL_EXCLUDED = "all_excluded"
    LISTING_FAILED = "listing_failed"


class FilterResult(BaseModel):
    """Output of one filter pipeline run."""

    region: Region = ""
    exclusion_term: str = ""
    shown: list[RecipeSummary] = Field(default_factory=list)
    total_candidates: int = Field(default=0, ge=0)
    listing_status: LookupStatus = LookupStatus.FOUND

    @property
    def excluded_count(self) -> int:
        return self.total_candidates - len(self.shown)

    @property
    def empty_reason(self) -> EmptyReason:
        if self.shown:
            return EmptyReason.NONE
        if self.listing_status is LookupStatus.ERROR:
            return EmptyReason.LISTING_FAILED
        if self.total_candidates and self.exclusion_term.strip():
            return EmptyReason.ALL_EXCLUDED
        return EmptyReason.NO_CANDIDATES

    def empty_message(self) -> str | None:
        """User-facing message for an empty result, None when there is something to show."""

        reason = self.empty_reason
        if reason is EmptyReason.NONE:
            return None
        if reason is EmptyReason.LISTING_FAILED:
            return "Error loading meals. Please try again."
        if reason is EmptyReason.ALL_EXCLUDED:
            return f'No meals found without "{self.exclusion_term}".'
        return "No meals found for this area."
