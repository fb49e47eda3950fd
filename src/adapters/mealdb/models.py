"""Raw TheMealDB payload shapes.

Every endpoint answers `{"meals": [...]}`; `meals` is null when nothing
matched. Detail records carry 20 flat numbered `strIngredientN` /
`strMeasureN` fields instead of a list.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

from core.domain.models import (
    MAX_INGREDIENT_SLOTS,
    RecipeDetail,
    RecipeSummary,
    build_ingredient_lines,
)


class MealsEnvelope(BaseModel):
    model_config = ConfigDict(extra="ignore")

    meals: list[dict[str, Any]] | None = None


class AreaPayload(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    area: str = Field(..., alias="strArea", min_length=1)


class MealSummaryPayload(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    name: str = Field(..., alias="strMeal", min_length=1)
    thumbnail_url: str | None = Field(default=None, alias="strMealThumb")

    def to_summary(self) -> RecipeSummary:
        return RecipeSummary(name=self.name, thumbnail_url=self.thumbnail_url or "")


class MealPayload(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    name: str = Field(..., alias="strMeal", min_length=1)
    category: str | None = Field(default=None, alias="strCategory")
    area: str | None = Field(default=None, alias="strArea")
    instructions: str | None = Field(default=None, alias="strInstructions")
    thumbnail_url: str | None = Field(default=None, alias="strMealThumb")

    def _slot(self, prefix: str, index: int) -> str | None:
        value = (self.model_extra or {}).get(f"{prefix}{index}")
        return value if isinstance(value, str) else None

    def ingredient_slots(self) -> list[str | None]:
        return [self._slot("strIngredient", i) for i in range(1, MAX_INGREDIENT_SLOTS + 1)]

    def measure_slots(self) -> list[str | None]:
        return [self._slot("strMeasure", i) for i in range(1, MAX_INGREDIENT_SLOTS + 1)]

    def to_detail(self) -> RecipeDetail:
        return RecipeDetail(
            name=self.name,
            category=self.category or None,
            area=self.area or None,
            instructions=self.instructions or None,
            thumbnail_url=self.thumbnail_url or None,
            ingredients=build_ingredient_lines(self.ingredient_slots(), self.measure_slots()),
        )
