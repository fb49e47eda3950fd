"""TheMealDB adapter (implements `core.interfaces.catalog.RecipeCatalog`)."""

from adapters.mealdb.client import MealDBCatalog, pick_detail_record
from adapters.mealdb.models import MealPayload, MealSummaryPayload, MealsEnvelope

__all__ = [
    "MealDBCatalog",
    "MealPayload",
    "MealSummaryPayload",
    "MealsEnvelope",
    "pick_detail_record",
]
