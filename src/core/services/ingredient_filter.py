"""Ingredient exclusion predicate."""

from __future__ import annotations

from core.domain.models import RecipeDetail


def normalize_term(term: str | None) -> str:
    return (term or "").strip().lower()


def excludes(detail: RecipeDetail | None, term: str | None) -> bool:
    """True when any ingredient name of `detail` contains `term`.

    Matching is a case-insensitive substring test. A blank term disables
    filtering and a missing detail is never excluded (its ingredients cannot
    be verified).
    """

    needle = normalize_term(term)
    if not needle or detail is None:
        return False
    return any(needle in line.name.lower() for line in detail.ingredients)
