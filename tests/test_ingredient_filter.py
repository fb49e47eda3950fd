"""Unit tests for the ingredient exclusion predicate."""

import pytest

from conftest import make_detail
from core.services.ingredient_filter import excludes


class TestExcludes:
    """Case-insensitive substring matching over ingredient names."""

    @pytest.mark.parametrize("term", ["milk", "MILK", "Milk", "  milk  ", "ole mi"])
    def test_matching_terms_exclude(self, term):
        detail = make_detail("Porridge", "Oats", "Whole Milk")
        assert excludes(detail, term) is True

    def test_non_matching_term_keeps(self):
        detail = make_detail("Porridge", "Oats", "Whole Milk")
        assert excludes(detail, "almond") is False

    @pytest.mark.parametrize("term", ["", "   ", None])
    def test_blank_term_disables_filtering(self, term):
        detail = make_detail("Porridge", "Oats", "Whole Milk")
        assert excludes(detail, term) is False

    def test_missing_detail_is_never_excluded(self):
        assert excludes(None, "milk") is False

    def test_recipe_without_ingredients(self):
        assert excludes(make_detail("Water"), "milk") is False

    def test_inputs_not_mutated(self):
        detail = make_detail("Porridge", "Oats", "Whole Milk")
        before = detail.model_dump()
        excludes(detail, "MILK")
        assert detail.model_dump() == before
