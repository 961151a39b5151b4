"""
Unit tests for manual override merging.
"""

import json

import pytest

from copilot_expenses.core.exceptions import CategoryCollisionError, ConfigurationError
from copilot_expenses.core.overrides import load_overrides, merge
from copilot_expenses.models.category import ParentCategoryDetail


@pytest.fixture
def computed():
    return {
        "Food": ParentCategoryDetail(total=77.25, categories={"Restaurants": 72.5, "Coffee": 4.75}),
        "Groceries": ParentCategoryDetail(total=75.66),
    }


class TestMerge:
    """Tests for merge function."""

    def test_merge_union(self, computed) -> None:
        overrides = {"Mortgage": {"total": 123, "categories": {}}}
        result = merge(computed, overrides)

        assert set(result) == {"Food", "Groceries", "Mortgage"}
        assert result["Food"] == computed["Food"]
        assert result["Mortgage"] == ParentCategoryDetail(total=123.0, categories={})

    def test_merge_accepts_models(self, computed) -> None:
        overrides = {
            "Property Taxes": ParentCategoryDetail(total=456.0, categories={"County": 400.0}),
        }
        result = merge(computed, overrides)
        assert result["Property Taxes"].categories == {"County": 400.0}

    def test_merge_collision_names_key(self, computed) -> None:
        with pytest.raises(CategoryCollisionError, match="'Food'") as exc_info:
            merge(computed, {"Food": {"total": 1, "categories": {}}})
        assert exc_info.value.key == "Food"

    def test_merge_reports_every_collision(self, computed) -> None:
        overrides = {
            "Mortgage": {"total": 1},
            "Groceries": {"total": 2},
            "Food": {"total": 3},
        }
        with pytest.raises(CategoryCollisionError) as exc_info:
            merge(computed, overrides)
        assert exc_info.value.keys == ["Groceries", "Food"]

    def test_merge_collision_is_case_sensitive(self, computed) -> None:
        result = merge(computed, {"food": {"total": 1}})
        assert "food" in result and "Food" in result

    def test_merge_empty_overrides(self, computed) -> None:
        assert merge(computed, {}) == computed

    def test_merge_does_not_mutate_inputs(self, computed) -> None:
        override_detail = ParentCategoryDetail(total=10.0)
        overrides = {"Mortgage": override_detail}

        result = merge(computed, overrides)
        result["Food"].categories["Restaurants"] = 0.0
        result["Mortgage"].total = 99.0

        assert computed["Food"].categories["Restaurants"] == 72.5
        assert override_detail.total == 10.0
        assert set(computed) == {"Food", "Groceries"}
        assert set(overrides) == {"Mortgage"}

    def test_merge_rejects_malformed_override(self, computed) -> None:
        with pytest.raises(ConfigurationError):
            merge(computed, {"Mortgage": {"total": "a lot"}})


class TestLoadOverrides:
    """Tests for load_overrides function."""

    def test_load_overrides(self, tmp_path) -> None:
        path = tmp_path / "overrides.json"
        path.write_text(json.dumps({
            "Mortgage": {"total": 123, "categories": {}},
            "Property Taxes": {"total": 456.5, "categories": {}},
        }))

        overrides = load_overrides(path)
        assert overrides["Mortgage"].total == 123.0
        assert overrides["Property Taxes"].total == 456.5

    def test_load_overrides_missing_file(self, tmp_path) -> None:
        with pytest.raises(ConfigurationError, match="Cannot read"):
            load_overrides(tmp_path / "missing.json")

    def test_load_overrides_invalid_json(self, tmp_path) -> None:
        path = tmp_path / "overrides.json"
        path.write_text("{not json")
        with pytest.raises(ConfigurationError, match="Invalid overrides"):
            load_overrides(path)

    def test_load_overrides_wrong_shape(self, tmp_path) -> None:
        path = tmp_path / "overrides.json"
        path.write_text(json.dumps([{"total": 1}]))
        with pytest.raises(ConfigurationError):
            load_overrides(path)
