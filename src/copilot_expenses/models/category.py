"""
Category total models for expense reports.
"""

from typing import Dict

from pydantic import BaseModel, Field, TypeAdapter


class ParentCategoryDetail(BaseModel):
    """
    Spending under one parent category.

    ``total`` covers every amount attributed to the parent, including rows
    that carry no child category, so the child values never add up to more
    than ``total``.
    """

    total: float = 0.0
    categories: Dict[str, float] = Field(default_factory=dict)

    @property
    def uncategorized(self) -> float:
        """Part of the total not broken down into a child category."""
        return round(self.total - sum(self.categories.values()), 2)


CategoryTotals = Dict[str, ParentCategoryDetail]

category_totals_adapter: TypeAdapter[CategoryTotals] = TypeAdapter(CategoryTotals)
