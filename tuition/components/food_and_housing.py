"""
Food and Housing

Dorm residents pay residence hall and meal plan rates to the institution,
so on campus this is a direct cost ("Room & Board"). At home or off campus
the estimate comes from the ancillary cost table and is indirect.
"""

from shared.components import CostComponent


class FoodAndHousing(CostComponent):
    """Room and board, or estimated living costs away from campus."""

    # Identity
    name = "food_and_housing"
    label = "Food & Housing"
    dorm_label = "Room & Board"

    # Classification
    direct_housing = ("dorm",)

    @classmethod
    def label_for(cls, housing: str) -> str:
        return cls.dorm_label if cls.is_direct(housing) else cls.label
