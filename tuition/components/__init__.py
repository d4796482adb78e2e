"""
Cost Components Package

Exports every component of a cost-of-attendance estimate and the direct /
indirect split.

Classification:
    - Tuition & Fees  - always direct
    - Food & Housing  - direct in a dorm (room and board), otherwise indirect
    - Transportation, Miscellaneous, Books - always indirect

Usage:
    from tuition.components import ALL, direct_components, indirect_components
"""

from shared.components import CostComponent
from .tuition_and_fees import TuitionAndFees
from .food_and_housing import FoodAndHousing
from .transportation import Transportation
from .miscellaneous import Miscellaneous
from .books import Books


# All components, in display order
ALL: list[type[CostComponent]] = [
    TuitionAndFees, FoodAndHousing, Transportation, Miscellaneous, Books
]


# =============================================================================
# HELPERS
# =============================================================================

def direct_components(housing: str) -> list[type[CostComponent]]:
    """Components paid to the institution for this housing option."""
    return [c for c in ALL if c.is_direct(housing)]


def indirect_components(housing: str) -> list[type[CostComponent]]:
    """Components incurred but not paid to the institution."""
    return [c for c in ALL if c.is_indirect(housing)]


# =============================================================================
# VALIDATION
# =============================================================================

def validate_components() -> None:
    """
    Validate component configuration integrity.

    Raises ValueError if any configuration issues are found.
    Called at import time to fail fast on configuration errors.
    """
    errors = []

    names = [c.name for c in ALL]
    for name in sorted({n for n in names if names.count(n) > 1}):
        errors.append(f"{name}: component name used more than once")

    for c in ALL:
        if not getattr(c, "label", None):
            errors.append(f"{c.__name__}: missing label")
        if c.always_direct and c.direct_housing:
            errors.append(f"{c.name}: always_direct=True should not list direct_housing")

    if errors:
        raise ValueError("Cost component configuration errors:\n  " + "\n  ".join(errors))


# Run validation at import time
validate_components()


__all__ = [
    "ALL",
    "TuitionAndFees",
    "FoodAndHousing",
    "Transportation",
    "Miscellaneous",
    "Books",
    "direct_components",
    "indirect_components",
]
