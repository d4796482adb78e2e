"""
Estimator Models

Value objects passed between the repository, the engine and the formatter.

    Selection   - the user's choices (immutable, passed by value)
    TuitionRow  - one row of a tuition table (level x residency x hours)
    AncillaryRow, HallRow, MealPlanRow - ancillary cost rows
    Quote       - engine output, superseded wholesale on every recompute
    Incomplete  - tagged absence when no tuition row matches
"""

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from enum import Enum

from shared.amounts import ZERO
from .data.reference.columns import NO_MEAL_PLAN, TOTAL_COL
from .data.reference.defaults import (
    DEFAULT_HOURS,
    DEFAULT_HOUSING,
    DEFAULT_RESIDENCY,
    DEFAULT_TERM,
)


def _normalize_key(value: str) -> str:
    """Lowercase and drop separators so "Fall & Spring" == "fallspring"."""
    text = str(value).strip().lower().replace("&", "and")
    for char in (" ", "-", "_"):
        text = text.replace(char, "")
    return text


def _whole_hours(value) -> int:
    """Credit hours as an int. Fractional or non-numeric hours are rejected."""
    if isinstance(value, bool):
        raise ValueError(f"Invalid credit hours: {value!r}")
    if isinstance(value, int):
        return value
    try:
        hours = Decimal(str(value).strip())
    except InvalidOperation:
        raise ValueError(f"Invalid credit hours: {value!r}") from None
    if not hours.is_finite() or hours != hours.to_integral_value():
        raise ValueError(f"Credit hours must be a whole number, got {value!r}")
    return int(hours)


class _Choice(str, Enum):
    """Closed enumeration that also accepts common spellings of its values."""

    @classmethod
    def _missing_(cls, value):
        if not isinstance(value, str):
            return None
        key = _normalize_key(value)
        for member in cls:
            if _normalize_key(member.value) == key or key in member.aliases():
                return member
        return None

    def aliases(self) -> tuple[str, ...]:
        return ()

    def __str__(self) -> str:
        return self.value


# =============================================================================
# ENUMERATIONS
# =============================================================================

class Level(_Choice):
    UNDERGRADUATE = "undergraduate"
    GRADUATE = "graduate"

    def aliases(self) -> tuple[str, ...]:
        return {"undergraduate": ("undergrad", "ug"), "graduate": ("grad",)}[self.value]


class Residency(_Choice):
    RESIDENT = "resident"
    NONRESIDENT = "nonresident"


class Housing(_Choice):
    HOME = "home"
    DORM = "dorm"
    OFF_CAMPUS = "off campus"

    def aliases(self) -> tuple[str, ...]:
        return {"home": ("athome",), "dorm": ("oncampus",), "off campus": ()}[self.value]


class Term(_Choice):
    SINGLE = "single"
    FALL_AND_SPRING = "fallspring"

    def aliases(self) -> tuple[str, ...]:
        return {
            "single": ("singlesemester", "semester"),
            "fallspring": ("fallandspring", "year", "academicyear"),
        }[self.value]


# =============================================================================
# SELECTION
# =============================================================================

@dataclass(frozen=True)
class Selection:
    """
    The user's current choices.

    Enumerated fields accept either the enum member or its string value.
    Hours are not range-checked here: an hour count with no tuition row
    produces an Incomplete quote rather than an error.
    """

    level: Level
    residency: Residency = DEFAULT_RESIDENCY
    hours: int = DEFAULT_HOURS
    housing: Housing = DEFAULT_HOUSING
    term: Term = DEFAULT_TERM
    selected_hall: str | None = None
    selected_meal: str = NO_MEAL_PLAN

    def __post_init__(self):
        object.__setattr__(self, "level", Level(self.level))
        object.__setattr__(self, "residency", Residency(self.residency))
        object.__setattr__(self, "housing", Housing(self.housing))
        object.__setattr__(self, "term", Term(self.term))
        object.__setattr__(self, "hours", _whole_hours(self.hours))
        if not self.selected_meal:
            object.__setattr__(self, "selected_meal", NO_MEAL_PLAN)

    @property
    def is_dorm(self) -> bool:
        return self.housing is Housing.DORM

    @property
    def is_single_semester(self) -> bool:
        return self.term is Term.SINGLE


# =============================================================================
# RATE ROWS
# =============================================================================

@dataclass(frozen=True)
class TuitionRow:
    """Per-semester tuition for one hour count. Categories keep source column order."""

    hours: int
    categories: tuple[tuple[str, Decimal], ...]

    @property
    def total(self) -> Decimal:
        """Declared total column (authoritative, never summed from categories)."""
        return dict(self.categories).get(TOTAL_COL, ZERO)


@dataclass(frozen=True)
class AncillaryRow:
    housing: str
    food_and_housing: Decimal
    transportation: Decimal
    miscellaneous: Decimal
    undergraduate_books: Decimal
    graduate_books: Decimal

    def books_for(self, level: Level) -> Decimal:
        if level is Level.UNDERGRADUATE:
            return self.undergraduate_books
        return self.graduate_books


@dataclass(frozen=True)
class HallRow:
    name: str
    rate: Decimal


@dataclass(frozen=True)
class MealPlanRow:
    name: str
    rate: Decimal


# =============================================================================
# ENGINE OUTPUT
# =============================================================================

@dataclass(frozen=True)
class Quote:
    """
    Estimated cost of attendance for one Selection.

    All amounts are exact Decimals already scaled to the selected term.
    hall_cost + meal_cost == food_and_housing when living in a dorm.
    """

    selection: Selection
    tuition_items: tuple[tuple[str, Decimal], ...]
    tuition_total: Decimal
    hall_cost: Decimal
    meal_cost: Decimal
    food_and_housing: Decimal
    transportation: Decimal
    miscellaneous: Decimal
    books: Decimal
    direct_total: Decimal
    indirect_total: Decimal
    grand_total: Decimal

    is_complete = True

    @property
    def tuition_by_category(self) -> dict[str, Decimal]:
        return dict(self.tuition_items)

    @property
    def housing(self) -> Housing:
        return self.selection.housing


@dataclass(frozen=True)
class Incomplete:
    """No tuition row matched the selection; no total can be shown."""

    selection: Selection
    reason: str

    is_complete = False


__all__ = [
    "Level",
    "Residency",
    "Housing",
    "Term",
    "Selection",
    "TuitionRow",
    "AncillaryRow",
    "HallRow",
    "MealPlanRow",
    "Quote",
    "Incomplete",
]
