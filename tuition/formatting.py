"""
Quote Formatter

Turns a Quote into a display-ready breakdown: a headline estimate plus
"Direct Costs" and "Indirect Costs" groups of labelled line items.

Pure function of the quote. Nothing is recomputed and the repository is
never consulted; group totals are the quote's own direct/indirect totals.

Amounts are shown in whole currency units, truncated (cents dropped, never
rounded) and grouped by thousands.
"""

from dataclasses import dataclass
from decimal import Decimal, ROUND_DOWN

from shared.amounts import parse_amount
from .components import ALL, FoodAndHousing, TuitionAndFees
from .data.reference.columns import HOURS_COL, NO_MEAL_PLAN, TOTAL_COL
from .data.reference.defaults import CURRENCY_SYMBOL, THOUSANDS_SEPARATOR, NOT_AVAILABLE
from .models import Quote, Incomplete

# Integers longer than this cannot be turned into text
MAX_DISPLAY_DIGITS = 4000

DIRECT_TITLE = "Direct Costs"
INDIRECT_TITLE = "Indirect Costs"
NO_MEAL_PLAN_LABEL = "No Meal Plan"
HALL_FALLBACK_LABEL = "Residence Hall"


# =============================================================================
# DISPLAY TYPES
# =============================================================================

@dataclass(frozen=True)
class LineItem:
    label: str
    amount: str
    is_subtotal: bool = False


@dataclass(frozen=True)
class CostGroup:
    title: str
    items: tuple[LineItem, ...]
    total_label: str
    total: str


@dataclass(frozen=True)
class DisplayBreakdown:
    """Formatted estimate. groups is empty when the quote is incomplete."""

    estimated_cost: str
    groups: tuple[CostGroup, ...]
    is_available: bool = True

    def group(self, title: str) -> CostGroup | None:
        return next((g for g in self.groups if g.title == title), None)


# =============================================================================
# AMOUNTS
# =============================================================================

def format_amount(value) -> str:
    """
    Whole-unit amount with thousands grouping, e.g. 14600.99 -> "14,600".

    Accepts Decimals, numbers or amount strings ("3,000.00"). Anything that
    cannot be read as a number formats as "0" instead of raising.
    """
    amount = value if isinstance(value, Decimal) and value.is_finite() else parse_amount(value)
    if amount.adjusted() > MAX_DISPLAY_DIGITS:
        return "0"
    whole = int(amount.to_integral_value(rounding=ROUND_DOWN))
    return f"{whole:,}".replace(",", THOUSANDS_SEPARATOR)


def format_currency(value) -> str:
    return f"{CURRENCY_SYMBOL}{format_amount(value)}"


# =============================================================================
# BREAKDOWN
# =============================================================================

def format_quote(result: Quote | Incomplete) -> DisplayBreakdown:
    """
    Build the display breakdown for an engine result.

    Line items per component, each placed in the group its classification
    puts it in for the selected housing option:
        - Tuition categories in table order, then a "Tuition & Fees" subtotal
        - Dorm: hall, meal plan (or "No Meal Plan"), "Room & Board" subtotal
        - Otherwise: a "Food & Housing" subtotal
        - Transportation, Miscellaneous, Books
    """
    if not result.is_complete:
        return DisplayBreakdown(estimated_cost=NOT_AVAILABLE, groups=(), is_available=False)

    housing = result.housing
    direct_items: list[LineItem] = []
    indirect_items: list[LineItem] = []

    for component in ALL:
        items = direct_items if component.is_direct(housing) else indirect_items
        items.extend(_component_items(component, result))

    groups = (
        CostGroup(
            title=DIRECT_TITLE,
            items=tuple(direct_items),
            total_label=f"Total {DIRECT_TITLE}",
            total=format_currency(result.direct_total),
        ),
        CostGroup(
            title=INDIRECT_TITLE,
            items=tuple(indirect_items),
            total_label=f"Total {INDIRECT_TITLE}",
            total=format_currency(result.indirect_total),
        ),
    )
    return DisplayBreakdown(estimated_cost=format_currency(result.grand_total), groups=groups)


def _component_items(component, result: Quote) -> list[LineItem]:
    if component is TuitionAndFees:
        return _tuition_items(result)
    if component is FoodAndHousing:
        return _food_and_housing_items(result)
    return [LineItem(component.label, format_currency(getattr(result, component.name)))]


def _tuition_items(result: Quote) -> list[LineItem]:
    items = [
        LineItem(_category_label(category), format_currency(amount))
        for category, amount in result.tuition_items
        if category not in (HOURS_COL, TOTAL_COL)
    ]
    items.append(LineItem(TuitionAndFees.label, format_currency(result.tuition_total), is_subtotal=True))
    return items


def _food_and_housing_items(result: Quote) -> list[LineItem]:
    label = FoodAndHousing.label_for(result.housing)
    subtotal = LineItem(label, format_currency(result.food_and_housing), is_subtotal=True)
    if not result.selection.is_dorm:
        return [subtotal]

    selection = result.selection
    meal_label = NO_MEAL_PLAN_LABEL if _no_meal(selection) else selection.selected_meal
    return [
        LineItem(selection.selected_hall or HALL_FALLBACK_LABEL, format_currency(result.hall_cost)),
        LineItem(meal_label, format_currency(result.meal_cost)),
        subtotal,
    ]


def _no_meal(selection) -> bool:
    return selection.selected_meal.strip().lower() == NO_MEAL_PLAN


def _category_label(category: str) -> str:
    """Column name as a label, e.g. required_fees -> Required fees."""
    label = category.replace("_", " ").strip()
    return label[:1].upper() + label[1:]


__all__ = [
    "LineItem",
    "CostGroup",
    "DisplayBreakdown",
    "format_amount",
    "format_currency",
    "format_quote",
]
