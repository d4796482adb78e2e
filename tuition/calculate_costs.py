"""
Cost of Attendance Calculator

Selection in, Quote out. Pure lookup and arithmetic over a RateRepository:
no I/O, no state, identical inputs give equal quotes.

RATE BASIS
----------
    Tuition tables          - per semester
    Residence hall / meal   - per semester
    Ancillary cost table    - per academic year (fall and spring)

PROCESSING ORDER
----------------
    1. Tuition row for (level, residency, hours). No row -> Incomplete.
    2. Fall and spring doubles every tuition category, total included.
    3. Ancillary row for the housing option. No row -> all four figures 0.
    4. Books column chosen by level.
    5. Dorm: food and housing = hall "2 suite" rate + meal plan rate,
       doubled for fall and spring. Otherwise the ancillary figure.
    6. Single semester halves food and housing, transportation,
       miscellaneous and books, once each.
    7. Direct / indirect split by component classification.

USAGE
-----
    from tuition.calculate_costs import quote, quote_selections
    result = quote(selection, repository)
    df = quote_selections(selections_df, repository)
"""

import logging
from decimal import Decimal

import polars as pl

from shared.amounts import ZERO
from .version import VERSION
from .components import ALL, direct_components, indirect_components
from .data.reference.columns import NO_MEAL_PLAN
from .models import (
    Selection,
    Term,
    TuitionRow,
    AncillaryRow,
    Quote,
    Incomplete,
)
from .repository import RateRepository

logger = logging.getLogger(__name__)

TWO = Decimal(2)

# Semester-rate multiplier per term
SEMESTERS = {
    Term.SINGLE: Decimal(1),
    Term.FALL_AND_SPRING: TWO,
}


# =============================================================================
# MAIN ENTRY POINT
# =============================================================================

def quote(selection: Selection, repository: RateRepository) -> Quote | Incomplete:
    """
    Estimate the cost of attendance for one selection.

    Args:
        selection: The user's choices
        repository: Rate tables to read from

    Returns:
        Quote with every amount scaled to the selected term, or Incomplete
        if the tuition table has no row for the selected hour count
    """
    tuition = repository.lookup_tuition(selection.level, selection.residency, selection.hours)
    if tuition is None:
        reason = (
            f"No {selection.level.value} {selection.residency.value} tuition "
            f"rate for {selection.hours} hours"
        )
        logger.info("Incomplete quote: %s", reason)
        return Incomplete(selection=selection, reason=reason)

    tuition_items = _scale_tuition(tuition, selection.term)
    tuition_total = _scaled_total(tuition, selection.term)

    ancillary = repository.lookup_ancillary(selection.housing)
    if ancillary is None:
        logger.warning(
            "No ancillary costs for housing option %r, using 0", selection.housing.value
        )

    transportation, miscellaneous, books = _ancillary_figures(ancillary, selection)

    if selection.is_dorm:
        hall_cost, meal_cost = _dorm_costs(selection, repository)
        food_and_housing = hall_cost + meal_cost
    else:
        hall_cost = meal_cost = ZERO
        food_and_housing = ancillary.food_and_housing if ancillary is not None else ZERO

    if selection.is_single_semester:
        hall_cost, meal_cost = hall_cost / TWO, meal_cost / TWO
        food_and_housing = food_and_housing / TWO
        transportation = transportation / TWO
        miscellaneous = miscellaneous / TWO
        books = books / TWO

    amounts = {
        "tuition_total": tuition_total,
        "food_and_housing": food_and_housing,
        "transportation": transportation,
        "miscellaneous": miscellaneous,
        "books": books,
    }
    direct_total, indirect_total = _classify(amounts, selection)

    return Quote(
        selection=selection,
        tuition_items=tuition_items,
        tuition_total=tuition_total,
        hall_cost=hall_cost,
        meal_cost=meal_cost,
        food_and_housing=food_and_housing,
        transportation=transportation,
        miscellaneous=miscellaneous,
        books=books,
        direct_total=direct_total,
        indirect_total=indirect_total,
        grand_total=direct_total + indirect_total,
    )


# =============================================================================
# TUITION
# =============================================================================

def _scale_tuition(tuition: TuitionRow, term: Term) -> tuple[tuple[str, Decimal], ...]:
    """Scale every category, total included, so the breakdown sums like the total."""
    factor = SEMESTERS[term]
    return tuple((category, amount * factor) for category, amount in tuition.categories)


def _scaled_total(tuition: TuitionRow, term: Term) -> Decimal:
    return tuition.total * SEMESTERS[term]


# =============================================================================
# ANCILLARY COSTS
# =============================================================================

def _ancillary_figures(
    ancillary: AncillaryRow | None,
    selection: Selection,
) -> tuple[Decimal, Decimal, Decimal]:
    """Transportation, miscellaneous and books for the academic year (0 if no row)."""
    if ancillary is None:
        return ZERO, ZERO, ZERO
    return (
        ancillary.transportation,
        ancillary.miscellaneous,
        ancillary.books_for(selection.level),
    )


def _dorm_costs(selection: Selection, repository: RateRepository) -> tuple[Decimal, Decimal]:
    """
    Residence hall and meal plan costs before single-semester halving.

    Both tables hold semester rates, so fall and spring doubles them.
    A missing hall or meal plan row costs 0.
    """
    factor = SEMESTERS[selection.term]

    hall_cost = ZERO
    if selection.selected_hall:
        hall = repository.lookup_hall(selection.selected_hall)
        if hall is None:
            logger.warning("No rate for residence hall %r, using 0", selection.selected_hall)
        else:
            hall_cost = hall.rate * factor
    else:
        logger.warning("Dorm selected without a residence hall, using 0")

    meal_cost = ZERO
    if selection.selected_meal.strip().lower() != NO_MEAL_PLAN:
        meal = repository.lookup_meal_plan(selection.selected_meal)
        if meal is None:
            logger.warning("No rate for meal plan %r, using 0", selection.selected_meal)
        else:
            meal_cost = meal.rate * factor

    return hall_cost, meal_cost


# =============================================================================
# CLASSIFICATION
# =============================================================================

def _classify(amounts: dict[str, Decimal], selection: Selection) -> tuple[Decimal, Decimal]:
    """Sum amounts into direct and indirect totals by component classification."""
    housing = selection.housing
    direct = sum((amounts[c.name] for c in direct_components(housing)), ZERO)
    indirect = sum((amounts[c.name] for c in indirect_components(housing)), ZERO)
    return direct, indirect


# =============================================================================
# BATCH QUOTING
# =============================================================================

REQUIRED_INPUT_COLS = ["level", "residency", "hours", "housing", "term"]


def quote_selections(df: pl.DataFrame, repository: RateRepository) -> pl.DataFrame:
    """
    Quote every row of a selections DataFrame.

    DataFrame in, DataFrame out: the input columns are kept and cost columns
    are appended. Amounts are Float64 for export; exact values come from quote().

    Args:
        df: One selection per row. Required columns: level, residency, hours,
            housing, term. Optional: selected_hall, selected_meal
        repository: Rate tables to read from

    Returns:
        DataFrame with added columns:
            - cost_<component> for each component (tuition_total,
              food_and_housing, transportation, miscellaneous, books)
            - cost_direct, cost_indirect, cost_total
            - quote_complete (False and null costs when no tuition row)
            - calculator_version

    Raises:
        ValueError: If a required column is missing
    """
    missing = [c for c in REQUIRED_INPUT_COLS if c not in df.columns]
    if missing:
        raise ValueError(f"Selections are missing required column(s): {missing}")

    cost_cols = [f"cost_{c.name}" for c in ALL] + ["cost_direct", "cost_indirect", "cost_total"]
    results: dict[str, list] = {col: [] for col in cost_cols}
    complete = []

    for row in df.iter_rows(named=True):
        selection = Selection(
            level=row["level"],
            residency=row["residency"],
            hours=row["hours"],
            housing=row["housing"],
            term=row["term"],
            selected_hall=row.get("selected_hall"),
            selected_meal=row.get("selected_meal") or NO_MEAL_PLAN,
        )
        result = quote(selection, repository)
        complete.append(result.is_complete)

        if not result.is_complete:
            for col in cost_cols:
                results[col].append(None)
            continue

        for c in ALL:
            results[f"cost_{c.name}"].append(float(getattr(result, c.name)))
        results["cost_direct"].append(float(result.direct_total))
        results["cost_indirect"].append(float(result.indirect_total))
        results["cost_total"].append(float(result.grand_total))

    return df.with_columns(
        [pl.Series(col, values, dtype=pl.Float64) for col, values in results.items()]
        + [
            pl.Series("quote_complete", complete, dtype=pl.Boolean),
            pl.lit(VERSION).alias("calculator_version"),
        ]
    )


__all__ = [
    "quote",
    "quote_selections",
    "REQUIRED_INPUT_COLS",
]
