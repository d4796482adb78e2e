"""
Rate Repository

Read-only lookups over the ingested rate tables:

    Tuition Rates         - level x residency x hours -> TuitionRow
    Ancillary Costs       - housing option            -> AncillaryRow
    Residence Hall Rates  - hall name                 -> HallRow
    Meal Plan Rates       - plan name                 -> MealPlanRow

INGESTION
---------
Tables arrive as polars DataFrames (from the CSV loaders or built in
memory). On construction every table is normalized once: headers are
stripped and lowercased, every cell is cast to a stripped string. Key
columns must exist and key values must be unique, otherwise RateDataError.

LOOKUPS
-------
Keys match case-insensitively. A lookup with no match returns None; the
repository never substitutes a default amount, that is the engine's call.
Amount cells are parsed with shared.amounts.parse_amount, so a malformed
cell becomes zero for that one figure.

A repository is an immutable snapshot. Reloading data means building a new
repository, so a quote never sees a half-updated set of tables.
"""

import logging
from enum import Enum
from pathlib import Path
from typing import Mapping

import polars as pl

from shared.amounts import ZERO, parse_amount
from .data import (
    REFERENCE_DIR,
    load_tuition_table,
    load_additional_costs,
    load_residence_halls,
    load_meal_plans,
)
from .data.reference.columns import (
    TUITION_FILE_TEMPLATE,
    HOURS_COL,
    TOTAL_COL,
    ADDITIONAL_COSTS_FILE,
    HOUSING_OPTION_COL,
    FOOD_AND_HOUSING_COL,
    TRANSPORTATION_COL,
    MISCELLANEOUS_COL,
    UNDERGRADUATE_BOOKS_COL,
    GRADUATE_BOOKS_COL,
    RESIDENCE_HALLS_FILE,
    HALL_NAME_COL,
    HALL_RATE_COL,
    MEAL_PLANS_FILE,
    MEAL_PLAN_COL,
    MEAL_RATE_COL,
)
from .models import (
    Level,
    Residency,
    Housing,
    TuitionRow,
    AncillaryRow,
    HallRow,
    MealPlanRow,
)

logger = logging.getLogger(__name__)

# Internal lookup column added at ingestion (lowercased key / parsed hours)
_LOOKUP_COL = "__lookup_key"

ANCILLARY_AMOUNT_COLS = [
    FOOD_AND_HOUSING_COL,
    TRANSPORTATION_COL,
    MISCELLANEOUS_COL,
    UNDERGRADUATE_BOOKS_COL,
    GRADUATE_BOOKS_COL,
]


class RateDataError(ValueError):
    """A rate table breaks a structural invariant (missing key column, duplicate keys)."""


# =============================================================================
# INGESTION HELPERS
# =============================================================================

def normalize_table(df: pl.DataFrame, table: str) -> pl.DataFrame:
    """
    Lowercase and strip headers, cast every cell to a stripped string.

    Raises:
        RateDataError: If two headers collapse to the same name
    """
    columns = [c.strip().lower() for c in df.columns]
    duplicates = sorted({c for c in columns if columns.count(c) > 1})
    if duplicates:
        raise RateDataError(f"{table}: duplicate columns after normalizing headers: {duplicates}")

    df = df.rename(dict(zip(df.columns, columns)))
    if not columns:
        return df
    return df.select(pl.all().cast(pl.Utf8).str.strip_chars())


def _require_columns(df: pl.DataFrame, required: list[str], table: str) -> None:
    missing = [c for c in required if c not in df.columns]
    if missing:
        raise RateDataError(f"{table}: missing required column(s) {missing}, found {df.columns}")


def _warn_missing_columns(df: pl.DataFrame, expected: list[str], table: str) -> None:
    missing = [c for c in expected if c not in df.columns]
    if missing:
        logger.warning("%s: missing column(s) %s, those amounts will be 0", table, missing)


def _require_unique_keys(df: pl.DataFrame, table: str) -> None:
    keys = df.get_column(_LOOKUP_COL).drop_nulls()
    duplicated = keys.filter(keys.is_duplicated()).unique().sort().to_list()
    if duplicated:
        raise RateDataError(f"{table}: duplicate rows for key(s) {duplicated}")


def _key_text(value) -> str:
    """Lookup form of a key: enum value or text, stripped and lowercased."""
    if isinstance(value, Enum):
        value = value.value
    return str(value).strip().lower()


def _index_by_name(df: pl.DataFrame | None, key_col: str, table: str) -> pl.DataFrame | None:
    """Normalize a keyed table and add its lowercase lookup column."""
    if df is None:
        return None
    df = normalize_table(df, table)
    _require_columns(df, [key_col], table)
    df = df.with_columns(pl.col(key_col).str.to_lowercase().alias(_LOOKUP_COL))
    _require_unique_keys(df, table)
    return df


def _index_by_hours(df: pl.DataFrame, table: str) -> pl.DataFrame:
    """Normalize a tuition table and add its integer hours lookup column."""
    df = normalize_table(df, table)
    _require_columns(df, [HOURS_COL, TOTAL_COL], table)
    # Leading integer, so "15" and "15.0" both key hour 15
    df = df.with_columns(
        pl.col(HOURS_COL).str.extract(r"^(\d+)", 1).cast(pl.Int64).alias(_LOOKUP_COL)
    )
    _require_unique_keys(df, table)
    return df


def _first_match(df: pl.DataFrame | None, key) -> dict | None:
    if df is None:
        return None
    match = df.filter(pl.col(_LOOKUP_COL) == key)
    if match.is_empty():
        return None
    return match.row(0, named=True)


# =============================================================================
# REPOSITORY
# =============================================================================

class RateRepository:
    """
    Immutable lookup view over the four rate tables.

    Args:
        tuition: Tuition tables keyed by (level, residency)
        additional_costs: Ancillary costs, one row per housing option
        residence_halls: Residence hall rates, one row per hall
        meal_plans: Meal plan rates, one row per plan
    """

    def __init__(
        self,
        tuition: Mapping[tuple, pl.DataFrame] | None = None,
        additional_costs: pl.DataFrame | None = None,
        residence_halls: pl.DataFrame | None = None,
        meal_plans: pl.DataFrame | None = None,
    ):
        self._tuition: dict[tuple[Level, Residency], pl.DataFrame] = {}
        for (level, residency), df in (tuition or {}).items():
            key = (Level(level), Residency(residency))
            table = TUITION_FILE_TEMPLATE.format(level=key[0].value, residency=key[1].value)
            self._tuition[key] = _index_by_hours(df, table)

        self._additional_costs = _index_by_name(
            additional_costs, HOUSING_OPTION_COL, ADDITIONAL_COSTS_FILE
        )
        if self._additional_costs is not None:
            _warn_missing_columns(self._additional_costs, ANCILLARY_AMOUNT_COLS, ADDITIONAL_COSTS_FILE)

        self._residence_halls = _index_by_name(residence_halls, HALL_NAME_COL, RESIDENCE_HALLS_FILE)
        if self._residence_halls is not None:
            _warn_missing_columns(self._residence_halls, [HALL_RATE_COL], RESIDENCE_HALLS_FILE)

        self._meal_plans = _index_by_name(meal_plans, MEAL_PLAN_COL, MEAL_PLANS_FILE)
        if self._meal_plans is not None:
            _warn_missing_columns(self._meal_plans, [MEAL_RATE_COL], MEAL_PLANS_FILE)

    # -------------------------------------------------------------------------
    # LOOKUPS
    # -------------------------------------------------------------------------

    def lookup_tuition(self, level, residency, hours: int) -> TuitionRow | None:
        """Per-semester tuition row for an hour count, or None."""
        df = self._tuition.get((Level(level), Residency(residency)))
        row = _first_match(df, int(hours))
        if row is None:
            return None

        categories = tuple(
            (col, parse_amount(row[col], field=col))
            for col in df.columns
            if col not in (HOURS_COL, _LOOKUP_COL)
        )
        return TuitionRow(hours=int(hours), categories=categories)

    def lookup_ancillary(self, housing) -> AncillaryRow | None:
        """Ancillary cost row for a housing option, or None."""
        row = _first_match(self._additional_costs, _key_text(housing))
        if row is None:
            return None

        amounts = {col: parse_amount(row.get(col), field=col) for col in ANCILLARY_AMOUNT_COLS}
        return AncillaryRow(
            housing=row[HOUSING_OPTION_COL],
            food_and_housing=amounts[FOOD_AND_HOUSING_COL],
            transportation=amounts[TRANSPORTATION_COL],
            miscellaneous=amounts[MISCELLANEOUS_COL],
            undergraduate_books=amounts[UNDERGRADUATE_BOOKS_COL],
            graduate_books=amounts[GRADUATE_BOOKS_COL],
        )

    def lookup_hall(self, name: str) -> HallRow | None:
        """Residence hall with its "2 suite" semester rate, or None."""
        row = _first_match(self._residence_halls, _key_text(name))
        if row is None:
            return None

        rate = parse_amount(row.get(HALL_RATE_COL), field=HALL_RATE_COL)
        if rate < ZERO:
            logger.warning("Negative rate %s for residence hall %r, using 0", rate, row[HALL_NAME_COL])
            rate = ZERO
        return HallRow(name=row[HALL_NAME_COL], rate=rate)

    def lookup_meal_plan(self, name: str) -> MealPlanRow | None:
        """Meal plan with its semester rate, or None."""
        row = _first_match(self._meal_plans, _key_text(name))
        if row is None:
            return None
        return MealPlanRow(
            name=row[MEAL_PLAN_COL],
            rate=parse_amount(row.get(MEAL_RATE_COL), field=MEAL_RATE_COL),
        )

    # -------------------------------------------------------------------------
    # CHOICES
    # -------------------------------------------------------------------------

    def hall_names(self) -> list[str]:
        """Residence hall names in table order."""
        if self._residence_halls is None:
            return []
        return self._residence_halls.get_column(HALL_NAME_COL).drop_nulls().to_list()

    def meal_plan_names(self) -> list[str]:
        """Meal plan names in table order."""
        if self._meal_plans is None:
            return []
        return self._meal_plans.get_column(MEAL_PLAN_COL).drop_nulls().to_list()

    def tuition_hours(self, level, residency) -> list[int]:
        """Hour counts with a tuition row for a level x residency combination."""
        df = self._tuition.get((Level(level), Residency(residency)))
        if df is None:
            return []
        return df.get_column(_LOOKUP_COL).drop_nulls().sort().to_list()


# =============================================================================
# LOADING
# =============================================================================

def load_repository(data_dir: Path | None = None) -> RateRepository:
    """
    Build a repository from the CSV rate tables in a directory.

    Every tuition table is required. A missing ancillary, residence hall or
    meal plan table is logged and those costs degrade to zero.

    Args:
        data_dir: Directory holding the tables (bundled reference data if None)

    Raises:
        RateDataError: If a tuition table is missing or any table is malformed
    """
    data_dir = Path(data_dir) if data_dir is not None else REFERENCE_DIR

    tuition = {}
    for level in Level:
        for residency in Residency:
            path = data_dir / TUITION_FILE_TEMPLATE.format(level=level.value, residency=residency.value)
            if not path.exists():
                raise RateDataError(f"Tuition table not found: {path}")
            tuition[(level, residency)] = load_tuition_table(level.value, residency.value, data_dir)

    optional = {}
    for filename, loader in [
        (ADDITIONAL_COSTS_FILE, load_additional_costs),
        (RESIDENCE_HALLS_FILE, load_residence_halls),
        (MEAL_PLANS_FILE, load_meal_plans),
    ]:
        if (data_dir / filename).exists():
            optional[filename] = loader(data_dir)
        else:
            logger.warning("Rate table not found: %s, those costs will be 0", data_dir / filename)
            optional[filename] = None

    repository = RateRepository(
        tuition=tuition,
        additional_costs=optional[ADDITIONAL_COSTS_FILE],
        residence_halls=optional[RESIDENCE_HALLS_FILE],
        meal_plans=optional[MEAL_PLANS_FILE],
    )
    logger.info(
        "Loaded rate tables from %s: %d tuition tables, %d halls, %d meal plans",
        data_dir, len(tuition), len(repository.hall_names()), len(repository.meal_plan_names()),
    )
    return repository


__all__ = [
    "RateDataError",
    "RateRepository",
    "normalize_table",
    "load_repository",
]
