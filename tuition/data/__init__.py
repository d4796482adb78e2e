"""
Estimator Data

Reference data and loaders for the rate tables.

Structure:
    - reference/: Static configuration (column names, defaults) and the
      bundled CSV rate tables

Every loader reads cells as text (no schema inference) so amounts such as
"3,000.00" reach the repository untouched; parsing to Decimal happens once,
in shared.amounts.
"""

import polars as pl
from pathlib import Path

from .reference.columns import (
    TUITION_FILE_TEMPLATE,
    ADDITIONAL_COSTS_FILE,
    RESIDENCE_HALLS_FILE,
    MEAL_PLANS_FILE,
)


REFERENCE_DIR = Path(__file__).parent / "reference"


def _read_table(path: Path) -> pl.DataFrame:
    """Read a CSV rate table with every column as a string."""
    return pl.read_csv(path, infer_schema_length=0)


def load_tuition_table(level: str, residency: str, data_dir: Path | None = None) -> pl.DataFrame:
    """
    Load the tuition table for one level x residency combination.

    Args:
        level: "undergraduate" or "graduate"
        residency: "resident" or "nonresident"
        data_dir: Directory holding the tables (bundled reference data if None)

    Returns:
        DataFrame with an hours column followed by fee-category columns
        (tuition, fees, ..., total) as strings
    """
    data_dir = Path(data_dir) if data_dir is not None else REFERENCE_DIR
    filename = TUITION_FILE_TEMPLATE.format(level=level, residency=residency)
    return _read_table(data_dir / filename)


def load_additional_costs(data_dir: Path | None = None) -> pl.DataFrame:
    """
    Load ancillary costs per housing option.

    Returns:
        DataFrame with columns: housing option, food and housing,
        transportation, miscellaneous, undergraduate books, graduate books
    """
    data_dir = Path(data_dir) if data_dir is not None else REFERENCE_DIR
    return _read_table(data_dir / ADDITIONAL_COSTS_FILE)


def load_residence_halls(data_dir: Path | None = None) -> pl.DataFrame:
    """
    Load residence hall rates.

    Returns:
        DataFrame with a residence hall column and one per-semester rate
        column per room configuration (the estimator uses "2 suite")
    """
    data_dir = Path(data_dir) if data_dir is not None else REFERENCE_DIR
    return _read_table(data_dir / RESIDENCE_HALLS_FILE)


def load_meal_plans(data_dir: Path | None = None) -> pl.DataFrame:
    """
    Load meal plan rates.

    Returns:
        DataFrame with columns: meal plan, rate (per semester)
    """
    data_dir = Path(data_dir) if data_dir is not None else REFERENCE_DIR
    return _read_table(data_dir / MEAL_PLANS_FILE)


__all__ = [
    "REFERENCE_DIR",
    "load_tuition_table",
    "load_additional_costs",
    "load_residence_halls",
    "load_meal_plans",
]
