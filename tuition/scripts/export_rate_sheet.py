"""
Export Rate Sheet
=================

Quotes every combination of level, residency, hours, housing and term and
writes the results to a CSV, one row per selection.

Dorm rows are produced once per residence hall, without a meal plan.
Selections with no tuition row are kept with quote_complete = false.

Usage:
    python -m tuition.scripts.export_rate_sheet
    python -m tuition.scripts.export_rate_sheet --output rate_sheet.csv
    python -m tuition.scripts.export_rate_sheet --data-dir path/to/tables --verbose
"""

import argparse
import logging
from pathlib import Path

import polars as pl

from tuition.calculate_costs import quote_selections
from tuition.data.reference.columns import NO_MEAL_PLAN
from tuition.data.reference.defaults import MIN_HOURS, MAX_HOURS
from tuition.models import Level, Residency, Housing, Term
from tuition.repository import RateRepository, load_repository

DEFAULT_OUTPUT = Path("rate_sheet.csv")


def build_selections(repository: RateRepository) -> pl.DataFrame:
    """One row per selection to quote."""
    halls = repository.hall_names()
    rows = []

    for level in Level:
        for residency in Residency:
            for hours in range(MIN_HOURS, MAX_HOURS + 1):
                for term in Term:
                    for housing in Housing:
                        hall_choices = halls if housing is Housing.DORM else [None]
                        for hall in hall_choices:
                            rows.append({
                                "level": level.value,
                                "residency": residency.value,
                                "hours": hours,
                                "housing": housing.value,
                                "term": term.value,
                                "selected_hall": hall,
                                "selected_meal": NO_MEAL_PLAN,
                            })

    return pl.DataFrame(rows, schema={
        "level": pl.Utf8,
        "residency": pl.Utf8,
        "hours": pl.Int64,
        "housing": pl.Utf8,
        "term": pl.Utf8,
        "selected_hall": pl.Utf8,
        "selected_meal": pl.Utf8,
    })


def main():
    parser = argparse.ArgumentParser(description="Export a cost of attendance rate sheet")
    parser.add_argument(
        "--data-dir",
        type=Path,
        default=None,
        help="Directory with the rate table CSVs (default: bundled reference tables)",
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=DEFAULT_OUTPUT,
        help=f"CSV file to write (default: {DEFAULT_OUTPUT})",
    )
    parser.add_argument("--verbose", action="store_true", help="Show debug logging")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    print("Loading rate tables...")
    repository = load_repository(args.data_dir)

    selections = build_selections(repository)
    print(f"  Quoting {len(selections):,} selections...")
    df = quote_selections(selections, repository)

    incomplete = df.filter(~pl.col("quote_complete")).height
    if incomplete:
        print(f"  Warning: {incomplete:,} selection(s) have no tuition rate")

    args.output.parent.mkdir(parents=True, exist_ok=True)
    df.write_csv(args.output)
    print(f"Saved {len(df):,} rows to {args.output}")


if __name__ == "__main__":
    main()
