"""
Cost of Attendance Calculator
=============================

Interactive CLI tool to estimate the cost of attendance for one selection.

Usage:
    python -m tuition.scripts.calculator
    python -m tuition.scripts.calculator --data-dir path/to/tables --verbose
"""

import argparse
import logging
from pathlib import Path

from tuition.calculate_costs import quote
from tuition.data.reference.columns import NO_MEAL_PLAN
from tuition.data.reference.defaults import (
    DEFAULT_HALL,
    DEFAULT_HOURS,
    MIN_HOURS,
    MAX_HOURS,
)
from tuition.formatting import format_quote
from tuition.models import Level, Residency, Housing, Term, Selection
from tuition.repository import RateRepository, load_repository
from tuition.version import VERSION


def choose(prompt: str, options: list[tuple[str, str]], default: int = 1) -> str:
    """Numbered menu, returns the value of the chosen option."""
    print(f"\n{prompt}:")
    for i, (_, label) in enumerate(options, start=1):
        print(f"  {i}. {label}")
    choice = input(f"Select (1-{len(options)}) [default: {default}]: ").strip()
    index = int(choice) if choice else default
    if not 1 <= index <= len(options):
        raise ValueError(f"Choice must be between 1 and {len(options)}, got {index}")
    return options[index - 1][0]


def get_user_input(repository: RateRepository) -> Selection:
    """Prompt user for selection details."""
    print("\n=== Cost of Attendance Estimator ===")
    print(f"Version: {VERSION}")

    level = choose("Level of study", [
        (Level.UNDERGRADUATE.value, "Undergraduate"),
        (Level.GRADUATE.value, "Graduate"),
    ])
    residency = choose("Residency status", [
        (Residency.RESIDENT.value, "Resident"),
        (Residency.NONRESIDENT.value, "Non-Resident"),
    ])
    housing = choose("Housing", [
        (Housing.HOME.value, "At Home"),
        (Housing.DORM.value, "Dorm"),
        (Housing.OFF_CAMPUS.value, "Off Campus"),
    ])
    term = choose("Enrollment term", [
        (Term.FALL_AND_SPRING.value, "Fall & Spring"),
        (Term.SINGLE.value, "Single Semester"),
    ])

    selected_hall = None
    selected_meal = NO_MEAL_PLAN
    if housing == Housing.DORM.value:
        halls = repository.hall_names()
        if halls:
            default_hall = halls.index(DEFAULT_HALL) + 1 if DEFAULT_HALL in halls else 1
            selected_hall = choose("Residence hall", [(h, h) for h in halls], default=default_hall)
        meals = [(NO_MEAL_PLAN, "None")] + [(m, m) for m in repository.meal_plan_names()]
        selected_meal = choose("Meal plan", meals)

    hours_input = input(f"\nNumber of hours ({MIN_HOURS}-{MAX_HOURS}) [default: {DEFAULT_HOURS}]: ").strip()
    hours = int(hours_input) if hours_input else DEFAULT_HOURS
    if not MIN_HOURS <= hours <= MAX_HOURS:
        print(f"\nWarning: published rates cover {MIN_HOURS}-{MAX_HOURS} hours")

    return Selection(
        level=level,
        residency=residency,
        hours=hours,
        housing=housing,
        term=term,
        selected_hall=selected_hall,
        selected_meal=selected_meal,
    )


def print_results(result, selection: Selection) -> None:
    """Print the formatted breakdown."""
    breakdown = format_quote(result)

    print("\n" + "=" * 50)
    print("ESTIMATED COST OF ATTENDANCE")
    print("=" * 50)

    print(f"\nSelection: {selection.level.value}, {selection.residency.value}, {selection.hours} hours")
    print(f"Housing: {selection.housing.value}", end="")
    if selection.is_dorm:
        print(f" ({selection.selected_hall or 'no hall'}, meal plan: {selection.selected_meal})")
    else:
        print()
    print(f"Term: {'Single Semester' if selection.is_single_semester else 'Fall & Spring'}")

    if not breakdown.is_available:
        print(f"\nEstimated cost: {breakdown.estimated_cost}")
        print(f"  {result.reason}")
        print()
        return

    for group in breakdown.groups:
        print(f"\n--- {group.title} ---")
        for item in group.items:
            if item.is_subtotal:
                print(f"  {'-' * 36}")
            print(f"  {item.label:<26}{item.amount:>10}")
        print(f"  {'=' * 36}")
        print(f"  {group.total_label:<26}{group.total:>10}")

    print(f"\nESTIMATED COST:             {breakdown.estimated_cost:>10}")
    print()


def main():
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Estimate the cost of attendance")
    parser.add_argument(
        "--data-dir",
        type=Path,
        default=None,
        help="Directory with the rate table CSVs (default: bundled reference tables)",
    )
    parser.add_argument("--verbose", action="store_true", help="Show debug logging")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        repository = load_repository(args.data_dir)

        # Get user input
        selection = get_user_input(repository)

        # Run through engine
        result = quote(selection, repository)

        # Print results
        print_results(result, selection)

    except KeyboardInterrupt:
        print("\n\nCancelled.")
    except Exception as e:
        print(f"\nError: {e}")
        raise


if __name__ == "__main__":
    main()
