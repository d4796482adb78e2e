"""
Shared fixtures: small in-memory rate tables with mixed-case headers and
comma-formatted amounts, as the published CSVs have them.
"""

import pytest
import polars as pl

from tuition.repository import RateRepository


@pytest.fixture
def tuition_tables():
    """Tuition tables keyed by (level, residency)."""
    return {
        ("undergraduate", "resident"): pl.DataFrame({
            "Hours": ["12", "15"],
            "Tuition": ["2,000.00", "2,400.00"],
            "Fees": ["500.00", "600.00"],
            "Total": ["2,500.00", "3,000.00"],
        }),
        ("undergraduate", "nonresident"): pl.DataFrame({
            "Hours": ["15"],
            "Tuition": ["8,000.00"],
            "Fees": ["1,000.00"],
            "Total": ["9,000.00"],
        }),
        ("graduate", "resident"): pl.DataFrame({
            "Hours": ["9"],
            "Tuition": ["3,200.50"],
            "Fees": ["799.25"],
            "Total": ["3,999.75"],
        }),
        ("graduate", "nonresident"): pl.DataFrame({
            "Hours": ["9"],
            "Tuition": ["7,000.00"],
            "Fees": ["800.00"],
            "Total": ["7,800.00"],
        }),
    }


@pytest.fixture
def additional_costs():
    return pl.DataFrame({
        "Housing Option": ["home", "dorm", "off campus"],
        "Food and Housing": ["2,000.00", "9,999.00", "6,000.00"],
        "Transportation": ["500.00", "500.00", "700.00"],
        "Miscellaneous": ["300.00", "300.00", "300.00"],
        "Undergraduate Books": ["400.00", "400.00", "400.00"],
        "Graduate Books": ["350.00", "350.00", "350.00"],
    })


@pytest.fixture
def residence_halls():
    return pl.DataFrame({
        "Residence Hall": ["Lucio Hall (Co-ed)", "Martin Hall"],
        "1 Suite": ["3,100.00", "2,900.00"],
        "2 Suite": ["2,500.00", "2,200.00"],
    })


@pytest.fixture
def meal_plans():
    # "none" carries a rate on purpose: the sentinel must still cost 0
    return pl.DataFrame({
        "Meal Plan": ["Plan A", "Plan B", "none"],
        "Rate": ["1,200.00", "900.00", "5,000.00"],
    })


@pytest.fixture
def repository(tuition_tables, additional_costs, residence_halls, meal_plans):
    return RateRepository(
        tuition=tuition_tables,
        additional_costs=additional_costs,
        residence_halls=residence_halls,
        meal_plans=meal_plans,
    )
