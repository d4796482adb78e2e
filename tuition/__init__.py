"""
Cost of Attendance Estimator

Estimates tuition, fees and living costs for a level of study, residency,
housing option, term and credit-hour load, from published rate tables.

Usage:
    from tuition import Selection, load_repository, quote, format_quote

    repository = load_repository()
    result = quote(Selection(level="undergraduate", hours=15), repository)
    breakdown = format_quote(result)
"""

from .version import VERSION
from .models import (
    Level,
    Residency,
    Housing,
    Term,
    Selection,
    Quote,
    Incomplete,
)
from .repository import RateDataError, RateRepository, load_repository
from .calculate_costs import quote, quote_selections
from .formatting import format_amount, format_quote

__all__ = [
    "VERSION",
    "Level",
    "Residency",
    "Housing",
    "Term",
    "Selection",
    "Quote",
    "Incomplete",
    "RateDataError",
    "RateRepository",
    "load_repository",
    "quote",
    "quote_selections",
    "format_amount",
    "format_quote",
]
