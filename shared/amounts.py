"""
Amount Parsing

Single entry point for turning rate-table cells into exact decimal amounts.
Shared by repository ingestion and by the quote formatter.

Source tables carry amounts as text with thousands separators and the
occasional currency symbol ("3,000.00", "$1,200"). Anything that still
cannot be read as a number is a malformed amount: it counts as zero for
that one figure and is logged, it never aborts a computation.
"""

import logging
from decimal import Decimal, InvalidOperation

logger = logging.getLogger(__name__)

ZERO = Decimal("0")

# Characters stripped before parsing
_IGNORED_CHARS = (",", "$", " ")


def parse_amount(value, field: str | None = None) -> Decimal:
    """
    Parse a rate-table cell into a Decimal.

    Args:
        value: Cell value (str, int, float, Decimal or None)
        field: Column name, used only for log messages

    Returns:
        Exact decimal amount, or ZERO if the value is empty or malformed
    """
    if value is None:
        return ZERO

    if isinstance(value, bool):
        logger.warning("Malformed amount %r in %s, using 0", value, field or "value")
        return ZERO

    if isinstance(value, Decimal):
        amount = value
    elif isinstance(value, int):
        amount = Decimal(value)
    else:
        text = str(value).strip()
        for char in _IGNORED_CHARS:
            text = text.replace(char, "")
        if not text:
            return ZERO
        try:
            amount = Decimal(text)
        except InvalidOperation:
            logger.warning("Malformed amount %r in %s, using 0", value, field or "value")
            return ZERO

    if not amount.is_finite():
        logger.warning("Non-finite amount %r in %s, using 0", value, field or "value")
        return ZERO

    return amount


__all__ = [
    "ZERO",
    "parse_amount",
]
