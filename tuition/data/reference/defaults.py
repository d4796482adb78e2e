"""
Estimator Defaults

Initial selection shown before the user changes anything, and display
conventions for formatted amounts.
"""

DEFAULT_RESIDENCY = "resident"
DEFAULT_HOURS = 15
DEFAULT_HOUSING = "home"
DEFAULT_TERM = "fallspring"
DEFAULT_HALL = "Lucio Hall (Co-ed)"

# Credit-hour range offered by the published tables
MIN_HOURS = 1
MAX_HOURS = 21

# Display
CURRENCY_SYMBOL = "$"
THOUSANDS_SEPARATOR = ","
NOT_AVAILABLE = "N/A"
