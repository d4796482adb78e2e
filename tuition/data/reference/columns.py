"""
Rate Table Layout

Column and file names of the published rate tables. Headers are compared
after lowercasing, so these are all lowercase.
"""

# Tuition tables: one file per level x residency, one row per hour count
TUITION_FILE_TEMPLATE = "{level}-{residency}.csv"
HOURS_COL = "hours"
TOTAL_COL = "total"               # Authoritative per-semester total

# Ancillary costs: one row per housing option, amounts per academic year
ADDITIONAL_COSTS_FILE = "additional-costs.csv"
HOUSING_OPTION_COL = "housing option"
FOOD_AND_HOUSING_COL = "food and housing"
TRANSPORTATION_COL = "transportation"
MISCELLANEOUS_COL = "miscellaneous"
UNDERGRADUATE_BOOKS_COL = "undergraduate books"
GRADUATE_BOOKS_COL = "graduate books"

# Residence halls: per-semester rate by room configuration
RESIDENCE_HALLS_FILE = "residence-hall-rates.csv"
HALL_NAME_COL = "residence hall"
HALL_RATE_COL = "2 suite"         # Room configuration used for estimates

# Meal plans: per-semester rate
MEAL_PLANS_FILE = "meal-plan-rates.csv"
MEAL_PLAN_COL = "meal plan"
MEAL_RATE_COL = "rate"
NO_MEAL_PLAN = "none"             # Sentinel, always zero cost
