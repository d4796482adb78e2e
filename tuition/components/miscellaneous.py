"""
Miscellaneous

Estimated personal expenses from the ancillary cost table. Indirect.
"""

from shared.components import CostComponent


class Miscellaneous(CostComponent):
    name = "miscellaneous"
    label = "Miscellaneous"
