"""
Transportation

Estimated travel costs from the ancillary cost table. Indirect.
"""

from shared.components import CostComponent


class Transportation(CostComponent):
    name = "transportation"
    label = "Transportation"
