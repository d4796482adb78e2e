"""
Tuition and Fees

Per-semester total from the tuition table, scaled to the selected term.
Always paid to the institution.
"""

from shared.components import CostComponent


class TuitionAndFees(CostComponent):
    """Tuition and required fees for the selected hour count."""

    # Identity
    name = "tuition_total"
    label = "Tuition & Fees"

    # Classification
    always_direct = True
