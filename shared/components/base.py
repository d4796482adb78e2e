"""
Cost Component Base Class

Shared base class for the lines that make up a cost-of-attendance estimate.
"""

from abc import ABC


# =============================================================================
# BASE CLASS
# =============================================================================

class CostComponent(ABC):
    """
    Base class for all cost components.

    Attributes:
        IDENTITY
            name            - Quote field holding the amount (e.g., "books")
            label           - Display label (e.g., "Books")

        CLASSIFICATION
            always_direct   - True if always paid to the institution
            direct_housing  - Housing options for which the cost is direct
                              (e.g., ("dorm",) for on-campus room and board)
    """

    # -------------------------------------------------------------------------
    # IDENTITY
    # -------------------------------------------------------------------------
    name: str
    label: str

    # -------------------------------------------------------------------------
    # CLASSIFICATION
    # -------------------------------------------------------------------------
    always_direct: bool = False
    direct_housing: tuple[str, ...] = ()

    # -------------------------------------------------------------------------
    # METHODS
    # -------------------------------------------------------------------------

    @classmethod
    def is_direct(cls, housing: str) -> bool:
        """True if the cost is paid directly to the institution for this housing option."""
        return cls.always_direct or housing in cls.direct_housing

    @classmethod
    def is_indirect(cls, housing: str) -> bool:
        return not cls.is_direct(housing)
