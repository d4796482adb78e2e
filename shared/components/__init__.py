"""
Shared Cost Components

Base class for classified cost-of-attendance lines.
"""

from .base import CostComponent

__all__ = [
    "CostComponent",
]
