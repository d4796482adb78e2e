"""
Books

Books and supplies from the ancillary cost table. The column depends on
level of study (undergraduate books / graduate books). Indirect.
"""

from shared.components import CostComponent


class Books(CostComponent):
    name = "books"
    label = "Books"
