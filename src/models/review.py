"""
Review data model.

Represents one product review record loaded from the reviews CSV.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Review:
    """
    A single product review.
    Immutable once loaded; queries only ever read it.
    """
    review_id: int  # Identifier from the reviewId column
    title: Optional[str]  # None when the CSV cell is empty
    category: Optional[str]  # e.g. "Tech", "Home"
    product_id: Optional[str]  # Shared by reviews of the same product
    price: float  # Plain decimal, never negative

    def __post_init__(self):
        # Validate price
        if self.price < 0:
            raise ValueError(f"Invalid price: {self.price}. Must be >= 0")

    def __str__(self) -> str:
        # Absent text prints as null, matching the report format
        product_id = "null" if self.product_id is None else self.product_id
        title = "null" if self.title is None else self.title
        return (
            f"Review{{id={self.review_id}, product='{product_id}', "
            f"price={self.price}, title='{title}'}}"
        )
