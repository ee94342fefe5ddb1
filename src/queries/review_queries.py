"""
Review queries.

Pure filter, aggregate and projection functions over a loaded list of reviews.
None of them mutate the input; each returns a new list or dict.
"""

import logging
from collections import Counter
from typing import Dict, List, Optional, Sequence

from src.models.review import Review

logger = logging.getLogger(__name__)


def _same_text(left: Optional[str], right: str) -> bool:
    """Case-insensitive equality; None never matches."""
    return left is not None and left.casefold() == right.casefold()


def filter_by_price_range(
    reviews: Sequence[Review],
    min_price: float,
    max_price: float
) -> List[Review]:
    """
    Keep reviews priced within [min_price, max_price], inclusive on both ends.

    An impossible range (min_price > max_price) simply matches nothing.

    Args:
        reviews: Loaded reviews
        min_price: Lower bound (inclusive)
        max_price: Upper bound (inclusive)

    Returns:
        Matching reviews in their original order
    """
    result = [r for r in reviews if min_price <= r.price <= max_price]
    logger.debug(f"Price range [{min_price}, {max_price}]: {len(result)}/{len(reviews)} reviews")
    return result


def count_by_product_id(reviews: Sequence[Review]) -> Dict[Optional[str], int]:
    """
    Count reviews per product ID.

    Returns:
        Dict mapping each distinct product ID to its number of reviews.
        Iteration order is not guaranteed.
    """
    counts = dict(Counter(r.product_id for r in reviews))
    logger.debug(f"Counted {len(reviews)} reviews across {len(counts)} products")
    return counts


def find_by_keyword_in_title(reviews: Sequence[Review], keyword: str) -> List[Review]:
    """
    Find reviews whose title contains keyword, ignoring case.

    Reviews without a title never match. An empty keyword matches
    every review that has a title.

    Args:
        reviews: Loaded reviews
        keyword: Substring to look for

    Returns:
        Matching reviews in their original order
    """
    needle = keyword.casefold()
    result = [
        r for r in reviews
        if r.title is not None and needle in r.title.casefold()
    ]
    logger.debug(f"Keyword '{keyword}': {len(result)}/{len(reviews)} reviews")
    return result


def filter_by_category_and_min_price_exclusive(
    reviews: Sequence[Review],
    category: str,
    min_price_exclusive: float
) -> List[str]:
    """
    Upper-cased titles of reviews in a category priced above a threshold.

    Args:
        reviews: Loaded reviews
        category: Category to match, case-insensitively
        min_price_exclusive: Price must be strictly greater than this

    Returns:
        Upper-cased titles in original order; reviews without a title are skipped
    """
    titles = [
        r.title.upper()
        for r in reviews
        if _same_text(r.category, category)
        and r.price > min_price_exclusive
        and r.title is not None
    ]
    logger.debug(
        f"Category '{category}' over {min_price_exclusive}: {len(titles)} titles"
    )
    return titles


def sorted_product_ids_by_category_under_price(
    reviews: Sequence[Review],
    category: str,
    max_price_exclusive: float
) -> List[Optional[str]]:
    """
    Product IDs of reviews in a category priced below a threshold, cheapest first.

    The sort is stable, so reviews with equal prices keep their input order.

    Args:
        reviews: Loaded reviews
        category: Category to match, case-insensitively
        max_price_exclusive: Price must be strictly less than this

    Returns:
        Product IDs ordered by ascending price (empty list if nothing matches)
    """
    selected = [
        r for r in reviews
        if _same_text(r.category, category) and r.price < max_price_exclusive
    ]
    product_ids = [r.product_id for r in sorted(selected, key=lambda r: r.price)]
    logger.debug(
        f"Category '{category}' under {max_price_exclusive}: {len(product_ids)} products"
    )
    return product_ids


def get_tech_titles_over_50_dollars(reviews: Sequence[Review]) -> List[str]:
    """Upper-cased titles of Tech reviews priced over $50."""
    return filter_by_category_and_min_price_exclusive(reviews, "Tech", 50)


def get_home_product_ids_under_100(reviews: Sequence[Review]) -> List[Optional[str]]:
    """Product IDs of Home reviews under $100, sorted by price."""
    return sorted_product_ids_by_category_under_price(reviews, "Home", 100)
