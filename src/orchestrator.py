"""
Report Orchestrator.

Loads the reviews once and runs the fixed report set through the query layer.
"""

import logging
import sys
from pathlib import Path
from typing import List, Optional, TextIO, Tuple, Union

from src.ingestion.review_loader import ReviewLoader
from src.models.review import Review
from src.queries import review_queries
import config.settings as settings

logger = logging.getLogger(__name__)

Section = Tuple[str, List[str]]


def _text(value: Optional[str]) -> str:
    return "null" if value is None else value


class ReportOrchestrator:
    """
    Runs the batch report.

    Steps:
    1. Load reviews → 2. Build report sections → 3. Write them to a stream
    """

    def __init__(
        self,
        csv_path: Union[str, Path] = settings.DEFAULT_REVIEWS_CSV,
        include_category_reports: bool = False
    ):
        """
        Initialize report orchestrator.

        Args:
            csv_path: Reviews CSV to load
            include_category_reports: Also run the Tech and Home category reports
        """
        self.loader = ReviewLoader(csv_path)
        self.include_category_reports = include_category_reports

    def run(self, stream: Optional[TextIO] = None) -> List[Review]:
        """
        Load reviews and write every report section.

        Args:
            stream: Output stream (defaults to sys.stdout)

        Returns:
            The loaded reviews

        Raises:
            ReviewLoadError: If loading fails; nothing is written in that case
        """
        stream = stream or sys.stdout

        logger.info(f"Loading reviews from {self.loader.csv_path}")
        reviews = self.loader.load()

        self.render(reviews, stream)
        logger.info("Reports written")
        return reviews

    def build_sections(self, reviews: List[Review]) -> List[Section]:
        """
        Build the report sections for a loaded review list.

        Returns:
            List of (heading, lines) pairs in print order
        """
        price_range = review_queries.filter_by_price_range(
            reviews, settings.PRICE_RANGE_MIN, settings.PRICE_RANGE_MAX
        )
        counts = review_queries.count_by_product_id(reviews)
        keyword_matches = review_queries.find_by_keyword_in_title(
            reviews, settings.TITLE_KEYWORD
        )

        sections = [
            (
                f"Reviews with price between {settings.PRICE_RANGE_MIN:g} "
                f"and {settings.PRICE_RANGE_MAX:g}",
                [str(r) for r in price_range]
            ),
            (
                "Count by Product ID",
                [f"{_text(product_id)}: {count} reviews" for product_id, count in counts.items()]
            ),
            (
                f"Reviews containing '{settings.TITLE_KEYWORD}'",
                [str(r) for r in keyword_matches]
            ),
        ]

        if self.include_category_reports:
            tech_titles = review_queries.filter_by_category_and_min_price_exclusive(
                reviews, settings.TECH_CATEGORY, settings.TECH_MIN_PRICE_EXCLUSIVE
            )
            home_ids = review_queries.sorted_product_ids_by_category_under_price(
                reviews, settings.HOME_CATEGORY, settings.HOME_MAX_PRICE_EXCLUSIVE
            )
            sections.append((
                f"{settings.TECH_CATEGORY} titles over ${settings.TECH_MIN_PRICE_EXCLUSIVE:g}",
                tech_titles
            ))
            sections.append((
                f"{settings.HOME_CATEGORY} product IDs under "
                f"${settings.HOME_MAX_PRICE_EXCLUSIVE:g} (by price)",
                [_text(product_id) for product_id in home_ids]
            ))

        return sections

    def render(self, reviews: List[Review], stream: TextIO) -> None:
        """Write the loaded set followed by every report section."""
        print("Loaded Reviews:", file=stream)
        for review in reviews:
            print(review, file=stream)

        for heading, lines in self.build_sections(reviews):
            print(f"\n--- {heading} ---", file=stream)
            for line in lines:
                print(line, file=stream)
