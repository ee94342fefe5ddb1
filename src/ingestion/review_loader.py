"""
Review Loader.

Reads the reviews CSV into an ordered list of Review records.
Columns are bound by header name, so column order in the file does not matter.
"""

import csv
import logging
import math
from pathlib import Path
from typing import Dict, List, Optional, Union

import pandas as pd

from src.models.review import Review
import config.settings as settings

logger = logging.getLogger(__name__)


class ReviewLoadError(Exception):
    """Raised when the reviews CSV cannot be turned into Review records."""


class ReviewLoader:
    """
    Loads reviews from a delimited text file with a header row.

    Header names map to Review attributes via settings.CSV_COLUMNS.
    Leading whitespace is trimmed from header names and values.
    Empty text cells become None; empty numeric cells become 0.
    """

    def __init__(self, csv_path: Union[str, Path]):
        """
        Initialize review loader.

        Args:
            csv_path: Path to the reviews CSV
        """
        self.csv_path = Path(csv_path)

    def load(self) -> List[Review]:
        """
        Load every review in file order.

        Returns:
            List of Review objects (empty if the file only has a header)

        Raises:
            ReviewLoadError: If the file is missing or unreadable, the header
                lacks a required column, a row has more or fewer fields
                than the header, or a row has a bad id or price
        """
        self._check_field_counts()
        df = self._read_frame()
        self._check_header(df.columns)

        reviews = []
        for row_number, row in enumerate(df.to_dict("records"), start=1):
            reviews.append(self._to_review(row, row_number))

        logger.info(f"Loaded {len(reviews)} reviews from {self.csv_path}")
        return reviews

    def _read_frame(self) -> pd.DataFrame:
        """Read the raw CSV with every column kept as text."""
        try:
            df = pd.read_csv(
                self.csv_path,
                dtype=str,
                index_col=False,
                keep_default_na=False,
                na_values=[""],
                skipinitialspace=True,
            )
        except FileNotFoundError as e:
            logger.error(f"Reviews file not found: {self.csv_path}")
            raise ReviewLoadError(f"Reviews file not found: {self.csv_path}") from e
        except pd.errors.EmptyDataError as e:
            logger.error(f"Reviews file is empty: {self.csv_path}")
            raise ReviewLoadError(f"Reviews file is empty: {self.csv_path}") from e
        except (pd.errors.ParserError, UnicodeDecodeError, OSError) as e:
            logger.error(f"Failed to read {self.csv_path}: {e}")
            raise ReviewLoadError(f"Failed to read {self.csv_path}: {e}") from e

        df.columns = [str(column).lstrip() for column in df.columns]
        return df

    def _check_header(self, columns) -> None:
        missing = [name for name in settings.CSV_COLUMNS if name not in columns]
        if missing:
            logger.error(f"{self.csv_path} is missing columns: {missing}")
            raise ReviewLoadError(
                f"{self.csv_path}: header is missing required columns {missing}"
            )

    def _check_field_counts(self) -> None:
        """
        Reject data rows whose field count differs from the header's.

        pandas pads short rows with empty cells, so fields are counted
        on the raw rows. Blank lines are skipped, as pandas does.
        """
        try:
            with open(self.csv_path, newline="", encoding="utf-8") as f:
                rows = csv.reader(f, skipinitialspace=True)
                header = next(rows, [])
                row_number = 0
                for fields in rows:
                    if not fields:
                        continue
                    row_number += 1
                    if len(fields) != len(header):
                        raise self._row_error(
                            row_number,
                            f"expected {len(header)} fields, found {len(fields)}"
                        )
        except FileNotFoundError as e:
            logger.error(f"Reviews file not found: {self.csv_path}")
            raise ReviewLoadError(f"Reviews file not found: {self.csv_path}") from e
        except (csv.Error, UnicodeDecodeError, OSError) as e:
            logger.error(f"Failed to read {self.csv_path}: {e}")
            raise ReviewLoadError(f"Failed to read {self.csv_path}: {e}") from e

    def _to_review(self, row: Dict, row_number: int) -> Review:
        """
        Convert one CSV row to a Review.

        Args:
            row: Column name -> raw cell text (NaN for empty cells)
            row_number: 1-based data row, used in error messages

        Returns:
            Review built from the row
        """
        values = {
            attribute: _cell_text(row.get(column))
            for column, attribute in settings.CSV_COLUMNS.items()
        }

        try:
            review_id = int(values["review_id"]) if values["review_id"] is not None else 0
        except ValueError as e:
            raise self._row_error(
                row_number, f"reviewId '{values['review_id']}' is not an integer"
            ) from e

        try:
            price = float(values["price"]) if values["price"] is not None else 0.0
        except ValueError as e:
            raise self._row_error(
                row_number, f"price '{values['price']}' is not a number"
            ) from e

        if not math.isfinite(price):
            raise self._row_error(row_number, f"price '{values['price']}' is not a number")

        try:
            return Review(
                review_id=review_id,
                title=values["title"],
                category=values["category"],
                product_id=values["product_id"],
                price=price,
            )
        except ValueError as e:
            raise self._row_error(row_number, str(e)) from e

    def _row_error(self, row_number: int, message: str) -> ReviewLoadError:
        logger.error(f"{self.csv_path} row {row_number}: {message}")
        return ReviewLoadError(f"{self.csv_path} row {row_number}: {message}")


def _cell_text(value) -> Optional[str]:
    """Return trimmed cell text, or None for an empty cell."""
    if value is None or pd.isna(value):
        return None
    text = str(value).lstrip()
    return text if text else None


def load_reviews(csv_path: Union[str, Path]) -> List[Review]:
    """Shortcut for ReviewLoader(csv_path).load()."""
    return ReviewLoader(csv_path).load()
