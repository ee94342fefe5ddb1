"""
Configuration settings for Review Reports.

Centralized configuration for the loader, the fixed reports and logging.
"""

from pathlib import Path

# Project paths
PROJECT_ROOT = Path(__file__).parent.parent
DATA_ROOT = PROJECT_ROOT / "src" / "data"
DEFAULT_REVIEWS_CSV = DATA_ROOT / "reviews.csv"

# CSV header name -> Review attribute
CSV_COLUMNS = {
    "reviewId": "review_id",
    "title": "title",
    "category": "category",
    "productId": "product_id",
    "price": "price",
}

# Price range report (inclusive on both ends)
PRICE_RANGE_MIN = 20.0
PRICE_RANGE_MAX = 100.0

# Keyword report
TITLE_KEYWORD = "great"

# Category reports
TECH_CATEGORY = "Tech"
TECH_MIN_PRICE_EXCLUSIVE = 50.0
HOME_CATEGORY = "Home"
HOME_MAX_PRICE_EXCLUSIVE = 100.0

# Logging
LOG_LEVEL = "INFO"  # DEBUG, INFO, WARNING, ERROR
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_FILE = "review_reports.log"
